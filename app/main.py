# app/main.py
from contextlib import asynccontextmanager
import logging
import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from app.core.config import Settings, settings as default_settings
from app.core.errors import ApiError, ErrorCode
from app.database.mongo_assignment import MongoAssignmentRepository
from app.database.mongo_submission import MongoSubmissionRepository
from app.database.mongo_testimonial import MongoTestimonialRepository
from app.services.auth_service import AuthService
from app.routers.v1 import assignment, auth, health, submission, testimonial

logging.basicConfig(
    level=default_settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


def _error_body(code: ErrorCode, message: str, **extra) -> dict:
    return {"code": code.value, "message": message, **extra}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=_error_body(
                ErrorCode.VALIDATION_ERROR,
                "Request validation failed",
                details=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(PyMongoError)
    async def persistence_error_handler(request: Request, exc: PyMongoError):
        logger.exception("Persistence failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body(ErrorCode.INTERNAL_FAILURE, "Database operation failed"),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body(ErrorCode.INTERNAL_FAILURE, "Internal failure"),
        )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    cfg = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = AsyncIOMotorClient(cfg.mongo_uri, uuidRepresentation="standard")
        db = client[cfg.mongo_db_name]

        assignment_repo = MongoAssignmentRepository(db)
        submission_repo = MongoSubmissionRepository(db)
        await assignment_repo.ensure_indexes()
        await submission_repo.ensure_indexes()

        # repos available to the routes
        app.state.assignment_repo = assignment_repo
        app.state.submission_repo = submission_repo
        app.state.testimonial_repo = MongoTestimonialRepository(db)
        logger.info("Connected to MongoDB database %s", cfg.mongo_db_name)

        try:
            yield
        finally:
            client.close()
            logger.info("MongoDB connection closed")

    app = FastAPI(
        title="CollaborIQ Server",
        description="Assignments, peer-reviewed submissions and testimonials",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.auth_service = AuthService(cfg)

    # allow_credentials needs explicit origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router,      tags=["health"])
    app.include_router(auth.router,        tags=["auth"])
    app.include_router(assignment.router,  tags=["assignments"])
    app.include_router(submission.router,  tags=["submissions"])
    app.include_router(testimonial.router, tags=["testimonials"])
    return app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=default_settings.port)
