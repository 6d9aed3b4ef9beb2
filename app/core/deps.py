from fastapi import Request

from app.database.assignment_repo import AssignmentRepo
from app.database.submission_repo import SubmissionRepo
from app.database.testimonial_repo import TestimonialRepo
from app.services.auth_service import AuthService


def _from_state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialised")
    return value


def get_assignment_repo(request: Request) -> AssignmentRepo:
    return _from_state(request, "assignment_repo")


def get_submission_repo(request: Request) -> SubmissionRepo:
    return _from_state(request, "submission_repo")


def get_testimonial_repo(request: Request) -> TestimonialRepo:
    return _from_state(request, "testimonial_repo")


def get_auth_service(request: Request) -> AuthService:
    return _from_state(request, "auth_service")
