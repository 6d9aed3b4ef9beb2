from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.core.deps import get_auth_service
from app.schemas.auth import TokenRequest
from app.services.auth_service import AuthService

router = APIRouter()

AuthDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/jwt")
async def issue_token_endpoint(body: TokenRequest, response: Response, auth: AuthDep):
    token = auth.issue_token(body.email)
    auth.set_cookie(response, token)
    return {"success": True}


@router.post("/logout")
async def logout_endpoint(response: Response, auth: AuthDep):
    auth.clear_cookie(response)
    return {"success": True}
