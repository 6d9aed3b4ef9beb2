import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Request, Response

from app.core.config import Settings
from app.core.errors import Unauthorized
from app.schemas.context import UserContext

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class AuthService:
    """Issues and verifies the access credential carried in the auth cookie."""

    def __init__(self, settings: Settings):
        self.secret = settings.access_token_secret
        self.ttl = timedelta(hours=settings.token_ttl_hours)
        self.cookie_name = settings.cookie_name
        self.production = settings.is_production

    def issue_token(self, email: str, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {"email": email, "iat": now, "exp": now + self.ttl}
        logger.info("Issued credential for %s", email)
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> UserContext:
        if not token:
            raise Unauthorized()
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired credential")
            raise Unauthorized()
        except jwt.InvalidTokenError as e:
            logger.info("Rejected invalid credential: %s", e)
            raise Unauthorized()

        email = claims.get("email")
        if not isinstance(email, str) or not email:
            raise Unauthorized()
        return UserContext(email=email)

    def _cookie_attrs(self) -> dict:
        # SameSite=None is only accepted together with Secure
        return {
            "httponly": True,
            "secure": self.production,
            "samesite": "none" if self.production else "strict",
        }

    def set_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(self.cookie_name, token, **self._cookie_attrs())

    def clear_cookie(self, response: Response) -> None:
        response.delete_cookie(self.cookie_name, **self._cookie_attrs())

    def extract_token(self, request: Request) -> Optional[str]:
        token = request.cookies.get(self.cookie_name)
        if token:
            return token
        header = request.headers.get("Authorization", "").strip()
        if header.lower().startswith("bearer "):
            return header.split(" ", 1)[1].strip() or None
        return None

    @staticmethod
    async def get_current_user(request: Request) -> UserContext:
        auth: AuthService = request.app.state.auth_service
        return auth.verify(auth.extract_token(request))
