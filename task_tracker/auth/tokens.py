from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from pydantic import BaseModel, Field

from task_tracker.config.settings import settings
from task_tracker.core.exceptions import AuthenticationError


class CurrentUser(BaseModel):
    """Authenticated caller resolved from a bearer token."""

    id: str = Field(..., min_length=1)
    email: Optional[str] = None


class TokenManager:
    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
        leeway_seconds: Optional[int] = None,
    ):
        self.jwt_secret = secret or settings.JWT_SECRET
        self.jwt_algorithm = algorithm or settings.JWT_ALGORITHM
        self.token_expire_minutes = expire_minutes if expire_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
        self.leeway_seconds = leeway_seconds if leeway_seconds is not None else settings.JWT_LEEWAY_SECONDS

    def create_token(self, user_id: str, email: Optional[str] = None, expires_in: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_in if expires_in is not None else timedelta(minutes=self.token_expire_minutes))
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "exp": expire,
            "iat": now,
        }
        return jwt.encode(to_encode, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                leeway=timedelta(seconds=self.leeway_seconds),
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

    def resolve_user(self, token: str) -> CurrentUser:
        payload = self.verify_token(token)
        # Older tokens carry the user id as `id` instead of `sub`
        user_id = payload.get("sub") or payload.get("id")
        if not user_id:
            raise AuthenticationError("Invalid token")
        return CurrentUser(id=str(user_id), email=payload.get("email"))
