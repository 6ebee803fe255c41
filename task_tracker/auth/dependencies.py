import logging
from typing import Optional

from fastapi import Depends, Header

from task_tracker.auth.tokens import CurrentUser, TokenManager
from task_tracker.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def get_token_manager() -> TokenManager:
    return TokenManager()


async def get_current_user(
    authorization: Optional[str] = Header(None),
    token_manager: TokenManager = Depends(get_token_manager),
) -> CurrentUser:
    """
    Resolve the caller from the Authorization header.

    Accepts both `Bearer <token>` and a bare token.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid or expired
    """
    if not authorization or not authorization.strip():
        raise AuthenticationError("Token not found")

    token = authorization.strip()
    if token.lower().startswith("bearer "):
        token = token[len("bearer "):].strip()

    user = token_manager.resolve_user(token)
    logger.debug(f"Authenticated user {user.id}")
    return user
