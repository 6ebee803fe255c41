"""Authentication module for JWT bearer tokens."""

from task_tracker.auth.dependencies import get_current_user
from task_tracker.auth.tokens import CurrentUser, TokenManager

__all__ = ["get_current_user", "CurrentUser", "TokenManager"]
