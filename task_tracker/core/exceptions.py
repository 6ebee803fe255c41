from fastapi import status


class AppExceptionBase(Exception):
    """Base class for application-specific exceptions."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: str = "INTERNAL_SERVER_ERROR",
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class ValidationError(AppExceptionBase):
    """Raised when input is missing or malformed."""

    def __init__(self, message: str = "Validation failed. Please check your input."):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, code="VALIDATION_ERROR")


class NotFoundError(AppExceptionBase):
    """Raised when no matching task exists. Mapped to 400, not 404."""

    def __init__(self, message: str = "No task found.."):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, code="RESOURCE_NOT_FOUND")


class ForbiddenError(AppExceptionBase):
    """Raised when the task exists but belongs to another user."""

    def __init__(self, message: str = "You do not have permission to perform this action."):
        super().__init__(message=message, status_code=status.HTTP_403_FORBIDDEN, code="PERMISSION_DENIED")


class AuthenticationError(AppExceptionBase):
    """Raised for authentication failures."""

    def __init__(self, message: str = "Authentication failed."):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED, code="AUTHENTICATION_ERROR")


class InternalError(AppExceptionBase):
    """Raised when a store operation fails. The message is always generic."""

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, code="INTERNAL_SERVER_ERROR")
