from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int, *, detail: str | None = None, **extra: Any
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        self.extra = extra
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400, **kwargs: Any) -> None:
        super().__init__(message, status_code, **kwargs)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 401, **kwargs)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 403, **kwargs)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 404, **kwargs)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, 409, **kwargs)
