"""Domain error taxonomy raised by services and mapped to HTTP responses in main."""


class AppError(Exception):
    """Base class for errors that map onto a fixed HTTP status."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """A field failed a length/format/range rule (400)."""

    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    @property
    def errors(self) -> list[dict[str, str]]:
        return [{"field": self.field, "message": self.message}]


class AuthenticationError(AppError):
    """Bad credentials or a missing/expired token (401)."""

    status_code = 401


class AuthorizationError(AppError):
    """Authenticated, but the role lacks permission (403)."""

    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation, e.g. duplicate email (409)."""

    status_code = 409
