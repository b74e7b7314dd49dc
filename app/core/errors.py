"""Application error hierarchy rendered as the API error envelope.

Services raise these; the handlers registered in ``app.main`` turn them into
``{"status": false, "errors": [{"param", "message", "code"}]}`` responses.

    ApiError
    ├── InvalidInput         400  INVALID_INPUT / INVALID_EMAIL
    ├── ResourceNotFound     404  RESOURCE_NOT_FOUND
    ├── ResourceExists       409  RESOURCE_EXISTS
    ├── NotSignedIn          401  NOT_SIGNEDIN
    ├── InvalidCredentials   401  INVALID_CREDENTIALS
    ├── NotAllowed           403  NOT_ALLOWED_ACCESS
    └── InternalError        500  INTERNAL_ERROR
"""

from typing import Any


class ApiError(Exception):
    """Base class for errors that are safe to show to API clients."""

    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "Internal server error."

    def __init__(
        self,
        message: str | None = None,
        param: str | None = None,
        code: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.param = param
        if code is not None:
            self.code = code
        self.headers = headers
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the error as one entry of the envelope's ``errors`` list."""
        item: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.param is not None:
            item = {"param": self.param, **item}
        return item


class InvalidInput(ApiError):
    """Malformed or missing input."""

    status_code = 400
    code = "INVALID_INPUT"
    default_message = "Invalid input."


class ResourceNotFound(ApiError):
    """A referenced entity does not exist."""

    status_code = 404
    code = "RESOURCE_NOT_FOUND"
    default_message = "Resource not found."


class ResourceExists(ApiError):
    """The entity would duplicate an existing one."""

    status_code = 409
    code = "RESOURCE_EXISTS"
    default_message = "Resource already exists."


class NotSignedIn(ApiError):
    """Missing, invalid or expired credential."""

    status_code = 401
    code = "NOT_SIGNEDIN"
    default_message = "You need to sign in to proceed."

    def __init__(self, message: str | None = None, param: str | None = None) -> None:
        super().__init__(message, param=param, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentials(ApiError):
    """Email/password pair does not match a user."""

    status_code = 401
    code = "INVALID_CREDENTIALS"
    default_message = "The credentials you provided are invalid."


class NotAllowed(ApiError):
    """Authenticated, but not permitted to perform the action."""

    status_code = 403
    code = "NOT_ALLOWED_ACCESS"
    default_message = "You are not authorized to perform this action."


class InternalError(ApiError):
    """Unexpected failure; the message never carries internals."""
