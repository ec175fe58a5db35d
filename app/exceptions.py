from typing import Any, Mapping, Optional


class DailyDietError(Exception):
    """Base class for errors raised by services and request guards.

    Attributes:
        message: human-readable message, sent to the client as ``{"error": message}``
        details: optional mapping with extra context, only logged
        code: optional machine-readable error code
        http_status: HTTP status code the exception handlers respond with
    """

    http_status = 500
    default_message = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(DailyDietError):
    """Raised when a meal does not exist or is not owned by the caller.

    Both cases carry the same message so the response never reveals
    whether another user owns the id.
    """

    http_status = 404
    default_message = "meal not found"


class ConflictError(DailyDietError):
    """Raised when a unique value is already taken (e.g. a registered email).

    http_status is 400 to match the public API contract.
    """

    http_status = 400
    default_message = "Conflict"


class UnauthorizedError(DailyDietError):
    """Raised when the session cookie is missing or matches no user.

    The handler answers 401 with an empty body.
    """

    http_status = 401
    default_message = "unauthorized"
