from typing import Any

from resumi.config.settings import Settings


class ResumiError(Exception):
    """Base exception for all resume-review errors."""

    user_message: str = "An error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)


class InvalidInputError(ResumiError):
    """Raised when the caller supplies input that can be corrected and resent."""

    user_message = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message)
        if message:
            self.user_message = message


def error_payload(exc: Exception, settings: Settings) -> dict[str, Any]:
    """Build the failure body returned to a caller.

    Only classified errors expose their user message. Internal detail is
    attached when running in development.
    """
    if isinstance(exc, ResumiError):
        message = exc.user_message
    else:
        message = "An error occurred"
    payload: dict[str, Any] = {"success": False, "message": message}
    if settings.is_development:
        detail = exc.__cause__ if exc.__cause__ is not None else exc
        payload["error"] = f"{type(detail).__name__}: {detail}"
    return payload
