"""Errors raised by the survey update path.

Each error carries the HTTP status and the caller-facing message it maps to.
"""


class SurveyUpdateError(Exception):
    status_code: int = 500
    message: str = "Failed to update survey"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MalformedRequest(SurveyUpdateError):
    status_code = 400
    message = "Invalid JSON"


class MissingIdentifier(SurveyUpdateError):
    status_code = 400
    message = "Survey ID is required"


class Forbidden(SurveyUpdateError):
    status_code = 403
    message = "Forbidden"


class NotFound(SurveyUpdateError):
    status_code = 404
    message = "Survey not found"


class StorageError(SurveyUpdateError):
    status_code = 500
    message = "Failed to update survey"


class StorageUnavailable(Exception):
    """Raised by a collection when the backing store cannot complete a call."""
