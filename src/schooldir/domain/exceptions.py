"""Exceptions raised while talking to the school directory collaborators."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldValidationError:
    """A single form field validation failure."""

    field: str
    message: str
    code: str


class SchoolDirectoryError(Exception):
    """Base class for all school directory errors.

    ``message`` is safe to show to the user as-is.
    """

    step = "unknown"
    default_message = "An error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SchoolValidationError(SchoolDirectoryError):
    """Raised when form values fail local validation. No request was sent."""

    step = "validate"
    default_message = "Please correct the highlighted fields"

    def __init__(self, errors: list[FieldValidationError]):
        self.errors = errors
        super().__init__()


class UploadError(SchoolDirectoryError):
    """Raised when the image upload collaborator rejects the file."""

    step = "upload"
    default_message = "Failed to upload image"


class CreateError(SchoolDirectoryError):
    """Raised when the directory collaborator rejects a new school."""

    step = "create"
    default_message = "Failed to add school"


class FetchError(SchoolDirectoryError):
    """Raised when the school list cannot be loaded."""

    step = "list"
    default_message = "Failed to fetch schools"


class NetworkError(SchoolDirectoryError):
    """Raised when a request to a collaborator could not complete."""

    step = "network"
    default_message = "Network error: could not reach the school directory"
