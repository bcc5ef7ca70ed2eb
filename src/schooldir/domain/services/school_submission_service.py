"""Add-school submission flow.

A submission is a short chain of steps with early exit on the first failure:

    validate -> upload image (optional) -> build draft -> create school

A rejected upload ends the chain, so a school is never created without the
logo the user attached.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from schooldir.core.logging import get_logger
from schooldir.domain.entities.school import ImageAttachment, School, SchoolDraft
from schooldir.domain.exceptions import (
    FieldValidationError,
    SchoolDirectoryError,
    SchoolValidationError,
)
from schooldir.domain.services.school_validator import SchoolValidator
from schooldir.domain.services.submission_guard import SubmissionGuard, submission_key
from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient

logger = get_logger(__name__)

SUCCESS_MESSAGE = "School added successfully!"
IN_PROGRESS_MESSAGE = "A submission is already in progress"


@dataclass
class SubmissionResult:
    """Outcome of a single add-school submission."""

    success: bool
    message: str = ""
    school: School | None = None
    field_errors: list[FieldValidationError] = field(default_factory=list)
    conflict: bool = False

    @property
    def errors_by_field(self) -> dict[str, str]:
        return {error.field: error.message for error in self.field_errors}


class SchoolSubmissionService:
    """Validates and submits a new school through the directory collaborators.

    ``submitting`` is true while network calls are in flight. A second call to
    ``submit`` during that window is rejected rather than sending a duplicate.
    Passing a shared ``guard`` extends that to identical submissions made
    through other service instances, such as concurrent requests.
    """

    def __init__(
        self,
        client: SchoolDirectoryClient,
        max_image_size: int,
        allowed_image_types: list[str],
        guard: SubmissionGuard | None = None,
    ) -> None:
        self.client = client
        self.max_image_size = max_image_size
        self.allowed_image_types = allowed_image_types
        self.guard = guard if guard is not None else SubmissionGuard()
        self._submitting = False

    @property
    def submitting(self) -> bool:
        return self._submitting

    def prepare(
        self,
        values: Mapping[str, str | None],
        image: ImageAttachment | None = None,
    ) -> SchoolDraft:
        """Validate form values and build the draft payload.

        Raises:
            SchoolValidationError: If any field or the attached image is invalid.
        """
        errors = SchoolValidator.validate(values)
        if image is not None:
            image_error = SchoolValidator.validate_image(
                image, self.max_image_size, self.allowed_image_types
            )
            if image_error is not None:
                errors.append(image_error)
        if errors:
            raise SchoolValidationError(errors)
        return SchoolDraft.from_form(values)

    async def submit(
        self,
        values: Mapping[str, str | None],
        image: ImageAttachment | None = None,
    ) -> SubmissionResult:
        """Run the full submission chain.

        Args:
            values: Raw form values keyed by field name.
            image: Optional logo to upload before creating the school.

        Returns:
            SubmissionResult: Field errors, a user-facing failure message, or the
            created school.
        """
        if self._submitting:
            return SubmissionResult(success=False, message=IN_PROGRESS_MESSAGE, conflict=True)

        try:
            draft = self.prepare(values, image)
        except SchoolValidationError as e:
            logger.info(
                "School form rejected",
                fields=[error.field for error in e.errors],
            )
            return SubmissionResult(success=False, field_errors=e.errors)

        key = submission_key(draft, image)
        if not self.guard.acquire(key):
            logger.info("Duplicate school submission rejected", name=draft.name)
            return SubmissionResult(success=False, message=IN_PROGRESS_MESSAGE, conflict=True)

        self._submitting = True
        try:
            school = await self._send(draft, image)
        except SchoolDirectoryError as e:
            logger.warning("School submission failed", step=e.step, error=e.message)
            return SubmissionResult(success=False, message=e.message)
        finally:
            self._submitting = False
            self.guard.release(key)

        logger.info("School added", school_id=school.id, name=school.name)
        return SubmissionResult(success=True, message=SUCCESS_MESSAGE, school=school)

    async def _send(self, draft: SchoolDraft, image: ImageAttachment | None) -> School:
        image_ref = ""
        if image is not None:
            image_ref = await self.client.upload_image(image)
        return await self.client.create_school(draft.with_image(image_ref))
