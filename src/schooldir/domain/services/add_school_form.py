"""View state for the add-school form page."""

import base64
from dataclasses import dataclass, field
from typing import Literal

from schooldir.domain.entities.school import REQUIRED_FIELDS, ImageAttachment
from schooldir.domain.services.school_submission_service import SubmissionResult


def image_preview_data_url(image: ImageAttachment | None) -> str | None:
    """Build a displayable ``data:`` URL for an attached image.

    Returns None for anything that cannot be previewed; previews are
    cosmetic and never block a submission.
    """
    if image is None or not image.content or not image.content_type.startswith("image/"):
        return None
    encoded = base64.b64encode(image.content).decode("ascii")
    return f"data:{image.content_type};base64,{encoded}"


@dataclass
class AddSchoolForm:
    """Everything the add-school template needs to render."""

    values: dict[str, str] = field(default_factory=lambda: dict.fromkeys(REQUIRED_FIELDS, ""))
    errors: dict[str, str] = field(default_factory=dict)
    message: str = ""
    message_type: Literal["success", "error"] = "success"
    preview: str | None = None
    redirect_to: str | None = None
    redirect_after: float | None = None

    @classmethod
    def from_result(
        cls,
        result: SubmissionResult,
        values: dict[str, str],
        image: ImageAttachment | None = None,
        redirect_to: str | None = None,
        redirect_after: float | None = None,
    ) -> "AddSchoolForm":
        """Render state after a submission.

        A success clears the form and preview and schedules the redirect. A
        failure keeps what the user typed so they can resubmit.
        """
        if result.success:
            return cls(
                message=result.message,
                message_type="success",
                redirect_to=redirect_to,
                redirect_after=redirect_after,
            )
        return cls(
            values={key: values.get(key, "") for key in REQUIRED_FIELDS},
            errors=result.errors_by_field,
            message=result.message,
            message_type="error",
            preview=image_preview_data_url(image),
        )
