"""Validation for the add-school form.

Every rule runs on trimmed values before any network call is made. Each
field reports at most one error: a missing value only reports that it is
required, never that it is also too short.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from schooldir.domain.entities.school import ImageAttachment
from schooldir.domain.exceptions import FieldValidationError

CONTACT_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for one text field."""

    field: str
    required_message: str
    min_length: int = 0
    min_length_message: str = ""
    pattern: re.Pattern[str] | None = None
    pattern_message: str = ""

    def check(self, value: str) -> FieldValidationError | None:
        if not value:
            return FieldValidationError(self.field, self.required_message, "required")
        if len(value) < self.min_length:
            return FieldValidationError(self.field, self.min_length_message, "min_length")
        if self.pattern is not None and not self.pattern.fullmatch(value):
            return FieldValidationError(self.field, self.pattern_message, "invalid_format")
        return None


SCHOOL_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", "School name is required", 3, "Name must be at least 3 characters"),
    FieldRule("address", "Address is required", 10, "Address must be at least 10 characters"),
    FieldRule("city", "City is required", 2, "City must be at least 2 characters"),
    FieldRule("state", "State is required", 2, "State must be at least 2 characters"),
    FieldRule(
        "contact",
        "Contact number is required",
        pattern=CONTACT_PATTERN,
        pattern_message="Please enter a valid 10-digit phone number",
    ),
    FieldRule(
        "email_id",
        "Email is required",
        pattern=EMAIL_PATTERN,
        pattern_message="Please enter a valid email address",
    ),
)


class SchoolValidator:
    """Validator for add-school form submissions."""

    rules: tuple[FieldRule, ...] = SCHOOL_RULES

    @classmethod
    def validate(cls, values: Mapping[str, str | None]) -> list[FieldValidationError]:
        """Validate raw form values.

        Args:
            values: Raw form values keyed by field name. Missing keys count as empty.

        Returns:
            Errors in form field order, empty when the values are valid.
        """
        errors = []
        for rule in cls.rules:
            error = rule.check((values.get(rule.field) or "").strip())
            if error is not None:
                errors.append(error)
        return errors

    @classmethod
    def validate_image(
        cls,
        image: ImageAttachment,
        max_size: int,
        allowed_types: Sequence[str],
    ) -> FieldValidationError | None:
        """Check an attached logo's type and size before it is uploaded."""
        if image.content_type not in allowed_types:
            return FieldValidationError("image", "Please select an image file", "invalid_type")
        if image.size > max_size:
            max_size_mb = max_size / (1024 * 1024)
            return FieldValidationError(
                "image",
                f"Image must be {max_size_mb:.1f}MB or smaller",
                "too_large",
            )
        return None
