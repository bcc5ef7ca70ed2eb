"""Domain entities for SchoolDir.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from schooldir.domain.entities.school import (
    REQUIRED_FIELDS,
    ImageAttachment,
    School,
    SchoolDraft,
)

__all__ = [
    "REQUIRED_FIELDS",
    "ImageAttachment",
    "School",
    "SchoolDraft",
]
