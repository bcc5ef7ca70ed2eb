"""Pydantic schemas for SchoolDir."""

from schooldir.infrastructure.api.schemas.school_schemas import (
    CollaboratorErrorResponse,
    ImageUploadResponse,
    SchoolResponse,
)

__all__ = [
    "CollaboratorErrorResponse",
    "ImageUploadResponse",
    "SchoolResponse",
]
