"""Pydantic schemas for the school directory collaborator's JSON."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schooldir.domain.entities.school import School


class SchoolResponse(BaseModel):
    """A School record as returned by the list and create endpoints."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Identifier assigned by the directory")
    name: str
    address: str
    city: str
    state: str
    contact: str = Field(..., description="10-digit contact number")
    email_id: str
    image: str = Field(default="", description="Stored logo URL or path")
    created_at: datetime | None = None

    @field_validator("contact", mode="before")
    @classmethod
    def coerce_contact(cls, v: Any) -> Any:
        """Numeric contact columns come back as JSON numbers."""
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("image", mode="before")
    @classmethod
    def coerce_image(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_entity(self) -> School:
        return School(**self.model_dump())


class ImageUploadResponse(BaseModel):
    """Successful response from the image upload endpoint."""

    model_config = ConfigDict(extra="ignore")

    image_url: str = Field(..., alias="imageUrl", min_length=1)


class CollaboratorErrorResponse(BaseModel):
    """Error body returned by either collaborator on a non-success status."""

    model_config = ConfigDict(extra="ignore")

    error: str | None = None
