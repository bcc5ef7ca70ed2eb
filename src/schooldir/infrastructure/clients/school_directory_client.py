"""HTTP client for the school directory and image upload collaborators.

Both collaborators speak JSON over HTTP. A non-success status always carries
an ``{"error": "..."}`` body that is shown to the user when present. Transport
failures are converted to NetworkError so callers never see httpx exceptions.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from schooldir.core.config import Settings, get_settings
from schooldir.core.logging import get_logger
from schooldir.domain.entities.school import ImageAttachment, School, SchoolDraft
from schooldir.domain.exceptions import CreateError, FetchError, NetworkError, UploadError
from schooldir.infrastructure.api.schemas.school_schemas import (
    CollaboratorErrorResponse,
    ImageUploadResponse,
    SchoolResponse,
)

logger = get_logger(__name__)


def error_message(response: httpx.Response) -> str | None:
    """Extract the collaborator's ``error`` text from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    try:
        return CollaboratorErrorResponse.model_validate(body).error or None
    except ValidationError:
        return None


class SchoolDirectoryClient:
    """Async client for the list, create and upload collaborator endpoints."""

    def __init__(self, http: httpx.AsyncClient, settings: Settings | None = None) -> None:
        self.http = http
        self.settings = settings or get_settings()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SchoolDirectoryClient":
        settings = settings or get_settings()
        http = httpx.AsyncClient(
            base_url=settings.directory_base_url,
            timeout=settings.request_timeout_seconds,
            headers={"Accept": "application/json"},
        )
        return cls(http, settings)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(
                "School directory request failed",
                method=method,
                url=url,
                error=str(e),
                exc_type=type(e).__name__,
            )
            raise NetworkError() from e

    async def list_schools(self) -> list[School]:
        """Fetch every registered school.

        Raises:
            FetchError: On a non-success status or a malformed body.
            NetworkError: If the request could not complete.
        """
        response = await self._request("GET", self.settings.schools_path)
        if not response.is_success:
            raise FetchError(error_message(response))

        try:
            body = response.json()
        except ValueError as e:
            raise FetchError() from e
        if not isinstance(body, list):
            raise FetchError()

        try:
            schools = [SchoolResponse.model_validate(item).to_entity() for item in body]
        except ValidationError as e:
            logger.warning("Malformed school record in list response", error=str(e))
            raise FetchError() from e

        logger.debug("Fetched schools", count=len(schools))
        return schools

    async def create_school(self, draft: SchoolDraft) -> School:
        """Create a school from a validated draft.

        When the collaborator acknowledges the create without echoing a full
        record, the draft itself is returned with whatever ``id`` came back.

        Raises:
            CreateError: On a non-success status.
            NetworkError: If the request could not complete.
        """
        response = await self._request("POST", self.settings.schools_path, json=draft.to_payload())
        if not response.is_success:
            raise CreateError(error_message(response))

        try:
            body = response.json()
        except ValueError:
            return draft.to_school()
        if not isinstance(body, dict):
            return draft.to_school()

        try:
            return SchoolResponse.model_validate(body).to_entity()
        except ValidationError:
            school_id = body.get("id")
            return draft.to_school(school_id if isinstance(school_id, int) else None)

    async def upload_image(self, image: ImageAttachment) -> str:
        """Upload a logo and return the stored image reference.

        Raises:
            UploadError: On a non-success status or a response without ``imageUrl``.
            NetworkError: If the request could not complete.
        """
        files = {
            self.settings.upload_field_name: (image.filename, image.content, image.content_type)
        }
        response = await self._request("POST", self.settings.upload_path, files=files)
        if not response.is_success:
            raise UploadError(error_message(response))

        try:
            uploaded = ImageUploadResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UploadError() from e

        logger.info("Image uploaded", filename=image.filename, size=image.size)
        return uploaded.image_url

    async def ping(self) -> bool:
        """Return True if the list endpoint answers with a success status."""
        try:
            response = await self._request("GET", self.settings.schools_path)
        except NetworkError:
            return False
        return response.is_success
