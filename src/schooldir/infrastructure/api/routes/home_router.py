"""Landing page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from schooldir.core.logging import get_logger
from schooldir.domain.exceptions import SchoolDirectoryError
from schooldir.infrastructure.api.dependencies import AppSettings, DirectoryClient
from schooldir.infrastructure.web.navigation import HOME_PATH
from schooldir.infrastructure.web.templating import render

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])


@router.get(HOME_PATH, response_class=HTMLResponse, summary="Landing page")
async def home(request: Request, client: DirectoryClient, settings: AppSettings) -> HTMLResponse:
    """Landing page with the number of registered schools.

    The count falls back to 0 if the directory cannot be reached.
    """
    try:
        total_schools = len(await client.list_schools())
    except SchoolDirectoryError as e:
        logger.warning("Could not load school count", step=e.step, error=e.message)
        total_schools = 0

    return render(request, "home.html", settings, total_schools=total_schools)
