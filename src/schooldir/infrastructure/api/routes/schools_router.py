"""School directory page.

The page itself renders immediately with placeholder cards. The browser then
requests the panel fragment once, which fetches the list and renders every
loaded school. Search and state filtering happen in the page against those
cards without another request; only Refresh and Try Again request the panel
again.
"""

from urllib.parse import urlencode

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from schooldir.core.logging import LoggingContext
from schooldir.domain.services.directory_listing import PLACEHOLDER_COUNT, DirectoryListing
from schooldir.infrastructure.api.dependencies import AppSettings, DirectoryClient
from schooldir.infrastructure.web.navigation import ADD_SCHOOL_PATH, SHOW_SCHOOLS_PATH
from schooldir.infrastructure.web.templating import render

router = APIRouter(tags=["pages"])

PANEL_PATH = f"{SHOW_SCHOOLS_PATH}/panel"


def _query(search: str, state: str) -> str:
    params = {key: value for key, value in (("q", search), ("state", state)) if value}
    return f"?{urlencode(params)}" if params else ""


@router.get(SHOW_SCHOOLS_PATH, response_class=HTMLResponse, summary="School directory")
async def show_schools(
    request: Request,
    settings: AppSettings,
    q: str = Query("", description="Search text"),
    state: str = Query("", description="Exact state filter"),
) -> HTMLResponse:
    listing = DirectoryListing(search=q, state=state, loading=True)
    return render(
        request,
        "show_schools.html",
        settings,
        listing=listing,
        placeholder_count=PLACEHOLDER_COUNT,
        panel_url=PANEL_PATH + _query(q, state),
        page_url=SHOW_SCHOOLS_PATH,
        add_school_url=ADD_SCHOOL_PATH,
    )


@router.get(PANEL_PATH, response_class=HTMLResponse, summary="School directory results")
async def show_schools_panel(
    request: Request,
    client: DirectoryClient,
    settings: AppSettings,
    q: str = Query("", description="Initial search text"),
    state: str = Query("", description="Initial exact state filter"),
) -> HTMLResponse:
    """Fetch the list and render all of it, with cards outside the filters hidden."""
    listing = DirectoryListing(search=q, state=state)
    with LoggingContext(view="show_schools"):
        await listing.load(client)

    return render(
        request,
        "_directory_panel.html",
        settings,
        listing=listing,
        page_url=SHOW_SCHOOLS_PATH,
        refresh_url=SHOW_SCHOOLS_PATH + _query(q, state),
        add_school_url=ADD_SCHOOL_PATH,
    )
