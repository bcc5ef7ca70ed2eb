"""Jinja2 page rendering.

Templates are autoescaped. Every page receives the navigation items for the
current path so the shell can highlight the active link.
"""

from pathlib import Path
from typing import Any
from urllib.parse import urljoin

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import pass_context
from jinja2.runtime import Context
from starlette.responses import HTMLResponse

from schooldir.core.config import Settings
from schooldir.infrastructure.web.navigation import build_navigation

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"


def resolve_image_src(image: str, base_url: str, prefix: str) -> str:
    """Turn a stored image reference into a browser-loadable URL.

    Absolute URLs pass through, rooted paths live on the directory host, and
    bare file names live under the directory's image folder.
    """
    if image.startswith(("http://", "https://", "data:")):
        return image
    if image.startswith("/"):
        return urljoin(base_url + "/", image.lstrip("/"))
    return urljoin(base_url + "/", prefix.strip("/") + "/" + image)


@pass_context
def image_src(context: Context, image: str) -> str:
    settings: Settings = context["settings"]
    return resolve_image_src(image, settings.directory_base_url, settings.image_path_prefix)


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.trim_blocks = True
templates.env.lstrip_blocks = True
templates.env.filters["image_src"] = image_src


def render(
    request: Request,
    template_name: str,
    settings: Settings,
    status_code: int = 200,
    **context: Any,
) -> HTMLResponse:
    """Render a page template with the navigation shell context.

    ``settings`` are the ones in force for the request and drive
    collaborator-relative URLs such as school logos.
    """
    context.setdefault("settings", settings)
    context.setdefault("nav", build_navigation(request.url.path))
    context.setdefault("app_name", settings.app_name)
    return templates.TemplateResponse(
        request,
        template_name,
        context,
        status_code=status_code,
    )
