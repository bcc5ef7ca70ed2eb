"""Add-school form page and its submission handler."""

from typing import Annotated

from fastapi import APIRouter, File, Form, Request, UploadFile, status
from fastapi.responses import HTMLResponse

from schooldir.core.logging import LoggingContext, get_logger
from schooldir.domain.entities.school import ImageAttachment
from schooldir.domain.services.add_school_form import AddSchoolForm
from schooldir.domain.services.school_submission_service import SchoolSubmissionService
from schooldir.infrastructure.api.dependencies import AppSettings, DirectoryClient, Submissions
from schooldir.infrastructure.web.navigation import ADD_SCHOOL_PATH, SHOW_SCHOOLS_PATH
from schooldir.infrastructure.web.templating import render

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])


async def read_image_attachment(upload: UploadFile | None) -> ImageAttachment | None:
    """Read the optional logo field. An empty file input means no image."""
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    if not content:
        return None
    return ImageAttachment(
        filename=upload.filename,
        content=content,
        content_type=upload.content_type or "application/octet-stream",
    )


@router.get(ADD_SCHOOL_PATH, response_class=HTMLResponse, summary="Add-school form")
async def add_school_page(request: Request, settings: AppSettings) -> HTMLResponse:
    return render(request, "add_school.html", settings, form=AddSchoolForm())


@router.post(ADD_SCHOOL_PATH, response_class=HTMLResponse, summary="Submit a new school")
async def submit_school(
    request: Request,
    client: DirectoryClient,
    settings: AppSettings,
    submissions: Submissions,
    name: Annotated[str, Form()] = "",
    address: Annotated[str, Form()] = "",
    city: Annotated[str, Form()] = "",
    state: Annotated[str, Form()] = "",
    contact: Annotated[str, Form()] = "",
    email_id: Annotated[str, Form()] = "",
    image: Annotated[UploadFile | None, File(description="Optional school logo")] = None,
) -> HTMLResponse:
    """Validate the form, upload the logo if any, then create the school.

    Validation errors re-render the form with inline messages (422). A
    collaborator failure re-renders it with an error banner (502), and a
    duplicate of a submission still in flight is turned away (409). On success
    the form is cleared and the page redirects to the directory after a
    short delay.
    """
    values = {
        "name": name,
        "address": address,
        "city": city,
        "state": state,
        "contact": contact,
        "email_id": email_id,
    }
    attachment = await read_image_attachment(image)

    service = SchoolSubmissionService(
        client,
        max_image_size=settings.max_image_size,
        allowed_image_types=settings.allowed_image_types,
        guard=submissions,
    )
    with LoggingContext(view="add_school"):
        result = await service.submit(values, attachment)

    form = AddSchoolForm.from_result(
        result,
        values,
        image=attachment,
        redirect_to=SHOW_SCHOOLS_PATH,
        redirect_after=settings.redirect_delay_seconds,
    )

    if result.success:
        status_code = status.HTTP_200_OK
    elif result.field_errors:
        status_code = 422  # Unprocessable: field errors
    elif result.conflict:
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_502_BAD_GATEWAY

    return render(request, "add_school.html", settings, status_code=status_code, form=form)
