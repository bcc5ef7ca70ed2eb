"""FastAPI dependencies for SchoolDir routes."""

from typing import Annotated

from fastapi import Depends, Request

from schooldir.core.config import Settings, get_settings
from schooldir.domain.services.submission_guard import SubmissionGuard
from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient


def get_directory_client(request: Request) -> SchoolDirectoryClient:
    """Return the shared collaborator client created during app startup."""
    return request.app.state.directory_client


def get_submission_guard(request: Request) -> SubmissionGuard:
    """Return the app-wide registry of add-school submissions in flight."""
    return request.app.state.submission_guard


DirectoryClient = Annotated[SchoolDirectoryClient, Depends(get_directory_client)]
Submissions = Annotated[SubmissionGuard, Depends(get_submission_guard)]
AppSettings = Annotated[Settings, Depends(get_settings)]
