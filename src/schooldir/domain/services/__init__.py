"""Domain services for SchoolDir."""

from schooldir.domain.services.add_school_form import AddSchoolForm, image_preview_data_url
from schooldir.domain.services.directory_listing import PLACEHOLDER_COUNT, DirectoryListing
from schooldir.domain.services.school_filter import filter_schools, matches_search, state_options
from schooldir.domain.services.school_submission_service import (
    SchoolSubmissionService,
    SubmissionResult,
)
from schooldir.domain.services.school_validator import SchoolValidator
from schooldir.domain.services.submission_guard import SubmissionGuard, submission_key

__all__ = [
    "AddSchoolForm",
    "DirectoryListing",
    "PLACEHOLDER_COUNT",
    "SchoolSubmissionService",
    "SchoolValidator",
    "SubmissionGuard",
    "SubmissionResult",
    "filter_schools",
    "image_preview_data_url",
    "matches_search",
    "state_options",
    "submission_key",
]
