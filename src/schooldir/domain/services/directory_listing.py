"""View state for the school directory page."""

from dataclasses import dataclass, field
from typing import Literal

from schooldir.core.logging import get_logger
from schooldir.domain.entities.school import School
from schooldir.domain.exceptions import SchoolDirectoryError
from schooldir.domain.services.school_filter import filter_schools, state_options
from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient

logger = get_logger(__name__)

# Skeleton cards shown while the list loads, independent of the result size.
PLACEHOLDER_COUNT = 6

EmptyReason = Literal["no_schools", "no_matches"]


@dataclass
class DirectoryListing:
    """Loaded schools plus the active search text and state filter.

    Only ``schools``, ``search`` and ``state`` are stored. The filtered view
    and the state options are derived from them on every access.
    """

    search: str = ""
    state: str = ""
    schools: list[School] = field(default_factory=list)
    loading: bool = False
    error: str = ""

    @property
    def filtered(self) -> list[School]:
        return filter_schools(self.schools, self.search, self.state)

    @property
    def state_options(self) -> list[str]:
        return state_options(self.schools)

    @property
    def has_filters(self) -> bool:
        return bool(self.search.strip() or self.state)

    @property
    def empty_reason(self) -> EmptyReason | None:
        """Why nothing is shown, or None when there are results.

        "no_matches" means schools exist but the filters exclude them all.
        """
        if self.filtered:
            return None
        return "no_matches" if self.has_filters else "no_schools"

    @property
    def summary(self) -> str:
        total = len(self.schools)
        plural = "" if total == 1 else "s"
        return f"Showing {len(self.filtered)} of {total} school{plural}"

    async def load(self, client: SchoolDirectoryClient) -> None:
        """Fetch the full list, replacing the loaded schools or recording the error."""
        self.loading = True
        try:
            self.schools = await client.list_schools()
            self.error = ""
        except SchoolDirectoryError as e:
            logger.warning("Failed to load school directory", step=e.step, error=e.message)
            self.error = e.message
        finally:
            self.loading = False
