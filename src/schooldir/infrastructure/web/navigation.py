"""Navigation links shared by every page."""

from dataclasses import dataclass

HOME_PATH = "/"
ADD_SCHOOL_PATH = "/addSchool"
SHOW_SCHOOLS_PATH = "/showSchools"


@dataclass(frozen=True)
class NavLink:
    href: str
    label: str
    icon: str
    accent: str


@dataclass(frozen=True)
class NavItem:
    link: NavLink
    active: bool


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink(HOME_PATH, "Home", "🏠", "blue"),
    NavLink(ADD_SCHOOL_PATH, "Add School", "➕", "green"),
    NavLink(SHOW_SCHOOLS_PATH, "View Schools", "👀", "purple"),
)


def build_navigation(current_path: str) -> list[NavItem]:
    """Mark the link whose path exactly equals ``current_path`` as active."""
    return [NavItem(link, link.href == current_path) for link in NAV_LINKS]
