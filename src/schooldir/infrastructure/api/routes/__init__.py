"""Page routes for SchoolDir."""

from schooldir.infrastructure.api.routes.add_school_router import router as add_school_router
from schooldir.infrastructure.api.routes.home_router import router as home_router
from schooldir.infrastructure.api.routes.schools_router import router as schools_router

__all__ = [
    "add_school_router",
    "home_router",
    "schools_router",
]
