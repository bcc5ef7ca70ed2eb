"""SchoolDir - register and browse schools.

A small web front end over a school directory service: a form to add a
school with an optional logo, and a searchable, filterable directory.
"""

__version__ = "0.1.0"

from schooldir.infrastructure.api.app import app

__all__ = ["app", "__version__"]
