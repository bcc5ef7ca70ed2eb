"""HTTP clients for external collaborators."""

from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient

__all__ = ["SchoolDirectoryClient"]
