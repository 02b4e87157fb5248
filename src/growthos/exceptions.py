"""Exceptions raised by growthos."""


class GrowthOSError(Exception):
    """Base class for errors reported to the user."""


class RepositoryNotFoundError(GrowthOSError):
    """The repository manifest could not be found (missing or private repo)."""

    def __init__(self, message: str = "Repository not found. Make sure it's public or provide a token."):
        super().__init__(message)


class InvalidRepositoryError(GrowthOSError):
    """The repository argument is not of the form ``owner/repo``."""


class ProjectExistsError(GrowthOSError):
    """A growthos config file already exists in the target project."""
