"""Typed exception hierarchy for Contentful-related errors.

This module defines the base exception for the whole build tool plus the
errors raised while talking to the Contentful Content Delivery API.
All exceptions inherit from BuildError for easy catching and include
descriptive messages with context to help with debugging.
"""

from typing import Optional


class BuildError(Exception):
    """Base exception for all contentful-build errors.

    Use this to catch any application-level error from the build tool.
    """
    pass


class ContentfulError(BuildError):
    """Base exception for all Contentful API errors."""
    pass


class InvalidCredentialsError(ContentfulError):
    """Raised when the access token is rejected for a space."""

    def __init__(self, space_id: str, host: Optional[str] = None):
        super().__init__(
            f"Access token is invalid (space: {space_id}, host: {host or 'default'})"
        )
        self.space_id = space_id
        self.host = host


class SpaceNotFoundError(ContentfulError):
    """Raised when the requested space or resource does not exist."""

    def __init__(self, space_id: str):
        super().__init__(f"Space {space_id} not found")
        self.space_id = space_id


class APIUnreachableError(ContentfulError):
    """Raised when the Contentful API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(ContentfulError):
    """Raised when an API query fails for any other reason."""

    def __init__(self, message: str = "Contentful API failure"):
        super().__init__(message)
