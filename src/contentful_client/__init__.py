"""Contentful client library for static-site builds.

This package provides Python abstractions over the Contentful Content
Delivery API: credential resolution, a per-space client registry and a thin
SDK wrapper with typed errors.
"""

from .errors import (
    BuildError,
    ContentfulError,
    InvalidCredentialsError,
    SpaceNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "BuildError",
    "ContentfulError",
    "InvalidCredentialsError",
    "SpaceNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
