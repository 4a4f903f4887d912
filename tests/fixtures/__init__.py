"""Test fixtures for Contentful entry processing tests.

This module provides builders for:
- Entries and entry collections as delivered by the API wrapper
- File records as read by the build
- Mock clients and registries returning canned collections
"""

from .sample_entries import (
    make_entry,
    make_collection,
    make_file,
    make_registry,
    SAMPLE_POST_ENTRIES,
)

__all__ = [
    "make_entry",
    "make_collection",
    "make_file",
    "make_registry",
    "SAMPLE_POST_ENTRIES",
]
