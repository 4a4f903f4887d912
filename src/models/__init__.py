"""Data models for Contentful entries and query results."""

from src.models.entry import Entry
from src.models.entry_collection import EntryCollection

__all__ = ['Entry', 'EntryCollection']
