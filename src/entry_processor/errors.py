"""Typed exception hierarchy for entry processing errors.

Validation errors are raised synchronously before any network call; join
errors wrap the failure of a single common-content query. All exceptions
inherit from ProcessingError.
"""

from typing import Optional

from src.contentful_client.errors import BuildError


class ProcessingError(BuildError):
    """Base exception for all entry processing errors."""
    pass


class ValidationError(ProcessingError):
    """Raised when a file record, its contentful block or the options are malformed."""

    def __init__(self, message: str, file_name: Optional[str] = None, config_field: Optional[str] = None):
        parts = []
        if file_name:
            parts.append(f"file '{file_name}'")
        if config_field:
            parts.append(f"field '{config_field}'")
        if parts:
            full_message = f"Validation error in {', '.join(parts)}: {message}"
        else:
            full_message = f"Validation error: {message}"
        super().__init__(full_message)
        self.file_name = file_name
        self.config_field = config_field
        self.original_message = message


class EntryNotFoundError(ValidationError):
    """Raised when single-entry mode receives no entry."""

    def __init__(self, entry_id: Optional[str], file_name: Optional[str] = None):
        super().__init__(
            f"No entry found for id {entry_id}",
            file_name=file_name,
            config_field='entry_id'
        )
        self.entry_id = entry_id


class CommonContentError(ProcessingError):
    """Raised when one common-content query fails; the whole join is discarded."""

    def __init__(self, label: str, reason: Optional[str] = None):
        message = f"Common content query '{label}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.label = label
        self.reason = reason
