"""Unit tests for entry_processor.errors module."""

from src.contentful_client.errors import BuildError
from src.entry_processor.errors import (
    CommonContentError,
    EntryNotFoundError,
    ProcessingError,
    ValidationError,
)


class TestValidationError:
    """Test ValidationError message formatting."""

    def test_message_with_file_and_field(self):
        """File and field are both named."""
        error = ValidationError("must be a string", file_name="a.html", config_field="contentful.order")

        assert str(error) == "Validation error in file 'a.html', field 'contentful.order': must be a string"
        assert error.original_message == "must be a string"

    def test_message_without_context(self):
        """Without context only the message is shown."""
        assert str(ValidationError("bad")) == "Validation error: bad"

    def test_is_processing_error(self):
        """ValidationError belongs to the build hierarchy."""
        error = ValidationError("bad")
        assert isinstance(error, ProcessingError)
        assert isinstance(error, BuildError)


class TestEntryNotFoundError:
    """Test EntryNotFoundError."""

    def test_is_validation_error(self):
        """EntryNotFoundError is a ValidationError on entry_id."""
        error = EntryNotFoundError("abc", file_name="a.html")

        assert isinstance(error, ValidationError)
        assert error.config_field == "entry_id"
        assert "No entry found for id abc" in str(error)


class TestCommonContentError:
    """Test CommonContentError."""

    def test_message_with_reason(self):
        """The label and reason appear in the message."""
        error = CommonContentError("recent", "timeout")

        assert str(error) == "Common content query 'recent' failed: timeout"
        assert error.label == "recent"

    def test_message_without_reason(self):
        """The reason is optional."""
        assert str(CommonContentError("recent")) == "Common content query 'recent' failed"
