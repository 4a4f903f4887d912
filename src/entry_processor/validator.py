"""Shape checks for file records, contentful blocks and options.

Every check raises a ValidationError subclass and runs before any network
call is made.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from src.models.entry import Entry

from .errors import EntryNotFoundError, ValidationError
from .models import STRING_FIELDS, FileRecord, PluginOptions


def _validate_contentful_block(block: Any, file_name: Optional[str], prefix: str = 'contentful') -> None:
    if not isinstance(block, Mapping):
        raise ValidationError(
            f"{prefix} block must be a mapping, got {type(block).__name__}",
            file_name=file_name,
            config_field=prefix
        )

    for key in STRING_FIELDS:
        value = block.get(key)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"must be a string, got {type(value).__name__}",
                file_name=file_name,
                config_field=f'{prefix}.{key}'
            )

    for key in ('limit', 'skip'):
        value = block.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(
                f"must be a non-negative integer, got {value!r}",
                file_name=file_name,
                config_field=f'{prefix}.{key}'
            )

    filter_block = block.get('filter')
    if filter_block is not None and not isinstance(filter_block, Mapping):
        raise ValidationError(
            f"must be a mapping, got {type(filter_block).__name__}",
            file_name=file_name,
            config_field=f'{prefix}.filter'
        )


def validate_file(file: FileRecord) -> None:
    """Validate a file record carrying a contentful block.

    Raises:
        ValidationError: If the record has no name or the block is malformed
    """
    file_name = file.get('_file_name')
    if not isinstance(file_name, str) or not file_name.strip():
        raise ValidationError("file record has no _file_name", config_field='_file_name')

    _validate_contentful_block(file.get('contentful'), file_name)


def validate_file_and_options(file: FileRecord, options: PluginOptions) -> None:
    """Validate that credentials are available for a file.

    Either the file's contentful block or the global options must provide a
    space id and an access token. The global common queries are checked too,
    since they run with every file.

    Raises:
        ValidationError: If space_id or access_token cannot be resolved, or a
            common query block is malformed
    """
    block = file.get('contentful') or {}
    file_name = file.get('_file_name')

    if not (block.get('space_id') or options.space_id):
        raise ValidationError(
            "no space_id in file or global options",
            file_name=file_name,
            config_field='space_id'
        )
    if not (block.get('access_token') or options.access_token):
        raise ValidationError(
            "no access_token in file or global options",
            file_name=file_name,
            config_field='access_token'
        )

    validate_common_blocks(options)


def validate_single_entry(entries: List[Entry], file: FileRecord) -> None:
    """Validate the result of a single-entry query.

    Raises:
        EntryNotFoundError: If no entry was returned
        ValidationError: If several entries were returned or the id does not match
    """
    entry_id = (file.get('contentful') or {}).get('entry_id')
    file_name = file.get('_file_name')

    if not entries:
        raise EntryNotFoundError(entry_id, file_name=file_name)

    if len(entries) > 1:
        raise ValidationError(
            f"expected exactly one entry for id {entry_id}, got {len(entries)}",
            file_name=file_name,
            config_field='entry_id'
        )

    if entry_id and entries[0].id != entry_id:
        raise ValidationError(
            f"fetched entry {entries[0].id} does not match id {entry_id}",
            file_name=file_name,
            config_field='entry_id'
        )


def validate_bulk_options(options: PluginOptions) -> None:
    """Validate global options for bulk file creation.

    Raises:
        ValidationError: If the bulk block, entry_key or credentials are missing
    """
    _validate_contentful_block(options.contentful, '<options>')

    if not options.entry_key:
        raise ValidationError(
            "bulk file creation requires entry_key",
            config_field='entry_key'
        )

    validate_file_and_options({'contentful': options.contentful, '_file_name': '<options>'}, options)


def validate_common_blocks(options: PluginOptions) -> None:
    """Validate every common query block of the global options.

    Raises:
        ValidationError: If a block is not a well-formed contentful block
    """
    for label, block in (options.common or {}).items():
        _validate_contentful_block(block, None, prefix=f'common.{label}')
