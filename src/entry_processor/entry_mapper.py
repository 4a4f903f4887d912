"""Derive file names for fetched entries and rename their owning file.

Naming and renaming are separate steps: map_entries only sets
``entry.file_name``; rename_file_for_entries applies the entry-key mode
convention that the owning file takes the name of the last mapped entry.
"""

import logging
from typing import List

from src.models.entry import Entry

from .models import FileConfig, FileRecord, PluginOptions
from .naming import FilenameBuilder

logger = logging.getLogger(__name__)


def map_entries(entries: List[Entry], file_config: FileConfig, options: PluginOptions) -> List[Entry]:
    """Set the derived file name on every entry.

    Args:
        entries: Fetched entries
        file_config: Contentful block of the owning file
        options: Global plugin options

    Returns:
        The same entries, in order, with file_name set
    """
    for entry in entries:
        entry.file_name = FilenameBuilder.file_name_for(entry, file_config, options)
    return entries


def rename_file_for_entries(file: FileRecord, entries: List[Entry], options: PluginOptions) -> FileRecord:
    """Rename the owning file after its entries in entry-key mode.

    Entry-key mode expects one entry per file: the last entry's derived name
    becomes the file's name. Outside entry-key mode, or without entries, the
    file is returned unchanged.

    Args:
        file: Owning file record (mutated in place)
        entries: Mapped entries
        options: Global plugin options

    Returns:
        The (possibly renamed) file record
    """
    if not options.entry_key or not entries:
        return file

    if len(entries) > 1:
        logger.warning(
            f"entry_key mode expects one entry per file but {file.get('_file_name')} "
            f"received {len(entries)}; using the last one for its name"
        )

    new_name = entries[-1].file_name
    if new_name != file.get('_file_name'):
        logger.debug(f"Renaming {file.get('_file_name')} -> {new_name}")
    file['_file_name'] = new_name
    return file


def map_entries_for_file(entries: List[Entry], file: FileRecord, options: PluginOptions) -> List[Entry]:
    """Name every entry and apply the entry-key rename to the owning file."""
    file_config = FileConfig.from_dict(file.get('contentful'))
    map_entries(entries, file_config, options)
    rename_file_for_entries(file, entries, options)
    return entries
