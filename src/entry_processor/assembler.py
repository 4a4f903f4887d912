"""Assemble fetched entries into file records.

The assembler enriches the owning file with the fetched data and, when
configured, generates one child file per entry:

- Single-entry mode (contentful.entry_id): ``data`` is the lone entry.
- Collection mode: ``data`` holds the entry list and the entries grouped by
  content type; children are generated when an entry_template or the global
  entry_key is configured.
"""

import logging
from typing import Dict, List, Optional

from src.models.entry import Entry

from .models import FileConfig, FileMap, FileRecord, PluginOptions
from .validator import validate_single_entry

logger = logging.getLogger(__name__)


def group_by_content_type(entries: List[Entry]) -> Dict[str, List[Entry]]:
    """Group entries by content type id.

    Groups appear in first-occurrence order; entries keep fetch order within
    a group.
    """
    groups: Dict[str, List[Entry]] = {}
    for entry in entries:
        groups.setdefault(entry.content_type_id, []).append(entry)
    return groups


def resolve_layout(entry: Entry, file_config: FileConfig, options: PluginOptions) -> Optional[str]:
    """Resolve the layout of a generated child file.

    Precedence: autoLayout, then the entry's own layout field in entry-key
    mode, then the file's entry_template.
    """
    if options.auto_layout and options.auto_layout.layout_file_type:
        return f"{entry.content_type_id}.{options.auto_layout.layout_file_type}"
    if options.entry_key:
        return entry.fields.get('layout')
    return file_config.entry_template


class FileAssembler:
    """Turns fetched entries into a FileMap for one owning file.

    Example:
        >>> assembler = FileAssembler()
        >>> files = assembler.assemble(file, entries, options)
        >>> sorted(files)
        ['index.html', 'post-1.html', 'post-2.html']
    """

    def assemble(self, file: FileRecord, entries: List[Entry], options: PluginOptions) -> FileMap:
        """Assemble the file map for one owning file.

        Args:
            file: Owning file record (mutated in place)
            entries: Mapped entries (file_name set)
            options: Global plugin options

        Returns:
            FileMap with the owning file under its (possibly renamed) name and
            any generated child files

        Raises:
            ValidationError: If single-entry mode did not receive exactly one matching entry
        """
        file_config = FileConfig.from_dict(file.get('contentful'))
        files: FileMap = {file['_file_name']: file}

        if file_config.entry_id:
            validate_single_entry(entries, file)
            file['data'] = entries[0]
            return files

        file['data'] = {
            'entries': entries,
            'content_types': group_by_content_type(entries),
        }

        if not (file_config.entry_template or options.entry_key):
            return files

        for entry in entries:
            files[entry.file_name] = self._build_child(file, entry, file_config, options)

        logger.debug(f"Generated {len(entries)} file(s) from {file['_file_name']}")
        return files

    def _build_child(
        self,
        parent: FileRecord,
        entry: Entry,
        file_config: FileConfig,
        options: PluginOptions,
    ) -> FileRecord:
        """Build the generated file record for one entry."""
        child: FileRecord = {
            # Later pipeline stages expect contents on every record
            'contents': self._contents_for(entry, options),
            'data': entry,
            'id': entry.id,
            'content_type': file_config.content_type or entry.content_type_id,
            'layout': resolve_layout(entry, file_config, options),
            '_file_name': entry.file_name,
            '_parent_file_name': parent['_file_name'],
        }
        child.update(options.metadata or {})
        return child

    @staticmethod
    def _contents_for(entry: Entry, options: PluginOptions) -> bytes:
        if not options.entry_key:
            return b''
        contents = entry.fields.get('contents') or ''
        if isinstance(contents, bytes):
            return contents
        return str(contents).encode('utf-8')
