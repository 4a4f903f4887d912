"""Data models for entry processing.

File records stay plain dictionaries with free-form properties, as the build
pipeline hands them around; the contentful configuration blocks and the
global options are parsed into dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from src.models.entry import Entry

FileRecord = Dict[str, Any]
FileMap = Dict[str, FileRecord]
CommonContent = Dict[str, Any]

# Keys of a file's contentful block that must hold strings
STRING_FIELDS = (
    'space_id',
    'access_token',
    'host',
    'entry_id',
    'content_type',
    'entry_template',
    'order',
    'entry_filename_pattern',
)


@dataclass
class FileConfig:
    """Parsed contentful block of a file record.

    Attributes:
        space_id: Space override for this file
        access_token: Access token override for this file
        host: API host override for this file
        entry_id: Fetch exactly this entry (single-entry mode)
        content_type: Content type filter, also overrides child content_type
        entry_template: Layout name for generated child files
        limit: Maximum number of entries to fetch
        skip: Number of entries to skip
        order: Delivery API order expression (e.g. "-sys.createdAt")
        filter: Additional query parameters, values may be transform tokens
        entry_filename_pattern: Naming pattern for generated child files
    """
    space_id: Optional[str] = None
    access_token: Optional[str] = None
    host: Optional[str] = None
    entry_id: Optional[str] = None
    content_type: Optional[str] = None
    entry_template: Optional[str] = None
    limit: Optional[int] = None
    skip: Optional[int] = None
    order: Optional[str] = None
    filter: Dict[str, Any] = field(default_factory=dict)
    entry_filename_pattern: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> 'FileConfig':
        """Build a FileConfig from a (validated) contentful block."""
        raw = raw or {}
        return cls(
            space_id=raw.get('space_id'),
            access_token=raw.get('access_token'),
            host=raw.get('host'),
            entry_id=raw.get('entry_id'),
            content_type=raw.get('content_type'),
            entry_template=raw.get('entry_template'),
            limit=raw.get('limit'),
            skip=raw.get('skip'),
            order=raw.get('order'),
            filter=dict(raw.get('filter') or {}),
            entry_filename_pattern=raw.get('entry_filename_pattern'),
        )


@dataclass
class AutoLayout:
    """Derive child layouts from content type ids.

    Attributes:
        layout_file_type: Extension appended to the content type id ("html" -> "post.html")
    """
    layout_file_type: Optional[str] = None


@dataclass
class PluginOptions:
    """Global plugin configuration.

    Attributes:
        space_id: Default space id
        access_token: Default Delivery API access token
        host: Default API host
        common: Label -> contentful query block for shared common content
        entry_key: Field name enabling entry-key naming mode
        metadata: Properties shallow-merged into every generated file
        auto_layout: Compute child layouts from content type ids
        filter_transforms: Token name ("__now") -> callable producing a filter value
        entry_filename_pattern: Default naming pattern for generated files
        permalink_style: Name generated files "<name>/index.<ext>"
        use_template_extension: Take generated file extensions from entry_template
        contentful: Query block for bulk file creation (no source file)
        max_workers: Thread pool size for per-file processing and common queries
    """
    space_id: Optional[str] = None
    access_token: Optional[str] = None
    host: Optional[str] = None
    common: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    entry_key: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    auto_layout: Optional[AutoLayout] = None
    filter_transforms: Dict[str, Callable[[], Any]] = field(default_factory=dict)
    entry_filename_pattern: Optional[str] = None
    permalink_style: bool = False
    use_template_extension: bool = False
    contentful: Optional[Dict[str, Any]] = None
    max_workers: int = 10


@dataclass
class FetchResult:
    """Entries fetched for one owning file, before mapping."""
    file: FileRecord
    file_config: FileConfig
    entries: List[Entry] = field(default_factory=list)
