"""Source tree mapping for Contentful-driven builds.

This package reads build sources with YAML frontmatter into file records,
writes build output and loads the plugin configuration.
"""

from .file_mapper import FileMapper
from .errors import (
    FileMapperError,
    FilesystemError,
    ConfigError,
    FrontmatterError,
)
from .config_loader import ConfigLoader
from .frontmatter_handler import FrontmatterHandler

__all__ = [
    'FileMapper',
    'FileMapperError',
    'FilesystemError',
    'ConfigError',
    'FrontmatterError',
    'ConfigLoader',
    'FrontmatterHandler',
]
