"""File name derivation for Contentful entries.

Entries are named either by the value of a configured key field (entry-key
mode) or by a placeholder pattern such as ":sys.contentType.sys.id-:sys.id"
whose placeholders are resolved against the entry and slugified.
"""

import posixpath
import re
from typing import Any

from src.models.entry import Entry

from .models import FileConfig, PluginOptions

DEFAULT_FILENAME_PATTERN = ':sys.contentType.sys.id-:sys.id'
DEFAULT_EXTENSION = 'html'

# ":sys.id", ":fields.slug", ...
PLACEHOLDER_PATTERN = re.compile(r':([A-Za-z_][\w.]*[\w])')


class FilenameBuilder:
    """Computes the derived file name of an entry.

    Slug rules for placeholder values:
    - Case is lowered
    - Runs of characters outside [a-z0-9_-] -> single hyphen
    - Leading/trailing hyphens -> trimmed

    Examples:
        - pattern ":sys.contentType.sys.id-:sys.id" -> "post-2x4k9.html"
        - pattern ":fields.slug", permalink_style -> "hello-world/index.html"
        - entry_key "path", value "about/team" -> "about/team.html"
    """

    @staticmethod
    def slugify(value: str) -> str:
        """Convert a placeholder value to a filesafe slug.

        Examples:
            >>> FilenameBuilder.slugify("Hello World")
            'hello-world'
            >>> FilenameBuilder.slugify("Q&A: Part 2")
            'q-a-part-2'
        """
        slug = value.strip().lower()
        slug = re.sub(r'[^a-z0-9_-]+', '-', slug)
        slug = re.sub(r'-{2,}', '-', slug)
        return slug.strip('-')

    @classmethod
    def file_name_for(cls, entry: Entry, file_config: FileConfig, options: PluginOptions) -> str:
        """Compute the derived file name for an entry.

        Args:
            entry: Fetched entry
            file_config: Contentful block of the owning file
            options: Global plugin options

        Returns:
            Relative posix path of the file the entry maps to
        """
        extension = cls._extension(file_config, options)

        if options.entry_key:
            key_value = str(entry.fields.get(options.entry_key, '')).strip('/')
            if posixpath.splitext(key_value)[1]:
                return key_value
            return f"{key_value}.{extension}"

        pattern = (
            file_config.entry_filename_pattern
            or options.entry_filename_pattern
            or DEFAULT_FILENAME_PATTERN
        )
        name = PLACEHOLDER_PATTERN.sub(
            lambda match: cls.slugify(str(cls._resolve(entry, match.group(1)))),
            pattern
        )

        if options.permalink_style:
            return f"{name}/index.{extension}"
        return f"{name}.{extension}"

    @staticmethod
    def _extension(file_config: FileConfig, options: PluginOptions) -> str:
        if options.use_template_extension and file_config.entry_template:
            template_extension = posixpath.splitext(file_config.entry_template)[1]
            if template_extension:
                return template_extension.lstrip('.')
        return DEFAULT_EXTENSION

    @staticmethod
    def _resolve(entry: Entry, path: str) -> Any:
        """Resolve a dotted path against the entry's sys and fields blocks.

        Missing segments resolve to an empty string.
        """
        current: Any = {'sys': entry.sys, 'fields': entry.fields}
        for part in path.split('.'):
            if isinstance(current, dict):
                current = current.get(part)
            else:
                current = getattr(current, part, None)
            if current is None:
                return ''
        return current
