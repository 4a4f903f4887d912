"""YAML frontmatter parsing for build source files.

Source files may start with a YAML frontmatter block between ``---``
delimiters. Its keys become properties of the file record (a ``contentful``
block among them) and the remainder becomes the record's ``contents``.
"""

import re
from typing import Any

import yaml

from src.entry_processor.models import FileRecord

from .errors import FrontmatterError


class FrontmatterHandler:
    """Handles YAML frontmatter operations for build source files.

    Frontmatter format:
        ---
        title: Blog
        contentful:
          content_type: post
          entry_template: post.html
        ---
        <body>

    Files that are not UTF-8 text, or have no frontmatter, become records
    holding only their raw contents.
    """

    # Regex pattern to match YAML frontmatter (between --- delimiters)
    FRONTMATTER_PATTERN = re.compile(
        r'^---\s*\n(.*?)\n---\s*(?:\n|$)',
        re.DOTALL
    )

    # Maximum allowed depth for YAML structures
    MAX_YAML_DEPTH = 10

    @classmethod
    def _validate_yaml_depth(cls, obj: Any, current_depth: int = 0, max_depth: int = MAX_YAML_DEPTH) -> None:
        """Validate that YAML structure depth doesn't exceed maximum.

        Args:
            obj: YAML object (dict, list, or primitive)
            current_depth: Current nesting depth
            max_depth: Maximum allowed depth

        Raises:
            FrontmatterError: If depth exceeds maximum
        """
        if current_depth > max_depth:
            raise FrontmatterError(
                "<yaml>",
                f"YAML structure exceeds maximum depth of {max_depth}"
            )

        if isinstance(obj, dict):
            for value in obj.values():
                cls._validate_yaml_depth(value, current_depth + 1, max_depth)
        elif isinstance(obj, list):
            for item in obj:
                cls._validate_yaml_depth(item, current_depth + 1, max_depth)

    @classmethod
    def parse(cls, file_path: str, raw: bytes) -> FileRecord:
        """Parse a source file into a file record.

        Args:
            file_path: Path of the file (for error messages)
            raw: Raw file bytes

        Returns:
            File record with frontmatter keys and ``contents`` (bytes)

        Raises:
            FrontmatterError: If the frontmatter is not a valid YAML mapping
        """
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError:
            return {'contents': raw}

        match = cls.FRONTMATTER_PATTERN.match(text)
        if not match:
            return {'contents': raw}

        try:
            frontmatter = yaml.safe_load(match.group(1))
        except yaml.YAMLError as e:
            raise FrontmatterError(
                file_path,
                f"Invalid YAML syntax: {str(e)}"
            )

        if frontmatter is None:
            frontmatter = {}

        if not isinstance(frontmatter, dict):
            raise FrontmatterError(
                file_path,
                f"Frontmatter must be a YAML dictionary, got {type(frontmatter).__name__}"
            )

        try:
            cls._validate_yaml_depth(frontmatter)
        except FrontmatterError as e:
            raise FrontmatterError(file_path, e.message)

        record: FileRecord = dict(frontmatter)
        record['contents'] = text[match.end():].encode('utf-8')
        return record
