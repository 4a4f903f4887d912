"""Read a build source tree into file records and write build output.

This module provides the FileMapper class: the in-memory file set the
Contentful plugin runs over is read from a source directory, and the
resulting records are written to a destination directory.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

from src.entry_processor.models import FileMap

from .errors import FilesystemError
from .frontmatter_handler import FrontmatterHandler

logger = logging.getLogger(__name__)

# Maximum source file size to prevent memory exhaustion
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB in bytes


class FileMapper:
    """Maps between a directory tree and a build FileMap.

    Keys of the FileMap are posix paths relative to the source directory.
    Every record holds ``contents`` (bytes) plus its frontmatter properties.

    Example:
        >>> mapper = FileMapper()
        >>> files = mapper.read("site/src")
        >>> mapper.write(files, "site/build")
    """

    def _validate_path_safety(self, file_path: str, base_directory: str) -> None:
        """Validate that a file path is within the base directory.

        Args:
            file_path: Path to validate
            base_directory: Base directory that must contain the path

        Raises:
            FilesystemError: If path is outside base directory
        """
        real_base = os.path.realpath(base_directory)
        real_path = os.path.realpath(file_path)

        if not real_path.startswith(real_base + os.sep) and real_path != real_base:
            raise FilesystemError(
                file_path,
                'validate',
                f'Path traversal detected: {file_path} is outside base directory {base_directory}'
            )

    def _validate_file_size(self, file_path: str, max_size: int = MAX_FILE_SIZE) -> None:
        """Validate that a file size is within acceptable limits.

        Raises:
            FilesystemError: If file size exceeds maximum allowed size
        """
        try:
            file_size = os.path.getsize(file_path)
        except OSError as e:
            raise FilesystemError(
                file_path,
                'stat',
                f'Failed to check file size: {e}'
            )

        if file_size > max_size:
            size_mb = file_size / (1024 * 1024)
            max_mb = max_size / (1024 * 1024)
            raise FilesystemError(
                file_path,
                'read',
                f'File size ({size_mb:.2f} MB) exceeds maximum allowed size ({max_mb:.0f} MB)'
            )

    def read(self, source_dir: str) -> FileMap:
        """Read every file below source_dir into a FileMap.

        Args:
            source_dir: Root directory of the build sources

        Returns:
            FileMap keyed by relative posix path

        Raises:
            FilesystemError: If the directory or a file cannot be read
            FrontmatterError: If a file has invalid frontmatter
        """
        source = Path(source_dir)
        if not source.is_dir():
            raise FilesystemError(
                source_dir,
                'read',
                'Source directory not found'
            )

        files: FileMap = {}
        for path in sorted(source.rglob('*')):
            if not path.is_file():
                continue

            self._validate_path_safety(str(path), source_dir)
            self._validate_file_size(str(path))

            try:
                raw = path.read_bytes()
            except PermissionError:
                raise FilesystemError(str(path), 'read', 'Permission denied')
            except OSError as e:
                raise FilesystemError(str(path), 'read', str(e))

            files[path.relative_to(source).as_posix()] = FrontmatterHandler.parse(str(path), raw)

        logger.debug(f"Read {len(files)} source file(s) from {source_dir}")
        return files

    def write(self, files: FileMap, destination: str) -> List[Path]:
        """Write the contents of every record below destination.

        Args:
            files: Build FileMap
            destination: Output directory (created if missing)

        Returns:
            Paths written, in FileMap order

        Raises:
            FilesystemError: If a name escapes destination or a write fails
        """
        dest = Path(destination)
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(destination, 'create_directory', str(e))

        written: List[Path] = []
        for file_name, record in files.items():
            target = dest / file_name
            self._validate_path_safety(str(target), destination)

            contents = record.get('contents', b'')
            if isinstance(contents, str):
                contents = contents.encode('utf-8')

            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(contents)
            except PermissionError:
                raise FilesystemError(str(target), 'write', 'Permission denied')
            except OSError as e:
                raise FilesystemError(str(target), 'write', str(e))

            written.append(target)

        logger.info(f"Wrote {len(written)} file(s) to {destination}")
        return written

    def write_manifest(self, files: FileMap, manifest_path: str) -> None:
        """Write a YAML listing of the records generated from Contentful.

        Args:
            files: Build FileMap after the plugin ran
            manifest_path: Path of the YAML manifest

        Raises:
            FilesystemError: If the manifest cannot be written
        """
        generated: List[Dict[str, Any]] = []
        for file_name, record in files.items():
            if '_parent_file_name' not in record:
                continue
            generated.append({
                'file': file_name,
                'id': record.get('id'),
                'content_type': record.get('content_type'),
                'layout': record.get('layout'),
                'parent': record.get('_parent_file_name'),
            })

        yaml_str = yaml.safe_dump(
            {'generated': generated},
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        manifest_dir = os.path.dirname(manifest_path)
        try:
            if manifest_dir:
                os.makedirs(manifest_dir, exist_ok=True)
            with open(manifest_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise FilesystemError(manifest_path, 'write', 'Permission denied')
        except OSError as e:
            raise FilesystemError(manifest_path, 'write', str(e))
