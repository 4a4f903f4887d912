"""Per-file and bulk orchestration of the entry pipeline.

Both entry points run the same named stages in a fixed order:

    fetch -> (filter) -> map -> assemble -> join

process_file is driven by a file record's contentful block;
create_files_from_entries is driven by the global options and synthesizes
its owning file record first.
"""

import logging
from typing import Optional

from src.contentful_client.auth import Credentials
from src.contentful_client.client_registry import ClientRegistry

from .assembler import FileAssembler
from .common_content import CommonContentJoiner
from .entry_filter import filter_entries
from .entry_mapper import map_entries_for_file
from .models import FetchResult, FileConfig, FileMap, FileRecord, PluginOptions
from .query_builder import QueryBuilder
from .validator import validate_bulk_options, validate_file, validate_file_and_options

logger = logging.getLogger(__name__)


class EntryProcessor:
    """Connects file records with Contentful entries.

    The processor owns the client registry it threads through the fetch and
    join stages, so files sharing a space id share one client.

    Example:
        >>> processor = EntryProcessor()
        >>> file_map = processor.process_file(files["posts.html"], options)
        >>> bulk_map = processor.create_files_from_entries(options)
    """

    def __init__(
        self,
        registry: Optional[ClientRegistry] = None,
        assembler: Optional[FileAssembler] = None,
        joiner: Optional[CommonContentJoiner] = None,
    ):
        """Initialize the processor with its collaborators.

        Args:
            registry: Client registry (a fresh one by default)
            assembler: FileAssembler (optional)
            joiner: CommonContentJoiner (optional, shares the registry by default)
        """
        self.registry = registry or ClientRegistry()
        self.assembler = assembler or FileAssembler()
        self.joiner = joiner or CommonContentJoiner(self.registry)

    def process_file(self, file: FileRecord, options: PluginOptions) -> Optional[FileMap]:
        """Process one file and connect it with Contentful data.

        Args:
            file: File record read by the build (needs _file_name)
            options: Global plugin options

        Returns:
            FileMap to merge into the build, or None when the file declares no
            contentful block

        Raises:
            ValidationError: If the file or credentials are malformed
            ContentfulError: If the query fails
            CommonContentError: If a common query fails
        """
        if not file.get('contentful'):
            return None

        validate_file(file)
        validate_file_and_options(file, options)

        file_config = FileConfig.from_dict(file['contentful'])
        credentials = Credentials.resolve(file_config, options)
        logger.info(f"Processing {file['_file_name']} (space {credentials.space_id})")

        fetched = self._fetch(file, file_config, credentials, options)
        return self._finish(fetched, options)

    def create_files_from_entries(self, options: PluginOptions) -> FileMap:
        """Create new files from the global contentful query block.

        Only entries holding a value under entry_key are kept; each becomes a
        generated file named after that value.

        Args:
            options: Global plugin options (contentful block and entry_key required)

        Returns:
            FileMap of generated files (empty when no entry qualifies)

        Raises:
            ValidationError: If the bulk options are malformed
            ContentfulError: If the query fails
            CommonContentError: If a common query fails
        """
        validate_bulk_options(options)

        file: FileRecord = {'contentful': dict(options.contentful)}
        file_config = FileConfig.from_dict(file['contentful'])
        credentials = Credentials.resolve(file_config, options)
        logger.info(f"Creating files from entries (space {credentials.space_id})")

        fetched = self._fetch(file, file_config, credentials, options)
        fetched.entries = filter_entries(fetched.entries, options)

        if not fetched.entries:
            logger.info(f"No entries with a value for '{options.entry_key}', no files created")
            return {}

        return self._finish(fetched, options)

    def _fetch(
        self,
        file: FileRecord,
        file_config: FileConfig,
        credentials: Credentials,
        options: PluginOptions,
    ) -> FetchResult:
        """Fetch stage: build the query and run it on the space's client."""
        query = QueryBuilder.build(file_config, options.filter_transforms)
        client = self.registry.get_client(credentials.access_token, credentials.space_id, credentials.host)
        collection = client.get_entries(query)
        return FetchResult(file=file, file_config=file_config, entries=list(collection.items))

    def _finish(self, fetched: FetchResult, options: PluginOptions) -> FileMap:
        """Map, assemble and join stages."""
        entries = map_entries_for_file(fetched.entries, fetched.file, options)
        file_map = self.assembler.assemble(fetched.file, entries, options)
        return self.joiner.attach_common(file_map, options)
