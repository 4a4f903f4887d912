"""Attach shared common content to every file of a batch.

Common content is configured as label -> contentful query block. All queries
run concurrently against the global space's client; the batch waits for every
query and attaches a single label -> EntryCollection mapping, by reference, as
``common`` on every file record.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional

from src.contentful_client.client_registry import ClientRegistry

from .errors import CommonContentError
from .models import CommonContent, FileConfig, FileMap, PluginOptions
from .query_builder import QueryBuilder
from .validator import validate_common_blocks

logger = logging.getLogger(__name__)


class CommonContentJoiner:
    """Runs the configured common queries and joins their results onto files.

    Example:
        >>> joiner = CommonContentJoiner(registry)
        >>> files = joiner.attach_common(files, options)
        >>> files["index.html"]["common"]["recent"].items
        [Entry(...), ...]
    """

    def __init__(self, registry: ClientRegistry, max_workers: Optional[int] = None):
        """Initialize the joiner.

        Args:
            registry: Client registry shared with the orchestrators
            max_workers: Maximum number of concurrent common queries
                (defaults to options.max_workers)
        """
        self.registry = registry
        self.max_workers = max_workers

    def attach_common(self, file_map: FileMap, options: PluginOptions) -> FileMap:
        """Attach common content to every record of file_map.

        Args:
            file_map: Assembled file records (mutated in place)
            options: Global plugin options

        Returns:
            The same file map

        Raises:
            CommonContentError: If any common query fails; nothing is attached
        """
        if not options.common:
            return file_map

        common = self.fetch_common(options)

        for record in file_map.values():
            record['common'] = common

        logger.debug(f"Attached {len(common)} common content set(s) to {len(file_map)} file(s)")
        return file_map

    def fetch_common(self, options: PluginOptions) -> CommonContent:
        """Execute all common queries and collect their results by label.

        Raises:
            ValidationError: If a common block is malformed (before any query)
            CommonContentError: If any common query fails
        """
        validate_common_blocks(options)
        client = self.registry.get_client(options.access_token, options.space_id, options.host)

        queries: Dict[str, dict] = {
            label: QueryBuilder.build(FileConfig.from_dict(block), options.filter_transforms)
            for label, block in options.common.items()
        }
        logger.info(f"Fetching {len(queries)} common content query(ies)")

        max_workers = min(self.max_workers or options.max_workers, len(queries))
        common: CommonContent = {}
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                label: executor.submit(client.get_entries, query)
                for label, query in queries.items()
            }

            # Collect in label order; the first failure aborts the join
            for label, future in futures.items():
                try:
                    common[label] = future.result()
                except Exception as e:
                    logger.error(f"Common content query '{label}' failed: {e}")
                    raise CommonContentError(label, str(e)) from e

        return common
