"""Build lifecycle hook connecting a file set with Contentful.

ContentfulPlugin is called once per build with the build's FileMap. It runs
the per-file orchestrator for every record and, when a global contentful
block is configured, the bulk orchestrator once; the returned maps are merged
into the build's files.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from .models import FileMap, PluginOptions
from .processor import EntryProcessor

logger = logging.getLogger(__name__)


class ContentfulPlugin:
    """Callable build plugin.

    Example:
        >>> plugin = ContentfulPlugin(options)
        >>> files = plugin(files)
    """

    def __init__(self, options: PluginOptions, processor: Optional[EntryProcessor] = None):
        """Initialize the plugin.

        Args:
            options: Global plugin options
            processor: EntryProcessor (a fresh one with its own registry by default)
        """
        self.options = options
        self.processor = processor or EntryProcessor()

    def __call__(self, files: FileMap) -> FileMap:
        """Process every file and merge the results into files.

        Args:
            files: Build file map (mutated in place)

        Returns:
            The same file map, with processed and generated records merged in

        Raises:
            BuildError: The first failure of any file or of the bulk run
        """
        for file_name, file in files.items():
            file['_file_name'] = file_name

        records = list(files.values())
        run_bulk = bool(self.options.contentful)
        task_count = len(records) + (1 if run_bulk else 0)
        if task_count == 0:
            return files

        with ThreadPoolExecutor(max_workers=max(1, min(self.options.max_workers, task_count))) as executor:
            futures = [
                executor.submit(self.processor.process_file, file, self.options)
                for file in records
            ]
            if run_bulk:
                futures.append(executor.submit(self.processor.create_files_from_entries, self.options))

            results: List[Optional[FileMap]] = [future.result() for future in futures]

        merged = 0
        for file_map in results:
            if file_map:
                files.update(file_map)
                merged += len(file_map)

        logger.info(f"Merged {merged} file record(s) from Contentful into the build")
        return files
