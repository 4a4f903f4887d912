"""Build command orchestration for CLI.

This module provides the BuildCommand class that runs a complete build:
load configuration, read the source tree, run the Contentful plugin over it
and write the resulting files.
"""

import logging
from pathlib import Path
from typing import Optional

from src.cli.errors import CLIError, ConfigNotFoundError
from src.cli.models import BuildSummary, ExitCode
from src.cli.output import OutputHandler
from src.contentful_client.auth import Authenticator
from src.contentful_client.errors import (
    APIAccessError,
    APIUnreachableError,
    BuildError,
    InvalidCredentialsError,
    SpaceNotFoundError,
)
from src.entry_processor.errors import CommonContentError, ValidationError
from src.entry_processor.plugin import ContentfulPlugin
from src.entry_processor.processor import EntryProcessor
from src.file_mapper.config_loader import ConfigLoader
from src.file_mapper.errors import FileMapperError
from src.file_mapper.file_mapper import FileMapper

logger = logging.getLogger(__name__)


class BuildCommand:
    """Orchestrates a Contentful-driven build for the CLI.

    The build workflow:
        1. Load plugin options (YAML + environment defaults)
        2. Read the source tree into a FileMap
        3. Run ContentfulPlugin over the FileMap
        4. Write the FileMap to the destination (skipped on dry run)
        5. Return an ExitCode

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> build_cmd = BuildCommand(output_handler=output)
        >>> exit_code = build_cmd.run("src", "build")
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config_path: str = "contentful.yaml",
        file_mapper: Optional[FileMapper] = None,
        processor: Optional[EntryProcessor] = None,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
    ):
        """Initialize build command with dependencies.

        Args:
            config_path: Path to the plugin configuration YAML file
            file_mapper: FileMapper for source/output I/O (optional)
            processor: EntryProcessor used by the plugin (optional)
            output_handler: OutputHandler for terminal output (optional)
            authenticator: Source of default credentials (optional)
        """
        self.config_path = config_path
        self.file_mapper = file_mapper or FileMapper()
        self.processor = processor
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator

    def run(
        self,
        source: str,
        destination: str,
        dry_run: bool = False,
        manifest: Optional[str] = None,
    ) -> ExitCode:
        """Execute the build.

        Args:
            source: Source directory
            destination: Output directory
            dry_run: If True, do not write any output
            manifest: Optional path of a YAML manifest of generated files

        Returns:
            ExitCode indicating success or specific failure type
        """
        try:
            if not Path(self.config_path).exists():
                raise ConfigNotFoundError(self.config_path)

            logger.info(f"Loading configuration from {self.config_path}")
            self.output_handler.info(f"Loading configuration from {self.config_path}")
            options = ConfigLoader.load(self.config_path, self.authenticator)

            files = self.file_mapper.read(source)
            summary = BuildSummary(
                source_count=len(files),
                connected_count=sum(1 for record in files.values() if record.get('contentful')),
            )
            self.output_handler.info(
                f"Read {summary.source_count} source file(s), "
                f"{summary.connected_count} connected to Contentful"
            )
            if not summary.connected_count and not options.contentful:
                self.output_handler.warning(
                    f"No file in {source} has a contentful block and no global "
                    "contentful block is configured; nothing will be fetched"
                )

            plugin = ContentfulPlugin(options, processor=self.processor)
            with self.output_handler.spinner("Fetching entries from Contentful..."):
                plugin(files)

            summary.generated_count = sum(1 for record in files.values() if '_parent_file_name' in record)
            self.output_handler.print_generated_files(files)

            if not dry_run:
                summary.written_count = len(self.file_mapper.write(files, destination))
                if manifest:
                    self.file_mapper.write_manifest(files, manifest)
                    self.output_handler.success(f"Manifest written to {manifest}")

            self.output_handler.print_build_summary(summary, dry_run=dry_run)
            return ExitCode.SUCCESS

        except (ConfigNotFoundError, FileMapperError, ValidationError) as e:
            logger.error(f"Build failed: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except (BuildError, CLIError) as e:
            return self._handle_api_error(e)

        except Exception as e:
            logger.exception("Unexpected error during build")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _handle_api_error(self, error: Exception) -> ExitCode:
        """Translate Contentful failures (direct or via a common query) into exit codes."""
        cause = error.__cause__ if isinstance(error, CommonContentError) else error

        if isinstance(cause, InvalidCredentialsError):
            logger.error(f"Authentication failed: {error}")
            self.output_handler.error(f"Authentication failed: {error}")
            self.output_handler.info("Check access_token or CONTENTFUL_ACCESS_TOKEN")
            return ExitCode.AUTH_ERROR

        if isinstance(cause, APIUnreachableError):
            logger.error(f"API unreachable: {error}")
            self.output_handler.error(f"API error: {error}")
            self.output_handler.info("Check your internet connection and try again")
            return ExitCode.NETWORK_ERROR

        if isinstance(error, CommonContentError) or isinstance(cause, (APIAccessError, SpaceNotFoundError)):
            logger.error(f"API error: {error}")
            self.output_handler.error(f"API error: {error}")
            return ExitCode.API_ERROR

        logger.error(f"Build failed: {error}")
        self.output_handler.error(f"Error: {error}")
        return ExitCode.GENERAL_ERROR
