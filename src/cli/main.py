"""Main CLI entry point for the contentful-build command.

This module provides the Typer application that serves as the entry point
for the contentful-build command-line tool.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from src.cli.build_command import BuildCommand
from src.cli.output import OutputHandler

__version__ = "0.1.0"

app = typer.Typer(
    name="contentful-build",
    help="""Connect a static-site source tree with Contentful entries.

QUICK START:
  contentful-build src                          # Build src/ into build/
  contentful-build src -d public -c site.yaml   # Custom output and config
  contentful-build src --dry-run -v 1           # Fetch and report only""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)

# Application logger namespace; third-party loggers are left alone
APP_LOGGER = "src"

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}
CONSOLE_FORMAT = "%(asctime)s [%(levelname)8s] %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Attach stderr (and optionally file) handlers to the application logger.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2 or more=DEBUG
        logdir: Directory for a timestamped log file (created if missing)
    """
    level = LOG_LEVELS.get(verbosity, logging.DEBUG)
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))

    log_file = None
    if logdir:
        log_dir = Path(logdir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"contentful-build_{datetime.now():%Y%m%d_%H%M%S}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        app_logger.addHandler(handler)

    if log_file:
        logger.info(f"Build log: {log_file}")


@app.command()
def main_command(
    source: str = typer.Argument(
        "src",
        help="Source directory of the build",
    ),
    destination: str = typer.Option(
        "build",
        "--destination",
        "-d",
        help="Output directory",
    ),
    config: str = typer.Option(
        "contentful.yaml",
        "--config",
        "-c",
        help="Plugin configuration YAML file",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "--dryrun",
        help="Fetch and assemble without writing any output",
    ),
    manifest: Optional[str] = typer.Option(
        None,
        "--manifest",
        help="Write a YAML manifest of generated files to this path",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Build SOURCE into the destination, connecting files with Contentful.

    \b
    Files whose frontmatter holds a `contentful` block are enriched with the
    entries their query returns; entry templates and entry_key generate one
    file per entry. A global `contentful` block in the config creates files
    that have no source at all.
    """
    if version:
        typer.echo(f"contentful-build version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    build_cmd = BuildCommand(config_path=config, output_handler=output)

    exit_code = build_cmd.run(
        source=source,
        destination=destination,
        dry_run=dry_run,
        manifest=manifest,
    )

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
