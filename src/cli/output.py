"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich for spinners, colored messages and the generated-files table.
Supports verbosity levels and the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table

from src.cli.models import BuildSummary
from src.entry_processor.models import FileMap


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Output verbosity (0=summary, 1 or more=info messages)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Build completed")
        >>> with handler.spinner("Fetching entries..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Output verbosity (0=summary, 1 or more=info messages)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Args:
            message: Message to display with spinner

        Yields:
            None
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_generated_files(self, files: FileMap) -> None:
        """Display a table of files generated from Contentful entries.

        Args:
            files: Build FileMap after the plugin ran
        """
        generated = [
            (name, record) for name, record in files.items()
            if '_parent_file_name' in record
        ]
        if not generated:
            return

        table = Table(title="Generated files")
        table.add_column("File")
        table.add_column("Content type")
        table.add_column("Layout")
        table.add_column("Parent", style="dim")

        for name, record in generated:
            table.add_row(
                name,
                str(record.get('content_type') or ''),
                str(record.get('layout') or ''),
                str(record.get('_parent_file_name') or ''),
            )

        self.console.print(table)

    def print_build_summary(self, summary: BuildSummary, dry_run: bool = False) -> None:
        """Display build summary with color coding.

        Args:
            summary: Counts collected by the build command
            dry_run: Whether output was skipped
        """
        self.console.print("\n[bold]Build Summary:[/bold]")
        self.console.print(f"  [dim]─[/dim] Source files: {summary.source_count}")

        if summary.connected_count > 0:
            self.console.print(f"  [blue]↓[/blue] Connected to Contentful: {summary.connected_count} file(s)")

        if summary.generated_count > 0:
            self.console.print(f"  [green]+[/green] Generated: {summary.generated_count} file(s)")

        if dry_run:
            self.console.print("\n[yellow]Dry run - no files written[/yellow]")
        else:
            self.console.print(f"\n[green]Build completed: {summary.written_count} file(s) written[/green]")
