"""Command-line interface for Contentful-driven static-site builds.

This package provides the `contentful-build` CLI tool that reads a source
tree, connects its files with Contentful entries through the build plugin
and writes the result, with progress indication and error handling.
"""

from .build_command import BuildCommand
from .models import ExitCode, BuildSummary
from .errors import (
    CLIError,
    ConfigNotFoundError,
)

__all__ = [
    'BuildCommand',
    'ExitCode',
    'BuildSummary',
    'CLIError',
    'ConfigNotFoundError',
]
