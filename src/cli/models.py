"""Data models for CLI operations.

This module defines all data models used by the CLI module.
"""

from dataclasses import dataclass
from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Build completed successfully
    - GENERAL_ERROR (1): Config, validation or filesystem failure
    - API_ERROR (2): Contentful query failed
    - AUTH_ERROR (3): Access token rejected
    - NETWORK_ERROR (4): Contentful API unreachable

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    API_ERROR = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class BuildSummary:
    """Counts reported after a build.

    Attributes:
        source_count: Files read from the source directory
        connected_count: Source files carrying a contentful block
        generated_count: Files generated from entries
        written_count: Files written to the destination (0 on dry run)
    """
    source_count: int = 0
    connected_count: int = 0
    generated_count: int = 0
    written_count: int = 0
