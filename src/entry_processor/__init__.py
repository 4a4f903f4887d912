"""Entry processing for Contentful-driven static-site builds.

This package maps Contentful entries onto build file records: query
building, entry naming and filtering, file assembly, common-content joining
and the per-file/bulk orchestrators behind the build plugin.
"""

from .assembler import FileAssembler
from .common_content import CommonContentJoiner
from .errors import (
    ProcessingError,
    ValidationError,
    EntryNotFoundError,
    CommonContentError,
)
from .models import AutoLayout, FileConfig, PluginOptions
from .plugin import ContentfulPlugin
from .processor import EntryProcessor
from .query_builder import QueryBuilder

__all__ = [
    'FileAssembler',
    'CommonContentJoiner',
    'ProcessingError',
    'ValidationError',
    'EntryNotFoundError',
    'CommonContentError',
    'AutoLayout',
    'FileConfig',
    'PluginOptions',
    'ContentfulPlugin',
    'EntryProcessor',
    'QueryBuilder',
]
