"""Entry filtering for entry-key naming mode."""

from typing import List

from src.models.entry import Entry

from .models import PluginOptions


def filter_entries(entries: List[Entry], options: PluginOptions) -> List[Entry]:
    """Keep entries holding a truthy value under the configured entry_key.

    Order is preserved. Entries without fields or without the key are dropped.
    """
    return [
        entry for entry in entries
        if entry.fields and entry.fields.get(options.entry_key)
    ]
