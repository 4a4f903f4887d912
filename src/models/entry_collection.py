"""Result set of a single entries query."""

from dataclasses import dataclass, field
from typing import Any, Iterator, List

from src.models.entry import Entry


@dataclass
class EntryCollection:
    """Entries returned by one get_entries call plus paging metadata.

    Attributes:
        items: Entries in delivery order
        total: Total number of matching entries in the space
        skip: Offset the page was fetched at
        limit: Page size requested
    """
    items: List[Entry] = field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 100

    @classmethod
    def from_array(cls, array: Any) -> 'EntryCollection':
        """Build a collection from a contentful SDK Array resource."""
        return cls(
            items=[Entry.from_resource(item) for item in array.items],
            total=getattr(array, 'total', len(array.items)),
            skip=getattr(array, 'skip', 0),
            limit=getattr(array, 'limit', 100),
        )

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
