"""Contentful entry data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Entry:
    """Content entry fetched from the Contentful Delivery API.

    The entry is immutable once fetched except for ``file_name``, which is
    derived later by the entry mapper.

    Attributes:
        id: System-assigned entry id (sys.id)
        content_type_id: Id of the entry's content type (sys.contentType.sys.id)
        fields: Field values for the delivered locale
        sys: Raw sys block as delivered by the API
        file_name: Derived output file name (None until mapped)
        resource: SDK resource the entry was built from (not compared)
    """
    id: str
    content_type_id: str
    fields: Dict[str, Any] = field(default_factory=dict)
    sys: Dict[str, Any] = field(default_factory=dict)
    file_name: Optional[str] = None
    resource: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def from_resource(cls, resource: Any) -> 'Entry':
        """Build an Entry from a contentful SDK Entry resource.

        Ids are read from the raw payload so they keep the API's camelCase
        layout; fields come from the SDK so linked entries stay resolved.
        """
        raw_sys = resource.raw.get('sys', {})
        content_type = raw_sys.get('contentType', {}).get('sys', {})
        return cls(
            id=raw_sys.get('id', ''),
            content_type_id=content_type.get('id', ''),
            fields=dict(resource.fields()),
            sys=raw_sys,
            resource=resource,
        )
