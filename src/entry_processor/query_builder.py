"""Translate contentful configuration blocks into Delivery API queries."""

import logging
import re
from datetime import datetime, UTC
from typing import Any, Callable, Dict, Optional

from .models import FileConfig

logger = logging.getLogger(__name__)

# Filter values of the form "__name()" are replaced by a transform result
TRANSFORM_TOKEN_PATTERN = re.compile(r'^(__\w+)\(\)$')


def _now() -> str:
    return datetime.now(UTC).isoformat()


DEFAULT_FILTER_TRANSFORMS: Dict[str, Callable[[], Any]] = {
    '__now': _now,
}


class QueryBuilder:
    """Builds query parameter dictionaries for ContentfulAPI.get_entries.

    Mapping rules:
    - content_type -> content_type
    - entry_id -> sys.id
    - limit, skip, order -> copied as-is
    - filter -> every key copied; "__name()" values go through filter transforms

    Example:
        >>> QueryBuilder.build(FileConfig(content_type="post", filter={"fields.date[lte]": "__now()"}))
        {'content_type': 'post', 'fields.date[lte]': '2024-01-15T10:30:00+00:00'}
    """

    @classmethod
    def build(
        cls,
        file_config: FileConfig,
        filter_transforms: Optional[Dict[str, Callable[[], Any]]] = None,
    ) -> Dict[str, Any]:
        """Build the query for one contentful block.

        Args:
            file_config: Parsed contentful block
            filter_transforms: User transforms, overriding the built-in ones

        Returns:
            Query dictionary ready for get_entries
        """
        transforms = dict(DEFAULT_FILTER_TRANSFORMS)
        transforms.update(filter_transforms or {})

        query: Dict[str, Any] = {}

        if file_config.content_type:
            query['content_type'] = file_config.content_type
        if file_config.entry_id:
            query['sys.id'] = file_config.entry_id
        if file_config.limit is not None:
            query['limit'] = file_config.limit
        if file_config.skip is not None:
            query['skip'] = file_config.skip
        if file_config.order:
            query['order'] = file_config.order

        for key, value in file_config.filter.items():
            query[key] = cls._apply_transform(value, transforms)

        return query

    @staticmethod
    def _apply_transform(value: Any, transforms: Dict[str, Callable[[], Any]]) -> Any:
        """Replace a transform token with the transform's result."""
        if not isinstance(value, str):
            return value

        match = TRANSFORM_TOKEN_PATTERN.match(value.strip())
        if not match:
            return value

        transform = transforms.get(match.group(1))
        if transform is None:
            logger.debug(f"No filter transform registered for {value}, passing through")
            return value

        return transform()
