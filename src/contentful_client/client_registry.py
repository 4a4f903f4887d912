"""Registry of Contentful clients keyed by space id.

One client is constructed per space on first use and reused for the lifetime
of the registry. The first caller's credentials win; there is no
invalidation or credential rotation.
"""

import logging
import threading
from typing import Callable, Dict, Optional

from .api_wrapper import ContentfulAPI
from .auth import Credentials

logger = logging.getLogger(__name__)


class ClientRegistry:
    """Memoized mapping from space id to ContentfulAPI client.

    The registry is owned by the orchestration layer and passed to the
    components that need clients. Construction is guarded by a lock so the
    entry for a space is written at most once when files are processed on a
    thread pool.

    Example:
        >>> registry = ClientRegistry()
        >>> client = registry.get_client("token", "space", None)
        >>> client is registry.get_client("other-token", "space", None)
        True
    """

    def __init__(self, client_factory: Optional[Callable[[Credentials], ContentfulAPI]] = None):
        """Initialize an empty registry.

        Args:
            client_factory: Builds a client from credentials (defaults to ContentfulAPI)
        """
        self._client_factory = client_factory or ContentfulAPI
        self._clients: Dict[str, ContentfulAPI] = {}
        self._lock = threading.Lock()

    def get_client(
        self,
        access_token: Optional[str],
        space_id: Optional[str],
        host: Optional[str] = None,
    ) -> ContentfulAPI:
        """Return the client for a space, creating it on first use.

        Args:
            access_token: Delivery API access token
            space_id: Space id the client is keyed by
            host: Optional API host

        Returns:
            The memoized ContentfulAPI for space_id
        """
        with self._lock:
            client = self._clients.get(space_id)
            if client is None:
                logger.debug(f"Registering client for space {space_id}")
                client = self._client_factory(
                    Credentials(space_id=space_id, access_token=access_token, host=host)
                )
                self._clients[space_id] = client
            return client

    def __contains__(self, space_id: str) -> bool:
        return space_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)
