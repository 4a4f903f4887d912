"""API wrapper for the Contentful Content Delivery API.

This module wraps the contentful SDK client and provides error translation
from SDK and HTTP exceptions to our typed exception hierarchy. Results are
converted to EntryCollection models so the rest of the code base never
touches SDK resources directly.
"""

import logging
import re
import threading
from typing import Any, Dict, Optional

import contentful
from contentful.errors import (
    AccessDeniedError,
    HTTPError,
    NotFoundError,
    UnauthorizedError,
)
from requests.exceptions import ConnectionError, ConnectTimeout, ReadTimeout, Timeout

from src.models.entry_collection import EntryCollection

from .auth import Credentials
from .errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    SpaceNotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = 'cdn.contentful.com'


class ContentfulAPI:
    """Wrapper around the contentful SDK client with error translation.

    This class provides a thin wrapper over the Delivery API client that:
    1. Creates the SDK client lazily on first query
    2. Translates SDK/HTTP errors to typed exceptions
    3. Converts SDK Array resources into EntryCollection models

    Rate-limit retries and paging stay with the SDK.

    Example:
        >>> api = ContentfulAPI(Credentials("space", "token"))
        >>> collection = api.get_entries({"content_type": "post"})
        >>> print(len(collection))
    """

    def __init__(self, credentials: Credentials):
        """Initialize the API wrapper.

        Args:
            credentials: Space id, access token and optional host
        """
        self.credentials = credentials
        self._client: Optional[contentful.Client] = None
        self._client_lock = threading.Lock()

    @property
    def space_id(self) -> Optional[str]:
        return self.credentials.space_id

    @property
    def endpoint(self) -> str:
        return self.credentials.host or DEFAULT_HOST

    def _get_client(self) -> contentful.Client:
        """Get or create the contentful SDK client.

        Creation is serialized so concurrent first queries build one SDK
        client; the SDK fetches content types when it is constructed.

        Returns:
            contentful.Client: Initialized SDK client
        """
        if self._client is not None:
            return self._client

        with self._client_lock:
            if self._client is None:
                kwargs: Dict[str, Any] = {}
                if self.credentials.host:
                    kwargs['api_url'] = self.credentials.host
                logger.debug(f"Creating Contentful client for space {self.space_id} at {self.endpoint}")
                self._client = contentful.Client(
                    self.credentials.space_id,
                    self.credentials.access_token,
                    **kwargs
                )
        return self._client

    def _sanitize_credentials(self, text: str) -> str:
        """Mask access tokens in error messages before they are logged.

        Args:
            text: The error message or log text to sanitize

        Returns:
            str: Sanitized text with credentials masked

        Example:
            >>> api._sanitize_credentials("GET /entries?access_token=abc123")
            'GET /entries?access_token=***REDACTED***'
        """
        if not text:
            return text

        sanitized = text

        if self.credentials.access_token:
            sanitized = sanitized.replace(self.credentials.access_token, '***REDACTED***')

        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )

        sanitized = re.sub(
            r'(access_token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )

        return sanitized

    def _translate_error(self, exception: Exception, operation: str) -> Exception:
        """Translate SDK and HTTP exceptions to typed Contentful exceptions.

        Args:
            exception: The original exception from the SDK
            operation: Description of the operation that failed (for logging)

        Returns:
            Exception: Translated exception (one of our typed exceptions)
        """
        if isinstance(exception, (Timeout, ConnectTimeout, ReadTimeout, ConnectionError)):
            return APIUnreachableError(endpoint=self.endpoint)

        if isinstance(exception, (UnauthorizedError, AccessDeniedError)):
            return InvalidCredentialsError(space_id=self.space_id, host=self.credentials.host)

        if isinstance(exception, NotFoundError):
            return SpaceNotFoundError(space_id=self.space_id)

        status_code = getattr(exception, 'status_code', None)
        if status_code is None and hasattr(exception, 'response'):
            status_code = getattr(exception.response, 'status_code', None)

        if status_code in (401, 403):
            return InvalidCredentialsError(space_id=self.space_id, host=self.credentials.host)
        if status_code == 404:
            return SpaceNotFoundError(space_id=self.space_id)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        if isinstance(exception, HTTPError):
            return APIAccessError(f"Contentful API failure during {operation}: HTTP {status_code}")
        return APIAccessError(f"Contentful API failure during {operation}")

    def get_entries(self, query: Optional[Dict[str, Any]] = None) -> EntryCollection:
        """Fetch entries matching a query.

        Args:
            query: Delivery API query parameters (content_type, sys.id, filters, ...)

        Returns:
            EntryCollection with the delivered entries

        Raises:
            InvalidCredentialsError: If the access token is rejected
            SpaceNotFoundError: If the space does not exist
            APIUnreachableError: If the API is unreachable
            APIAccessError: If the query fails for any other reason
        """
        query = dict(query or {})
        logger.debug(f"Fetching entries from space {self.space_id}: {query}")
        try:
            array = self._get_client().entries(query)
        except Exception as e:
            raise self._translate_error(e, f"get_entries({self.space_id})") from e

        collection = EntryCollection.from_array(array)
        logger.info(
            f"Fetched {len(collection)} of {collection.total} entries from space {self.space_id}"
        )
        return collection
