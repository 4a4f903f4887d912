"""Unit tests for contentful_client.client_registry module."""

import threading
from unittest.mock import Mock

from src.contentful_client.auth import Credentials
from src.contentful_client.client_registry import ClientRegistry
from src.contentful_client.api_wrapper import ContentfulAPI


class TestClientRegistry:
    """Test cases for ClientRegistry class."""

    def test_default_factory_builds_contentful_api(self):
        """Without a factory the registry creates ContentfulAPI instances."""
        registry = ClientRegistry()

        client = registry.get_client("token", "space1", "preview.contentful.com")

        assert isinstance(client, ContentfulAPI)
        assert client.credentials == Credentials("space1", "token", "preview.contentful.com")

    def test_same_space_returns_same_client(self):
        """A second request for a space returns the memoized client."""
        factory = Mock(side_effect=lambda creds: Mock(credentials=creds))
        registry = ClientRegistry(client_factory=factory)

        first = registry.get_client("token-a", "space1")
        second = registry.get_client("token-b", "space1")

        assert first is second
        factory.assert_called_once_with(Credentials("space1", "token-a", None))

    def test_first_credentials_win(self):
        """Credentials of later requests for a known space are ignored."""
        registry = ClientRegistry(client_factory=lambda creds: Mock(credentials=creds))

        registry.get_client("token-a", "space1")
        client = registry.get_client("token-b", "space1", "preview.contentful.com")

        assert client.credentials.access_token == "token-a"
        assert client.credentials.host is None

    def test_distinct_spaces_get_distinct_clients(self):
        """Each space id gets its own client."""
        registry = ClientRegistry(client_factory=lambda creds: Mock(credentials=creds))

        first = registry.get_client("token", "space1")
        second = registry.get_client("token", "space2")

        assert first is not second
        assert len(registry) == 2
        assert "space1" in registry
        assert "space3" not in registry

    def test_concurrent_requests_create_one_client(self):
        """Concurrent first requests for a space construct exactly one client."""
        factory = Mock(side_effect=lambda creds: Mock(credentials=creds))
        registry = ClientRegistry(client_factory=factory)
        results = []

        def request():
            results.append(registry.get_client("token", "space1"))

        threads = [threading.Thread(target=request) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert factory.call_count == 1
        assert all(result is results[0] for result in results)
