"""Unit tests for contentful_client.auth module."""

import pytest
from unittest.mock import patch

from src.contentful_client.auth import Authenticator, Credentials
from src.entry_processor.models import FileConfig, PluginOptions


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_are_immutable(self):
        """Credentials fields cannot be modified after creation."""
        creds = Credentials(space_id="space", access_token="token")
        with pytest.raises(AttributeError):
            creds.space_id = "other"

    def test_host_defaults_to_none(self):
        """host is optional."""
        assert Credentials("space", "token").host is None

    def test_resolve_prefers_file_overrides(self):
        """File-level values win over global options."""
        file_config = FileConfig(space_id="file-space", access_token="file-token", host="preview.contentful.com")
        options = PluginOptions(space_id="global-space", access_token="global-token", host="cdn.contentful.com")

        creds = Credentials.resolve(file_config, options)

        assert creds == Credentials("file-space", "file-token", "preview.contentful.com")

    def test_resolve_falls_back_to_options(self):
        """Missing file-level values fall back to global options."""
        options = PluginOptions(space_id="global-space", access_token="global-token")

        creds = Credentials.resolve(FileConfig(), options)

        assert creds == Credentials("global-space", "global-token", None)


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('src.contentful_client.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('src.contentful_client.auth.load_dotenv')
    def test_get_credentials_reads_environment(self, mock_load_dotenv, monkeypatch):
        """get_credentials returns the CONTENTFUL_* environment variables."""
        monkeypatch.setenv('CONTENTFUL_SPACE_ID', 'env-space')
        monkeypatch.setenv('CONTENTFUL_ACCESS_TOKEN', 'env-token')
        monkeypatch.setenv('CONTENTFUL_HOST', 'preview.contentful.com')

        creds = Authenticator().get_credentials()

        assert creds == Credentials('env-space', 'env-token', 'preview.contentful.com')

    @patch('src.contentful_client.auth.load_dotenv')
    def test_missing_variables_are_none(self, mock_load_dotenv, monkeypatch):
        """Missing or empty variables are returned as None."""
        monkeypatch.delenv('CONTENTFUL_SPACE_ID', raising=False)
        monkeypatch.setenv('CONTENTFUL_ACCESS_TOKEN', '')
        monkeypatch.delenv('CONTENTFUL_HOST', raising=False)

        creds = Authenticator().get_credentials()

        assert creds == Credentials(None, None, None)
