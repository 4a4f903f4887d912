"""Credential handling for Contentful spaces.

This module loads default Contentful credentials from environment variables
using python-dotenv and resolves the effective credentials for a file, where
a file-level override always wins over the global options.
"""

import os
from typing import TYPE_CHECKING, NamedTuple, Optional

from dotenv import load_dotenv

if TYPE_CHECKING:
    from src.entry_processor.models import FileConfig, PluginOptions


class Credentials(NamedTuple):
    """Contentful Delivery API credentials for one space."""
    space_id: Optional[str]
    access_token: Optional[str]
    host: Optional[str] = None

    @classmethod
    def resolve(
        cls,
        file_config: "FileConfig",
        options: "PluginOptions",
    ) -> "Credentials":
        """Resolve effective credentials for a file.

        Args:
            file_config: Parsed per-file contentful block
            options: Global plugin options

        Returns:
            Credentials with file-level values falling back to global ones
        """
        return cls(
            space_id=file_config.space_id or options.space_id,
            access_token=file_config.access_token or options.access_token,
            host=file_config.host or options.host,
        )


class Authenticator:
    """Loads default Contentful credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Recognized environment variables:
        CONTENTFUL_SPACE_ID: Default space id
        CONTENTFUL_ACCESS_TOKEN: Default Delivery API access token
        CONTENTFUL_HOST: Default API host (e.g. preview.contentful.com)

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Using space {creds.space_id}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get default credentials from environment variables.

        Missing variables are returned as None; whether they are required
        depends on the per-file configuration and is checked by the validator.

        Returns:
            Credentials: A named tuple containing space_id, access_token and host
        """
        return Credentials(
            space_id=os.getenv('CONTENTFUL_SPACE_ID') or None,
            access_token=os.getenv('CONTENTFUL_ACCESS_TOKEN') or None,
            host=os.getenv('CONTENTFUL_HOST') or None,
        )
