"""YAML configuration loading and validation.

This module loads the global plugin options from a YAML file. Credentials
missing from the file fall back to the environment (see Authenticator).
"""

from typing import Any, Dict, Optional

import yaml

from src.contentful_client.auth import Authenticator
from src.entry_processor.models import AutoLayout, PluginOptions

from .errors import ConfigError, FilesystemError


class ConfigLoader:
    """Handles plugin configuration loading and validation.

    Configuration file structure:
        space_id: "abc123"
        access_token: "..."            # or CONTENTFUL_ACCESS_TOKEN
        host: preview.contentful.com   # optional
        entry_key: path                # optional, enables entry-key naming
        metadata:
          site: Example
        autoLayout:
          layoutFileType: html
        common:
          recent:
            content_type: post
            limit: 3
        contentful:                    # optional, bulk file creation
          content_type: page
        entry_filename_pattern: ":fields.slug"
        permalink_style: false
        use_template_extension: false
        max_workers: 10
    """

    STRING_FIELDS = ('space_id', 'access_token', 'host', 'entry_key', 'entry_filename_pattern')

    MAPPING_FIELDS = ('metadata', 'common', 'contentful')

    DEFAULTS = {
        'permalink_style': False,
        'use_template_extension': False,
        'max_workers': 10,
    }

    @classmethod
    def load(cls, config_path: str, authenticator: Optional[Authenticator] = None) -> PluginOptions:
        """Load and parse plugin options from a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            authenticator: Source of default credentials (environment by default)

        Returns:
            PluginOptions with parsed configuration

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(
                config_path,
                'read',
                'Configuration file not found'
            )
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except Exception as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            config_dict = {}

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        options = cls.parse(config_dict)

        defaults = (authenticator or Authenticator()).get_credentials()
        options.space_id = options.space_id or defaults.space_id
        options.access_token = options.access_token or defaults.access_token
        options.host = options.host or defaults.host

        return options

    @classmethod
    def parse(cls, config_dict: Dict[str, Any]) -> PluginOptions:
        """Parse and validate a configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated PluginOptions object

        Raises:
            ConfigError: If configuration is invalid
        """
        for key in cls.STRING_FIELDS:
            value = config_dict.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(
                    f"Field '{key}' must be a string, got {type(value).__name__}",
                    key
                )

        for key in cls.MAPPING_FIELDS:
            value = config_dict.get(key)
            if value is not None and not isinstance(value, dict):
                raise ConfigError(
                    f"Field '{key}' must be a dictionary, got {type(value).__name__}",
                    key
                )

        common = config_dict.get('common') or {}
        for label, block in common.items():
            if not isinstance(block, dict):
                raise ConfigError(
                    f"Common query '{label}' must be a dictionary",
                    f'common.{label}'
                )

        auto_layout = None
        auto_layout_raw = config_dict.get('autoLayout')
        if auto_layout_raw is not None:
            if not isinstance(auto_layout_raw, dict):
                raise ConfigError(
                    f"Field 'autoLayout' must be a dictionary, got {type(auto_layout_raw).__name__}",
                    'autoLayout'
                )
            layout_file_type = auto_layout_raw.get('layoutFileType')
            if layout_file_type is not None and not isinstance(layout_file_type, str):
                raise ConfigError(
                    "Field 'autoLayout.layoutFileType' must be a string",
                    'autoLayout.layoutFileType'
                )
            auto_layout = AutoLayout(layout_file_type=layout_file_type)

        try:
            permalink_style = bool(config_dict.get('permalink_style', cls.DEFAULTS['permalink_style']))
            use_template_extension = bool(
                config_dict.get('use_template_extension', cls.DEFAULTS['use_template_extension'])
            )
            max_workers = int(config_dict.get('max_workers', cls.DEFAULTS['max_workers']))
        except (ValueError, TypeError) as e:
            raise ConfigError(
                f"Invalid field type for optional field: {str(e)}"
            )

        if max_workers < 1:
            raise ConfigError(
                f"Field 'max_workers' must be at least 1, got {max_workers}",
                'max_workers'
            )

        contentful_block = config_dict.get('contentful')

        return PluginOptions(
            space_id=config_dict.get('space_id'),
            access_token=config_dict.get('access_token'),
            host=config_dict.get('host'),
            common=dict(common),
            entry_key=config_dict.get('entry_key'),
            metadata=dict(config_dict.get('metadata') or {}),
            auto_layout=auto_layout,
            entry_filename_pattern=config_dict.get('entry_filename_pattern'),
            permalink_style=permalink_style,
            use_template_extension=use_template_extension,
            contentful=dict(contentful_block) if contentful_block else None,
            max_workers=max_workers,
        )
