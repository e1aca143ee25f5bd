"""
Base configuration for path-to-unicode-filename.

Shared settings and helper functions for the command-line surface.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

T = TypeVar('T', bound='BaseFilenameSettings')

OUTPUT_FORMATS = ('text', 'json')


class BaseFilenameSettings(pydantic_settings.BaseSettings):
    """Shared configuration, read from UNICODE_FILENAME_* environment variables."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='UNICODE_FILENAME_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown settings in the .env file
    )

    # Application metadata
    APP_NAME: str = 'path-to-unicode-filename'
    VERSION: str = '0.1.0'

    # Default output format when --format is not given
    OUTPUT_FORMAT: str = 'text'

    @pydantic.field_validator('OUTPUT_FORMAT')
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format is one the CLI can render."""
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"OUTPUT_FORMAT must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class(_env_file=None)  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
