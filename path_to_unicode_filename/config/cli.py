"""
CLI configuration.

Extends base configuration with command-line specific settings.
"""

from __future__ import annotations

from path_to_unicode_filename.config.base import BaseFilenameSettings, lazy_settings


class CliSettings(BaseFilenameSettings):
    """Command-line specific configuration."""

    # Show [INFO] messages without --verbose
    VERBOSE: bool = False


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CliSettings)
