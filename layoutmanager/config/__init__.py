"""
Configuration for layoutmanager.

This module holds the built-in default layout, the capture vocabulary and
the lookup of the layout storage file.
"""

from .defaults import DEFAULT_LAYOUT, SETTINGS_FILE_NAME
from .paths import get_config_dir, get_settings_file

__all__ = ["DEFAULT_LAYOUT", "SETTINGS_FILE_NAME", "get_config_dir", "get_settings_file"]
