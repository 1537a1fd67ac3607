"""
Location of the layout storage file.

A layoutManager.json in the current working directory takes precedence over
the per-user file in the configuration directory.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .defaults import SETTINGS_FILE_NAME

CONFIG_DIR_ENV = "LAYOUTMANAGER_CONFIG_DIR"


def get_config_dir() -> Path:
    """
    Get platform-specific configuration directory.

    LAYOUTMANAGER_CONFIG_DIR overrides the platform default.

    Returns:
        Path to configuration directory (not created here)
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)

    if os.name == 'nt':  # Windows
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))

    return Path(base) / 'layoutmanager'


def get_local_settings_file(cwd: Optional[Union[str, Path]] = None) -> Path:
    """Path of the layout file in the working directory."""
    return Path(cwd if cwd is not None else os.getcwd()) / SETTINGS_FILE_NAME


def get_global_settings_file() -> Path:
    """Path of the per-user layout file."""
    return get_config_dir() / SETTINGS_FILE_NAME


def get_settings_file(cwd: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the path of the file used for storing layouts.

    Only existence is checked; the content is not validated here.

    Args:
        cwd: Directory to look for a local file in (defaults to os.getcwd())

    Returns:
        Local file if it exists, else the per-user file
    """
    local_file = get_local_settings_file(cwd)
    if local_file.is_file():
        return local_file
    return get_global_settings_file()
