"""
Named constants for folder-manager.

Everything that would otherwise be a scattered literal (directory and
file names, the name length bound, the reserved character set) lives
here so the rest of the package can import it from one place.
"""

from __future__ import annotations

from pathlib import Path

APP_DIR_NAME = "FolderManager"
CONFIG_FILE_NAME = "config.txt"
DEFAULT_BASE_SUBDIR = "Projects"

# Longest folder name produced by sanitization; longer input is cut silently.
MAX_FOLDER_NAME_LENGTH = 255

RESERVED_CHARACTERS = '<>:"/\\|?*'

# Replaces each whitespace character in a sanitized folder name.
JOIN_CHARACTER = "_"

WINDOWS_HOME_ENV_VAR = "USERPROFILE"
POSIX_HOME_ENV_VAR = "HOME"


def home_env_var(platform: str) -> str:
    """Return the environment variable naming the user's home on platform."""

    return WINDOWS_HOME_ENV_VAR if platform == "win32" else POSIX_HOME_ENV_VAR


def config_directory(home: Path, platform: str) -> Path:
    """
    Return the per-user application-data directory for folder-manager.

    Windows keeps it under AppData/Local, macOS under Application Support
    and every other platform under ~/.config.
    """

    if platform == "win32":
        return home / "AppData" / "Local" / APP_DIR_NAME
    if platform == "darwin":
        return home / "Library" / "Application Support" / APP_DIR_NAME
    return home / ".config" / APP_DIR_NAME
