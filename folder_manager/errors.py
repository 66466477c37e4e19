"""
Custom exception types used across folder-manager.

The CLI turns any FolderManagerError into a one-line message on stderr
and a non-zero exit status. FileBrowserOpenError is the exception: the
orchestrator reports it and carries on.
"""

from __future__ import annotations


class FolderManagerError(Exception):
    """Base class for all folder-manager specific errors."""


class ConfigError(FolderManagerError):
    """Raised when the base directory setting cannot be resolved."""


class NoHomeDirectoryError(ConfigError):
    """Raised when the home/profile environment variable is unset."""


class ConfigIOError(ConfigError):
    """Raised when the configuration file cannot be read or written."""


class DirectoryCreateError(FolderManagerError):
    """Raised when the project folder cannot be created."""


class WorkingDirectoryChangeError(FolderManagerError):
    """Raised when changing into the project folder fails."""


class FileBrowserOpenError(FolderManagerError):
    """Raised when the system file browser cannot be launched."""


class InputClosedError(FolderManagerError):
    """Raised when standard input ends while a prompt is waiting."""
