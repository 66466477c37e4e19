"""
Abstract interface for opening folders in the system file browser.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class SystemOpener(ABC):
    """
    Abstract interface for file-browser interactions.

    Implementations raise FileBrowserOpenError on failure; callers
    decide whether that is fatal.
    """

    @abstractmethod
    def open_path(self, path: Path) -> None:
        """Show path in the system file browser."""

    @abstractmethod
    def open_downloads(self) -> None:
        """
        Show the user's Downloads folder in the system file browser.

        The folder is a well-known per-user location that has to be
        looked up; it is not assumed to be <home>/Downloads.
        """
