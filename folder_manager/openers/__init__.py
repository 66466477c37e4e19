"""
File-browser integration for folder-manager.

SystemOpener is the only platform-bound seam in the package. The
desktop implementation launches the OS file browser; the null
implementation opens nothing and is used by --no-open and by tests.
"""

from .desktop import DesktopOpener
from .interface import SystemOpener
from .null import NullOpener

__all__ = ["DesktopOpener", "NullOpener", "SystemOpener"]
