"""
Desktop file-browser opener.

Windows goes through os.startfile, macOS through `open` and everything
else through `xdg-open`. Launches are fire-and-forget: the browser
process is not waited on.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

import platformdirs

from ..errors import FileBrowserOpenError
from .interface import SystemOpener

LOG = logging.getLogger(__name__)


class DesktopOpener(SystemOpener):
    def __init__(self, platform: Optional[str] = None) -> None:
        self._platform = sys.platform if platform is None else platform

    def open_path(self, path: Path) -> None:
        LOG.debug("Opening %s in the file browser", path)
        try:
            if self._platform == "win32":
                os.startfile(str(path))  # type: ignore[attr-defined]
            elif self._platform == "darwin":
                subprocess.Popen(["open", str(path)])
            else:
                subprocess.Popen(["xdg-open", str(path)])
        except OSError as exc:
            raise FileBrowserOpenError(f"could not open {path} in the file browser: {exc}") from exc

    def open_downloads(self) -> None:
        try:
            downloads = platformdirs.user_downloads_path()
        except Exception as exc:  # noqa: BLE001
            raise FileBrowserOpenError(f"could not locate Downloads folder: {exc}") from exc
        self.open_path(downloads)
