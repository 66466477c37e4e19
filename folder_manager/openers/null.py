"""
Opener that records requests instead of launching anything.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .interface import SystemOpener

LOG = logging.getLogger(__name__)


class NullOpener(SystemOpener):
    def __init__(self) -> None:
        self.opened_paths: List[Path] = []
        self.downloads_opened = 0

    def open_path(self, path: Path) -> None:
        LOG.info("Not opening %s (file browser disabled)", path)
        self.opened_paths.append(path)

    def open_downloads(self) -> None:
        LOG.info("Not opening Downloads folder (file browser disabled)")
        self.downloads_opened += 1
