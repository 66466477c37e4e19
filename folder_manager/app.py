"""
High-level orchestration for folder-manager.

A run:
  - confirms a sanitized folder name with the user,
  - resolves the configured base directory,
  - creates (or reuses) <base>/<name> and changes into it, and
  - opens that folder and the Downloads folder in the file browser.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .base_path import ConfigResolver
from .config import Config
from .errors import FileBrowserOpenError
from .naming import confirm_folder_name
from .openers import DesktopOpener, NullOpener, SystemOpener
from .prompts import Reader
from .workspace import change_working_directory, ensure_directory

LOG = logging.getLogger(__name__)


def run_folder_manager(
    config: Config,
    resolver: Optional[ConfigResolver] = None,
    opener: Optional[SystemOpener] = None,
    reader: Optional[Reader] = None,
) -> Path:
    """
    Entry point for the main CLI command.

    Returns the project folder that the process is now working in. Any
    fatal failure propagates as a FolderManagerError; a directory created
    before the failure is left in place.
    """

    LOG.debug("Starting folder-manager with config: %s", config)

    if resolver is None:
        resolver = ConfigResolver(reader=reader)
    if opener is None:
        opener = DesktopOpener() if config.open_folders else NullOpener()

    folder_name = confirm_folder_name(config.folder_name or "", reader)
    base_path = resolver.resolve()
    full_path = Path(base_path) / folder_name

    if ensure_directory(full_path):
        print(f"Directory created: {full_path}")
    else:
        print(f"Directory already exists: {full_path}")

    change_working_directory(full_path)
    _open_folders(opener, full_path)
    return full_path


def _open_folders(opener: SystemOpener, full_path: Path) -> None:
    """
    Open the project folder and then Downloads, reporting failures only.
    """

    try:
        opener.open_path(full_path)
    except FileBrowserOpenError as exc:
        LOG.warning("%s", exc)

    try:
        opener.open_downloads()
    except FileBrowserOpenError as exc:
        LOG.warning("%s", exc)
