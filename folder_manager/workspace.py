"""
Directory materialization for the confirmed project folder.

Only the project folder itself is created, one level deep: a missing
base directory is an error, not something to build silently.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import DirectoryCreateError, WorkingDirectoryChangeError

LOG = logging.getLogger(__name__)


def directory_exists(path: Path) -> bool:
    return path.is_dir()


def ensure_directory(path: Path) -> bool:
    """
    Make sure path exists as a directory.

    Returns True if the directory was created by this call and False if
    it was already there. A non-directory at path is left untouched and
    reported as a DirectoryCreateError.
    """

    if directory_exists(path):
        LOG.debug("Directory %s already exists", path)
        return False

    if path.exists():
        raise DirectoryCreateError(f"cannot create directory {path}: a file with that name already exists")

    try:
        path.mkdir()
    except FileNotFoundError as exc:
        raise DirectoryCreateError(
            f"cannot create directory {path}: parent directory {path.parent} does not exist"
        ) from exc
    except FileExistsError as exc:
        # Something appeared between the check and the mkdir.
        if directory_exists(path):
            return False
        raise DirectoryCreateError(f"cannot create directory {path}: {exc}") from exc
    except OSError as exc:
        raise DirectoryCreateError(f"cannot create directory {path}: {exc}") from exc

    LOG.info("Created directory %s", path)
    return True


def change_working_directory(path: Path) -> None:
    try:
        os.chdir(path)
    except OSError as exc:
        raise WorkingDirectoryChangeError(f"could not change directory to {path}: {exc}") from exc
    LOG.debug("Working directory is now %s", path)
