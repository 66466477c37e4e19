"""
Run options for folder-manager.

The CLI constructs a Config instance and passes it to the orchestration
in app.py. The persisted base directory is not part of it; that value is
owned by base_path.ConfigResolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """
    Top-level configuration for a folder-manager run.
    """

    folder_name: Optional[str] = None
    open_folders: bool = True
    verbosity: int = 0
