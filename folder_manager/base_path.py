"""
Resolution of the persisted base directory.

The base directory is stored as a single line in a per-user
configuration file. On first run (or when the stored value is blank) the
user is offered <home>/Projects and may type a different path instead;
the answer is written once and reused on every later run.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigIOError, NoHomeDirectoryError
from .prompts import Reader, ask, confirm
from .settings import CONFIG_FILE_NAME, DEFAULT_BASE_SUBDIR, config_directory, home_env_var

LOG = logging.getLogger(__name__)


class ConfigResolver:
    """
    Locate, read or interactively create the base directory setting.

    environ, platform and reader default to the running process; tests
    pass their own.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
        reader: Optional[Reader] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._platform = sys.platform if platform is None else platform
        self._reader = reader

    def home_directory(self) -> Path:
        var = home_env_var(self._platform)
        home = self._environ.get(var)
        if not home:
            raise NoHomeDirectoryError(f"could not determine user profile directory (${var} is not set)")
        return Path(home)

    def config_path(self) -> Path:
        """
        Return the configuration file path, creating its directory.
        """

        directory = config_directory(self.home_directory(), self._platform)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(f"could not create configuration directory {directory}: {exc}") from exc
        return directory / CONFIG_FILE_NAME

    def resolve(self) -> str:
        """
        Return the configured base directory, prompting for it if needed.
        """

        config_file = self.config_path()

        if config_file.exists():
            base_path = self._read(config_file)
            if base_path.strip():
                LOG.debug("Read base directory %r from %s", base_path, config_file)
                return base_path
            LOG.warning("Configuration file %s is empty; asking for the base directory again", config_file)
        else:
            print("Config file not found.")

        base_path = self._prompt_for_base_path()
        self._write(config_file, base_path)
        print("Saved base directory to config file.")
        return base_path

    def _prompt_for_base_path(self) -> str:
        suggested = str(self.home_directory() / DEFAULT_BASE_SUBDIR)
        print(f"Suggested default base directory: {suggested}")

        if confirm("Use this as your base directory? (y/n): ", self._reader):
            return suggested

        while True:
            base_path = ask("Enter your preferred base directory: ", self._reader).rstrip("\r\n")
            if base_path.strip():
                return base_path
            print("The base directory cannot be empty.")

    def _read(self, config_file: Path) -> str:
        try:
            # utf-8-sig drops the BOM that some Windows editors prepend.
            with config_file.open("r", encoding="utf-8-sig", newline="") as handle:
                first_line = handle.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigIOError(f"could not read config file {config_file}: {exc}") from exc
        return first_line.rstrip("\r\n")

    def _write(self, config_file: Path, base_path: str) -> None:
        try:
            with config_file.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(f"{base_path}\n")
        except OSError as exc:
            raise ConfigIOError(f"could not write config file {config_file}: {exc}") from exc
        LOG.info("Saved base directory %r to %s", base_path, config_file)

