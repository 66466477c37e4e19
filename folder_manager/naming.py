"""
Folder-name sanitization and interactive confirmation.

sanitize_folder_name() is pure and idempotent, which the confirmation
loop relies on: it re-sanitizes whatever the user types after every
rejection.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Optional

from .prompts import Reader, ask, confirm
from .settings import JOIN_CHARACTER, MAX_FOLDER_NAME_LENGTH, RESERVED_CHARACTERS

LOG = logging.getLogger(__name__)


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def sanitize_folder_name(raw: str) -> str:
    """
    Turn raw user input into a filesystem-safe folder name.

    Reserved characters and control characters are dropped, any other
    whitespace character becomes a single underscore, and the result is
    cut to MAX_FOLDER_NAME_LENGTH characters. Tabs and newlines are
    control characters, so they are dropped rather than mapped.
    """

    output: list[str] = []
    for ch in raw:
        if len(output) >= MAX_FOLDER_NAME_LENGTH:
            break
        if ch in RESERVED_CHARACTERS or _is_control(ch):
            continue
        output.append(JOIN_CHARACTER if ch.isspace() else ch)
    return "".join(output)


def confirm_folder_name(raw: str, reader: Optional[Reader] = None) -> str:
    """
    Ask the user to accept the sanitized form of raw.

    A rejection asks for a brand-new name rather than an edit of the
    sanitized one. There is no retry limit; the loop only ends on a yes.
    """

    candidate = raw
    while True:
        sanitized = sanitize_folder_name(candidate)
        if sanitized != candidate:
            LOG.debug("Sanitized %r to %r", candidate, sanitized)
        print(f'Sanitized folder name: "{sanitized}"')

        if confirm("Do you want to use this name? (y/n): ", reader):
            return sanitized

        candidate = ask("Enter a new folder name: ", reader)
