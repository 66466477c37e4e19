"""
Line-oriented terminal prompts.

Every question folder-manager asks goes through ask() so that tests can
substitute a scripted reader for the builtin input().
"""

from __future__ import annotations

from typing import Callable, Optional

from .errors import InputClosedError

Reader = Callable[[str], str]


def ask(prompt: str, reader: Optional[Reader] = None) -> str:
    """
    Show prompt and return the line typed by the user.

    reader defaults to the builtin input(). End of input raises
    InputClosedError; otherwise the callers' loops would spin forever on
    a closed stdin.
    """

    if reader is None:
        reader = input
    try:
        return reader(prompt)
    except EOFError as exc:
        raise InputClosedError("standard input closed while waiting for an answer") from exc


def is_affirmative(response: str) -> bool:
    """Only an initial 'y' or 'Y' counts as yes; empty input is no."""

    return response[:1].lower() == "y"


def confirm(prompt: str, reader: Optional[Reader] = None) -> bool:
    return is_affirmative(ask(prompt, reader))
