"""
Filename helpers for Markdown output.

Titles come straight from the export, so they can contain characters that are
illegal in Windows filenames and arbitrary runs of whitespace.
"""

from __future__ import annotations

import re
from typing import Set

from .model import UNTITLED

MARKDOWN_EXTENSION = ".md"
MAX_NAME_LENGTH = 100

_ILLEGAL_CHARS = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r"\s+")


def sanitize_filename(title: str) -> str:
    # Removes forbidden Windows characters, collapses whitespace,
    # trims and limits length to 100 characters.
    # A title made only of illegal characters falls back to the placeholder.
    name = _ILLEGAL_CHARS.sub("", title or "")
    name = _WHITESPACE.sub(" ", name).strip()
    name = name[:MAX_NAME_LENGTH]
    if not name.strip():
        return sanitize_filename(UNTITLED)
    return name


def unique_filename(base: str, used: Set[str]) -> str:
    """
    Return "<base>.md", or "<base> (N).md" if that name was already used.

    `used` holds case-folded names written earlier in the same run and is
    updated in place. Case-folding keeps two titles that differ only in case
    from overwriting each other on case-insensitive filesystems.
    """
    candidate = f"{base}{MARKDOWN_EXTENSION}"
    n = 2
    while candidate.casefold() in used:
        candidate = f"{base} ({n}){MARKDOWN_EXTENSION}"
        n += 1

    used.add(candidate.casefold())
    return candidate
