"""Briefing enumeration and filename → key derivation."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from briefdeploy.errors import ConfigurationError

logger = logging.getLogger(__name__)

MARKER_SUFFIX = ".thisismy"

_EXTENSION_RE = re.compile(r"\.[^/.]+\Z")
_MARKER_RE = re.compile(re.escape(MARKER_SUFFIX) + r"\Z")
# Hyphen-terminated segments up to the first segment that starts with an ASCII digit.
_BASE_NAME_RE = re.compile(r"^[^-]*-(?:[^-]*-)*?(?=[0-9])")
_TRAILING_HYPHEN_RE = re.compile(r"-\Z")


def derive_key(filename: str) -> str:
    """Derive the lookup key for a briefing filename.

    ``daily-briefing-20240501.pdf`` -> ``daily-briefing``
    ``notes.thisismy.txt`` -> ``notes``
    """
    stem = _EXTENSION_RE.sub("", filename, count=1)
    stem = _MARKER_RE.sub("", stem, count=1)

    match = _BASE_NAME_RE.match(stem)
    base_name = match.group(0) if match else stem

    base_name = _TRAILING_HYPHEN_RE.sub("", base_name, count=1)
    return base_name.lower()


def derive_keys(filenames: Iterable[str]) -> dict[str, str]:
    """Map derived key → filename. Later filenames win on key collisions."""
    file_to_key: dict[str, str] = {}
    for filename in filenames:
        key = derive_key(filename)
        if key in file_to_key:
            logger.debug(
                "Key %r: %s replaces %s", key, filename, file_to_key[key]
            )
        file_to_key[key] = filename
    return file_to_key


def list_briefings(briefings_dir: Path) -> list[str]:
    """Return the briefing filenames in ``briefings_dir``, sorted by name.

    Dotfiles and anything that is not a regular file are skipped.
    """
    if not briefings_dir.is_dir():
        raise ConfigurationError(
            f'The briefings directory "{briefings_dir}" does not exist.'
        )

    names = sorted(
        p.name
        for p in briefings_dir.iterdir()
        if not p.name.startswith(".") and p.is_file()
    )
    logger.info("Found %d briefing(s) in %s", len(names), briefings_dir)
    return names
