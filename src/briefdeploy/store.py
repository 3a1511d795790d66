"""root.txt persistence — parse, merge and format ``key: value`` entries.

The file is read once per run, merged in memory and rewritten wholesale.
Lines that do not look like ``key: value`` are dropped on read.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_ENTRY_RE = re.compile(r"^([^:]+):\s*(.+)$")


def parse_entries(text: str) -> dict[str, str]:
    entries: dict[str, str] = {}
    for line in text.split("\n"):
        match = _ENTRY_RE.match(line.removesuffix("\r"))
        if match:
            entries[match.group(1)] = match.group(2)
    return entries


def format_entries(entries: dict[str, str]) -> str:
    return "\n".join(f"{key}: {value}" for key, value in entries.items())


def merge_entries(existing: dict[str, str], fresh: dict[str, str]) -> dict[str, str]:
    """Drop keys missing from ``fresh``, then overlay ``fresh`` onto ``existing``.

    Mutates and returns ``existing``. Retained keys keep their position;
    new keys are appended in ``fresh`` order.
    """
    for key in [k for k in existing if k not in fresh]:
        logger.info("Removing stale entry %r (%s)", key, existing[key])
        del existing[key]

    for key, value in fresh.items():
        if key not in existing:
            logger.info("Adding entry %r (%s)", key, value)
        elif existing[key] != value:
            logger.info("Updating entry %r: %s -> %s", key, existing[key], value)
    existing.update(fresh)
    return existing


def read_entries(path: Path) -> dict[str, str]:
    """Load entries from ``path``. A missing file yields an empty mapping."""
    if not path.exists():
        return {}
    return parse_entries(path.read_text(encoding="utf-8"))


def write_entries(path: Path, entries: dict[str, str]) -> None:
    path.write_text(format_entries(entries), encoding="utf-8")
