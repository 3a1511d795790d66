"""Interactive yes/no prompts on stdin/stdout."""

from __future__ import annotations

import re
import sys

_YES_RE = re.compile(r"^y(es)?$", re.IGNORECASE)

EDIT_QUESTION = "\nDo you want to manually edit root.txt before deploying? (yes/no): "
DEPLOY_QUESTION = "Do you want to deploy? (yes/no): "


def is_affirmative(answer: str | None) -> bool:
    if answer is None:
        return False
    return bool(_YES_RE.match(answer.strip()))


def _read_input(question: str) -> str | None:
    sys.stdout.write(question)
    sys.stdout.flush()
    raw = sys.stdin.buffer.readline()
    if not raw:
        return None
    return raw.decode("utf-8", errors="replace").rstrip("\n")


def ask(question: str) -> bool:
    """Ask ``question``; True only for y/yes. EOF counts as no."""
    return is_affirmative(_read_input(question))


def confirm_deploy() -> bool:
    """Offer a manual edit of root.txt first, then ask whether to deploy."""
    if ask(EDIT_QUESTION):
        print("Please edit root.txt as needed and rerun the script to deploy.")
        return False

    return ask(DEPLOY_QUESTION)
