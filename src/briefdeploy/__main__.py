"""Entry point: python -m briefdeploy [run|update] [--config PATH]

- No args / "run": Refresh root.txt, then prompt to deploy via git
- "update":        Refresh and show root.txt only
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from briefdeploy.config import load_config
from briefdeploy.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _usage() -> None:
    print("Usage: python -m briefdeploy [run|update] [--config PATH]")
    print("  run     Refresh root.txt and optionally deploy (default)")
    print("  update  Refresh root.txt without deploying")


def _parse_args(argv: list[str]) -> tuple[str, Path | None] | None:
    cmd = "run"
    config_path: Path | None = None
    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg == "--config":
            if not args:
                return None
            config_path = Path(args.pop(0))
        elif arg in ("run", "update"):
            cmd = arg
        else:
            return None
    return cmd, config_path


def main(argv: list[str] | None = None) -> int:
    parsed = _parse_args(sys.argv[1:] if argv is None else argv)
    if parsed is None:
        _usage()
        return 1
    cmd, config_path = parsed

    from briefdeploy.core import Briefdeploy

    try:
        config = load_config(config_path)
        _setup_logging(config.log_level)

        app = Briefdeploy(config)
        asyncio.run(app.run(interactive=cmd == "run"))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
