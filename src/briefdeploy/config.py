"""Configuration loading from environment variables and briefdeploy.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from briefdeploy.errors import ConfigurationError

_CONFIG_FILENAME = "briefdeploy.toml"
DEFAULT_COMMIT_MESSAGE = "Deploy updated briefings and root.txt"


@dataclass
class GitConfig:
    """How deployments invoke git."""

    executable: str = "git"
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    cwd: Path | None = None


@dataclass
class BriefdeployConfig:
    """Top-level briefdeploy configuration."""

    briefings_dir: Path = field(default_factory=lambda: Path.cwd() / "briefings")
    root_file: Path = field(default_factory=lambda: Path.cwd() / "root.txt")
    git: GitConfig = field(default_factory=GitConfig)
    log_level: str = "WARNING"


def _resolve(value: str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else Path.cwd() / path


def load_config(config_path: Path | None = None) -> BriefdeployConfig:
    """Load configuration from environment variables and optional briefdeploy.toml.

    Priority: environment variables > briefdeploy.toml > defaults.
    """
    file_data: dict = {}
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(f'The config file "{config_path}" does not exist.')
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.briefdeploy/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".briefdeploy" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    paths_data = file_data.get("paths", {})
    git_data = file_data.get("git", {})

    git_cwd = os.getenv("BRIEFDEPLOY_GIT_CWD", git_data.get("cwd"))

    return BriefdeployConfig(
        briefings_dir=_resolve(
            os.getenv("BRIEFDEPLOY_BRIEFINGS_DIR", paths_data.get("briefings_dir", "briefings"))
        ),
        root_file=_resolve(
            os.getenv("BRIEFDEPLOY_ROOT_FILE", paths_data.get("root_file", "root.txt"))
        ),
        git=GitConfig(
            executable=os.getenv("BRIEFDEPLOY_GIT", git_data.get("executable", "git")),
            commit_message=os.getenv(
                "BRIEFDEPLOY_COMMIT_MESSAGE",
                git_data.get("commit_message", DEFAULT_COMMIT_MESSAGE),
            ),
            cwd=_resolve(git_cwd) if git_cwd else None,
        ),
        log_level=os.getenv("BRIEFDEPLOY_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
