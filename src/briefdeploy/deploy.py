"""Git deployment — stage root.txt and the briefings, commit, push."""

from __future__ import annotations

import asyncio
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from briefdeploy.config import DEFAULT_COMMIT_MESSAGE
from briefdeploy.errors import DeploymentError

logger = logging.getLogger(__name__)


@dataclass
class GitDeployer:
    """Runs git as a subprocess, one command at a time.

    Commands are passed as argument lists, never through a shell. A failed
    step raises DeploymentError; anything staged before it stays staged.
    """

    executable: str = "git"
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    cwd: Path | None = None

    async def _git(self, *args: str) -> str:
        cmd = [self.executable, *args]
        logger.debug("Running: %s", " ".join(cmd))

        try:
            result = await asyncio.to_thread(
                subprocess.run,
                cmd,
                capture_output=True,
                text=True,
                cwd=self.cwd,
            )
        except FileNotFoundError:
            raise DeploymentError(f"`{self.executable}` not found. Is git installed?")

        if result.returncode != 0:
            stderr = result.stderr.strip() or result.stdout.strip()
            logger.error("git error (rc=%d): %s", result.returncode, stderr)
            raise DeploymentError(
                f"Command failed: {' '.join(cmd)}\n{stderr or 'unknown error'}"
            )
        return result.stdout

    async def check_installed(self) -> str:
        version = await self._git("--version")
        logger.debug("Using %s", version.strip())
        return version

    async def deploy(
        self, root_file: Path, briefings_dir: Path, briefing_files: list[str]
    ) -> None:
        await self.check_installed()

        await self._git("add", str(root_file))
        for filename in briefing_files:
            await self._git("add", str(briefings_dir / filename))

        await self._git("commit", "-m", self.commit_message)

        print("\nDeploying changes...")
        await self._git("push")

        print("Deployment completed successfully.")
