"""briefdeploy workflow.

1. Enumerate the briefings directory and derive a key per file
2. Merge the derived keys into root.txt and rewrite it
3. Show the updated root.txt
4. Ask whether to edit by hand or deploy
5. Deploy via git when confirmed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from briefdeploy.config import BriefdeployConfig
from briefdeploy.deploy import GitDeployer
from briefdeploy.keys import derive_keys, list_briefings
from briefdeploy.prompt import confirm_deploy
from briefdeploy.store import format_entries, merge_entries, read_entries, write_entries

logger = logging.getLogger(__name__)


@dataclass
class RefreshResult:
    """Outcome of syncing root.txt with the briefings directory."""

    briefing_files: list[str]
    entries: dict[str, str]


class Briefdeploy:
    """Keeps root.txt in sync with the briefings directory."""

    def __init__(self, config: BriefdeployConfig) -> None:
        self.config = config
        self.deployer = GitDeployer(
            executable=config.git.executable,
            commit_message=config.git.commit_message,
            cwd=config.git.cwd,
        )

    def refresh(self) -> RefreshResult:
        """Rewrite root.txt from the current briefings. Raises ConfigurationError."""
        briefing_files = list_briefings(self.config.briefings_dir)
        fresh = derive_keys(briefing_files)

        existing = read_entries(self.config.root_file)
        entries = merge_entries(existing, fresh)
        write_entries(self.config.root_file, entries)

        return RefreshResult(briefing_files=briefing_files, entries=entries)

    def show(self, entries: dict[str, str]) -> None:
        print(f"\nUpdated {self.config.root_file.name}:")
        print("------------------")
        print(format_entries(entries))

    async def run(self, *, interactive: bool = True) -> bool:
        """Refresh, display and, if confirmed, deploy. Returns True if deployed."""
        result = self.refresh()
        self.show(result.entries)

        if not interactive:
            return False

        if not confirm_deploy():
            print("Process terminated by the user.")
            return False

        await self.deployer.deploy(
            self.config.root_file, self.config.briefings_dir, result.briefing_files
        )
        return True
