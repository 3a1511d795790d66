"""Exception types raised by briefdeploy."""

from __future__ import annotations


class BriefdeployError(Exception):
    """Base class for briefdeploy errors."""


class ConfigurationError(BriefdeployError):
    """A configured path (briefings directory or config file) is missing."""


class DeploymentError(BriefdeployError):
    """A git step of the deployment failed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Deployment failed: {detail}")
        self.detail = detail
