"""
Update notice service
"""
import os
from typing import Callable, Optional

import httpx

from ...core.constants import ENV_NO_UPDATE_CHECK, UPDATE_LINUX_CMD, UPDATE_WINDOWS_CMD
from ...core.logging import get_logger
from ...core.utils import is_windows
from ...infrastructure.releases.github import fetch_latest_release_tag
from .version import compare_semver

logger = get_logger(__name__)

# Commands that never trigger the release lookup
SKIP_COMMANDS = frozenset({"completion"})


def should_check_updates(command: Optional[str]) -> bool:
    """Update checks run unless disabled by env or for completion output"""
    if os.getenv(ENV_NO_UPDATE_CHECK):
        return False
    return command not in SKIP_COMMANDS


def update_command() -> str:
    """Platform specific self-update command"""
    return UPDATE_WINDOWS_CMD if is_windows() else UPDATE_LINUX_CMD


class UpdateChecker:
    """Compares the running version with the latest published release"""

    def __init__(self, fetch_latest: Callable[[], str] = fetch_latest_release_tag):
        self.fetch_latest = fetch_latest

    def newer_release(self, current_version: str) -> Optional[str]:
        """
        Latest release tag if it is newer than current_version.

        Network and parse failures are logged and reported as "no update".
        """
        try:
            latest = self.fetch_latest()
        except (httpx.HTTPError, ValueError) as e:
            logger.debug("Update check skipped: %s", e)
            return None

        cmp, ok = compare_semver(latest, current_version)
        if not ok or cmp <= 0:
            return None
        return latest
