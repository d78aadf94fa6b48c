"""
Local process execution
"""
import subprocess
from pathlib import Path
from typing import List, Optional

from ...core.interfaces import CommandResult, CommandRunner
from ...core.logging import get_logger

logger = get_logger(__name__)


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by subprocess.run (never uses a shell)"""

    def run(
        self,
        args: List[str],
        capture: bool = False,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        """
        Run a command.

        Args:
            args: Command and arguments
            capture: Capture stdout/stderr instead of inheriting the terminal
                (undecodable bytes become U+FFFD)
            cwd: Working directory (default: current directory)

        Returns:
            CommandResult

        Raises:
            FileNotFoundError: If the executable is not on PATH
        """
        logger.debug("exec: %s", " ".join(args))
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            capture_output=capture,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        return CommandResult(
            exit_code=result.returncode,
            stdout=result.stdout if capture else "",
            stderr=result.stderr if capture else "",
        )
