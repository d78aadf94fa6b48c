"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass
class CommandResult:
    """Command execution result"""
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    success: bool = True

    def __post_init__(self):
        """Set success based on exit_code"""
        self.success = self.exit_code == 0

    @property
    def output(self) -> str:
        """Combined stdout/stderr, trimmed"""
        return (self.stdout + self.stderr).strip()


class CommandRunner(ABC):
    """Local process execution interface"""

    @abstractmethod
    def run(
        self,
        args: List[str],
        capture: bool = False,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        """
        Run a command.

        With capture=False the process inherits stdin/stdout/stderr.
        Raises FileNotFoundError if the executable does not exist.
        """
        pass

    def output(self, args: List[str], cwd: Optional[Path] = None) -> str:
        """Trimmed combined output of a command, or "" if it fails"""
        try:
            result = self.run(args, capture=True, cwd=cwd)
        except OSError:
            return ""
        if not result.success:
            return ""
        return result.output


class PromptProvider(ABC):
    """User prompt interface"""

    @abstractmethod
    def prompt(self, message: str, default: Optional[str] = None) -> str:
        """Prompt user for input"""
        pass

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Prompt user for a yes/no answer (default no)"""
        pass
