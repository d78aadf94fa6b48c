"""
Pytest fixtures for gitcrn tests.

Provides:
- Isolated HOME with gitcrn environment variables cleared
- FakeRunner: scripted CommandRunner that records invocations
- FakePrompts: PromptProvider returning queued answers
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

from gitcrn.core.interfaces import CommandResult, CommandRunner, PromptProvider


class FakeRunner(CommandRunner):
    """CommandRunner answering from a table keyed by the joined command line."""

    def __init__(
        self,
        responses: Optional[Dict[str, CommandResult]] = None,
        missing: Tuple[str, ...] = (),
    ) -> None:
        self.responses = dict(responses or {})
        self.missing = set(missing)
        self.calls: List[Tuple[List[str], bool, Optional[Path]]] = []

    def run(
        self,
        args: List[str],
        capture: bool = False,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        self.calls.append((list(args), capture, cwd))
        if args[0] in self.missing:
            raise FileNotFoundError(args[0])
        return self.responses.get(" ".join(args), CommandResult(exit_code=0))

    @property
    def commands(self) -> List[str]:
        return [" ".join(args) for args, _, _ in self.calls]


class FakePrompts(PromptProvider):
    """PromptProvider returning queued answers ("" means accept the default)."""

    def __init__(self, answers: Optional[List[str]] = None, confirm_answer: bool = False) -> None:
        self.answers = list(answers or [])
        self.confirm_answer = confirm_answer
        self.asked: List[Tuple[str, Optional[str]]] = []

    def prompt(self, message: str, default: Optional[str] = None) -> str:
        self.asked.append((message, default))
        answer = self.answers.pop(0) if self.answers else ""
        return answer or (default or "")

    def confirm(self, message: str) -> bool:
        self.asked.append((message, None))
        return self.confirm_answer


def ok(stdout: str = "") -> CommandResult:
    """Successful captured result."""
    return CommandResult(exit_code=0, stdout=stdout)


def failed(code: int = 1, stderr: str = "") -> CommandResult:
    """Failed captured result."""
    return CommandResult(exit_code=code, stderr=stderr)


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp directory and clear gitcrn environment variables."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.setenv("GITCRN_NO_UPDATE_CHECK", "1")
    for name in ("GITCRN_TOKEN", "GITEA_TOKEN", "GITCRN_SERVER_URL"):
        monkeypatch.delenv(name, raising=False)
    return home_dir
