"""
Push/pull script service - generates and runs helper scripts in a repository
"""
import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ...core.constants import APP_NAME, DEFAULT_COMMIT_MSG, SCRIPT_MODE, PS_SCRIPT_MODE
from ...core.exceptions import ScriptError
from ...core.interfaces import CommandRunner, PromptProvider
from ...core.logging import get_logger
from ...core.utils import is_windows
from .render import render_push_sh, render_pull_sh, render_push_ps1, render_pull_ps1

logger = get_logger(__name__)

_REMOTE_LIST_SPLIT = re.compile(r"[,\s]+")


# ============================================================
# Helper Functions
# ============================================================

def parse_remote_names(remote_output: str) -> Tuple[List[str], List[str]]:
    """
    Parse `git remote -v` output.

    Returns:
        (fetch_remotes, push_remotes), each deduplicated in first-seen order
    """
    fetch: List[str] = []
    push: List[str] = []

    for line in remote_output.strip().split("\n"):
        fields = line.split()
        if len(fields) < 3:
            continue
        name = fields[0]
        kind = fields[-1].strip("()")
        if kind == "fetch" and name not in fetch:
            fetch.append(name)
        elif kind == "push" and name not in push:
            push.append(name)

    return fetch, push


def parse_remote_list(text: str) -> List[str]:
    """Split comma/whitespace separated remote names, deduplicated"""
    out: List[str] = []
    for item in _REMOTE_LIST_SPLIT.split(text):
        item = item.strip()
        if item and item not in out:
            out.append(item)
    return out


def prefer_non_empty(primary: List[str], fallback: List[str]) -> List[str]:
    """primary unless it is empty"""
    return primary if primary else fallback


# ============================================================
# Script Service
# ============================================================

class ScriptService:
    """
    Generate push/pull scripts for the current repository and run them.

    Scripts are bash (.sh) on POSIX systems and PowerShell (.ps1) on Windows.
    """

    def __init__(
        self,
        runner: CommandRunner,
        prompts: Optional[PromptProvider] = None,
        workdir: Optional[Path] = None,
        windows: Optional[bool] = None,
        on_remotes: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize script service.

        Args:
            runner: Local command runner
            prompts: Prompt provider (required for make)
            workdir: Repository directory (default: current directory)
            windows: Force script flavour (default: detect platform)
            on_remotes: Callback with `git remote -v` output ("" if none)
        """
        self.runner = runner
        self.prompts = prompts
        self.workdir = workdir
        self.windows = is_windows() if windows is None else windows
        self.on_remotes = on_remotes

    @property
    def directory(self) -> Path:
        return self.workdir if self.workdir is not None else Path.cwd()

    def script_path(self, kind: str) -> Path:
        """Path of the push/pull script for this platform"""
        ext = "ps1" if self.windows else "sh"
        return self.directory / f"{kind}.{ext}"

    def _git(self, *args: str) -> str:
        return self.runner.output(["git", *args], cwd=self.directory)

    def _ask(self, message: str, default: str = "") -> str:
        if self.prompts is None:
            raise ScriptError("Interactive input is not available")
        value = self.prompts.prompt(message, default=default or None)
        value = (value or "").strip()
        return value or default

    def make(self, push: bool, pull: bool, overwrite: bool = False) -> List[Path]:
        """
        Prompt for settings and write push and/or pull scripts.

        Args:
            push: Generate push script
            pull: Generate pull script
            overwrite: Replace existing scripts (remake)

        Returns:
            Paths of the created scripts

        Raises:
            ScriptError: Outside a git work tree, on empty remote lists,
                existing scripts (without overwrite) or write errors
        """
        if not push and not pull:
            raise ScriptError("Choose at least one of: --push, --pull or -pp")

        if self._git("rev-parse", "--is-inside-work-tree") != "true":
            raise ScriptError("This command must be run inside a git repository")

        remote_output = self._git("remote", "-v")
        if self.on_remotes:
            self.on_remotes(remote_output)

        fetch_remotes, push_remotes = parse_remote_names(remote_output)
        branch = self._ask("Branch", self._git("branch", "--show-current"))

        created: List[Path] = []

        if push:
            commit_msg = self._ask("Commit message", DEFAULT_COMMIT_MSG)
            default_remotes = ",".join(prefer_non_empty(push_remotes, fetch_remotes))
            remotes = parse_remote_list(
                self._ask("Remotes to push (comma or space)", default_remotes)
            )
            if not remotes:
                raise ScriptError("push needs at least one remote")

            if self.windows:
                content = render_push_ps1(commit_msg, branch, remotes)
            else:
                content = render_push_sh(commit_msg, branch, remotes)
            created.append(self._write("push", content, overwrite))

        if pull:
            default_remotes = ",".join(prefer_non_empty(fetch_remotes, push_remotes))
            remotes = parse_remote_list(
                self._ask("Remotes to pull (comma or space)", default_remotes)
            )
            if not remotes:
                raise ScriptError("pull needs at least one remote")

            if self.windows:
                content = render_pull_ps1(branch, remotes)
            else:
                content = render_pull_sh(branch, remotes)
            created.append(self._write("pull", content, overwrite))

        return created

    def _write(self, kind: str, content: str, overwrite: bool) -> Path:
        path = self.script_path(kind)
        if not overwrite and path.exists():
            raise ScriptError(f"{path.name} already exists. Use: {APP_NAME} remake")

        try:
            path.write_text(content, encoding="utf-8", newline="\n")
            path.chmod(PS_SCRIPT_MODE if self.windows else SCRIPT_MODE)
        except OSError as e:
            raise ScriptError(f"Cannot write {path.name}: {e}") from e
        logger.debug("Wrote %s", path)
        return path

    def run(self, kind: str) -> None:
        """
        Run the generated push or pull script.

        Raises:
            ScriptError: If the script is missing or fails
        """
        path = self.script_path(kind)
        if not path.is_file():
            raise ScriptError(f"{path.name} not found. Run: {APP_NAME} make -pp")

        if self.windows:
            cmd = ["powershell", "-NoProfile", "-ExecutionPolicy", "Bypass", "-File", path.name]
        else:
            cmd = ["bash", path.name]

        try:
            result = self.runner.run(cmd, cwd=self.directory)
        except FileNotFoundError as e:
            raise ScriptError(f"Cannot run {path.name}: {cmd[0]} not found") from e
        if not result.success:
            raise ScriptError(f"Running {path.name} failed (exit code {result.exit_code})")
