"""
Repository domain models
"""
from dataclasses import dataclass
from typing import Optional

from ...core.exceptions import RepoSpecError


@dataclass(frozen=True)
class RepoRef:
    """owner/repo reference on the Gitea server"""
    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    def ssh_url(self, alias: str) -> str:
        """SCP-style remote URL through the SSH alias"""
        return f"{alias}:{self.owner}/{self.name}.git"


def _split_owner_repo(text: str) -> Optional[RepoRef]:
    parts = text.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return RepoRef(owner=parts[0], name=parts[1])


def parse_owner_repo(text: str) -> RepoRef:
    """
    Parse "owner/repo" (leading "/" and trailing ".git" allowed).

    Raises:
        RepoSpecError: If the input is not exactly two non-empty segments
    """
    s = text.strip().removeprefix("/").removesuffix(".git")
    ref = _split_owner_repo(s)
    if ref is None:
        raise RepoSpecError("Format must be owner/repo")
    return ref


def build_repo_url(text: str, alias: str) -> str:
    """
    Build "alias:owner/repo.git" from user input.

    Accepts "owner/repo", "owner/repo.git" and "alias:owner/repo.git".
    Full URLs are rejected.

    Raises:
        RepoSpecError: If the input cannot be mapped to owner/repo
    """
    s = text.strip()
    if not s:
        raise RepoSpecError("Repository must not be empty")
    if "://" in s:
        raise RepoSpecError("Use owner/repo format, not a full URL")

    s = s.removeprefix(f"{alias}:")
    s = s.removesuffix(".git").removeprefix("/")

    ref = _split_owner_repo(s)
    if ref is None:
        raise RepoSpecError("Repository must be in owner/repo format")
    return ref.ssh_url(alias)
