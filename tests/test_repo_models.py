"""
Tests for owner/repo parsing and SSH remote URL building.
"""
from __future__ import annotations

import pytest

from gitcrn.core.exceptions import RepoSpecError
from gitcrn.domain.repo import RepoRef, build_repo_url, parse_owner_repo


class TestBuildRepoURL:
    """Test alias:owner/repo.git construction."""

    @pytest.mark.parametrize(
        "text",
        ["vltc/kapri", "vltc/kapri.git", "gitcrn:vltc/kapri.git", "  /vltc/kapri  "],
    )
    def test_accepted_forms(self, text: str) -> None:
        """Short, .git and alias-prefixed forms map to the same URL."""
        assert build_repo_url(text, "gitcrn") == "gitcrn:vltc/kapri.git"

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "https://example.com/vltc/kapri.git", "vltc", "group/vltc/kapri", "vltc/", "/kapri"],
    )
    def test_rejected_forms(self, text: str) -> None:
        """Empty, URL and wrong segment counts are rejected."""
        with pytest.raises(RepoSpecError):
            build_repo_url(text, "gitcrn")

    def test_custom_alias(self) -> None:
        """The configured alias is used as prefix."""
        assert build_repo_url("a/b", "work") == "work:a/b.git"


class TestParseOwnerRepo:
    """Test owner/repo parsing for the API."""

    def test_plain(self) -> None:
        """owner/repo splits into a RepoRef."""
        assert parse_owner_repo("crnbg/platform") == RepoRef("crnbg", "platform")

    def test_git_suffix_and_slash(self) -> None:
        """Leading slash and .git suffix are tolerated."""
        assert parse_owner_repo("/vltc/kapri.git") == RepoRef("vltc", "kapri")

    @pytest.mark.parametrize("text", ["kapri", "a/b/c", "/", ""])
    def test_invalid(self, text: str) -> None:
        """Anything but two segments is an error."""
        with pytest.raises(RepoSpecError, match="owner/repo"):
            parse_owner_repo(text)

    def test_ref_formatting(self) -> None:
        """RepoRef renders as owner/repo and as an SSH URL."""
        ref = RepoRef("vltc", "kapri")
        assert str(ref) == "vltc/kapri"
        assert ref.ssh_url("gitcrn") == "gitcrn:vltc/kapri.git"

    def test_only_one_git_suffix_removed(self) -> None:
        """A single trailing .git is stripped, nothing more."""
        assert parse_owner_repo("vltc/kapri.git.git") == RepoRef("vltc", "kapri.git")
