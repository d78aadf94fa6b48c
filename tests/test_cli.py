"""
Tests for the typer command layer (typer.testing.CliRunner).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest
from typer.testing import CliRunner

from conftest import FakeRunner, ok
from gitcrn import __version__
from gitcrn.adapters.cli import app as app_module
from gitcrn.adapters.cli.app import app, expand_root_aliases

runner = CliRunner()


def use_runner(monkeypatch: pytest.MonkeyPatch, module: str, fake: FakeRunner) -> FakeRunner:
    monkeypatch.setattr(f"gitcrn.adapters.cli.{module}.SubprocessRunner", lambda: fake)
    return fake


def with_tailscale() -> FakeRunner:
    return FakeRunner({"tailscale version": ok("1.70.0")})


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

class TestRoot:
    """Test root options, aliases and the update notice."""

    def test_version_command(self) -> None:
        """version prints name, version and link."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"gitcrn {__version__}" in result.output
        assert "Made by:" in result.output

    def test_version_flag(self) -> None:
        """-v is an eager alias of version."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert f"gitcrn {__version__}" in result.output

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["-gc", "--force"], ["generate", "config", "--force"]),
            (["gc"], ["generate", "config"]),
            (["-pp"], ["make", "--push", "--pull"]),
            (["clone", "-pp"], ["clone", "-pp"]),
            ([], []),
        ],
    )
    def test_expand_root_aliases(self, args: list, expected: list) -> None:
        """Only a leading shorthand is rewritten."""
        assert expand_root_aliases(args) == expected

    def test_update_notice(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A newer release is announced before the command runs."""
        monkeypatch.delenv("GITCRN_NO_UPDATE_CHECK")

        class Checker:
            def newer_release(self, current: str) -> Optional[str]:
                return "v9.9.9"

        monkeypatch.setattr(app_module, "UpdateChecker", Checker)

        result = runner.invoke(app, ["version"])
        assert "New version available: v9.9.9" in result.output
        assert "Update with:" in result.output

        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "New version available: v9.9.9" in result.output
        assert f"gitcrn {__version__}" in result.output

        result = runner.invoke(app, ["completion", "bash"])
        assert "New version" not in result.output


# ---------------------------------------------------------------------------
# init / doctor
# ---------------------------------------------------------------------------

class TestInit:
    """Test SSH alias setup."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch, home: Path) -> None:
        """--default writes the default alias block."""
        use_runner(monkeypatch, "ssh", with_tailscale())

        result = runner.invoke(app, ["init", "--default"])

        assert result.exit_code == 0, result.output
        assert "SSH config updated" in result.output
        assert "Host gitcrn -> 100.91.132.35:222 as git" in result.output
        assert "HostName 100.91.132.35" in (home / ".ssh" / "config").read_text()

    def test_already_present(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Second run reports no change."""
        use_runner(monkeypatch, "ssh", with_tailscale())
        runner.invoke(app, ["init", "--default"])

        result = runner.invoke(app, ["init", "--default"])

        assert result.exit_code == 0
        assert "already present" in result.output

    def test_custom(self, monkeypatch: pytest.MonkeyPatch, home: Path) -> None:
        """--custom uses the given host, user and port."""
        use_runner(monkeypatch, "ssh", with_tailscale())

        result = runner.invoke(
            app, ["init", "--custom", "--host", "10.0.0.9", "--port", "2222", "--user", "me"]
        )

        assert result.exit_code == 0, result.output
        content = (home / ".ssh" / "config").read_text()
        assert "HostName 10.0.0.9" in content
        assert "Port 2222" in content

    @pytest.mark.parametrize("args", [[], ["--default", "--custom"]])
    def test_mode_required(self, args: list) -> None:
        """Exactly one mode must be chosen."""
        result = runner.invoke(app, ["init", *args])
        assert result.exit_code == 1
        assert "exactly one mode" in result.output

    def test_custom_validation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing custom values fail before touching tailscale."""
        fake = use_runner(monkeypatch, "ssh", with_tailscale())
        result = runner.invoke(app, ["init", "--custom", "--user", "git", "--port", "22"])
        assert result.exit_code == 1
        assert "--host is required" in result.output
        assert fake.calls == []

    def test_tailscale_missing_without_input(self, monkeypatch: pytest.MonkeyPatch, home: Path) -> None:
        """Closed stdin answers no and still reports the install hint."""
        use_runner(monkeypatch, "ssh", FakeRunner(missing=("tailscale",)))

        result = runner.invoke(app, ["init", "--default"], input="")

        assert result.exit_code == 1
        assert "Aborted" not in result.output
        assert "Install Tailscale and retry" in result.output
        assert not (home / ".ssh" / "config").exists()

    def test_tailscale_missing(self, monkeypatch: pytest.MonkeyPatch, home: Path) -> None:
        """Without tailscale nothing is written."""
        use_runner(monkeypatch, "ssh", FakeRunner(missing=("tailscale",)))

        result = runner.invoke(app, ["init", "--default"], input="da\n")

        assert result.exit_code == 1
        assert "Install Tailscale" in result.output
        assert "tailscale.com" in result.output
        assert not (home / ".ssh" / "config").exists()


class TestDoctor:
    """Test the doctor command output."""

    def test_reports_warnings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing tools show as WARN lines and exit 0."""
        use_runner(monkeypatch, "ssh", FakeRunner(missing=("tailscale", "git")))
        result = runner.invoke(app, ["doctor"])
        assert result.exit_code == 0
        assert "[WARN] Tailscale" in result.output
        assert "[WARN] Git" in result.output


# ---------------------------------------------------------------------------
# generate config / completion
# ---------------------------------------------------------------------------

class TestGenerateConfig:
    """Test config generation."""

    def test_generate_and_refuse(self, home: Path) -> None:
        """First run creates, second needs --force."""
        path = home / ".config" / "gitcrn" / "config.toml"

        result = runner.invoke(app, ["generate", "config"])
        assert result.exit_code == 0
        assert path.exists()
        assert "GITCRN_TOKEN" in result.output

        result = runner.invoke(app, ["generate", "config"])
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(app, ["generate", "config", "--force"])
        assert result.exit_code == 0


class TestCompletion:
    """Test completion script output."""

    def test_bash(self) -> None:
        """bash script registers the completion function."""
        result = runner.invoke(app, ["completion", "bash"])
        assert result.exit_code == 0
        assert "complete -F _gitcrn_complete gitcrn" in result.output
        assert "--default-branch" in result.output

    def test_zsh_case_insensitive(self) -> None:
        """Shell names are case-insensitive."""
        result = runner.invoke(app, ["completion", "ZSH"])
        assert result.exit_code == 0
        assert result.output.startswith("#compdef gitcrn\n")
        assert "_gitcrn \"$@\"" in result.output

    def test_fish(self) -> None:
        """fish script completes make/remake flags."""
        result = runner.invoke(app, ["completion", "fish"])
        assert result.exit_code == 0
        assert 'complete -c gitcrn -n "__fish_seen_subcommand_from make remake" -o pp' in result.output

    def test_unknown_shell(self) -> None:
        """Other shells are a usage error."""
        result = runner.invoke(app, ["completion", "tcsh"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# Repository commands
# ---------------------------------------------------------------------------

class TestRepoCommands:
    """Test create/clone/add wiring."""

    @pytest.mark.parametrize(
        "args",
        [["create", "repo", "vltc/kapri"], ["repo", "create", "vltc/kapri"], ["make", "repo", "vltc/kapri"]],
    )
    def test_create_needs_token(self, args: list) -> None:
        """All create spellings reach the same command."""
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "Missing token" in result.output

    def test_clone_passes_extra_args(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Directory and git options are forwarded."""
        fake = use_runner(monkeypatch, "repo", FakeRunner())

        result = runner.invoke(app, ["clone", "vltc/kapri", "dest", "--depth", "1"])

        assert result.exit_code == 0, result.output
        assert fake.commands == ["git clone gitcrn:vltc/kapri.git dest --depth 1"]

    def test_add(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """add registers the alias remote."""
        fake = use_runner(monkeypatch, "repo", FakeRunner())
        result = runner.invoke(app, ["add", "vltc/crnbg"])
        assert result.exit_code == 0
        assert fake.commands == ["git remote add gitcrn gitcrn:vltc/crnbg.git"]

    def test_remote_add_legacy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Legacy form requires the alias as remote name."""
        fake = use_runner(monkeypatch, "repo", FakeRunner())

        result = runner.invoke(app, ["remote", "add", "origin", "vltc/kapri"])
        assert result.exit_code == 1
        assert fake.calls == []

        result = runner.invoke(app, ["remote", "add", "gitcrn", "vltc/kapri"])
        assert result.exit_code == 0

    def test_invalid_repo_argument(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Bad input is reported as an error."""
        use_runner(monkeypatch, "repo", FakeRunner())
        result = runner.invoke(app, ["clone", "vltc"])
        assert result.exit_code == 1
        assert "owner/repo" in result.output


# ---------------------------------------------------------------------------
# Script commands
# ---------------------------------------------------------------------------

class TestScriptCommands:
    """Test make/remake/push/pull wiring."""

    def test_make_requires_kind(self) -> None:
        """make without flags is an error."""
        result = runner.invoke(app, ["make"])
        assert result.exit_code == 1
        assert "--push" in result.output

    def test_make_outside_repo(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """make -pp needs a git work tree."""
        use_runner(monkeypatch, "scripts", FakeRunner())
        result = runner.invoke(app, ["make", "-pp"])
        assert result.exit_code == 1
        assert "git repository" in result.output

    def test_make_writes_scripts(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Interactive make writes both scripts in the current directory."""
        monkeypatch.chdir(tmp_path)
        use_runner(monkeypatch, "scripts", FakeRunner({
            "git rev-parse --is-inside-work-tree": ok("true"),
            "git remote -v": ok("gitcrn\tgitcrn:a/b.git (fetch)\ngitcrn\tgitcrn:a/b.git (push)"),
            "git branch --show-current": ok("main"),
        }))

        result = runner.invoke(app, ["make", "--push", "--pull"], input="\n\n\n\n")

        assert result.exit_code == 0, result.output
        assert (tmp_path / "push.sh").exists()
        assert (tmp_path / "pull.sh").exists()
        assert "Created:" in result.output

    def test_make_without_input_uses_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Closed stdin accepts every detected default."""
        monkeypatch.chdir(tmp_path)
        use_runner(monkeypatch, "scripts", FakeRunner({
            "git rev-parse --is-inside-work-tree": ok("true"),
            "git remote -v": ok("gitcrn\tgitcrn:a/b.git (fetch)\ngitcrn\tgitcrn:a/b.git (push)"),
            "git branch --show-current": ok("main"),
        }))

        result = runner.invoke(app, ["make", "-pp"], input="")

        assert result.exit_code == 0, result.output
        push = (tmp_path / "push.sh").read_text(encoding="utf-8")
        assert "BRANCH='main'" in push
        assert "REMOTES=('gitcrn')" in push
        assert (tmp_path / "pull.sh").exists()

    def test_remake_repo_rejected(self) -> None:
        """remake repo points at make repo."""
        result = runner.invoke(app, ["remake", "repo"])
        assert result.exit_code == 1
        assert "make repo" in result.output

    def test_push_without_script(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """push needs a generated script."""
        monkeypatch.chdir(tmp_path)
        use_runner(monkeypatch, "scripts", FakeRunner())
        result = runner.invoke(app, ["push"])
        assert result.exit_code == 1
        assert "not found" in result.output
