"""
Environment diagnostics (doctor)
"""
from dataclasses import dataclass
from typing import List, Optional

from ...core.constants import APP_NAME, DEFAULT_PUBLIC_KEYS
from ...core.exceptions import SSHConfigError
from ...core.interfaces import CommandRunner
from ...core.logging import get_logger
from ...core.utils import (
    fallback,
    first_line,
    first_existing_path,
    identity_public_key_path,
    read_public_key_info,
)
from ..ssh_config.service import SSHConfigService

logger = get_logger(__name__)

TAILSCALE_DOWNLOAD_URL = "https://tailscale.com/download"


@dataclass
class CheckResult:
    """Single doctor check outcome"""
    name: str
    ok: bool
    details: str
    hint: Optional[str] = None


def tool_version(runner: CommandRunner, *args: str) -> Optional[str]:
    """
    First output line of a version command.

    Returns:
        Version line ("available" if the tool prints nothing), or None if
        the tool is missing or fails
    """
    try:
        result = runner.run(list(args), capture=True)
    except OSError:
        return None
    if not result.success:
        return None
    return fallback(first_line(result.stdout + result.stderr), "available")


class DoctorService:
    """Checks Tailscale, git identity, the SSH alias block and the SSH key"""

    def __init__(self, runner: CommandRunner, ssh_config: SSHConfigService, alias: str):
        self.runner = runner
        self.ssh_config = ssh_config
        self.alias = alias

    def run(self) -> List[CheckResult]:
        """Run all checks in display order"""
        results = [self.check_tailscale()]
        results.extend(self.check_git())
        results.extend(self.check_ssh_config())
        return results

    def check_tailscale(self) -> CheckResult:
        version = tool_version(self.runner, "tailscale", "version")
        if version is None:
            return CheckResult(
                "Tailscale",
                False,
                "not installed or not on PATH",
                hint=f"Install: {TAILSCALE_DOWNLOAD_URL}",
            )
        return CheckResult("Tailscale", True, version)

    def check_git(self) -> List[CheckResult]:
        version = tool_version(self.runner, "git", "--version")
        if version is None:
            return [CheckResult("Git", False, "not installed or not on PATH")]

        results = [CheckResult("Git", True, version)]

        name_local = self.runner.output(["git", "config", "--get", "user.name"])
        email_local = self.runner.output(["git", "config", "--get", "user.email"])
        if name_local or email_local:
            results.append(CheckResult(
                "Git identity (local)",
                True,
                f"{fallback(name_local, '?')} <{fallback(email_local, '?')}>",
            ))
        else:
            results.append(CheckResult(
                "Git identity (local)", False, "not set in the current repository"
            ))

        name_global = self.runner.output(["git", "config", "--global", "--get", "user.name"])
        email_global = self.runner.output(["git", "config", "--global", "--get", "user.email"])
        if name_global or email_global:
            results.append(CheckResult(
                "Git identity (global)",
                True,
                f"{fallback(name_global, '?')} <{fallback(email_global, '?')}>",
            ))
        else:
            results.append(CheckResult(
                "Git identity (global)",
                False,
                'set it with: git config --global user.name "Your Name" '
                '&& git config --global user.email "you@example.com"',
            ))
        return results

    def check_ssh_config(self) -> List[CheckResult]:
        path = self.ssh_config.path
        if not path.exists():
            return [CheckResult(
                "SSH config",
                False,
                f"does not exist ({path}). Run: {APP_NAME} init --default",
            )]

        try:
            settings, found = self.ssh_config.lookup(self.alias)
        except SSHConfigError as e:
            return [CheckResult("SSH config", False, str(e))]

        host_label = f"SSH host {self.alias}"
        if not found:
            return [CheckResult(
                host_label,
                False,
                f"not found in {path}. Run: {APP_NAME} init --default",
            )]

        results = [CheckResult(
            host_label,
            True,
            "HostName={} User={} Port={}".format(
                fallback(settings.get("hostname"), "?"),
                fallback(settings.get("user"), "?"),
                fallback(settings.get("port"), "?"),
            ),
        )]
        results.append(self.check_key(settings.get("identityfile", "")))
        return results

    def check_key(self, identity_file: str) -> CheckResult:
        pub_path = identity_public_key_path(identity_file) if identity_file.strip() else None
        if pub_path is None:
            pub_path = first_existing_path(*DEFAULT_PUBLIC_KEYS)
        if pub_path is None:
            return CheckResult("SSH key", False, "no .pub key found in ~/.ssh")

        try:
            key_type, comment = read_public_key_info(pub_path)
        except (OSError, ValueError) as e:
            logger.debug("Public key parse failed for %s", pub_path, exc_info=True)
            return CheckResult("SSH key", False, f"{pub_path} (cannot read comment: {e})")

        return CheckResult(
            "SSH key",
            True,
            f"{pub_path} [{key_type}] comment: {comment or '(no comment)'}",
        )
