"""
SSH alias CLI commands (init, doctor)
"""
import platform

import typer
from rich.markup import escape

from ...core.constants import APP_NAME
from ...core.exceptions import GitcrnError, ToolMissingError
from ...core.interfaces import CommandRunner, PromptProvider
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...domain.doctor import DoctorService, tool_version
from ...domain.ssh_config import SSHConfigService, HostTarget
from ...infrastructure.process.runner import SubprocessRunner
from ..config.loader import ConfigLoader
from .prompts import RichPromptProvider

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_ssh_commands(app: typer.Typer) -> None:
    """Register init and doctor on the main app"""
    app.command(name="init")(init_run)
    app.command(name="doctor")(doctor_run)


def _tailscale_install_hint() -> str:
    system = platform.system().lower()
    if system == "linux":
        return "  Linux: curl -fsSL https://tailscale.com/install.sh | sh"
    if system == "windows":
        return "  Windows: https://tailscale.com/download/windows"
    return "  See: https://tailscale.com/download"


def ensure_tailscale(runner: CommandRunner, prompt_provider: PromptProvider) -> None:
    """
    Require tailscale on PATH, offering install instructions otherwise.

    Raises:
        ToolMissingError: If tailscale is not available
    """
    version = tool_version(runner, "tailscale", "version")
    if version is not None:
        stdout_console.print(f"[cyan]Tailscale:[/cyan] {escape(version)}")
        return

    stderr_console.print(
        f"[yellow]Warning:[/yellow] Tailscale is not available. "
        f"SSH to {APP_NAME} will not work without it."
    )
    if prompt_provider.confirm("Show Tailscale installation instructions?"):
        stderr_console.print("Installing Tailscale:")
        stderr_console.print(_tailscale_install_hint(), markup=False)

    raise ToolMissingError(f"Install Tailscale and retry: {APP_NAME} init --default")


def init_run(
    default: bool = typer.Option(False, "--default", help="Use the default SSH settings"),
    custom: bool = typer.Option(False, "--custom", help="Use custom SSH settings"),
    host: str = typer.Option("", "--host", help="SSH HostName (with --custom)"),
    port: int = typer.Option(0, "--port", help="SSH Port (with --custom)"),
    user: str = typer.Option("", "--user", help="SSH User (with --custom)"),
):
    """
    Configure the SSH host alias in ~/.ssh/config

    Examples:
        gitcrn init --default
        gitcrn init --custom --host 100.91.132.35 --port 222 --user git
    """
    if default == custom:
        stderr_console.print("[red]Error:[/red] Choose exactly one mode: --default or --custom")
        raise typer.Exit(1)

    try:
        cfg = ConfigLoader().load()
        target = HostTarget(
            alias=cfg.ssh_alias,
            host=cfg.ssh_host,
            user=cfg.ssh_user,
            port=cfg.ssh_port,
        )
        if custom:
            target = HostTarget(alias=cfg.ssh_alias, host=host.strip(), user=user.strip(), port=port)
            target.validate()

        ensure_tailscale(SubprocessRunner(), RichPromptProvider())

        path, changed = SSHConfigService().upsert(
            target.alias, target.host, target.user, target.port
        )
    except GitcrnError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if changed:
        stdout_console.print(f"[green]SSH config updated:[/green] {escape(str(path))}")
    else:
        stdout_console.print(f"[yellow]SSH config already present:[/yellow] {escape(str(path))}")
    stdout_console.print(target.describe(), markup=False)


def doctor_run():
    """
    Check Tailscale, git identity, the SSH alias and the SSH key
    """
    try:
        cfg = ConfigLoader().load()
    except GitcrnError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    service = DoctorService(SubprocessRunner(), SSHConfigService(), cfg.ssh_alias)

    stdout_console.print("[cyan]Environment check (doctor)[/cyan]")
    for result in service.run():
        tag = "[green]\\[OK][/green]" if result.ok else "[yellow]\\[WARN][/yellow]"
        stdout_console.print(f"{tag} {escape(result.name)}: {escape(result.details)}")
        if result.hint:
            stdout_console.print(f"  {escape(result.hint)}")
