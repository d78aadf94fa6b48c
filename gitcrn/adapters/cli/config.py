"""
App config CLI commands (generate config)
"""
import typer
from rich.markup import escape

from ...core.constants import ENV_TOKEN
from ...core.exceptions import ConfigError
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ..config.loader import ConfigLoader

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_config_commands(app: typer.Typer) -> None:
    """Register the generate sub-app"""
    generate_app = typer.Typer(name="generate", help="Generate settings", add_completion=False)
    generate_app.command(name="config")(generate_config)
    app.add_typer(generate_app, name="generate")


def generate_config(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
):
    """
    Write the default config file (~/.config/gitcrn/config.toml)

    Shorthand: gitcrn -gc
    """
    try:
        path = ConfigLoader().generate(force=force)
    except ConfigError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logger.info("Generated config at %s", path)
    stdout_console.print(f"[green]Config created:[/green] {escape(str(path))}")
    stdout_console.print(f"Put the token in the config or set {ENV_TOKEN}", markup=False)
