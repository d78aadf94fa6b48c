"""
Main CLI application
"""
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from rich.markup import escape

from ... import __version__
from ...core.constants import APP_NAME, CREATOR_NAMES, PROJECT_URL
from ...core.logging import (
    configure_consoles,
    get_logger,
    get_stdout_console,
    setup_logging,
)
from ...domain.update import UpdateChecker, should_check_updates, update_command
from .completion import register_completion_command
from .config import register_config_commands
from .repo import register_repo_commands
from .scripts import register_script_commands
from .ssh import register_ssh_commands

logger = get_logger(__name__)
console = get_stdout_console()

# Root shorthands rewritten to their long forms before dispatch
ROOT_ALIASES = {
    "-gc": ["generate", "config"],
    "gc": ["generate", "config"],
    "-pp": ["make", "--push", "--pull"],
}

# Create main app
app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    help="Private Gitea CLI: SSH alias, repositories and push/pull scripts",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_config_commands(app)
register_repo_commands(app)
register_script_commands(app)
register_ssh_commands(app)
register_completion_command(app)


def print_version() -> None:
    console.print(f"{APP_NAME} {__version__}", markup=False, highlight=False)
    console.print(f"Made by: {CREATOR_NAMES}", markup=False, highlight=False)
    console.print(f"Link: {PROJECT_URL}", markup=False, highlight=False)


def print_update_notice(checker: Optional[UpdateChecker] = None) -> None:
    """Print a notice when a newer release is published"""
    latest = (checker or UpdateChecker()).newer_release(__version__)
    if latest is None:
        return
    console.print(
        f"[yellow]New version available: {escape(latest)} (current {__version__})[/yellow]"
    )
    console.print("Update with:")
    console.print(f"  {update_command()}", markup=False, highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        # main() never runs for -v
        if should_check_updates("version"):
            print_update_notice()
        print_version()
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    gitcrn - private Gitea CLI

    Use subcommands to perform different operations:
    - init / doctor: configure and check the SSH alias
    - create repo / clone / add: manage repositories
    - make / remake / push / pull: generated push/pull scripts
    - generate config (-gc): write the config file
    """
    setup_logging(level=log_level, log_file=log_file)
    configure_consoles(color=not no_color)

    if should_check_updates(ctx.invoked_subcommand):
        print_update_notice()


@app.command(name="version")
def version_run():
    """
    Show version, authors and project link
    """
    print_version()


def expand_root_aliases(args: Sequence[str]) -> List[str]:
    """Rewrite a leading root shorthand (-gc, gc, -pp) to its long form"""
    args = list(args)
    if args and args[0] in ROOT_ALIASES:
        return ROOT_ALIASES[args[0]] + args[1:]
    return args


def run():
    """CLI entry point"""
    app(args=expand_root_aliases(sys.argv[1:]), prog_name=APP_NAME)


if __name__ == "__main__":
    run()
