"""
Push/pull script CLI commands (make, remake, push, pull)
"""
from typing import List, NoReturn, Optional

import typer
from rich.markup import escape

from ...core.constants import APP_NAME
from ...core.exceptions import GitcrnError
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...domain.scripts import ScriptService
from ...infrastructure.process.runner import SubprocessRunner
from .prompts import RichPromptProvider
from .repo import create_repo

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def _fail(message: str) -> NoReturn:
    stderr_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _show_remotes(remote_output: str) -> None:
    if not remote_output.strip():
        stdout_console.print("[yellow]\\[WARN][/yellow] git remote -v: no remotes found")
        return
    stdout_console.print("[cyan]Remotes (git remote -v):[/cyan]")
    stdout_console.print(remote_output, markup=False, highlight=False)


def register_script_commands(app: typer.Typer) -> None:
    """Register make (with make repo), remake, push and pull"""
    make_app = typer.Typer(
        name="make",
        help="Generate push/pull scripts, or create a repository with `make repo`",
        add_completion=False,
        invoke_without_command=True,
    )
    make_app.callback()(make_run)
    make_app.command(name="repo")(create_repo)
    app.add_typer(make_app, name="make")

    app.command(name="remake")(remake_run)
    app.command(name="push")(push_run)
    app.command(name="pull")(pull_run)


def _generate(push: bool, pull: bool, both: bool, overwrite: bool) -> None:
    if both:
        push = pull = True
    if not push and not pull:
        _fail("Choose at least one of: --push, --pull or -pp")

    service = ScriptService(
        runner=SubprocessRunner(),
        prompts=RichPromptProvider(),
        on_remotes=_show_remotes,
    )
    try:
        created = service.make(push=push, pull=pull, overwrite=overwrite)
    except GitcrnError as e:
        _fail(str(e))

    for path in created:
        stdout_console.print(f"[green]Created:[/green] {escape(path.name)}")


def make_run(
    ctx: typer.Context,
    push: bool = typer.Option(False, "--push", help="Generate the push script"),
    pull: bool = typer.Option(False, "--pull", help="Generate the pull script"),
    both: bool = typer.Option(False, "--pp", "-pp", help="Shorthand for --push --pull"),
):
    """
    Generate push/pull scripts for the current repository

    Examples:
        gitcrn make --push --pull
        gitcrn make -pp
        gitcrn make repo owner/repo --private
    """
    if ctx.invoked_subcommand is not None:
        return
    _generate(push, pull, both, overwrite=False)


def remake_run(
    push: bool = typer.Option(False, "--push", help="Regenerate the push script"),
    pull: bool = typer.Option(False, "--pull", help="Regenerate the pull script"),
    both: bool = typer.Option(False, "--pp", "-pp", help="Shorthand for --push --pull"),
    extra: Optional[List[str]] = typer.Argument(None, hidden=True),
):
    """
    Regenerate (overwrite) push/pull scripts
    """
    if extra:
        if extra[0] == "repo":
            _fail(f"remake repo is not supported. Use: {APP_NAME} make repo owner/repo")
        _fail(f"Unexpected arguments: {' '.join(extra)}")
    _generate(push, pull, both, overwrite=True)


def _run_script(kind: str) -> None:
    try:
        ScriptService(runner=SubprocessRunner()).run(kind)
    except GitcrnError as e:
        _fail(str(e))


def push_run():
    """
    Run the generated push script (push.sh / push.ps1)
    """
    _run_script("push")


def pull_run():
    """
    Run the generated pull script (pull.sh / pull.ps1)
    """
    _run_script("pull")
