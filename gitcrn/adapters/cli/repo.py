"""
Repository CLI commands (create, clone, add, remote)
"""
from typing import List, NoReturn, Optional

import typer
from rich.markup import escape

from ...core.constants import APP_NAME
from ...core.exceptions import GitcrnError
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...domain.repo import RepoService
from ...infrastructure.process.runner import SubprocessRunner
from ..config.loader import ConfigLoader

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def _service() -> RepoService:
    cfg = ConfigLoader().load()
    return RepoService(
        runner=SubprocessRunner(),
        alias=cfg.ssh_alias,
        server_url=cfg.server_url,
        token=cfg.token,
    )


def _fail(error: Exception) -> NoReturn:
    stderr_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


def register_repo_commands(app: typer.Typer) -> None:
    """Register repository commands and the create/repo/remote sub-apps"""
    create_app = typer.Typer(name="create", help="Create resources", add_completion=False)
    create_app.command(name="repo")(create_repo)
    app.add_typer(create_app, name="create")

    repo_app = typer.Typer(name="repo", help="Repository commands", add_completion=False)
    repo_app.command(name="create")(create_repo)
    app.add_typer(repo_app, name="repo")

    remote_app = typer.Typer(name="remote", help="Legacy remote commands", add_completion=False)
    remote_app.command(name="add")(remote_add)
    app.add_typer(remote_app, name="remote")

    app.command(
        name="clone",
        context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    )(clone)
    app.command(name="add")(add)


def create_repo(
    spec: str = typer.Argument(..., metavar="OWNER/REPO", help="Repository to create"),
    private: bool = typer.Option(False, "--private", help="Create a private repository (default)"),
    public: bool = typer.Option(False, "--public", help="Create a public repository"),
    desc: str = typer.Option("", "--desc", help="Repository description"),
    default_branch: str = typer.Option("", "--default-branch", help="Default branch (e.g. main)"),
    clone_now: bool = typer.Option(False, "--clone", help="Clone right after creating"),
):
    """
    Create a repository on the Gitea server

    Examples:
        gitcrn create repo vltc/myrepo --private --clone
        gitcrn repo create crnbg/platform --public
    """
    try:
        service = _service()
        ref = service.create(
            spec,
            private=not public,
            description=desc,
            default_branch=default_branch,
        )
        stdout_console.print(f"[green]Repository created:[/green] {escape(str(ref))}")

        if clone_now:
            service.clone(str(ref))
            return
    except GitcrnError as e:
        _fail(e)

    stdout_console.print(f"Next: {APP_NAME} clone {ref}", markup=False)
    stdout_console.print(f"In an existing repo: {APP_NAME} add {ref}", markup=False)


def clone(
    ctx: typer.Context,
    spec: str = typer.Argument(..., metavar="OWNER/REPO", help="Repository to clone"),
    directory: Optional[List[str]] = typer.Argument(None, help="Directory and extra git clone arguments"),
):
    """
    Clone OWNER/REPO through the SSH alias

    Example: gitcrn clone vltc/kapri
    """
    extra = list(directory or []) + list(ctx.args)
    try:
        _service().clone(spec, extra)
    except GitcrnError as e:
        _fail(e)


def add(spec: str = typer.Argument(..., metavar="OWNER/REPO", help="Repository to add as remote")):
    """
    Add the SSH alias remote for OWNER/REPO to the current repository

    Example: gitcrn add vltc/crnbg
    """
    try:
        _service().add_remote(spec)
    except GitcrnError as e:
        _fail(e)


def remote_add(
    alias: str = typer.Argument(..., help="Remote name (must be the configured alias)"),
    spec: str = typer.Argument(..., metavar="OWNER/REPO"),
):
    """
    Legacy form: gitcrn remote add gitcrn OWNER/REPO
    """
    try:
        service = _service()
        if alias.strip() != service.alias:
            stderr_console.print(
                f"[red]Error:[/red] Legacy form is: {APP_NAME} remote add "
                f"{escape(service.alias)} owner/repo"
            )
            raise typer.Exit(1)
        service.add_remote(spec)
    except GitcrnError as e:
        _fail(e)
