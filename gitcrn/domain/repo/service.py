"""
Repository domain service - Gitea repo creation and git remote plumbing
"""
from typing import Callable, List, Optional

from ...core.exceptions import CommandError, ConfigError
from ...core.interfaces import CommandRunner
from ...core.logging import get_logger
from ...infrastructure.gitea.client import GiteaClient
from ...infrastructure.gitea.models import CreateRepoRequest
from .models import RepoRef, build_repo_url, parse_owner_repo

logger = get_logger(__name__)

GiteaClientFactory = Callable[[str, str], GiteaClient]


def run_git(runner: CommandRunner, *args: str) -> None:
    """
    Run git with the terminal attached.

    Raises:
        CommandError: If git is missing or exits non-zero
    """
    try:
        result = runner.run(["git", *args])
    except FileNotFoundError as e:
        raise CommandError("git is not installed or not on PATH") from e
    if not result.success:
        raise CommandError(f"git {' '.join(args)} failed (exit code {result.exit_code})")


class RepoService:
    """
    Repository operations against the Gitea server and local git.

    No direct dependency on CLI or Typer.
    """

    def __init__(
        self,
        runner: CommandRunner,
        alias: str,
        server_url: str = "",
        token: str = "",
        client_factory: GiteaClientFactory = GiteaClient,
    ):
        """
        Initialize repo service.

        Args:
            runner: Local command runner
            alias: SSH host alias used in remote URLs
            server_url: Gitea base URL
            token: Gitea API token
            client_factory: Builds a GiteaClient from (server_url, token)
        """
        self.runner = runner
        self.alias = alias
        self.server_url = server_url
        self.token = token
        self.client_factory = client_factory

    def create(
        self,
        spec: str,
        private: bool = True,
        description: str = "",
        default_branch: str = "",
    ) -> RepoRef:
        """
        Create owner/repo on the server.

        Repos whose owner is the token user go to /user/repos, everything
        else is created under the organization.

        Raises:
            RepoSpecError: If spec is not owner/repo
            ConfigError: If no token is configured
            GiteaError: If the API call fails
        """
        ref = parse_owner_repo(spec)
        token = self.token.strip()
        if not token:
            raise ConfigError(
                "Missing token. Set GITCRN_TOKEN or token in ~/.config/gitcrn/config.toml"
            )

        request = CreateRepoRequest(
            name=ref.name,
            description=description.strip(),
            private=private,
            default_branch=default_branch.strip(),
        )
        with self.client_factory(self.server_url, token) as client:
            login = client.current_user()
            logger.debug("Token user: %s", login)
            client.create_repo(ref.owner, request, login)
        return ref

    def clone(self, spec: str, extra_args: Optional[List[str]] = None) -> None:
        """git clone alias:owner/repo.git [extra args]"""
        url = build_repo_url(spec, self.alias)
        run_git(self.runner, "clone", url, *(extra_args or []))

    def add_remote(self, spec: str) -> None:
        """git remote add <alias> alias:owner/repo.git"""
        url = build_repo_url(spec, self.alias)
        run_git(self.runner, "remote", "add", self.alias, url)
