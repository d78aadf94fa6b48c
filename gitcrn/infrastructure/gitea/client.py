"""
Gitea REST API client
"""
from typing import Optional
from urllib.parse import quote

import httpx

from ...core.constants import APP_NAME, GITEA_USER_TIMEOUT, GITEA_CREATE_TIMEOUT
from ...core.exceptions import GiteaError, RepoExistsError
from ...core.logging import get_logger
from .models import CreateRepoRequest

logger = get_logger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Extract a readable message from an error response"""
    text = response.text.strip()
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            text = message.strip()
    return text or "unknown error"


class GiteaClient:
    """
    Minimal Gitea API client (current user + repository creation).

    Usage:
        with GiteaClient(server_url, token) as client:
            login = client.current_user()
    """

    def __init__(
        self,
        server_url: str,
        token: str,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize Gitea client.

        Args:
            server_url: Gitea base URL (e.g. http://host:5000)
            token: API access token
            transport: Optional httpx transport (used by tests)
        """
        self.server_url = server_url.strip().rstrip("/")
        self._client = httpx.Client(
            base_url=self.server_url,
            headers={
                "Authorization": f"token {token}",
                "Accept": "application/json",
                "User-Agent": APP_NAME,
            },
            transport=transport,
        )

    def __enter__(self) -> "GiteaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close underlying HTTP client"""
        self._client.close()

    def current_user(self) -> str:
        """
        Get login of the token owner.

        Raises:
            GiteaError: On transport errors, non-2xx status or empty login
        """
        try:
            response = self._client.get("/api/v1/user", timeout=GITEA_USER_TIMEOUT)
        except httpx.HTTPError as e:
            raise GiteaError(f"Request failed: {e}") from e

        if not response.is_success:
            raise GiteaError(f"status {response.status_code}: {response.text.strip()}")

        try:
            login = str(response.json().get("login") or "").strip()
        except (ValueError, AttributeError) as e:
            raise GiteaError(f"Invalid user response: {e}") from e
        if not login:
            raise GiteaError("Empty login in API response")
        return login

    def create_repo(self, owner: str, request: CreateRepoRequest, login: str) -> None:
        """
        Create repository for the current user or an organization.

        Args:
            owner: Target owner
            request: Repository payload
            login: Login of the token owner; a different owner is treated as an org

        Raises:
            RepoExistsError: If the repository already exists (HTTP 409)
            GiteaError: On any other failure
        """
        if owner == login:
            endpoint = "/api/v1/user/repos"
        else:
            endpoint = f"/api/v1/orgs/{quote(owner, safe='')}/repos"

        logger.debug("POST %s%s", self.server_url, endpoint)
        try:
            response = self._client.post(
                endpoint,
                json=request.to_dict(),
                timeout=GITEA_CREATE_TIMEOUT,
            )
        except httpx.HTTPError as e:
            raise GiteaError(f"Request failed: {e}") from e

        if response.is_success:
            return

        message = _error_message(response)
        if response.status_code == httpx.codes.CONFLICT:
            raise RepoExistsError(f"Repository already exists: {message}")
        raise GiteaError(f"Create repo failed (status {response.status_code}): {message}")
