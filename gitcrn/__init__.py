"""
gitcrn - private Gitea CLI

Command line helper for a self-hosted Gitea server reached over SSH, supporting:
- SSH alias management in ~/.ssh/config (init, doctor)
- Repository creation through the Gitea REST API
- Cloning and remotes through the SSH alias
- Generated push/pull scripts for existing repositories
"""

__version__ = "0.1.0"

# Export domain components
from .domain.ssh_config import (
    SSHConfigService,
    HostTarget,
    merge_host_block,
    find_host_settings,
    has_exact_match,
)

from .domain.repo import (
    RepoRef,
    RepoService,
    parse_owner_repo,
    build_repo_url,
)

from .domain.update import compare_semver

__all__ = [
    "__version__",
    "SSHConfigService",
    "HostTarget",
    "merge_host_block",
    "find_host_settings",
    "has_exact_match",
    "RepoRef",
    "RepoService",
    "parse_owner_repo",
    "build_repo_url",
    "compare_semver",
]
