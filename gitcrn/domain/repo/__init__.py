"""
Repository domain module
"""
from .models import RepoRef, parse_owner_repo, build_repo_url
from .service import RepoService, run_git

__all__ = [
    "RepoRef",
    "parse_owner_repo",
    "build_repo_url",
    "RepoService",
    "run_git",
]
