"""
Gitea REST client
"""
from .client import GiteaClient
from .models import CreateRepoRequest

__all__ = ["GiteaClient", "CreateRepoRequest"]
