"""
Gitea API payload models
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CreateRepoRequest:
    """Payload for the Gitea create-repository endpoints"""
    name: str
    description: str = ""
    private: bool = True
    default_branch: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON body, omitting empty optional fields"""
        data: Dict[str, Any] = {"name": self.name, "private": self.private}
        if self.description:
            data["description"] = self.description
        if self.default_branch:
            data["default_branch"] = self.default_branch
        return data
