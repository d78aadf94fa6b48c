"""
Unified exception definitions
"""


class GitcrnError(Exception):
    """Base exception class"""
    pass


class ConfigError(GitcrnError):
    """Configuration error"""
    pass


class SSHConfigError(GitcrnError):
    """~/.ssh/config read or write error"""
    pass


class RepoSpecError(GitcrnError):
    """Invalid owner/repo reference"""
    pass


class GiteaError(GitcrnError):
    """Gitea API error"""
    pass


class RepoExistsError(GiteaError):
    """Repository already exists on the server"""
    pass


class CommandError(GitcrnError):
    """External command failed"""
    pass


class ScriptError(GitcrnError):
    """Push/pull script error"""
    pass


class ToolMissingError(GitcrnError):
    """Required external tool is not installed"""
    pass
