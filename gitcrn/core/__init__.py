"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import (
    setup_logging,
    configure_consoles,
    get_logger,
    get_stdout_console,
    get_stderr_console,
)
from .interfaces import CommandResult, CommandRunner, PromptProvider
from .utils import (
    normalize_newlines,
    fallback,
    is_windows,
    expand_home_path,
    identity_public_key_path,
    read_public_key_info,
)

__all__ = [
    "setup_logging",
    "configure_consoles",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "CommandResult",
    "CommandRunner",
    "PromptProvider",
    "normalize_newlines",
    "fallback",
    "is_windows",
    "expand_home_path",
    "identity_public_key_path",
    "read_public_key_info",
]
