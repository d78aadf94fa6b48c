"""
Update domain module
"""
from .version import parse_version_parts, compare_semver
from .service import UpdateChecker, should_check_updates, update_command

__all__ = [
    "parse_version_parts",
    "compare_semver",
    "UpdateChecker",
    "should_check_updates",
    "update_command",
]
