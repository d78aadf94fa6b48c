"""
SSH config domain module
"""
from .merger import (
    parse_host_line,
    host_pattern_matches,
    find_host_settings,
    has_exact_match,
    render_block,
    merge_host_block,
)
from .service import SSHConfigService, HostTarget

__all__ = [
    "parse_host_line",
    "host_pattern_matches",
    "find_host_settings",
    "has_exact_match",
    "render_block",
    "merge_host_block",
    "SSHConfigService",
    "HostTarget",
]
