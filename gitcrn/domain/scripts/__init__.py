"""
Push/pull scripts domain module
"""
from .render import (
    shell_single_quote,
    ps_single_quote,
    render_push_sh,
    render_pull_sh,
    render_push_ps1,
    render_pull_ps1,
)
from .service import ScriptService, parse_remote_names, parse_remote_list, prefer_non_empty

__all__ = [
    "shell_single_quote",
    "ps_single_quote",
    "render_push_sh",
    "render_pull_sh",
    "render_push_ps1",
    "render_pull_ps1",
    "ScriptService",
    "parse_remote_names",
    "parse_remote_list",
    "prefer_non_empty",
]
