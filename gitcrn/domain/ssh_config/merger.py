"""
SSH client config host-block lookup and merge

Pure text transformations over the contents of an OpenSSH client config.
Host patterns are compared case-insensitively and literally; glob, Match and
Include semantics are not interpreted, unrelated lines are copied verbatim.
"""
from typing import Dict, List, Optional, Tuple


# ============================================================
# Helper Functions
# ============================================================

def parse_host_line(line: str) -> Optional[List[str]]:
    """
    Parse a `Host` directive.

    Returns:
        List of host patterns, or None if the line is not a Host directive
        with at least one pattern
    """
    fields = line.split()
    if len(fields) < 2 or fields[0].lower() != "host":
        return None
    return fields[1:]


def host_pattern_matches(patterns: List[str], alias: str) -> bool:
    """Check if any pattern equals alias (case-insensitive, no globbing)"""
    target = alias.lower()
    return any(p.strip().lower() == target for p in patterns)


def _is_alias_host_line(line: str, alias: str) -> bool:
    patterns = parse_host_line(line.strip())
    return patterns is not None and host_pattern_matches(patterns, alias)


def _is_host_line(line: str) -> bool:
    return parse_host_line(line.strip()) is not None


# ============================================================
# Lookup
# ============================================================

def find_host_settings(content: str, alias: str) -> Tuple[Dict[str, str], bool]:
    """
    Collect the settings of the first Host block matching alias.

    Keys are lowercased, the first occurrence of a key wins. Blank lines,
    comments and single-token lines are skipped.

    Returns:
        (settings, found)
    """
    lines = content.split("\n")

    for i, raw in enumerate(lines):
        if not _is_alias_host_line(raw, alias):
            continue

        settings: Dict[str, str] = {}
        for next_raw in lines[i + 1:]:
            line = next_raw.strip()
            if not line or line.startswith("#"):
                continue
            if _is_host_line(line):
                break

            fields = line.split()
            if len(fields) < 2:
                continue
            key = fields[0].lower()
            if key not in settings:
                settings[key] = " ".join(fields[1:]).strip()
        return settings, True

    return {}, False


def has_exact_match(content: str, alias: str, host: str, user: str, port: int) -> bool:
    """
    Check if the alias block already points at host/user/port.

    HostName and User compare case-insensitively, Port compares as a
    plain decimal string.
    """
    settings, found = find_host_settings(content, alias)
    if not found:
        return False

    host_ok = settings.get("hostname", "").strip().lower() == host.strip().lower()
    user_ok = settings.get("user", "").strip().lower() == user.strip().lower()
    port_ok = settings.get("port", "").strip() == str(int(port))

    return host_ok and user_ok and port_ok


# ============================================================
# Render / Merge
# ============================================================

def render_block(alias: str, host: str, user: str, port: int) -> str:
    """Render the canonical four-line Host block (no trailing newline)"""
    return "\n".join([
        f"Host {alias}",
        f"    HostName {host}",
        f"    User {user}",
        f"    Port {int(port)}",
    ])


def _append_separated(out: List[str], block: str) -> None:
    if out and out[-1].strip():
        out.append("")
    out.extend(block.split("\n"))


def merge_host_block(content: str, alias: str, block: str) -> str:
    """
    Replace (or append) the Host block for alias with block.

    The first matching block is replaced in place, any later block for the
    same alias is dropped. Multi-pattern Host lines that include alias are
    replaced as a whole. All other lines keep their content and order.

    Returns:
        Updated config text ending with exactly one newline
    """
    if not content.strip():
        return block + "\n"

    lines = content.split("\n")
    out: List[str] = []
    replaced = False

    i = 0
    while i < len(lines):
        if not _is_alias_host_line(lines[i], alias):
            out.append(lines[i])
            i += 1
            continue

        if not replaced:
            _append_separated(out, block)
            replaced = True

        # Skip the directive and the old block body
        i += 1
        while i < len(lines) and not _is_host_line(lines[i]):
            i += 1

    if not replaced:
        _append_separated(out, block)

    while out and not out[-1].strip():
        out.pop()
    return "\n".join(out) + "\n"
