"""
Release version comparison
"""
import re
from typing import List, Optional, Tuple

_LEADING_INT = re.compile(r"^\d+")


def parse_version_parts(version: str) -> Optional[List[int]]:
    """
    Parse "v1.2.3" style versions into integers.

    Each dot-separated part contributes its leading digits ("3-rc1" -> 3).

    Returns:
        List of parts, or None if any part is empty or has no leading digits
    """
    s = version.strip()
    if s[:1] in ("v", "V"):
        s = s[1:]
    if not s:
        return None

    parts: List[int] = []
    for segment in s.split("."):
        match = _LEADING_INT.match(segment)
        if not match:
            return None
        parts.append(int(match.group()))
    return parts


def compare_semver(a: str, b: str) -> Tuple[int, bool]:
    """
    Compare two versions, missing trailing parts count as 0.

    Returns:
        (cmp, ok); cmp is -1, 0 or 1, ok is False if either version is unparsable
    """
    av = parse_version_parts(a)
    bv = parse_version_parts(b)
    if av is None or bv is None:
        return 0, False

    width = max(len(av), len(bv))
    av += [0] * (width - len(av))
    bv += [0] * (width - len(bv))
    if av > bv:
        return 1, True
    if av < bv:
        return -1, True
    return 0, True
