"""
Core utility functions
"""
import platform
from pathlib import Path
from typing import Optional, Tuple

import paramiko


# ============================================================
# Text Helpers
# ============================================================

def normalize_newlines(text: str) -> str:
    """Collapse CRLF line endings to LF"""
    return text.replace("\r\n", "\n")


def first_line(text: str) -> str:
    """First line of text, trimmed"""
    return text.split("\n", 1)[0].strip()


def fallback(value: Optional[str], alt: str) -> str:
    """Return value unless it is empty or whitespace"""
    if not value or not value.strip():
        return alt
    return value


# ============================================================
# Platform / Path Helpers
# ============================================================

def is_windows() -> bool:
    """Check if running on Windows"""
    return platform.system().lower() == "windows"


def expand_home_path(path: str) -> Path:
    """Resolve a local path, expand ~"""
    return Path(path.strip()).expanduser()


def file_exists(path: Optional[Path]) -> bool:
    """True for an existing regular file"""
    return path is not None and str(path) != "" and path.is_file()


def first_existing_path(*paths: str) -> Optional[Path]:
    """First path (after ~ expansion) that points to an existing file"""
    for raw in paths:
        candidate = expand_home_path(raw)
        if file_exists(candidate):
            return candidate
    return None


# ============================================================
# SSH Key Helpers
# ============================================================

def identity_public_key_path(identity_file: str) -> Optional[Path]:
    """
    Map an IdentityFile value to its public key.

    Accepts either the private key path (".pub" is appended) or the
    public key path itself. Returns None if the file does not exist.
    """
    identity = identity_file.strip().strip('"')
    if not identity:
        return None

    path = expand_home_path(identity)
    if path.name.endswith(".pub"):
        return path if file_exists(path) else None

    pub = path.with_name(path.name + ".pub")
    return pub if file_exists(pub) else None


def read_public_key_info(path: Path) -> Tuple[str, str]:
    """
    Read key type and comment from an OpenSSH public key file.

    Returns:
        (key_type, comment); comment is "" when absent

    Raises:
        ValueError: If the file is not a valid public key
        OSError: If the file cannot be read
    """
    line = first_line(path.read_text(encoding="utf-8"))
    blob = paramiko.PublicBlob.from_string(line)
    return blob.key_type, (blob.comment or "").strip()
