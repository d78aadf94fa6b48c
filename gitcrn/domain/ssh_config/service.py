"""
SSH config file service - reads and rewrites ~/.ssh/config
"""
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from ...core.constants import SSH_CONFIG_PATH, SSH_CONFIG_MODE, PRIVATE_DIR_MODE
from ...core.exceptions import SSHConfigError
from ...core.logging import get_logger
from ...core.utils import normalize_newlines
from .merger import find_host_settings, has_exact_match, render_block, merge_host_block

logger = get_logger(__name__)


@dataclass
class HostTarget:
    """Where the SSH alias should point"""
    alias: str
    host: str
    user: str
    port: int

    def validate(self) -> None:
        """Validate user supplied values"""
        if not self.host.strip():
            raise SSHConfigError("--host is required with --custom")
        if not self.user.strip():
            raise SSHConfigError("--user is required with --custom")
        if not (1 <= self.port <= 65535):
            raise SSHConfigError("--port must be between 1 and 65535 with --custom")

    def describe(self) -> str:
        return f"Host {self.alias} -> {self.host}:{self.port} as {self.user}"


class SSHConfigService:
    """
    Host alias management for the user's SSH client config.

    The file is read fully, transformed in memory and written back as a
    whole; there is no locking between concurrent runs.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize SSH config service.

        Args:
            config_path: Config file path (default: ~/.ssh/config, resolved on use)
        """
        self._config_path = config_path

    @property
    def path(self) -> Path:
        """Config file path"""
        if self._config_path is not None:
            return Path(self._config_path).expanduser()
        return Path(SSH_CONFIG_PATH).expanduser()

    def read(self) -> str:
        """
        Read config content with normalized newlines.

        Returns:
            File content, or "" if the file does not exist

        Raises:
            SSHConfigError: If the file exists but cannot be read
        """
        path = self.path
        try:
            return normalize_newlines(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            raise SSHConfigError(f"Failed to read {path}: {e}") from e

    def lookup(self, alias: str) -> Tuple[Dict[str, str], bool]:
        """Settings of the first Host block for alias"""
        return find_host_settings(self.read(), alias)

    def upsert(self, alias: str, host: str, user: str, port: int) -> Tuple[Path, bool]:
        """
        Ensure the config has a Host block for alias pointing at host/user/port.

        Returns:
            (config_path, changed); changed is False if the block already matched

        Raises:
            SSHConfigError: If the config cannot be read or written
        """
        path = self.path
        try:
            path.parent.mkdir(mode=PRIVATE_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise SSHConfigError(f"Failed to create {path.parent}: {e}") from e

        content = self.read()
        if has_exact_match(content, alias, host, user, port):
            logger.debug("Host %s already up to date in %s", alias, path)
            return path, False

        block = render_block(alias, host, user, port)
        updated = merge_host_block(content, alias, block)
        self._write(path, updated)
        logger.info("Host %s written to %s", alias, path)
        return path, True

    def _write(self, path: Path, content: str) -> None:
        """Replace the file through a temporary file in the same directory"""
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".config.", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.chmod(tmp_name, SSH_CONFIG_MODE)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SSHConfigError(f"Failed to write {path}: {e}") from e
