"""
Configuration loader with priority: env > TOML > defaults
"""
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ...core.constants import (
    APP_CONFIG_PATH,
    APP_CONFIG_MODE,
    DEFAULT_SERVER_URL,
    DEFAULT_HOST_ALIAS,
    DEFAULT_HOST_NAME,
    DEFAULT_HOST_PORT,
    DEFAULT_HOST_USER,
    ENV_TOKEN,
    ENV_GITEA_TOKEN,
    ENV_SERVER_URL,
    PRIVATE_DIR_MODE,
)
from ...core.exceptions import ConfigError
from ...core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AppConfig:
    """gitcrn settings"""
    server_url: str = DEFAULT_SERVER_URL
    token: str = field(default="", repr=False)
    ssh_alias: str = DEFAULT_HOST_ALIAS
    ssh_host: str = DEFAULT_HOST_NAME
    ssh_port: int = DEFAULT_HOST_PORT
    ssh_user: str = DEFAULT_HOST_USER


def render_default_config() -> str:
    """Default config.toml content"""
    return "\n".join([
        "# gitcrn config",
        f'server_url = "{DEFAULT_SERVER_URL}"',
        'token = ""',
        "",
        f'ssh_alias = "{DEFAULT_HOST_ALIAS}"',
        f'ssh_host = "{DEFAULT_HOST_NAME}"',
        f"ssh_port = {DEFAULT_HOST_PORT}",
        f'ssh_user = "{DEFAULT_HOST_USER}"',
        "",
    ])


class ConfigLoader:
    """Configuration loader with priority support"""

    # Checked in order, first non-empty value wins per key
    ENV_MAPPINGS = (
        (ENV_TOKEN, "token"),
        (ENV_GITEA_TOKEN, "token"),
        (ENV_SERVER_URL, "server_url"),
    )

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: config.toml path (default: ~/.config/gitcrn/config.toml)
        """
        self._config_path = config_path

    @property
    def path(self) -> Path:
        """Config file path"""
        if self._config_path is not None:
            return Path(self._config_path).expanduser()
        return Path(APP_CONFIG_PATH).expanduser()

    def load_toml(self) -> Dict[str, Any]:
        """Load TOML configuration file, {} if it does not exist"""
        path = self.path
        if not path.exists():
            return {}

        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e

    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config: Dict[str, Any] = {}
        for env_key, config_key in self.ENV_MAPPINGS:
            value = os.getenv(env_key, "").strip()
            if value and config_key not in config:
                config[config_key] = value
        return config

    def load(self, use_env: bool = True) -> AppConfig:
        """
        Load configuration with priority: env > TOML > defaults

        Empty strings in the file keep the defaults (except token), and
        ssh_port is only taken when it is a valid port number.

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        cfg = AppConfig()
        data = self.load_toml()

        for key in ("server_url", "ssh_alias", "ssh_host", "ssh_user"):
            value = str(data.get(key, "")).strip()
            if value:
                setattr(cfg, key, value)

        if "token" in data:
            cfg.token = str(data["token"]).strip()

        port = data.get("ssh_port")
        if isinstance(port, str) and port.strip().isdigit():
            port = int(port.strip())
        if isinstance(port, int) and not isinstance(port, bool) and 0 < port <= 65535:
            cfg.ssh_port = port
        elif port is not None:
            logger.warning("Ignoring invalid ssh_port in %s: %r", self.path, port)

        if use_env:
            for key, value in self.load_env().items():
                setattr(cfg, key, value)

        return cfg

    def generate(self, force: bool = False) -> Path:
        """
        Write the default config file.

        Raises:
            ConfigError: If the file exists and force is False, or on write errors
        """
        path = self.path
        try:
            path.parent.mkdir(mode=PRIVATE_DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Failed to create config directory: {e}") from e

        if not force and path.exists():
            raise ConfigError(f"{path} already exists. Use --force to overwrite")

        try:
            path.write_text(render_default_config(), encoding='utf-8')
            path.chmod(APP_CONFIG_MODE)
        except OSError as e:
            raise ConfigError(f"Failed to write {path}: {e}") from e
        return path
