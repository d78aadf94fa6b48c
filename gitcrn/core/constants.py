"""
Project constants definitions
"""

# ============================================================
# Application
# ============================================================

APP_NAME = "gitcrn"
PROJECT_URL = "https://github.com/crnobog69/gitcrn-cli-bin"
CREATOR_NAMES = "crnijada / crnobog / vltc"

# ============================================================
# SSH Host Defaults
# ============================================================

DEFAULT_HOST_ALIAS = "gitcrn"
DEFAULT_HOST_NAME = "100.91.132.35"
DEFAULT_HOST_USER = "git"
DEFAULT_HOST_PORT = 222

# ============================================================
# Gitea
# ============================================================

DEFAULT_SERVER_URL = "http://100.91.132.35:5000"
GITEA_USER_TIMEOUT = 8.0
GITEA_CREATE_TIMEOUT = 10.0

# ============================================================
# Updates
# ============================================================

LATEST_RELEASE_API = "https://api.github.com/repos/crnobog69/gitcrn-cli-bin/releases/latest"
UPDATE_CHECK_TIMEOUT = 1.2
UPDATE_LINUX_CMD = (
    "curl -fsSL https://raw.githubusercontent.com/crnobog69/gitcrn-cli-bin/"
    "refs/heads/master/scripts/update.sh | bash"
)
UPDATE_WINDOWS_CMD = (
    "iwr https://raw.githubusercontent.com/crnobog69/gitcrn-cli-bin/"
    "refs/heads/master/scripts/update.ps1 -UseBasicParsing | iex"
)

# ============================================================
# Scripts
# ============================================================

DEFAULT_COMMIT_MSG = "❄️"
SCRIPT_MODE = 0o755
PS_SCRIPT_MODE = 0o644

# ============================================================
# Paths
# ============================================================

SSH_CONFIG_PATH = "~/.ssh/config"
SSH_CONFIG_MODE = 0o600
PRIVATE_DIR_MODE = 0o700
APP_CONFIG_PATH = "~/.config/gitcrn/config.toml"
APP_CONFIG_MODE = 0o600

DEFAULT_PUBLIC_KEYS = (
    "~/.ssh/id_ed25519.pub",
    "~/.ssh/id_rsa.pub",
    "~/.ssh/id_ecdsa.pub",
    "~/.ssh/id_dsa.pub",
)

# ============================================================
# Environment
# ============================================================

ENV_TOKEN = "GITCRN_TOKEN"
ENV_GITEA_TOKEN = "GITEA_TOKEN"
ENV_SERVER_URL = "GITCRN_SERVER_URL"
ENV_NO_UPDATE_CHECK = "GITCRN_NO_UPDATE_CHECK"
