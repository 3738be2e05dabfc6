# sessh constants
# Locations of the config directory and its files

import os
from pathlib import Path

APP_NAME = "sessh"

CONFIG_DIR = Path(
    os.environ.get("SESSH_CONFIG_DIR") or Path.home() / ".config" / APP_NAME
)
CONFIG_FILE = CONFIG_DIR / "config.yaml"
LOGS_DIR = CONFIG_DIR / "logs"

DEFAULT_HISTORY_FILE = "~/.session"
DEFAULT_KNOWN_HOSTS = "~/.ssh/known_hosts"
