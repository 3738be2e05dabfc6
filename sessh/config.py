# sessh configuration loading

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .core.errors import ConfigurationError

# Environment variable holding the home directory, per platform
HOME_VARIABLES = {
    "linux": "HOME",
    "darwin": "HOME",
    "android": "HOME",
    "win32": "USERPROFILE",
    "cygwin": "HOME",
}


@dataclass(frozen=True)
class SessionPaths:
    """Resolved locations of the two host sources."""
    history_file: Path
    known_hosts: Path


def _config_file() -> Path:
    from . import constants
    return constants.CONFIG_FILE


def load_config() -> Dict[str, Any]:
    """
    Load the main configuration file.

    Returns:
        Configuration dictionary merged over the defaults

    Raises:
        ConfigurationError: if the file is not valid YAML
    """
    config_file = _config_file()
    if not config_file.exists():
        return get_default_config()

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid config file ({e})", str(config_file)) from e
    except OSError as e:
        raise ConfigurationError(f"cannot read config file ({e.strerror or e})", str(config_file)) from e

    if not isinstance(config, dict):
        raise ConfigurationError("config file must contain a mapping", str(config_file))

    # Merge with defaults
    defaults = get_default_config()
    return merge_dicts(defaults, config)


def save_config(config: Dict[str, Any]) -> None:
    """
    Save the configuration file.

    Args:
        config: Configuration dictionary
    """
    config_file = _config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def get_default_config() -> Dict[str, Any]:
    """Get the default configuration."""
    from .constants import DEFAULT_HISTORY_FILE, DEFAULT_KNOWN_HOSTS
    return {
        "paths": {
            # Targets used before, one per line
            "history_file": DEFAULT_HISTORY_FILE,
            # Offered as candidates when the first input is empty
            "known_hosts": DEFAULT_KNOWN_HOSTS,
        },
        "ssh": {
            "binary": "ssh",
            # Extra arguments placed before user@host, e.g. ["-A"]
            "extra_args": [],
            # Store user@host after asking for a username
            "remember_username": True,
        },
        "log": {
            # JSONL event log under ~/.config/sessh/logs
            "enabled": True,
        },
    }


def merge_dicts(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with overriding values

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def lookup(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """Look up a dot-separated path in an already loaded config."""
    value = config
    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def get_config_value(path: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-separated path.

    Args:
        path: Dot-separated path (e.g., "paths.history_file")
        default: Default value if not found

    Returns:
        Configuration value
    """
    return lookup(load_config(), path, default)


def set_config_value(path: str, value: Any) -> None:
    """
    Set a configuration value by dot-separated path.

    Args:
        path: Dot-separated path (e.g., "ssh.binary")
        value: Value to set
    """
    config = load_config()
    keys = path.split(".")

    # Navigate to parent
    current = config
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    save_config(config)


def parse_value(raw: str) -> Any:
    """Parse a command line value as YAML so that true/12/[a] keep their type."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def locate_home_dir(
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Locate the user's home directory.

    Raises:
        ConfigurationError: on an unsupported platform or when the
            home variable is unset
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    variable = HOME_VARIABLES.get(platform)
    if variable is None:
        raise ConfigurationError(f"unsupported platform: {platform}")

    home = environ.get(variable, "").strip()
    if not home:
        raise ConfigurationError(f"cannot locate home directory (${variable} is not set)")
    return Path(home)


def expand_path(value: str, home: Path) -> Path:
    """Expand a leading ~ against the given home directory."""
    if value == "~":
        return home
    if value.startswith("~/") or value.startswith("~\\"):
        return home / value[2:]
    return Path(value)


def resolve_paths(config: Dict[str, Any], home: Optional[Path] = None) -> SessionPaths:
    """
    Resolve the history and known_hosts locations from config.

    Args:
        config: Loaded configuration
        home: Home directory, located from the environment when omitted

    Returns:
        SessionPaths
    """
    paths = config.get("paths") or {}
    history = str(paths.get("history_file") or "")
    known_hosts = str(paths.get("known_hosts") or "")
    if not history or not known_hosts:
        raise ConfigurationError("paths.history_file and paths.known_hosts must be set")

    if home is None and (history.startswith("~") or known_hosts.startswith("~")):
        home = locate_home_dir()

    return SessionPaths(
        history_file=expand_path(history, home) if home else Path(history),
        known_hosts=expand_path(known_hosts, home) if home else Path(known_hosts),
    )
