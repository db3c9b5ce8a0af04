"""Configuration and data file resolution."""

import os
from pathlib import Path

import yaml

DATA_FILE_NAME = ".autojump-go.txt"
DEFAULT_MAX_CANDIDATES = 10


class ConfigError(Exception):
    """Raised when the data file location cannot be determined."""


def get_config_dir() -> Path:
    """Config directory, honouring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "aj"
    return Path.home() / ".config" / "aj"


def get_config_file() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> dict:
    """Load config from the aj config.yaml."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        config = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError:
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict) -> None:
    """Save config to the aj config.yaml."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(yaml.dump(config, default_flow_style=False))


def get_data_path() -> Path:
    """Get the weight store path with resolution priority.

    Priority:
    1. AJ_DATA_FILE environment variable
    2. Config file (data_file key)
    3. $HOME/.autojump-go.txt

    Raises ConfigError when the default is needed and $HOME is empty.
    """
    # 1. Environment variable
    env_data = os.environ.get("AJ_DATA_FILE")
    if env_data:
        return Path(env_data).expanduser()

    # 2. Config file
    config = load_config()
    if config.get("data_file"):
        return Path(str(config["data_file"])).expanduser()

    # 3. Home directory
    home = os.environ.get("HOME")
    if not home:
        raise ConfigError("$HOME is empty")
    return Path(home) / DATA_FILE_NAME


def get_verbosity() -> int:
    """Get verbosity level (default: 1).

    Levels:
    - 0: Silent (errors only)
    - 1: Normal (warnings and essential output)
    - 2: Verbose (store and match details)
    - 3: Debug (per-candidate scores)

    AJ_VERBOSITY takes precedence over the config file.
    """
    env_level = os.environ.get("AJ_VERBOSITY")
    if env_level:
        try:
            return int(env_level)
        except ValueError:
            pass
    config = load_config()
    try:
        return int(config.get("verbosity", 1))
    except (TypeError, ValueError):
        return 1


def set_verbosity(level: int) -> None:
    """Save verbosity level to config file (0-3)."""
    if not 0 <= level <= 3:
        raise ValueError("Verbosity level must be between 0 and 3")
    config = load_config()
    config["verbosity"] = level
    save_config(config)


def get_max_candidates() -> int:
    """Number of top fuzzy matches considered when picking by weight."""
    config = load_config()
    try:
        value = int(config.get("max_candidates", DEFAULT_MAX_CANDIDATES))
    except (TypeError, ValueError):
        return DEFAULT_MAX_CANDIDATES
    return value if value >= 1 else DEFAULT_MAX_CANDIDATES


def is_case_sensitive() -> bool:
    return bool(load_config().get("case_sensitive", False))


def use_atomic_write() -> bool:
    """Whether saves go through a temp file and rename (default) or in place."""
    return bool(load_config().get("atomic_write", True))
