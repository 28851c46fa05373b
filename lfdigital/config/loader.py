"""TOML configuration loader with deep merge support."""

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

# Source checkout: <root>/lfdigital/config/loader.py next to <root>/config
PACKAGE_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

# How many parents of the working directory are searched
SEARCH_DEPTH = 4


def _search_dirs() -> Iterator[Path]:
    cwd = Path.cwd()
    for directory in [cwd, *cwd.parents][: SEARCH_DEPTH + 1]:
        yield directory / "config"
    yield PACKAGE_CONFIG_DIR


def get_config_dir() -> Path:
    """Get the configuration directory path.

    `LFDIGITAL_CONFIG_DIR` wins when set. Otherwise the first `config/`
    holding a `default.toml` is used, searching the working directory and
    its parents before the checkout the package was loaded from.
    """
    config_dir_env = os.environ.get("LFDIGITAL_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    for candidate in _search_dirs():
        if (candidate / "default.toml").is_file():
            return candidate

    return Path("config")


def get_environment() -> str:
    """Get the current environment from LFDIGITAL_ENV.

    Defaults to 'development' if not set.
    """
    return os.environ.get("LFDIGITAL_ENV", "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Nested dictionaries are merged recursively; any other value in
    override replaces the one in base. Neither input is modified.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config() -> dict[str, Any]:
    """Load configuration from TOML files.

    Loading order:
    1. config/default.toml (required)
    2. config/{LFDIGITAL_ENV}.toml (optional)

    Returns:
        Merged configuration dictionary
    """
    config_dir = get_config_dir()
    env = get_environment()

    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            "Create config/default.toml or set LFDIGITAL_CONFIG_DIR."
        )

    config = load_toml(default_path)

    env_path = config_dir / f"{env}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
