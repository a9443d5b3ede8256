"""
Configuration loader for Config.toml.

Example:

    mod_name = "Randomized World"
    target_path = "./output/randomized_world"
    game_path = "C:/Program Files (x86)/Steam/steamapps/common/Europa Universalis IV"

    [options]
    encoding = "windows-1252"
    strict = false
    legacy_quoting = false
"""

import codecs
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from eu4data.errors import ConfigError
from eu4data.files import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "Config.toml"

# Overrides DEFAULT_CONFIG_PATH when set
CONFIG_ENV_VAR = "EU4DATA_CONFIG"

REQUIRED_KEYS = ("mod_name", "target_path", "game_path")


@dataclass
class Config:
    """Loaded configuration."""
    mod_name: str
    target_path: Path
    game_path: Path
    encoding: str = DEFAULT_ENCODING
    strict: bool = False
    legacy_quoting: bool = False
    config_path: Optional[Path] = None


def get_config_path() -> Path:
    """Path of the config file, honouring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_PATH


def _require_str(data: Dict[str, Any], key: str, path: Path) -> str:
    value = data.get(key)
    if value is None:
        raise ConfigError(f"missing required key '{key}'", path)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string", path)
    return value


def _option(options: Dict[str, Any], key: str, default: Any, path: Path) -> Any:
    value = options.get(key, default)
    if not isinstance(value, type(default)):
        raise ConfigError(f"options.{key} must be {type(default).__name__}", path)
    return value


def _encoding(options: Dict[str, Any], path: Path) -> str:
    encoding = _option(options, "encoding", DEFAULT_ENCODING, path)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"options.encoding: unknown encoding {encoding!r}", path) from e
    return encoding


def config_from_dict(data: Dict[str, Any], path: Optional[Path] = None) -> Config:
    """Validate a parsed TOML document and build a Config."""
    for key in REQUIRED_KEYS:
        _require_str(data, key, path)

    options = data.get("options", {})
    if not isinstance(options, dict):
        raise ConfigError("[options] must be a table", path)

    return Config(
        mod_name=data["mod_name"],
        target_path=Path(data["target_path"]),
        game_path=Path(data["game_path"]),
        encoding=_encoding(options, path),
        strict=_option(options, "strict", False, path),
        legacy_quoting=_option(options, "legacy_quoting", False, path),
        config_path=path,
    )


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from a TOML file.

    Args:
        path: Explicit config path. Defaults to $EU4DATA_CONFIG, then
            ./config/Config.toml.

    Raises:
        ConfigError: file missing, malformed, or missing required keys
    """
    config_path = Path(path) if path is not None else get_config_path()
    logger.info(f"Loading config at \"{config_path}\"...")

    if not config_path.is_file():
        raise ConfigError("config file not found", config_path)

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", config_path) from e
    except OSError as e:
        raise ConfigError(f"cannot read file: {e}", config_path) from e

    config = config_from_dict(data, config_path)
    logger.debug(f"Config: mod={config.mod_name!r} game={config.game_path} target={config.target_path}")
    return config
