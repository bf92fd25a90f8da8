"""Typed configuration loading.

The config file (`natplat.toml` by default) lets the CLI resolve names for a
host other than the one it runs on:

    [host]
    os_name = "Windows 11"
    os_arch = "amd64"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "HostConfig",
    "DEFAULT_CONFIG_NAME",
    "load_config",
    "load_config_or_default",
]

DEFAULT_CONFIG_NAME = "natplat.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class HostConfig:
    """Raw host strings overriding the probed values.

    None means "use what the probe reports".
    """

    os_name: str | None = None
    os_arch: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    host: HostConfig = field(default_factory=HostConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        host: StrDict = get_table(data, "host") or {}
        return cls(
            host=HostConfig(
                os_name=get_str(host, "os_name"),
                os_arch=get_str(host, "os_arch"),
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any error."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
