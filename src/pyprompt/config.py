from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
import os
from pathlib import Path
import tomllib
from typing import Any
import structlog
from .styles import THEMES

log = structlog.get_logger(__name__)

#: Default maximum number of path segments shown for the current directory
PATH_LENGTH = 3

#: Default number of characters of the commit hash to show
HASH_LENGTH = 7


class ConfigError(ValueError):
    """Raised when a configuration file or value is invalid"""


@dataclass(frozen=True)
class Config:
    #: Maximum number of trailing path segments to display
    path_length: int = PATH_LENGTH

    #: Number of leading characters of the commit hash to display
    hash_length: int = HASH_LENGTH

    #: Name of the color theme; a key of `THEMES`
    theme: str = "dark"

    def __post_init__(self) -> None:
        if (
            not isinstance(self.path_length, int)
            or isinstance(self.path_length, bool)
            or self.path_length < 1
        ):
            raise ConfigError(
                f"path_length must be a positive integer, not {self.path_length!r}"
            )
        if (
            not isinstance(self.hash_length, int)
            or isinstance(self.hash_length, bool)
            or self.hash_length < 0
        ):
            raise ConfigError(
                "hash_length must be a nonnegative integer, not"
                f" {self.hash_length!r}"
            )
        if not isinstance(self.theme, str) or self.theme not in THEMES:
            raise ConfigError(
                f"Unknown theme {self.theme!r}; choose from: {', '.join(THEMES)}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        if unknown := sorted(set(data) - known):
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, path: Path) -> Config:
        """
        Read configuration from the TOML file at ``path``, overlaying its
        top-level keys onto the defaults.  If the file does not exist, the
        default configuration is returned; if it cannot be read or parsed,
        `ConfigError` is raised.
        """
        try:
            with path.open("rb") as fp:
                data = tomllib.load(fp)
        except FileNotFoundError:
            log.debug("No configuration file found", path=str(path))
            return cls()
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"{path}: {e}") from e
        log.debug("Loaded configuration file", path=str(path), keys=sorted(data))
        return cls.from_mapping(data)

    def with_overrides(self, **overrides: Any) -> Config:
        """
        Return a copy of the configuration with the given fields replaced.
        Overrides that are `None` are ignored.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """
    Return the location of the user configuration file: ``$PYPROMPT_CONFIG``
    if set, otherwise ``pyprompt/config.toml`` under the XDG config directory
    """
    if env is None:
        env = os.environ
    if p := env.get("PYPROMPT_CONFIG"):
        return Path(p)
    if xdg := env.get("XDG_CONFIG_HOME"):
        base = Path(xdg)
    else:
        base = Path.home() / ".config"
    return base / "pyprompt" / "config.toml"
