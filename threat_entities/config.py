"""Settings loaded from the environment and optional .env files."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values

from .errors import ConfigError
from .registry import DEFAULT_PLUGIN_GROUP

ENV_PREFIX = "THREAT_ENTITIES_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def default_env_files() -> list[Path]:
    # Current dir first, then home dir.
    return [Path(".env"), Path.home() / ".env", Path.home() / ".threat-entities.env"]


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    load_plugins: bool = False
    plugin_group: str = DEFAULT_PLUGIN_GROUP


def _parse_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{name}: expected a boolean, got {raw!r}")


def _read_env_file(env_file: Union[str, Path, None]) -> dict[str, Optional[str]]:
    if env_file is not None:
        path = Path(env_file)
        if not path.is_file():
            raise ConfigError(f"env file not found: {path}")
        return dotenv_values(path)

    for path in default_env_files():
        if path.is_file():
            return dotenv_values(path)
    return {}


def load_settings(
    env_file: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from an .env file overridden by the process environment.

    `env_file` replaces the default search (`.env`, `~/.env`,
    `~/.threat-entities.env`, first existing wins). Raises ConfigError on
    invalid values.
    """
    values = {k: v for k, v in _read_env_file(env_file).items() if v is not None}
    values.update(os.environ if environ is None else environ)

    def get(key: str) -> Optional[str]:
        return values.get(ENV_PREFIX + key)

    level = (get("LOG_LEVEL") or "WARNING").strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL: unknown level {level!r}")

    plugins_raw = get("LOAD_PLUGINS")
    load_plugins = _parse_bool(ENV_PREFIX + "LOAD_PLUGINS", plugins_raw) if plugins_raw is not None else False

    group = (get("PLUGIN_GROUP") or DEFAULT_PLUGIN_GROUP).strip()
    if not group:
        raise ConfigError(f"{ENV_PREFIX}PLUGIN_GROUP cannot be empty")

    return Settings(log_level=level, load_plugins=load_plugins, plugin_group=group)


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the CLI / web entry points (no-op if already configured)."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
