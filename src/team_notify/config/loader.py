"""Load config from TEAMS_CONFIG_PATH or return default.

``load_config()`` is memoised with ``functools.lru_cache`` so the file is read
and parsed at most once per process.  Call ``load_config.cache_clear()`` to
force a re-read (useful in tests).
"""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from team_notify.domain import ConfigError

from .schema import DEFAULT_CONFIG, TeamsConfig

logger = logging.getLogger(__name__)


class _Env(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TEAMS_", extra="ignore")
    config_path: Optional[str] = None


_env: Optional[_Env] = None


def _get_env() -> _Env:
    global _env
    if _env is None:
        _env = _Env()
    return _env


def _config_file() -> Optional[Path]:
    """The config file to read, or None when defaults apply."""
    raw = (_get_env().config_path or "").strip()
    if not raw:
        return None
    path = Path(raw).expanduser().resolve()
    if not path.is_file():
        logger.debug("Config file %s not found; using defaults", path)
        return None
    return path


def _read_config(path: Path) -> TeamsConfig:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"config file {path} is not valid JSON: {e}") from e
    try:
        return TeamsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {path}:\n{e}") from e


@functools.lru_cache(maxsize=1)
def load_config() -> TeamsConfig:
    """Config from TEAMS_CONFIG_PATH if set and present; else DEFAULT_CONFIG.

    Raises ``ConfigError`` when the file exists but cannot be read, parsed or
    validated.
    """
    path = _config_file()
    if path is None:
        return DEFAULT_CONFIG
    config = _read_config(path)
    logger.debug("Loaded config from %s", path)
    return config
