"""Application settings loaded from .env and environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from squirrelrun.domain.exceptions import ConfigError

_PREFIX = "SQUIRRELRUN_"


@dataclass(frozen=True)
class AppSettings:
    width: int = 800
    height: int = 300
    fps: int = 60
    seed: int | None = None
    log_level: str = "info"


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """
    Read SQUIRRELRUN_* settings. With no explicit mapping, a .env file found from the
    working directory upwards is loaded first; real environment variables win over it.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        env: Mapping[str, str] = os.environ
    else:
        env = environ

    settings = AppSettings(
        width=_int(env, "WIDTH", 800),
        height=_int(env, "HEIGHT", 300),
        fps=_int(env, "FPS", 60),
        seed=_int(env, "SEED", None),
        log_level=check_log_level(env.get(_PREFIX + "LOG_LEVEL") or "info"),
    )
    if settings.width <= 0 or settings.height <= 0:
        raise ConfigError("viewport size must be positive")
    if settings.fps <= 0:
        raise ConfigError(f"{_PREFIX}FPS must be positive")
    return settings


def check_log_level(name: str) -> str:
    level = name.strip().lower()
    # getLevelName maps known names to their numeric level and echoes anything else back.
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ConfigError(f"unknown log level {name!r}")
    return level


def _int(env: Mapping[str, str], key: str, default: int | None) -> int | None:
    raw = env.get(_PREFIX + key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{_PREFIX}{key} must be an integer, got {raw!r}") from e
