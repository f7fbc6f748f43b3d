"""Runtime settings read from the environment (.env supported via python-dotenv)."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from colorglobe.compute import DEFAULT_TOTAL_DOTS
from colorglobe.palette import DEFAULTS_DIR

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Malformed environment setting."""


@dataclass(frozen=True)
class Settings:
    total_dots: int = DEFAULT_TOTAL_DOTS
    seed: int | None = None
    frames: int = 60  # Frames per animated turn
    defaults_path: Path = DEFAULTS_DIR / "darcula.json"
    lang: str = "en"  # Fallback when the browser language is unknown
    log_level: str = "INFO"


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Variables to read. Defaults to os.environ.

    Returns:
        Settings with defaults for any unset variable.

    Raises:
        ConfigError: On a malformed value.
    """
    env = os.environ if environ is None else environ

    seed_raw = env.get("GLOBE_SEED")
    seed = None if not seed_raw else _int_setting(env, "GLOBE_SEED", 0, 0)

    log_level = env.get("LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {_LOG_LEVELS}, got {log_level!r}")

    lang = env.get("APP_LANG", "en").lower()
    if lang not in ("en", "ko"):
        raise ConfigError(f"APP_LANG must be 'en' or 'ko', got {lang!r}")

    defaults_raw = env.get("COLOR_DEFAULTS_PATH")
    defaults_path = Path(defaults_raw) if defaults_raw else Settings.defaults_path

    return Settings(
        total_dots=_int_setting(env, "GLOBE_TOTAL_DOTS", DEFAULT_TOTAL_DOTS, 0),
        seed=seed,
        frames=_int_setting(env, "GLOBE_FRAMES", 60, 1),
        defaults_path=defaults_path,
        lang=lang,
        log_level=log_level,
    )
