from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_KEYWORD_INTENSITIES = {"light", "moderate", "aggressive"}


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    keyword_intensity: str
    keyword_context_aware: bool
    keyword_preserve_original: bool
    keyword_max_replacements: int
    scoring_config_path: str | None
    industry_lexicon_path: str | None


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    keyword_intensity=(_get_env("KEYWORD_INTENSITY", "moderate") or "moderate").strip().lower(),
    keyword_context_aware=_get_env_bool("KEYWORD_CONTEXT_AWARE", True),
    keyword_preserve_original=_get_env_bool("KEYWORD_PRESERVE_ORIGINAL", True),
    keyword_max_replacements=_get_env_int("KEYWORD_MAX_REPLACEMENTS", 0),
    scoring_config_path=_get_env("SCORING_CONFIG_PATH"),
    industry_lexicon_path=_get_env("INDUSTRY_LEXICON_PATH"),
)

if settings.keyword_intensity not in _KEYWORD_INTENSITIES:
    raise RuntimeError("KEYWORD_INTENSITY must be one of: light, moderate, aggressive.")

if settings.keyword_max_replacements < 0:
    raise RuntimeError("KEYWORD_MAX_REPLACEMENTS must be zero (unlimited) or a positive integer.")
