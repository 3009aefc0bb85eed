"""Numeric knobs for adaptation, detection, strategy scoring and profile analysis."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .config import settings

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[1] / "data" / "scoring.yaml"


def _scoring_config_path() -> Path:
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return _DEFAULT_SCORING_CONFIG_PATH


def _read_scoring_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise RuntimeError(f"No scoring file at '{path}'; set SCORING_CONFIG_PATH or reinstall the package data.")
    try:
        with path.open("r", encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except OSError as exc:
        raise RuntimeError(f"Cannot open scoring file '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Scoring file '{path}' is not valid YAML: {exc}") from exc
    if not isinstance(document, dict):
        raise RuntimeError(f"Scoring file '{path}' must hold a mapping of sections.")
    return document


def get_scoring_config() -> dict[str, Any]:
    """Parsed scoring file, read once per process until ``reset_scoring_cache``."""
    global _SCORING_CONFIG_CACHE
    if _SCORING_CONFIG_CACHE is None:
        _SCORING_CONFIG_CACHE = _read_scoring_file(_scoring_config_path())
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Dotted lookup such as ``adaptation.intensity.light``; ``default`` when any segment is absent."""
    if not path:
        return default

    node: Any = get_scoring_config()
    for segment in path.split("."):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node


def reset_scoring_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None
