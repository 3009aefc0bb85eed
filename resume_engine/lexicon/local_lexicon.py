from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from resume_engine.core.config import settings
from resume_engine.core.scoring import get_scoring_value

from .provider import LexiconProvider

_DEFAULT_LEXICON_PATH = Path(__file__).resolve().parents[1] / "data" / "industries.yaml"


@dataclass(frozen=True, slots=True)
class KeywordMapping:
    generic: str
    replacement: str
    context: tuple[str, ...] = ()
    weight: float | None = None


@dataclass(frozen=True, slots=True)
class IndustryProfile:
    key: str
    name: str
    keywords: tuple[str, ...] = field(default_factory=tuple)
    mappings: tuple[KeywordMapping, ...] = field(default_factory=tuple)
    action_verbs: tuple[str, ...] = field(default_factory=tuple)
    technical_terms: tuple[str, ...] = field(default_factory=tuple)


def _string_tuple(values: Any) -> tuple[str, ...]:
    if not isinstance(values, list):
        return ()
    return tuple(str(value) for value in values if str(value).strip())


def _parse_mapping(raw: Any) -> KeywordMapping | None:
    if not isinstance(raw, dict):
        return None
    generic = str(raw.get("generic") or "").strip()
    replacement = str(raw.get("replacement") or "").strip()
    if not generic or not replacement:
        return None
    weight = raw.get("weight")
    return KeywordMapping(
        generic=generic,
        replacement=replacement,
        context=_string_tuple(raw.get("context")),
        weight=float(weight) if weight is not None else None,
    )


def _parse_industry(key: str, raw: Any) -> IndustryProfile:
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid lexicon entry '{key}': expected a mapping.")
    mappings = tuple(
        mapping for mapping in (_parse_mapping(item) for item in raw.get("mappings") or []) if mapping is not None
    )
    return IndustryProfile(
        key=key,
        name=str(raw.get("name") or key),
        keywords=_string_tuple(raw.get("keywords")),
        mappings=mappings,
        action_verbs=_string_tuple(raw.get("action_verbs")),
        technical_terms=_string_tuple(raw.get("technical_terms")),
    )


class LocalLexicon(LexiconProvider):
    """Industry vocabulary loaded from a packaged YAML file."""

    def __init__(self, lexicon_path: str | Path | None = None) -> None:
        if lexicon_path:
            path = Path(lexicon_path)
        elif settings.industry_lexicon_path:
            path = Path(settings.industry_lexicon_path)
        else:
            path = _DEFAULT_LEXICON_PATH
        self._industries, self._aliases = self._load(path)

    @staticmethod
    def _load(path: Path) -> tuple[dict[str, IndustryProfile], dict[str, str]]:
        if not path.exists():
            raise RuntimeError(f"Industry lexicon not found at '{path}'.")
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise RuntimeError(f"Invalid YAML in industry lexicon '{path}': {exc}") from exc
        if not isinstance(raw, dict) or not isinstance(raw.get("industries"), dict):
            raise RuntimeError(f"Invalid industry lexicon '{path}': expected an 'industries' mapping.")

        industries = {
            str(key).strip().lower(): _parse_industry(str(key).strip().lower(), value)
            for key, value in raw["industries"].items()
        }
        aliases = {
            str(alias).strip().lower(): str(target).strip().lower()
            for alias, target in (raw.get("aliases") or {}).items()
        }
        return industries, aliases

    def _resolve_key(self, industry: str | None) -> str | None:
        if not industry:
            return None
        normalized = industry.strip().lower()
        if normalized in self._industries:
            return normalized
        alias_target = self._aliases.get(normalized)
        if alias_target in self._industries:
            return alias_target
        return None

    def get(self, industry: str | None) -> IndustryProfile | None:
        key = self._resolve_key(industry)
        return self._industries[key] if key else None

    def available_industries(self) -> list[str]:
        return list(self._industries.keys())

    def detect_industry(self, text: str) -> str | None:
        lowered = (text or "").lower()
        if not lowered.strip():
            return None

        keyword_weight = float(get_scoring_value("lexicon.detection.keyword_weight", 2.0))
        term_weight = float(get_scoring_value("lexicon.detection.technical_term_weight", 1.5))
        verb_weight = float(get_scoring_value("lexicon.detection.action_verb_weight", 1.0))
        min_score = float(get_scoring_value("lexicon.detection.min_score", 3.0))

        best_key: str | None = None
        best_score = 0.0
        for key, profile in self._industries.items():
            score = 0.0
            score += keyword_weight * sum(1 for item in profile.keywords if item.lower() in lowered)
            score += term_weight * sum(1 for item in profile.technical_terms if item.lower() in lowered)
            score += verb_weight * sum(1 for item in profile.action_verbs if item.lower() in lowered)
            if best_key is None or score > best_score:
                best_key, best_score = key, score

        return best_key if best_score > min_score else None
