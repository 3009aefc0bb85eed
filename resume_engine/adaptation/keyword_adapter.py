"""Industry localization of prose by weighted whole-word keyword substitution.

Mappings come from the industry lexicon and numeric knobs from the scoring
config. ``KeywordAdapter`` also enriches weak text with industry keywords and
estimates how much a text could still be adapted.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from resume_engine.core.config import settings
from resume_engine.core.scoring import get_scoring_value
from resume_engine.lexicon import IndustryProfile, KeywordMapping, LexiconProvider, get_default_lexicon

logger = logging.getLogger(__name__)

KeywordIntensity = Literal["light", "moderate", "aggressive"]

_DEFAULT_INTENSITY_PROBABILITY = {"light": 0.3, "moderate": 0.6, "aggressive": 0.9}


@dataclass(frozen=True, slots=True)
class AdaptationConfig:
    intensity: KeywordIntensity = "moderate"
    preserve_original: bool = True
    context_aware: bool = True
    # None or 0 means unlimited.
    max_replacements: int | None = None

    @classmethod
    def from_settings(cls, intensity: str | None = None) -> "AdaptationConfig":
        chosen = (intensity or settings.keyword_intensity).strip().lower()
        if chosen not in _DEFAULT_INTENSITY_PROBABILITY:
            chosen = "moderate"
        return cls(
            intensity=chosen,  # type: ignore[arg-type]
            preserve_original=settings.keyword_preserve_original,
            context_aware=settings.keyword_context_aware,
            max_replacements=settings.keyword_max_replacements or None,
        )


class Replacement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    position: int


class AdaptationResult(BaseModel):
    original: str
    adapted: str
    replacements: list[Replacement] = Field(default_factory=list)
    score: float = Field(default=0.0, ge=0.0, le=1.0)


class TextAnalysis(BaseModel):
    word_count: int = 0
    potential_replacements: int = 0
    industry_keywords_present: int = 0
    adaptation_potential: Literal["low", "medium", "high"] = "low"


def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


def _match_case(original: str, replacement: str) -> str:
    if original == original.upper():
        return replacement.upper()
    if original[:1] == original[:1].upper():
        return replacement[:1].upper() + replacement[1:]
    return replacement.lower()


def _word_count(text: str) -> int:
    return len(text.split())


class KeywordAdapter:
    """Localizes prose to an industry by weighted whole-word substitution.

    All randomness (intensity gate, preserve-original skips, enrichment shuffle)
    is drawn from ``rng`` so a seeded ``random.Random`` makes results repeatable.
    """

    def __init__(
        self,
        industry: str | None,
        config: AdaptationConfig | None = None,
        *,
        rng: random.Random | None = None,
        lexicon: LexiconProvider | None = None,
    ) -> None:
        self.industry = industry
        self.config = config or AdaptationConfig.from_settings()
        self._rng = rng or random.Random()
        self._profile: IndustryProfile | None = (lexicon or get_default_lexicon()).get(industry)
        if industry and self._profile is None:
            logger.debug("keyword_adapter_unknown_industry industry=%s", industry)

    @property
    def industry_profile(self) -> IndustryProfile | None:
        return self._profile

    def _replacement_probability(self) -> float:
        fallback = _DEFAULT_INTENSITY_PROBABILITY.get(self.config.intensity, 0.6)
        return float(get_scoring_value(f"adaptation.intensity.{self.config.intensity}", fallback))

    @staticmethod
    def _sorted_mappings(profile: IndustryProfile) -> list[KeywordMapping]:
        default_weight = float(get_scoring_value("adaptation.default_mapping_weight", 0.5))
        return sorted(
            profile.mappings,
            key=lambda mapping: mapping.weight if mapping.weight is not None else default_weight,
            reverse=True,
        )

    def _has_context(self, text: str, matches: list[re.Match[str]], mapping: KeywordMapping) -> bool:
        window = int(get_scoring_value("adaptation.context_window", 50))
        context_words = [word.lower() for word in mapping.context]
        for match in matches:
            snippet = text[max(0, match.start() - window) : match.end() + window].lower()
            if any(word in snippet for word in context_words):
                return True
        return False

    def adapt_text(self, text: str) -> AdaptationResult:
        if not text or not text.strip() or self._profile is None:
            return AdaptationResult(original=text or "", adapted=text or "")

        probability = self._replacement_probability()
        skip_probability = float(get_scoring_value("adaptation.preserve_skip_probability", 0.3))
        limit = self.config.max_replacements or None

        adapted = text
        replacements: list[Replacement] = []
        for mapping in self._sorted_mappings(self._profile):
            if limit is not None and len(replacements) >= limit:
                break
            if self._rng.random() > probability:
                continue

            matches = list(_word_pattern(mapping.generic).finditer(adapted))
            if not matches:
                continue
            if self.config.context_aware and mapping.context and not self._has_context(adapted, matches, mapping):
                continue

            rebuilt = adapted
            offset = 0
            for match in matches:
                if limit is not None and len(replacements) >= limit:
                    break
                if self.config.preserve_original and self._rng.random() < skip_probability:
                    continue
                original_word = match.group(0)
                replacement_word = _match_case(original_word, mapping.replacement)
                position = match.start() + offset
                rebuilt = rebuilt[:position] + replacement_word + rebuilt[position + len(original_word) :]
                offset += len(replacement_word) - len(original_word)
                replacements.append(Replacement(from_=original_word, to=replacement_word, position=position))
            adapted = rebuilt

        return AdaptationResult(
            original=text,
            adapted=adapted,
            replacements=replacements,
            score=self._adaptation_score(text, adapted, len(replacements)),
        )

    def adapt_texts(self, texts: list[str]) -> list[AdaptationResult]:
        return [self.adapt_text(text) for text in texts]

    @staticmethod
    def _adaptation_score(original: str, adapted: str, replacement_count: int) -> float:
        if original == adapted:
            return 0.0
        replacement_weight = float(get_scoring_value("adaptation.score.replacement_weight", 0.7))
        length_weight = float(get_scoring_value("adaptation.score.length_weight", 0.3))
        replacement_ratio = float(get_scoring_value("adaptation.score.replacement_ratio", 0.3))
        length_ratio = float(get_scoring_value("adaptation.score.length_ratio", 0.2))

        word_count = max(1, _word_count(original))
        char_diff = abs(len(adapted) - len(original))
        replacement_score = min(1.0, replacement_count / (word_count * replacement_ratio))
        char_score = min(1.0, char_diff / (max(1, len(original)) * length_ratio))
        score = replacement_score * replacement_weight + char_score * length_weight
        return round(min(1.0, max(0.0, score)), 4)

    def enrich_text(self, text: str, max_keywords: int = 3) -> str:
        """Append up to ``max_keywords`` industry keywords not yet in the text."""
        if self._profile is None or max_keywords <= 0:
            return text
        lowered = (text or "").lower()
        available = [keyword for keyword in self._profile.keywords if keyword.lower() not in lowered]
        if not available:
            return text
        self._rng.shuffle(available)
        selected = available[:max_keywords]
        return f"{text} Experienced with {', '.join(selected)}."

    def analyze_text(self, text: str) -> TextAnalysis:
        if self._profile is None:
            return TextAnalysis()

        word_count = _word_count(text or "")
        if word_count == 0:
            return TextAnalysis()

        lowered = text.lower()
        potential = sum(len(_word_pattern(mapping.generic).findall(text)) for mapping in self._profile.mappings)
        present = sum(1 for keyword in self._profile.keywords if keyword.lower() in lowered)

        high_ratio = float(get_scoring_value("adaptation.analysis.high_ratio", 0.15))
        medium_ratio = float(get_scoring_value("adaptation.analysis.medium_ratio", 0.08))
        high_floor = int(get_scoring_value("adaptation.analysis.high_keyword_floor", 2))
        medium_floor = int(get_scoring_value("adaptation.analysis.medium_keyword_floor", 4))

        ratio = potential / word_count
        if ratio > high_ratio or present < high_floor:
            level = "high"
        elif ratio > medium_ratio or present < medium_floor:
            level = "medium"
        else:
            level = "low"
        return TextAnalysis(
            word_count=word_count,
            potential_replacements=potential,
            industry_keywords_present=present,
            adaptation_potential=level,
        )


def adapt_text_for_industry(
    text: str,
    industry: str,
    intensity: KeywordIntensity = "moderate",
    *,
    rng: random.Random | None = None,
) -> str:
    adapter = KeywordAdapter(industry, AdaptationConfig.from_settings(intensity), rng=rng)
    return adapter.adapt_text(text).adapted


def adapt_texts_for_industry(
    texts: list[str],
    industry: str,
    intensity: KeywordIntensity = "moderate",
    *,
    rng: random.Random | None = None,
) -> list[str]:
    adapter = KeywordAdapter(industry, AdaptationConfig.from_settings(intensity), rng=rng)
    return [result.adapted for result in adapter.adapt_texts(texts)]
