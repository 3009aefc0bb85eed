"""Retargeting of an existing draft to a different industry.

The input draft is never modified. Experience prose goes through the keyword
adapter, skills are stably reordered by how much industry vocabulary they
touch, and the summary is rebuilt around the industry's headline keywords.
Other sections are carried over unchanged.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from resume_engine.adaptation import AdaptationConfig, KeywordAdapter
from resume_engine.lexicon import IndustryProfile, LexiconProvider
from resume_engine.schemas import Experience, ResumeDraft, Skill
from resume_engine.schemas.draft import CamelModel

logger = logging.getLogger(__name__)

_YEARS_RE = re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE)
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_MIN_SKILL_NAME_LENGTH = 3
_HEADLINE_KEYWORDS = 3


class RetargetResult(CamelModel):
    draft: ResumeDraft
    industry: str | None = None
    changes: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    experience_updates: int = 0
    skills_reordered: bool = False


def industry_summary(original: str, profile: IndustryProfile, adapter: KeywordAdapter) -> str:
    """Industry headline followed by the adapted remainder of the original summary."""
    years = _YEARS_RE.search(original or "")
    tenure = f" with {years.group(1)}+ years" if years else ""
    focus = ", ".join(profile.keywords[:_HEADLINE_KEYWORDS])
    headline = f"Experienced professional{tenure} in {profile.name}"
    if focus:
        headline += f", specializing in {focus}"
    headline += f". Proven track record of delivering results in {profile.name} environments."

    sentences = _SENTENCE_SPLIT_RE.split((original or "").strip(), maxsplit=1)
    remainder = sentences[1].strip() if len(sentences) > 1 else ""
    if not remainder:
        return headline
    return f"{headline} {adapter.adapt_text(remainder).adapted}"


def skill_relevance(skill: Skill, profile: IndustryProfile) -> int:
    name = skill.name.strip().lower()
    if not name:
        return 0
    vocabulary = {term.lower() for term in (*profile.keywords, *profile.technical_terms)}
    return sum(
        1
        for term in vocabulary
        if term in name or (len(name) >= _MIN_SKILL_NAME_LENGTH and name in term)
    )


def reorder_skills(skills: list[Skill], profile: IndustryProfile) -> list[Skill]:
    return sorted(skills, key=lambda skill: skill_relevance(skill, profile), reverse=True)


def _adapt_experience(entry: Experience, adapter: KeywordAdapter) -> Experience:
    return entry.model_copy(
        update={
            "description": adapter.adapt_text(entry.description).adapted,
            "highlights": [adapter.adapt_text(item).adapted for item in entry.highlights],
        }
    )


def retarget_draft(
    draft: ResumeDraft | Mapping[str, Any] | None,
    industry: str,
    intensity: str | None = None,
    *,
    rng: random.Random | None = None,
    lexicon: LexiconProvider | None = None,
) -> RetargetResult:
    """Copy ``draft`` with its prose and skill order adapted to ``industry``.

    An industry the lexicon does not know yields an unchanged copy and an
    empty change log.
    """
    if draft is None:
        raise ValueError("draft is required")
    source = draft if isinstance(draft, ResumeDraft) else ResumeDraft.model_validate(dict(draft))
    retargeted = source.model_copy(deep=True)

    adapter = KeywordAdapter(industry, AdaptationConfig.from_settings(intensity), rng=rng, lexicon=lexicon)
    profile = adapter.industry_profile
    if profile is None:
        logger.warning("retarget_unknown_industry industry=%s", industry)
        return RetargetResult(draft=retargeted)

    changes: list[str] = []

    summary = industry_summary(source.summary, profile, adapter)
    if summary != source.summary:
        changes.append("Updated professional summary for industry focus")

    experience = [_adapt_experience(entry, adapter) for entry in retargeted.experience]
    experience_updates = sum(
        1
        for before, after in zip(source.experience, experience)
        if (before.description, before.highlights) != (after.description, after.highlights)
    )
    if experience_updates:
        changes.append(f"Adapted {experience_updates} experience entries with industry terminology")

    skills = reorder_skills(retargeted.skills, profile)
    skills_reordered = [skill.name for skill in skills] != [skill.name for skill in source.skills]
    if skills_reordered:
        changes.append("Reordered skills to prioritize industry-relevant competencies")

    logger.info("draft_retargeted industry=%s changes=%s", profile.key, len(changes))
    return RetargetResult(
        draft=retargeted.model_copy(update={"summary": summary, "experience": experience, "skills": skills}),
        industry=profile.key,
        changes=changes,
        keywords=list(profile.keywords[:_HEADLINE_KEYWORDS]),
        experience_updates=experience_updates,
        skills_reordered=skills_reordered,
    )
