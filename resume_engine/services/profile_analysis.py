from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, Field

from resume_engine.core.scoring import get_scoring_value
from resume_engine.features import normalize_skill_name
from resume_engine.normalize import ParseOk, has_list_data, parse_list_field, split_skill_string
from resume_engine.normalize.fields import EXPERIENCE_ALIASES
from resume_engine.schemas import Profile

Category = Literal["basic", "professional", "experience", "education", "skills"]
Impact = Literal["high", "medium", "low"]

_CATEGORIES: tuple[Category, ...] = ("basic", "professional", "experience", "education", "skills")
_IMPACT_ORDER = {"high": 0, "medium": 1, "low": 2}
MINIMUM_REQUIREMENTS = ("first_name", "last_name")


def _text_present(value: str | None) -> bool:
    return bool(value and value.strip())


def _skill_names(profile: Profile) -> list[str]:
    seen: dict[str, str] = {}
    for name in split_skill_string(profile.key_skills) + split_skill_string(profile.technical_proficiencies):
        seen.setdefault(normalize_skill_name(name), name)
    return list(seen.values())


def _experience_count(profile: Profile) -> int:
    result = parse_list_field(profile.work_experience, EXPERIENCE_ALIASES)
    return len(result.records) if isinstance(result, ParseOk) else 0


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    name: str
    label: str
    category: Category
    weight: int
    present: Callable[[Profile], bool]
    reason: str
    impact: Impact
    action: str


FIELD_DEFINITIONS: tuple[FieldDefinition, ...] = (
    FieldDefinition(
        "first_name", "First Name", "basic", 5,
        lambda p: _text_present(p.first_name),
        "Required for resume header", "high", "Add your first name to complete basic information",
    ),
    FieldDefinition(
        "last_name", "Last Name", "basic", 5,
        lambda p: _text_present(p.last_name),
        "Required for resume header", "high", "Add your last name to complete basic information",
    ),
    FieldDefinition(
        "phone", "Phone Number", "basic", 5,
        lambda p: _text_present(p.phone),
        "Employers need a way to contact you", "high", "Add your phone number for better contact options",
    ),
    FieldDefinition(
        "location", "Location", "basic", 5,
        lambda p: _text_present(p.location),
        "Helps employers understand your availability", "medium", "Add your city and state/country",
    ),
    FieldDefinition(
        "target_industry", "Target Industry", "professional", 10,
        lambda p: _text_present(p.target_industry),
        "Enables industry-specific keyword optimization", "high",
        "Select your target industry for better keyword matching",
    ),
    FieldDefinition(
        "professional_summary", "Professional Summary", "professional", 10,
        lambda p: _text_present(p.professional_summary),
        "Provides a strong opening statement for your resume", "high",
        "Write a brief professional summary (2-3 sentences)",
    ),
    FieldDefinition(
        "work_experience", "Work Experience", "experience", 30,
        lambda p: has_list_data(p.work_experience),
        "Essential for showcasing your career history", "high",
        "Add at least one work experience entry with achievements",
    ),
    FieldDefinition(
        "education", "Education", "education", 15,
        lambda p: has_list_data(p.education),
        "Important for demonstrating your qualifications", "medium", "Add your educational background",
    ),
    FieldDefinition(
        "skills", "Skills", "skills", 15,
        lambda p: bool(_skill_names(p)),
        "Highlights your technical and soft skills", "high", "List your relevant skills (aim for 5-10 skills)",
    ),
)


class ProfileField(BaseModel):
    name: str
    label: str
    category: Category
    weight: int
    is_present: bool


class ProfileSuggestion(BaseModel):
    field: str
    label: str
    reason: str
    impact: Impact
    action: str
    category: Category


class ProfileAnalysis(BaseModel):
    completeness: int = Field(ge=0, le=100)
    missing_fields: list[ProfileField] = Field(default_factory=list)
    suggestions: list[ProfileSuggestion] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    breakdown: dict[str, int] = Field(default_factory=dict)
    is_ready_for_generation: bool = False
    minimum_requirements_met: bool = False


def _percent(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole else 0


def _strengths(profile: Profile, present: set[str]) -> list[str]:
    strengths: list[str] = []
    basic_names = {definition.name for definition in FIELD_DEFINITIONS if definition.category == "basic"}
    if basic_names <= present:
        strengths.append("Complete contact information")

    detailed_length = int(get_scoring_value("profile_analysis.detailed_summary_length", 100))
    if "professional_summary" in present and len((profile.professional_summary or "").strip()) > detailed_length:
        strengths.append("Detailed professional summary")

    if "work_experience" in present:
        count = _experience_count(profile)
        if count >= int(get_scoring_value("profile_analysis.many_experiences", 3)):
            strengths.append(f"{count} work experiences listed")
        elif count > 0:
            strengths.append("Work experience provided")

    if "education" in present:
        strengths.append("Education background included")

    if "skills" in present:
        count = len(_skill_names(profile))
        if count >= int(get_scoring_value("profile_analysis.many_skills", 8)):
            strengths.append(f"{count} skills listed")
        else:
            strengths.append("Skills provided")

    if "target_industry" in present:
        strengths.append("Target industry specified")
    return strengths


def analyze_profile(profile: Profile | Mapping[str, Any]) -> ProfileAnalysis:
    """Weighted completeness of a profile plus prioritized improvement suggestions."""
    resolved = profile if isinstance(profile, Profile) else Profile.model_validate(dict(profile))

    fields = [
        ProfileField(
            name=definition.name,
            label=definition.label,
            category=definition.category,
            weight=definition.weight,
            is_present=definition.present(resolved),
        )
        for definition in FIELD_DEFINITIONS
    ]
    present = {item.name for item in fields if item.is_present}
    total_weight = sum(item.weight for item in fields)
    completeness = _percent(sum(item.weight for item in fields if item.is_present), total_weight)

    suggestions = [
        ProfileSuggestion(
            field=definition.name,
            label=definition.label,
            reason=definition.reason,
            impact=definition.impact,
            action=definition.action,
            category=definition.category,
        )
        for definition in FIELD_DEFINITIONS
        if definition.name not in present
    ]
    suggestions.sort(key=lambda suggestion: _IMPACT_ORDER[suggestion.impact])

    breakdown = {}
    for category in _CATEGORIES:
        category_fields = [item for item in fields if item.category == category]
        breakdown[category] = _percent(
            sum(item.weight for item in category_fields if item.is_present),
            sum(item.weight for item in category_fields),
        )

    minimum_met = all(name in present for name in MINIMUM_REQUIREMENTS)
    ready_at = int(get_scoring_value("profile_analysis.ready_completeness", 40))
    return ProfileAnalysis(
        completeness=completeness,
        missing_fields=[item for item in fields if not item.is_present],
        suggestions=suggestions,
        strengths=_strengths(resolved, present),
        breakdown=breakdown,
        is_ready_for_generation=completeness >= ready_at and minimum_met,
        minimum_requirements_met=minimum_met,
    )


def get_profile_completeness(profile: Profile | Mapping[str, Any]) -> int:
    return analyze_profile(profile).completeness


def is_profile_ready(profile: Profile | Mapping[str, Any]) -> bool:
    return analyze_profile(profile).is_ready_for_generation


def get_top_suggestions(profile: Profile | Mapping[str, Any], count: int = 3) -> list[ProfileSuggestion]:
    return analyze_profile(profile).suggestions[:count]


def get_missing_critical_fields(profile: Profile | Mapping[str, Any]) -> list[ProfileField]:
    threshold = int(get_scoring_value("profile_analysis.critical_field_weight", 10))
    return [item for item in analyze_profile(profile).missing_fields if item.weight >= threshold]
