"""Résumé draft assembly.

``generate_draft`` picks a strategy policy for the profile and runs one shared
pipeline: personal info is merged field by field over the template's starter
values, list sections come from the profile when they parse to something
usable and from the template otherwise, and prose is localized to the target
industry through the keyword adapter. Malformed profile data never aborts
generation; the affected section degrades to template content.
"""

from __future__ import annotations

import logging
import random
import uuid
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from resume_engine.adaptation import AdaptationConfig, KeywordAdapter
from resume_engine.core.scoring import get_scoring_value
from resume_engine.features import TRANSFERABLE_CATEGORY, categorize, default_level, normalize_skill_name
from resume_engine.lexicon import LexiconProvider
from resume_engine.normalize import (
    EDUCATION_ALIASES,
    EXPERIENCE_ALIASES,
    PROJECT_ALIASES,
    ParseFallback,
    coerce_flag,
    coerce_string_list,
    coerce_text,
    parse_free_text_projects,
    parse_list_field,
    split_skill_string,
)
from resume_engine.normalize.utils import is_blank, normalize_line
from resume_engine.schemas import (
    DraftSettings,
    Education,
    Experience,
    PersonalInfo,
    Profile,
    Project,
    ResumeDraft,
    Skill,
    StarterData,
    Template,
    ValidationReport,
)
from resume_engine.strategies import StrategyPolicy, StrategySelector, get_default_selector

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
_Entry = TypeVar("_Entry", bound=BaseModel)

REQUIRED_FIELDS = ("fullName", "email")
RECOMMENDED_FIELDS = ("phone", "location")

DEGREE_NAMES: dict[str, str] = {
    "high school": "High School Diploma",
    "high_school": "High School Diploma",
    "associate": "Associate's Degree",
    "associates": "Associate's Degree",
    "bachelor": "Bachelor's Degree",
    "bachelors": "Bachelor's Degree",
    "bs": "Bachelor of Science",
    "ba": "Bachelor of Arts",
    "master": "Master's Degree",
    "masters": "Master's Degree",
    "ms": "Master of Science",
    "ma": "Master of Arts",
    "mba": "Master of Business Administration",
    "phd": "Doctor of Philosophy",
    "doctorate": "Doctorate",
}

# Narrative fields turned into projects, in output order.
NARRATIVE_PROJECT_FIELDS: tuple[tuple[str, str], ...] = (
    ("academic_projects", "Academic Project"),
    ("personal_projects", "Personal Project"),
    ("volunteer_experience", "Volunteer Experience"),
    ("extracurricular_activities", "Extracurricular Activity"),
)

TRANSFERABLE_KEYWORDS: tuple[str, ...] = (
    "led",
    "managed",
    "improved",
    "increased",
    "reduced",
    "developed",
    "created",
    "implemented",
    "collaborated",
    "communicated",
    "analyzed",
    "problem-solving",
    "leadership",
    "team",
    "project",
    "customer",
)

# Personal-info attribute -> profile accessor.
_PERSONAL_SOURCES: dict[str, Callable[[Profile], str | None]] = {
    "full_name": lambda profile: normalize_line(f"{profile.first_name or ''} {profile.last_name or ''}"),
    "email": lambda profile: profile.contact_email,
    "phone": lambda profile: profile.phone,
    "location": lambda profile: profile.location,
    "website": lambda profile: profile.portfolio_url,
    "linkedin": lambda profile: profile.linkedin_url,
    "github": lambda profile: profile.github_url,
}


def _new_id() -> str:
    return uuid.uuid4().hex


def merge_field(profile_value: str | None, template_value: str | None, placeholders: list[str]) -> str:
    """Profile value if non-blank, else the template value unless it is a known placeholder."""
    if profile_value and profile_value.strip():
        return profile_value.strip()
    if template_value and template_value.strip():
        candidate = template_value.strip()
        lowered = candidate.lower()
        if not any(lowered == placeholder.strip().lower() for placeholder in placeholders):
            return candidate
    return ""


def build_personal_info(profile: Profile, template: Template) -> PersonalInfo:
    starter = (template.starter_data.personal_info if template.starter_data else None) or PersonalInfo()
    merged = {
        name: merge_field(source(profile), getattr(starter, name), template.placeholders_for(name))
        for name, source in _PERSONAL_SOURCES.items()
    }
    return PersonalInfo(**merged, summary=starter.summary)


def personal_info_gaps(info: PersonalInfo) -> tuple[list[str], list[str]]:
    values = info.model_dump(by_alias=True)
    missing = [name for name in REQUIRED_FIELDS if not str(values.get(name) or "").strip()]
    warnings = [name for name in RECOMMENDED_FIELDS if not str(values.get(name) or "").strip()]
    return missing, warnings


def prioritize_transferable(highlights: list[str]) -> list[str]:
    """Stable reorder putting highlights with transferable-skill language first."""

    def _has_keyword(text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in TRANSFERABLE_KEYWORDS)

    return sorted(highlights, key=lambda text: 0 if _has_keyword(text) else 1)


def degree_from_level(education_level: str | None) -> str | None:
    level = (education_level or "").strip()
    if not level:
        return None
    degree = DEGREE_NAMES.get(level.lower(), level)
    min_length = int(get_scoring_value("education.min_degree_length", 3))
    if len(degree) < min_length:
        return None
    return degree


class DraftGenerator:
    """Runs the shared generation pipeline for one profile under one policy."""

    def __init__(
        self,
        profile: Profile,
        template: Template,
        policy: StrategyPolicy,
        *,
        industry: str | None = None,
        intensity: str | None = None,
        rng: random.Random | None = None,
        id_factory: IdFactory | None = None,
        lexicon: LexiconProvider | None = None,
    ) -> None:
        self.profile = profile
        self.template = template
        self.policy = policy
        self.industry = industry.strip() if industry and industry.strip() else None
        self._new_id = id_factory or _new_id
        self._starter = template.starter_data or StarterData()
        self._adapter: KeywordAdapter | None = None
        if self.industry:
            adapter = KeywordAdapter(
                self.industry,
                AdaptationConfig.from_settings(intensity),
                rng=rng,
                lexicon=lexicon,
            )
            if adapter.industry_profile is not None:
                self._adapter = adapter

    def generate(self) -> ResumeDraft:
        personal_info = build_personal_info(self.profile, self.template)
        self._report_gaps(personal_info)
        return ResumeDraft(
            personal_info=personal_info,
            summary=self._summary(),
            experience=self._experience(),
            education=self._education(),
            skills=self._skills(),
            projects=self._projects(),
            settings=self._settings(),
        )

    def _report_gaps(self, personal_info: PersonalInfo) -> None:
        missing, warnings = personal_info_gaps(personal_info)
        if missing:
            logger.warning("draft_missing_required_fields fields=%s", missing)
        if warnings:
            logger.info("draft_missing_recommended_fields fields=%s", warnings)

    def _adapt(self, text: str) -> str:
        if self._adapter is None or not text:
            return text
        return self._adapter.adapt_text(text).adapted

    def _template_copy(self, section: str, entries: list[_Entry], reason: str | None = None) -> list[_Entry]:
        if reason is not None and reason != "missing":
            logger.warning("draft_section_fallback section=%s reason=%s", section, reason)
        return [entry.model_copy(update={"id": self._new_id()}, deep=True) for entry in entries]

    def _build_section(
        self,
        section: str,
        raw: Any,
        alias_table: Mapping[str, Any],
        build: Callable[[dict[str, Any]], _Entry],
    ) -> list[_Entry] | str:
        """Profile entries for a list section, or the reason they cannot be used."""
        result = parse_list_field(raw, alias_table)
        if isinstance(result, ParseFallback):
            return result.reason
        try:
            return [build(record) for record in result.records]
        except (ValidationError, TypeError, ValueError) as exc:
            logger.warning("draft_section_invalid_record section=%s error=%s", section, exc)
            return "invalid_record"

    def _summary(self) -> str:
        summary = (self.profile.professional_summary or "").strip()
        if not summary:
            summary = self.policy.summary_fallback(self.industry) or self._starter.summary
        if self._adapter is None or not summary.strip():
            return summary

        result = self._adapter.adapt_text(summary)
        threshold = float(get_scoring_value("summary.enrichment_threshold", 0.2))
        if result.score < threshold:
            keywords = int(get_scoring_value("summary.enrichment_keywords", 2))
            return self._adapter.enrich_text(result.adapted, keywords)
        return result.adapted

    def _highlights(self, raw: Any) -> list[str]:
        highlights = coerce_string_list(raw)
        if self.policy.reorder_highlights:
            highlights = prioritize_transferable(highlights)
        return highlights

    def _experience_entry(self, record: dict[str, Any]) -> Experience:
        return Experience(
            id=self._new_id(),
            company=coerce_text(record["company"]),
            position=coerce_text(record["position"]),
            location=coerce_text(record["location"]),
            start_date=coerce_text(record["start_date"]),
            end_date=coerce_text(record["end_date"]),
            current=coerce_flag(record["current"]),
            description=self._adapt(coerce_text(record["description"])),
            highlights=[self._adapt(item) for item in self._highlights(record["highlights"])],
        )

    def _experience(self) -> list[Experience]:
        entries = self._build_section(
            "experience", self.profile.work_experience, EXPERIENCE_ALIASES, self._experience_entry
        )
        if isinstance(entries, str):
            return self._template_copy("experience", self._starter.experience, entries)
        return entries

    def _education_entry(self, record: dict[str, Any]) -> Education:
        return Education(
            id=self._new_id(),
            institution=coerce_text(record["institution"]),
            degree=coerce_text(record["degree"]),
            field=coerce_text(record["field"]),
            location=coerce_text(record["location"]),
            start_date=coerce_text(record["start_date"]),
            end_date=coerce_text(record["end_date"]),
            current=coerce_flag(record["current"]),
            gpa=coerce_text(record["gpa"]),
            honors=coerce_string_list(record["honors"]),
            description=coerce_text(record["description"]),
        )

    def _education(self) -> list[Education]:
        entries = self._build_section("education", self.profile.education, EDUCATION_ALIASES, self._education_entry)
        if not isinstance(entries, str):
            return entries

        degree = degree_from_level(self.profile.education_level)
        if degree is not None:
            return [Education(id=self._new_id(), degree=degree, current=self.policy.current_education)]
        return self._template_copy("education", self._starter.education, entries)

    def _project_entry(self, record: dict[str, Any]) -> Project:
        return Project(
            id=self._new_id(),
            name=coerce_text(record["name"]) or "Untitled Project",
            description=coerce_text(record["description"]),
            technologies=coerce_string_list(record["technologies"]),
            url=coerce_text(record["url"]),
            github=coerce_text(record["github"]),
            start_date=coerce_text(record["start_date"]),
            end_date=coerce_text(record["end_date"]),
            highlights=self._highlights(record["highlights"]),
        )

    def _narrative_projects(self) -> list[Project]:
        projects: list[Project] = []
        for field_name, default_name in NARRATIVE_PROJECT_FIELDS:
            for record in parse_free_text_projects(getattr(self.profile, field_name), default_name):
                projects.append(Project(id=self._new_id(), name=record["name"], description=record["description"]))
        return projects

    def _projects(self) -> list[Project]:
        entries = self._build_section("projects", self.profile.projects, PROJECT_ALIASES, self._project_entry)
        if not isinstance(entries, str):
            return entries
        if self.policy.narrative_projects:
            narratives = self._narrative_projects()
            if narratives:
                return narratives
        return self._template_copy("projects", self._starter.projects, entries)

    def _skills(self) -> list[Skill]:
        level = default_level(self.profile.experience_level)
        skills: dict[str, Skill] = {}

        profile_names = split_skill_string(self.profile.key_skills) + split_skill_string(
            self.profile.technical_proficiencies
        )
        for name in profile_names:
            identity = normalize_skill_name(name)
            if not identity or identity in skills:
                continue
            category = TRANSFERABLE_CATEGORY if self.policy.transferable_skills else categorize(name)
            skills[identity] = Skill(id=self._new_id(), name=name.strip(), level=level, category=category)

        for starter_skill in self._starter.skills:
            identity = normalize_skill_name(starter_skill.name)
            if not identity or identity in skills:
                continue
            skills[identity] = starter_skill.model_copy(
                update={
                    "id": self._new_id(),
                    "level": starter_skill.level if "level" in starter_skill.model_fields_set else level,
                    "category": starter_skill.category or categorize(starter_skill.name),
                }
            )
        return list(skills.values())

    def _settings(self) -> DraftSettings:
        starter_settings = self._starter.settings
        template_settings = self.template.settings
        return DraftSettings(
            layout=(starter_settings.layout if starter_settings else None) or "1-page",
            mode=(starter_settings.mode if starter_settings else None) or "simple",
            template=template_settings.template,
            color_scheme=template_settings.color_scheme,
            font_size=template_settings.font_size,
            spacing=template_settings.spacing,
            show_profile_image=template_settings.show_profile_image,
            section_order=list(template_settings.section_order),
        )


def _coerce_profile(profile: Profile | Mapping[str, Any] | None) -> Profile:
    if profile is None:
        raise ValueError("profile is required")
    if isinstance(profile, Profile):
        return profile
    if isinstance(profile, Mapping):
        return Profile.model_validate(dict(profile))
    raise TypeError(f"profile must be a Profile or a mapping, got {type(profile).__name__}")


def _coerce_template(template: Template | Mapping[str, Any] | None) -> Template:
    if template is None:
        raise ValueError("template is required")
    if isinstance(template, Template):
        return template
    if isinstance(template, Mapping):
        return Template.model_validate(dict(template))
    raise TypeError(f"template must be a Template or a mapping, got {type(template).__name__}")


def generate_draft(
    profile: Profile | Mapping[str, Any] | None,
    template: Template | Mapping[str, Any] | None,
    industry: str | None = None,
    intensity: str | None = None,
    *,
    strategy: str | None = None,
    rng: random.Random | None = None,
    id_factory: IdFactory | None = None,
    selector: StrategySelector | None = None,
    lexicon: LexiconProvider | None = None,
) -> ResumeDraft:
    """Build a canonical résumé draft from a profile and a template.

    ``industry`` overrides the profile's target industry for keyword
    adaptation; ``strategy`` names a policy to use instead of automatic
    selection. Pass a seeded ``rng`` for reproducible prose adaptation.
    Raises ``ValueError`` only when ``profile`` or ``template`` is missing.
    """
    resolved_profile = _coerce_profile(profile)
    resolved_template = _coerce_template(template)
    selection = (selector or get_default_selector()).select(resolved_profile, strategy)

    target_industry = industry if not is_blank(industry) else resolved_profile.target_industry
    generator = DraftGenerator(
        resolved_profile,
        resolved_template,
        selection.policy,
        industry=target_industry,
        intensity=intensity,
        rng=rng,
        id_factory=id_factory,
        lexicon=lexicon,
    )
    return generator.generate()


def validate(
    profile: Profile | Mapping[str, Any] | None,
    template: Template | Mapping[str, Any] | None,
) -> ValidationReport:
    """Report missing required (name, email) and recommended (phone, location) fields."""
    personal_info = build_personal_info(_coerce_profile(profile), _coerce_template(template))
    missing, warnings = personal_info_gaps(personal_info)
    return ValidationReport(is_valid=not missing, missing_fields=missing, warnings=warnings)
