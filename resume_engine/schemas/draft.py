from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
_SKILL_LEVELS = {"beginner", "intermediate", "advanced", "expert"}


class CamelModel(BaseModel):
    """Snake-case attributes that serialize with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    summary: str = ""


class Experience(CamelModel):
    id: str = ""
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    highlights: list[str] = Field(default_factory=list)


class Education(CamelModel):
    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    gpa: str = ""
    honors: list[str] = Field(default_factory=list)
    description: str = ""


class Skill(CamelModel):
    id: str = ""
    name: str
    level: SkillLevel = "intermediate"
    category: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> str:
        lowered = str(value or "").strip().lower()
        return lowered if lowered in _SKILL_LEVELS else "intermediate"


class Project(CamelModel):
    id: str = ""
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str = ""
    github: str = ""
    start_date: str = ""
    end_date: str = ""
    highlights: list[str] = Field(default_factory=list)


class DraftSettings(CamelModel):
    layout: str = "1-page"
    mode: str = "simple"
    template: str = "modern"
    color_scheme: str = "blue"
    font_size: str = "medium"
    spacing: str = "normal"
    show_profile_image: bool = False
    section_order: list[str] = Field(default_factory=lambda: ["experience", "education", "skills"])


class ResumeDraft(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    settings: DraftSettings = Field(default_factory=DraftSettings)
    current_step: str = "personal"
    completed_steps: list[str] = Field(default_factory=list)


class ValidationReport(CamelModel):
    is_valid: bool
    missing_fields: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
