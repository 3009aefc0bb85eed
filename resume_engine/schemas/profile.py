from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_TEXT_FIELDS = (
    "id",
    "user",
    "email",
    "first_name",
    "last_name",
    "phone",
    "location",
    "linkedin_url",
    "portfolio_url",
    "github_url",
    "target_industry",
    "target_job_titles",
    "experience_level",
    "career_stage",
    "education_level",
    "key_skills",
    "technical_proficiencies",
    "professional_summary",
    "academic_projects",
    "personal_projects",
    "volunteer_experience",
    "extracurricular_activities",
)


class Profile(BaseModel):
    """User career data as stored upstream; shapes are not trusted."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    user: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin_url: str | None = None
    portfolio_url: str | None = None
    github_url: str | None = None
    target_industry: str | None = None
    target_job_titles: str | None = None
    experience_level: str | None = None
    career_stage: str | None = None
    education_level: str | None = None
    key_skills: str | None = None
    technical_proficiencies: str | None = None
    professional_summary: str | None = None

    # List, JSON text, or anything else; parsed lazily by the normalizer.
    work_experience: Any = None
    education: Any = None
    projects: Any = None

    academic_projects: str | None = None
    personal_projects: str | None = None
    volunteer_experience: str | None = None
    extracurricular_activities: str | None = None

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item).strip() for item in value if item is not None and str(item).strip())
        return str(value)

    @property
    def contact_email(self) -> str:
        for candidate in (self.user, self.email):
            if candidate and candidate.strip():
                return candidate.strip()
        return ""
