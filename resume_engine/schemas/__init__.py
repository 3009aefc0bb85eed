from .draft import (
    DraftSettings,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeDraft,
    Skill,
    SkillLevel,
    ValidationReport,
)
from .profile import Profile
from .template import DEFAULT_PLACEHOLDERS, StarterData, StarterSettings, Template, TemplateSettings

__all__ = [
    "DEFAULT_PLACEHOLDERS",
    "DraftSettings",
    "Education",
    "Experience",
    "PersonalInfo",
    "Profile",
    "Project",
    "ResumeDraft",
    "Skill",
    "SkillLevel",
    "StarterData",
    "StarterSettings",
    "Template",
    "TemplateSettings",
    "ValidationReport",
]
