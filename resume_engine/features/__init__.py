from .skill_classifier import (
    DEFAULT_CATEGORY,
    TRANSFERABLE_CATEGORY,
    SkillLevel,
    categorize,
    default_level,
    normalize_skill_name,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "TRANSFERABLE_CATEGORY",
    "SkillLevel",
    "categorize",
    "default_level",
    "normalize_skill_name",
]
