from functools import lru_cache

from resume_engine.schemas import Profile

from .policies import (
    CAREER_CHANGER,
    DEFAULT_POLICIES,
    EXPERIENCED_JOB_SEEKER,
    EXPERIENCED_PROFESSIONAL,
    FIRST_TIME_JOB_SEEKER,
    STUDENT,
    StrategyPolicy,
    format_industry_name,
)
from .selector import StrategySelection, StrategySelector
from .signals import LADDER, ProfileSignals, ladder_rung


@lru_cache(maxsize=1)
def get_default_selector() -> StrategySelector:
    return StrategySelector()


def select_strategy(profile: Profile, override: str | None = None) -> StrategySelection:
    return get_default_selector().select(profile, override)


__all__ = [
    "CAREER_CHANGER",
    "DEFAULT_POLICIES",
    "EXPERIENCED_JOB_SEEKER",
    "EXPERIENCED_PROFESSIONAL",
    "FIRST_TIME_JOB_SEEKER",
    "LADDER",
    "STUDENT",
    "ProfileSignals",
    "StrategyPolicy",
    "StrategySelection",
    "StrategySelector",
    "format_industry_name",
    "get_default_selector",
    "ladder_rung",
    "select_strategy",
]
