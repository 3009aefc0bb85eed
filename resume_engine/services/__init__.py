from .draft_generator import DraftGenerator, generate_draft, validate
from .profile_analysis import (
    ProfileAnalysis,
    analyze_profile,
    get_missing_critical_fields,
    get_profile_completeness,
    get_top_suggestions,
    is_profile_ready,
)
from .retargeting import RetargetResult, retarget_draft

__all__ = [
    "DraftGenerator",
    "ProfileAnalysis",
    "RetargetResult",
    "analyze_profile",
    "generate_draft",
    "get_missing_critical_fields",
    "get_profile_completeness",
    "get_top_suggestions",
    "is_profile_ready",
    "retarget_draft",
    "validate",
]
