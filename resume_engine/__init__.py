from .schemas import Profile, ResumeDraft, Template, ValidationReport
from .services import RetargetResult, generate_draft, retarget_draft, validate

__all__ = [
    "Profile",
    "ResumeDraft",
    "RetargetResult",
    "Template",
    "ValidationReport",
    "generate_draft",
    "retarget_draft",
    "validate",
]
