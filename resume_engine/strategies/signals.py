from __future__ import annotations

from dataclasses import dataclass

from resume_engine.normalize import has_list_data
from resume_engine.schemas import Profile

LADDER: tuple[str, ...] = ("student", "entry", "junior", "mid", "senior", "executive")

# Most specific rung first so "senior student" style tags resolve upward.
_RUNG_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("executive", ("executive", "director", "vp", "vice president", "chief", "head of")),
    ("senior", ("senior", "lead", "principal", "staff", "architect", "expert")),
    ("mid", ("mid", "intermediate")),
    ("junior", ("junior",)),
    ("entry", ("entry", "first", "graduate")),
    ("student", ("student", "intern")),
)


def ladder_rung(experience_tag: str | None) -> str | None:
    lowered = (experience_tag or "").lower()
    if not lowered:
        return None
    for rung, markers in _RUNG_MARKERS:
        if any(marker in lowered for marker in markers):
            return rung
    return None


def ladder_distance(left: str, right: str) -> int:
    return abs(LADDER.index(left) - LADDER.index(right))


def _present(value: str | None) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True, slots=True)
class ProfileSignals:
    experience_tag: str
    career_stage: str
    rung: str | None
    has_work_experience: bool
    has_summary: bool
    has_key_skills: bool
    has_narratives: bool
    has_target_industry: bool
    has_education_level: bool

    @property
    def is_student(self) -> bool:
        return "student" in self.experience_tag or self.career_stage == "student"

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileSignals":
        experience_tag = (profile.experience_level or "").strip().lower()
        return cls(
            experience_tag=experience_tag,
            career_stage=(profile.career_stage or "").strip().lower(),
            rung=ladder_rung(experience_tag),
            has_work_experience=has_list_data(profile.work_experience),
            has_summary=_present(profile.professional_summary),
            has_key_skills=_present(profile.key_skills) or _present(profile.technical_proficiencies),
            has_narratives=any(
                _present(value)
                for value in (
                    profile.academic_projects,
                    profile.personal_projects,
                    profile.volunteer_experience,
                    profile.extracurricular_activities,
                )
            ),
            has_target_industry=_present(profile.target_industry),
            has_education_level=_present(profile.education_level),
        )
