"""Generation policies, one per named strategy.

Every policy drives the same draft pipeline; a policy only decides whether it
applies to a profile, how well it fits, and the handful of data-sourcing
switches that differ between user groups.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from resume_engine.core.scoring import get_scoring_value

from .signals import ProfileSignals, ladder_distance

EXPERIENCED_PROFESSIONAL = "ExperiencedProfessional"
CAREER_CHANGER = "CareerChanger"
EXPERIENCED_JOB_SEEKER = "ExperiencedJobSeeker"
FIRST_TIME_JOB_SEEKER = "FirstTimeJobSeeker"
STUDENT = "Student"

CAREER_CHANGE_SUMMARY = (
    "Professional transitioning to {industry} with proven track record of success. "
    "Bringing transferable skills in problem-solving, communication, and leadership. "
    "Eager to apply diverse experience to drive results in a new industry."
)

# None: work experience neither required nor excluded.
WorkRequirement = bool | None


def format_industry_name(industry: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in industry.strip().split("-") if word)


@dataclass(frozen=True, slots=True)
class StrategyPolicy:
    name: str
    applicable: Callable[[ProfileSignals], bool]
    stage_match: Callable[[ProfileSignals], bool]
    stage_reason: str
    home_rungs: tuple[str, ...]
    work_signal: WorkRequirement = True
    narrative_projects: bool = False
    transferable_skills: bool = False
    reorder_highlights: bool = False
    current_education: bool = False
    career_change_summary: bool = False
    rewards_target_industry: bool = False
    description: str = ""

    def is_applicable(self, signals: ProfileSignals) -> bool:
        return self.applicable(signals)

    def score(self, signals: ProfileSignals) -> tuple[float, list[str]]:
        reasons: list[str] = []
        score = float(get_scoring_value("strategies.base", 0.4))

        if self.stage_match(signals):
            score += float(get_scoring_value("strategies.stage_match", 0.3))
            reasons.append(self.stage_reason)

        if signals.rung is not None and self.home_rungs:
            distance = min(ladder_distance(signals.rung, rung) for rung in self.home_rungs)
            level_weight = float(get_scoring_value("strategies.level_match", 0.25))
            decay = float(get_scoring_value("strategies.level_decay", 0.5))
            score += level_weight * (decay**distance)
            if distance == 0:
                reasons.append(f"{signals.rung.capitalize()} level experience")
            else:
                reasons.append(f"Adjacent experience level ({signals.rung})")

        experience_weight = float(get_scoring_value("strategies.experience_signal", 0.1))
        if self.work_signal is True and signals.has_work_experience:
            score += experience_weight
            reasons.append("Has work experience")
        elif self.work_signal is False and not signals.has_work_experience:
            score += experience_weight
            reasons.append("No work experience - needs examples")

        if self.narrative_projects and signals.has_narratives:
            score += float(get_scoring_value("strategies.narrative_signal", 0.1))
            reasons.append("Has academic or personal projects")

        if signals.has_summary:
            score += float(get_scoring_value("strategies.summary_bonus", 0.05))
            reasons.append("Has professional summary")
        if signals.has_key_skills:
            score += float(get_scoring_value("strategies.key_skills_bonus", 0.05))
            reasons.append("Has key skills")
        if self.rewards_target_industry and signals.has_target_industry:
            score += float(get_scoring_value("strategies.target_industry_bonus", 0.05))
            reasons.append("Has target industry specified")

        return round(min(1.0, max(0.0, score)), 4), reasons

    def summary_fallback(self, industry: str | None) -> str | None:
        if self.career_change_summary and industry and industry.strip():
            return CAREER_CHANGE_SUMMARY.format(industry=format_industry_name(industry))
        return None


def _tag_has(signals: ProfileSignals, *markers: str) -> bool:
    return any(marker in signals.experience_tag for marker in markers)


def _explicit_career_change(signals: ProfileSignals) -> bool:
    return signals.career_stage in {"career_change", "career-change"}


EXPERIENCED_PROFESSIONAL_POLICY = StrategyPolicy(
    name=EXPERIENCED_PROFESSIONAL,
    applicable=lambda s: _tag_has(s, "senior", "lead", "principal", "staff", "architect", "executive", "director"),
    stage_match=lambda s: s.career_stage in {"professional", "executive"},
    stage_reason="Established professional career stage",
    home_rungs=("senior", "executive"),
    description="Senior and leadership profiles with a substantial work history.",
)

CAREER_CHANGER_POLICY = StrategyPolicy(
    name=CAREER_CHANGER,
    applicable=lambda s: s.has_work_experience
    and (_explicit_career_change(s) or ("transition" in s.career_stage and s.has_target_industry)),
    stage_match=lambda s: _explicit_career_change(s) or "transition" in s.career_stage,
    stage_reason="Explicitly marked as career changer",
    home_rungs=("junior", "mid", "senior"),
    transferable_skills=True,
    reorder_highlights=True,
    career_change_summary=True,
    rewards_target_industry=True,
    description="Professionals moving into a new industry; foregrounds transferable skills.",
)

EXPERIENCED_JOB_SEEKER_POLICY = StrategyPolicy(
    name=EXPERIENCED_JOB_SEEKER,
    applicable=lambda s: s.has_work_experience
    and not s.is_student
    and (_tag_has(s, "junior", "mid", "intermediate", "entry") or s.career_stage in {"professional", "entry"}),
    stage_match=lambda s: s.career_stage in {"professional", "entry"},
    stage_reason="Professional job search stage",
    home_rungs=("junior", "mid"),
    description="Early and mid-career profiles with real work history.",
)

FIRST_TIME_JOB_SEEKER_POLICY = StrategyPolicy(
    name=FIRST_TIME_JOB_SEEKER,
    applicable=lambda s: not s.has_work_experience
    and not s.is_student
    and (_tag_has(s, "entry", "first") or s.career_stage in {"entry", "first-time"}),
    stage_match=lambda s: s.career_stage in {"entry", "first-time"},
    stage_reason="First-time job seeker",
    home_rungs=("entry",),
    work_signal=False,
    narrative_projects=True,
    description="No work history yet; leans on template examples and narrative projects.",
)

STUDENT_POLICY = StrategyPolicy(
    name=STUDENT,
    # An explicit career change with real work history outranks the experience tag.
    applicable=lambda s: (_tag_has(s, "student", "entry") or s.career_stage == "student")
    and not (_explicit_career_change(s) and s.has_work_experience),
    stage_match=lambda s: s.is_student,
    stage_reason="Currently a student",
    home_rungs=("student",),
    work_signal=False,
    narrative_projects=True,
    current_education=True,
    description="Students; emphasizes education and academic or personal projects.",
)

DEFAULT_POLICIES: tuple[StrategyPolicy, ...] = (
    EXPERIENCED_PROFESSIONAL_POLICY,
    CAREER_CHANGER_POLICY,
    EXPERIENCED_JOB_SEEKER_POLICY,
    FIRST_TIME_JOB_SEEKER_POLICY,
    STUDENT_POLICY,
)
