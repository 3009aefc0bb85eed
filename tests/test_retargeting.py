import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine import retarget_draft  # noqa: E402
from resume_engine.schemas import Education, Experience, ResumeDraft, Skill  # noqa: E402

LOGGER = "resume_engine.services.retargeting"


class ConstantRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def shuffle(self, items):
        items.reverse()


def make_draft(**overrides):
    values = {
        "summary": "Backend developer with 6 years of experience. I built APIs for payments.",
        "experience": [
            Experience(id="e1", company="Acme", description="Fixed the program", highlights=["Built a website"]),
            Experience(id="e2", company="Beta", description="Shipped v2"),
        ],
        "education": [Education(id="d1", institution="MIT")],
        "skills": [
            Skill(id="s1", name="Communication"),
            Skill(id="s2", name="Python"),
            Skill(id="s3", name="Docker"),
            Skill(id="s4", name="API design"),
        ],
    }
    values.update(overrides)
    return ResumeDraft(**values)


class RetargetDraftTests(unittest.TestCase):
    def retarget(self, draft=None, industry="software-engineering"):
        return retarget_draft(draft if draft is not None else make_draft(), industry, "moderate", rng=ConstantRandom(0.5))

    def test_summary_is_rebuilt_for_industry(self):
        result = self.retarget()
        self.assertEqual(
            result.draft.summary,
            "Experienced professional with 6+ years in Software Engineering, specializing in "
            "software development, full-stack, agile. Proven track record of delivering results in "
            "Software Engineering environments. I engineered APIs for payments.",
        )
        self.assertEqual(result.keywords, ["software development", "full-stack", "agile"])

    def test_summary_without_tenure_or_remainder(self):
        result = self.retarget(make_draft(summary="Backend developer."))
        self.assertTrue(result.draft.summary.startswith("Experienced professional in Software Engineering,"))
        self.assertTrue(result.draft.summary.endswith("Software Engineering environments."))

    def test_experience_prose_is_adapted(self):
        result = self.retarget()
        first, second = result.draft.experience
        self.assertEqual(first.description, "Resolved the software")
        self.assertEqual(first.highlights, ["Engineered a web application"])
        self.assertEqual(second.description, "Shipped v2")
        self.assertEqual(result.experience_updates, 1)
        self.assertEqual([entry.id for entry in result.draft.experience], ["e1", "e2"])

    def test_skills_reordered_by_relevance(self):
        result = self.retarget()
        self.assertEqual(
            [skill.name for skill in result.draft.skills],
            ["Docker", "API design", "Communication", "Python"],
        )
        self.assertTrue(result.skills_reordered)

    def test_change_log(self):
        result = self.retarget()
        self.assertEqual(result.industry, "software-engineering")
        self.assertEqual(
            result.changes,
            [
                "Updated professional summary for industry focus",
                "Adapted 1 experience entries with industry terminology",
                "Reordered skills to prioritize industry-relevant competencies",
            ],
        )
        dumped = result.model_dump(by_alias=True)
        self.assertEqual(dumped["experienceUpdates"], 1)
        self.assertTrue(dumped["skillsReordered"])

    def test_relevant_skills_already_first_are_not_reported(self):
        draft = make_draft(skills=[Skill(name="Docker"), Skill(name="Python")])
        result = self.retarget(draft)
        self.assertFalse(result.skills_reordered)
        self.assertNotIn("Reordered skills to prioritize industry-relevant competencies", result.changes)

    def test_other_sections_are_carried_over(self):
        draft = make_draft()
        result = self.retarget(draft)
        self.assertEqual(result.draft.education, draft.education)
        self.assertEqual(result.draft.settings, draft.settings)
        self.assertEqual(result.draft.personal_info, draft.personal_info)

    def test_alias_resolves_to_canonical_industry(self):
        self.assertEqual(self.retarget(industry="software").industry, "software-engineering")

    def test_unknown_industry_returns_unchanged_copy(self):
        draft = make_draft()
        with self.assertLogs(LOGGER, level="WARNING") as captured:
            result = retarget_draft(draft, "astrology")
        self.assertEqual(result.draft, draft)
        self.assertIsNot(result.draft, draft)
        self.assertEqual(result.changes, [])
        self.assertIsNone(result.industry)
        self.assertTrue(any("retarget_unknown_industry" in line for line in captured.output))

    def test_input_draft_is_not_mutated(self):
        draft = make_draft()
        before = draft.model_dump()
        self.retarget(draft)
        self.assertEqual(draft.model_dump(), before)

    def test_accepts_mapping_and_rejects_none(self):
        result = retarget_draft(
            {"summary": "", "skills": [{"name": "Kubernetes"}]}, "devops", rng=ConstantRandom(0.5)
        )
        self.assertEqual(result.draft.skills[0].name, "Kubernetes")
        with self.assertRaises(ValueError):
            retarget_draft(None, "devops")


if __name__ == "__main__":
    unittest.main()
