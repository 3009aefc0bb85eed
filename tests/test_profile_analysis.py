import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.schemas import Profile  # noqa: E402
from resume_engine.services import (  # noqa: E402
    analyze_profile,
    get_missing_critical_fields,
    get_profile_completeness,
    get_top_suggestions,
    is_profile_ready,
)


def contact_profile(**overrides):
    values = {"first_name": "Ada", "last_name": "Lovelace", "phone": "555-0100", "location": "London"}
    values.update(overrides)
    return Profile(**values)


class ProfileAnalysisTests(unittest.TestCase):
    def test_empty_profile(self):
        analysis = analyze_profile(Profile())
        self.assertEqual(analysis.completeness, 0)
        self.assertFalse(analysis.is_ready_for_generation)
        self.assertFalse(analysis.minimum_requirements_met)
        self.assertEqual(analysis.strengths, [])
        self.assertEqual(set(analysis.breakdown.values()), {0})
        self.assertEqual(len(analysis.missing_fields), 9)

    def test_suggestions_sorted_by_impact(self):
        suggestions = analyze_profile(Profile()).suggestions
        impacts = [suggestion.impact for suggestion in suggestions]
        self.assertEqual(impacts, sorted(impacts, key=["high", "medium", "low"].index))
        self.assertEqual([suggestion.field for suggestion in suggestions[-2:]], ["location", "education"])

    def test_weighted_completeness_and_strengths(self):
        profile = contact_profile(
            key_skills="Python, SQL",
            work_experience=[{"company": "A"}, {"company": "B"}, {"company": "C"}],
        )
        analysis = analyze_profile(profile)
        self.assertEqual(analysis.completeness, 65)
        self.assertTrue(analysis.is_ready_for_generation)
        self.assertEqual(
            analysis.strengths,
            ["Complete contact information", "3 work experiences listed", "Skills provided"],
        )
        self.assertEqual(
            analysis.breakdown,
            {"basic": 100, "professional": 0, "experience": 100, "education": 0, "skills": 100},
        )

    def test_detailed_summary_and_many_skills(self):
        profile = contact_profile(
            professional_summary="x" * 150,
            technical_proficiencies="a, b, c, d, e, f, g, h",
            target_industry="finance",
            work_experience='[{"company": "A"}]',
            education=[{"school": "MIT"}],
        )
        analysis = analyze_profile(profile)
        self.assertEqual(analysis.completeness, 100)
        self.assertIn("Detailed professional summary", analysis.strengths)
        self.assertIn("8 skills listed", analysis.strengths)
        self.assertIn("Work experience provided", analysis.strengths)
        self.assertIn("Education background included", analysis.strengths)
        self.assertIn("Target industry specified", analysis.strengths)
        self.assertEqual(analysis.suggestions, [])

    def test_names_alone_are_not_ready(self):
        profile = Profile(first_name="Ada", last_name="Lovelace")
        self.assertTrue(analyze_profile(profile).minimum_requirements_met)
        self.assertEqual(get_profile_completeness(profile), 10)
        self.assertFalse(is_profile_ready(profile))

    def test_completeness_without_names_is_not_ready(self):
        profile = Profile(
            key_skills="Python",
            target_industry="finance",
            work_experience=[{"company": "A"}],
            education=[{"school": "MIT"}],
        )
        self.assertGreaterEqual(get_profile_completeness(profile), 40)
        self.assertFalse(is_profile_ready(profile))

    def test_helpers(self):
        top = get_top_suggestions(Profile())
        self.assertEqual([suggestion.field for suggestion in top], ["first_name", "last_name", "phone"])
        critical = [item.name for item in get_missing_critical_fields(Profile())]
        self.assertEqual(
            critical,
            ["target_industry", "professional_summary", "work_experience", "education", "skills"],
        )

    def test_accepts_mapping(self):
        self.assertEqual(get_profile_completeness({"first_name": "Ada"}), 5)

    def test_blank_list_text_is_missing(self):
        analysis = analyze_profile(contact_profile(work_experience="[]", key_skills=" , "))
        missing = {item.name for item in analysis.missing_fields}
        self.assertIn("work_experience", missing)
        self.assertIn("skills", missing)


if __name__ == "__main__":
    unittest.main()
