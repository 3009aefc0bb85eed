import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.lexicon import LocalLexicon, get_default_lexicon  # noqa: E402


class LocalLexiconTests(unittest.TestCase):
    def setUp(self):
        self.lexicon = LocalLexicon()

    def test_lookup_is_case_and_whitespace_insensitive(self):
        profile = self.lexicon.get("  Software-Engineering ")
        self.assertIsNotNone(profile)
        self.assertEqual(profile.key, "software-engineering")
        self.assertEqual(profile.name, "Software Engineering")
        self.assertIn("microservices", profile.keywords)

    def test_aliases_resolve_to_canonical_industries(self):
        self.assertEqual(self.lexicon.get("software").key, "software-engineering")
        self.assertEqual(self.lexicon.get("UX").key, "design")
        self.assertEqual(self.lexicon.get("pm").key, "product-management")

    def test_unknown_industry_returns_none(self):
        self.assertIsNone(self.lexicon.get("astrology"))
        self.assertIsNone(self.lexicon.get(None))
        self.assertIsNone(self.lexicon.get("   "))

    def test_all_industries_are_loaded_with_mappings(self):
        industries = self.lexicon.available_industries()
        self.assertEqual(len(industries), 9)
        for key in ("software-engineering", "web-development", "data-science", "design", "marketing",
                    "sales", "product-management", "devops", "finance"):
            self.assertIn(key, industries)
            self.assertTrue(self.lexicon.get(key).mappings)

    def test_context_words_and_weights_are_parsed(self):
        profile = self.lexicon.get("software-engineering")
        architected = [mapping for mapping in profile.mappings if mapping.replacement == "architected"]
        self.assertEqual(len(architected), 1)
        self.assertEqual(architected[0].context, ("system", "solution"))
        self.assertEqual(architected[0].weight, 0.8)

    def test_detect_industry_prefers_best_scoring_industry(self):
        text = "Built microservices with Docker and Kubernetes, set up a CI/CD pipeline, deployed and automated releases."
        self.assertEqual(self.lexicon.detect_industry(text), "software-engineering")

    def test_detect_industry_requires_minimum_score(self):
        self.assertIsNone(self.lexicon.detect_industry("I enjoy cooking and hiking."))
        self.assertIsNone(self.lexicon.detect_industry(""))

    def test_custom_lexicon_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lexicon.yaml"
            path.write_text(
                "aliases:\n  cook: culinary\n"
                "industries:\n"
                "  culinary:\n"
                "    name: Culinary Arts\n"
                "    keywords: [mise en place]\n"
                "    mappings:\n"
                "      - {generic: made, replacement: prepared, weight: 0.9}\n"
                "      - {generic: '', replacement: ignored}\n",
                encoding="utf-8",
            )
            lexicon = LocalLexicon(path)
        profile = lexicon.get("cook")
        self.assertEqual(profile.name, "Culinary Arts")
        self.assertEqual(len(profile.mappings), 1)
        self.assertEqual(profile.mappings[0].replacement, "prepared")

    def test_invalid_lexicon_file_raises_runtime_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lexicon.yaml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                LocalLexicon(path)
            with self.assertRaises(RuntimeError):
                LocalLexicon(Path(tmp) / "missing.yaml")

    def test_default_lexicon_is_cached(self):
        self.assertIs(get_default_lexicon(), get_default_lexicon())


if __name__ == "__main__":
    unittest.main()
