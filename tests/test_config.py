import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.adaptation import AdaptationConfig  # noqa: E402
from resume_engine.core import config  # noqa: E402


class EnvHelperTests(unittest.TestCase):
    def test_blank_values_use_default(self):
        with patch.dict(os.environ, {"RESUME_TEST_VALUE": ""}):
            self.assertEqual(config._get_env("RESUME_TEST_VALUE", "fallback"), "fallback")

    def test_bool_parsing(self):
        for raw, expected in (("true", True), ("YES", True), ("1", True), ("off", False), ("no", False)):
            with self.subTest(raw=raw), patch.dict(os.environ, {"RESUME_TEST_FLAG": raw}):
                self.assertIs(config._get_env_bool("RESUME_TEST_FLAG", not expected), expected)

    def test_int_parsing(self):
        with patch.dict(os.environ, {"RESUME_TEST_INT": "12"}):
            self.assertEqual(config._get_env_int("RESUME_TEST_INT", 0), 12)
        with patch.dict(os.environ, {"RESUME_TEST_INT": "twelve"}):
            self.assertEqual(config._get_env_int("RESUME_TEST_INT", 3), 3)


class AdaptationConfigTests(unittest.TestCase):
    def test_invalid_intensity_falls_back_to_moderate(self):
        self.assertEqual(AdaptationConfig.from_settings("extreme").intensity, "moderate")
        self.assertEqual(AdaptationConfig.from_settings(" Light ").intensity, "light")

    def test_settings_flow_into_config(self):
        local = config.Settings(
            log_level="INFO",
            sentry_dsn=None,
            keyword_intensity="aggressive",
            keyword_context_aware=False,
            keyword_preserve_original=False,
            keyword_max_replacements=5,
            scoring_config_path=None,
            industry_lexicon_path=None,
        )
        with patch("resume_engine.adaptation.keyword_adapter.settings", local):
            adaptation = AdaptationConfig.from_settings()
        self.assertEqual(adaptation.intensity, "aggressive")
        self.assertFalse(adaptation.context_aware)
        self.assertFalse(adaptation.preserve_original)
        self.assertEqual(adaptation.max_replacements, 5)


if __name__ == "__main__":
    unittest.main()
