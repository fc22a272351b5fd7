"""Unit tests for ConfigurationLoader."""

import unittest

from field_definitions_linter.domain.config import ConfigurationLoader
from field_definitions_linter.domain.entities import Style


class TestConfigurationLoader(unittest.TestCase):
    def test_defaults(self) -> None:
        loader = ConfigurationLoader({})
        self.assertIs(loader.style, Style.GROUP_DEFINITIONS)
        self.assertTrue(loader.check_multiple_definitions)
        self.assertEqual(loader.max_fix_passes, 10)
        self.assertEqual(loader.exclude_paths, [])

    def test_reads_configured_values(self) -> None:
        loader = ConfigurationLoader(
            {
                "style": "define_resolver_after_definition",
                "check_multiple_definitions": False,
                "max_fix_passes": 3,
                "exclude_paths": ["migrations", 7],
            }
        )
        self.assertIs(loader.style, Style.DEFINE_RESOLVER_AFTER_DEFINITION)
        self.assertFalse(loader.check_multiple_definitions)
        self.assertEqual(loader.max_fix_passes, 3)
        self.assertEqual(loader.exclude_paths, ["migrations"])

    def test_unknown_style_warns_and_falls_back(self) -> None:
        with self.assertLogs(level="WARNING") as logs:
            loader = ConfigurationLoader({"style": "alphabetical"})
        self.assertIs(loader.style, Style.GROUP_DEFINITIONS)
        self.assertIn("alphabetical", logs.output[0])

    def test_invalid_pass_limit_uses_default(self) -> None:
        for value in (0, -2, "5", True):
            with self.subTest(value=value):
                self.assertEqual(ConfigurationLoader({"max_fix_passes": value}).max_fix_passes, 10)

    def test_with_style_overrides_one_run(self) -> None:
        loader = ConfigurationLoader({"max_fix_passes": 4})
        overridden = loader.with_style(Style.DEFINE_RESOLVER_AFTER_DEFINITION)
        self.assertIs(overridden.style, Style.DEFINE_RESOLVER_AFTER_DEFINITION)
        self.assertEqual(overridden.max_fix_passes, 4)
        self.assertIs(loader.style, Style.GROUP_DEFINITIONS)
        self.assertIs(loader.with_style(None), loader)
