from __future__ import annotations

import unittest
from unittest import mock

from namenormalizer.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    color_disabled_by_env,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertEqual(normalize_theme_name("neon"), "default")

    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_no_color_environment_variable(self) -> None:
        with mock.patch.dict("namenormalizer.ui_theme.os.environ", {"NO_COLOR": "1"}, clear=True):
            self.assertTrue(color_disabled_by_env())
        with mock.patch.dict("namenormalizer.ui_theme.os.environ", {}, clear=True):
            self.assertFalse(color_disabled_by_env())


if __name__ == "__main__":
    unittest.main()
