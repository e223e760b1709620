from __future__ import annotations

import unittest

from namenormalizer.picker.highlight import highlight_matches, match_marks
from namenormalizer.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _marked_text(text: str, marks: list[bool]) -> str:
    return "".join(ch for ch, marked in zip(text, marks) if marked)


def _unmarked_text(text: str, marks: list[bool]) -> str:
    return "".join(ch for ch, marked in zip(text, marks) if not marked)


class MatchMarksTests(unittest.TestCase):
    def test_marks_case_insensitive_spans(self) -> None:
        text = "MyFileNameTEST"
        marks = match_marks(text, ["file", "test"])
        self.assertEqual(_marked_text(text, marks), "FileTEST")
        self.assertEqual(_unmarked_text(text, marks), "MyName")
        self.assertEqual(marks[2:6], [True] * 4)
        self.assertEqual(marks[10:], [True] * 4)

    def test_matches_of_one_part_do_not_overlap(self) -> None:
        self.assertEqual(match_marks("aaa", ["aa"]), [True, True, False])
        self.assertEqual(match_marks("aaaa", ["aa"]), [True] * 4)

    def test_matches_of_different_parts_may_overlap(self) -> None:
        self.assertEqual(match_marks("abcd", ["abc", "bcd"]), [True] * 4)

    def test_empty_parts_mark_nothing(self) -> None:
        self.assertEqual(match_marks("abc", ["", "zz"]), [False] * 3)

    def test_part_longer_than_text_marks_nothing(self) -> None:
        self.assertEqual(match_marks("ab", ["abc"]), [False, False])


class HighlightMatchesTests(unittest.TestCase):
    def test_non_current_row_uses_bold_color_spans(self) -> None:
        rendered = highlight_matches("MyFileName", ["file"], is_current=False)
        self.assertEqual(rendered, "My\x1b[1m\x1b[33mFile\x1b[22m\x1b[39mName")

    def test_current_row_uses_underline(self) -> None:
        rendered = highlight_matches("MyFileName", ["file"], is_current=True)
        self.assertEqual(rendered, "My\x1b[4mFile\x1b[24mName")

    def test_span_at_end_of_string_is_closed(self) -> None:
        rendered = highlight_matches("photoIMG", ["img"], is_current=True)
        self.assertEqual(rendered, "photo\x1b[4mIMG\x1b[24m")

    def test_adjacent_matches_merge_into_one_span(self) -> None:
        rendered = highlight_matches("abcd", ["ab", "cd"], is_current=False, theme=DEFAULT_THEME)
        self.assertEqual(rendered, "\x1b[1m\x1b[33mabcd\x1b[22m\x1b[39m")

    def test_no_filters_returns_text_unchanged(self) -> None:
        self.assertEqual(highlight_matches("name.txt", [], is_current=False), "name.txt")
        self.assertEqual(highlight_matches("name.txt", [""], is_current=True), "name.txt")

    def test_plain_theme_emits_no_escape_sequences(self) -> None:
        rendered = highlight_matches("MyFileName", ["file"], is_current=False, theme=PLAIN_THEME)
        self.assertEqual(rendered, "MyFileName")


if __name__ == "__main__":
    unittest.main()
