from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from namenormalizer.errors import CannotReadFileError, InvalidDirectoryError
from namenormalizer.files import collect_directory, collect_from_list


class CollectDirectoryTests(unittest.TestCase):
    def test_lists_visible_regular_files_sorted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("b.txt", "A File.md", ".hidden"):
                (root / name).write_text("x", encoding="utf-8")
            (root / "subdir").mkdir()

            files = collect_directory(root)

        self.assertEqual([info.filename for info in files], ["A File.md", "b.txt"])
        self.assertEqual(files[0].path, root / "A File.md")

    def test_missing_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InvalidDirectoryError):
                collect_directory(Path(tmp) / "missing")


class CollectFromListTests(unittest.TestCase):
    def test_reads_names_skipping_blank_and_missing_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "one.txt").write_text("1", encoding="utf-8")
            (root / "Two File.txt").write_text("2", encoding="utf-8")
            (root / "names.txt").write_text("one.txt\n\n  Two File.txt  \nghost.txt\n", encoding="utf-8")

            files = collect_from_list(Path("names.txt"), root)

        self.assertEqual([info.filename for info in files], ["one.txt", "Two File.txt"])
        self.assertEqual(files[1].path, root / "Two File.txt")

    def test_unreadable_list_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(CannotReadFileError) as ctx:
                collect_from_list(Path("absent.txt"), Path(tmp))
        self.assertIn("absent.txt", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
