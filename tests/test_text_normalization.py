import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize import (  # noqa: E402
    is_bullet_like,
    is_heading_like,
    normalize_layout,
    normalize_text,
    strip_bullet_prefix,
)


class NormalizeTextTests(unittest.TestCase):
    def test_collapses_all_whitespace_runs(self):
        raw = "  Jane   Doe\r\n\r\n\tEngineer\rAustin  "
        self.assertEqual(normalize_text(raw), "Jane Doe Engineer Austin")

    def test_none_and_blank_become_empty(self):
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text(" \n\t "), "")

    def test_layout_keeps_lines_and_single_blank_separator(self):
        raw = "SKILLS  \r\n  Python,   Go\n\n\n\nEDUCATION\r\nState   University"
        self.assertEqual(normalize_layout(raw), "SKILLS\nPython, Go\n\nEDUCATION\nState University")


class LineHelperTests(unittest.TestCase):
    def test_bullet_prefixes(self):
        self.assertTrue(is_bullet_like("• Built APIs"))
        self.assertTrue(is_bullet_like("- Built APIs"))
        self.assertTrue(is_bullet_like("2. Built APIs"))
        self.assertFalse(is_bullet_like("Results-driven engineer"))
        self.assertEqual(strip_bullet_prefix("▪ Reduced costs by 10%"), "Reduced costs by 10%")

    def test_heading_like_lines(self):
        self.assertTrue(is_heading_like("WORK HISTORY"))
        self.assertTrue(is_heading_like("CERTIFICATIONS:"))
        self.assertFalse(is_heading_like("Work History"))
        self.assertFalse(is_heading_like("SENIOR ENGINEER | ACME | 2020"))
        self.assertFalse(is_heading_like("2019 - 2021"))


if __name__ == "__main__":
    unittest.main()
