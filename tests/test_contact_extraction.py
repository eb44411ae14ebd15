import re
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.extraction.contact import extract_contact_info  # noqa: E402
from resume_ats.extraction.strategies import Strategy, first_match, length_between  # noqa: E402


class StrategyListTests(unittest.TestCase):
    def test_first_validated_strategy_wins(self):
        strategies = [
            Strategy("rejected", re.compile(r"foo"), validator=lambda candidate: False),
            Strategy("accepted", re.compile(r"bar")),
            Strategy("never_reached", re.compile(r"baz")),
        ]
        self.assertEqual(first_match(strategies, "foo bar baz"), "bar")

    def test_later_candidates_of_same_strategy_are_tried(self):
        strategy = Strategy("words", re.compile(r"[a-z]+"), validator=length_between(4, 10))
        self.assertEqual(strategy.apply("ab cde fghij"), "fghij")

    def test_no_match_returns_none(self):
        self.assertIsNone(first_match([Strategy("digits", re.compile(r"\d+"))], "no digits"))


class ContactExtractionTests(unittest.TestCase):
    def test_full_header(self):
        text = (
            "Jane Doe\n"
            "Austin, TX 78701 | jane.doe@example.com | (555) 123-4567\n"
            "linkedin.com/in/janedoe | https://janedoe.dev\n"
        )
        contact = extract_contact_info(text)
        self.assertIsNotNone(contact)
        self.assertEqual(contact.name, "Jane Doe")
        self.assertEqual(contact.email, "jane.doe@example.com")
        self.assertEqual(contact.phone, "(555) 123-4567")
        self.assertEqual(contact.location, "Austin, TX 78701")
        self.assertEqual(contact.linkedin, "linkedin.com/in/janedoe")
        self.assertEqual(contact.website, "https://janedoe.dev")

    def test_title_case_name_beats_all_caps_block(self):
        contact = extract_contact_info("JOHN SMITH\nJane Doe\njane@example.com")
        self.assertEqual(contact.name, "Jane Doe")

    def test_title_case_name_inside_flattened_header(self):
        contact = extract_contact_info("ACME CORP RESUME Jane Doe jane@x.com")
        self.assertEqual(contact.name, "Jane Doe")

    def test_all_caps_fallback_skips_section_headings(self):
        contact = extract_contact_info("PROFESSIONAL SUMMARY\nJANE DOE\njane@example.com")
        self.assertEqual(contact.name, "JANE DOE")

    def test_labeled_linkedin_handle(self):
        contact = extract_contact_info("LinkedIn: janedoe")
        self.assertEqual(contact.linkedin, "linkedin.com/in/janedoe")

    def test_international_phone(self):
        contact = extract_contact_info("Phone +44 20 7946 0958")
        self.assertEqual(contact.phone, "+44 20 7946 0958")

    def test_website_ignores_linkedin_urls(self):
        contact = extract_contact_info("https://www.linkedin.com/in/janedoe github.com/janedoe")
        self.assertEqual(contact.linkedin, "linkedin.com/in/janedoe")
        self.assertEqual(contact.website, "github.com/janedoe")

    def test_empty_text_has_no_contact(self):
        self.assertIsNone(extract_contact_info(""))


if __name__ == "__main__":
    unittest.main()
