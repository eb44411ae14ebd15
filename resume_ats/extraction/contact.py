from __future__ import annotations

import re

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.schemas import ContactInfo

from .sections import mentions_heading
from .strategies import Strategy, all_of, first_match, length_between

EMAIL_RE = re.compile(r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")


def _not_heading(candidate: str) -> bool:
    return not mentions_heading(candidate)


def _digit_count_between(min_digits: int, max_digits: int):
    def _check(candidate: str) -> bool:
        digits = sum(1 for char in candidate if char.isdigit())
        return min_digits <= digits <= max_digits

    return _check


def _not_linkedin(candidate: str) -> bool:
    return "linkedin." not in candidate.lower() and "@" not in candidate


def _linkedin_profile(match: re.Match[str]) -> str:
    return f"linkedin.com/in/{match.group(1)}"


def _strip_url_punctuation(match: re.Match[str]) -> str:
    return match.group(1).rstrip(".,);:")


def _name_strategies() -> list[Strategy]:
    valid = all_of(
        length_between(
            int(get_scoring_value("extraction.name.min_length", 4)),
            int(get_scoring_value("extraction.name.max_length", 50)),
        ),
        _not_heading,
    )
    return [
        Strategy(
            "title_case_line",
            re.compile(r"^([A-Z][a-z]+(?:[ \t][A-Z][a-z]+){1,3})[ \t]*$", re.MULTILINE),
            group=1,
            validator=valid,
        ),
        Strategy(
            "title_case_prefix",
            re.compile(r"^([A-Z][a-z]+[ \t][A-Z][a-z]+(?:[ \t][A-Z][a-z]+)*)", re.MULTILINE),
            group=1,
            validator=valid,
        ),
        Strategy(
            "title_case_run",
            re.compile(r"(?<![A-Za-z])([A-Z][a-z]+(?:[ \t][A-Z][a-z]+){1,3})(?![A-Za-z])"),
            group=1,
            validator=valid,
        ),
        Strategy(
            "all_caps_block",
            re.compile(r"(?<![A-Za-z])([A-Z][A-Z \t]+[A-Z])(?![A-Za-z])"),
            group=1,
            validator=all_of(valid, lambda candidate: " " in candidate.strip()),
        ),
        Strategy(
            "first_line_words",
            re.compile(r"\A([A-Za-z]+[ \t][A-Za-z]+)"),
            group=1,
            validator=valid,
        ),
    ]


_PHONE_STRATEGIES = [
    Strategy(
        "north_american",
        re.compile(r"(?<![\d+])(?:\+?1[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}(?!\d)"),
    ),
    Strategy("compact", PHONE_RE),
    Strategy("parenthesized_area", re.compile(r"\(\d{3}\)\s?\d{3}[-.]?\d{4}")),
    Strategy(
        "international",
        re.compile(r"\+\d{1,3}[ .-]?\(?\d+\)?(?:[ .-]?\d+){2,}"),
        validator=_digit_count_between(8, 15),
    ),
]

_EMAIL_STRATEGIES = [Strategy("address", EMAIL_RE)]


def find_phone(text: str) -> str | None:
    return first_match(_PHONE_STRATEGIES, text)


_LINKEDIN_STRATEGIES = [
    Strategy(
        "profile_url",
        re.compile(r"linkedin\.com/in/([A-Za-z0-9_-]+)", re.IGNORECASE),
        formatter=_linkedin_profile,
    ),
    Strategy(
        "legacy_profile_url",
        re.compile(r"linkedin\.com/profile/view\?id=([A-Za-z0-9_-]+)", re.IGNORECASE),
        formatter=_linkedin_profile,
    ),
    Strategy(
        "labeled_handle",
        re.compile(r"linkedin[ \t]*:[ \t]*([A-Za-z0-9_-]{3,})", re.IGNORECASE),
        formatter=_linkedin_profile,
    ),
]

_WEBSITE_STRATEGIES = [
    Strategy(
        "url",
        re.compile(r"((?:https?://|www\.)[^\s,|;]+)", re.IGNORECASE),
        formatter=_strip_url_punctuation,
        validator=_not_linkedin,
    ),
    Strategy(
        "code_host",
        re.compile(r"\b((?:github|gitlab)\.com/[A-Za-z0-9_.-]+)", re.IGNORECASE),
        formatter=_strip_url_punctuation,
    ),
]


def _location_strategies() -> list[Strategy]:
    valid = all_of(
        length_between(
            int(get_scoring_value("extraction.location.min_length", 4)),
            int(get_scoring_value("extraction.location.max_length", 50)),
        ),
        _not_heading,
    )
    city = r"[A-Z][A-Za-z.'-]*(?:[ ][A-Z][A-Za-z.'-]*){0,3}"
    return [
        Strategy(
            "city_state_zip",
            re.compile(rf"(?<![A-Za-z])({city},[ ]?[A-Z]{{2}}(?:[ ]\d{{5}})?)(?![A-Za-z])"),
            group=1,
            validator=valid,
        ),
        Strategy(
            "city_country_code",
            re.compile(rf"(?<![A-Za-z])({city},[ ]?[A-Z]{{2,3}})(?![A-Za-z])"),
            group=1,
            validator=valid,
        ),
        Strategy(
            "labeled",
            re.compile(r"(?i:location|address|based in|city)[ \t]*:[ \t]*([A-Za-z][A-Za-z ,.'-]+)"),
            group=1,
            validator=valid,
        ),
    ]


def extract_contact_info(text: str) -> ContactInfo | None:
    """Pull contact fields from layout text; ``None`` when nothing is found."""
    contact = ContactInfo(
        name=first_match(_name_strategies(), text),
        email=first_match(_EMAIL_STRATEGIES, text),
        phone=find_phone(text),
        location=first_match(_location_strategies(), text),
        linkedin=first_match(_LINKEDIN_STRATEGIES, text),
        website=first_match(_WEBSITE_STRATEGIES, text),
    )
    if contact.is_empty():
        return None
    return contact
