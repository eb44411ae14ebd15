from __future__ import annotations

import re
from dataclasses import dataclass

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize import is_heading_like


@dataclass(frozen=True)
class SectionSpec:
    name: str
    headings: tuple[str, ...]
    stop_at_blank_line: bool = True


SECTION_SPECS: dict[str, SectionSpec] = {
    "summary": SectionSpec(
        name="summary",
        headings=(
            "PROFESSIONAL SUMMARY",
            "SUMMARY OF QUALIFICATIONS",
            "CAREER SUMMARY",
            "EXECUTIVE SUMMARY",
            "PROFESSIONAL PROFILE",
            "CAREER OBJECTIVE",
            "SUMMARY",
            "PROFILE",
            "OBJECTIVE",
            "ABOUT ME",
            "ABOUT",
        ),
    ),
    "experience": SectionSpec(
        name="experience",
        headings=(
            "PROFESSIONAL EXPERIENCE",
            "WORK EXPERIENCE",
            "RELEVANT EXPERIENCE",
            "EMPLOYMENT HISTORY",
            "CAREER HISTORY",
            "WORK HISTORY",
            "EXPERIENCE",
            "EMPLOYMENT",
        ),
        stop_at_blank_line=False,
    ),
    "education": SectionSpec(
        name="education",
        headings=(
            "EDUCATIONAL BACKGROUND",
            "ACADEMIC BACKGROUND",
            "ACADEMIC QUALIFICATIONS",
            "EDUCATION",
        ),
        stop_at_blank_line=False,
    ),
    "skills": SectionSpec(
        name="skills",
        headings=(
            "TECHNICAL SKILLS",
            "CORE COMPETENCIES",
            "AREAS OF EXPERTISE",
            "KEY SKILLS",
            "SKILLS",
            "COMPETENCIES",
            "EXPERTISE",
        ),
    ),
    "certifications": SectionSpec(
        name="certifications",
        headings=(
            "LICENSES AND CERTIFICATIONS",
            "LICENSES & CERTIFICATIONS",
            "CERTIFICATIONS",
            "CERTIFICATES",
            "LICENSES",
        ),
    ),
}

# Headings that end a section without being extracted themselves.
BOUNDARY_HEADINGS: tuple[str, ...] = (
    "PROJECTS",
    "AWARDS",
    "HONORS",
    "PUBLICATIONS",
    "LANGUAGES",
    "INTERESTS",
    "VOLUNTEER EXPERIENCE",
    "VOLUNTEERING",
    "REFERENCES",
    "ACHIEVEMENTS",
)


def _alternation(headings: tuple[str, ...]) -> str:
    ordered = sorted(set(headings), key=len, reverse=True)
    return "|".join(re.escape(heading).replace(r"\ ", r"[ \t]+") for heading in ordered)


def _heading_line_pattern(headings: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(
        rf"^(?:{_alternation(headings)})[ \t]*(?::[ \t]*(?P<inline>[^\n]*))?$",
        re.IGNORECASE | re.MULTILINE,
    )


def _inline_heading_pattern(headings: tuple[str, ...]) -> re.Pattern[str]:
    # Case-sensitive: only upper-case headings are trusted inside flattened text.
    return re.compile(rf"(?<![A-Za-z])(?:{_alternation(headings)})(?![A-Za-z])[ \t]*:?")


ALL_HEADINGS: tuple[str, ...] = tuple(
    heading for spec in SECTION_SPECS.values() for heading in spec.headings
) + BOUNDARY_HEADINGS

_LINE_PATTERNS = {name: _heading_line_pattern(spec.headings) for name, spec in SECTION_SPECS.items()}
_INLINE_PATTERNS = {name: _inline_heading_pattern(spec.headings) for name, spec in SECTION_SPECS.items()}
_ANY_HEADING_LINE = _heading_line_pattern(ALL_HEADINGS)
_ANY_INLINE_HEADING = _inline_heading_pattern(ALL_HEADINGS)
_HEADING_WORDS = re.compile(rf"\b(?:{_alternation(ALL_HEADINGS)})\b", re.IGNORECASE)


def mentions_heading(candidate: str) -> bool:
    """True when the text contains a known section heading phrase."""
    return bool(_HEADING_WORDS.search(candidate))


def is_section_boundary(line: str) -> bool:
    return is_heading_like(line) or bool(_ANY_HEADING_LINE.match(line))


def _body_after_heading_line(text: str, match: re.Match[str], stop_at_blank_line: bool) -> str:
    body: list[str] = []
    inline = (match.group("inline") or "").strip()
    if inline:
        body.append(inline)

    for line in text[match.end():].split("\n")[1:]:
        if not line.strip():
            if stop_at_blank_line and body:
                break
            continue
        if is_section_boundary(line):
            break
        body.append(line.strip())
    return "\n".join(body)


def _body_after_inline_heading(text: str, match: re.Match[str]) -> str:
    following = _ANY_INLINE_HEADING.search(text, match.end())
    end = following.start() if following else len(text)
    return text[match.end():end].strip()


def _first_inline_heading(text: str, name: str) -> re.Match[str] | None:
    # A heading inside a longer known heading (EXPERIENCE in VOLUNTEER EXPERIENCE) does not count.
    complete = {match.span() for match in _ANY_INLINE_HEADING.finditer(text)}
    for match in _INLINE_PATTERNS[name].finditer(text):
        if match.span() in complete:
            return match
    return None


def _stops_at_blank_line(spec: SectionSpec) -> bool:
    return bool(get_scoring_value(f"extraction.{spec.name}.stop_at_blank_line", spec.stop_at_blank_line))


def isolate_section(text: str, name: str) -> str | None:
    """Return the body under the first heading of ``name``, or ``None`` when no heading exists.

    Headings on their own line (any case, optional trailing colon with inline
    content) are tried first; flattened text falls back to an upper-case
    heading found anywhere, bounded by the next upper-case heading.
    """
    spec = SECTION_SPECS[name]
    if not text:
        return None

    line_match = _LINE_PATTERNS[name].search(text)
    if line_match is not None:
        return _body_after_heading_line(text, line_match, _stops_at_blank_line(spec))

    inline_match = _first_inline_heading(text, name)
    if inline_match is not None:
        return _body_after_inline_heading(text, inline_match)
    return None
