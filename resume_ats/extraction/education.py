from __future__ import annotations

import re

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize import strip_bullet_prefix
from resume_ats.schemas import NOT_SPECIFIED, EducationEntry

_DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?:Bachelor(?:'?s)?|Master(?:'?s)?|Doctorate|Doctor|Associate(?:'?s)?|"
    r"Ph\.?D\.?|MBA|B\.S\.|B\.A\.|M\.S\.|M\.A\.|B\.Sc\.?|M\.Sc\.?|B\.Eng\.?|M\.Eng\.?)"
    r"[^,|\n(]*"
)
_FIELD_RE = re.compile(r"\bin\s+(?P<field>[^,|\n(]+)")
_INSTITUTION_RE = re.compile(
    r"(?<![\w.&'-])(?:[A-Z][\w.&'-]*[ \t]+){0,6}?(?:University|College|Institute|School|Academy|Polytechnic)\b[^|,\n(]*"
)
_MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)[a-z]*\.?"
_DATE_RE = re.compile(rf"\b({_MONTHS}[ ]+\d{{4}}|(?:19|20)\d{{2}})\b")
_GPA_RE = re.compile(r"GPA[:\s]*(\d+(?:\.\d+)?)", re.IGNORECASE)
_TRAILING_DATE_RE = re.compile(rf"[\s\-–—]*(?:{_MONTHS}[ ]+)?(?:19|20)\d{{2}}\s*$")


def _clean_fragment(value: str) -> str:
    return _TRAILING_DATE_RE.sub("", value).strip(" -–—:;")


def _entry_blocks(body: str) -> list[str]:
    # A new entry starts at each line naming a degree once the current one already has one.
    blocks: list[list[str]] = []
    current: list[str] = []
    current_has_degree = False
    for raw_line in body.split("\n"):
        line = strip_bullet_prefix(raw_line) or raw_line.strip()
        if not line:
            continue
        has_degree = bool(_DEGREE_RE.search(line))
        if has_degree and current_has_degree:
            blocks.append(current)
            current = []
            current_has_degree = False
        current.append(line)
        current_has_degree = current_has_degree or has_degree
    if current:
        blocks.append(current)
    return ["\n".join(block) for block in blocks]


def _parse_entry(block: str) -> EducationEntry | None:
    degree_match = _DEGREE_RE.search(block)
    if degree_match is None:
        return None
    institution_match = _INSTITUTION_RE.search(block)
    if institution_match is None:
        return None

    degree = _clean_fragment(degree_match.group(0))
    field_match = _FIELD_RE.search(degree)
    dates = _DATE_RE.findall(block)
    gpa_match = _GPA_RE.search(block)
    return EducationEntry(
        degree=degree,
        field=_clean_fragment(field_match.group("field")) if field_match else NOT_SPECIFIED,
        institution=_clean_fragment(institution_match.group(0)),
        graduation_date=dates[-1] if dates else NOT_SPECIFIED,
        gpa=gpa_match.group(1) if gpa_match else None,
    )


def extract_education(body: str | None) -> list[EducationEntry]:
    if not body:
        return []
    min_entry_chars = int(get_scoring_value("extraction.education.min_entry_chars", 10))
    entries: list[EducationEntry] = []
    for block in _entry_blocks(body):
        if len(block) < min_entry_chars:
            continue
        entry = _parse_entry(block)
        if entry is not None:
            entries.append(entry)
    return entries
