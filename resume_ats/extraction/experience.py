from __future__ import annotations

import re

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize import BULLET_GLYPHS, is_bullet_like, strip_bullet_prefix
from resume_ats.schemas import PRESENT, ExperienceEntry

_DATE_TOKEN = r"(?:[A-Za-z]{3,9}\.?[ ]+\d{4}|\d{1,2}/\d{4}|\d{4})"
_DATE_TOKEN_RE = re.compile(_DATE_TOKEN)
_RANGE_RE = re.compile(rf"({_DATE_TOKEN})\s*(?:-|–|—|to)\s*({_DATE_TOKEN})", re.IGNORECASE)
_OPEN_RANGE_RE = re.compile(r"\b(?:present|current|now)\b", re.IGNORECASE)
_LOOSE_RANGE_RE = re.compile(
    rf"\(?{_DATE_TOKEN}\s*(?:-|–|—|to)\s*(?:{_DATE_TOKEN}|present|current|now)\)?",
    re.IGNORECASE,
)
_STRICT_HEADER_RE = re.compile(r"^[A-Z][^|\n]*\|[^|\n]*\|.+$")
_LOOSE_SEPARATOR_RE = re.compile(r"\s+(?:at|@)\s+|\s*[|,–—]\s*|\s+-\s+")
_ACHIEVEMENT_RE = re.compile(r"%|\b(?:increased|improved)\b", re.IGNORECASE)
_INLINE_GLYPH_RE = re.compile(rf"\s*([{re.escape(BULLET_GLYPHS)}])\s*")


def parse_date_range(raw: str) -> tuple[str, str]:
    """Split a date range into ``(start, end)``; never fails.

    Open-ended ranges end in ``Present``. Anything without a recognizable
    range shape is returned as both start and end.
    """
    clean = (raw or "").replace("(", "").replace(")", "").strip()

    if _OPEN_RANGE_RE.search(clean):
        start = _DATE_TOKEN_RE.search(clean)
        return (start.group(0) if start else "Unknown"), PRESENT

    range_match = _RANGE_RE.search(clean)
    if range_match:
        return range_match.group(1), range_match.group(2)

    return clean, clean


def is_achievement(bullet: str) -> bool:
    return bool(_ACHIEVEMENT_RE.search(bullet))


def _strict_header(line: str) -> tuple[str, str, str] | None:
    if not _STRICT_HEADER_RE.match(line):
        return None
    fields = [field.strip() for field in line.split("|")]
    return fields[0], fields[1], fields[-1]


def _loose_header(line: str) -> tuple[str, str, str] | None:
    if is_bullet_like(line):
        return None
    range_match = _LOOSE_RANGE_RE.search(line)
    if range_match is None:
        return None
    prefix = (line[: range_match.start()] + " " + line[range_match.end():]).strip(" -–—|,")
    parts = [part.strip() for part in _LOOSE_SEPARATOR_RE.split(prefix) if part and part.strip()]
    if not parts:
        return None
    company = parts[1] if len(parts) > 1 else ""
    return parts[0], company, range_match.group(0)


def _split_inline_bullets(body: str) -> list[str]:
    # Flattened text keeps bullets inline; give each glyph its own line.
    expanded = _INLINE_GLYPH_RE.sub(lambda match: f"\n{match.group(1)} ", body)
    return [line.strip() for line in expanded.split("\n") if line.strip()]


def _build_entry(header: tuple[str, str, str], lines: list[str]) -> ExperienceEntry:
    position, company, date_range = header
    start, end = parse_date_range(date_range)
    description = [strip_bullet_prefix(line) for line in lines if is_bullet_like(line)]
    description = [bullet for bullet in description if bullet]
    return ExperienceEntry(
        position=position,
        company=company,
        start_date=start,
        end_date=end,
        description=description,
        achievements=[bullet for bullet in description if is_achievement(bullet)],
    )


def extract_experience(body: str | None) -> list[ExperienceEntry]:
    """Build entries from an isolated experience body.

    Entries start at a ``Title | Company | Dates`` header line; content that
    does not follow such a header is dropped unless loose headers are enabled.
    """
    if not body:
        return []

    loose_enabled = bool(get_scoring_value("extraction.experience.loose_headers", False))
    min_entry_chars = int(get_scoring_value("extraction.experience.min_entry_chars", 20))

    blocks: list[tuple[tuple[str, str, str], list[str], int]] = []
    for line in _split_inline_bullets(body):
        header = _strict_header(line)
        if header is None and loose_enabled:
            header = _loose_header(line)
        if header is not None:
            blocks.append((header, [], len(line)))
            continue
        if blocks:
            header_fields, lines, size = blocks[-1]
            lines.append(line)
            blocks[-1] = (header_fields, lines, size + len(line) + 1)

    return [
        _build_entry(header, lines)
        for header, lines, size in blocks
        if size >= min_entry_chars
    ]
