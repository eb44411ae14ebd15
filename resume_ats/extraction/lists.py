from __future__ import annotations

import re

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize import BULLET_GLYPHS, strip_bullet_prefix

_ITEM_SEPARATOR_RE = re.compile(rf"[,;{re.escape(BULLET_GLYPHS)}]")


def _split_items(body: str) -> list[str]:
    items: list[str] = []
    for raw_line in body.split("\n"):
        line = strip_bullet_prefix(raw_line) or raw_line.strip()
        if not line:
            continue
        if ":" in line:
            # "Category: a, b, c" keeps only the listed values.
            line = line.split(":", 1)[1]
        items.extend(part.strip() for part in _ITEM_SEPARATOR_RE.split(line))
    return [item for item in items if item]


def _length_filtered(items: list[str], section: str, min_default: int, max_default: int) -> list[str]:
    min_length = int(get_scoring_value(f"extraction.{section}.min_length", min_default))
    max_length = int(get_scoring_value(f"extraction.{section}.max_length", max_default))
    return [item for item in items if min_length <= len(item) < max_length]


def extract_skills(body: str | None) -> list[str]:
    if not body:
        return []
    return _length_filtered(_split_items(body), "skills", 2, 50)


def extract_certifications(body: str | None) -> list[str]:
    if not body:
        return []
    return _length_filtered(_split_items(body), "certifications", 2, 100)
