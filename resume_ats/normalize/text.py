from __future__ import annotations

import re

BULLET_GLYPHS = "•◦▪▫●○■□◆◇▶►·‣⁃"
_BULLET_PATTERN = re.compile(
    rf"^\s*(?:[{re.escape(BULLET_GLYPHS)}]\s*|[-–—*]\s+|\d+[.)]\s+)"
)
_HORIZONTAL_SPACE_RE = re.compile(r"[^\S\n]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Collapse every whitespace run to one space; the canonical résumé text."""
    if not text:
        return ""
    unified = text.replace("\r\n", "\n").replace("\r", "\n")
    return _WHITESPACE_RE.sub(" ", unified).strip()


def normalize_layout(text: str | None) -> str:
    """Line-preserving normalization used for section segmentation.

    Lines are trimmed and inner whitespace collapsed; runs of blank lines
    shrink to a single blank line so a double line break always means
    a paragraph boundary.
    """
    if not text:
        return ""
    unified = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [_HORIZONTAL_SPACE_RE.sub(" ", line).strip() for line in unified.split("\n")]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(lines)).strip()


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def is_heading_like(line: str) -> bool:
    """All-caps short line such as ``WORK HISTORY`` or ``CERTIFICATIONS:``."""
    stripped = normalize_line(line).rstrip(":").strip()
    if not stripped or "|" in stripped or is_bullet_like(stripped):
        return False
    if not any(char.isalpha() for char in stripped):
        return False
    return bool(stripped.isupper() and len(stripped.split()) <= 5 and len(stripped) <= 36)
