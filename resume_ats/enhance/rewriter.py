from __future__ import annotations

import re

from resume_ats.extraction.sections import SECTION_SPECS
from resume_ats.normalize import normalize_layout

VERB_UPGRADES: dict[str, str] = {
    "led": "successfully led",
    "managed": "effectively managed",
    "developed": "architected and developed",
    "created": "designed and created",
    "implemented": "successfully implemented",
}

_DASH_BULLET_RE = re.compile(r"^[-*][ \t]+", re.MULTILINE)
_LEADING_VERB_RE = re.compile(
    rf"^(?P<prefix>(?:•[ \t]*)?)(?P<verb>{'|'.join(VERB_UPGRADES)})\b",
    re.IGNORECASE | re.MULTILINE,
)


def _heading_re(section: str) -> re.Pattern[str]:
    headings = sorted(SECTION_SPECS[section].headings, key=len, reverse=True)
    alternation = "|".join(re.escape(heading) for heading in headings)
    return re.compile(rf"^(?:{alternation})[ \t]*:?[ \t]*$", re.IGNORECASE | re.MULTILINE)


_SUMMARY_HEADING_RE = _heading_re("summary")
_SKILLS_HEADING_RE = _heading_re("skills")


def normalize_bullets(text: str) -> str:
    return _DASH_BULLET_RE.sub("• ", text)


def strengthen_verbs(text: str) -> str:
    """Upgrade weak verbs that open a bullet; already-upgraded lines are left alone."""

    def _replace(match: re.Match[str]) -> str:
        verb = match.group("verb")
        upgrade = VERB_UPGRADES[verb.lower()]
        if verb[0].isupper():
            upgrade = upgrade[0].upper() + upgrade[1:]
        return f"{match.group('prefix')}{upgrade}"

    return _LEADING_VERB_RE.sub(_replace, text)


def _insert_after(text: str, match: re.Match[str], addition: str) -> str:
    return f"{text[: match.end()]}\n{addition}{text[match.end():]}"


def add_summary_line(text: str, target_role: str) -> str:
    line = f"Results-driven {target_role} with proven expertise in delivering high-impact solutions."
    if line in text:
        return text
    heading = _SUMMARY_HEADING_RE.search(text)
    if heading is not None:
        return _insert_after(text, heading, line)

    section = f"PROFESSIONAL SUMMARY\n{line}"
    header, separator, rest = text.partition("\n\n")
    if not separator:
        return f"{section}\n\n{text}" if text else section
    return f"{header}\n\n{section}\n\n{rest}"


def add_skill_lines(text: str, lines: list[str]) -> str:
    additions = [line for line in lines if line not in text]
    if not additions:
        return text
    block = "\n".join(additions)
    heading = _SKILLS_HEADING_RE.search(text)
    if heading is not None:
        return _insert_after(text, heading, block)
    return f"{text}\n\nSKILLS\n{block}" if text else f"SKILLS\n{block}"


def rewrite_locally(
    original_text: str,
    *,
    target_role: str | None = None,
    industry: str | None = None,
    keywords: list[str] | None = None,
) -> str:
    """Deterministic rewrite used when no LLM is available."""
    enhanced = normalize_layout(original_text)

    if target_role and target_role.strip():
        enhanced = add_summary_line(enhanced, target_role.strip())

    skill_lines: list[str] = []
    if industry and industry.strip():
        skill_lines.append(f"• {industry.strip().title()} Industry Expertise")
    lowered = enhanced.lower()
    missing_keywords = [
        keyword.strip()
        for keyword in (keywords or [])
        if keyword.strip() and keyword.strip().lower() not in lowered
    ]
    if missing_keywords:
        skill_lines.append(f"• {', '.join(dict.fromkeys(missing_keywords))}")
    if skill_lines:
        enhanced = add_skill_lines(enhanced, skill_lines)

    enhanced = normalize_bullets(enhanced)
    return strengthen_verbs(enhanced)
