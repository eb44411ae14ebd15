from __future__ import annotations

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.normalize import normalize_layout, normalize_text
from resume_ats.schemas import ResumeSections

from .contact import extract_contact_info
from .education import extract_education
from .experience import extract_experience, parse_date_range
from .lists import extract_certifications, extract_skills
from .sections import SECTION_SPECS, isolate_section


def extract_summary(body: str | None) -> str | None:
    if not body:
        return None
    max_chars = int(get_scoring_value("extraction.summary.max_chars", 500))
    summary = normalize_text(body)[:max_chars].strip()
    return summary or None


def extract_sections(text: str | None) -> ResumeSections:
    """Segment résumé text into structured fields; absent fields stay empty."""
    layout = normalize_layout(text)
    return ResumeSections(
        contact_info=extract_contact_info(layout),
        summary=extract_summary(isolate_section(layout, "summary")),
        experience=extract_experience(isolate_section(layout, "experience")),
        education=extract_education(isolate_section(layout, "education")),
        skills=extract_skills(isolate_section(layout, "skills")),
        certifications=extract_certifications(isolate_section(layout, "certifications")),
    )


__all__ = [
    "SECTION_SPECS",
    "extract_sections",
    "extract_contact_info",
    "extract_summary",
    "extract_experience",
    "extract_education",
    "extract_skills",
    "extract_certifications",
    "isolate_section",
    "parse_date_range",
]
