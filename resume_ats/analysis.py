from __future__ import annotations

import logging

from resume_ats.extraction import extract_sections
from resume_ats.normalize import normalize_text
from resume_ats.schemas import ParsedResume
from resume_ats.scoring import score

logger = logging.getLogger(__name__)


def parse(text: str | None, domain_hint: str | None = None) -> ParsedResume:
    """Analyze raw résumé text into sections plus an ATS score.

    Defined for every string: unrecognizable input yields empty sections
    and a low but well-formed score.
    """
    sections = extract_sections(text)
    normalized = normalize_text(text)
    ats_score = score(normalized, domain_hint=domain_hint, sections=sections)
    logger.debug(
        "resume_parsed chars=%s experience=%s education=%s skills=%s overall=%s",
        len(normalized),
        len(sections.experience),
        len(sections.education),
        len(sections.skills),
        ats_score.overall,
    )
    return ParsedResume(text=normalized, sections=sections, ats_score=ats_score)
