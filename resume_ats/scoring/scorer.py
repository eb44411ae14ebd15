from __future__ import annotations

import re
from functools import lru_cache

from resume_ats.core.config.scoring import get_scoring_value
from resume_ats.extraction.contact import EMAIL_RE, find_phone
from resume_ats.normalize import BULLET_GLYPHS, normalize_text
from resume_ats.schemas import ATSScore, ResumeSections

from .vocabulary import (
    ESSENTIAL_TERMS,
    INDUSTRY_ALIASES,
    INDUSTRY_SUGGESTIONS,
    INDUSTRY_TERMS,
    POWER_VERBS,
    PROFESSIONAL_WORDS,
    SUGGESTIONS,
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_BULLET_RE = re.compile(rf"[{re.escape(BULLET_GLYPHS)}]|(?:^|(?<=\s))[-*](?=\s)")
_NUMBER_RE = re.compile(r"\d+[%+]?")
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

_EXPERIENCE_MARKERS = ("experience", "work", "employment")
_EDUCATION_MARKERS = ("education", "degree", "university")
_SKILLS_MARKERS = ("skills", "technical", "competencies")
_SUMMARY_MARKERS = ("summary", "profile", "objective")


def _value(path: str, default: float) -> float:
    return float(get_scoring_value(path, default))


def _clamp(value: float, floor: float = 0, ceiling: float = 100) -> int:
    bounded = max(min(value, ceiling), floor)
    return max(0, min(100, round(bounded)))


@lru_cache(maxsize=256)
def _term_pattern(term: str, whole_word: bool) -> re.Pattern[str]:
    suffix = r"\b" if whole_word else ""
    return re.compile(rf"\b{re.escape(term)}{suffix}")


def _found(terms: tuple[str, ...], lowered: str, *, whole_word: bool) -> list[str]:
    return [term for term in terms if _term_pattern(term, whole_word).search(lowered)]


def _has_any(lowered: str, markers: tuple[str, ...]) -> bool:
    return any(marker in lowered for marker in markers)


def resolve_domain(hint: str | None) -> str | None:
    """Map a caller-supplied industry hint onto a known vocabulary key."""
    if not hint:
        return None
    key = hint.strip().lower()
    key = INDUSTRY_ALIASES.get(key, key)
    return key if key in INDUSTRY_TERMS else None


def essential_terms(domain_hint: str | None = None) -> tuple[str, ...]:
    domain = resolve_domain(domain_hint)
    if domain is None:
        return ESSENTIAL_TERMS
    return tuple(dict.fromkeys(INDUSTRY_TERMS[domain] + ESSENTIAL_TERMS))


def keyword_score(text: str, domain_hint: str | None = None) -> int:
    lowered = (text or "").lower()
    terms = essential_terms(domain_hint)
    found_terms = _found(terms, lowered, whole_word=False)
    found_verbs = _found(POWER_VERBS, lowered, whole_word=True)

    essential_weight = _value("keywords.essential_weight", 50)
    verb_weight = _value("keywords.power_verb_weight", 50)
    saturation = max(_value("keywords.power_verb_saturation", 3), 1)

    essential_part = min(len(found_terms) / len(terms) * essential_weight, essential_weight)
    verb_part = min(len(found_verbs) / saturation * verb_weight, verb_weight)
    total = _value("keywords.base", 40) + essential_part + verb_part
    return _clamp(total, 0, _value("keywords.ceiling", 100))


def formatting_score(text: str, sections: ResumeSections | None = None) -> int:
    text = text or ""
    lowered = text.lower()
    contact = sections.contact_info if sections else None
    score = _value("formatting.base", 85)

    if not (contact and contact.email) and not EMAIL_RE.search(text):
        score -= _value("formatting.penalties.email", 15)
    if not (contact and contact.phone) and find_phone(text) is None:
        score -= _value("formatting.penalties.phone", 10)
    if not (sections and sections.experience) and not _has_any(lowered, _EXPERIENCE_MARKERS):
        score -= _value("formatting.penalties.experience", 20)
    if not (sections and sections.education) and not _has_any(lowered, _EDUCATION_MARKERS):
        score -= _value("formatting.penalties.education", 15)
    if not (sections and sections.skills) and not _has_any(lowered, _SKILLS_MARKERS):
        score -= _value("formatting.penalties.skills", 10)

    if (sections and sections.summary) or _has_any(lowered, _SUMMARY_MARKERS):
        score += _value("formatting.summary_bonus", 15)

    return _clamp(score, _value("formatting.floor", 50), _value("formatting.ceiling", 100))


def readability_score(text: str) -> int:
    text = text or ""
    floor = _value("readability.floor", 60)
    ceiling = _value("readability.ceiling", 100)

    sentences = [fragment for fragment in _SENTENCE_SPLIT_RE.split(text) if fragment.strip()]
    words = text.split()
    if not sentences or not words:
        return _clamp(floor, floor, ceiling)

    score = _value("readability.base", 75)

    words_per_sentence = len(words) / len(sentences)
    if _value("readability.words_per_sentence.ideal_min", 12) <= words_per_sentence <= _value(
        "readability.words_per_sentence.ideal_max", 25
    ):
        score += _value("readability.words_per_sentence.ideal_bonus", 10)
    elif words_per_sentence > _value("readability.words_per_sentence.long_threshold", 30):
        score -= _value("readability.words_per_sentence.long_penalty", 15)
    elif words_per_sentence < _value("readability.words_per_sentence.short_threshold", 6):
        score -= _value("readability.words_per_sentence.short_penalty", 10)

    chars_per_word = sum(len(word) for word in words) / len(words)
    if not (
        _value("readability.chars_per_word.ideal_min", 3)
        <= chars_per_word
        <= _value("readability.chars_per_word.ideal_max", 7)
    ):
        score -= _value("readability.chars_per_word.outside_penalty", 15)

    if len(_BULLET_RE.findall(text)) >= _value("readability.bullets.min_count", 3):
        score += _value("readability.bullets.bonus", 15)
    if len(_NUMBER_RE.findall(text)) >= _value("readability.numbers.min_count", 3):
        score += _value("readability.numbers.bonus", 10)
    if _found(PROFESSIONAL_WORDS, text.lower(), whole_word=False):
        score += _value("readability.professional_language_bonus", 5)

    return _clamp(score, floor, ceiling)


def structure_score(text: str, sections: ResumeSections | None = None) -> int:
    text = text or ""
    lowered = text.lower()
    fallback = _value("structure.keyword_fallback", 10)
    score = _value("structure.base", 50)

    if sections is not None:
        if sections.contact_info is not None and not sections.contact_info.is_empty():
            score += _value("structure.extracted.contact", 15)
        if sections.experience:
            score += _value("structure.extracted.experience", 20)
        if sections.education:
            score += _value("structure.extracted.education", 15)
        if sections.skills:
            score += _value("structure.extracted.skills", 15)

    if EMAIL_RE.search(text) or find_phone(text) is not None:
        score += fallback
    if _has_any(lowered, ("experience", "work")):
        score += fallback
    if _has_any(lowered, ("education", "degree")):
        score += fallback
    if _has_any(lowered, ("skills", "technical")):
        score += fallback

    if (sections and sections.summary) or _has_any(lowered, ("summary", "profile")):
        score += _value("structure.summary_bonus", 10)
    if _YEAR_RE.search(text):
        score += _value("structure.year_bonus", 5)

    return _clamp(score, _value("structure.floor", 60), _value("structure.ceiling", 100))


def build_suggestions(
    *,
    keywords: int,
    formatting: int,
    readability: int,
    structure: int,
    domain_hint: str | None = None,
) -> list[str]:
    """Map each sub-score under its threshold to canned advice, in dimension order."""
    scores = {
        "keywords": keywords,
        "formatting": formatting,
        "readability": readability,
        "structure": structure,
    }
    suggestions: list[str] = []
    for dimension, value in scores.items():
        if value < _value(f"suggestions.thresholds.{dimension}", 70):
            suggestions.extend(SUGGESTIONS[dimension])

    domain = resolve_domain(domain_hint)
    if domain is not None:
        suggestions.extend(INDUSTRY_SUGGESTIONS[domain])
    return suggestions


def score(
    text: str | None,
    domain_hint: str | None = None,
    sections: ResumeSections | None = None,
) -> ATSScore:
    """Score résumé text; structured sections sharpen formatting and structure checks."""
    normalized = normalize_text(text)
    keywords = keyword_score(normalized, domain_hint)
    formatting = formatting_score(normalized, sections)
    readability = readability_score(normalized)
    structure = structure_score(normalized, sections)
    return ATSScore(
        keywords=keywords,
        formatting=formatting,
        readability=readability,
        structure=structure,
        suggestions=build_suggestions(
            keywords=keywords,
            formatting=formatting,
            readability=readability,
            structure=structure,
            domain_hint=domain_hint,
        ),
    )
