from .scorer import (
    build_suggestions,
    essential_terms,
    formatting_score,
    keyword_score,
    readability_score,
    resolve_domain,
    score,
    structure_score,
)

__all__ = [
    "score",
    "keyword_score",
    "formatting_score",
    "readability_score",
    "structure_score",
    "build_suggestions",
    "essential_terms",
    "resolve_domain",
]
