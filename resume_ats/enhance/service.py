from __future__ import annotations

import logging

from resume_ats.schemas import ATSScore, EnhancementRequest, EnhancementResponse
from resume_ats.scoring import score

from .llm import EnhancerLLMError, enhancer_llm_enabled, text_completion
from .prompt import build_enhancement_prompt
from .rewriter import rewrite_locally

logger = logging.getLogger(__name__)

_DIMENSION_LABELS = (
    ("keywords", "Improved keyword optimization"),
    ("formatting", "Enhanced formatting and structure"),
    ("readability", "Improved readability and clarity"),
    ("structure", "Better content organization"),
)


def describe_improvements(old: ATSScore, new: ATSScore) -> list[str]:
    improvements: list[str] = []
    for dimension, label in _DIMENSION_LABELS:
        gain = getattr(new, dimension) - getattr(old, dimension)
        if gain > 0:
            improvements.append(f"{label} (+{gain} points)")

    verb = "improved" if new.overall > old.overall else "changed"
    improvements.append(f"Overall ATS score {verb} from {old.overall} to {new.overall}")
    return improvements


def enhance_resume(request: EnhancementRequest) -> EnhancementResponse:
    """Rewrite résumé text and re-score the result.

    The LLM rewrite is preferred when configured; any provider failure falls
    back to the deterministic local rewrite.
    """
    baseline = request.ats_score or score(request.original_text, domain_hint=request.industry)

    enhanced_text: str | None = None
    source = "local"
    if enhancer_llm_enabled():
        prompt = build_enhancement_prompt(
            original_text=request.original_text,
            ats_score=baseline,
            target_role=request.target_role,
            industry=request.industry,
            keywords=request.keywords,
        )
        try:
            enhanced_text = text_completion(user_prompt=prompt)
            source = "llm"
        except EnhancerLLMError as exc:
            logger.warning("enhancer_llm_fallback code=%s: %s", exc.code, exc)

    if enhanced_text is None:
        enhanced_text = rewrite_locally(
            request.original_text,
            target_role=request.target_role,
            industry=request.industry,
            keywords=request.keywords,
        )

    new_score = score(enhanced_text, domain_hint=request.industry)
    return EnhancementResponse(
        enhanced_text=enhanced_text,
        improvements=describe_improvements(baseline, new_score),
        new_score=new_score,
        source=source,
    )
