from __future__ import annotations

import logging
import os
import time
from functools import lru_cache

from openai import OpenAI

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert resume writer and ATS optimization specialist. "
    "Enhance resumes for better ATS performance while keeping them truthful and readable. "
    "Return only the enhanced resume as plain text."
)


class EnhancerLLMError(RuntimeError):
    def __init__(self, message: str, *, code: str = "llm_unavailable"):
        super().__init__(message)
        self.code = code


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def enhancer_llm_enabled() -> bool:
    if not _env_bool("ENHANCER_LLM_ENABLED", True):
        return False
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key or _looks_like_placeholder(api_key):
        return False
    return True


@lru_cache(maxsize=1)
def _client() -> OpenAI:
    return OpenAI(
        api_key=(os.getenv("OPENAI_API_KEY") or "").strip(),
        base_url=(os.getenv("OPENAI_BASE_URL") or None),
        timeout=float(os.getenv("ENHANCER_LLM_TIMEOUT_S", "30")),
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "2")),
    )


def _model() -> str:
    return (os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()


def text_completion(
    *,
    user_prompt: str,
    system_prompt: str = SYSTEM_PROMPT,
    temperature: float = 0.4,
    max_output_tokens: int = 2048,
) -> str:
    """Run one chat completion and return its text, raising ``EnhancerLLMError`` on any failure."""
    if not enhancer_llm_enabled():
        raise EnhancerLLMError("OpenAI is not configured for resume enhancement.", code="llm_disabled")

    started = time.perf_counter()
    try:
        response = _client().chat.completions.create(
            model=_model(),
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            max_tokens=max_output_tokens,
        )
    except Exception as exc:  # noqa: BLE001 - provider errors are normalized for the caller
        raise EnhancerLLMError(f"OpenAI request failed: {exc}", code="llm_exception") from exc

    content = response.choices[0].message.content if response.choices else ""
    if not content or not str(content).strip():
        raise EnhancerLLMError("OpenAI returned an empty response.", code="empty_response")

    logger.info(
        "enhancer_llm_completed model=%s prompt_len=%s latency_ms=%s",
        _model(),
        len(user_prompt),
        int((time.perf_counter() - started) * 1000),
    )
    return str(content).strip()
