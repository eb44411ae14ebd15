from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .resume import ATSScore

RewriteSource = Literal["llm", "local"]


class AnalyzeRequest(BaseModel):
    text: str = Field(default="", max_length=100000)
    industry: str | None = Field(default=None, max_length=60)


class EnhancementRequest(BaseModel):
    original_text: str = Field(default="", max_length=100000)
    target_role: str | None = Field(default=None, max_length=120)
    industry: str | None = Field(default=None, max_length=60)
    keywords: list[str] = Field(default_factory=list, max_length=40)
    ats_score: ATSScore | None = None


class EnhancementResponse(BaseModel):
    enhanced_text: str
    improvements: list[str] = Field(default_factory=list)
    new_score: ATSScore
    source: RewriteSource = "local"
