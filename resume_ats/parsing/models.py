from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, Field

SourceType = Literal["pdf", "docx", "txt"]
SUPPORTED_SOURCE_TYPES: tuple[str, ...] = get_args(SourceType)


class ParsedBlock(BaseModel):
    """A page of a PDF or a paragraph of a DOCX."""

    page: int | None = None
    text: str


class ParsedDoc(BaseModel):
    doc_id: str
    source_type: SourceType
    file_name: str | None = None
    text: str
    blocks: list[ParsedBlock] = Field(default_factory=list)
    parsing_warnings: list[str] = Field(default_factory=list)

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())
