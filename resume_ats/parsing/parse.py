from __future__ import annotations

import hashlib
from io import BytesIO
from pathlib import Path
from typing import Callable

from docx import Document
from pypdf import PdfReader

from .models import SUPPORTED_SOURCE_TYPES, ParsedBlock, ParsedDoc

# Below this many characters a PDF is most likely a scanned image.
MIN_DIGITAL_TEXT_CHARS = 50

Extraction = tuple[str, list[ParsedBlock], list[str]]


def _compute_doc_id(text: str, file_name: str) -> str:
    seed = text if text.strip() else file_name
    return hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()[:16]


def source_type_for(file_name: str) -> str:
    extension = Path(file_name).suffix.lower().lstrip(".")
    if extension not in SUPPORTED_SOURCE_TYPES:
        raise NotImplementedError(
            f"Unsupported file type '.{extension}'. Supported types: .txt, .pdf, .docx"
        )
    return extension


def _extract_txt(payload: bytes) -> Extraction:
    try:
        return payload.decode("utf-8"), [], []
    except UnicodeDecodeError:
        text = payload.decode("utf-8", errors="replace")
        return text, [], ["Text file is not valid UTF-8; undecodable bytes were replaced."]


def _extract_pdf(payload: bytes) -> Extraction:
    try:
        reader = PdfReader(BytesIO(payload))
        blocks = [
            ParsedBlock(page=number, text=page_text)
            for number, page_text in (
                (number, (page.extract_text() or "").strip())
                for number, page in enumerate(reader.pages, start=1)
            )
            if page_text
        ]
    except Exception as exc:  # noqa: BLE001 - pypdf raises many error types for damaged files
        return "", [], [f"PDF parsing failed: {exc}"]

    # Page breaks become paragraph breaks so headings stay on their own lines.
    text = "\n\n".join(block.text for block in blocks)
    warnings: list[str] = []
    if len(text.strip()) <= MIN_DIGITAL_TEXT_CHARS:
        warnings.append(
            "PDF has little or no digital text; it may be a scanned image, which is not supported."
        )
    return text, blocks, warnings


def _docx_lines(document) -> list[str]:
    lines = [paragraph.text.strip() for paragraph in document.paragraphs]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(dict.fromkeys(cells)))
    return [line for line in lines if line]


def _extract_docx(payload: bytes) -> Extraction:
    try:
        lines = _docx_lines(Document(BytesIO(payload)))
    except Exception as exc:  # noqa: BLE001 - python-docx surfaces zip and xml errors alike
        return "", [], [f"DOCX parsing failed: {exc}"]

    if not lines:
        return "", [], ["No extractable text found in DOCX."]
    return "\n".join(lines), [ParsedBlock(text=line) for line in lines], []


_EXTRACTORS: dict[str, Callable[[bytes], Extraction]] = {
    "txt": _extract_txt,
    "pdf": _extract_pdf,
    "docx": _extract_docx,
}


def parse_bytes(file_name: str, payload: bytes) -> ParsedDoc:
    """Extract plain text from an uploaded document held in memory."""
    source_type = source_type_for(file_name)
    text, blocks, warnings = _EXTRACTORS[source_type](payload)
    return ParsedDoc(
        doc_id=_compute_doc_id(text, file_name),
        source_type=source_type,
        file_name=file_name,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
    )


def parse_document(file_path: str) -> ParsedDoc:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return parse_bytes(path.name, path.read_bytes())
