import logging

from fastapi import APIRouter, File, Form, Header, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from resume_ats.analysis import parse
from resume_ats.core.config import settings
from resume_ats.core.rate_limit import rate_limit
from resume_ats.core.security import check_api_key
from resume_ats.enhance.service import enhance_resume
from resume_ats.parsing.parse import parse_bytes, source_type_for
from resume_ats.schemas import (
    ATSScore,
    AnalyzeRequest,
    EnhancementRequest,
    EnhancementResponse,
    ParsedResume,
)
from resume_ats.scoring import score

logger = logging.getLogger(__name__)

router = APIRouter()

_READ_CHUNK_BYTES = 1024 * 64


def _require_text(text: str) -> None:
    if not text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume text is empty.",
        )


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resume/analyze", response_model=ParsedResume)
@rate_limit()
async def analyze_resume(request: Request, payload: AnalyzeRequest):
    _ = request
    _require_text(payload.text)
    return await run_in_threadpool(parse, payload.text, payload.industry)


@router.post("/resume/score", response_model=ATSScore)
@rate_limit()
async def score_resume(request: Request, payload: AnalyzeRequest):
    _ = request
    _require_text(payload.text)
    return await run_in_threadpool(score, payload.text, payload.industry)


@router.post("/resume/upload", response_model=ParsedResume)
@rate_limit()
async def upload_resume(
    request: Request,
    file: UploadFile = File(...),
    industry: str | None = Form(default=None),
):
    _ = request
    filename = file.filename or "uploaded-file"
    try:
        source_type_for(filename)
    except NotImplementedError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    payload = await _read_upload(file)
    document = await run_in_threadpool(parse_bytes, filename, payload)
    if document.parsing_warnings:
        logger.info("resume_upload_warnings file=%s warnings=%s", filename, document.parsing_warnings)
    if not document.has_text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not extract text from the file. Please ensure it contains readable text.",
        )
    return await run_in_threadpool(parse, document.text, industry)


@router.post("/resume/enhance", response_model=EnhancementResponse)
@rate_limit()
async def enhance(
    request: Request,
    payload: EnhancementRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    length = len(payload.original_text.strip())
    if length < settings.enhance_min_chars:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume text is too short for meaningful enhancement.",
        )
    if length > settings.enhance_max_chars:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resume text is too long. Please provide a more concise version.",
        )
    return await run_in_threadpool(enhance_resume, payload)
