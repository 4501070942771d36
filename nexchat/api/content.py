"""Content endpoints for the chat-with-content tool.

Transcript fetch, translation, document analysis, grounded Q&A, and PDF
text extraction. Each returns plain text for the client to ground on.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from nexchat.api.deps import get_content_service, get_transcript_client
from nexchat.content.errors import InvalidContentRequest
from nexchat.content.service import ContentService
from nexchat.content.transcript import TranscriptClient, join_segments
from nexchat.engine import RequestFailed
from nexchat.models.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    AskRequest,
    AskResponse,
    PDFExtractResponse,
    TranscriptRequest,
    TranscriptResponse,
    TranslateRequest,
    TranslateResponse,
)
from nexchat.parsing.pdf_parser import MAX_FILE_SIZE, PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])


def _bad_request(error: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def _upstream_failed(error: RequestFailed) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error.detail)


@router.post("/transcript", response_model=TranscriptResponse)
async def fetch_transcript(
    request: TranscriptRequest,
    client: TranscriptClient = Depends(get_transcript_client),
) -> TranscriptResponse:
    """Fetch a YouTube transcript as plain text."""
    try:
        segments = await client.fetch_segments(request.url, request.language)
    except InvalidContentRequest as e:
        raise _bad_request(e) from e
    except RequestFailed as e:
        raise _upstream_failed(e) from e

    return TranscriptResponse(transcript=join_segments(segments), segments=len(segments))


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    service: ContentService = Depends(get_content_service),
) -> TranslateResponse:
    """Translate text into the named target language."""
    try:
        translation = await service.translate(request.text, request.target_language)
    except InvalidContentRequest as e:
        raise _bad_request(e) from e
    except RequestFailed as e:
        raise _upstream_failed(e) from e
    return TranslateResponse(translation=translation)


@router.post("/ask", response_model=AskResponse)
async def ask(
    request: AskRequest,
    service: ContentService = Depends(get_content_service),
) -> AskResponse:
    """Answer a question against a transcript or document text."""
    try:
        answer = await service.ask(request.question, request.transcript)
    except InvalidContentRequest as e:
        raise _bad_request(e) from e
    except RequestFailed as e:
        raise _upstream_failed(e) from e
    return AskResponse(answer=answer)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    service: ContentService = Depends(get_content_service),
) -> AnalyzeResponse:
    """Summarize a document with key points and insights."""
    try:
        analysis = await service.analyze(request.text)
    except InvalidContentRequest as e:
        raise _bad_request(e) from e
    except RequestFailed as e:
        raise _upstream_failed(e) from e
    return AnalyzeResponse(analysis=analysis)


@router.post("/pdf", response_model=PDFExtractResponse)
async def extract_pdf(file: UploadFile) -> PDFExtractResponse:
    """Extract the text of an uploaded PDF.

    Raises:
        400: Not a PDF, empty, or corrupt.
        413: File exceeds 10MB limit.
    """
    filename = file.filename or ""
    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    content = await file.read()
    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    try:
        pdf_content = parse_pdf(content)
    except PDFParseError as e:
        logger.warning(f"PDF parse error for {filename}: {e}")
        raise _bad_request(e) from e

    logger.info(f"Extracted {len(pdf_content.text)} chars from {filename} ({pdf_content.pages} pages)")
    return PDFExtractResponse(filename=filename, pages=pdf_content.pages, text=pdf_content.text)
