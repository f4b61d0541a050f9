"""Show notes endpoints: raw transcript in, formatted show notes out."""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile

from src.api.models import ShowNotesRequest, ShowNotesResponse
from src.config import settings
from src.generation.errors import ErrorKind, ShowNotesError
from src.generation.pipeline import ShowNotesPipeline
from src.pipeline_config import PipelineConfig

router = APIRouter()

# 10 MB upload limit
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# Extensions accepted as transcript files
TRANSCRIPT_EXTENSIONS = {"txt", "srt"}

# Missing key is a server configuration gap (501); model/parse failures are upstream (502).
_STATUS_BY_KIND = {
    ErrorKind.CONFIGURATION: 501,
    ErrorKind.PARSE: 502,
    ErrorKind.MODEL: 502,
}


async def _run_pipeline(transcript: str) -> ShowNotesResponse:
    pipeline = ShowNotesPipeline(PipelineConfig.from_settings(settings))
    try:
        # Blocking Gemini calls; keep them off the event loop.
        notes = await asyncio.to_thread(pipeline.generate_show_notes, transcript)
    except ShowNotesError as exc:
        raise HTTPException(status_code=_STATUS_BY_KIND[exc.kind], detail=str(exc)) from exc
    return ShowNotesResponse(show_notes=notes)


@router.post("/api/show-notes", response_model=ShowNotesResponse)
async def create_show_notes(request: ShowNotesRequest) -> ShowNotesResponse:
    """Generate show notes from a transcript sent as JSON."""
    if not request.transcript.strip():
        raise HTTPException(status_code=400, detail="Transcript is empty")
    return await _run_pipeline(request.transcript)


@router.post("/api/show-notes/upload", response_model=ShowNotesResponse)
async def upload_show_notes(file: Annotated[UploadFile, File(...)]) -> ShowNotesResponse:
    """Generate show notes from an uploaded ``.txt`` or ``.srt`` transcript."""
    filename = file.filename or ""
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext not in TRANSCRIPT_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type {ext!r}. Supported: {sorted(TRANSCRIPT_EXTENSIONS)}",
        )

    raw = await file.read()
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)} MB.",
        )

    try:
        transcript = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Transcript must be UTF-8 text") from None

    if not transcript.strip():
        raise HTTPException(status_code=400, detail="Transcript is empty")
    return await _run_pipeline(transcript)
