"""Notes generation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile

from lecture_scribe.dependencies import get_handler
from lecture_scribe.domain import NotesResponse
from lecture_scribe.exceptions import (
    AudioExtractionError,
    InvalidRequestError,
    NotesPipelineError,
)
from lecture_scribe.handlers import NotesRequestHandler
from lecture_scribe.logging import setup_logging
from lecture_scribe.request_models import DataUriNotesRequest

logger = setup_logging()

router = APIRouter(prefix="/notes", tags=["notes"])

HandlerDep = Annotated[NotesRequestHandler, Depends(get_handler)]


def _generate(handler: NotesRequestHandler, build) -> NotesResponse:
    try:
        request = build()
    except InvalidRequestError as e:
        logger.warning("Rejected notes request", extra={"field": e.field, "reason": e.reason})
        raise HTTPException(status_code=422, detail=str(e))
    except AudioExtractionError:
        raise HTTPException(
            status_code=422, detail="Could not extract audio from the video file"
        )

    try:
        return handler.process(request)
    except NotesPipelineError as e:
        raise HTTPException(status_code=502, detail=e.user_message)


@router.post("/upload", response_model=NotesResponse)
def upload_notes(
    file: UploadFile,
    handler: HandlerDep,
    detail_level: str = Form("medium"),
) -> NotesResponse:
    """
    Generates notes for an uploaded lecture recording.

    Accepts audio files, or video files whose audio track is extracted first.
    """
    data = file.file.read()
    logger.info(
        "Received upload request",
        extra={
            "file_name": file.filename,
            "content_type": file.content_type,
            "detail_level": detail_level,
        },
    )
    return _generate(
        handler,
        lambda: handler.build_request(
            data, file.content_type, detail_level, file.filename or ""
        ),
    )


@router.post("", response_model=NotesResponse)
def create_notes(body: DataUriNotesRequest, handler: HandlerDep) -> NotesResponse:
    """Generates notes for audio supplied as a base64 data URI."""
    return _generate(
        handler,
        lambda: handler.build_request_from_data_uri(
            body.audio_data_uri, body.detail_level
        ),
    )
