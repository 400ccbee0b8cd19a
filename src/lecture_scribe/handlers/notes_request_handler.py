"""Handler for validating notes requests and running the pipeline."""

from lecture_scribe.config import UploadConfig
from lecture_scribe.domain import (
    AudioPayload,
    DetailLevel,
    NotesPipeline,
    NotesRequest,
    NotesResponse,
)
from lecture_scribe.exceptions import InvalidRequestError
from lecture_scribe.infrastructure import AudioExtractor
from lecture_scribe.logging import setup_logging

logger = setup_logging()


def parse_detail_level(value: str | DetailLevel | None) -> DetailLevel:
    """
    Parses a caller-supplied detail level.

    Raises:
        InvalidRequestError: If the value is not one of the enumerated levels.
    """
    if isinstance(value, DetailLevel):
        return value
    try:
        return DetailLevel(str(value).strip().lower())
    except ValueError as e:
        allowed = ", ".join(level.value for level in DetailLevel)
        raise InvalidRequestError(
            "detail_level", f"'{value}' is not one of: {allowed}"
        ) from e


class NotesRequestHandler:
    """Validates incoming media at the request boundary and runs the pipeline."""

    def __init__(
        self,
        pipeline: NotesPipeline,
        extractor: AudioExtractor,
        config: UploadConfig,
    ):
        self._pipeline = pipeline
        self._extractor = extractor
        self._config = config

    def build_request(
        self,
        data: bytes,
        content_type: str | None,
        detail_level: str | DetailLevel | None,
        file_name: str = "",
    ) -> NotesRequest:
        """
        Builds a pipeline request from raw media.

        Video media is converted to an audio payload before the pipeline sees
        it; any other non-audio media type is rejected.

        Raises:
            InvalidRequestError: If the media or detail level is malformed.
            AudioExtractionError: If a video's audio track cannot be extracted.
        """
        level = parse_detail_level(detail_level)
        payload = self._to_audio_payload(data, (content_type or "").lower(), file_name)
        return NotesRequest(source_media=payload, detail_level=level)

    def build_request_from_data_uri(
        self, data_uri: str, detail_level: str | DetailLevel | None
    ) -> NotesRequest:
        """
        Builds a pipeline request from a base64 data URI.

        Raises:
            InvalidRequestError: If the URI or detail level is malformed.
        """
        level = parse_detail_level(detail_level)
        decoded = AudioPayload.from_data_uri(data_uri)
        payload = self._to_audio_payload(decoded.data, decoded.mime_type, "")
        return NotesRequest(source_media=payload, detail_level=level)

    def process(self, request: NotesRequest) -> NotesResponse:
        """
        Runs the pipeline for a validated request.

        Raises:
            NotesPipelineError: If any stage fails.
        """
        logger.info(
            "Processing notes request",
            extra={
                "mime_type": request.source_media.mime_type,
                "size": request.source_media.size,
                "detail_level": request.detail_level.value,
            },
        )
        response = self._pipeline.run(request)
        logger.info("Notes request processed", extra={"chars": len(response.notes)})
        return response

    def _to_audio_payload(
        self, data: bytes, content_type: str, file_name: str
    ) -> AudioPayload:
        if not data:
            raise InvalidRequestError("file", "file is empty")
        self._check_size(len(data), "file is larger than the {limit}MB limit")

        if content_type in self._config.video_content_types:
            logger.info(
                "Extracting audio from video",
                extra={"file_name": file_name, "content_type": content_type},
            )
            payload = self._extractor.extract(data, file_name)
            self._check_size(
                payload.size, "extracted audio is larger than the {limit}MB limit"
            )
            return payload

        if not content_type.startswith("audio/"):
            raise InvalidRequestError("file", "Invalid audio file format.")

        return AudioPayload(data=data, mime_type=content_type)

    def _check_size(self, size: int, message: str) -> None:
        if size > self._config.max_upload_bytes:
            limit_mb = self._config.max_upload_bytes // (1024 * 1024)
            raise InvalidRequestError("file", message.format(limit=limit_mb))
