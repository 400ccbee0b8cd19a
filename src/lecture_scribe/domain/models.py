"""Domain models for lecture notes generation."""

import base64
import binascii
import re
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lecture_scribe.exceptions import InvalidRequestError, NotesPipelineError

_DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[\w.+-]+=[\w.+-]+)*;base64,(?P<data>.*)$",
    re.DOTALL,
)
TIMESTAMP_PATTERN = r"^\d{2}:[0-5]\d$"


class DetailLevel(str, Enum):
    """Depth of the generated notes, chosen once per run."""

    BASIC = "basic"
    MEDIUM = "medium"
    DETAILED = "detailed"


class PipelineState(str, Enum):
    """States of a single notes pipeline run."""

    START = "start"
    TRANSCRIBING = "transcribing"
    EXTRACTING_TOPICS = "extracting_topics"
    SYNTHESIZING_NOTES = "synthesizing_notes"
    DONE = "done"
    FAILED = "failed"


class AudioPayload(BaseModel, frozen=True):
    """Encoded audio plus its declared media type."""

    data: bytes
    mime_type: str

    @property
    def is_audio(self) -> bool:
        return self.mime_type.lower().startswith("audio/")

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_data_uri(cls, data_uri: str) -> "AudioPayload":
        """
        Parses a base64 data URI of the form ``data:<mimetype>;base64,<data>``.

        Args:
            data_uri: The data URI supplied by the caller.

        Returns:
            AudioPayload with the decoded bytes and declared media type.

        Raises:
            InvalidRequestError: If the URI is malformed or not base64 encoded.
        """
        match = _DATA_URI_PATTERN.match(data_uri.strip())
        if not match:
            raise InvalidRequestError(
                "audio_data_uri",
                "expected format 'data:<mimetype>;base64,<encoded_data>'",
            )

        try:
            data = base64.b64decode(match.group("data"), validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidRequestError(
                "audio_data_uri", "payload is not valid base64"
            ) from e

        return cls(data=data, mime_type=match.group("mime").lower())

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


class TopicCandidate(BaseModel):
    """A topic as returned by the model, before validation."""

    topic: str
    timestamp: str


class ExtractedTopics(BaseModel):
    """Structured output requested from the topic extraction model."""

    topics: list[TopicCandidate]


class TopicEntry(BaseModel, frozen=True):
    """A topic together with the MM:SS timestamp of its first mention."""

    topic: str = Field(min_length=1)
    timestamp: str = Field(pattern=TIMESTAMP_PATTERN)

    @field_validator("topic")
    @classmethod
    def _strip_topic(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("topic must not be blank")
        return value

    @property
    def seconds(self) -> int:
        minutes, seconds = self.timestamp.split(":")
        return int(minutes) * 60 + int(seconds)


class NotesDocument(BaseModel, frozen=True):
    """Markdown notes produced by the note synthesis stage."""

    notes: str


class NotesRequest(BaseModel, frozen=True):
    """Composite request accepted by the pipeline."""

    source_media: AudioPayload
    detail_level: DetailLevel


class NotesResponse(BaseModel, frozen=True):
    """Result returned to the caller on success."""

    notes: str


class PipelineRun(BaseModel):
    """Record of one pipeline invocation, owned by that invocation only."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    run_id: str = Field(default_factory=lambda: uuid4().hex)
    detail_level: DetailLevel
    state: PipelineState = PipelineState.START
    transcript: str | None = None
    topics: list[TopicEntry] | None = None
    notes: str | None = None
    error: str | None = None
    failure: NotesPipelineError | None = Field(default=None, exclude=True)


class TranscriptionOutput(BaseModel):
    """Structured output requested from the transcription model."""

    transcription: str


class TranscriptSegment(BaseModel, frozen=True):
    """A paragraph of recognized speech and its offset into the recording."""

    start_ms: int
    text: str
