"""Model-backed pipeline stages and the validation of their outputs."""

import re

from pydantic import ValidationError

from lecture_scribe.domain.detail_policy import policy_for
from lecture_scribe.domain.models import AudioPayload, DetailLevel, TopicEntry
from lecture_scribe.exceptions import (
    InvalidRequestError,
    NoteSynthesisError,
    TopicExtractionError,
    TranscriptionError,
)
from lecture_scribe.infrastructure.interfaces import LLMService, TranscriptionService
from lecture_scribe.logging import setup_logging

logger = setup_logging()

_CLOCK_PATTERN = re.compile(r"^(?:(\d{1,2}):)?(\d{1,3}):([0-5]\d)$")


def transcribe(audio: AudioPayload, service: TranscriptionService) -> str:
    """
    Transcribes audio into text in its detected source language.

    Returns:
        The stripped transcript. An empty string means no speech was
        recognized; rejecting it is the orchestrator's job.

    Raises:
        InvalidRequestError: If the payload does not declare an audio type.
        TranscriptionError: If the transcription backend fails.
    """
    if not audio.is_audio:
        raise InvalidRequestError(
            "source_media", f"expected an audio media type, got '{audio.mime_type}'"
        )

    try:
        transcript = service.transcribe(audio)
    except Exception as e:
        raise TranscriptionError(str(e), cause=e) from e

    return (transcript or "").strip()


def normalize_timestamp(value: str) -> str:
    """Coerces model timestamps such as '1:05', '[01:05]' or '0:01:05' to MM:SS."""
    cleaned = value.strip().strip("[]()")
    match = _CLOCK_PATTERN.match(cleaned)
    if not match:
        return cleaned

    hours, minutes, seconds = match.groups()
    total_minutes = int(hours or 0) * 60 + int(minutes)
    if total_minutes > 99:
        return cleaned
    return f"{total_minutes:02d}:{seconds}"


def extract_topics(transcript: str, service: LLMService) -> list[TopicEntry]:
    """
    Extracts topics in first-mention order.

    Entries are stable-sorted by timestamp, so topics sharing a timestamp keep
    the order in which the model found them in the text. Repeated topics keep
    the spelling the model listed first and the earliest mention.

    Returns:
        The validated topics. May be empty; the orchestrator gate rejects that.

    Raises:
        TopicExtractionError: If the backend fails or returns a malformed entry.
    """
    try:
        extracted = service.extract_topics(transcript)
    except Exception as e:
        raise TopicExtractionError(str(e), cause=e) from e

    entries: list[TopicEntry] = []
    for candidate in extracted.topics:
        try:
            entries.append(
                TopicEntry(
                    topic=candidate.topic,
                    timestamp=normalize_timestamp(candidate.timestamp),
                )
            )
        except ValidationError as e:
            logger.warning(
                "Invalid topic entry",
                extra={"topic": candidate.topic, "timestamp": candidate.timestamp},
            )
            raise TopicExtractionError(
                f"Invalid topic entry '{candidate.topic}' at '{candidate.timestamp}'",
                cause=e,
            ) from e

    # First-listed spelling wins; earliest timestamp wins.
    unique: dict[str, TopicEntry] = {}
    for entry in entries:
        key = entry.topic.casefold()
        kept = unique.get(key)
        if kept is None:
            unique[key] = entry
        elif entry.seconds < kept.seconds:
            unique[key] = TopicEntry(topic=kept.topic, timestamp=entry.timestamp)

    return sorted(unique.values(), key=lambda e: e.seconds)


def synthesize_notes(
    transcript: str,
    topics: list[TopicEntry],
    detail: DetailLevel,
    service: LLMService,
) -> str:
    """
    Expands topics into a markdown notes document.

    Raises:
        InvalidRequestError: If no topics are given or the detail level is
            not one of the enumerated levels.
        NoteSynthesisError: If the backend fails.
    """
    if not topics:
        raise InvalidRequestError("topics", "at least one topic is required")

    try:
        policy = policy_for(detail)
    except ValueError as e:
        raise InvalidRequestError(
            "detail_level", f"unrecognized detail level '{detail}'"
        ) from e

    try:
        notes = service.synthesize_notes(transcript, topics, policy)
    except Exception as e:
        raise NoteSynthesisError(str(e), cause=e) from e

    return (notes or "").strip()
