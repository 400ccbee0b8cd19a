import json
from unittest.mock import Mock

import pytest

from lecture_scribe.domain import DetailLevel, TopicEntry, policy_for
from lecture_scribe.domain.models import ExtractedTopics, TranscriptionOutput
from lecture_scribe.exceptions import LLMServiceError
from lecture_scribe.infrastructure import GeminiLLMService, GeminiTranscriber

NOTES_PROMPT = "Write in {output_language}. Level '{detail_level}' ({depth}):\n{instructions}"


def _client(text):
    client = Mock()
    client.models.generate_content.return_value = Mock(text=text)
    return client


def _service(client, language="English"):
    return GeminiLLMService(
        client,
        "gemini-test",
        topic_prompt="Extract topics.",
        notes_prompt=NOTES_PROMPT,
        output_language=language,
    )


def test_extract_topics_requests_structured_output():
    payload = {"topics": [{"topic": "Heuristic Search", "timestamp": "00:03"}]}
    client = _client(json.dumps(payload))

    result = _service(client).extract_topics("[00:03] Heuristic search is...")

    assert result.topics[0].topic == "Heuristic Search"
    kwargs = client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"
    assert kwargs["config"]["response_schema"] is ExtractedTopics
    assert kwargs["config"]["system_instruction"] == "Extract topics."
    assert "Heuristic search is" in kwargs["contents"]


@pytest.mark.parametrize("text", [None, "", "not json"])
def test_extract_topics_raises_on_unusable_response(text):
    with pytest.raises(LLMServiceError):
        _service(_client(text)).extract_topics("transcript")


def test_extract_topics_wraps_client_errors():
    client = Mock()
    client.models.generate_content.side_effect = RuntimeError("503 unavailable")

    with pytest.raises(LLMServiceError) as exc_info:
        _service(client).extract_topics("transcript")

    assert isinstance(exc_info.value.cause, RuntimeError)


def test_synthesize_notes_formats_prompt_with_policy():
    client = _client("## [00:03] Búsqueda heurística\n\nTexto.\n")
    topics = [TopicEntry(topic="Heuristic Search", timestamp="00:03")]
    policy = policy_for(DetailLevel.DETAILED)

    notes = _service(client, language="Spanish").synthesize_notes(
        "transcript", topics, policy
    )

    assert notes == "## [00:03] Búsqueda heurística\n\nTexto."
    kwargs = client.models.generate_content.call_args.kwargs
    system = kwargs["config"]["system_instruction"]
    assert system.startswith("Write in Spanish. Level 'detailed'")
    assert policy.instructions in system
    assert "- [00:03] Heuristic Search" in kwargs["contents"]


def test_synthesize_notes_returns_empty_string_for_empty_response():
    topics = [TopicEntry(topic="Heuristic Search", timestamp="00:03")]

    notes = _service(_client(None)).synthesize_notes(
        "transcript", topics, policy_for(DetailLevel.BASIC)
    )

    assert notes == ""


def test_transcriber_sends_audio_inline(audio):
    client = _client(json.dumps({"transcription": "[00:00] Hola a todos"}))
    transcriber = GeminiTranscriber(client, "gemini-test", "Transcribe.")

    transcript = transcriber.transcribe(audio)

    assert transcript == "[00:00] Hola a todos"
    kwargs = client.models.generate_content.call_args.kwargs
    part = kwargs["contents"][0]
    assert part.inline_data.data == audio.data
    assert part.inline_data.mime_type == "audio/mpeg"
    assert kwargs["config"]["response_schema"] is TranscriptionOutput


def test_transcriber_returns_empty_for_empty_response(audio):
    transcriber = GeminiTranscriber(_client(None), "gemini-test", "Transcribe.")

    assert transcriber.transcribe(audio) == ""


def test_transcriber_wraps_client_errors(audio):
    client = Mock()
    client.models.generate_content.side_effect = RuntimeError("boom")

    with pytest.raises(LLMServiceError):
        GeminiTranscriber(client, "gemini-test", "Transcribe.").transcribe(audio)
