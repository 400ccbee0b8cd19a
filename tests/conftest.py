import pytest

from lecture_scribe.domain import AudioPayload, DetailLevel, NotesRequest
from lecture_scribe.domain.detail_policy import DetailPolicy
from lecture_scribe.domain.models import ExtractedTopics, TopicCandidate, TopicEntry
from lecture_scribe.exceptions import LLMServiceError
from lecture_scribe.infrastructure.interfaces import LLMService, TranscriptionService

HEURISTIC_TRANSCRIPT = (
    "[00:03] Heuristic search is a search technique that seeks to improve the "
    "efficiency of a search process by sacrificing completeness or optimality.\n\n"
    "[00:41] Genetic algorithms are a type of heuristic search that is inspired "
    "by the process of natural selection."
)


class StubTranscriber(TranscriptionService):
    def __init__(self, text: str = HEURISTIC_TRANSCRIPT, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[AudioPayload] = []

    def transcribe(self, audio: AudioPayload) -> str:
        self.calls.append(audio)
        if self.error:
            raise self.error
        return self.text


def render_notes(topics: list[TopicEntry], policy: DetailPolicy) -> str:
    """Builds notes with exactly the policy's minimum section count per topic."""
    blocks = []
    for topic in topics:
        blocks.append(f"## [{topic.timestamp}] {topic.topic}")
        blocks.append(f"An overview of **{topic.topic}**.")
        for index in range(policy.min_sections_per_topic - 1):
            blocks.append(f"### Part {index + 1}")
            blocks.append("- a key point")
    return "\n\n".join(blocks)


class StubLLMService(LLMService):
    def __init__(
        self,
        topics: list[tuple[str, str]] | None = None,
        notes: str | None = None,
        extract_error: Exception | None = None,
        synth_error: Exception | None = None,
    ):
        self.topics = (
            topics
            if topics is not None
            else [("Heuristic Search", "00:03"), ("Genetic Algorithms", "00:41")]
        )
        self.notes = notes
        self.extract_error = extract_error
        self.synth_error = synth_error
        self.extract_calls: list[str] = []
        self.synth_calls: list[tuple[str, list[TopicEntry], DetailPolicy]] = []

    def extract_topics(self, transcript: str) -> ExtractedTopics:
        self.extract_calls.append(transcript)
        if self.extract_error:
            raise self.extract_error
        return ExtractedTopics(
            topics=[TopicCandidate(topic=t, timestamp=ts) for t, ts in self.topics]
        )

    def synthesize_notes(
        self, transcript: str, topics: list[TopicEntry], policy: DetailPolicy
    ) -> str:
        self.synth_calls.append((transcript, topics, policy))
        if self.synth_error:
            raise self.synth_error
        if self.notes is not None:
            return self.notes
        return render_notes(topics, policy)


@pytest.fixture
def audio() -> AudioPayload:
    return AudioPayload(data=b"ID3\x04fake-mpeg-bytes", mime_type="audio/mpeg")


@pytest.fixture
def notes_request(audio) -> NotesRequest:
    return NotesRequest(source_media=audio, detail_level=DetailLevel.MEDIUM)


@pytest.fixture
def llm_error() -> LLMServiceError:
    return LLMServiceError("Gemini analysis failed: quota exceeded")
