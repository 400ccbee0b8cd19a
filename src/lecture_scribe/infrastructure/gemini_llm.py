"""Gemini LLM service implementation."""

from google import genai

from lecture_scribe.domain.detail_policy import DetailPolicy
from lecture_scribe.domain.models import ExtractedTopics, TopicEntry
from lecture_scribe.exceptions import LLMServiceError
from lecture_scribe.infrastructure.interfaces import LLMService
from lecture_scribe.logging import setup_logging

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        topic_prompt: str,
        notes_prompt: str,
        output_language: str = "English",
        temperature: float = 0.4,
    ):
        self._client = client
        self._model_name = model_name
        self._topic_prompt = topic_prompt
        self._notes_prompt = notes_prompt
        self._output_language = output_language
        self._temperature = temperature

    def extract_topics(self, transcript: str) -> ExtractedTopics:
        """
        Extracts topics using Gemini structured output.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns nothing.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=f"Transcription:\n\n{transcript}",
                config={
                    "response_mime_type": "application/json",
                    "response_schema": ExtractedTopics,
                    "system_instruction": self._topic_prompt,
                    "temperature": self._temperature,
                },
            )
            if not response.text:
                raise LLMServiceError("Gemini returned empty response")
            topics = ExtractedTopics.model_validate_json(response.text)
            logger.info("Topic extraction completed", extra={"count": len(topics.topics)})
            return topics
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise LLMServiceError(f"Gemini topic extraction failed: {e}", cause=e) from e

    def synthesize_notes(
        self, transcript: str, topics: list[TopicEntry], policy: DetailPolicy
    ) -> str:
        """
        Generates markdown notes for the given topics.

        Raises:
            LLMServiceError: If the Gemini API call fails.
        """
        system_prompt = self._notes_prompt.format(
            output_language=self._output_language,
            detail_level=policy.level.value,
            depth=policy.depth,
            instructions=policy.instructions,
        )
        topic_lines = "\n".join(f"- [{t.timestamp}] {t.topic}" for t in topics)
        contents = f"Topics:\n{topic_lines}\n\nTranscription:\n\n{transcript}"

        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=contents,
                config={
                    "system_instruction": system_prompt,
                    "temperature": self._temperature,
                },
            )
            notes = (response.text or "").strip()
            logger.info(
                "Note synthesis completed",
                extra={"chars": len(notes), "detail_level": policy.level.value},
            )
            return notes
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise LLMServiceError(f"Gemini note synthesis failed: {e}", cause=e) from e
