"""Gemini implementation of the TranscriptionService interface."""

from google import genai
from google.genai import types

from lecture_scribe.domain.models import AudioPayload, TranscriptionOutput
from lecture_scribe.exceptions import LLMServiceError
from lecture_scribe.infrastructure.interfaces import TranscriptionService
from lecture_scribe.logging import setup_logging

logger = setup_logging()


class GeminiTranscriber(TranscriptionService):
    """Transcribes audio with a multimodal Gemini model."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        system_prompt: str,
        temperature: float = 0.0,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._temperature = temperature

    def transcribe(self, audio: AudioPayload) -> str:
        """
        Sends the audio inline to Gemini and returns the transcription.

        Raises:
            LLMServiceError: If the Gemini API call fails or the response
                cannot be parsed.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=[
                    types.Part.from_bytes(data=audio.data, mime_type=audio.mime_type),
                    "Transcribe this lecture audio.",
                ],
                config={
                    "response_mime_type": "application/json",
                    "response_schema": TranscriptionOutput,
                    "system_instruction": self._system_prompt,
                    "temperature": self._temperature,
                },
            )
            if not response.text:
                logger.warning("Gemini returned no transcription")
                return ""
            output = TranscriptionOutput.model_validate_json(response.text)
            logger.info(
                "Audio transcription completed",
                extra={"chars": len(output.transcription), "mime_type": audio.mime_type},
            )
            return output.transcription
        except Exception as e:
            logger.exception("Gemini transcription failed")
            raise LLMServiceError(f"Gemini transcription failed: {e}", cause=e) from e
