"""AssemblyAI implementation of the TranscriptionService interface."""

import mimetypes
import tempfile

import assemblyai as aai

from lecture_scribe.domain.transcript_builder import TranscriptBuilder
from lecture_scribe.domain.models import AudioPayload, TranscriptSegment
from lecture_scribe.exceptions import LLMServiceError
from lecture_scribe.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber, builder: TranscriptBuilder):
        self._transcriber = transcriber
        self._builder = builder

    def transcribe(self, audio: AudioPayload) -> str:
        """
        Transcribes audio data using AssemblyAI.

        Writes audio to a temp file (required by AssemblyAI SDK),
        performs transcription with language detection, and returns the
        paragraphs as a timestamped transcript.
        """
        suffix = mimetypes.guess_extension(audio.mime_type) or ".audio"
        try:
            with tempfile.NamedTemporaryFile(suffix=suffix, delete=True) as temp_file:
                temp_file.write(audio.data)
                temp_file.flush()

                transcription = self._transcriber.transcribe(temp_file.name)

                if transcription.status == aai.TranscriptStatus.error:
                    raise LLMServiceError(
                        f"AssemblyAI transcription failed: {transcription.error}"
                    )

            if not transcription.text:
                logger.warning("AssemblyAI returned no text")
                return ""

            segments = [
                TranscriptSegment(start_ms=p.start, text=p.text)
                for p in transcription.get_paragraphs()
            ]

            logger.info(
                "Audio transcription successful",
                extra={
                    "paragraph_count": len(segments),
                    "language_code": transcription.json_response.get("language_code"),
                },
            )
            return self._builder.build(segments)

        except LLMServiceError:
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise LLMServiceError(f"AssemblyAI transcription failed: {e}", cause=e) from e
