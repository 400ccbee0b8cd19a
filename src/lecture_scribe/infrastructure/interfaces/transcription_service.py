"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from lecture_scribe.domain.models import AudioPayload


class TranscriptionService(ABC):
    """Abstract base class for audio transcription backends."""

    @abstractmethod
    def transcribe(self, audio: AudioPayload) -> str:
        """
        Transcribes audio in its detected source language.

        Args:
            audio: The encoded audio and its media type.

        Returns:
            The transcript text. May be empty when no speech was recognized.

        Raises:
            LLMServiceError: If the backend call fails.
        """
        pass
