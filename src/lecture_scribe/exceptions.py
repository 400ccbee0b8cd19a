"""Custom exceptions for the lecture-scribe service."""


class NotesPipelineError(Exception):
    """Base class for failures that abort a notes pipeline run."""

    stage = "pipeline"
    user_message = "Failed to generate notes."

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"{self.user_message} {reason}")


class TranscriptionError(NotesPipelineError):
    """Raised when the transcription stage returns no usable transcript."""

    stage = "transcription"
    user_message = "Failed to transcribe the audio."


class TopicExtractionError(NotesPipelineError):
    """Raised when the topic extraction stage returns no usable topics."""

    stage = "topic_extraction"
    user_message = "Failed to extract topics from the transcription."


class NoteSynthesisError(NotesPipelineError):
    """Raised when note synthesis fails or returns an empty document."""

    stage = "note_synthesis"
    user_message = "Failed to generate notes. The AI returned an empty result."


class InvalidRequestError(Exception):
    """Raised when a caller-supplied request does not match the expected shape."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid '{field}': {reason}")


class LLMServiceError(Exception):
    """Raised when a model service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class AudioExtractionError(Exception):
    """Raised when audio extraction from video fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to extract audio from '{file_name}'")
