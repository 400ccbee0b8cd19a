"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .audio_extractor import AudioExtractor
from .gemini_llm import GeminiLLMService
from .gemini_transcriber import GeminiTranscriber

__all__ = [
    "AssemblyAITranscriber",
    "AudioExtractor",
    "GeminiLLMService",
    "GeminiTranscriber",
]
