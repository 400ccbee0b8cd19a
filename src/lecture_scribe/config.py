"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    temperature: float = 0.4


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    language_detection: bool = True


class TranscriptionConfig(BaseModel, frozen=True):
    """Selects which backend performs the transcription stage."""

    backend: Literal["gemini", "assemblyai"] = "gemini"


class NotesConfig(BaseModel, frozen=True):
    """Note synthesis configuration."""

    output_language: str = "English"


class UploadConfig(BaseModel, frozen=True):
    """Limits applied at the request boundary."""

    max_upload_bytes: int = 25 * 1024 * 1024
    video_content_types: tuple[str, ...] = (
        "video/mp4",
        "video/webm",
        "video/quicktime",
    )


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    assemblyai: AssemblyAIConfig
    transcription: TranscriptionConfig = TranscriptionConfig()
    notes: NotesConfig = NotesConfig()
    upload: UploadConfig = UploadConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.4")),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        transcription=TranscriptionConfig(
            backend=os.getenv("TRANSCRIPTION_BACKEND", "gemini"),
        ),
        notes=NotesConfig(
            output_language=os.getenv("NOTES_LANGUAGE", "English"),
        ),
        upload=UploadConfig(
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(25 * 1024 * 1024))),
        ),
    )
