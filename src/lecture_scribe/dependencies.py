"""Dependency injection configuration for the lecture-scribe service."""

from functools import lru_cache
from pathlib import Path

import assemblyai as aai
from google import genai

from lecture_scribe.config import AppConfig, load_config
from lecture_scribe.domain import NotesPipeline, TranscriptBuilder
from lecture_scribe.handlers import NotesRequestHandler
from lecture_scribe.infrastructure import (
    AssemblyAITranscriber,
    AudioExtractor,
    GeminiLLMService,
    GeminiTranscriber,
)
from lecture_scribe.infrastructure.interfaces import TranscriptionService
from lecture_scribe.logging import setup_logging

logger = setup_logging()

_PROMPTS_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str) -> str:
    """Reads a system prompt shipped with the package."""
    return (_PROMPTS_DIR / f"{name}.txt").read_text(encoding="utf-8")


def _build_transcriber(config: AppConfig, client: genai.Client) -> TranscriptionService:
    if config.transcription.backend == "assemblyai":
        aai.settings.api_key = config.assemblyai.api_key
        aai_config = aai.TranscriptionConfig(
            language_detection=config.assemblyai.language_detection,
        )
        return AssemblyAITranscriber(
            aai.Transcriber(config=aai_config), TranscriptBuilder()
        )

    return GeminiTranscriber(
        client,
        config.gemini.model_name,
        load_prompt("transcription"),
    )


@lru_cache
def get_config() -> AppConfig:
    """Returns the application configuration."""
    return load_config()


@lru_cache
def get_pipeline() -> NotesPipeline:
    """Returns the configured notes pipeline."""
    config = get_config()
    client = genai.Client(api_key=config.gemini.api_key)

    llm = GeminiLLMService(
        client,
        config.gemini.model_name,
        topic_prompt=load_prompt("topic_extraction"),
        notes_prompt=load_prompt("note_synthesis"),
        output_language=config.notes.output_language,
        temperature=config.gemini.temperature,
    )
    transcriber = _build_transcriber(config, client)

    logger.info(
        "Notes pipeline initialized",
        extra={
            "model": config.gemini.model_name,
            "transcription_backend": config.transcription.backend,
        },
    )
    return NotesPipeline(transcriber, llm)


def get_handler() -> NotesRequestHandler:
    """Returns the configured notes request handler."""
    return NotesRequestHandler(get_pipeline(), AudioExtractor(), get_config().upload)
