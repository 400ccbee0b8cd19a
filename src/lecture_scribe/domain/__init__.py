"""Domain layer exports."""

from .detail_policy import DETAIL_POLICIES, DetailPolicy, policy_for
from .models import (
    AudioPayload,
    DetailLevel,
    NotesRequest,
    NotesResponse,
    PipelineRun,
    PipelineState,
    TopicEntry,
)
from .transcript_builder import TranscriptBuilder
from .notes_pipeline import NotesPipeline

__all__ = [
    "AudioPayload",
    "DETAIL_POLICIES",
    "DetailLevel",
    "DetailPolicy",
    "NotesPipeline",
    "NotesRequest",
    "NotesResponse",
    "PipelineRun",
    "PipelineState",
    "TopicEntry",
    "TranscriptBuilder",
    "policy_for",
]
