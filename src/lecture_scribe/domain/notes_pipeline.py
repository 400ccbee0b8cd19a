"""Core business logic for sequencing the notes generation stages."""

from lecture_scribe.domain import stages
from lecture_scribe.domain.models import (
    NotesRequest,
    NotesResponse,
    PipelineRun,
    PipelineState,
)
from lecture_scribe.domain.notes_format import find_structure_issues
from lecture_scribe.exceptions import (
    NotesPipelineError,
    NoteSynthesisError,
    TopicExtractionError,
    TranscriptionError,
)
from lecture_scribe.infrastructure.interfaces import LLMService, TranscriptionService
from lecture_scribe.logging import setup_logging

logger = setup_logging()

_STAGE_ERRORS = {
    PipelineState.START: TranscriptionError,
    PipelineState.TRANSCRIBING: TranscriptionError,
    PipelineState.EXTRACTING_TOPICS: TopicExtractionError,
    PipelineState.SYNTHESIZING_NOTES: NoteSynthesisError,
}


class NotesPipeline:
    """Runs transcription, topic extraction and note synthesis in sequence.

    Each stage's output passes a gate before it reaches the next stage. The
    first failure ends the run; nothing is retried and no partial notes are
    returned.
    """

    def __init__(self, transcriber: TranscriptionService, llm_service: LLMService):
        self._transcriber = transcriber
        self._llm = llm_service

    def run(self, request: NotesRequest) -> NotesResponse:
        """
        Generates notes for a request.

        Args:
            request: The validated media and detail level.

        Returns:
            NotesResponse carrying the markdown notes.

        Raises:
            TranscriptionError: If no transcript was produced.
            TopicExtractionError: If no topics were extracted.
            NoteSynthesisError: If no notes were produced.
        """
        pipeline_run = self.execute(request)
        if pipeline_run.failure is not None:
            raise pipeline_run.failure
        return NotesResponse(notes=pipeline_run.notes)

    def execute(self, request: NotesRequest) -> PipelineRun:
        """
        Runs the state machine and returns the record of the run.

        The returned run is either DONE with notes set, or FAILED with the
        stage error stored on ``failure``. Unexpected exceptions are reported
        as the error of the stage that was running.
        """
        pipeline_run = PipelineRun(detail_level=request.detail_level)
        try:
            self._run_stages(pipeline_run, request)
        except NotesPipelineError as e:
            self._fail(pipeline_run, e)
        except Exception as e:
            error_class = _STAGE_ERRORS.get(pipeline_run.state, NotesPipelineError)
            self._fail(pipeline_run, error_class(str(e), cause=e))
        return pipeline_run

    def _fail(self, pipeline_run: PipelineRun, error: NotesPipelineError) -> None:
        pipeline_run.failure = error
        pipeline_run.error = error.user_message
        self._advance(pipeline_run, PipelineState.FAILED, stage=error.stage)
        logger.error(
            "Notes pipeline failed",
            extra={
                "run_id": pipeline_run.run_id,
                "stage": error.stage,
                "reason": error.reason,
            },
        )

    def _run_stages(self, pipeline_run: PipelineRun, request: NotesRequest) -> None:
        self._advance(pipeline_run, PipelineState.TRANSCRIBING)
        transcript = stages.transcribe(request.source_media, self._transcriber)
        if not transcript:
            raise TranscriptionError("The transcription was empty.")
        pipeline_run.transcript = transcript

        self._advance(pipeline_run, PipelineState.EXTRACTING_TOPICS)
        topics = stages.extract_topics(transcript, self._llm)
        if not topics:
            raise TopicExtractionError("No topics were found in the transcription.")
        pipeline_run.topics = topics

        self._advance(pipeline_run, PipelineState.SYNTHESIZING_NOTES)
        notes = stages.synthesize_notes(
            transcript, topics, request.detail_level, self._llm
        )
        if not notes:
            raise NoteSynthesisError("The generated notes were empty.")

        issues = find_structure_issues(notes, topics)
        if issues:
            logger.warning(
                "Notes deviate from the formatting contract",
                extra={"run_id": pipeline_run.run_id, "issues": issues},
            )

        pipeline_run.notes = notes
        self._advance(pipeline_run, PipelineState.DONE)

    def _advance(
        self, pipeline_run: PipelineRun, state: PipelineState, **extra: str
    ) -> None:
        logger.info(
            "Pipeline state changed",
            extra={
                "run_id": pipeline_run.run_id,
                "from_state": pipeline_run.state.value,
                "to_state": state.value,
                **extra,
            },
        )
        pipeline_run.state = state
