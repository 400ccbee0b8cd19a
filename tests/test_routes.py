import base64
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import StubLLMService, StubTranscriber
from lecture_scribe.config import UploadConfig
from lecture_scribe.dependencies import get_handler
from lecture_scribe.domain import NotesPipeline
from lecture_scribe.exceptions import AudioExtractionError, NoteSynthesisError
from lecture_scribe.handlers import NotesRequestHandler
from lecture_scribe.routes import notes_router


def _client(transcriber=None, llm=None, extractor=None):
    pipeline = NotesPipeline(transcriber or StubTranscriber(), llm or StubLLMService())
    handler = NotesRequestHandler(pipeline, extractor or Mock(), UploadConfig())
    app = FastAPI()
    app.include_router(notes_router)
    app.dependency_overrides[get_handler] = lambda: handler
    return TestClient(app)


def test_upload_returns_notes():
    client = _client()

    response = client.post(
        "/notes/upload",
        files={"file": ("lecture.mp3", b"ID3audio", "audio/mpeg")},
        data={"detail_level": "basic"},
    )

    assert response.status_code == 200
    assert response.json()["notes"].startswith("## [00:03] Heuristic Search")


def test_upload_defaults_to_medium_detail():
    llm = StubLLMService()
    client = _client(llm=llm)

    response = client.post(
        "/notes/upload", files={"file": ("lecture.mp3", b"ID3audio", "audio/mpeg")}
    )

    assert response.status_code == 200
    assert llm.synth_calls[0][2].level.value == "medium"


def test_upload_rejects_non_audio_without_model_calls():
    transcriber = StubTranscriber()
    client = _client(transcriber=transcriber)

    response = client.post(
        "/notes/upload",
        files={"file": ("slides.pdf", b"%PDF", "application/pdf")},
        data={"detail_level": "basic"},
    )

    assert response.status_code == 422
    assert transcriber.calls == []


def test_upload_rejects_unknown_detail_level():
    response = _client().post(
        "/notes/upload",
        files={"file": ("lecture.mp3", b"ID3audio", "audio/mpeg")},
        data={"detail_level": "exhaustive"},
    )

    assert response.status_code == 422
    assert "detail_level" in response.json()["detail"]


def test_upload_reports_video_extraction_failure():
    extractor = Mock()
    extractor.extract.side_effect = AudioExtractionError("talk.mp4")

    response = _client(extractor=extractor).post(
        "/notes/upload",
        files={"file": ("talk.mp4", b"video", "video/mp4")},
    )

    assert response.status_code == 422


@pytest.mark.parametrize(
    "transcript, topics, message",
    [
        ("", None, "Failed to transcribe the audio."),
        ("[00:01] some speech", [], "Failed to extract topics from the transcription."),
    ],
)
def test_pipeline_failures_surface_single_message(transcript, topics, message):
    client = _client(
        transcriber=StubTranscriber(text=transcript), llm=StubLLMService(topics=topics)
    )

    response = client.post(
        "/notes/upload", files={"file": ("lecture.mp3", b"ID3audio", "audio/mpeg")}
    )

    assert response.status_code == 502
    assert response.json() == {"detail": message}


def test_unexpected_backend_exception_is_reported_as_stage_failure():
    client = _client(llm=StubLLMService(synth_error=RuntimeError("boom")))

    response = client.post(
        "/notes/upload", files={"file": ("lecture.mp3", b"ID3audio", "audio/mpeg")}
    )

    assert response.status_code == 502
    assert response.json() == {"detail": NoteSynthesisError.user_message}


def test_data_uri_endpoint():
    uri = "data:audio/mpeg;base64," + base64.b64encode(b"ID3audio").decode()

    response = _client().post("/notes", json={"audio_data_uri": uri, "detail_level": "detailed"})

    assert response.status_code == 200
    assert "Genetic Algorithms" in response.json()["notes"]


def test_data_uri_endpoint_rejects_malformed_uri():
    response = _client().post("/notes", json={"audio_data_uri": "audio.mp3"})

    assert response.status_code == 422
