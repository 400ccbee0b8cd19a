"""Request models for the lecture-scribe API."""

from pydantic import BaseModel


class DataUriNotesRequest(BaseModel):
    """Notes request carrying the audio as a base64 data URI."""

    audio_data_uri: str
    detail_level: str = "medium"
