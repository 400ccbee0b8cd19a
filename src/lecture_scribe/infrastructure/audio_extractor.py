"""Video-to-audio conversion for lecture recordings."""

import os
import tempfile

import moviepy

from lecture_scribe.domain.models import AudioPayload
from lecture_scribe.exceptions import AudioExtractionError
from lecture_scribe.logging import setup_logging

logger = setup_logging()

AUDIO_CODEC = "libmp3lame"
AUDIO_BITRATE = "64k"
AUDIO_MIME_TYPE = "audio/mpeg"


class AudioExtractor:
    """Extracts audio tracks from video files."""

    def extract(self, video_data: bytes, video_file_name: str) -> AudioPayload:
        """
        Extracts audio from video data.

        Args:
            video_data: Raw video file bytes.
            video_file_name: Original file name, used for the temp file suffix.

        Returns:
            AudioPayload containing the MP3-encoded audio track.

        Raises:
            AudioExtractionError: If extraction fails.
        """
        try:
            audio_bytes = self._extract_audio_bytes(video_data, video_file_name)
        except Exception as e:
            logger.exception(
                "Audio extraction failed", extra={"file_name": video_file_name}
            )
            raise AudioExtractionError(video_file_name, e) from e

        logger.info(
            "Audio extracted successfully",
            extra={"video_file": video_file_name, "audio_bytes": len(audio_bytes)},
        )
        return AudioPayload(data=audio_bytes, mime_type=AUDIO_MIME_TYPE)

    def _extract_audio_bytes(self, video_data: bytes, video_file_name: str) -> bytes:
        """Performs the actual audio extraction using moviepy."""
        with tempfile.TemporaryDirectory() as temp_dir:
            base_name = os.path.basename(video_file_name) or "lecture.mp4"
            temp_video_path = os.path.join(temp_dir, base_name)
            temp_audio_path = os.path.splitext(temp_video_path)[0] + "_audio.mp3"

            with open(temp_video_path, "wb") as f:
                f.write(video_data)

            video = moviepy.VideoFileClip(temp_video_path)
            try:
                if video.audio is None:
                    raise ValueError("video has no audio track")
                video.audio.write_audiofile(
                    temp_audio_path,
                    codec=AUDIO_CODEC,
                    bitrate=AUDIO_BITRATE,
                    logger=None,
                )
            finally:
                if video.audio is not None:
                    video.audio.close()
                video.close()

            with open(temp_audio_path, "rb") as f:
                return f.read()
