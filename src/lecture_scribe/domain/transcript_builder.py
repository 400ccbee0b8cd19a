"""Core business logic for transcript building."""

from .models import TranscriptSegment
from .notes_format import format_timestamp


class TranscriptBuilder:
    """Builds timestamped transcripts from recognized segments."""

    def build(self, segments: list[TranscriptSegment]) -> str:
        """
        Formats segments as paragraphs prefixed with their [MM:SS] offset.

        Segments with no text are dropped, so a recording without speech
        yields an empty transcript.
        """
        return "\n\n".join(
            f"[{format_timestamp(s.start_ms / 1000)}] {s.text.strip()}"
            for s in segments
            if s.text.strip()
        )
