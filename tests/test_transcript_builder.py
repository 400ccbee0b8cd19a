from lecture_scribe.domain import TranscriptBuilder
from lecture_scribe.domain.models import TranscriptSegment


def test_build_prefixes_paragraphs_with_offsets():
    segments = [
        TranscriptSegment(start_ms=3200, text="Heuristic search is a technique."),
        TranscriptSegment(start_ms=61000, text=" Genetic algorithms evolve solutions. "),
    ]

    transcript = TranscriptBuilder().build(segments)

    assert transcript == (
        "[00:03] Heuristic search is a technique.\n\n"
        "[01:01] Genetic algorithms evolve solutions."
    )


def test_build_drops_blank_segments():
    segments = [TranscriptSegment(start_ms=0, text="   ")]

    assert TranscriptBuilder().build(segments) == ""
