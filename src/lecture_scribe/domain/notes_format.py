"""Structural parsing of generated markdown notes."""

import re
from dataclasses import dataclass, field

from lecture_scribe.domain.models import TopicEntry

_HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<text>.+?)(?:\s+#+)?\s*$")
_TIMESTAMP_PATTERN = re.compile(r"\b(\d{2}:[0-5]\d)\b")
_FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")

TOPIC_HEADING_LEVEL = 2


@dataclass
class TopicSection:
    """A top-level topic heading and the sub-headings nested under it."""

    title: str
    timestamp: str | None
    subheadings: list[str] = field(default_factory=list)
    body_lines: int = 0

    @property
    def section_count(self) -> int:
        return 1 + len(self.subheadings)


def format_timestamp(seconds: float) -> str:
    """Formats an offset in seconds as MM:SS."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


def parse_sections(markdown: str) -> list[TopicSection]:
    """
    Splits a notes document into topic sections.

    Level-2 headings open a topic section; deeper headings count as its
    sub-headings. A level-1 heading is treated as a document title and closes
    the current section. Lines inside fenced code blocks are ignored.
    """
    sections: list[TopicSection] = []
    current: TopicSection | None = None
    in_fence = False

    for line in markdown.splitlines():
        if _FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            if current:
                current.body_lines += 1
            continue

        match = _HEADING_PATTERN.match(line)
        if not match:
            if current and line.strip():
                current.body_lines += 1
            continue

        level = len(match.group("hashes"))
        text = match.group("text")

        if level < TOPIC_HEADING_LEVEL:
            current = None
        elif level == TOPIC_HEADING_LEVEL:
            timestamp = _TIMESTAMP_PATTERN.search(text)
            current = TopicSection(
                title=text,
                timestamp=timestamp.group(1) if timestamp else None,
            )
            sections.append(current)
        elif current:
            current.subheadings.append(text)

    return sections


def section_counts(markdown: str) -> dict[str, int]:
    """Maps each topic section (by timestamp, else title) to its section count."""
    return {
        section.timestamp or section.title: section.section_count
        for section in parse_sections(markdown)
    }


def find_structure_issues(markdown: str, topics: list[TopicEntry]) -> list[str]:
    """
    Checks a notes document against the formatting contract.

    Args:
        markdown: The generated notes.
        topics: The topics the notes were generated for, in order.

    Returns:
        Human-readable descriptions of each violation; empty when the
        document conforms.
    """
    if not markdown.strip():
        return ["document is empty"]

    sections = parse_sections(markdown)
    if not sections:
        return ["document has no topic headings"]

    issues: list[str] = []
    positions = {}
    for index, section in enumerate(sections):
        if section.timestamp and section.timestamp not in positions:
            positions[section.timestamp] = index

    last_position = -1
    for topic in topics:
        position = positions.get(topic.timestamp)
        if position is None:
            issues.append(
                f"no heading carries timestamp {topic.timestamp} "
                f"for topic '{topic.topic}'"
            )
            continue
        if position < last_position:
            issues.append(f"topic '{topic.topic}' is out of order")
        last_position = max(last_position, position)

    return issues
