"""Detail-level policy table for note synthesis."""

from pydantic import BaseModel

from lecture_scribe.domain.models import DetailLevel


class DetailPolicy(BaseModel, frozen=True):
    """Depth and length rules applied uniformly to every topic in one call."""

    level: DetailLevel
    min_sections_per_topic: int
    min_examples_per_topic: int
    depth: str
    counter_arguments: bool
    instructions: str


DETAIL_POLICIES: dict[DetailLevel, DetailPolicy] = {
    DetailLevel.BASIC: DetailPolicy(
        level=DetailLevel.BASIC,
        min_sections_per_topic=1,
        min_examples_per_topic=0,
        depth="overview",
        counter_arguments=False,
        instructions=(
            "- Use exactly one heading per topic and no sub-headings.\n"
            "- Write a short overview paragraph of two or three sentences.\n"
            "- Follow it with a minimal list of at most three bullet points.\n"
            "- Examples are optional; omit them unless essential."
        ),
    ),
    DetailLevel.MEDIUM: DetailPolicy(
        level=DetailLevel.MEDIUM,
        min_sections_per_topic=3,
        min_examples_per_topic=1,
        depth="explained",
        counter_arguments=False,
        instructions=(
            "- Under each topic heading add at least two sub-headings "
            "(for example 'Key Concepts' and 'Example').\n"
            "- Explain every key term and mark it in **bold**.\n"
            "- Provide at least one illustrative example per topic."
        ),
    ),
    DetailLevel.DETAILED: DetailPolicy(
        level=DetailLevel.DETAILED,
        min_sections_per_topic=5,
        min_examples_per_topic=2,
        depth="deep exploration",
        counter_arguments=True,
        instructions=(
            "- Under each topic heading add at least four sub-headings covering "
            "background, core ideas, examples or case studies, and limitations.\n"
            "- Explore each topic across multiple paragraphs, explaining every "
            "key term and marking it in **bold**.\n"
            "- Provide at least two concrete examples or case studies per topic.\n"
            "- Discuss counter-arguments, limitations or common misconceptions "
            "where they apply."
        ),
    ),
}


def policy_for(level: DetailLevel) -> DetailPolicy:
    """Returns the synthesis policy for a detail level."""
    return DETAIL_POLICIES[DetailLevel(level)]
