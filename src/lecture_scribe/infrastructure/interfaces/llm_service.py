"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod

from lecture_scribe.domain.detail_policy import DetailPolicy
from lecture_scribe.domain.models import ExtractedTopics, TopicEntry


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def extract_topics(self, transcript: str) -> ExtractedTopics:
        """
        Extracts the main topics of a transcript with first-mention timestamps.

        Args:
            transcript: The transcript text.

        Returns:
            ExtractedTopics in first-mention order, not yet validated.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass

    @abstractmethod
    def synthesize_notes(
        self, transcript: str, topics: list[TopicEntry], policy: DetailPolicy
    ) -> str:
        """
        Expands topics into a markdown notes document.

        Args:
            transcript: The transcript text, used as disambiguating context.
            topics: Validated topics in first-mention order.
            policy: The detail policy applied to every topic.

        Returns:
            The markdown document. May be empty if the model returned nothing.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass
