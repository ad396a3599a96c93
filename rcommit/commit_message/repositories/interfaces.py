"""Repository interfaces for completion backends."""

from abc import ABC, abstractmethod

from rcommit.commit_message.domain.value_objects import ModelTier


class CompletionBackend(ABC):
    """Interface for text completion backends."""

    @abstractmethod
    def generate_completion(self, prompt: str, model_tier: ModelTier) -> str:
        """
        Send a prompt and wait for a single text completion.

        Args:
            prompt: Fully rendered prompt
            model_tier: Capability level selecting the backend model

        Returns:
            Completion text
        """
        ...
