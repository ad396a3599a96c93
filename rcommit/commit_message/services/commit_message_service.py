"""Service for generating commit messages from staged changes."""

from rcommit.commit_message.domain.prompt import render_prompt
from rcommit.commit_message.domain.value_objects import CommitMessageInput, ModelTier
from rcommit.commit_message.repositories.interfaces import CompletionBackend


class CommitMessageService:
    """Service for orchestrating commit message generation."""

    def __init__(self, completion_backend: CompletionBackend) -> None:
        """
        Initialize CommitMessageService.

        Args:
            completion_backend: Backend used to generate the message
        """
        self._completion_backend = completion_backend

    def generate(self, input_data: CommitMessageInput, model_tier: ModelTier) -> str:
        """
        Generate a commit message for the staged changes.

        Exactly one backend call is made; nothing is retried.

        Args:
            input_data: User context and collected staged diff
            model_tier: Capability level selecting the backend model

        Returns:
            Commit message without surrounding whitespace

        Raises:
            CompletionError: If the backend call fails
        """
        prompt = render_prompt(input_data.context, input_data.diff.text)
        message = self._completion_backend.generate_completion(prompt, model_tier)
        return message.strip()
