"""Base class for LangChain-based completion backends."""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

from langchain_core.messages import HumanMessage

from rcommit.commit_message.domain.value_objects import ModelTier
from rcommit.commit_message.repositories.interfaces import CompletionBackend
from rcommit.errors import CompletionError

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel

logger = logging.getLogger(__name__)


class BaseLangChainBackend(CompletionBackend, ABC):
    """Base class for completion backends built on LangChain chat models."""

    # Model name used for each tier, set by subclasses
    MODEL_NAMES: Mapping[ModelTier, str] = {}

    def resolve_model_name(self, model_tier: ModelTier) -> str:
        """
        Get the model name for a tier.

        RCOMMIT_FAST_MODEL, RCOMMIT_STANDARD_MODEL and RCOMMIT_ADVANCED_MODEL
        override the built-in names.

        Args:
            model_tier: Capability level chosen on the command line

        Returns:
            Model name understood by the provider
        """
        override = os.getenv(f"RCOMMIT_{model_tier.name}_MODEL")
        return override or self.MODEL_NAMES[model_tier]

    def generate_completion(self, prompt: str, model_tier: ModelTier) -> str:
        """
        Send a prompt and wait for a single text completion.

        Args:
            prompt: Fully rendered prompt
            model_tier: Capability level selecting the backend model

        Returns:
            Completion text

        Raises:
            CompletionError: If the LLM API call fails or returns no text
        """
        model_name = self.resolve_model_name(model_tier)
        logger.info("Requesting completion from %s (%s tier)", model_name, model_tier.value)
        logger.debug("Prompt size: %d chars", len(prompt))

        try:
            llm = self._create_chat_model(model_name)
            response = llm.invoke([HumanMessage(content=prompt)])
            text = self._extract_text(response.content)
        except Exception as e:
            raise CompletionError(f"Failed to generate commit message: {str(e)}") from e

        if not text.strip():
            raise CompletionError("Completion backend returned an empty commit message")
        return text

    @abstractmethod
    def _create_chat_model(self, model_name: str) -> "BaseChatModel":
        """Create the chat model used for a single request."""
        ...

    @staticmethod
    def _extract_text(content: object) -> str:
        """Extract text from a chat model response content."""
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            # Content blocks; keep text parts only
            return "".join(
                item if isinstance(item, str) else str(item.get("text", ""))
                for item in content
            )
        raise TypeError(f"Unexpected response content type: {type(content).__name__}")
