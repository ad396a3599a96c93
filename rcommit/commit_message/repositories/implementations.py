"""Concrete completion backends using LangChain."""

import os

from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from rcommit.commit_message.domain.value_objects import ModelTier
from rcommit.commit_message.repositories.base_langchain_backend import (
    BaseLangChainBackend,
)

TEMPERATURE = 0.3


class LangChainOpenAIBackend(BaseLangChainBackend):
    """LangChain implementation using OpenAI chat models."""

    MODEL_NAMES = {
        ModelTier.FAST: "gpt-3.5-turbo",
        ModelTier.STANDARD: "gpt-4",
        ModelTier.ADVANCED: "gpt-4-turbo",
    }

    def __init__(self) -> None:
        """
        Initialize the OpenAI backend.

        Raises:
            ValueError: If OPENAI_API_KEY is not set
        """
        if not os.getenv("OPENAI_API_KEY"):
            raise ValueError(
                "OPENAI_API_KEY environment variable is required. "
                "Please set it in a .env file or as an environment variable."
            )

    def _create_chat_model(self, model_name: str) -> ChatOpenAI:
        return ChatOpenAI(  # type: ignore[call-arg]
            model_name=model_name,
            temperature=TEMPERATURE,
        )


class LangChainClaudeBackend(BaseLangChainBackend):
    """LangChain implementation using Anthropic Claude chat models."""

    MODEL_NAMES = {
        ModelTier.FAST: "claude-3-5-haiku-latest",
        ModelTier.STANDARD: "claude-3-5-sonnet-latest",
        ModelTier.ADVANCED: "claude-3-opus-latest",
    }

    def __init__(self) -> None:
        """
        Initialize the Claude backend.

        Raises:
            ValueError: If ANTHROPIC_API_KEY is not set
        """
        if not os.getenv("ANTHROPIC_API_KEY"):
            raise ValueError(
                "ANTHROPIC_API_KEY environment variable is required. "
                "Please set it in a .env file or as an environment variable."
            )

    def _create_chat_model(self, model_name: str) -> ChatAnthropic:
        return ChatAnthropic(  # type: ignore[call-arg]
            model_name=model_name,
            temperature=TEMPERATURE,
        )
