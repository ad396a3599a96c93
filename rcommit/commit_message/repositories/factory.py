"""Factory for creating completion backend instances."""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from rcommit.commit_message.repositories.implementations import (
    LangChainClaudeBackend,
    LangChainOpenAIBackend,
)
from rcommit.commit_message.repositories.interfaces import CompletionBackend

logger = logging.getLogger(__name__)


def load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of rcommit package)
    project_root = Path(__file__).parent.parent.parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: search from the current directory upwards
        load_dotenv(find_dotenv(usecwd=True))


def create_completion_backend() -> CompletionBackend:
    """
    Create a completion backend based on configuration.

    Returns:
        Completion backend instance (OpenAI or Claude)

    Raises:
        ValueError: If LLM_PROVIDER is invalid or required API keys are missing
    """
    load_env_file()

    provider = os.getenv("LLM_PROVIDER", "openai").lower()
    logger.debug("Using LLM provider: %s", provider)

    if provider == "openai" or provider == "gpt":
        return LangChainOpenAIBackend()
    elif provider == "anthropic" or provider == "claude":
        return LangChainClaudeBackend()
    else:
        raise ValueError(
            f"Invalid LLM_PROVIDER: {provider}. "
            "Supported values: 'openai', 'gpt', 'anthropic', 'claude'"
        )
