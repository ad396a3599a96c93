"""Value objects for Commit message domain."""

from dataclasses import dataclass
from enum import Enum

from rcommit.git.domain.value_objects import StagedDiff

DEFAULT_CONTEXT = "no context"


class ModelTier(str, Enum):
    """Capability and cost level of the completion backend."""

    FAST = "fast"
    STANDARD = "standard"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class CommitMessageInput:
    """Input data for commit message generation."""

    context: str
    diff: StagedDiff
