"""Exception types shared across rcommit."""


class RcommitError(RuntimeError):
    """Base class for all rcommit failures that abort a run."""


class GitError(RcommitError):
    """Raised when the staged diff cannot be collected from git."""


class CompletionError(RcommitError):
    """Raised when the completion backend fails or returns nothing usable."""


class ClipboardError(RcommitError):
    """Raised when the system clipboard cannot be written."""
