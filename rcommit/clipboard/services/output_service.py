"""Service for publishing the generated commit message."""

from rcommit.clipboard.domain.value_objects import ClipboardPayload
from rcommit.clipboard.repositories.interfaces import ClipboardRepository


class OutputService:
    """Service for orchestrating clipboard output."""

    def __init__(self, clipboard_repository: ClipboardRepository) -> None:
        """Initialize the output service.

        Args:
            clipboard_repository: Repository for writing to the clipboard
        """
        self._clipboard_repository = clipboard_repository

    def publish(self, message: str, git_format: bool) -> ClipboardPayload:
        """Format a commit message and write it to the clipboard.

        Args:
            message: Commit message returned by the completion backend
            git_format: Wrap the message as a `git commit -m "..."` command

        Returns:
            The payload that was written

        Raises:
            ClipboardError: If the clipboard cannot be written
        """
        payload = ClipboardPayload.from_commit_message(message, git_format)
        self._clipboard_repository.set_text(payload)
        return payload
