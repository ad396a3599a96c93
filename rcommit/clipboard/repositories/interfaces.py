"""Repository interfaces for clipboard access."""

from abc import ABC, abstractmethod

from rcommit.clipboard.domain.value_objects import ClipboardPayload


class ClipboardRepository(ABC):
    """Interface for writing text to the system clipboard."""

    @abstractmethod
    def set_text(self, payload: ClipboardPayload) -> None:
        """Replace the clipboard contents with the payload text.

        Args:
            payload: The text to write
        """
        ...
