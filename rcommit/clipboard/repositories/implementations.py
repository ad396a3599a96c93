"""Concrete implementations of clipboard repositories."""

import pyperclip

from rcommit.clipboard.domain.value_objects import ClipboardPayload
from rcommit.clipboard.repositories.interfaces import ClipboardRepository
from rcommit.errors import ClipboardError


class PyperclipClipboardRepositoryImpl(ClipboardRepository):
    """Implementation of clipboard repository using pyperclip."""

    def set_text(self, payload: ClipboardPayload) -> None:
        """Replace the clipboard contents with the payload text.

        Args:
            payload: The text to write

        Raises:
            ClipboardError: If no clipboard mechanism is available
        """
        try:
            pyperclip.copy(payload.text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Could not access the clipboard: {e}") from e
