"""Value objects for the clipboard domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClipboardPayload:
    """Value object representing the text written to the clipboard.

    Attributes:
        text: Either the raw commit message or a ready-to-run git command
    """

    text: str

    @classmethod
    def from_commit_message(cls, message: str, git_format: bool) -> "ClipboardPayload":
        """Build the payload for a generated commit message.

        Args:
            message: Commit message returned by the completion backend
            git_format: Wrap the message as a `git commit -m "..."` command

        Returns:
            The payload; the message is unchanged when git_format is False
        """
        if not git_format:
            return cls(text=message)

        escaped = message.replace('"', '\\"')
        return cls(text=f'git commit -m "{escaped}"')
