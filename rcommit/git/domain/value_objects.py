"""Value objects for Git domain."""

from dataclasses import dataclass
from pathlib import Path

FILE_SEPARATOR = "---------------------------"
CONTENT_PREFIX = "+"


@dataclass(frozen=True)
class StagedDiffRequest:
    """Where to read staged changes from and which files to leave out."""

    repo_path: Path
    excludes: tuple[str, ...] = ()


@dataclass(frozen=True)
class StagedFileDiff:
    """Staged diff of a single file."""

    file_path: str
    diff_content: str

    def render(self) -> str:
        """
        Render the file as a block for the prompt.

        The block opens with a blank line, a separator and a name header.
        Every diff line follows with a literal "+" in front of it, whatever
        git's own marker on that line was.

        Returns:
            The block as newline-joined text
        """
        diff_lines = self.diff_content.split("\n")
        if diff_lines and diff_lines[-1] == "":
            diff_lines.pop()

        lines = ["", FILE_SEPARATOR, f" name:{self.file_path}"]
        lines.extend(f"{CONTENT_PREFIX}{line}" for line in diff_lines)
        return "\n".join(lines)


@dataclass(frozen=True)
class StagedDiff:
    """All staged changes collected for one run, in git's order."""

    files: tuple[StagedFileDiff, ...]

    @property
    def file_paths(self) -> tuple[str, ...]:
        """Paths of the included files, in git's order."""
        return tuple(file_diff.file_path for file_diff in self.files)

    @property
    def text(self) -> str:
        """Concatenated blocks of every file, joined with newlines."""
        return "\n".join(file_diff.render() for file_diff in self.files)
