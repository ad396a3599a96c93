"""Service for filtering excluded files."""

from collections.abc import Iterable


class ExcludeFilterService:
    """Service for dropping files the user asked to leave out of the diff."""

    def is_excluded(self, file_path: str, patterns: Iterable[str]) -> bool:
        """
        Check if a file matches one of the exclude patterns.

        A pattern matches only the whole file name as git reports it, so
        "a.txt" excludes "a.txt" but neither "data.txt" nor "a.txt.bak".

        Args:
            file_path: Path of the staged file
            patterns: Exclude patterns from the command line

        Returns:
            True if the file is excluded, False otherwise
        """
        return any(file_path == pattern for pattern in patterns)

    def filter_files(
        self, file_paths: Iterable[str], patterns: Iterable[str]
    ) -> tuple[str, ...]:
        """
        Keep the files that no pattern excludes, preserving their order.

        Args:
            file_paths: Staged file paths in git's order
            patterns: Exclude patterns from the command line

        Returns:
            Tuple of the surviving file paths
        """
        patterns = tuple(patterns)
        return tuple(
            file_path for file_path in file_paths if not self.is_excluded(file_path, patterns)
        )
