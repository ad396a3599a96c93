"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepository(ABC):
    """Interface for reading staged changes from a Git repository."""

    @abstractmethod
    def list_staged_files(self, repo_path: Path) -> tuple[str, ...]:
        """
        List staged files that were added, copied or modified.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tuple of file paths in the order git reports them
        """
        ...

    @abstractmethod
    def get_staged_file_diff(self, repo_path: Path, file_path: str) -> str:
        """
        Get the staged diff content for a specific file.

        Args:
            repo_path: Path to the git repository
            file_path: Path to the file relative to repository root

        Returns:
            Staged diff content for the file
        """
        ...
