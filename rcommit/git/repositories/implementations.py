"""Concrete implementation of Git repository operations."""

import logging
import subprocess
from pathlib import Path

from rcommit.errors import GitError
from rcommit.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def list_staged_files(self, repo_path: Path) -> tuple[str, ...]:
        """
        List staged files that were added, copied or modified.

        Args:
            repo_path: Path to the git repository

        Returns:
            Tuple of file paths in the order git reports them

        Raises:
            GitError: If git cannot be run or its output is not UTF-8
        """
        output = self._run_git(
            repo_path, ["diff", "--cached", "--name-only", "--diff-filter=ACM"]
        )
        return tuple(line for line in output.split("\n") if line)

    def get_staged_file_diff(self, repo_path: Path, file_path: str) -> str:
        """
        Get the staged diff content for a specific file.

        Args:
            repo_path: Path to the git repository
            file_path: Path to the file relative to repository root

        Returns:
            Staged diff content for the file

        Raises:
            GitError: If git cannot be run or its output is not UTF-8
        """
        return self._run_git(repo_path, ["diff", "--cached", "--", file_path])

    @staticmethod
    def _run_git(repo_path: Path, args: list[str]) -> str:
        """Run a git command in repo_path and return its decoded stdout."""
        cmd = ["git", *args]
        logger.debug("Running git command: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=repo_path,
                capture_output=True,
                check=True,
            )
        except OSError as e:
            raise GitError(f"Failed to execute git: {e}") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
            raise GitError(
                f"Command '{' '.join(cmd)}' failed: {stderr or str(e)}"
            ) from e

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise GitError(
                f"Output of '{' '.join(cmd)}' is not valid UTF-8: {e}"
            ) from e
