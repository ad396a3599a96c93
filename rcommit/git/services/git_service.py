"""Git service for collecting staged changes."""

import logging

from rcommit.git.domain.value_objects import StagedDiff, StagedDiffRequest, StagedFileDiff
from rcommit.git.repositories.interfaces import GitRepository
from rcommit.git.services.exclude_filter_service import ExcludeFilterService

logger = logging.getLogger(__name__)


class GitService:
    """Service for Git operations."""

    def __init__(self, git_repository: GitRepository) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
        """
        self._git_repository = git_repository
        self._exclude_filter_service = ExcludeFilterService()

    def collect_staged_diff(self, request: StagedDiffRequest) -> StagedDiff:
        """
        Collect the staged diff of every added, copied or modified file.

        Files whose name equals one of the exclude patterns are skipped. The
        remaining files keep the order git lists them in.

        Args:
            request: Repository path and exclude patterns

        Returns:
            StagedDiff holding one entry per surviving file

        Raises:
            GitError: If any git call fails; no partial diff is returned
        """
        staged_files = self._git_repository.list_staged_files(request.repo_path)
        kept_files = self._exclude_filter_service.filter_files(staged_files, request.excludes)

        skipped = [path for path in staged_files if path not in kept_files]
        if skipped:
            logger.debug("Excluded files: %s", ", ".join(skipped))

        file_diffs = tuple(
            StagedFileDiff(
                file_path=file_path,
                diff_content=self._git_repository.get_staged_file_diff(
                    request.repo_path, file_path
                ),
            )
            for file_path in kept_files
        )
        staged_diff = StagedDiff(files=file_diffs)
        logger.info("Collected staged diff of: %s", ", ".join(staged_diff.file_paths) or "no files")
        return staged_diff
