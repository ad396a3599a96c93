import subprocess
from pathlib import Path

import pytest

from rcommit.commit_message.domain.value_objects import ModelTier
from rcommit.commit_message.repositories.interfaces import CompletionBackend
from rcommit.git.repositories.interfaces import GitRepository


class FakeGitRepository(GitRepository):
    """In-memory staged changes keyed by file path, in insertion order."""

    def __init__(self, staged: dict[str, str]):
        self.staged = staged
        self.diff_calls: list[str] = []

    def list_staged_files(self, repo_path: Path) -> tuple[str, ...]:
        return tuple(self.staged)

    def get_staged_file_diff(self, repo_path: Path, file_path: str) -> str:
        self.diff_calls.append(file_path)
        return self.staged[file_path]


class StubCompletionBackend(CompletionBackend):
    def __init__(self, completion: str):
        self.completion = completion
        self.calls: list[tuple[str, ModelTier]] = []

    def generate_completion(self, prompt: str, model_tier: ModelTier) -> str:
        self.calls.append((prompt, model_tier))
        return self.completion


def run_git(args, cwd: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        text=True,
        capture_output=True,
        check=True,
    )


@pytest.fixture
def git_repo(tmp_path):
    repo = tmp_path / "repo"
    repo.mkdir()
    run_git(["init"], cwd=repo)
    run_git(["config", "user.name", "rcommit"], cwd=repo)
    run_git(["config", "user.email", "rcommit@example.com"], cwd=repo)
    return repo
