from pathlib import Path

from conftest import FakeGitRepository

from rcommit.git.domain.value_objects import StagedDiff, StagedDiffRequest, StagedFileDiff
from rcommit.git.services.exclude_filter_service import ExcludeFilterService
from rcommit.git.services.git_service import GitService

A_DIFF = (
    "diff --git a/a.txt b/a.txt\n"
    "index 0000000..1111111 100644\n"
    "--- a/a.txt\n"
    "+++ b/a.txt\n"
    "@@ -1,2 +1,2 @@\n"
    " keep\n"
    "-old\n"
    "+new\n"
)


def _collect(staged, excludes=()):
    service = GitService(FakeGitRepository(staged))
    return service.collect_staged_diff(
        StagedDiffRequest(repo_path=Path("."), excludes=tuple(excludes))
    )


def test_exclude_matches_whole_name_only():
    service = ExcludeFilterService()

    assert service.is_excluded("a.txt", ["a.txt"])
    assert not service.is_excluded("data.txt", ["a.txt"])
    assert not service.is_excluded("a.txt.bak", ["a.txt"])
    assert not service.is_excluded("src/a.txt", ["a.txt"])


def test_exclude_order_does_not_change_result():
    service = ExcludeFilterService()
    files = ["a.py", "b.py", "c.py", "d.py"]

    assert service.filter_files(files, ["b.py", "d.py"]) == ("a.py", "c.py")
    assert service.filter_files(files, ["d.py", "b.py"]) == ("a.py", "c.py")


def test_collect_keeps_git_order_and_one_header_per_file():
    staged = {"b.py": "x\n", "a.py": "y\n", "c/d.py": "z\n"}

    diff = _collect(staged)

    assert diff.file_paths == ("b.py", "a.py", "c/d.py")
    headers = [line for line in diff.text.split("\n") if line.startswith(" name:")]
    assert headers == [" name:b.py", " name:a.py", " name:c/d.py"]


def test_collect_skips_excluded_files_without_reading_their_diff():
    repo = FakeGitRepository({"a.txt": "a\n", "b.txt": "b\n", "lock.json": "l\n"})
    service = GitService(repo)

    diff = service.collect_staged_diff(
        StagedDiffRequest(repo_path=Path("."), excludes=("b.txt", "lock.json"))
    )

    assert diff.file_paths == ("a.txt",)
    assert repo.diff_calls == ["a.txt"]
    assert "b.txt" not in diff.text
    assert "lock.json" not in diff.text


def test_render_block_layout():
    block = StagedFileDiff(file_path="a.txt", diff_content="one\ntwo\n").render()

    assert block.split("\n") == [
        "",
        "---------------------------",
        " name:a.txt",
        "+one",
        "+two",
    ]


def test_every_content_line_is_prefixed_and_stripping_restores_diff():
    block = StagedFileDiff(file_path="a.txt", diff_content=A_DIFF).render()
    content_lines = block.split("\n")[3:]

    assert all(line.startswith("+") for line in content_lines)
    assert [line[1:] for line in content_lines] == A_DIFF.split("\n")[:-1]
    assert "+-old" in content_lines
    assert "++new" in content_lines
    assert "+ keep" in content_lines


def test_only_newlines_split_content_lines():
    diff_content = "@@ -1 +1 @@\n+page one\x0cpage two\n+s = 'a\u2028b'\n+sep\x1ctail\x85end\n"

    block = StagedFileDiff(file_path="form.c", diff_content=diff_content).render()
    content_lines = block.split("\n")[3:]

    assert content_lines == [
        "+@@ -1 +1 @@",
        "++page one\x0cpage two",
        "++s = 'a\u2028b'",
        "++sep\x1ctail\x85end",
    ]
    assert "\n".join(line[1:] for line in content_lines) + "\n" == diff_content


def test_diff_without_trailing_newline_keeps_last_line():
    block = StagedFileDiff(file_path="a", diff_content="one\ntwo").render()

    assert block.split("\n")[3:] == ["+one", "+two"]


def test_text_joins_blocks_with_newlines():
    diff = StagedDiff(
        files=(
            StagedFileDiff(file_path="a", diff_content="1"),
            StagedFileDiff(file_path="b", diff_content="2"),
        )
    )

    assert diff.text == (
        "\n---------------------------\n name:a\n+1"
        "\n"
        "\n---------------------------\n name:b\n+2"
    )


def test_empty_diff_has_no_text():
    diff = _collect({})

    assert diff.file_paths == ()
    assert diff.text == ""
