"""Tests for FileSystemTools — real files under pytest's tmp_path."""

import json
from pathlib import Path

import pytest

from code_agent.tools.domain.errors import ToolExecutionError
from code_agent.tools.infrastructure.filesystem import (
    EDIT_SUCCESS_MESSAGE,
    FileSystemTools,
)


def _args(**kwargs: str) -> str:
    return json.dumps(kwargs)


@pytest.fixture
def tools(tmp_path: Path) -> FileSystemTools:
    return FileSystemTools(root=tmp_path)


class TestReadFile:
    """read_file returns file content verbatim."""

    def test_returns_full_content(self, tools: FileSystemTools, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("line one\nline two\n", encoding="utf-8")

        assert tools.read_file(_args(path="notes.txt")) == "line one\nline two\n"

    def test_preserves_crlf_line_endings(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "win.txt").write_bytes(b"a\r\nb\r\n")

        assert tools.read_file(_args(path="win.txt")) == "a\r\nb\r\n"

    def test_reads_nested_relative_path(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "mod.py").write_text("x = 1\n", encoding="utf-8")

        assert tools.read_file(_args(path="pkg/mod.py")) == "x = 1\n"

    def test_missing_file_raises_with_path(self, tools: FileSystemTools) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            tools.read_file(_args(path="missing.txt"))

        message = str(exc_info.value)
        assert message.startswith("failed to read file missing.txt: ")
        assert "no such file or directory" in message

    def test_missing_path_field_raises(self, tools: FileSystemTools) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            tools.read_file("{}")

        assert "failed to parse read_file input" in str(exc_info.value)


class TestListFiles:
    """list_files returns a JSON array of relative entries, directories suffixed "/"."""

    def test_lists_recursively_with_directory_suffix(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.py").write_text("", encoding="utf-8")

        entries = json.loads(tools.list_files(_args(path="")))

        assert entries == ["a.txt", "src/", "src/main.py"]

    def test_empty_arguments_list_working_directory(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "only.txt").write_text("", encoding="utf-8")

        assert json.loads(tools.list_files("")) == ["only.txt"]

    def test_empty_directory_yields_empty_array(self, tools: FileSystemTools) -> None:
        assert tools.list_files(_args(path="")) == "[]"

    def test_entries_are_relative_to_queried_directory(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "src" / "inner").mkdir(parents=True)
        (tmp_path / "src" / "inner" / "deep.txt").write_text("", encoding="utf-8")

        entries = json.loads(tools.list_files(_args(path="src")))

        assert entries == ["inner/", "inner/deep.txt"]

    def test_queried_directory_itself_is_not_listed(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "src").mkdir()

        entries = json.loads(tools.list_files(_args(path="src")))

        assert "" not in entries
        assert "./" not in entries
        assert entries == []

    def test_entries_are_sorted_lexically(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        for name in ("b.txt", "C.txt", "a.txt"):
            (tmp_path / name).write_text("", encoding="utf-8")

        assert json.loads(tools.list_files("{}")) == ["C.txt", "a.txt", "b.txt"]

    def test_missing_directory_raises(self, tools: FileSystemTools) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            tools.list_files(_args(path="nope"))

        assert str(exc_info.value) == (
            "failed to list files in nope: no such file or directory"
        )

    def test_file_path_raises_not_a_directory(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")

        with pytest.raises(ToolExecutionError) as exc_info:
            tools.list_files(_args(path="a.txt"))

        assert str(exc_info.value) == "failed to list files in a.txt: not a directory"


class TestEditFileReplace:
    """Replacing text in an existing file."""

    def test_replaces_single_occurrence(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        target = tmp_path / "greet.py"
        target.write_text("print('hello')\n", encoding="utf-8")

        result = tools.edit_file(
            _args(path="greet.py", old_str="hello", new_str="goodbye")
        )

        assert result == EDIT_SUCCESS_MESSAGE
        assert result == "File successfully edited"
        assert target.read_text(encoding="utf-8") == "print('goodbye')\n"

    def test_replaces_every_occurrence(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        target = tmp_path / "a.txt"
        target.write_text("foo bar foo baz foo", encoding="utf-8")

        tools.edit_file(_args(path="a.txt", old_str="foo", new_str="qux"))

        assert target.read_text(encoding="utf-8") == "qux bar qux baz qux"

    def test_replacement_can_delete_text(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        target = tmp_path / "a.txt"
        target.write_text("keep-drop-keep", encoding="utf-8")

        tools.edit_file(_args(path="a.txt", old_str="-drop", new_str=""))

        assert target.read_text(encoding="utf-8") == "keep-keep"

    def test_old_str_not_found_leaves_file_untouched(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        target = tmp_path / "a.txt"
        target.write_text("alpha", encoding="utf-8")

        with pytest.raises(ToolExecutionError) as exc_info:
            tools.edit_file(_args(path="a.txt", old_str="beta", new_str="gamma"))

        assert str(exc_info.value) == "old_str 'beta' not found in file a.txt"
        assert target.read_text(encoding="utf-8") == "alpha"

    def test_identical_strings_rejected_before_any_io(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            tools.edit_file(_args(path="never.txt", old_str="x", new_str="x"))

        assert str(exc_info.value) == "old_str and new_str cannot be identical"
        assert not (tmp_path / "never.txt").exists()

    def test_empty_path_rejected(self, tools: FileSystemTools) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            tools.edit_file(_args(path="", old_str="", new_str="content"))

        assert str(exc_info.value) == "path cannot be empty"

    def test_empty_old_str_on_existing_file_rejected(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        target = tmp_path / "a.txt"
        target.write_text("original", encoding="utf-8")

        with pytest.raises(ToolExecutionError) as exc_info:
            tools.edit_file(_args(path="a.txt", old_str="", new_str="clobber"))

        assert "old_str cannot be empty" in str(exc_info.value)
        assert target.read_text(encoding="utf-8") == "original"

    def test_missing_file_with_non_empty_old_str_raises_read_error(
        self, tools: FileSystemTools
    ) -> None:
        with pytest.raises(ToolExecutionError) as exc_info:
            tools.edit_file(_args(path="ghost.txt", old_str="a", new_str="b"))

        assert str(exc_info.value).startswith("failed to read file ghost.txt")


class TestEditFileCreate:
    """Creating a new file when old_str is empty and the file is absent."""

    def test_creates_file_with_new_str_content(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        result = tools.edit_file(
            _args(path="hello.py", old_str="", new_str="print('hi')\n")
        )

        assert result == "Successfully created file hello.py"
        assert (tmp_path / "hello.py").read_text(encoding="utf-8") == "print('hi')\n"

    def test_creates_missing_parent_directories(
        self, tools: FileSystemTools, tmp_path: Path
    ) -> None:
        result = tools.edit_file(
            _args(path="a/b/c/new.txt", old_str="", new_str="deep")
        )

        assert result == "Successfully created file a/b/c/new.txt"
        assert (tmp_path / "a" / "b" / "c" / "new.txt").read_text(
            encoding="utf-8"
        ) == "deep"

    def test_created_file_is_listed_afterwards(
        self, tools: FileSystemTools
    ) -> None:
        tools.edit_file(_args(path="pkg/mod.py", old_str="", new_str="x = 1\n"))

        entries = json.loads(tools.list_files(_args(path="")))

        assert entries == ["pkg/", "pkg/mod.py"]
