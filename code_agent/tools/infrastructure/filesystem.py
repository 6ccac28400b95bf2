"""FileSystemTools — read, list and edit executors bound to a working directory."""

import json
import os
from pathlib import Path

from code_agent.tools.domain.errors import ToolExecutionError
from code_agent.tools.domain.inputs import (
    EditFileInput,
    ListFilesInput,
    ReadFileInput,
    parse_input,
)

EDIT_SUCCESS_MESSAGE = "File successfully edited"


class FileSystemTools:
    """Executors for the built-in file tools.

    Relative paths are resolved against root; absolute paths are used as given.
    Results and error messages always quote the path exactly as the model sent
    it. There is no locking: a file changed by someone else between the read
    and the write of an edit is overwritten.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def read_file(self, raw_input: str) -> str:
        """Return the full text of the requested file.

        Raises:
            ToolExecutionError: on invalid input or any read failure.
        """
        params = parse_input(ReadFileInput, tool_name="read_file", raw=raw_input)
        try:
            with open(self._resolve(params.path), encoding="utf-8", newline="") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ToolExecutionError(
                f"failed to read file {params.path}: {_describe(exc)}"
            ) from exc

    def list_files(self, raw_input: str) -> str:
        """Return a JSON array of every entry below the requested directory.

        Entries are relative to the queried directory, listed depth-first in
        lexical order, with directories suffixed by "/". An empty path lists
        the working directory.

        Raises:
            ToolExecutionError: on invalid input, or when the path is missing
                or is not a directory.
        """
        params = parse_input(ListFilesInput, tool_name="list_files", raw=raw_input)
        directory = params.path or "."
        base = self._resolve(directory)

        if not base.exists():
            raise ToolExecutionError(
                f"failed to list files in {directory}: no such file or directory"
            )
        if not base.is_dir():
            raise ToolExecutionError(
                f"failed to list files in {directory}: not a directory"
            )

        entries: list[str] = []
        try:
            _walk(base=base, current=base, entries=entries)
        except OSError as exc:
            raise ToolExecutionError(
                f"failed to list files in {directory}: {_describe(exc)}"
            ) from exc

        return json.dumps(entries)

    def edit_file(self, raw_input: str) -> str:
        """Replace every occurrence of old_str with new_str, or create a new file.

        A file that does not exist is created (with any missing parent
        directories) when old_str is empty; new_str becomes its content.

        Raises:
            ToolExecutionError: when the path is empty, old_str equals new_str,
                old_str is empty for an existing file, old_str does not occur in
                the file, or the file cannot be read or written.
        """
        params = parse_input(EditFileInput, tool_name="edit_file", raw=raw_input)

        if not params.path:
            raise ToolExecutionError("path cannot be empty")
        if params.old_str == params.new_str:
            raise ToolExecutionError("old_str and new_str cannot be identical")

        target = self._resolve(params.path)
        try:
            with open(target, encoding="utf-8", newline="") as fh:
                old_content = fh.read()
        except FileNotFoundError as exc:
            if params.old_str == "":
                return self._create_file(
                    path=params.path, target=target, content=params.new_str
                )
            raise ToolExecutionError(
                f"failed to read file {params.path}: {_describe(exc)}"
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ToolExecutionError(
                f"failed to read file {params.path}: {_describe(exc)}"
            ) from exc

        if params.old_str == "":
            raise ToolExecutionError(
                f"old_str cannot be empty when file {params.path} already exists"
            )
        if params.old_str not in old_content:
            raise ToolExecutionError(
                f"old_str '{params.old_str}' not found in file {params.path}"
            )

        new_content = old_content.replace(params.old_str, params.new_str)
        try:
            with open(target, "w", encoding="utf-8", newline="") as fh:
                fh.write(new_content)
        except OSError as exc:
            raise ToolExecutionError(
                f"failed to write to file {params.path}: {_describe(exc)}"
            ) from exc

        return EDIT_SUCCESS_MESSAGE

    def _create_file(self, path: str, target: Path, content: str) -> str:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ToolExecutionError(
                f"failed to create directory: {_describe(exc)}"
            ) from exc

        try:
            with open(target, "x", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as exc:
            raise ToolExecutionError(
                f"failed to create file: {_describe(exc)}"
            ) from exc

        return f"Successfully created file {path}"

    def _resolve(self, path: str) -> Path:
        return self._root / path


def _walk(base: Path, current: Path, entries: list[str]) -> None:
    """Append descendants of current to entries, pre-order, not following symlinks."""
    with os.scandir(current) as it:
        children = sorted(it, key=lambda entry: entry.name)

    for child in children:
        relative = Path(child.path).relative_to(base).as_posix()
        if child.is_dir(follow_symlinks=False):
            entries.append(f"{relative}/")
            _walk(base=base, current=Path(child.path), entries=entries)
        else:
            entries.append(relative)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror.lower()
    return str(exc)
