"""Built-in tool definitions — read_file, list_files and edit_file."""

from pathlib import Path

from code_agent.tools.domain.definition import ToolDefinition
from code_agent.tools.domain.inputs import (
    EditFileInput,
    ListFilesInput,
    ReadFileInput,
    input_schema,
)
from code_agent.tools.domain.registry import ToolRegistry
from code_agent.tools.infrastructure.filesystem import FileSystemTools

_READ_FILE_DESCRIPTION = (
    "Read the contents of a given relative file path. Use this when you want to"
    " see what's inside a file. Do not use this with directory names."
)

_LIST_FILES_DESCRIPTION = (
    "List files and directories at a given path. If no path is provided, lists"
    " files in the current directory."
)

_EDIT_FILE_DESCRIPTION = """\
Make edits to a text file.

Replaces 'old_str' with 'new_str' in the given file. 'old_str' and 'new_str' \
MUST be different from each other.

If the file specified with path doesn't exist, it will be created.
"""


def builtin_tool_definitions(root: Path) -> list[ToolDefinition]:
    """Return the three file tools, bound to root, in advertisement order."""
    fs = FileSystemTools(root=root)
    return [
        ToolDefinition(
            name="read_file",
            description=_READ_FILE_DESCRIPTION,
            input_schema=input_schema(ReadFileInput),
            executor=fs.read_file,
        ),
        ToolDefinition(
            name="list_files",
            description=_LIST_FILES_DESCRIPTION,
            input_schema=input_schema(ListFilesInput),
            executor=fs.list_files,
        ),
        ToolDefinition(
            name="edit_file",
            description=_EDIT_FILE_DESCRIPTION,
            input_schema=input_schema(EditFileInput),
            executor=fs.edit_file,
        ),
    ]


def create_builtin_registry(root: Path) -> ToolRegistry:
    """Build the process-wide tool registry for the agent."""
    return ToolRegistry(definitions=builtin_tool_definitions(root=root))
