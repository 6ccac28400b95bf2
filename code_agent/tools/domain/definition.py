"""ToolDefinition and ToolResult — the callable contract advertised to the model."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict

type ToolExecutor = Callable[[str], str]


@dataclass(frozen=True)
class ToolDefinition:
    """A named local capability: description and schema for the model, executor for us.

    The executor receives the raw JSON argument text produced by the model and
    returns the result text, or raises ToolExecutionError with a message the
    model can read.
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(hash=False)
    executor: ToolExecutor = field(compare=False)


class ToolResult(BaseModel):
    """Outcome of one tool invocation as fed back into the conversation.

    tool_found is False only when the requested name is not registered; the
    model is told so and may pick another tool.
    """

    model_config = ConfigDict(frozen=True)

    succeeded: bool
    text: str
    tool_found: bool = True

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(succeeded=True, text=text)

    @classmethod
    def failure(cls, text: str) -> "ToolResult":
        return cls(succeeded=False, text=text)

    @classmethod
    def not_found(cls, text: str) -> "ToolResult":
        return cls(succeeded=False, text=text, tool_found=False)
