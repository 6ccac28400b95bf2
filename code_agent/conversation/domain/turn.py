"""Conversation turn value objects — user, assistant and tool-result turns."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolCallRequest(BaseModel):
    """One tool invocation requested by the model inside an assistant turn."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    tool_name: str = Field(min_length=1)
    arguments: str  # raw JSON text exactly as produced by the model


class UserTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    text: str


class AssistantTurn(BaseModel):
    """The model's reply: free text, tool calls, or both.

    tool_calls keeps the order the model wants them executed in.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["assistant"] = "assistant"
    text: str | None = None
    tool_calls: tuple[ToolCallRequest, ...] = ()

    @property
    def has_tool_calls(self) -> bool:
        return len(self.tool_calls) > 0


class ToolResultTurn(BaseModel):
    """The result text of one tool call, correlated by tool_call_id."""

    model_config = ConfigDict(frozen=True)

    role: Literal["tool"] = "tool"
    tool_call_id: str
    result_text: str


type ConversationTurn = Annotated[
    UserTurn | AssistantTurn | ToolResultTurn,
    Field(discriminator="role"),
]
