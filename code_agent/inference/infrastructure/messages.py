"""Mapping between conversation turns and OpenAI-style chat-completion payloads."""

from collections.abc import Sequence
from typing import Any

from code_agent.conversation.domain.turn import (
    AssistantTurn,
    ConversationTurn,
    ToolCallRequest,
    ToolResultTurn,
    UserTurn,
)
from code_agent.inference.infrastructure.errors import InferenceError
from code_agent.tools.domain.definition import ToolDefinition

type Message = dict[str, Any]


def build_messages(
    turns: Sequence[ConversationTurn], system_prompt: str | None = None
) -> list[Message]:
    """Render turns as chat messages, in order, behind an optional system prompt."""
    messages: list[Message] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    for turn in turns:
        messages.append(_render_turn(turn=turn))
    return messages


def _render_turn(turn: ConversationTurn) -> Message:
    if isinstance(turn, UserTurn):
        return {"role": "user", "content": turn.text}

    if isinstance(turn, ToolResultTurn):
        return {
            "role": "tool",
            "tool_call_id": turn.tool_call_id,
            "content": turn.result_text,
        }

    if not turn.has_tool_calls:
        return {"role": "assistant", "content": turn.text or ""}

    return {
        "role": "assistant",
        "content": turn.text or None,
        "tool_calls": [
            {
                "id": call.id,
                "type": "function",
                "function": {"name": call.tool_name, "arguments": call.arguments},
            }
            for call in turn.tool_calls
        ],
    }


def build_tools(tools: Sequence[ToolDefinition]) -> list[Message]:
    """Render tool definitions as function tools (name, description, parameters)."""
    return [
        {
            "type": "function",
            "function": {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.input_schema,
            },
        }
        for tool in tools
    ]


def parse_assistant_message(message: Any) -> AssistantTurn:
    """Convert a chat-completion response message into an AssistantTurn.

    Raises:
        InferenceError: if a tool call lacks an id or a function name.
    """
    raw_calls = getattr(message, "tool_calls", None) or []
    calls: list[ToolCallRequest] = []
    for index, raw_call in enumerate(raw_calls):
        call_id = getattr(raw_call, "id", None)
        function = getattr(raw_call, "function", None)
        name = getattr(function, "name", None) if function is not None else None
        if not call_id or not name:
            raise InferenceError(
                reason=f"malformed tool call at position {index}: missing id or name"
            )
        arguments = getattr(function, "arguments", None)
        calls.append(
            ToolCallRequest(
                id=str(call_id),
                tool_name=str(name),
                arguments=arguments if isinstance(arguments, str) else "",
            )
        )

    content = getattr(message, "content", None)
    return AssistantTurn(
        text=content if isinstance(content, str) else None,
        tool_calls=tuple(calls),
    )
