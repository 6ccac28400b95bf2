"""InferenceClient Protocol — structural interface for the model backend."""

from collections.abc import Sequence
from typing import Protocol

from code_agent.conversation.domain.turn import AssistantTurn, ConversationTurn
from code_agent.tools.domain.definition import ToolDefinition


class InferenceClient(Protocol):
    """Sends the conversation and tool schemas to the model, returns its next turn.

    Implementations raise InferenceError on any transport or protocol failure
    and never retry on their own.
    """

    async def complete(
        self,
        turns: Sequence[ConversationTurn],
        tools: Sequence[ToolDefinition],
    ) -> AssistantTurn: ...
