"""ToolInvoker — dispatches one tool call and normalises every outcome to text."""

import time

from code_agent.conversation.domain.turn import ToolCallRequest
from code_agent.tools.domain.definition import ToolResult
from code_agent.tools.domain.errors import ToolExecutionError
from code_agent.tools.domain.observer import ToolObserver
from code_agent.tools.domain.registry import ToolRegistry

TOOL_NOT_FOUND = "tool not found"


class ToolInvoker:
    """Looks up and runs tools on behalf of the agent loop.

    Tool-level problems never escape execute(): an unknown name, bad input or a
    failing executor all come back as a failed ToolResult whose text the model
    will see on its next inference.
    """

    def __init__(self, registry: ToolRegistry, observer: ToolObserver) -> None:
        self._registry = registry
        self._observer = observer

    def execute(self, call: ToolCallRequest) -> ToolResult:
        """Run call against the registry and return its result."""
        definition = self._registry.lookup(call.tool_name)
        if definition is None:
            self._observer.tool_not_found(
                tool_call_id=call.id, tool_name=call.tool_name
            )
            return ToolResult.not_found(TOOL_NOT_FOUND)

        self._observer.tool_invoked(
            tool_call_id=call.id,
            tool_name=call.tool_name,
            arguments=call.arguments,
        )

        start = time.monotonic()
        try:
            text = definition.executor(call.arguments)
        except ToolExecutionError as exc:
            return self._failed(call=call, reason=str(exc))
        except Exception as exc:  # noqa: BLE001
            return self._failed(call=call, reason=str(exc) or type(exc).__name__)

        self._observer.tool_succeeded(
            tool_call_id=call.id,
            tool_name=call.tool_name,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return ToolResult.success(text)

    def _failed(self, call: ToolCallRequest, reason: str) -> ToolResult:
        self._observer.tool_failed(
            tool_call_id=call.id, tool_name=call.tool_name, reason=reason
        )
        return ToolResult.failure(reason)
