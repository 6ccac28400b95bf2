"""ToolObserver port — domain events emitted while dispatching tool calls."""

from typing import Protocol


class ToolObserver(Protocol):
    """Observer port for tool dispatch events.

    Implementations may log to structlog, echo to the terminal, or record for tests.
    """

    def tool_invoked(
        self, tool_call_id: str, tool_name: str, arguments: str
    ) -> None: ...

    def tool_succeeded(
        self, tool_call_id: str, tool_name: str, duration_ms: int
    ) -> None: ...

    def tool_failed(self, tool_call_id: str, tool_name: str, reason: str) -> None: ...

    def tool_not_found(self, tool_call_id: str, tool_name: str) -> None: ...
