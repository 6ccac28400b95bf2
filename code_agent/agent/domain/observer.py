"""AgentLoopObserver port — domain events emitted by the conversation loop."""

from typing import Protocol


class AgentLoopObserver(Protocol):
    """Observer port for agent loop events.

    Implementations may log to structlog, render to the terminal, or record for tests.
    """

    def session_started(self, tool_names: list[str]) -> None: ...

    def session_ended(self, turns_handled: int) -> None: ...

    def conversation_trimmed(self, dropped: int, retained: int) -> None: ...

    def assistant_replied(self, text: str) -> None: ...

    def turn_halted_on_tool_failure(self, failed_tools: list[str]) -> None: ...

    def round_limit_exceeded(self, max_rounds: int) -> None: ...
