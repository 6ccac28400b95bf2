"""Composite observers — fan out agent loop and tool events to several observers."""

from code_agent.agent.domain.observer import AgentLoopObserver
from code_agent.tools.domain.observer import ToolObserver


class CompositeAgentLoopObserver:
    """Delegates every agent loop event to each observer in order.

    Does NOT inherit from AgentLoopObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[AgentLoopObserver]) -> None:
        self._observers = observers

    def session_started(self, tool_names: list[str]) -> None:
        for obs in self._observers:
            obs.session_started(tool_names=tool_names)

    def session_ended(self, turns_handled: int) -> None:
        for obs in self._observers:
            obs.session_ended(turns_handled=turns_handled)

    def conversation_trimmed(self, dropped: int, retained: int) -> None:
        for obs in self._observers:
            obs.conversation_trimmed(dropped=dropped, retained=retained)

    def assistant_replied(self, text: str) -> None:
        for obs in self._observers:
            obs.assistant_replied(text=text)

    def turn_halted_on_tool_failure(self, failed_tools: list[str]) -> None:
        for obs in self._observers:
            obs.turn_halted_on_tool_failure(failed_tools=failed_tools)

    def round_limit_exceeded(self, max_rounds: int) -> None:
        for obs in self._observers:
            obs.round_limit_exceeded(max_rounds=max_rounds)


class CompositeToolObserver:
    """Delegates every tool event to each observer in order."""

    def __init__(self, observers: list[ToolObserver]) -> None:
        self._observers = observers

    def tool_invoked(self, tool_call_id: str, tool_name: str, arguments: str) -> None:
        for obs in self._observers:
            obs.tool_invoked(
                tool_call_id=tool_call_id, tool_name=tool_name, arguments=arguments
            )

    def tool_succeeded(
        self, tool_call_id: str, tool_name: str, duration_ms: int
    ) -> None:
        for obs in self._observers:
            obs.tool_succeeded(
                tool_call_id=tool_call_id, tool_name=tool_name, duration_ms=duration_ms
            )

    def tool_failed(self, tool_call_id: str, tool_name: str, reason: str) -> None:
        for obs in self._observers:
            obs.tool_failed(
                tool_call_id=tool_call_id, tool_name=tool_name, reason=reason
            )

    def tool_not_found(self, tool_call_id: str, tool_name: str) -> None:
        for obs in self._observers:
            obs.tool_not_found(tool_call_id=tool_call_id, tool_name=tool_name)
