"""Structlog implementation of the AgentLoopObserver port."""

import structlog


class StructlogAgentLoopObserver:
    """Delegates agent loop events to structlog.

    Satisfies the AgentLoopObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_started(self, tool_names: list[str]) -> None:
        self._log.info("agent.session_started", tool_names=tool_names)

    def session_ended(self, turns_handled: int) -> None:
        self._log.info("agent.session_ended", turns_handled=turns_handled)

    def conversation_trimmed(self, dropped: int, retained: int) -> None:
        self._log.info(
            "agent.conversation_trimmed", dropped=dropped, retained=retained
        )

    def assistant_replied(self, text: str) -> None:
        self._log.info("agent.assistant_replied", length=len(text))

    def turn_halted_on_tool_failure(self, failed_tools: list[str]) -> None:
        self._log.warning(
            "agent.turn_halted_on_tool_failure", failed_tools=failed_tools
        )

    def round_limit_exceeded(self, max_rounds: int) -> None:
        self._log.warning("agent.round_limit_exceeded", max_rounds=max_rounds)
