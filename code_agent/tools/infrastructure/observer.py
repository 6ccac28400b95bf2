"""Structlog implementation of the ToolObserver port."""

import structlog


class StructlogToolObserver:
    """Delegates tool dispatch events to structlog.

    Satisfies the ToolObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def tool_invoked(self, tool_call_id: str, tool_name: str, arguments: str) -> None:
        self._log.info(
            "tools.invoked",
            tool_call_id=tool_call_id,
            tool_name=tool_name,
            arguments=arguments,
        )

    def tool_succeeded(
        self, tool_call_id: str, tool_name: str, duration_ms: int
    ) -> None:
        self._log.info(
            "tools.succeeded",
            tool_call_id=tool_call_id,
            tool_name=tool_name,
            duration_ms=duration_ms,
        )

    def tool_failed(self, tool_call_id: str, tool_name: str, reason: str) -> None:
        self._log.warning(
            "tools.failed",
            tool_call_id=tool_call_id,
            tool_name=tool_name,
            reason=reason,
        )

    def tool_not_found(self, tool_call_id: str, tool_name: str) -> None:
        self._log.warning(
            "tools.not_found",
            tool_call_id=tool_call_id,
            tool_name=tool_name,
        )
