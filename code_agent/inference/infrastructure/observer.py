"""Structlog implementation of the InferenceObserver port."""

import structlog


class StructlogInferenceObserver:
    """Delegates inference events to structlog.

    Satisfies the InferenceObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def inference_started(self, model: str, num_turns: int, num_tools: int) -> None:
        self._log.info(
            "inference.started",
            model=model,
            num_turns=num_turns,
            num_tools=num_tools,
        )

    def inference_completed(
        self, model: str, duration_ms: int, num_tool_calls: int
    ) -> None:
        self._log.info(
            "inference.completed",
            model=model,
            duration_ms=duration_ms,
            num_tool_calls=num_tool_calls,
        )

    def inference_failed(self, model: str, reason: str) -> None:
        self._log.error("inference.failed", model=model, reason=reason)
