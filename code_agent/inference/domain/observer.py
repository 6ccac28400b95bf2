"""InferenceObserver port — domain events emitted around model calls."""

from typing import Protocol


class InferenceObserver(Protocol):
    """Observer port for inference events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def inference_started(self, model: str, num_turns: int, num_tools: int) -> None: ...

    def inference_completed(
        self, model: str, duration_ms: int, num_tool_calls: int
    ) -> None: ...

    def inference_failed(self, model: str, reason: str) -> None: ...
