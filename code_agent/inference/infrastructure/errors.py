"""Error types raised by inference infrastructure."""

from code_agent.core.errors import CodeAgentError


class InferenceError(CodeAgentError):
    """Raised when the model backend is unreachable or returns an unusable response."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to run inference: {reason}")
