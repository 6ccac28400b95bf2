"""Error types raised by tool definitions and executors."""

from code_agent.core.errors import CodeAgentError


class ToolExecutionError(CodeAgentError):
    """Raised by an executor when a tool call cannot be carried out.

    The message is shown to the model verbatim, so it is not prefixed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DuplicateToolError(CodeAgentError):
    """Raised when two tool definitions share the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to register tool: duplicate tool name '{name}'")


class InvalidToolDefinitionError(CodeAgentError):
    """Raised when a tool definition is structurally unusable."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to register tool: {reason}")
