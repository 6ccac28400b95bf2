"""Base exception class for all code-agent-specific errors."""


class CodeAgentError(Exception):
    """Base class for all code-agent errors."""
