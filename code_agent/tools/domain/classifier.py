"""Tool outcome classifiers — decide whether a tool result halts the turn."""

from collections.abc import Iterable
from typing import Literal, Protocol

from code_agent.tools.domain.definition import ToolResult

type FailureDetection = Literal["structured", "keyword"]

DEFAULT_FAILURE_KEYWORDS: tuple[str, ...] = ("error", "failed", "cannot")


class ToolOutcomeClassifier(Protocol):
    """Structural interface for classifying a ToolResult as failed or not."""

    def is_failure(self, result: ToolResult) -> bool: ...


class StructuredOutcomeClassifier:
    """Trusts the succeeded flag set by the invoker.

    An unknown tool name is not a failure: its result goes back to the model
    so it can choose again.
    """

    def is_failure(self, result: ToolResult) -> bool:
        return result.tool_found and not result.succeeded


class KeywordOutcomeClassifier:
    """Legacy heuristic: a result fails when its text contains a failure keyword.

    Matching is case-sensitive substring search. A successful read of a file
    that mentions "error" is classified as failed; that is the known quirk this
    classifier preserves for callers that relied on it.
    """

    def __init__(self, keywords: Iterable[str] = DEFAULT_FAILURE_KEYWORDS) -> None:
        self._keywords = tuple(keywords)

    def is_failure(self, result: ToolResult) -> bool:
        return any(keyword in result.text for keyword in self._keywords)


def create_outcome_classifier(detection: FailureDetection) -> ToolOutcomeClassifier:
    """Return the classifier for the configured failure-detection mode."""
    if detection == "keyword":
        return KeywordOutcomeClassifier()
    return StructuredOutcomeClassifier()
