"""TurnOutcome value object — how one user turn ended."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

type TurnStatus = Literal["answered", "tool_failed", "round_limit_exceeded"]


class TurnOutcome(BaseModel):
    """Immutable summary of one user turn.

    reply is the final assistant text for status="answered" and None otherwise.
    rounds counts inference calls; tool_calls counts executed tool requests.
    """

    model_config = ConfigDict(frozen=True)

    status: TurnStatus
    reply: str | None
    rounds: int
    tool_calls: int
