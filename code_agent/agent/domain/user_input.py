"""UserInput Protocol — where the agent reads operator messages from."""

from typing import Protocol


class UserInput(Protocol):
    """Yields one operator message per call, or None once input is exhausted.

    Called synchronously on the event loop's thread, between turns only.
    """

    def read_message(self) -> str | None: ...
