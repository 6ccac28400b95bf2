"""ConversationStore — ordered turn history with a fixed-window retention policy."""

from collections.abc import Iterator

from code_agent.conversation.domain.turn import ConversationTurn, ToolResultTurn

DEFAULT_HIGH_WATER_MARK = 20
DEFAULT_LOW_WATER_MARK = 10


class ConversationStore:
    """Append-only sequence of turns, trimmed to a window when it grows too long.

    Trimming is a plain size bound: older context is dropped, not summarised.
    When respect_tool_pairs is set, a window that would begin with tool results
    whose assistant turn was cut is shortened further so the history sent to
    the model never opens with orphaned results.
    """

    def __init__(
        self,
        high_water_mark: int = DEFAULT_HIGH_WATER_MARK,
        low_water_mark: int = DEFAULT_LOW_WATER_MARK,
        respect_tool_pairs: bool = True,
    ) -> None:
        if low_water_mark < 1:
            raise ValueError("low_water_mark must be at least 1")
        if low_water_mark > high_water_mark:
            raise ValueError("low_water_mark must not exceed high_water_mark")
        self._high_water_mark = high_water_mark
        self._low_water_mark = low_water_mark
        self._respect_tool_pairs = respect_tool_pairs
        self._turns: list[ConversationTurn] = []

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def apply_retention(self) -> int:
        """Trim to the most recent low-water-mark turns once past the high-water mark.

        Returns the number of turns dropped (0 when no trim was needed).
        """
        if len(self._turns) <= self._high_water_mark:
            return 0

        start = len(self._turns) - self._low_water_mark
        if self._respect_tool_pairs:
            start = self._skip_orphaned_results(start=start)

        dropped = start
        del self._turns[:start]
        return dropped

    def _skip_orphaned_results(self, start: int) -> int:
        """Advance start past tool results whose assistant turn lies before it."""
        index = start
        while index < len(self._turns) and isinstance(
            self._turns[index], ToolResultTurn
        ):
            index += 1
        return index

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(list(self._turns))
