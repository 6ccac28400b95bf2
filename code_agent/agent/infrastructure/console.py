"""Terminal adapters — stdin user input and the operator-facing chat transcript."""

from rich.console import Console
from rich.markup import escape


class ConsoleUserInput:
    """Reads one line per message from stdin behind a coloured "You" prompt.

    Satisfies the UserInput protocol structurally.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def read_message(self) -> str | None:
        try:
            return self._console.input("[bright_blue]You[/]: ")
        except EOFError:
            return None


class ConsoleTranscriptObserver:
    """Renders the chat transcript: assistant answers, tool calls and halts.

    Satisfies both the AgentLoopObserver and ToolObserver protocols
    structurally; events without an operator-facing line are no-ops.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    # AgentLoopObserver

    def session_started(self, tool_names: list[str]) -> None:
        pass

    def session_ended(self, turns_handled: int) -> None:
        pass

    def conversation_trimmed(self, dropped: int, retained: int) -> None:
        pass

    def assistant_replied(self, text: str) -> None:
        self._console.print(f"[bright_yellow]Assistant[/]: {escape(text)}")

    def turn_halted_on_tool_failure(self, failed_tools: list[str]) -> None:
        names = ", ".join(failed_tools)
        self._console.print(
            f"[red]Stopped[/]: tool call failed ({escape(names)}); waiting for input"
        )

    def round_limit_exceeded(self, max_rounds: int) -> None:
        self._console.print(
            f"[red]Stopped[/]: round limit exceeded ({max_rounds} inference calls)"
        )

    # ToolObserver

    def tool_invoked(self, tool_call_id: str, tool_name: str, arguments: str) -> None:
        self._console.print(
            f"[bright_green]tool[/]: {escape(tool_name)}({escape(arguments)})"
        )

    def tool_succeeded(
        self, tool_call_id: str, tool_name: str, duration_ms: int
    ) -> None:
        pass

    def tool_failed(self, tool_call_id: str, tool_name: str, reason: str) -> None:
        self._console.print(
            f"[red]tool error[/]: {escape(tool_name)}: {escape(reason)}"
        )

    def tool_not_found(self, tool_call_id: str, tool_name: str) -> None:
        self._console.print(
            f"[red]tool error[/]: {escape(tool_name)}: tool not found"
        )
