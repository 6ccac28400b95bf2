"""AgentLoop — interleaves model inference with local tool execution."""

from code_agent.agent.domain.observer import AgentLoopObserver
from code_agent.agent.domain.outcome import TurnOutcome
from code_agent.agent.domain.user_input import UserInput
from code_agent.conversation.domain.store import ConversationStore
from code_agent.conversation.domain.turn import (
    AssistantTurn,
    ToolResultTurn,
    UserTurn,
)
from code_agent.inference.domain.client import InferenceClient
from code_agent.tools.application.invoker import ToolInvoker
from code_agent.tools.domain.classifier import ToolOutcomeClassifier
from code_agent.tools.domain.registry import ToolRegistry

DEFAULT_MAX_ROUNDS = 10


class AgentLoop:
    """Runs the interactive session: one user turn is fully resolved before the next.

    Each user turn alternates inference and tool execution until the model
    answers without requesting tools, a tool call fails, or max_rounds
    inference calls have been made. Every tool call of an assistant turn gets
    exactly one result turn, in request order, before the next inference.

    The loop owns the conversation exclusively and receives every collaborator
    through its constructor.
    """

    def __init__(
        self,
        store: ConversationStore,
        inference_client: InferenceClient,
        registry: ToolRegistry,
        invoker: ToolInvoker,
        classifier: ToolOutcomeClassifier,
        user_input: UserInput,
        observer: AgentLoopObserver,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")
        self._store = store
        self._inference_client = inference_client
        self._registry = registry
        self._invoker = invoker
        self._classifier = classifier
        self._user_input = user_input
        self._observer = observer
        self._max_rounds = max_rounds

    async def run(self) -> None:
        """Read and handle user messages until input is exhausted.

        The read blocks the event loop. Nothing else runs on it between turns,
        and a worker thread stuck in input() would keep Ctrl-C from exiting.

        Raises:
            InferenceError: propagated from the inference client; it ends the session.
        """
        self._observer.session_started(tool_names=self._registry.names)
        turns_handled = 0
        while True:
            text = self._user_input.read_message()
            if text is None:
                break
            await self.handle_message(text=text)
            turns_handled += 1
        self._observer.session_ended(turns_handled=turns_handled)

    async def handle_message(self, text: str) -> TurnOutcome:
        """Resolve one user message into a TurnOutcome.

        Raises:
            InferenceError: if the model backend fails; the turns appended so
                far stay in the conversation.
        """
        dropped = self._store.apply_retention()
        if dropped:
            self._observer.conversation_trimmed(
                dropped=dropped, retained=len(self._store)
            )
        self._store.append(UserTurn(text=text))

        tool_calls = 0
        for round_number in range(1, self._max_rounds + 1):
            assistant_turn = await self._inference_client.complete(
                turns=self._store.turns,
                tools=self._registry.definitions,
            )
            self._store.append(assistant_turn)

            if not assistant_turn.has_tool_calls:
                reply = assistant_turn.text or ""
                self._observer.assistant_replied(text=reply)
                return TurnOutcome(
                    status="answered",
                    reply=reply,
                    rounds=round_number,
                    tool_calls=tool_calls,
                )

            failed_tools = self._execute_tool_calls(assistant_turn=assistant_turn)
            tool_calls += len(assistant_turn.tool_calls)

            if failed_tools:
                self._observer.turn_halted_on_tool_failure(failed_tools=failed_tools)
                return TurnOutcome(
                    status="tool_failed",
                    reply=None,
                    rounds=round_number,
                    tool_calls=tool_calls,
                )

        self._observer.round_limit_exceeded(max_rounds=self._max_rounds)
        return TurnOutcome(
            status="round_limit_exceeded",
            reply=None,
            rounds=self._max_rounds,
            tool_calls=tool_calls,
        )

    def _execute_tool_calls(self, assistant_turn: AssistantTurn) -> list[str]:
        """Run every call in order and append its result; return the failed names."""
        failed_tools: list[str] = []
        for call in assistant_turn.tool_calls:
            result = self._invoker.execute(call=call)
            self._store.append(
                ToolResultTurn(tool_call_id=call.id, result_text=result.text)
            )
            if self._classifier.is_failure(result):
                failed_tools.append(call.tool_name)
        return failed_tools
