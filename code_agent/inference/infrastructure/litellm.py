"""LiteLLMInferenceClient — InferenceClient implementation using LiteLLM."""

import time
from collections.abc import Sequence
from typing import Any

import litellm

from code_agent.config.domain.inference import InferenceConfig
from code_agent.conversation.domain.turn import AssistantTurn, ConversationTurn
from code_agent.inference.domain.observer import InferenceObserver
from code_agent.inference.infrastructure.errors import InferenceError
from code_agent.inference.infrastructure.messages import (
    build_messages,
    build_tools,
    parse_assistant_message,
)
from code_agent.tools.domain.definition import ToolDefinition


class LiteLLMInferenceClient:
    """Inference client that delegates chat completions with tools to LiteLLM.

    One instance is constructed at startup and shared by the whole session.
    Failures are reported once through the observer and raised as
    InferenceError; retry policy is left to LiteLLM's own transport settings.
    """

    def __init__(self, config: InferenceConfig, observer: InferenceObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

    async def complete(
        self,
        turns: Sequence[ConversationTurn],
        tools: Sequence[ToolDefinition],
    ) -> AssistantTurn:
        """Request the next assistant turn for the given conversation.

        Raises:
            InferenceError: if the LiteLLM call raises, returns no choices, or
                returns a tool call that cannot be mapped.
        """
        self._observer.inference_started(
            model=self._config.model,
            num_turns=len(turns),
            num_tools=len(tools),
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(**self._request_kwargs(turns, tools))
        except Exception as exc:
            self._fail(reason=str(exc))
            raise InferenceError(reason=str(exc)) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        choices = getattr(response, "choices", None)
        if not choices:
            reason = "response contained no choices"
            self._fail(reason=reason)
            raise InferenceError(reason=reason)

        try:
            turn = parse_assistant_message(choices[0].message)
        except InferenceError as exc:
            self._fail(reason=str(exc).removeprefix("Failed to run inference: "))
            raise

        self._observer.inference_completed(
            model=self._config.model,
            duration_ms=duration_ms,
            num_tool_calls=len(turn.tool_calls),
        )
        return turn

    def _request_kwargs(
        self,
        turns: Sequence[ConversationTurn],
        tools: Sequence[ToolDefinition],
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "max_tokens": self._config.max_tokens,
            "messages": build_messages(
                turns=turns, system_prompt=self._config.system_prompt
            ),
            "timeout": self._config.timeout_seconds,
        }
        if tools:
            kwargs["tools"] = build_tools(tools=tools)
        if self._config.api_key:
            kwargs["api_key"] = self._config.api_key
        if self._config.api_base:
            kwargs["api_base"] = self._config.api_base
        return kwargs

    def _fail(self, reason: str) -> None:
        self._observer.inference_failed(model=self._config.model, reason=reason)
