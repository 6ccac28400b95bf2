"""Tests for CompositeAgentLoopObserver and CompositeToolObserver."""

from code_agent.agent.infrastructure.composite_observer import (
    CompositeAgentLoopObserver,
    CompositeToolObserver,
)
from tests.agent.fake_observer import FakeAgentLoopObserver
from tests.tools.fake_observer import FakeToolObserver


def _make_loop_composite(
    *observers: FakeAgentLoopObserver,
) -> CompositeAgentLoopObserver:
    return CompositeAgentLoopObserver(observers=list(observers))


def _make_tool_composite(*observers: FakeToolObserver) -> CompositeToolObserver:
    return CompositeToolObserver(observers=list(observers))


class TestCompositeAgentLoopObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_session_events_forwarded_to_all(self) -> None:
        obs_a = FakeAgentLoopObserver()
        obs_b = FakeAgentLoopObserver()
        composite = _make_loop_composite(obs_a, obs_b)

        composite.session_started(tool_names=["read_file"])
        composite.session_ended(turns_handled=2)

        for obs in (obs_a, obs_b):
            assert obs.sessions_started[0].tool_names == ["read_file"]
            assert obs.sessions_ended[0].turns_handled == 2

    def test_trimmed_preserves_fields(self) -> None:
        obs = FakeAgentLoopObserver()

        _make_loop_composite(obs).conversation_trimmed(dropped=11, retained=10)

        assert obs.trimmed[0].dropped == 11
        assert obs.trimmed[0].retained == 10

    def test_reply_halt_and_limit_forwarded(self) -> None:
        obs_a = FakeAgentLoopObserver()
        obs_b = FakeAgentLoopObserver()
        composite = _make_loop_composite(obs_a, obs_b)

        composite.assistant_replied(text="done")
        composite.turn_halted_on_tool_failure(failed_tools=["edit_file"])
        composite.round_limit_exceeded(max_rounds=10)

        for obs in (obs_a, obs_b):
            assert obs.replies[0].text == "done"
            assert obs.halted[0].failed_tools == ["edit_file"]
            assert obs.round_limits[0].max_rounds == 10

    def test_empty_composite_is_a_no_op(self) -> None:
        composite = _make_loop_composite()

        composite.assistant_replied(text="nobody listens")


class TestCompositeToolObserverFanOut:
    def test_tool_events_forwarded_to_all(self) -> None:
        obs_a = FakeToolObserver()
        obs_b = FakeToolObserver()
        composite = _make_tool_composite(obs_a, obs_b)

        composite.tool_invoked(tool_call_id="c1", tool_name="read_file", arguments="{}")
        composite.tool_succeeded(
            tool_call_id="c1", tool_name="read_file", duration_ms=4
        )
        composite.tool_failed(tool_call_id="c2", tool_name="edit_file", reason="boom")
        composite.tool_not_found(tool_call_id="c3", tool_name="nope")

        for obs in (obs_a, obs_b):
            assert obs.invoked[0].arguments == "{}"
            assert obs.succeeded[0].duration_ms == 4
            assert obs.failed[0].reason == "boom"
            assert obs.not_found[0].tool_name == "nope"
