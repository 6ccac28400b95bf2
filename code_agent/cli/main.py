"""CLI entrypoint for code-agent: a typer app with one interactive `chat` command."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from code_agent.agent.application.loop import AgentLoop
from code_agent.agent.infrastructure.composite_observer import (
    CompositeAgentLoopObserver,
    CompositeToolObserver,
)
from code_agent.agent.infrastructure.console import (
    ConsoleTranscriptObserver,
    ConsoleUserInput,
)
from code_agent.agent.infrastructure.observer import StructlogAgentLoopObserver
from code_agent.config.domain.config import AgentConfig
from code_agent.config.infrastructure.loader import AgentConfigLoader
from code_agent.config.infrastructure.observer import StructlogConfigObserver
from code_agent.conversation.domain.store import ConversationStore
from code_agent.core.errors import CodeAgentError
from code_agent.inference.infrastructure.litellm import LiteLLMInferenceClient
from code_agent.inference.infrastructure.observer import StructlogInferenceObserver
from code_agent.tools.application.invoker import ToolInvoker
from code_agent.tools.domain.classifier import create_outcome_classifier
from code_agent.tools.infrastructure.builtin import create_builtin_registry
from code_agent.tools.infrastructure.observer import StructlogToolObserver

app = typer.Typer(add_completion=False)

_LOG_LEVELS = ("debug", "info", "warning", "error")


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr so stdout carries only the chat."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        sys.exit(1)

    if log_level.lower() not in _LOG_LEVELS:
        typer.echo(
            f"Invalid log level: {log_level!r}. "
            f"Must be one of {', '.join(_LOG_LEVELS)}."
        )
        sys.exit(1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[log_level.upper()]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_agent_loop(config: AgentConfig, console: Console, root: Path) -> AgentLoop:
    """Construct the agent loop and every collaborator it needs, once, at startup.

    Raises:
        DuplicateToolError: if two built-in tools share a name.
    """
    registry = create_builtin_registry(root=root)
    transcript = ConsoleTranscriptObserver(console=console)

    invoker = ToolInvoker(
        registry=registry,
        observer=CompositeToolObserver(observers=[StructlogToolObserver(), transcript]),
    )
    inference_client = LiteLLMInferenceClient(
        config=config.inference,
        observer=StructlogInferenceObserver(),
    )
    store = ConversationStore(
        high_water_mark=config.retention.high_water_mark,
        low_water_mark=config.retention.low_water_mark,
        respect_tool_pairs=config.retention.respect_tool_pairs,
    )

    return AgentLoop(
        store=store,
        inference_client=inference_client,
        registry=registry,
        invoker=invoker,
        classifier=create_outcome_classifier(detection=config.failure_detection),
        user_input=ConsoleUserInput(console=console),
        observer=CompositeAgentLoopObserver(
            observers=[StructlogAgentLoopObserver(), transcript]
        ),
        max_rounds=config.max_rounds,
    )


@app.command()
def chat(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to an optional agent config YAML",
    ),
    model: str | None = typer.Option(
        None, "--model", "-m", help="LiteLLM model string, e.g. gpt-4o-mini"
    ),
    max_rounds: int | None = typer.Option(
        None,
        "--max-rounds",
        min=1,
        help="Maximum inference calls per user message",
    ),
    max_tokens: int | None = typer.Option(
        None, "--max-tokens", min=1, help="Maximum output tokens per inference call"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Log level: debug, info, warning or error",
    ),
) -> None:
    """Chat with a model that can read, list and edit files in the current directory."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)

        loader = AgentConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(
            path=config_path,
            overrides={
                "inference": {"model": model, "max_tokens": max_tokens},
                "max_rounds": max_rounds,
            },
        )

        console = Console()
        agent_loop = build_agent_loop(config=config, console=console, root=Path.cwd())

        typer.echo(f"Chat with {config.inference.model} (use 'ctrl-c' to quit)")
        asyncio.run(agent_loop.run())

    except KeyboardInterrupt:
        typer.echo("\nSession interrupted.")
        sys.exit(130)
    except CodeAgentError as exc:
        typer.echo(f"Error: {exc}")
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
