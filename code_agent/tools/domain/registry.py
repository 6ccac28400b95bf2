"""ToolRegistry — immutable name → ToolDefinition mapping built once at startup."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from code_agent.tools.domain.definition import ToolDefinition
from code_agent.tools.domain.errors import (
    DuplicateToolError,
    InvalidToolDefinitionError,
)


class ToolRegistry:
    """Read-only lookup of tool definitions by exact, case-sensitive name.

    Registration order is preserved; it is the order tools are advertised to
    the model. register() never mutates the receiver, so a registry can be
    shared freely once the agent is running.
    """

    def __init__(self, definitions: Iterable[ToolDefinition] = ()) -> None:
        tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            _check_definition(definition=definition, existing=tools)
            tools[definition.name] = definition
        self._tools = MappingProxyType(tools)

    def register(self, definition: ToolDefinition) -> "ToolRegistry":
        """Return a new registry containing every current tool plus definition.

        Raises:
            DuplicateToolError: if a tool with the same name is already registered.
            InvalidToolDefinitionError: if the definition has an empty name.
        """
        return ToolRegistry(definitions=[*self._tools.values(), definition])

    def lookup(self, name: str) -> ToolDefinition | None:
        """Return the tool registered under name, or None when there is none."""
        return self._tools.get(name)

    @property
    def definitions(self) -> tuple[ToolDefinition, ...]:
        return tuple(self._tools.values())

    @property
    def names(self) -> list[str]:
        return list(self._tools.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def _check_definition(
    definition: ToolDefinition, existing: dict[str, ToolDefinition]
) -> None:
    if not definition.name:
        raise InvalidToolDefinitionError(reason="tool name must not be empty")
    if definition.name in existing:
        raise DuplicateToolError(name=definition.name)
