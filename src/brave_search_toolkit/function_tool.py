from __future__ import annotations

from typing import Any, Awaitable, Callable, Sequence

from brave_search_toolkit.parameters import Parameter
from brave_search_toolkit.tool import ToolResult

ToolCallback = Callable[[dict[str, Any]], Awaitable[ToolResult]]


class FunctionTool:
    """A named tool backed by an async callback.

    The declared parameters drive both ``input_schema`` (the bare JSON schema)
    and ``to_function_schema`` (the OpenAI-style function envelope hosts use).
    """

    def __init__(
        self,
        name: str,
        description: str,
        parameters: Sequence[Parameter],
        callback: ToolCallback,
    ) -> None:
        self._name = name
        self._description = description
        self._parameters = list(parameters)
        self._callback = callback

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def parameters(self) -> list[Parameter]:
        return list(self._parameters)

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self._parameters},
            "required": [p.name for p in self._parameters if p.required],
        }

    def to_function_schema(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self._name,
                "description": self._description,
                "parameters": self.input_schema,
            },
        }

    async def execute(self, tool_input: dict[str, Any]) -> ToolResult:
        return await self._callback(tool_input)
