from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class ToolResultStatus(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ToolResult:
    status: ToolResultStatus
    content: str

    @classmethod
    def success(cls, content: str) -> "ToolResult":
        return cls(ToolResultStatus.SUCCESS, content)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(ToolResultStatus.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.status is ToolResultStatus.ERROR


@runtime_checkable
class Tool(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def input_schema(self) -> dict[str, Any]: ...

    async def execute(self, tool_input: dict[str, Any]) -> ToolResult: ...
