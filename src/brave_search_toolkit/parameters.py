from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StringParameter:
    name: str
    description: str
    required: bool = True

    def to_schema(self) -> dict[str, Any]:
        return {"type": "string", "description": self.description}


@dataclass(frozen=True)
class NumberParameter:
    name: str
    description: str
    required: bool = True
    integer: bool = False
    minimum: int | float | None = None
    maximum: int | float | None = None

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "integer" if self.integer else "number",
            "description": self.description,
        }
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        return schema


Parameter = StringParameter | NumberParameter
