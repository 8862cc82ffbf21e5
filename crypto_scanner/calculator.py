"""Arithmetic tools that a chat agent can call."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class MathError(Exception):
    """Raised when an arithmetic tool cannot produce a result."""

    def __init__(self, message: str = "Math error") -> None:
        super().__init__(message)


def _checked_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise MathError()
    return value


def _operand(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer, got {value!r}")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"field `{key}` is out of range for a 32-bit integer")
    return value


@dataclass(frozen=True)
class OperationArgs:
    """The two operands of a binary operation."""

    x: int
    y: int

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> OperationArgs:
        """Build arguments from decoded JSON, rejecting non-integer operands."""
        return cls(x=_operand(data, "x"), y=_operand(data, "y"))


@dataclass(frozen=True)
class ToolDefinition:
    """Name, description and JSON schema of a tool's parameters."""

    name: str
    description: str
    parameters: dict[str, Any] = field(default_factory=dict)


def _parameters(x_description: str, y_description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "x": {"type": "number", "description": x_description},
            "y": {"type": "number", "description": y_description},
        },
    }


class Adder:
    """Tool that adds two integers."""

    NAME: ClassVar[str] = "add"

    def definition(self, prompt: str) -> ToolDefinition:
        """Describe the tool; the prompt does not affect the definition."""
        del prompt
        return ToolDefinition(
            name=self.NAME,
            description="Add x and y together",
            parameters=_parameters(
                "The first number to add", "The second number to add"
            ),
        )

    def call(self, args: OperationArgs) -> int:
        """Return ``x + y``; raise MathError on 32-bit overflow."""
        print(f"[tool-call] Adding {args.x} and {args.y}")
        return _checked_i32(args.x + args.y)


class Subtract:
    """Tool that subtracts one integer from another."""

    NAME: ClassVar[str] = "subtract"

    def definition(self, prompt: str) -> ToolDefinition:
        """Describe the tool; the prompt does not affect the definition."""
        del prompt
        return ToolDefinition(
            name=self.NAME,
            description="Subtract y from x (i.e.: x - y)",
            parameters=_parameters(
                "The number to subtract from", "The number to subtract"
            ),
        )

    def call(self, args: OperationArgs) -> int:
        """Return ``x - y``; raise MathError on 32-bit overflow."""
        print(f"[tool-call] Subtracting {args.y} from {args.x}")
        return _checked_i32(args.x - args.y)