"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

EscapeMode = Literal["single", "parity"]

DOT = "."
OPEN_PAREN = "("
CLOSE_PAREN = ")"


class TokenKind(str, Enum):
    """Role of one token in `collection.method(args)`."""

    IDENTIFIER = "identifier"
    DOT = "dot"
    OPEN_PAREN = "open_paren"
    ARGS_BLOB = "args_blob"
    CLOSE_PAREN = "close_paren"


# Position -> kind for the only accepted token layout.
CALL_LAYOUT: tuple[TokenKind, ...] = (
    TokenKind.IDENTIFIER,
    TokenKind.DOT,
    TokenKind.IDENTIFIER,
    TokenKind.OPEN_PAREN,
    TokenKind.ARGS_BLOB,
    TokenKind.CLOSE_PAREN,
)


@dataclass(frozen=True)
class ArgumentSpec:
    """One positional parameter of a collection method."""

    name: str
    accepts: tuple[type, ...]

    @property
    def expected(self) -> str:
        return " or ".join(json_type_name(kind) for kind in self.accepts)


@dataclass(frozen=True)
class MethodRule:
    """Arity and argument shape of a supported collection method."""

    name: str
    min_args: int
    params: tuple[ArgumentSpec, ...] = ()

    @property
    def max_args(self) -> int:
        return len(self.params)

    def describe_arity(self) -> str:
        if self.min_args == self.max_args:
            return str(self.min_args)
        return f"{self.min_args}-{self.max_args}"


@dataclass(frozen=True)
class ParsedCall:
    """Validated `collection.method(args)` call."""

    collection: str
    method: str
    arguments: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def to_dict(self) -> dict[str, Any]:
        return {"collection": self.collection, "method": self.method, "arguments": list(self.arguments)}


def json_type_name(value: Any) -> str:
    """Name a decoded value (or a Python type) with the JSON vocabulary used in messages."""

    kind = value if isinstance(value, type) else type(value)
    if kind is type(None):
        return "null"
    if issubclass(kind, bool):
        return "boolean"
    if issubclass(kind, (int, float)):
        return "number"
    if issubclass(kind, str):
        return "string"
    if issubclass(kind, list):
        return "sequence"
    if issubclass(kind, dict):
        return "mapping"
    return kind.__name__
