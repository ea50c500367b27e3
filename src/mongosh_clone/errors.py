"""Application-level exception types for mongosh-clone."""

from __future__ import annotations

from collections.abc import Sequence


class MongoshCloneError(Exception):
    """Base exception for mongosh-clone."""


class ConfigurationError(MongoshCloneError):
    """Raised when settings values are invalid."""


class OperationParseError(MongoshCloneError):
    """Base exception for operation strings that cannot be turned into a call."""


class StructuralError(OperationParseError):
    """Raised when the token stream is not `collection.method(args)`."""

    def __init__(self, tokens: Sequence[str], reason: str | None = None) -> None:
        self.tokens = list(tokens)
        self.count = len(self.tokens)
        self.reason = reason or f"expected 6 tokens, got {self.count}"
        super().__init__(
            f"Invalid operation format. Use: collection.method(args). {self.reason}; tokens: {self.tokens!r}"
        )


class UnbalancedStructureError(OperationParseError):
    """Raised when braces, brackets, parens or quotes are left open."""

    def __init__(
        self,
        text: str,
        *,
        brace_depth: int = 0,
        bracket_depth: int = 0,
        paren_depth: int = 0,
        unterminated_string: bool = False,
    ) -> None:
        self.text = text
        self.brace_depth = brace_depth
        self.bracket_depth = bracket_depth
        self.paren_depth = paren_depth
        self.unterminated_string = unterminated_string

        problems = []
        if brace_depth:
            problems.append(f"brace depth {brace_depth}")
        if bracket_depth:
            problems.append(f"bracket depth {bracket_depth}")
        if paren_depth:
            problems.append(f"paren depth {paren_depth}")
        if unterminated_string:
            problems.append("unterminated string")
        super().__init__(f"Unbalanced structure in {text!r}: {', '.join(problems) or 'unknown'}")


class ArgumentDecodeError(OperationParseError):
    """Raised when one argument segment is not valid JSON."""

    def __init__(self, segment: str, message: str) -> None:
        self.segment = segment
        self.message = message
        super().__init__(f'Invalid JSON argument: "{segment}". {message}')


class InvalidIdentifierError(OperationParseError):
    """Raised when a collection or method name fails the identifier grammar."""

    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f'Invalid {kind} name: "{value}"')


class UnsupportedMethodError(OperationParseError):
    """Raised when the method is not a known collection operation."""

    def __init__(self, method: str, supported: Sequence[str] = ()) -> None:
        self.method = method
        self.supported = tuple(supported)
        message = f"Unsupported operation: {method}"
        if self.supported:
            message += f". Supported operations: {', '.join(self.supported)}"
        super().__init__(message)


class ArityError(OperationParseError):
    """Raised when a method receives too few or too many arguments."""

    def __init__(self, method: str, expected: str, actual: int) -> None:
        self.method = method
        self.expected = expected
        self.actual = actual
        super().__init__(f"{method} expects {expected} argument(s), got {actual}")


class ArgumentTypeError(OperationParseError):
    """Raised when a decoded argument has the wrong JSON type for its position."""

    def __init__(self, method: str, index: int, expected: str, actual: str) -> None:
        self.method = method
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(f"{method} argument {index} must be a {expected}, got {actual}")


class OperationExecutionError(MongoshCloneError):
    """Raised when the driver fails while running a parsed call."""

    def __init__(self, method: str, collection: str, message: str) -> None:
        self.method = method
        self.collection = collection
        self.message = message
        super().__init__(f"{collection}.{method} failed: {message}")
