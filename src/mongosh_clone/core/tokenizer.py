"""Operation tokenizer."""

from __future__ import annotations

from collections.abc import Sequence

from mongosh_clone.core.strings import string_mask
from mongosh_clone.core.types import CALL_LAYOUT, CLOSE_PAREN, DOT, OPEN_PAREN, EscapeMode, TokenKind
from mongosh_clone.errors import StructuralError, UnbalancedStructureError

_FIXED_TOKENS = {TokenKind.DOT: DOT, TokenKind.OPEN_PAREN: OPEN_PAREN, TokenKind.CLOSE_PAREN: CLOSE_PAREN}


def tokenize(operation: str, escape_mode: EscapeMode = "single") -> list[str]:
    """Split a cleaned operation into identifier, `.`, `(`, args blob and `)` tokens.

    The args blob is emitted verbatim, even when empty, so ``coll.find()``
    still yields six tokens.
    """

    mask = string_mask(operation, escape_mode)
    tokens: list[str] = []
    current = ""
    index = 0

    while index < len(operation):
        char = operation[index]
        quoted = mask[index]

        if char == DOT and not quoted:
            _flush(tokens, current)
            current = ""
            tokens.append(DOT)
        elif char == OPEN_PAREN and not quoted:
            _flush(tokens, current)
            current = ""
            close = find_matching_paren(operation, index, mask)
            tokens.extend((OPEN_PAREN, operation[index + 1 : close], CLOSE_PAREN))
            index = close
        else:
            current += char

        index += 1

    _flush(tokens, current)
    return tokens


def find_matching_paren(operation: str, start: int, mask: Sequence[bool]) -> int:
    """Return the index of the `)` closing the `(` at `start`, skipping quoted parens."""

    depth = 1
    for index in range(start + 1, len(operation)):
        if mask[index]:
            continue
        char = operation[index]
        if char == OPEN_PAREN:
            depth += 1
        elif char == CLOSE_PAREN:
            depth -= 1
            if depth == 0:
                return index
    raise UnbalancedStructureError(
        operation[start:],
        paren_depth=depth,
        unterminated_string=mask[len(operation)],
    )


def validate_tokens(tokens: Sequence[str]) -> None:
    """Check the token stream has exactly the `collection.method(args)` layout."""

    if len(tokens) != len(CALL_LAYOUT):
        raise StructuralError(tokens)
    for position, kind in enumerate(CALL_LAYOUT):
        literal = _FIXED_TOKENS.get(kind)
        if literal is not None and tokens[position] != literal:
            raise StructuralError(tokens, f"expected {literal!r} at position {position}, got {tokens[position]!r}")


def _flush(tokens: list[str], current: str) -> None:
    fragment = current.strip()
    if fragment:
        tokens.append(fragment)
