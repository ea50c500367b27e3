"""Argument splitting and JSON decoding."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from mongosh_clone.core.strings import STRING_QUOTES, is_escaped
from mongosh_clone.core.types import EscapeMode
from mongosh_clone.errors import ArgumentDecodeError, UnbalancedStructureError

_OPENERS = {"{": "brace", "[": "bracket"}
_CLOSERS = {"}": "brace", "]": "bracket"}


def split_arguments(args_blob: str, escape_mode: EscapeMode = "single") -> list[str]:
    """Split an args blob on top-level commas.

    Commas nested in objects, arrays or strings stay inside their segment.
    Returned segments are trimmed and keep their left-to-right order.
    """

    if not args_blob.strip():
        return []

    segments: list[str] = []
    current: list[str] = []
    depth = {"brace": 0, "bracket": 0}
    inside = False
    quote = ""

    for index, char in enumerate(args_blob):
        if char in STRING_QUOTES and not is_escaped(args_blob, index, escape_mode):
            if not inside:
                inside, quote = True, char
            elif char == quote:
                inside, quote = False, ""
        elif not inside:
            if char in _OPENERS:
                depth[_OPENERS[char]] += 1
            elif char in _CLOSERS:
                depth[_CLOSERS[char]] -= 1
            elif char == "," and depth["brace"] == 0 and depth["bracket"] == 0:
                segments.append("".join(current).strip())
                current = []
                continue
        current.append(char)

    if depth["brace"] or depth["bracket"] or inside:
        raise UnbalancedStructureError(
            args_blob,
            brace_depth=depth["brace"],
            bracket_depth=depth["bracket"],
            unterminated_string=inside,
        )

    tail = "".join(current).strip()
    if tail:
        segments.append(tail)
    return segments


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_argument(segment: str) -> Any:
    """Decode one segment as strict JSON."""

    text = segment.strip()
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ArgumentDecodeError(text, f"{exc.msg} (line {exc.lineno} column {exc.colno})") from exc
    except ValueError as exc:
        raise ArgumentDecodeError(text, str(exc)) from exc
    except RecursionError as exc:
        raise ArgumentDecodeError(text, "nesting too deep") from exc


def decode_arguments(segments: Iterable[str]) -> list[Any]:
    """Decode every segment in order; the first bad one raises."""

    return [decode_argument(segment) for segment in segments]
