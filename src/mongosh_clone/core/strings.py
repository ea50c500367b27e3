"""String boundary tracking and shell quote stripping."""

from __future__ import annotations

from collections.abc import Iterator

from mongosh_clone.core.types import EscapeMode

STRING_QUOTES = ("'", '"')
SHELL_QUOTES = ("'", '"', "`")
BACKSLASH = "\\"


def is_escaped(text: str, index: int, escape_mode: EscapeMode = "single") -> bool:
    """Return whether the character at `index` is escaped by preceding backslashes.

    In ``single`` mode one backslash right before the character escapes it.
    In ``parity`` mode the character is escaped only by an odd run of backslashes,
    so ``"path\\\\"`` closes its string.
    """

    if escape_mode == "single":
        return index > 0 and text[index - 1] == BACKSLASH

    run = 0
    cursor = index - 1
    while cursor >= 0 and text[cursor] == BACKSLASH:
        run += 1
        cursor -= 1
    return run % 2 == 1


def iter_string_states(text: str, escape_mode: EscapeMode = "single") -> Iterator[bool]:
    """Yield the inside-string flag before each character, then once after the last one."""

    inside = False
    quote = ""
    for index, char in enumerate(text):
        yield inside
        if char not in STRING_QUOTES or is_escaped(text, index, escape_mode):
            continue
        if not inside:
            inside, quote = True, char
        elif char == quote:
            inside, quote = False, ""
    yield inside


def string_mask(text: str, escape_mode: EscapeMode = "single") -> list[bool]:
    """Precompute `is_inside_string(text, p)` for every `p` in ``0..len(text)``."""

    return list(iter_string_states(text, escape_mode))


def is_inside_string(text: str, position: int, escape_mode: EscapeMode = "single") -> bool:
    """Return whether `position` lies inside a quoted string of `text`.

    Only ``text[:position]`` is scanned. Backticks never delimit strings here.
    """

    if position <= 0:
        return False
    position = min(position, len(text))
    return string_mask(text[:position], escape_mode)[position]


def clean(raw: str) -> str:
    """Strip one layer of matching outer shell quotes and surrounding whitespace."""

    text = raw.strip()
    if len(text) > 1 and text[0] in SHELL_QUOTES and text[0] == text[-1]:
        text = text[1:-1]
    return text
