"""Operation parser: raw shell argument to validated call."""

from __future__ import annotations

from loguru import logger

from mongosh_clone.core.arguments import decode_arguments, split_arguments
from mongosh_clone.core.strings import clean
from mongosh_clone.core.tokenizer import tokenize, validate_tokens
from mongosh_clone.core.types import EscapeMode, ParsedCall
from mongosh_clone.core.validator import validate_call


class OperationParser:
    """Namespace for the parsing pipeline; holds no state."""

    @staticmethod
    def parse(raw: str, escape_mode: EscapeMode = "single") -> ParsedCall:
        return parse(raw, escape_mode=escape_mode)

    @staticmethod
    def validate(call: ParsedCall) -> None:
        validate_call(call.collection, call.method, call.arguments)


def parse(raw: str, *, escape_mode: EscapeMode = "single") -> ParsedCall:
    """Parse `collection.method(args)` into a validated `ParsedCall`.

    Raises a subclass of `OperationParseError` on any malformed input.
    """

    logger.debug("operation.parse original={!r}", raw)
    cleaned = clean(raw)
    logger.debug("operation.parse cleaned={!r}", cleaned)

    tokens = tokenize(cleaned, escape_mode)
    logger.debug("operation.parse tokens={!r}", tokens)
    validate_tokens(tokens)

    collection, _, method, _, args_blob, _ = tokens
    segments = split_arguments(args_blob, escape_mode)
    arguments = decode_arguments(segments)
    validate_call(collection, method, arguments)

    call = ParsedCall(collection=collection, method=method, arguments=tuple(arguments))
    logger.debug("operation.parse call={!r}", call)
    return call
