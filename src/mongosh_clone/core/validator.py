"""Call validation against the supported method table."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from mongosh_clone.core.types import ArgumentSpec, MethodRule, json_type_name
from mongosh_clone.errors import ArgumentTypeError, ArityError, InvalidIdentifierError, UnsupportedMethodError

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")

_MAPPING = (dict,)
_SEQUENCE = (list,)
_UPDATE = (dict, list)  # update document or aggregation pipeline

FILTER = ArgumentSpec("filter", _MAPPING)
PROJECTION = ArgumentSpec("projection", _MAPPING)
UPDATE = ArgumentSpec("update", _UPDATE)
OPTIONS = ArgumentSpec("options", _MAPPING)

METHOD_RULES: dict[str, MethodRule] = {
    rule.name: rule
    for rule in (
        MethodRule("insertOne", 1, (ArgumentSpec("document", _MAPPING),)),
        MethodRule("insertMany", 1, (ArgumentSpec("documents", _SEQUENCE),)),
        MethodRule("find", 0, (FILTER, PROJECTION)),
        MethodRule("findOne", 0, (FILTER, PROJECTION)),
        MethodRule("updateOne", 2, (FILTER, UPDATE, OPTIONS)),
        MethodRule("updateMany", 2, (FILTER, UPDATE, OPTIONS)),
        MethodRule("deleteOne", 1, (FILTER,)),
        MethodRule("deleteMany", 1, (FILTER,)),
        MethodRule("countDocuments", 0, (FILTER,)),
        MethodRule("drop", 0),
    )
}

SUPPORTED_METHODS: tuple[str, ...] = tuple(METHOD_RULES)


def is_valid_identifier(name: str) -> bool:
    """Letters or underscore first, then letters, digits, `_`, `.` or `-`."""

    return IDENTIFIER_RE.fullmatch(name) is not None


def get_rule(method: str) -> MethodRule:
    """Look up the rule for `method`, raising `UnsupportedMethodError` if unknown."""

    rule = METHOD_RULES.get(method)
    if rule is None:
        raise UnsupportedMethodError(method, SUPPORTED_METHODS)
    return rule


def validate_call(collection: str, method: str, arguments: Sequence[Any]) -> MethodRule:
    """Validate names, arity and argument shapes; return the matched rule."""

    if not is_valid_identifier(collection):
        raise InvalidIdentifierError("collection", collection)
    if not is_valid_identifier(method):
        raise InvalidIdentifierError("method", method)

    rule = get_rule(method)
    actual = len(arguments)
    if actual < rule.min_args:
        raise ArityError(method, f">={rule.min_args}", actual)
    if actual > rule.max_args:
        raise ArityError(method, f"<={rule.max_args}", actual)

    for index, (spec, value) in enumerate(zip(rule.params, arguments)):
        # null in an optional slot means "use the default"
        if value is None and index >= rule.min_args:
            continue
        if not isinstance(value, spec.accepts):
            raise ArgumentTypeError(method, index, spec.expected, json_type_name(value))
    return rule
