"""Dispatch parsed calls to a driver collection handle."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from mongosh_clone.core.types import ParsedCall
from mongosh_clone.errors import OperationExecutionError

CollectionResolver = Callable[[str], Any]


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one executed call."""

    collection: str
    method: str
    summary: str
    payload: Any = None
    found: bool = True


def _arg(arguments: Sequence[Any], index: int, default: Any = None) -> Any:
    if index < len(arguments) and arguments[index] is not None:
        return arguments[index]
    return default


class OperationExecutor:
    """Run a `ParsedCall` against a pymongo-compatible collection.

    The resolver maps a collection name to a handle exposing the driver's
    snake_case methods (`insert_one`, `find`, `update_many`, ...).
    """

    def __init__(self, resolve_collection: CollectionResolver) -> None:
        self._resolve_collection = resolve_collection
        self._handlers: dict[str, Callable[[Any, ParsedCall], OperationResult]] = {
            "insertOne": self._insert_one,
            "insertMany": self._insert_many,
            "find": self._find,
            "findOne": self._find_one,
            "updateOne": self._update,
            "updateMany": self._update,
            "deleteOne": self._delete,
            "deleteMany": self._delete,
            "countDocuments": self._count_documents,
            "drop": self._drop,
        }

    def execute(self, call: ParsedCall) -> OperationResult:
        handler = self._handlers.get(call.method)
        if handler is None:
            raise OperationExecutionError(call.method, call.collection, "unsupported operation")

        logger.info("operation.execute collection={} method={}", call.collection, call.method)
        try:
            collection = self._resolve_collection(call.collection)
            return handler(collection, call)
        except Exception as exc:
            logger.opt(exception=True).debug("operation.execute.error method={}", call.method)
            raise OperationExecutionError(call.method, call.collection, str(exc)) from exc

    def _insert_one(self, collection: Any, call: ParsedCall) -> OperationResult:
        result = collection.insert_one(call.arguments[0])
        return self._result(call, "Document inserted successfully", {"insertedId": result.inserted_id})

    def _insert_many(self, collection: Any, call: ParsedCall) -> OperationResult:
        result = collection.insert_many(call.arguments[0])
        inserted_ids = list(result.inserted_ids)
        return self._result(
            call,
            f"{len(inserted_ids)} documents inserted successfully",
            {"insertedCount": len(inserted_ids), "insertedIds": inserted_ids},
        )

    def _find(self, collection: Any, call: ParsedCall) -> OperationResult:
        documents = list(collection.find(_arg(call.arguments, 0, {}), _arg(call.arguments, 1)))
        return self._result(call, f"Found {len(documents)} document(s):", documents)

    def _find_one(self, collection: Any, call: ParsedCall) -> OperationResult:
        document = collection.find_one(_arg(call.arguments, 0, {}), _arg(call.arguments, 1))
        if document is None:
            return OperationResult(call.collection, call.method, "No document found", None, found=False)
        return self._result(call, "Document found:", document)

    def _update(self, collection: Any, call: ParsedCall) -> OperationResult:
        method = collection.update_one if call.method == "updateOne" else collection.update_many
        options = _arg(call.arguments, 2, {})
        result = method(call.arguments[0], call.arguments[1], **options)
        payload = {
            "matchedCount": result.matched_count,
            "modifiedCount": result.modified_count,
            "upsertedId": result.upserted_id,
        }
        return self._result(call, f"Modified {result.modified_count} document(s)", payload)

    def _delete(self, collection: Any, call: ParsedCall) -> OperationResult:
        method = collection.delete_one if call.method == "deleteOne" else collection.delete_many
        result = method(call.arguments[0])
        return self._result(call, f"Deleted {result.deleted_count} document(s)", {"deletedCount": result.deleted_count})

    def _count_documents(self, collection: Any, call: ParsedCall) -> OperationResult:
        count = collection.count_documents(_arg(call.arguments, 0, {}))
        return self._result(call, f"Count: {count}", count)

    def _drop(self, collection: Any, call: ParsedCall) -> OperationResult:
        collection.drop()
        return self._result(call, f"Collection '{call.collection}' dropped")

    @staticmethod
    def _result(call: ParsedCall, summary: str, payload: Any = None) -> OperationResult:
        return OperationResult(call.collection, call.method, summary, payload)
