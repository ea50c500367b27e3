from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest


class FakeCollection:
    """In-memory stand-in exposing the pymongo collection methods the executor calls."""

    def __init__(self, name: str, documents: list[dict[str, Any]] | None = None) -> None:
        self.name = name
        self.documents = list(documents or [])
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.dropped = False

    def _record(self, method: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((method, args, kwargs))

    def _matches(self, document: dict[str, Any], filter_: dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in filter_.items())

    def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        self._record("insert_one", document)
        self.documents.append(document)
        return SimpleNamespace(inserted_id=len(self.documents))

    def insert_many(self, documents: list[dict[str, Any]]) -> SimpleNamespace:
        self._record("insert_many", documents)
        start = len(self.documents)
        self.documents.extend(documents)
        return SimpleNamespace(inserted_ids=list(range(start + 1, len(self.documents) + 1)))

    def find(self, filter_: dict[str, Any], projection: dict[str, Any] | None = None) -> Any:
        self._record("find", filter_, projection)
        return iter([doc for doc in self.documents if self._matches(doc, filter_)])

    def find_one(self, filter_: dict[str, Any], projection: dict[str, Any] | None = None) -> Any:
        self._record("find_one", filter_, projection)
        return next((doc for doc in self.documents if self._matches(doc, filter_)), None)

    def update_one(self, filter_: dict[str, Any], update: Any, **options: Any) -> SimpleNamespace:
        self._record("update_one", filter_, update, **options)
        matched = 1 if any(self._matches(doc, filter_) for doc in self.documents) else 0
        return SimpleNamespace(matched_count=matched, modified_count=matched, upserted_id=None)

    def update_many(self, filter_: dict[str, Any], update: Any, **options: Any) -> SimpleNamespace:
        self._record("update_many", filter_, update, **options)
        matched = sum(1 for doc in self.documents if self._matches(doc, filter_))
        return SimpleNamespace(matched_count=matched, modified_count=matched, upserted_id=None)

    def delete_one(self, filter_: dict[str, Any]) -> SimpleNamespace:
        self._record("delete_one", filter_)
        for index, doc in enumerate(self.documents):
            if self._matches(doc, filter_):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def delete_many(self, filter_: dict[str, Any]) -> SimpleNamespace:
        self._record("delete_many", filter_)
        kept = [doc for doc in self.documents if not self._matches(doc, filter_)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)

    def count_documents(self, filter_: dict[str, Any]) -> int:
        self._record("count_documents", filter_)
        return sum(1 for doc in self.documents if self._matches(doc, filter_))

    def drop(self) -> None:
        self._record("drop")
        self.dropped = True
        self.documents = []


@pytest.fixture
def movies() -> FakeCollection:
    return FakeCollection(
        "movies",
        [
            {"title": "The Matrix", "year": 1999},
            {"title": "Heat", "year": 1995},
            {"title": "Fight Club", "year": 1999},
        ],
    )
