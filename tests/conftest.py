"""Shared fixtures for index-bench tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from pymongo.errors import OperationFailure

from index_bench.random_stream import RandomStream
from index_bench.registry import Registry

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCENARIOS_DIR = PROJECT_ROOT / "scenarios"


class FakeCollection:
    """Records the calls a setup function makes against a collection."""

    def __init__(self, name: str = "fake", fail_on: str | None = None):
        self.name = name
        self.fail_on = fail_on
        self.calls: list[str] = []
        self.documents: list[dict[str, Any]] = []
        self.indexes: list[tuple[list, dict[str, Any]]] = []

    def _maybe_fail(self, method: str) -> None:
        if self.fail_on == method:
            raise OperationFailure(f"{method} rejected")

    def drop(self) -> None:
        self._maybe_fail("drop")
        self.calls.append("drop")
        self.documents.clear()
        self.indexes.clear()

    def insert_one(self, document: dict[str, Any]) -> None:
        self._maybe_fail("insert_one")
        self.calls.append("insert_one")
        self.documents.append(document)

    def create_index(self, keys: list, **options: Any) -> str:
        self._maybe_fail("create_index")
        self.calls.append("create_index")
        self.indexes.append((keys, options))
        return "_".join(f"{k}_{d}" for k, d in keys)


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def rng() -> RandomStream:
    return RandomStream(11010)


@pytest.fixture
def registry() -> Registry:
    return Registry()
