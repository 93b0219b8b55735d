"""Synthetic document generators.

Each generator is a small strategy object: ``generate(seed)`` returns one fresh
document built from a fixed list of field paths. Generators are also callable,
so ``generator(seed)`` works wherever a plain function is expected.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Protocol

from .errors import ConfigurationError
from .fields import parse_field_path

logger = logging.getLogger(__name__)

Document = dict[str, Any]


class Conflict(str, Enum):
    """What to do when a dotted path runs through a non-mapping value."""

    OVERWRITE = "overwrite"
    ERROR = "error"


class InsertableCollection(Protocol):
    def insert_one(self, document: Document) -> Any: ...


def set_dotted(
    doc: Document,
    path: str,
    value: Any,
    conflict: Conflict = Conflict.OVERWRITE,
) -> Document:
    """Set ``value`` at a dotted ``path``, creating nested mappings on the way.

    With ``Conflict.OVERWRITE`` an intermediate value that is not a mapping
    (a scalar or an array) is replaced by a fresh empty mapping. With
    ``Conflict.ERROR`` the same situation raises ``ConfigurationError``.

    Example:
        set_dotted({"a": 1}, "a.b", 5) == {"a": {"b": 5}}

    Returns:
        The same ``doc``, for chaining
    """
    segments = parse_field_path(path)
    current = doc
    for segment in segments[:-1]:
        current = _ensure_mapping(current, segment, path, conflict)
    current[segments[-1]] = value
    return doc


def _ensure_mapping(
    parent: Document, key: str, path: str, conflict: Conflict
) -> Document:
    """Return the mapping stored at ``parent[key]``, creating it if needed."""
    child = parent.get(key)
    if isinstance(child, dict):
        return child
    if child is not None and conflict == Conflict.ERROR:
        raise ConfigurationError(
            f"Cannot expand {path!r}: {key!r} holds {type(child).__name__}, not a mapping"
        )
    child = {}
    parent[key] = child
    return child


class DocumentGenerator(ABC):
    """Base class for document generators over a non-empty field list."""

    def __init__(self, fields: list[str]):
        if not fields:
            raise ConfigurationError(
                f"{type(self).__name__} requires at least one field"
            )
        for path in fields:
            parse_field_path(path)
        self.fields = list(fields)

    @abstractmethod
    def generate(self, seed: int) -> Document:
        """Build the document for ``seed``."""

    def __call__(self, seed: int) -> Document:
        return self.generate(seed)

    def describe(self) -> dict[str, Any]:
        """Return a JSON-serializable summary of this generator."""
        return {"type": type(self).__name__, "fields": list(self.fields)}


class ScalarGenerator(DocumentGenerator):
    """Sets every field path to the seed itself.

    Example:
        ScalarGenerator(["a.b", "c"]).generate(5) == {"a": {"b": 5}, "c": 5}
    """

    def __init__(self, fields: list[str], conflict: Conflict = Conflict.OVERWRITE):
        super().__init__(fields)
        self.conflict = conflict

    def generate(self, seed: int) -> Document:
        doc: Document = {}
        for path in self.fields:
            set_dotted(doc, path, seed, self.conflict)
        return doc


class _ArrayGenerator(DocumentGenerator):
    def __init__(self, fields: list[str], array_size: int):
        super().__init__(fields)
        if array_size < 0:
            raise ConfigurationError(f"Array size must be non-negative, got {array_size}")
        self.array_size = array_size

    def describe(self) -> dict[str, Any]:
        result = super().describe()
        result["array_size"] = self.array_size
        return result


class SharedArrayGenerator(_ArrayGenerator):
    """Gives every field the same run of consecutive integers around the seed.

    Example:
        SharedArrayGenerator(["x"], 4).generate(0) == {"x": [-2, -1, 0, 1]}
    """

    step = 1

    def values(self, seed: int) -> list[int]:
        offset = math.ceil(self.array_size / 2)
        return [seed + (j - offset) * self.step for j in range(self.array_size)]

    def generate(self, seed: int) -> Document:
        value = self.values(seed)
        return {name: value for name in self.fields}


class SpacedSharedArrayGenerator(SharedArrayGenerator):
    """Like SharedArrayGenerator, but the values are spaced 10 apart.

    Example:
        SpacedSharedArrayGenerator(["x"], 4).generate(0) == {"x": [-20, -10, 0, 10]}
    """

    step = 10


class RotatingSingleArrayGenerator(_ArrayGenerator):
    """Puts ``[0 .. array_size-1]`` in exactly one field, chosen by the seed.

    Field ``seed % len(fields)`` is the only key in the document, so a collection
    built with consecutive seeds has every path multikey in some documents but
    no document with more than one array.

    Example:
        RotatingSingleArrayGenerator(["x", "y"], 3).generate(3) == {"y": [0, 1, 2]}
    """

    def generate(self, seed: int) -> Document:
        name = self.fields[seed % len(self.fields)]
        return {name: list(range(self.array_size))}


def populate_collection(
    generator: DocumentGenerator, collection: InsertableCollection, count: int
) -> None:
    """Insert ``count`` documents, generated from seeds ``0 .. count-1``."""
    for seed in range(count):
        collection.insert_one(generator(seed))
    logger.debug("Inserted %d documents from %s", count, type(generator).__name__)
