"""Data models for index-bench."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class OpKind(str, Enum):
    """Operation kinds understood by the benchmark runner."""

    FIND = "find"
    LET = "let"


@dataclass(frozen=True)
class QueryOp:
    """One runner operation: a find with a query, or a variable binding.

    Operations are shared between a case and its baseline, so ``query`` and
    ``value`` are read-only once built. Unhashable, since they hold dicts.
    """

    __hash__ = None  # type: ignore[assignment]

    op: OpKind
    query: dict[str, Any] | None = None
    target: str | None = None
    value: Any = None

    @staticmethod
    def find(query: dict[str, Any]) -> QueryOp:
        """Create a find operation."""
        return QueryOp(op=OpKind.FIND, query=query)

    @staticmethod
    def let(target: str, value: Any) -> QueryOp:
        """Create an operation binding ``value`` to the variable ``target``."""
        return QueryOp(op=OpKind.LET, target=target, value=value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, Any] = {"op": self.op.value}
        if self.query is not None:
            result["query"] = self.query
        if self.target is not None:
            result["target"] = self.target
        if self.value is not None:
            result["value"] = self.value
        return result


@dataclass(frozen=True, eq=False)
class TestCase:
    """A named benchmark case: a setup function plus the operations to measure.

    Cases compare and hash by identity; registry names are unique.
    """

    __test__ = False

    name: str
    pre: Callable[[Any], None]
    ops: tuple[QueryOp, ...]
    tags: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        describe = getattr(self.pre, "describe", None)
        return {
            "name": self.name,
            "tags": sorted(self.tags),
            "pre": describe() if describe else getattr(self.pre, "__name__", repr(self.pre)),
            "ops": [op.to_dict() for op in self.ops],
        }
