"""Registry of benchmark cases and the helpers that fill it."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from .documents import DocumentGenerator
from .errors import ConfigurationError
from .fixtures import TargetedIndexSetup, WildcardIndexSetup
from .models import QueryOp, TestCase

logger = logging.getLogger(__name__)

READ_TEST_PREFIX = "Queries.WildcardIndex."
READ_TEST_TAGS = frozenset({"wildcard_read", "indexed", ">=4.1.3"})
BASELINE_SUFFIX = ".Baseline"


class Registry:
    """Ordered collection of benchmark cases owned by one build run."""

    def __init__(self) -> None:
        self._cases: list[TestCase] = []
        self._names: set[str] = set()

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def add(self, case: TestCase) -> TestCase:
        """Append a case.

        Raises:
            ConfigurationError: If a case with the same name is already registered
        """
        if case.name in self._names:
            raise ConfigurationError(f"Duplicate test case name: {case.name}")
        self._cases.append(case)
        self._names.add(case.name)
        logger.debug("Registered %s (%d ops)", case.name, len(case.ops))
        return case

    def add_read_test(
        self,
        name: str,
        tags: Iterable[str],
        pre: Callable[[Any], None],
        ops: Iterable[QueryOp],
    ) -> TestCase:
        """Register a wildcard-index read case under the shared prefix and tags."""
        return self.add(
            TestCase(
                name=READ_TEST_PREFIX + name,
                tags=READ_TEST_TAGS | frozenset(tags),
                pre=pre,
                ops=tuple(ops),
            )
        )

    def get(self, name: str) -> TestCase:
        """Look up a case by its full name."""
        for case in self._cases:
            if case.name == name:
                return case
        raise KeyError(name)

    @property
    def names(self) -> list[str]:
        return [case.name for case in self._cases]

    def select(
        self,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> list[TestCase]:
        """Return cases carrying every ``include`` tag and no ``exclude`` tag."""
        required = set(include)
        excluded = set(exclude)
        return [
            case
            for case in self._cases
            if required <= case.tags and not (excluded & case.tags)
        ]

    def to_dicts(self) -> list[dict[str, Any]]:
        """Convert all cases to JSON-serializable dicts."""
        return [case.to_dict() for case in self._cases]


def make_standalone_read_test(
    registry: Registry,
    name: str,
    fields_to_index: list[str],
    ops: list[QueryOp],
    generator: DocumentGenerator,
    document_count: int,
) -> TestCase:
    """Register one case against a ``$**`` index."""
    return registry.add_read_test(
        name=name,
        tags=["regression"],
        pre=WildcardIndexSetup(fields_to_index, generator, document_count),
        ops=ops,
    )


def make_comparison_read_test(
    registry: Registry,
    name: str,
    fields_to_index: list[str],
    ops: list[QueryOp],
    generator: DocumentGenerator,
    document_count: int,
) -> tuple[TestCase, TestCase]:
    """Register a ``$**`` case and a ``.Baseline`` case using sparse indexes.

    Both cases run the same operations over the same data, so the runner can
    compare them directly.
    """
    for full_name in (READ_TEST_PREFIX + name, READ_TEST_PREFIX + name + BASELINE_SUFFIX):
        if full_name in registry:
            raise ConfigurationError(f"Duplicate test case name: {full_name}")

    wildcard = registry.add_read_test(
        name=name,
        tags=["regression"],
        pre=WildcardIndexSetup(fields_to_index, generator, document_count),
        ops=ops,
    )
    baseline = registry.add_read_test(
        name=name + BASELINE_SUFFIX,
        tags=["regression"],
        pre=TargetedIndexSetup(fields_to_index, generator, document_count),
        ops=ops,
    )
    return wildcard, baseline
