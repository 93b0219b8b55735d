"""Query-list builders.

Every list builder returns one operation per input field, in input order, so
the n-th query always targets the n-th field.
"""

from __future__ import annotations

from .errors import ConfigurationError
from .models import QueryOp
from .random_stream import RandomStream

RANGE_WIDTH = 10
RAND_INT = "#RAND_INT"
VARIABLE = "#VARIABLE"


def point_query_list(
    fields: list[str], max_value: int, rng: RandomStream
) -> list[QueryOp]:
    """Return equality queries, each against a random value in ``[0, max_value)``."""
    return [QueryOp.find({name: rng.next_int(max_value)}) for name in fields]


def two_point_query_list(
    fields: list[str], max_value: int, variable: str = "randVal"
) -> list[QueryOp]:
    """Return a query matching two fields against one runner-side random value.

    The first operation binds a random integer in ``[0, max_value)`` to
    ``variable``; the find then refers to it from both predicates.
    """
    if len(fields) != 2:
        raise ConfigurationError(
            f"Two-field point query needs exactly 2 fields, got {len(fields)}"
        )

    bind = QueryOp.let(variable, {RAND_INT: [0, max_value]})
    query = {"$and": [{name: {VARIABLE: variable}} for name in fields]}
    return [bind, QueryOp.find(query)]


def _range_predicate(name: str, num_documents: int, rng: RandomStream) -> dict:
    if num_documents <= RANGE_WIDTH:
        raise ConfigurationError(
            f"Range queries need more than {RANGE_WIDTH} documents, got {num_documents}"
        )
    start = rng.next_int(num_documents - RANGE_WIDTH)
    return {name: {"$gte": start, "$lte": start + RANGE_WIDTH}}


def range_query_list(
    fields: list[str], num_documents: int, rng: RandomStream
) -> list[QueryOp]:
    """Return closed-interval queries of width 10 within ``[0, num_documents)``."""
    return [
        QueryOp.find(_range_predicate(name, num_documents, rng)) for name in fields
    ]


def range_sort_query_list(
    fields: list[str], num_documents: int, rng: RandomStream
) -> list[QueryOp]:
    """Return range queries with an ascending sort on the queried field."""
    ops = []
    for name in fields:
        predicate = _range_predicate(name, num_documents, rng)
        ops.append(QueryOp.find({"$query": predicate, "$orderby": {name: 1}}))
    return ops
