"""Tests for query-list builders and the random stream."""

import json

import pytest

from index_bench.errors import ConfigurationError
from index_bench.fields import names_flat
from index_bench.models import OpKind, QueryOp
from index_bench.queries import (
    point_query_list,
    range_query_list,
    range_sort_query_list,
    two_point_query_list,
)
from index_bench.random_stream import RandomStream


def _dump(ops):
    return json.dumps([op.to_dict() for op in ops])


class TestRandomStream:
    """Test the seeded stream."""

    def test_same_seed_same_sequence(self):
        a, b = RandomStream(7), RandomStream(7)
        assert [a.next_int(100) for _ in range(20)] == [b.next_int(100) for _ in range(20)]

    def test_set_seed_restarts(self):
        stream = RandomStream(7)
        first = [stream.next_int(1000) for _ in range(5)]
        stream.set_seed(7)
        assert [stream.next_int(1000) for _ in range(5)] == first

    def test_values_within_bound(self):
        stream = RandomStream(1)
        assert all(0 <= stream.next_int(3) < 3 for _ in range(200))

    @pytest.mark.parametrize("bound", [0, -5])
    def test_non_positive_bound_rejected(self, bound):
        with pytest.raises(ConfigurationError):
            RandomStream(1).next_int(bound)


class TestPointQueryList:
    """Test single-field point queries."""

    def test_one_find_per_field_in_order(self, rng):
        fields = names_flat(10)
        ops = point_query_list(fields, 100, rng)

        assert [op.op for op in ops] == [OpKind.FIND] * 10
        assert [next(iter(op.query)) for op in ops] == fields

    def test_values_in_range(self, rng):
        ops = point_query_list(names_flat(50), 10, rng)
        assert all(0 <= op.query[f"field-{i}"] < 10 for i, op in enumerate(ops))

    def test_reproducible(self):
        fields = names_flat(10)
        assert _dump(point_query_list(fields, 100, RandomStream(3))) == _dump(
            point_query_list(fields, 100, RandomStream(3))
        )

    def test_empty_field_list(self, rng):
        assert point_query_list([], 10, rng) == []


class TestTwoPointQueryList:
    """Test the variable-reuse query."""

    def test_binds_then_finds(self):
        ops = two_point_query_list(["a", "b"], 100)

        assert ops == [
            QueryOp.let("randVal", {"#RAND_INT": [0, 100]}),
            QueryOp.find(
                {"$and": [{"a": {"#VARIABLE": "randVal"}}, {"b": {"#VARIABLE": "randVal"}}]}
            ),
        ]

    def test_serialized_shape(self):
        bind, find = (op.to_dict() for op in two_point_query_list(["a", "b"], 5))
        assert bind == {"op": "let", "target": "randVal", "value": {"#RAND_INT": [0, 5]}}
        assert set(find) == {"op", "query"}

    @pytest.mark.parametrize("fields", [[], ["a"], ["a", "b", "c"]])
    def test_requires_exactly_two_fields(self, fields):
        with pytest.raises(ConfigurationError):
            two_point_query_list(fields, 100)


class TestRangeQueryList:
    """Test range queries."""

    def test_width_is_ten(self, rng):
        for op in range_query_list(names_flat(20), 100, rng):
            (condition,) = op.query.values()
            assert condition["$lte"] - condition["$gte"] == 10
            assert 0 <= condition["$gte"] < 90

    def test_order_matches_fields(self, rng):
        fields = names_flat(5)
        ops = range_query_list(fields, 100, rng)
        assert [next(iter(op.query)) for op in ops] == fields

    def test_reproducible(self):
        fields = names_flat(10)
        assert _dump(range_query_list(fields, 100, RandomStream(11010))) == _dump(
            range_query_list(fields, 100, RandomStream(11010))
        )

    @pytest.mark.parametrize("num_documents", [0, 5, 10])
    def test_too_few_documents_rejected(self, rng, num_documents):
        with pytest.raises(ConfigurationError):
            range_query_list(["a"], num_documents, rng)


class TestRangeSortQueryList:
    """Test range queries with a sort."""

    def test_sorts_on_queried_field(self, rng):
        fields = names_flat(3)
        ops = range_sort_query_list(fields, 100, rng)

        for name, op in zip(fields, ops):
            assert op.query["$orderby"] == {name: 1}
            condition = op.query["$query"][name]
            assert condition["$lte"] - condition["$gte"] == 10

    def test_same_predicates_as_range_list_for_same_seed(self):
        fields = names_flat(4)
        plain = range_query_list(fields, 100, RandomStream(9))
        sorted_ops = range_sort_query_list(fields, 100, RandomStream(9))
        assert [op.query for op in plain] == [op.query["$query"] for op in sorted_ops]
