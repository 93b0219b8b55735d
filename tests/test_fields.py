"""Tests for field-name synthesis."""

import re

import pytest

from index_bench.errors import ConfigurationError
from index_bench.fields import names_at_depth, names_flat, parse_field_path


class TestNamesFlat:
    """Test flat field names."""

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 100])
    def test_names_are_ordered_and_unique(self, n):
        """names_flat(n) gives field-0 .. field-(n-1) in order."""
        names = names_flat(n)
        assert names == [f"field-{i}" for i in range(n)]
        assert len(set(names)) == n

    def test_negative_count_rejected(self):
        with pytest.raises(ConfigurationError):
            names_flat(-1)


class TestNamesAtDepth:
    """Test nested field names."""

    def test_depth_zero_is_flat(self):
        assert names_at_depth(3, 0) == names_flat(3)

    def test_prefix_example(self):
        assert names_at_depth(2, 2) == [
            "subObj-0.subObj-1.field-0",
            "subObj-0.subObj-1.field-1",
        ]

    @pytest.mark.parametrize("n,depth", [(1, 1), (5, 3), (10, 10)])
    def test_depth_segments_then_field_suffix(self, n, depth):
        """Each name has exactly depth prefix segments and a field-i suffix."""
        names = names_at_depth(n, depth)
        assert len(names) == n
        for i, name in enumerate(names):
            segments = name.split(".")
            assert len(segments) == depth + 1
            assert segments[:-1] == [f"subObj-{level}" for level in range(depth)]
            assert re.fullmatch(r"field-\d+", segments[-1])
            assert segments[-1] == f"field-{i}"

    def test_negative_depth_rejected(self):
        with pytest.raises(ConfigurationError):
            names_at_depth(1, -1)


class TestParseFieldPath:
    """Test dotted path parsing."""

    def test_splits_segments(self):
        assert parse_field_path("a.b.c") == ("a", "b", "c")

    def test_single_segment(self):
        assert parse_field_path("field-0") == ("field-0",)

    @pytest.mark.parametrize("path", ["", "a..b", ".a", "a."])
    def test_empty_segment_rejected(self, path):
        with pytest.raises(ConfigurationError):
            parse_field_path(path)
