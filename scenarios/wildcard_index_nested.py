"""$** read benchmarks over embedded-document paths and widely spaced arrays."""

from index_bench.builder import BuildContext
from index_bench.documents import ScalarGenerator, SpacedSharedArrayGenerator
from index_bench.fields import names_at_depth, names_flat
from index_bench.queries import point_query_list, range_query_list
from index_bench.registry import make_comparison_read_test

NESTING_DEPTH = 3
DEEP_NESTING_DEPTH = 10


def register(ctx: BuildContext) -> None:
    registry, rng = ctx.registry, ctx.rng
    num_documents = ctx.config.document_count

    fields = names_at_depth(1, NESTING_DEPTH)
    make_comparison_read_test(
        registry,
        "PointQueryOnSingleNestedField",
        fields,
        point_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_at_depth(10, NESTING_DEPTH)
    make_comparison_read_test(
        registry,
        "PointQueryOnMultipleNestedFields",
        fields,
        point_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_at_depth(1, DEEP_NESTING_DEPTH)
    make_comparison_read_test(
        registry,
        "RangeQueryOnDeeplyNestedField",
        fields,
        range_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    # Array values 10 apart, so a width-10 range matches at most two elements
    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "PointQueryOnSingleSpacedArrayField",
        fields,
        point_query_list(fields, num_documents, rng),
        SpacedSharedArrayGenerator(fields, ctx.config.array_size),
        num_documents,
    )

    fields = names_flat(10)
    make_comparison_read_test(
        registry,
        "RangeQueryOnMultipleSpacedArrayFields",
        fields,
        range_query_list(fields, num_documents, rng),
        SpacedSharedArrayGenerator(fields, ctx.config.array_size),
        num_documents,
    )
