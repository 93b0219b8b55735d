"""Read benchmarks for $** indexes, each paired with a sparse-index baseline."""

from index_bench.builder import BuildContext
from index_bench.documents import (
    RotatingSingleArrayGenerator,
    ScalarGenerator,
    SharedArrayGenerator,
)
from index_bench.fields import names_flat
from index_bench.queries import (
    point_query_list,
    range_query_list,
    range_sort_query_list,
    two_point_query_list,
)
from index_bench.registry import make_comparison_read_test, make_standalone_read_test


def register(ctx: BuildContext) -> None:
    registry, rng = ctx.registry, ctx.rng
    num_documents = ctx.config.document_count
    array_size = ctx.config.array_size

    # Point query against one multikey path, in a collection with 100 multikey paths
    fields = names_flat(100)
    make_standalone_read_test(
        registry,
        "PointQueryAgainstCollectionWith100MultikeyPaths",
        fields,
        point_query_list([fields[0]], 10, rng),
        RotatingSingleArrayGenerator(fields, 10),
        num_documents,
    )

    # Point query against a field no document has
    make_standalone_read_test(
        registry,
        "PointQueryOnSingleNonExistentField",
        ["non-existent"],
        point_query_list(["non-existent"], num_documents, rng),
        ScalarGenerator(names_flat(1)),
        num_documents,
    )

    # Point queries
    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "PointQueryOnSingleField",
        fields,
        point_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_flat(10)
    make_comparison_read_test(
        registry,
        "PointQueryOnMultipleFields",
        fields,
        point_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "PointQueryOnSingleArrayField",
        fields,
        point_query_list(fields, num_documents, rng),
        SharedArrayGenerator(fields, array_size),
        num_documents,
    )

    fields = names_flat(10)
    make_comparison_read_test(
        registry,
        "PointQueryOnMultipleArrayFields",
        fields,
        point_query_list(fields, num_documents, rng),
        SharedArrayGenerator(fields, array_size),
        num_documents,
    )

    # Range queries
    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "RangeQueryOnSingleField",
        fields,
        range_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_flat(10)
    make_comparison_read_test(
        registry,
        "RangeQueryOnMultipleFields",
        fields,
        range_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "RangeQueryOnSingleArrayField",
        fields,
        range_query_list(fields, num_documents, rng),
        SharedArrayGenerator(fields, array_size),
        num_documents,
    )

    # Range queries with an indexed sort
    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "RangeSortQueryOnSingleField",
        fields,
        range_sort_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_flat(10)
    make_comparison_read_test(
        registry,
        "RangeSortQueryOnMultipleFields",
        fields,
        range_sort_query_list(fields, num_documents, rng),
        ScalarGenerator(fields),
        num_documents,
    )

    fields = names_flat(1)
    make_comparison_read_test(
        registry,
        "RangeSortQueryOnSingleArrayField",
        fields,
        range_sort_query_list(fields, num_documents, rng),
        SharedArrayGenerator(fields, array_size),
        num_documents,
    )

    # Point query on 2 indexed fields sharing one value
    fields = names_flat(2)
    make_comparison_read_test(
        registry,
        "PointQueryOnTwoFields",
        fields,
        two_point_query_list(fields, num_documents),
        ScalarGenerator(fields),
        num_documents,
    )

    make_comparison_read_test(
        registry,
        "PointQueryOnTwoArrayFields",
        fields,
        two_point_query_list(fields, num_documents),
        SharedArrayGenerator(fields, array_size),
        num_documents,
    )
