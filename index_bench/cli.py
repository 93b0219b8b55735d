"""Command-line interface for index-bench."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .builder import build_suite
from .errors import FixtureError
from .loader import SuiteConfig, find_config, load_config
from .models import OpKind, TestCase
from .queries import RANGE_WIDTH
from .registry import BASELINE_SUFFIX, Registry

BUILD_ERRORS = (FixtureError, FileNotFoundError, ImportError)


def _load_suite(args: argparse.Namespace) -> tuple[Registry, SuiteConfig]:
    """Build the registry for the scenarios and config named on the command line."""
    scenarios_dir = Path(args.scenarios)
    config_path = Path(args.config) if args.config else find_config(scenarios_dir)
    config = load_config(config_path)
    return build_suite(scenarios_dir, config), config


def cmd_list(args: argparse.Namespace) -> int:
    """List the cases a build registers."""
    try:
        registry, _ = _load_suite(args)
    except BUILD_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    cases = registry.select(include=args.tag or (), exclude=args.exclude_tag or ())

    if args.json:
        print(
            json.dumps(
                [{"name": c.name, "tags": sorted(c.tags), "ops": len(c.ops)} for c in cases],
                indent=2,
            )
        )
    else:
        print(f"Found {len(cases)} case(s):\n")
        for case in cases:
            print(f"  {case.name}")
            print(f"    Tags: {', '.join(sorted(case.tags))}")
            print(f"    Ops: {len(case.ops)}")
            print()

    return 0


def _range_widths(query: dict[str, Any]) -> list[int]:
    """Collect the width of every $gte/$lte predicate in a find query."""
    predicate = query.get("$query", query)
    widths = []
    for condition in predicate.values():
        if isinstance(condition, dict) and "$gte" in condition and "$lte" in condition:
            widths.append(condition["$lte"] - condition["$gte"])
    return widths


def check_suite(registry: Registry) -> list[str]:
    """Return a list of problems found in a built suite."""
    errors = []
    by_name = {case.name: case for case in registry}

    for case in registry:
        if not case.ops:
            errors.append(f"{case.name}: no operations")

        for op in case.ops:
            if op.op != OpKind.FIND or op.query is None:
                continue
            for width in _range_widths(op.query):
                if width != RANGE_WIDTH:
                    errors.append(
                        f"{case.name}: range width {width}, expected {RANGE_WIDTH}"
                    )

        if case.name.endswith(BASELINE_SUFFIX):
            partner = by_name.get(case.name[: -len(BASELINE_SUFFIX)])
            if partner is None:
                errors.append(f"{case.name}: baseline without a $** case")
            elif partner.ops != case.ops:
                errors.append(f"{case.name}: ops differ from {partner.name}")

    return errors


def cmd_validate(args: argparse.Namespace) -> int:
    """Build the suite and check its cases."""
    try:
        registry, config = _load_suite(args)
    except BUILD_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Validation FAILED")
        return 1

    print(f"[OK] Built {len(registry)} case(s) with seed {config.seed}")

    errors = check_suite(registry)
    if errors:
        print("Errors:")
        for e in errors:
            print(f"  [ERROR] {e}")
        print()
        print("Validation FAILED")
        return 1

    print("Validation PASSED")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Write the built suite as JSON."""
    try:
        registry, _ = _load_suite(args)
    except BUILD_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    payload = json.dumps(registry.to_dicts(), indent=2)
    if args.output:
        output = Path(args.output)
        output.write_text(payload + "\n", encoding="utf-8")
        print(f"Exported {len(registry)} case(s) to: {output}")
    else:
        print(payload)
    return 0


def cmd_prepare(args: argparse.Namespace) -> int:
    """Run one case's setup against a live MongoDB."""
    load_dotenv(Path.cwd() / ".env")
    uri = args.uri or os.environ.get("MONGODB_URI", "")
    if not uri:
        print("Error: MongoDB URI required.", file=sys.stderr)
        print("  Set MONGODB_URI env var or use --uri", file=sys.stderr)
        return 1

    try:
        registry, config = _load_suite(args)
        case: TestCase = registry.get(args.case)
    except BUILD_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyError:
        print(f"Error: Unknown case: {args.case}", file=sys.stderr)
        return 1

    database = args.database or config.database
    collection_name = args.collection or config.collection

    try:
        client = MongoClient(uri)
    except PyMongoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        case.pre(client[database][collection_name])
    except FixtureError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()

    print(f"[OK] {case.name} prepared in {database}.{collection_name}")
    return 0


def _add_suite_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scenarios",
        "-s",
        default="./scenarios",
        help="Path to scenarios directory (default: ./scenarios)",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to suite config (default: suite.yaml in the scenarios directory)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="index-bench",
        description="index-bench: index read benchmark definitions",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log build progress",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list command
    list_parser = subparsers.add_parser("list", help="List registered cases")
    _add_suite_arguments(list_parser)
    list_parser.add_argument(
        "--tag",
        "-t",
        action="append",
        help="Only cases with this tag (repeatable)",
    )
    list_parser.add_argument(
        "--exclude-tag",
        "-x",
        action="append",
        help="Skip cases with this tag (repeatable)",
    )
    list_parser.add_argument(
        "--json",
        "-j",
        action="store_true",
        help="Output as JSON",
    )
    list_parser.set_defaults(func=cmd_list)

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Build and check the suite")
    _add_suite_arguments(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    # export command
    export_parser = subparsers.add_parser("export", help="Export the suite as JSON")
    _add_suite_arguments(export_parser)
    export_parser.add_argument(
        "--output",
        "-o",
        help="Write to this file instead of stdout",
    )
    export_parser.set_defaults(func=cmd_export)

    # prepare command
    prepare_parser = subparsers.add_parser(
        "prepare", help="Run a case's setup against MongoDB"
    )
    _add_suite_arguments(prepare_parser)
    prepare_parser.add_argument(
        "--case",
        required=True,
        help="Full case name, e.g. Queries.WildcardIndex.PointQueryOnSingleField",
    )
    prepare_parser.add_argument(
        "--uri",
        help="MongoDB connection URI (or set MONGODB_URI env var)",
    )
    prepare_parser.add_argument("--database", "-d", help="Database name")
    prepare_parser.add_argument("--collection", help="Collection name")
    prepare_parser.set_defaults(func=cmd_prepare)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
