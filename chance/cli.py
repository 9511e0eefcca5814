"""Command-line solver: find expressions over a set of values that hit a target."""

import argparse
import sys
from collections.abc import Iterable
from itertools import islice
from pathlib import Path

import yaml

from chance.config import load_config
from chance.errors import ChanceError
from chance.expressions.expression import Expression, render
from chance.expressions.graph import to_text_tree
from chance.parsing import parse_integer, parse_values
from chance.search.dedupe import dedupe
from chance.search.driver import find_expressions_for_value


def find_solutions(
    values: list[int],
    target: int,
    dedupe_enabled: bool = False,
    strict_dedupe: bool = False,
    limit: int | None = None,
    progress: bool = False,
) -> list[Expression]:
    """Run the search and apply dedupe and the result limit.

    Dedupe sees the full result stream before the limit is applied.
    """
    expressions: Iterable[Expression] = find_expressions_for_value(
        values, target, progress=progress
    )
    if dedupe_enabled or strict_dedupe:
        expressions = dedupe(expressions, multiset=strict_dedupe)
    return list(islice(expressions, limit))


def format_expressions(expressions: Iterable[Expression], tree: bool = False) -> str:
    """Join rendered expressions with newlines, optionally with their nesting."""
    blocks = []
    for expr in expressions:
        if tree:
            blocks.append(f"{render(expr)}\n{to_text_tree(expr)}")
        else:
            blocks.append(render(expr))
    return "\n".join(blocks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chance", description="Solver for the chance game"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with default settings (see configs/default.yaml)",
    )
    parser.add_argument("-t", "--target", type=str, help="Target value")
    parser.add_argument(
        "-v",
        "--values",
        type=str,
        help="Values to use when searching for the target. Specified like --values=1,2,3",
    )
    parser.add_argument(
        "--enable_associative_operation_filter",
        "--dedupe",
        dest="dedupe",
        action="store_true",
        default=None,
        help="Filter out similar operations (same numbers and operators in a different order)",
    )
    parser.add_argument(
        "--strict-dedupe",
        action="store_true",
        default=None,
        help="Like --dedupe, but operations repeating a number or operator a different "
        "number of times are kept apart",
    )
    parser.add_argument(
        "--limit", type=str, default=None, help="Print at most this many expressions"
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        default=None,
        help="Print each expression's nesting as a text tree",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        default=None,
        help="Show a progress bar over candidate expressions",
    )
    return parser


def resolve_settings(args: argparse.Namespace, config: dict) -> dict:
    """Merge command-line arguments over config values.

    Raises:
        ChanceError: If values or target are missing or malformed
    """
    search, output = config["search"], config["output"]

    values = parse_values(args.values) if args.values is not None else search["values"]
    if values is None:
        raise ChanceError("Requires --values")

    target = (
        parse_integer(args.target, name="Target")
        if args.target is not None
        else search["target"]
    )
    if target is None:
        raise ChanceError("Requires --target")

    limit = search["limit"]
    if args.limit is not None:
        limit = parse_integer(args.limit, name="Limit")
        if limit < 0:
            raise ChanceError(f"Limit must not be negative, got {limit}")

    def pick(flag: bool | None, default: bool) -> bool:
        return default if flag is None else flag

    return {
        "values": values,
        "target": target,
        "dedupe_enabled": pick(args.dedupe, search["dedupe"]),
        "strict_dedupe": pick(args.strict_dedupe, search["strict_dedupe"]),
        "limit": limit,
        "progress": pick(args.progress, output["progress"]),
        "tree": pick(args.tree, output["tree"]),
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        parser.error(f"Cannot read config {args.config}: {e}")
    except ChanceError as e:
        parser.error(str(e))

    try:
        settings = resolve_settings(args, config)
        tree = settings.pop("tree")
        solutions = find_solutions(**settings)
    except ChanceError as e:
        parser.error(str(e))

    print(format_expressions(solutions, tree=tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())
