"""
Command-line entry point for Algo Toolkit.

Reads a JSON document from a file (or stdin) and prints JSON results.

Usage:
    echo '[3, 1, 2]' | algo-toolkit sort
    echo '[3, 1, 2]' | algo-toolkit sort --algorithm quick --reverse
    echo '[1, 3, 5, 7]' | algo-toolkit search --target 5
    algo-toolkit distance kitten sitting
    echo '["apple", "apply", "banana"]' | algo-toolkit fuzzy --query appel --threshold 0.5
    echo '[{"name": "Ann"}]' | algo-toolkit fuzzy --query ann --key name
    echo '[[1, 1], [8, 8]]' | algo-toolkit kmeans --k 2 --seed 0
    echo '{"x": [1, 2, 3], "y": [2, 4, 6]}' | algo-toolkit regress --predict 4 5
"""

import argparse
import json
import sys
from typing import Any, List, Optional

import numpy as np

from .algorithms import NOT_FOUND, reverse_order, natural_order
from .config import ToolkitConfig, config
from .errors import AlgoToolkitError
from .services import AlgorithmService
from .utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _load_input(path: Optional[str]) -> Any:
    if path is None or path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _emit(payload: Any) -> None:
    json.dump(payload, sys.stdout)
    sys.stdout.write("\n")


def _cmd_sort(service: AlgorithmService, args: argparse.Namespace) -> None:
    data = _load_input(args.input)
    compare = reverse_order(natural_order) if args.reverse else natural_order
    if args.algorithm == "quick":
        _emit(service.quick_sort(data, compare))
    else:
        _emit(service.merge_sort(data, compare))


def _cmd_search(service: AlgorithmService, args: argparse.Namespace) -> None:
    data = _load_input(args.input)
    target = json.loads(args.target)
    index = service.binary_search(data, target)
    _emit({"index": index, "found": index != NOT_FOUND})


def _cmd_distance(service: AlgorithmService, args: argparse.Namespace) -> None:
    _emit({"distance": service.levenshtein_distance(args.a, args.b)})


def _cmd_fuzzy(service: AlgorithmService, args: argparse.Namespace) -> None:
    data = _load_input(args.input)
    if args.key:

        def key_of(item: Any) -> str:
            try:
                return str(item[args.key])
            except (KeyError, IndexError, TypeError) as e:
                raise ValueError(f"item {item!r} has no field {args.key!r}") from e

    else:
        key_of = str
    matches = service.fuzzy_search(data, args.query, key_of, args.threshold)
    _emit([{"item": m.item, "similarity": m.similarity} for m in matches])


def _cmd_kmeans(service: AlgorithmService, args: argparse.Namespace) -> None:
    data = _load_input(args.input)
    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    result = service.kmeans(data, args.k, max_iter=args.max_iter, rng=rng)
    _emit(
        {
            "clusters": result.clusters,
            "centroids": result.centroids.tolist(),
            "n_iter": result.n_iter,
            "converged": result.converged,
            "inertia": result.inertia,
        }
    )


def _cmd_regress(service: AlgorithmService, args: argparse.Namespace) -> None:
    data = _load_input(args.input)
    if not isinstance(data, dict) or "x" not in data or "y" not in data:
        raise ValueError('regress input must be an object with "x" and "y" arrays')
    model = service.linear_regression(data["x"], data["y"])
    payload = {"slope": model.slope, "intercept": model.intercept}
    if args.predict:
        payload["predictions"] = [model.predict(v) for v in args.predict]
    _emit(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algo-toolkit",
        description="Sorting, searching, clustering and regression on JSON input",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: ALGO_TOOLKIT_LOG_LEVEL from .env, then INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("sort", help="Sort a JSON array")
    p.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--algorithm", choices=["merge", "quick"], default="merge")
    p.add_argument("--reverse", action="store_true", help="Sort descending")
    p.set_defaults(func=_cmd_sort)

    p = sub.add_parser("search", help="Binary search a sorted JSON array")
    p.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--target", required=True, help="Target value as JSON (e.g. 5 or '\"abc\"')")
    p.set_defaults(func=_cmd_search)

    p = sub.add_parser("distance", help="Levenshtein distance between two strings")
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(func=_cmd_distance)

    p = sub.add_parser("fuzzy", help="Fuzzy search a JSON array")
    p.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--query", required=True)
    p.add_argument("--threshold", type=float, default=None,
                   help="Minimum similarity (default: ALGO_TOOLKIT_FUZZY_THRESHOLD, then 0.7)")
    p.add_argument("--key", default=None, help="Object field to match on")
    p.set_defaults(func=_cmd_fuzzy)

    p = sub.add_parser("kmeans", help="K-means cluster a JSON array of vectors")
    p.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--k", type=int, required=True)
    p.add_argument("--max-iter", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=_cmd_kmeans)

    p = sub.add_parser("regress", help='Fit a line to {"x": [...], "y": [...]}')
    p.add_argument("input", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--predict", type=float, nargs="*", default=None)
    p.set_defaults(func=_cmd_regress)

    return parser


def main(argv: Optional[List[str]] = None, toolkit_config: Optional[ToolkitConfig] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or config.logging.level, config.logging.log_file)
    service = AlgorithmService(toolkit_config)

    try:
        args.func(service, args)
    except AlgoToolkitError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except (ValueError, TypeError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
