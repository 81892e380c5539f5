"""Command line for running feature-selection searches."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import TextIO

from featselect.classifier import accuracy, make_evaluator
from featselect.dataset import load_dataset, normalize
from featselect.search import Direction, SearchResult, _percent, random_evaluator, search

_MENU = (
    "Type the number of the algorithm you would like to use\n"
    "1. Forward Selection\n"
    "2. Backward Elmination"
)


def run_file(
    path: str | Path,
    direction: Direction,
    k: int = 1,
    out: TextIO | None = None,
) -> SearchResult:
    """Search the features of a dataset file with leave-one-out nearest neighbour."""
    out = sys.stdout if out is None else out
    direction = Direction(direction)
    start = time.perf_counter()

    raw = load_dataset(path)
    if raw.num_instances == 0:
        raise ValueError(f"{path}: dataset is empty")
    print(
        f"Dataset has {raw.num_features} features (not including class label), "
        f"with {raw.num_instances} instances.",
        file=out,
    )
    dataset = normalize(raw)
    evaluate = make_evaluator(dataset, k)
    prep_ms = int((time.perf_counter() - start) * 1000)
    print(f"Time used for data prep is: {prep_ms} milliseconds", file=out)

    if direction is Direction.FORWARD:
        print(
            "No Accuracy value with no features to test, the default rate is: "
            f"{_percent(dataset.default_rate())}%\n",
            file=out,
        )
    else:
        full = accuracy(dataset, range(1, dataset.num_features + 1), k)
        print(
            f"Running Nearest Neighbor with all {dataset.num_features} features with "
            f"'leave one out' validation, I get an accuracy of {_percent(full)}%.\n",
            file=out,
        )

    result = search(evaluate, dataset.num_features, direction, out)

    elapsed = time.perf_counter() - start
    if dataset.num_features + 1 > 20:
        print(f"Time used for search is: {int(elapsed)} seconds", file=out)
    else:
        print(f"Time used for search is: {int(elapsed * 1000)} milliseconds", file=out)
    return result


def run_random(
    num_features: int,
    direction: Direction,
    seed: int | None = None,
    out: TextIO | None = None,
) -> SearchResult:
    """Search with random scores, useful for exercising the search on its own."""
    out = sys.stdout if out is None else out
    rng = random.Random(seed)
    default_rate = rng.random()
    print(
        "No Accuracy value with no features to test, the default rate is: "
        f"{_percent(default_rate)}%\n",
        file=out,
    )
    return search(random_evaluator(rng), num_features, Direction(direction), out)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featselect",
        description="Greedy feature selection with a nearest-neighbour classifier.",
    )
    parser.add_argument("path", nargs="?", help="dataset file; first column is the class")
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        dest="num_features",
        help="search N features scored at random instead of reading a file",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        type=int,
        help="1 for forward selection, 2 for backward elimination",
    )
    parser.add_argument("-k", type=int, default=1, help="neighbours to vote (odd)")
    parser.add_argument("--seed", type=int, help="seed for --random")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: prompt for anything not given on the command line."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.path is not None and args.num_features is not None:
        parser.error("give either a dataset path or --random, not both")

    print("Welcome to the Feature Selection Algorithm")
    try:
        path = args.path
        if args.num_features is None and path is None:
            path = input("Type in the name of the file to test: ").strip()
            print("\n")
        choice = args.algorithm
        if choice is None:
            print(_MENU)
            choice = int(input().strip())
        direction = Direction.from_choice(choice)
        if args.num_features is not None:
            run_random(args.num_features, direction, args.seed)
        else:
            run_file(path, direction, args.k)
    except EOFError:
        print("featselect: no input", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"featselect: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())