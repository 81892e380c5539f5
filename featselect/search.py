"""Greedy forward-selection and backward-elimination feature searches."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Sequence, TextIO

Evaluator = Callable[[Sequence[int]], float]


class Direction(Enum):
    """Which way the greedy search walks through feature subsets."""

    FORWARD = 1
    BACKWARD = 2

    @classmethod
    def from_choice(cls, choice: int) -> "Direction":
        """Menu choice 1 means forward selection; anything else backward."""
        return cls.FORWARD if choice == 1 else cls.BACKWARD


@dataclass(frozen=True)
class Step:
    """One level of the search: every candidate scored and the one kept."""

    candidates: tuple[tuple[tuple[int, ...], float], ...]
    features: tuple[int, ...]
    feature: int
    accuracy: float
    decreased: bool


@dataclass(frozen=True)
class SearchResult:
    """Best subset seen over the whole search, with the steps taken."""

    best_features: tuple[int, ...]
    best_accuracy: float
    steps: tuple[Step, ...]


def format_features(features: Sequence[int]) -> str:
    """Render a feature set as ``{1,2,3}``."""
    return "{" + ",".join(str(f) for f in features) + "}"


def _percent(value: float) -> str:
    return f"{value * 100:g}"


def iter_steps(evaluate: Evaluator, num_features: int, direction: Direction) -> Iterator[Step]:
    """Yield each greedy step until every feature has been added or removed."""
    direction = Direction(direction)
    if num_features < 0:
        raise ValueError(f"number of features must not be negative, got {num_features}")
    forward = direction is Direction.FORWARD
    available = list(range(1, num_features + 1))
    current: list[int] = [] if forward else list(available)
    best = 0.0

    while available:
        if forward:
            candidates = [(*current, f) for f in available]
        else:
            candidates = [
                tuple(current[:i] + current[i + 1:]) for i in range(len(available))
            ]
        scores = [float(evaluate(candidate)) for candidate in candidates]
        index = max(range(len(scores)), key=scores.__getitem__)
        top = scores[index]
        feature = available[index] if forward else current[index]

        yield Step(
            candidates=tuple(zip(candidates, scores)),
            features=candidates[index],
            feature=feature,
            accuracy=top,
            decreased=top < best,
        )

        best = max(best, top)
        if forward:
            current.append(available.pop(index))
        else:
            del current[index]
            del available[index]


def search(
    evaluate: Evaluator,
    num_features: int,
    direction: Direction,
    out: TextIO | None = None,
) -> SearchResult:
    """Run the search, reporting each step to ``out``, and return the best subset."""
    out = sys.stdout if out is None else out
    print("Beginning Search\n", file=out)

    best_accuracy = 0.0
    best_features: tuple[int, ...] = ()
    steps = []
    for step in iter_steps(evaluate, num_features, direction):
        steps.append(step)
        for features, score in step.candidates:
            print(
                f"Using features(s) {format_features(features)} accuracy is {_percent(score)}%",
                file=out,
            )
        if step.decreased:
            print(file=out)
            out.write("Accuracy has decreased!! Still continuing")
        print(file=out)
        print(
            f"Best feature set was {format_features(step.features)}, "
            f"accuracy is {_percent(step.accuracy)}%",
            file=out,
        )
        print(file=out)
        if step.accuracy > best_accuracy:
            best_accuracy = step.accuracy
            best_features = step.features

    print(file=out)
    print(
        f"Finished Search!!! The best feature subset is {format_features(best_features)}, "
        f"accuracy is {_percent(best_accuracy)}%",
        file=out,
    )
    return SearchResult(best_features, best_accuracy, tuple(steps))


def random_evaluator(rng: random.Random | None = None) -> Evaluator:
    """An evaluator that scores any feature set with a uniform random number."""
    source = random.Random() if rng is None else rng

    def evaluate(features: Sequence[int]) -> float:
        return source.random()

    return evaluate