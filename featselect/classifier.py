"""Nearest-neighbour classification with leave-one-out validation."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from featselect.dataset import Dataset


def distance(first: Sequence[float], second: Sequence[float], features: Sequence[int]) -> float:
    """Euclidean distance between two rows over the given feature columns."""
    return math.sqrt(sum((first[f] - second[f]) ** 2 for f in features))


def _check_k(dataset: Dataset, k: int) -> None:
    if k < 1 or k % 2 == 0:
        raise ValueError(f"k must be a positive odd number, got {k}")
    if not dataset.rows:
        raise ValueError("accuracy of an empty dataset is undefined")
    if k > 1 and k > dataset.num_instances - 1:
        raise ValueError(
            f"k={k} needs at least {k + 1} instances, dataset has {dataset.num_instances}"
        )


def _nearest_label(dataset: Dataset, index: int, features: Sequence[int]) -> int:
    row = dataset.rows[index]
    best = math.inf
    label = -1
    for other_index, other in enumerate(dataset.rows):
        if other_index == index:
            continue
        dist = distance(row, other, features)
        if dist < best:
            best = dist
            label = int(other[0])
    return label


def _majority_correct(dataset: Dataset, index: int, features: Sequence[int], k: int) -> bool:
    row = dataset.rows[index]
    label = int(row[0])
    neighbours = sorted(
        (distance(row, other, features), int(other[0]))
        for other_index, other in enumerate(dataset.rows)
        if other_index != index
    )
    agreeing = sum(1 for _, other_label in neighbours[:k] if other_label == label)
    return agreeing > k / 2


def accuracy(dataset: Dataset, features: Sequence[int], k: int = 1) -> float:
    """Leave-one-out accuracy of a k-nearest-neighbour classifier on the features."""
    _check_k(dataset, k)
    features = list(features)
    if k == 1:
        correct = sum(
            1
            for index, row in enumerate(dataset.rows)
            if _nearest_label(dataset, index, features) == int(row[0])
        )
    else:
        correct = sum(
            1 for index in range(dataset.num_instances)
            if _majority_correct(dataset, index, features, k)
        )
    return correct / dataset.num_instances


def make_evaluator(dataset: Dataset, k: int = 1) -> Callable[[Sequence[int]], float]:
    """Bind a dataset and k into a function from feature sets to accuracy."""
    _check_k(dataset, k)

    def evaluate(features: Sequence[int]) -> float:
        return accuracy(dataset, features, k)

    return evaluate