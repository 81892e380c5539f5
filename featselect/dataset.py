"""Loading, describing and normalising labelled numeric datasets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from statistics import fmean
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Dataset:
    """Instances stored as rows whose first column is the class label.

    Feature number ``n`` (counting from 1) is column ``n`` of each row.
    """

    rows: tuple[tuple[float, ...], ...]

    def __init__(self, rows: Iterable[Sequence[float]]) -> None:
        frozen = tuple(tuple(float(value) for value in row) for row in rows)
        widths = {len(row) for row in frozen}
        if len(widths) > 1:
            raise ValueError(f"rows have differing widths: {sorted(widths)}")
        if widths and 0 in widths:
            raise ValueError("rows must contain at least a class label")
        object.__setattr__(self, "rows", frozen)

    @property
    def labels(self) -> tuple[float, ...]:
        return tuple(row[0] for row in self.rows)

    @property
    def num_instances(self) -> int:
        return len(self.rows)

    @property
    def num_features(self) -> int:
        return len(self.rows[0]) - 1 if self.rows else 0

    def default_rate(self) -> float:
        """Accuracy of always guessing the more common of class 1 and the rest."""
        if not self.rows:
            raise ValueError("default rate of an empty dataset is undefined")
        total = len(self.rows)
        ones = sum(1 for label in self.labels if label == 1)
        if ones / total > 0.5:
            return ones / total
        return (total - ones) / total


def count_columns(line: str) -> int:
    """Count the leading whitespace-separated numbers on a line."""
    count = 0
    for token in line.split():
        try:
            float(token)
        except ValueError:
            break
        count += 1
    return count


def parse_dataset(text: str) -> Dataset:
    """Parse whitespace-separated numbers; the first line fixes the row width."""
    first_line = next((line for line in text.splitlines() if line.strip()), "")
    width = count_columns(first_line)
    if width == 0:
        raise ValueError("dataset has no numeric columns")

    values = []
    for token in text.split():
        try:
            values.append(float(token))
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None

    if len(values) % width:
        raise ValueError(
            f"{len(values)} values do not form whole rows of {width} columns"
        )
    return Dataset(values[start:start + width] for start in range(0, len(values), width))


def load_dataset(path: str | Path) -> Dataset:
    """Read and parse a dataset file."""
    return parse_dataset(Path(path).read_text())


def _zscores(column: Sequence[float]) -> list[float]:
    mean = fmean(column)
    std = math.sqrt(fmean([(value - mean) ** 2 for value in column]))
    if std == 0:
        return [math.nan] * len(column)
    return [(value - mean) / std for value in column]


def normalize(dataset: Dataset) -> Dataset:
    """Return a copy with every feature column replaced by its z-scores."""
    if not dataset.rows:
        return dataset
    columns = list(zip(*dataset.rows))
    scaled = [columns[0], *(_zscores(column) for column in columns[1:])]
    return Dataset(zip(*scaled))