# featselect

`featselect` searches greedily for a good subset of features in a labelled numeric dataset. It scores each candidate subset by its leave-one-out k-nearest-neighbour accuracy. By default `k` is 1.

It offers two strategies:

- **Forward selection** starts with no features. At each step it adds the feature that gives the highest accuracy.
- **Backward elimination** starts with every feature. At each step it removes the feature whose removal gives the highest accuracy.

The search continues until every feature has been added or removed. It prints:

- the accuracy of every subset it tries;
- the best subset at each step;
- a warning when a step's best accuracy falls below the best seen so far.

At the end it reports the best subset over the whole search.

## Installation

```
pip install .
```

The package depends only on the standard library.

## Data format

The input file holds whitespace-separated numbers, one instance per line. The first column is the class label and the remaining columns are features.

The first line sets the width of a row. Every token in the file must then be a number, and the total count of numbers must divide evenly into rows of that width. Otherwise a `ValueError` is raised.

```
2.0000000e+00   1.2340000e+00   5.6780000e-01
1.0000000e+00   3.4560000e+00   7.8900000e-01
```

Before the search, each feature column is z-score normalised using the population standard deviation. A column with a standard deviation of zero becomes all NaN.

The default rate is the accuracy of always guessing the more common class. It compares class `1` against all other labels together.

## Command line

```
featselect [path] [-a {1,2}] [-k K]
featselect --random N [-a {1,2}] [--seed S]
```

- `path` is the dataset file. If you give neither `path` nor `--random`, the command asks for a file name.
- `-a`, `--algorithm` selects the strategy: `1` for forward selection, any other number for backward elimination. If you omit it, the command shows a menu and reads the number.
- `-k` sets the number of neighbours that vote. It must be a positive odd number and defaults to 1.
- `--random N` skips the data file and searches `N` features whose scores are uniform random numbers. Use it to watch the search on its own.
- `--seed` seeds the random scores used by `--random`.

A file run reports:

- the dataset's size;
- the time spent preparing the data;
- for forward selection, the default rate;
- for backward elimination, the accuracy with all features;
- the search itself;
- the total time, in seconds when the file has more than 20 columns and in milliseconds otherwise.

The command exits with status 1 and a message on standard error in three cases: unreadable files, malformed data, and missing input.

## Library use

```python
import sys

from featselect.classifier import make_evaluator
from featselect.dataset import load_dataset, normalize
from featselect.search import Direction, search

data = normalize(load_dataset("data.txt"))
evaluate = make_evaluator(data, 1)
result = search(evaluate, data.num_features, Direction.FORWARD, sys.stdout)
print(result.best_features, result.best_accuracy)
```

### `featselect.dataset`

- `Dataset(rows)` is an immutable table whose first column is the label. It has these members:
  - `labels`
  - `num_instances`
  - `num_features`
  - `default_rate()`
- `parse_dataset(text)` parses text into a `Dataset`.
- `load_dataset(path)` reads a file and parses it into a `Dataset`.
- `count_columns(line)` counts the leading numbers on a line.
- `normalize(dataset)` returns a z-score normalised copy.

### `featselect.classifier`

- `distance(first, second, features)` returns the Euclidean distance between two rows over the given feature columns.
- `accuracy(dataset, features, k=1)` returns leave-one-out accuracy.
  - With `k` of 1, the first nearest neighbour decides.
  - With a larger `k`, an instance counts as correct when more than half of its `k` nearest neighbours share its label.
- `make_evaluator(dataset, k=1)` binds a dataset and `k` into a function from feature sets to accuracy.

### `featselect.search`

- `Direction.FORWARD` and `Direction.BACKWARD` name the two strategies. `Direction.from_choice(n)` maps a menu number to one of them.
- `iter_steps(evaluate, num_features, direction)` yields one `Step` per level and prints nothing. Each `Step` has these fields:
  - `candidates`
  - `features`
  - `feature`
  - `accuracy`
  - `decreased`
- `search(evaluate, num_features, direction, out=None)` prints the progress report and returns a `SearchResult`. The result has these fields:
  - `best_features`
  - `best_accuracy`
  - `steps`
- `random_evaluator(rng=None)` returns an evaluator that gives random scores.
- `format_features(features)` renders a feature set as `{1,2,3}`.

### `featselect.cli`

- `run_file(path, direction, k=1, out=None)` runs the full file-based search.
- `run_random(num_features, direction, seed=None, out=None)` runs the random-score search.
- `main(argv=None)` is the command-line entry point.

## What it does not do

`featselect` only evaluates and selects feature subsets on the data it is given. It does not:

- save a trained model;
- classify new instances;
- write the chosen subset anywhere other than its printed report and the returned `SearchResult`.