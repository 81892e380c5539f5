import math

import pytest

from featselect.dataset import (
    Dataset,
    count_columns,
    load_dataset,
    normalize,
    parse_dataset,
)

SAMPLE = (
    "  1.0000000e+000  5.0000000e-001  2.0000000e+000\n"
    "  2.0000000e+000  1.5000000e+000  3.0000000e+000\n"
    "  1.0000000e+000  2.5000000e+000  7.0000000e+000\n"
    "  1.0000000e+000  4.5000000e+000  1.0000000e+000\n"
)


def test_count_columns_counts_numbers():
    assert count_columns("  1.0  2.5e+000 -3") == 3


def test_count_columns_stops_at_non_number():
    assert count_columns("1 2 x 4") == count_columns("1 2")


def test_count_columns_empty_line():
    assert count_columns("   ") == 0


def test_parse_dataset_rows():
    data = parse_dataset(SAMPLE)
    assert data.rows == (
        (1.0, 0.5, 2.0),
        (2.0, 1.5, 3.0),
        (1.0, 2.5, 7.0),
        (1.0, 4.5, 1.0),
    )
    assert data.num_instances == len(data.rows)
    assert data.num_features == 2


def test_parse_dataset_labels():
    assert parse_dataset(SAMPLE).labels == (1.0, 2.0, 1.0, 1.0)


def test_parse_dataset_without_trailing_newline():
    assert parse_dataset(SAMPLE.rstrip()) == parse_dataset(SAMPLE)


def test_parse_dataset_ragged_tail_rejected():
    with pytest.raises(ValueError):
        parse_dataset(SAMPLE + "2.0 1.0\n")


def test_parse_dataset_non_number_rejected():
    with pytest.raises(ValueError):
        parse_dataset("1 2 3\n2 abc 4\n")


def test_parse_dataset_empty_rejected():
    with pytest.raises(ValueError):
        parse_dataset("\n\n")


def test_load_dataset_matches_parse(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(SAMPLE)
    assert load_dataset(path) == parse_dataset(SAMPLE)


def test_dataset_rejects_mixed_widths():
    with pytest.raises(ValueError):
        Dataset([(1.0, 2.0), (1.0, 2.0, 3.0)])


def test_default_rate_majority_of_ones():
    assert parse_dataset(SAMPLE).default_rate() == 0.75


def test_default_rate_majority_of_others_symmetric():
    ones = Dataset([(1.0, 0.0), (2.0, 0.0), (2.0, 0.0)])
    twos = Dataset([(2.0, 0.0), (1.0, 0.0), (1.0, 0.0)])
    assert ones.default_rate() == twos.default_rate()
    assert ones.default_rate() > 0.5


def test_default_rate_empty_raises():
    with pytest.raises(ValueError):
        Dataset([]).default_rate()


def test_normalize_keeps_labels_and_shape():
    data = parse_dataset(SAMPLE)
    scaled = normalize(data)
    assert scaled.labels == data.labels
    assert scaled.num_features == data.num_features
    assert scaled.num_instances == data.num_instances


def test_normalize_zero_mean_unit_variance():
    scaled = normalize(parse_dataset(SAMPLE))
    for column in list(zip(*scaled.rows))[1:]:
        mean = sum(column) / len(column)
        variance = sum((v - mean) ** 2 for v in column) / len(column)
        assert mean == pytest.approx(0.0, abs=1e-9)
        assert variance == pytest.approx(1.0)


def test_normalize_is_idempotent():
    once = normalize(parse_dataset(SAMPLE))
    twice = normalize(once)
    for a, b in zip(once.rows, twice.rows):
        assert a == pytest.approx(b)


def test_normalize_constant_column_is_nan():
    scaled = normalize(Dataset([(1.0, 4.0), (2.0, 4.0)]))
    assert scaled.labels == (1.0, 2.0)
    nan_flags = [math.isnan(row[1]) for row in scaled.rows]
    assert nan_flags == [True, True]