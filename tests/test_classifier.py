import pytest

from featselect.classifier import accuracy, distance, make_evaluator
from featselect.dataset import Dataset

CLUSTERS = Dataset(
    [
        (1.0, 0.0, 50.0),
        (1.0, 1.0, -20.0),
        (1.0, 2.0, 13.0),
        (2.0, 10.0, 40.0),
        (2.0, 11.0, -5.0),
        (2.0, 12.0, 0.0),
    ]
)

ALTERNATING = Dataset(
    [
        (1.0, 0.0),
        (2.0, 1.0),
        (1.0, 10.0),
        (2.0, 11.0),
    ]
)


def test_distance_pythagorean():
    assert distance((1.0, 0.0, 0.0), (2.0, 3.0, 4.0), [1, 2]) == 5.0


def test_distance_symmetric_and_zero_on_self():
    a, b = CLUSTERS.rows[0], CLUSTERS.rows[4]
    assert distance(a, b, [1, 2]) == distance(b, a, [1, 2])
    assert distance(a, a, [1, 2]) == 0


def test_distance_ignores_unselected_features():
    a, b = (1.0, 3.0, 100.0), (1.0, 3.0, -100.0)
    assert distance(a, b, [1]) == 0
    assert distance(a, b, []) == 0


def test_accuracy_separable_feature():
    assert accuracy(CLUSTERS, [1]) == 1.0


def test_accuracy_all_nearest_neighbours_wrong():
    assert accuracy(ALTERNATING, [1]) == 0.0


def test_accuracy_within_bounds():
    for features in ([], [1], [2], [1, 2]):
        assert 0 <= accuracy(CLUSTERS, features) <= 1


def test_accuracy_noise_feature_not_better():
    assert accuracy(CLUSTERS, [2]) <= accuracy(CLUSTERS, [1])


def test_accuracy_k3_agrees_on_clusters():
    assert accuracy(CLUSTERS, [1], k=3) == accuracy(CLUSTERS, [1], k=1)


@pytest.mark.parametrize("k", [0, 2, 4, -1])
def test_accuracy_rejects_bad_k(k):
    with pytest.raises(ValueError):
        accuracy(CLUSTERS, [1], k=k)


def test_accuracy_rejects_k_larger_than_neighbours():
    with pytest.raises(ValueError):
        accuracy(ALTERNATING, [1], k=5)


def test_accuracy_rejects_empty_dataset():
    with pytest.raises(ValueError):
        accuracy(Dataset([]), [1])


def test_make_evaluator_matches_accuracy():
    evaluate = make_evaluator(CLUSTERS, k=3)
    for features in ([1], [2], [1, 2]):
        assert evaluate(features) == accuracy(CLUSTERS, features, k=3)


def test_make_evaluator_rejects_bad_k():
    with pytest.raises(ValueError):
        make_evaluator(CLUSTERS, k=2)