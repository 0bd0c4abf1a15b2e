"""Tests for nearest-neighbor prediction."""

import math
import random

import numpy as np
import pytest

from nearclass.classification import (
    DataPoint,
    Dataset,
    DimensionMismatchError,
    ClassificationError,
    EmptyTrainingDataError,
    NonFiniteFeatureError,
    euclidean_distance,
    find_nearest,
    predict_label,
)


class TestEuclideanDistance:
    """Tests for the distance function."""

    def test_known_distance(self) -> None:
        """Test a 3-4-5 triangle."""
        assert euclidean_distance((0.0, 0.0), (3.0, 4.0)) == pytest.approx(5.0)

    def test_is_square_root_of_sum(self) -> None:
        """Test the distance is not left squared."""
        assert euclidean_distance((180.0, 1.0, 1.0), (150.0, 1.0, 1.0)) == 30.0

    def test_symmetric(self) -> None:
        """Test d(a, b) == d(b, a)."""
        a, b = (1.5, -2.0, 7.0), (0.0, 3.0, -1.0)
        assert euclidean_distance(a, b) == euclidean_distance(b, a)

    def test_accepts_numpy_arrays(self) -> None:
        """Test numpy inputs."""
        assert euclidean_distance(np.array([1.0, 1.0]), [1.0, 1.0]) == 0.0

    def test_length_mismatch(self) -> None:
        """Test unequal lengths are rejected."""
        with pytest.raises(DimensionMismatchError):
            euclidean_distance((1.0, 2.0), (1.0,))

    def test_empty_vectors(self) -> None:
        """Test empty vectors are rejected."""
        with pytest.raises(DimensionMismatchError):
            euclidean_distance((), ())


class TestPredictLabel:
    """Tests for predict_label and find_nearest."""

    def test_fruit_query_predicts_apple(self, fruit: Dataset) -> None:
        """Test the nearest fruit to (180, 1, 1) is the 160 g apple."""
        assert predict_label((180.0, 1.0, 1.0), fruit) == 0

        neighbor = find_nearest([180.0, 1.0, 1.0], fruit)
        assert neighbor.index == 3
        assert neighbor.label == 0
        assert neighbor.distance == pytest.approx(20.0)

    def test_exact_match_has_zero_distance(self, flower: Dataset) -> None:
        """Test querying a training point returns its own label."""
        neighbor = find_nearest((6.3, 3.3, 6.0, 2.5), flower)
        assert neighbor.label == 2
        assert neighbor.distance == 0.0

    def test_flower_query(self, flower: Dataset) -> None:
        """Test a query close to the versicolor examples."""
        assert predict_label((6.8, 3.1, 4.5, 1.4), flower) == 1

    def test_single_point_dataset(self) -> None:
        """Test a dataset with one point always predicts its label."""
        dataset = Dataset.from_pairs([((1.0, 1.0), 42)])
        assert predict_label((100.0, -100.0), dataset) == 42

    def test_accepts_plain_sequence_of_points(self) -> None:
        """Test a list of DataPoints works as training data."""
        points = [DataPoint((0.0,), 0), DataPoint((10.0,), 1)]
        assert predict_label((9.0,), points) == 1

    def test_huge_values_still_return_a_label(self) -> None:
        """Test overflowing distances do not yield a sentinel."""
        dataset = Dataset.from_pairs([((1e200,), 5), ((-1e200,), 6)])
        assert predict_label((-1e200,), dataset) == 6


class TestTieBreak:
    """Tests for first-encountered-wins tie breaking."""

    def test_equidistant_points_return_first(self) -> None:
        """Test two points at equal distance resolve to the earlier one."""
        dataset = Dataset.from_pairs([((0.0, 0.0), 1), ((2.0, 0.0), 2)])
        assert predict_label((1.0, 0.0), dataset) == 1

        reversed_dataset = Dataset.from_pairs([((2.0, 0.0), 2), ((0.0, 0.0), 1)])
        assert predict_label((1.0, 0.0), reversed_dataset) == 2

    def test_duplicate_points_return_first(self) -> None:
        """Test identical features with different labels keep the first."""
        dataset = Dataset.from_pairs([((3.0, 3.0), 9), ((1.0, 1.0), 7), ((1.0, 1.0), 8)])
        neighbor = find_nearest((1.0, 1.0), dataset)
        assert neighbor.index == 1
        assert neighbor.label == 7

    def test_tie_is_deterministic(self) -> None:
        """Test repeated calls give the same answer."""
        dataset = Dataset.from_pairs([((-1.0,), 0), ((1.0,), 1)])
        assert {predict_label((0.0,), dataset) for _ in range(50)} == {0}


class TestValidation:
    """Tests for input validation errors."""

    def test_empty_dataset(self) -> None:
        """Test prediction against no data fails."""
        with pytest.raises(EmptyTrainingDataError, match="training data is empty"):
            predict_label((1.0, 2.0), Dataset())

    def test_empty_dataset_checked_before_query(self) -> None:
        """Test an empty dataset is reported even for an empty query."""
        with pytest.raises(EmptyTrainingDataError):
            predict_label((), [])

    def test_dimension_mismatch(self, fruit: Dataset) -> None:
        """Test a 2-d query against 3-d data fails."""
        with pytest.raises(DimensionMismatchError, match="feature vector size mismatch") as exc:
            predict_label((1.0, 2.0), fruit)
        assert exc.value.expected == 3
        assert exc.value.actual == 2
        assert exc.value.index is None

    def test_longer_query_mismatch(self, fruit: Dataset) -> None:
        """Test a 4-d query against 3-d data fails."""
        with pytest.raises(DimensionMismatchError):
            predict_label((1.0, 2.0, 3.0, 4.0), fruit)

    def test_empty_query(self, fruit: Dataset) -> None:
        """Test an empty query fails."""
        with pytest.raises(DimensionMismatchError) as exc:
            predict_label((), fruit)
        assert exc.value.actual == 0

    def test_errors_are_value_errors(self, fruit: Dataset) -> None:
        """Test callers can handle both kinds as ValueError."""
        with pytest.raises(ValueError):
            predict_label((1.0,), fruit)
        with pytest.raises(ValueError):
            predict_label((1.0,), Dataset())

    def test_non_finite_query(self, fruit: Dataset) -> None:
        """Test NaN and infinity in the query are classification errors."""
        with pytest.raises(NonFiniteFeatureError) as exc:
            predict_label((180.0, math.inf, 1.0), fruit)
        assert exc.value.position == 1
        assert isinstance(exc.value, ClassificationError)
        with pytest.raises(ClassificationError, match="finite"):
            predict_label((float("nan"),), Dataset.from_pairs([((1.0,), 0)]))

    def test_empty_dataset_checked_before_finiteness(self) -> None:
        """Test an empty dataset is reported before a non-finite query."""
        with pytest.raises(EmptyTrainingDataError):
            predict_label((math.inf,), Dataset())

    def test_inconsistent_later_point_rejected(self) -> None:
        """Test a later point with a different length is reported by index."""
        dataset = Dataset.from_pairs([((0.0, 0.0), 0), ((1.0, 1.0), 1), ((5.0,), 2)])
        with pytest.raises(DimensionMismatchError, match="training point 2") as exc:
            predict_label((1.0, 1.0), dataset)
        assert exc.value.index == 2
        assert exc.value.expected == 2
        assert exc.value.actual == 1


class TestNearestNeighborProperties:
    """Property checks over random datasets."""

    def test_prediction_is_nearest_and_seen(self) -> None:
        """Test the returned label is present and no point is strictly closer."""
        rng = random.Random(42)
        for _ in range(200):
            dim = rng.randint(1, 5)
            size = rng.randint(1, 15)
            dataset = Dataset.from_pairs(
                (tuple(rng.uniform(-50, 50) for _ in range(dim)), rng.randrange(4))
                for _ in range(size)
            )
            query = tuple(rng.uniform(-50, 50) for _ in range(dim))

            neighbor = find_nearest(query, dataset)
            distances = [math.dist(query, p.features) for p in dataset]

            assert neighbor.label in dataset.labels
            assert neighbor.label == dataset[neighbor.index].label
            assert all(neighbor.distance <= d + 1e-9 for d in distances)
            # No earlier point is closer than the chosen one
            assert all(d > neighbor.distance - 1e-9 for d in distances[: neighbor.index])
