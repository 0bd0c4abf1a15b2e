"""
Nearest-neighbor prediction under Euclidean distance.

The scan is a brute-force pass over the training data in sequence order.
A point replaces the current best only when it is strictly closer, so the
earliest of several equidistant points wins.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Real

import numpy as np

from nearclass.classification.dataset import (
    Dataset,
    DataPoint,
    Label,
    as_feature_vector,
)
from nearclass.classification.errors import (
    DimensionMismatchError,
    EmptyTrainingDataError,
)
from nearclass.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Neighbor:
    """The training point closest to a query."""

    index: int
    label: Label
    distance: float


def euclidean_distance(a: Iterable[Real], b: Iterable[Real]) -> float:
    """
    Euclidean distance between two equal-length, non-empty vectors.

    Raises:
        DimensionMismatchError: If either vector is empty or lengths differ.
    """
    va = np.asarray(tuple(a), dtype=np.float64)
    vb = np.asarray(tuple(b), dtype=np.float64)
    if va.size == 0 or va.shape != vb.shape:
        raise DimensionMismatchError(expected=va.size, actual=vb.size)
    return float(np.sqrt(np.sum((va - vb) ** 2)))


def _validate_shape(query: tuple[float, ...], dataset: Dataset) -> None:
    expected = dataset.dimensionality
    if not query or len(query) != expected:
        raise DimensionMismatchError(expected=expected, actual=len(query))


def find_nearest(
    query: Iterable[Real],
    dataset: Dataset | Iterable[DataPoint],
) -> Neighbor:
    """
    Find the training point closest to the query.

    Args:
        query: Feature vector to classify.
        dataset: Training data, scanned in order.

    Returns:
        Index, label and distance of the nearest point. Ties resolve to the
        earliest point.

    Raises:
        EmptyTrainingDataError: If the dataset has no points.
        DimensionMismatchError: If the query is empty, or its length differs
            from the first point's or from any later point's.
        NonFiniteFeatureError: If the query holds NaN or infinity.
    """
    if not isinstance(dataset, Dataset):
        dataset = Dataset(tuple(dataset))
    if len(dataset) == 0:
        raise EmptyTrainingDataError
    vector = as_feature_vector(query)
    _validate_shape(vector, dataset)

    first = dataset[0]
    best = Neighbor(
        index=0,
        label=first.label,
        distance=euclidean_distance(vector, first.features),
    )

    for index in range(1, len(dataset)):
        point = dataset[index]
        if point.dimensionality != len(vector):
            raise DimensionMismatchError(
                expected=len(vector), actual=point.dimensionality, index=index
            )
        distance = euclidean_distance(vector, point.features)
        # Strict comparison keeps the earliest of equidistant points
        if distance < best.distance:
            best = Neighbor(index=index, label=point.label, distance=distance)

    log.debug(
        "Nearest neighbor found",
        index=best.index,
        label=best.label,
        distance=best.distance,
        n_points=len(dataset),
    )
    return best


def predict_label(
    query: Iterable[Real],
    dataset: Dataset | Iterable[DataPoint],
) -> Label:
    """
    Predict the label of a feature vector from its nearest training point.

    Args:
        query: Feature vector to classify.
        dataset: Training data.

    Returns:
        Label of the nearest training point; always one present in dataset.

    Raises:
        EmptyTrainingDataError: If the dataset has no points.
        DimensionMismatchError: If the query shape does not match the data.
        NonFiniteFeatureError: If the query holds NaN or infinity.
    """
    return find_nearest(query, dataset).label
