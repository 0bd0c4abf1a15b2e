"""
Labeled training data and label-arity checks.

A Dataset is an ordered, immutable collection of DataPoints. The arity
functions count distinct labels and answer whether the problem is binary.
"""

import math
import operator
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import overload

from nearclass.classification.errors import NonFiniteFeatureError

FeatureVector = tuple[float, ...]
Label = int


def as_feature_vector(values: Iterable[Real]) -> FeatureVector:
    """
    Normalize a sequence of real numbers to a FeatureVector.

    Accepts lists, tuples and 1-d numpy arrays. No length check is made here;
    emptiness is a property of DataPoint, not of every vector.

    Raises:
        NonFiniteFeatureError: If a value is NaN or infinite.
        ValueError: If a value is not a real number.
    """
    vector = tuple(float(v) for v in values)
    for position, value in enumerate(vector):
        if not math.isfinite(value):
            raise NonFiniteFeatureError(position, value)
    return vector


@dataclass(frozen=True)
class DataPoint:
    """One labeled example: a non-empty feature vector and its class label."""

    features: FeatureVector
    label: Label

    def __post_init__(self) -> None:
        features = as_feature_vector(self.features)
        if not features:
            msg = "DataPoint features must not be empty"
            raise ValueError(msg)
        object.__setattr__(self, "features", features)
        object.__setattr__(self, "label", operator.index(self.label))

    @property
    def dimensionality(self) -> int:
        """Number of features."""
        return len(self.features)


@dataclass(frozen=True)
class Dataset(Sequence[DataPoint]):
    """
    Ordered, read-only training data.

    Dimensional consistency across points is not enforced at construction;
    use is_homogeneous() to check it.
    """

    points: tuple[DataPoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Iterable[Real], Label]]) -> "Dataset":
        """Build a Dataset from (features, label) pairs, keeping their order."""
        return cls(tuple(DataPoint(tuple(features), label) for features, label in pairs))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> DataPoint: ...

    @overload
    def __getitem__(self, index: slice) -> "Dataset": ...

    def __getitem__(self, index: int | slice) -> "DataPoint | Dataset":
        if isinstance(index, slice):
            return Dataset(self.points[index])
        return self.points[index]

    @property
    def labels(self) -> tuple[Label, ...]:
        """Labels in sequence order, duplicates included."""
        return tuple(point.label for point in self.points)

    @property
    def dimensionality(self) -> int | None:
        """Feature length of the first point, or None for an empty dataset."""
        if not self.points:
            return None
        return self.points[0].dimensionality

    def is_homogeneous(self) -> bool:
        """Whether every point has the same dimensionality as the first."""
        expected = self.dimensionality
        return all(point.dimensionality == expected for point in self.points)

    @property
    def is_binary(self) -> bool:
        """Whether exactly two distinct labels are present."""
        return is_binary_classification(self)


def distinct_labels(dataset: Iterable[DataPoint]) -> frozenset[Label]:
    """Return the set of distinct labels present in the dataset."""
    return frozenset(point.label for point in dataset)


def label_arity(dataset: Iterable[DataPoint]) -> int:
    """Return the number of distinct labels present in the dataset."""
    return len(distinct_labels(dataset))


def is_binary_classification(dataset: Iterable[DataPoint]) -> bool:
    """
    Determine whether the dataset describes a binary classification problem.

    True iff exactly two distinct labels are present. Never raises: an empty
    dataset has zero labels and is not binary.
    """
    return label_arity(dataset) == 2
