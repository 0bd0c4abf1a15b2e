"""
Nearclass: nearest-neighbor classification for small labeled datasets.

This package decides whether a labeled dataset is a binary classification
problem and predicts labels for new feature vectors from their nearest
training example.
"""

from importlib.metadata import version

from nearclass.classification import (
    ClassificationError,
    DataPoint,
    Dataset,
    DimensionMismatchError,
    EmptyTrainingDataError,
    NonFiniteFeatureError,
    is_binary_classification,
    predict_label,
)

__version__ = version("nearclass")

__all__ = [
    "ClassificationError",
    "DataPoint",
    "Dataset",
    "DimensionMismatchError",
    "EmptyTrainingDataError",
    "NonFiniteFeatureError",
    "__version__",
    "is_binary_classification",
    "predict_label",
]
