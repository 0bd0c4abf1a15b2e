"""
Classification core.

Label-arity checks over labeled training data and nearest-neighbor
prediction under Euclidean distance.
"""

from nearclass.classification.dataset import (
    DataPoint,
    Dataset,
    FeatureVector,
    Label,
    distinct_labels,
    is_binary_classification,
    label_arity,
)
from nearclass.classification.errors import (
    ClassificationError,
    DimensionMismatchError,
    EmptyTrainingDataError,
    NonFiniteFeatureError,
)
from nearclass.classification.neighbors import (
    Neighbor,
    euclidean_distance,
    find_nearest,
    predict_label,
)

__all__ = [
    "ClassificationError",
    "DataPoint",
    "Dataset",
    "DimensionMismatchError",
    "EmptyTrainingDataError",
    "FeatureVector",
    "Label",
    "Neighbor",
    "NonFiniteFeatureError",
    "distinct_labels",
    "euclidean_distance",
    "find_nearest",
    "is_binary_classification",
    "label_arity",
    "predict_label",
]
