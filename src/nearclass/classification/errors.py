"""
Error types raised by the classification core.

Every kind describes malformed input. They are deterministic for a given
input and are never retried.
"""


class ClassificationError(ValueError):
    """Base class for invalid-input errors raised during classification."""


class EmptyTrainingDataError(ClassificationError):
    """Raised when prediction is requested against a dataset with no points."""

    def __init__(self, msg: str = "training data is empty") -> None:
        super().__init__(msg)


class DimensionMismatchError(ClassificationError):
    """
    Raised when a feature vector has the wrong number of dimensions.

    Attributes:
        expected: Dimensionality the vector was compared against.
        actual: Dimensionality of the offending vector.
        index: Position of the offending training point, or None when the
            query itself is malformed.
    """

    def __init__(
        self,
        expected: int | None,
        actual: int,
        index: int | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.index = index
        msg = "feature vector size mismatch"
        if index is not None:
            msg = f"{msg} at training point {index}"
        msg = f"{msg} (expected {expected}, got {actual})"
        super().__init__(msg)


class NonFiniteFeatureError(ClassificationError):
    """
    Raised when a feature vector holds NaN or infinity.

    Attributes:
        position: Index of the first non-finite value.
        value: The offending value.
    """

    def __init__(self, position: int, value: float) -> None:
        self.position = position
        self.value = value
        msg = f"Feature values must be finite, got {value!r} at position {position}"
        super().__init__(msg)
