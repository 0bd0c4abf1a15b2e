"""
Pandera schema for labeled training tables.

One row per example: an integer label column plus one numeric column per
feature. Feature column names are chosen by the data, so the schema is
built per table.
"""

from collections.abc import Sequence

import numpy as np
import pandera.pandas as pa

DEFAULT_LABEL_COLUMN = "label"


def build_training_schema(
    feature_columns: Sequence[str],
    label_column: str = DEFAULT_LABEL_COLUMN,
) -> pa.DataFrameSchema:
    """
    Build the validation schema for a training table.

    Args:
        feature_columns: Feature column names, in feature order.
        label_column: Name of the class label column.

    Returns:
        Schema requiring an integer, non-null label column and finite,
        non-null float feature columns. Extra columns are allowed.
    """
    if not feature_columns:
        msg = "Training table needs at least one feature column"
        raise ValueError(msg)

    columns: dict[str, pa.Column] = {
        # Not coerced: a float label column would be silently truncated
        label_column: pa.Column(
            int,
            nullable=False,
            description="Class label",
        ),
    }
    for name in feature_columns:
        columns[name] = pa.Column(
            float,
            checks=pa.Check(np.isfinite, error="feature values must be finite"),
            nullable=False,
            coerce=True,
            description="Feature value",
        )

    return pa.DataFrameSchema(
        columns,
        name="TrainingTableSchema",
        strict=False,
    )
