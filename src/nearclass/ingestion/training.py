"""
Training data ingestion from CSV.

Loads a labeled table, validates it against the training schema and
converts it into a Dataset in row order.
"""

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from nearclass.classification.dataset import DataPoint, Dataset
from nearclass.schemas.training import DEFAULT_LABEL_COLUMN, build_training_schema
from nearclass.utils.logging import get_logger

log = get_logger(__name__)


def _resolve_feature_columns(
    df: pd.DataFrame,
    label_column: str,
    feature_columns: Sequence[str] | None,
) -> list[str]:
    """Pick feature columns: explicit ones, or every non-label column."""
    if label_column not in df.columns:
        msg = f"Label column '{label_column}' not found in columns {list(df.columns)}"
        raise ValueError(msg)

    if feature_columns is None:
        return [str(col) for col in df.columns if col != label_column]

    missing = [col for col in feature_columns if col not in df.columns]
    if missing:
        msg = f"Feature columns not found: {', '.join(missing)}"
        raise ValueError(msg)
    if label_column in feature_columns:
        msg = f"Label column '{label_column}' cannot also be a feature column"
        raise ValueError(msg)
    return list(feature_columns)


def dataset_from_frame(
    df: pd.DataFrame,
    label_column: str = DEFAULT_LABEL_COLUMN,
    feature_columns: Sequence[str] | None = None,
) -> Dataset:
    """
    Convert a training table into a Dataset.

    Args:
        df: Table with one row per example.
        label_column: Name of the class label column.
        feature_columns: Feature columns in feature order. Defaults to every
            column except the label, in table order.

    Returns:
        Dataset with one DataPoint per row, in row order. A table without
        rows gives an empty Dataset.

    Raises:
        ValueError: If the label or a feature column is missing.
        pandera.errors.SchemaErrors: If the table fails validation; every
            failing check is collected.
    """
    columns = _resolve_feature_columns(df, label_column, feature_columns)
    schema = build_training_schema(columns, label_column=label_column)
    if df.empty:
        # A header-only table has untyped columns; it is still a valid empty dataset
        return Dataset()

    validated = schema.validate(df, lazy=True)

    features = validated[columns].to_numpy(dtype=float)
    labels = validated[label_column].to_numpy()

    return Dataset(
        tuple(
            DataPoint(tuple(row), int(label))
            for row, label in zip(features, labels, strict=True)
        )
    )


def load_training_csv(
    path: Path,
    label_column: str = DEFAULT_LABEL_COLUMN,
    feature_columns: Sequence[str] | None = None,
) -> Dataset:
    """
    Load a labeled training CSV into a Dataset.

    Args:
        path: CSV file with a header row.
        label_column: Name of the class label column.
        feature_columns: Feature columns in feature order (default: all
            non-label columns).

    Returns:
        Validated Dataset.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If required columns are missing.
        pandera.errors.SchemaErrors: If the table fails validation; every
            failing check is collected.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Training data file not found: {path}"
        raise FileNotFoundError(msg)

    log.info("Loading training data", path=str(path))
    df = pd.read_csv(path)
    log.info("Loaded raw data", rows=len(df), columns=list(df.columns))

    dataset = dataset_from_frame(df, label_column, feature_columns)
    log.info(
        "Training data ready",
        points=len(dataset),
        dimensionality=dataset.dimensionality,
    )
    return dataset
