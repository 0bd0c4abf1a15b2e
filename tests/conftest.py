"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pandas as pd
import pytest
import structlog

from nearclass.classification import Dataset
from nearclass.ingestion import flower_dataset, fruit_dataset


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop logging configuration left behind by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fruit() -> Dataset:
    """Fruit sample: three classes, three features."""
    return fruit_dataset()


@pytest.fixture
def flower() -> Dataset:
    """Flower sample: three classes, four features."""
    return flower_dataset()


@pytest.fixture
def binary_dataset() -> Dataset:
    """Dataset with only labels 0 and 1, repeated."""
    return Dataset.from_pairs(
        [
            ((1.0, 1.0), 0),
            ((5.0, 5.0), 1),
            ((1.5, 0.5), 0),
            ((6.0, 4.5), 1),
            ((0.0, 2.0), 0),
        ]
    )


@pytest.fixture
def fruit_frame() -> pd.DataFrame:
    """Fruit sample as a training table."""
    return pd.DataFrame(
        {
            "weight": [150.0, 200.0, 250.0, 160.0, 210.0],
            "texture": [1.0, 0.0, 2.0, 1.0, 0.0],
            "color": [1.0, 0.0, 2.0, 1.0, 0.0],
            "label": [0, 1, 2, 0, 1],
        }
    )


@pytest.fixture
def fruit_csv(tmp_path: Path, fruit_frame: pd.DataFrame) -> Path:
    """Fruit sample written to a CSV file."""
    path = tmp_path / "fruit.csv"
    fruit_frame.to_csv(path, index=False)
    return path
