"""Training data ingestion and built-in sample datasets."""

from nearclass.ingestion.samples import (
    FLOWER_CLASSES,
    FRUIT_CLASSES,
    SAMPLE_DATASETS,
    Sample,
    flower_dataset,
    fruit_dataset,
    get_sample,
)
from nearclass.ingestion.training import dataset_from_frame, load_training_csv

__all__ = [
    "FLOWER_CLASSES",
    "FRUIT_CLASSES",
    "SAMPLE_DATASETS",
    "Sample",
    "dataset_from_frame",
    "flower_dataset",
    "fruit_dataset",
    "get_sample",
    "load_training_csv",
]
