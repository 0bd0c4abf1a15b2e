"""
Built-in sample datasets.

Two small labeled datasets used by the demo command and the tests:
fruit (weight, texture, color) and flower (sepal and petal measurements).
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from nearclass.classification.dataset import Dataset, FeatureVector, Label

FRUIT_CLASSES: dict[Label, str] = {0: "apple", 1: "pear", 2: "banana"}

FLOWER_CLASSES: dict[Label, str] = {0: "setosa", 1: "versicolor", 2: "virginica"}

# Query used by the demo; its nearest fruit is the 160 g apple
FRUIT_QUERY: FeatureVector = (180.0, 1.0, 1.0)


def fruit_dataset() -> Dataset:
    """Fruit examples: (weight in grams, texture code, color code)."""
    return Dataset.from_pairs(
        [
            ((150.0, 1.0, 1.0), 0),
            ((200.0, 0.0, 0.0), 1),
            ((250.0, 2.0, 2.0), 2),
            ((160.0, 1.0, 1.0), 0),
            ((210.0, 0.0, 0.0), 1),
        ]
    )


def flower_dataset() -> Dataset:
    """Flower examples: (sepal length, sepal width, petal length, petal width)."""
    return Dataset.from_pairs(
        [
            ((5.1, 3.5, 1.4, 0.2), 0),
            ((7.0, 3.2, 4.7, 1.4), 1),
            ((6.3, 3.3, 6.0, 2.5), 2),
            ((4.9, 3.1, 1.5, 0.1), 0),
            ((6.7, 3.1, 4.4, 1.4), 1),
        ]
    )


@dataclass(frozen=True)
class Sample:
    """A named sample dataset with its class names."""

    name: str
    factory: Callable[[], Dataset]
    classes: Mapping[Label, str] = field(default_factory=dict)

    def load(self) -> Dataset:
        """Build the dataset."""
        return self.factory()


SAMPLE_DATASETS: dict[str, Sample] = {
    "fruit": Sample(name="fruit", factory=fruit_dataset, classes=FRUIT_CLASSES),
    "flower": Sample(name="flower", factory=flower_dataset, classes=FLOWER_CLASSES),
}


def get_sample(name: str) -> Sample:
    """
    Look up a sample dataset by name.

    Raises:
        KeyError: If no sample has that name.
    """
    try:
        return SAMPLE_DATASETS[name]
    except KeyError:
        msg = f"Unknown sample dataset '{name}'. Available: {', '.join(SAMPLE_DATASETS)}"
        raise KeyError(msg) from None
