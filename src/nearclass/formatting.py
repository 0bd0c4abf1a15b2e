"""
Display formatting for feature vectors and datasets.

Plain-text helpers render fixed-precision numbers; dataset_table renders a
Rich table for the console.
"""

from collections.abc import Iterable, Mapping

from rich.table import Table

from nearclass.classification.dataset import Dataset, DataPoint, Label, label_arity


def format_float(value: float, precision: int = 1) -> str:
    """Render a number with fixed precision, e.g. 150 -> '150.0'."""
    return f"{value:.{precision}f}"


def join_features(
    features: Iterable[float],
    separator: str = ", ",
    precision: int = 1,
) -> str:
    """Join feature values, e.g. (150, 1, 1) -> '150.0, 1.0, 1.0'."""
    return separator.join(format_float(value, precision) for value in features)


def format_data_point(
    point: DataPoint,
    separator: str = ", ",
    precision: int = 1,
) -> str:
    """Render one example as 'Features: [150.0, 1.0, 1.0], Label: 0'."""
    return (
        f"Features: [{join_features(point.features, separator, precision)}], "
        f"Label: {point.label}"
    )


def format_dataset(
    dataset: Dataset,
    separator: str = ", ",
    precision: int = 1,
) -> str:
    """Render every example on its own line."""
    return "\n".join(
        format_data_point(point, separator, precision) for point in dataset
    )


def describe_arity(dataset: Dataset) -> str:
    """Name the kind of problem the label set describes."""
    arity = label_arity(dataset)
    if arity == 2:
        return "binary"
    if arity > 2:
        return "multi-class"
    return "single-class" if arity == 1 else "empty"


def dataset_table(
    dataset: Dataset,
    title: str | None = None,
    classes: Mapping[Label, str] | None = None,
    separator: str = ", ",
    precision: int = 1,
) -> Table:
    """
    Build a Rich table with one row per example.

    Args:
        dataset: Examples to show.
        title: Optional table title.
        classes: Optional label -> class name mapping for an extra column.
        separator: Separator between feature values.
        precision: Digits after the decimal point.

    Returns:
        Table ready for Console.print().
    """
    table = Table(title=title, show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Features", style="cyan")
    table.add_column("Label", justify="right", style="green")
    if classes:
        table.add_column("Class", style="magenta")

    for index, point in enumerate(dataset):
        row = [
            str(index),
            f"[{join_features(point.features, separator, precision)}]",
            str(point.label),
        ]
        if classes:
            row.append(classes.get(point.label, "-"))
        table.add_row(*row)

    return table
