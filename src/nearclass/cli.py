"""Command-line interface for nearest-neighbor classification."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

import pandera.errors
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from nearclass.classification import (
    ClassificationError,
    Dataset,
    FeatureVector,
    Label,
    find_nearest,
)
from nearclass.config.settings import DisplayConfig
from nearclass.formatting import dataset_table, describe_arity, join_features
from nearclass.utils.logging import configure_logging, get_logger, log_context

app = typer.Typer(
    name="nearclass",
    help="Nearest-neighbor classification for small labeled datasets.",
    no_args_is_help=True,
)

console = Console()
log = get_logger(__name__)


@dataclass
class _Source:
    """A dataset selected on the command line, with its display settings."""

    name: str
    dataset: Dataset
    classes: Mapping[Label, str] = field(default_factory=dict)
    display: DisplayConfig = field(default_factory=DisplayConfig)


SampleOption = Annotated[
    str | None,
    typer.Option("--sample", "-s", help="Built-in sample dataset: fruit or flower."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]
DataOption = Annotated[
    Path | None,
    typer.Option(
        "--data",
        "-d",
        help="Path to training CSV with a 'label' column.",
        exists=True,
        dir_okay=False,
    ),
]


def parse_features(raw: str) -> FeatureVector:
    """
    Parse a comma-separated feature vector such as '180,1,1'.

    Raises:
        typer.BadParameter: If a value is not a number or the list is empty.
    """
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    if not parts:
        msg = "Feature vector must contain at least one value"
        raise typer.BadParameter(msg)
    try:
        values = tuple(float(part) for part in parts)
    except ValueError as e:
        msg = f"Invalid feature vector {raw!r}: {e}"
        raise typer.BadParameter(msg) from e
    if not all(math.isfinite(value) for value in values):
        msg = f"Feature values must be finite: {raw!r}"
        raise typer.BadParameter(msg)
    return values


def _load_source(
    sample: str | None,
    config: Path | None,
    data: Path | None,
) -> _Source:
    """Load the dataset chosen by exactly one of --sample, --config, --data."""
    chosen = [opt for opt in (sample, config, data) if opt is not None]
    if len(chosen) != 1:
        console.print("[red]Error: Give exactly one of --sample, --config or --data.[/red]")
        raise typer.Exit(code=1)

    from nearclass.ingestion import get_sample, load_training_csv

    try:
        if sample is not None:
            entry = get_sample(sample)
            return _Source(name=entry.name, dataset=entry.load(), classes=entry.classes)
        elif config is not None:
            from nearclass.config.loader import load_config

            app_config = load_config(config)
            # The config file's logging section takes over from the CLI flags
            configure_logging(
                level=app_config.logging.level,
                json_output=app_config.logging.json_output,
            )
            dataset = load_training_csv(
                app_config.data.resolve(),
                label_column=app_config.data.label_column,
                feature_columns=app_config.data.feature_columns,
            )
            return _Source(
                name=app_config.data.path.stem,
                dataset=dataset,
                classes=app_config.classes,
                display=app_config.display,
            )
        else:
            return _Source(name=data.stem, dataset=load_training_csv(data))

    except KeyError as e:
        console.print(f"[red]Error: {escape(str(e.args[0]))}[/red]")
        raise typer.Exit(code=1) from e
    except FileNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    except (
        ValueError,
        ValidationError,
        pandera.errors.SchemaError,
        pandera.errors.SchemaErrors,
    ) as e:
        console.print(f"[red]Invalid training data or config: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _print_dataset(source: _Source) -> None:
    console.print(
        dataset_table(
            source.dataset,
            title=f"{source.name.capitalize()} Training Data",
            classes=source.classes or None,
            separator=source.display.separator,
            precision=source.display.precision,
        )
    )
    console.print(
        f"The {source.name} classification problem is "
        f"[bold]{describe_arity(source.dataset)}[/bold]."
    )


def _print_prediction(source: _Source, features: FeatureVector) -> None:
    """Predict and print the label for one query; errors exit with code 1."""
    display = source.display
    with log_context(dataset=source.name):
        try:
            neighbor = find_nearest(features, source.dataset)
        except ClassificationError as e:
            log.warning("Prediction failed", error=str(e))
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e

    class_name = source.classes.get(neighbor.label)
    suffix = f" ({class_name})" if class_name else ""
    console.print(
        f"Predicted label for [{join_features(features, display.separator, display.precision)}]: "
        f"[green]{neighbor.label}{suffix}[/green]"
    )
    console.print(
        f"[dim]Nearest training point #{neighbor.index}, "
        f"distance {neighbor.distance:.4f}[/dim]"
    )


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON lines."),
    ] = False,
) -> None:
    """Configure logging before running a command."""
    configure_logging(level=log_level, json_output=json_logs)


@app.command()
def demo() -> None:
    """Show the sample datasets and classify a new fruit."""
    from nearclass.ingestion import SAMPLE_DATASETS
    from nearclass.ingestion.samples import FRUIT_QUERY

    for entry in SAMPLE_DATASETS.values():
        _print_dataset(_Source(name=entry.name, dataset=entry.load(), classes=entry.classes))
        console.print()

    fruit = SAMPLE_DATASETS["fruit"]
    _print_prediction(
        _Source(name=fruit.name, dataset=fruit.load(), classes=fruit.classes),
        FRUIT_QUERY,
    )


@app.command()
def inspect(
    sample: SampleOption = None,
    config: ConfigOption = None,
    data: DataOption = None,
) -> None:
    """Print a dataset and report whether it is binary or multi-class."""
    source = _load_source(sample, config, data)
    _print_dataset(source)


@app.command()
def predict(
    features: Annotated[
        str,
        typer.Option(
            "--features",
            "-f",
            help="Comma-separated feature vector, e.g. 180,1,1.",
        ),
    ],
    sample: SampleOption = None,
    config: ConfigOption = None,
    data: DataOption = None,
) -> None:
    """Predict the label of a feature vector from its nearest neighbor."""
    query = parse_features(features)
    source = _load_source(sample, config, data)
    _print_prediction(source, query)


if __name__ == "__main__":
    app()
