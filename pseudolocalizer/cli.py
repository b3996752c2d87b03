"""
Command-line interface for the pseudo-localizer.

Generates pseudo-localized versions of resource files (.resx, .json). The
output is written next to each input with the output culture (qps-ploc by
default) inserted before the extension.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from pseudolocalizer.config import configured_transforms, load_config
from pseudolocalizer.cultures import is_valid_culture
from pseudolocalizer.exceptions import UnknownTransformError
from pseudolocalizer.logger import get_logger, refresh_log_mode
from pseudolocalizer.resources.files import process_files
from pseudolocalizer.transforms.pipeline import (
    TRANSFORM_DESCRIPTIONS,
    TRANSFORMS,
    Pipeline,
)

logger = get_logger(__name__)

app = typer.Typer(
    name="pseudolocalize",
    help="Generate pseudo-localized versions of resource files.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def select_transforms(enabled_flags: List[str], explicit: List[str], default: List[str]) -> List[str]:
    """
    Decide which transforms run and in what order.

    Flags register in the canonical order (l, a, b, m, u) whatever order they
    were typed in; --transform keeps the order it was given. With neither,
    the configured default applies.
    """
    if explicit:
        return list(explicit)
    if enabled_flags:
        return [name for name in TRANSFORMS if name in enabled_flags]
    return list(default)


def _print_transforms(default: List[str]) -> None:
    table = Table(title="Transforms")
    table.add_column("Name", style="cyan")
    table.add_column("Default")
    table.add_column("Description")
    for name in TRANSFORMS:
        table.add_row(name, "yes" if name in default else "", TRANSFORM_DESCRIPTIONS[name])
    console.print(table)


@app.command()
def main(
    files: Optional[List[Path]] = typer.Argument(None, help="Resource files (.resx or .json) to pseudo-localize."),
    output_culture: Optional[str] = typer.Option(
        None, "--output-culture", "-o", help="Culture code used in the output file names."
    ),
    extra_length: bool = typer.Option(False, "--extra-length", "-l", help=TRANSFORM_DESCRIPTIONS["extra_length"]),
    accents: bool = typer.Option(False, "--accents", "-a", help=TRANSFORM_DESCRIPTIONS["accents"]),
    brackets: bool = typer.Option(False, "--brackets", "-b", help=TRANSFORM_DESCRIPTIONS["brackets"]),
    mirror: bool = typer.Option(False, "--mirror", "-m", help=TRANSFORM_DESCRIPTIONS["mirror"]),
    underscores: bool = typer.Option(False, "--underscores", "-u", help=TRANSFORM_DESCRIPTIONS["underscores"]),
    transform: Optional[List[str]] = typer.Option(
        None, "--transform", "-t", help="Transform to apply, in order. Repeatable; overrides the flags."
    ),
    text: Optional[str] = typer.Option(None, "--text", help="Pseudo-localize a single string and print it."),
    list_transforms: bool = typer.Option(False, "--list-transforms", help="List available transforms and exit."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.json."),
) -> None:
    """
    Generate pseudo-localized versions of the specified resource files.

    The default options, if none are given, are: -l -a -b.
    """
    config = load_config(config_path)
    if config_path is not None:
        refresh_log_mode(config.get("log_mode"))
    default = configured_transforms(config)

    if list_transforms:
        _print_transforms(default)
        raise typer.Exit()

    flags = {
        "extra_length": extra_length,
        "accents": accents,
        "brackets": brackets,
        "mirror": mirror,
        "underscores": underscores,
    }
    enabled_flags = [name for name, enabled in flags.items() if enabled]
    if transform and enabled_flags:
        err_console.print("ERROR: --transform cannot be combined with the single-letter transform flags.")
        raise typer.Exit(code=2)

    names = select_transforms(enabled_flags, transform or [], default)
    try:
        pipeline = Pipeline.from_names(names)
    except UnknownTransformError as e:
        err_console.print(f"ERROR: {e}. Available: {', '.join(TRANSFORMS)}", markup=False, soft_wrap=True)
        raise typer.Exit(code=2)

    if text is not None:
        typer.echo(pipeline(text))
        return

    culture = output_culture or config.get("output_culture")
    if not is_valid_culture(culture):
        err_console.print(f"ERROR: Invalid output culture \"{culture}\".", markup=False)
        raise typer.Exit(code=2)

    if not files:
        err_console.print("ERROR: No input files given. Use --help for usage.")
        raise typer.Exit(code=2)

    logger.debug(f"Processing {len(files)} files with {list(pipeline.names)} -> {culture}")
    batch = process_files(files, pipeline.names, culture)

    for result in batch.succeeded:
        console.print(f"The file {result.output_path} was written successfully.", markup=False, highlight=False, soft_wrap=True)
    for path, reason in batch.failed:
        err_console.print(f"{path}: {reason}", markup=False, highlight=False, soft_wrap=True)

    if not batch.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
