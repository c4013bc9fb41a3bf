"""CLI entry point for file-compare."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from file_compare.core.comparator import Comparator
from file_compare.core.config import CompareConfig
from file_compare.core.errors import FileCompareError
from file_compare.core.models import OutputMode, ViewMode
from file_compare.logging_utils import configure_logging
from file_compare.output.export import export
from file_compare.output.rich_output import RichRenderer

if TYPE_CHECKING:
    from file_compare.core.models import ComparisonResult
    from file_compare.output.base import Renderer

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="file-compare",
    help="Compare two files line by line and word by word.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from file_compare import __version__

        typer.echo(f"file-compare {__version__}")
        raise typer.Exit()


def _parse_output_mode(value: str) -> OutputMode:
    """Parse output string to OutputMode enum."""
    try:
        return OutputMode(value)
    except ValueError:
        valid = ", ".join(o.value for o in OutputMode)
        msg = f"Invalid output mode '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg) from None


def _get_renderer(output_mode: OutputMode, *, detailed: bool) -> Renderer:
    """Get the appropriate renderer for the output mode.

    Args:
        output_mode: The output mode to use.
        detailed: Use the detailed layout for console output.

    Returns:
        A renderer instance.
    """
    if output_mode == OutputMode.json:
        from file_compare.output.json_output import JsonRenderer

        return JsonRenderer()

    view = ViewMode.detailed if detailed else ViewMode.side_by_side
    return RichRenderer(view=view)


def _write_export(result: ComparisonResult, destination: Path, *, workbook: bool | None) -> None:
    """Export the result and report where it was written on stderr."""
    report = export(result, workbook=workbook)
    written = report.write_to(destination)
    typer.echo(f"Report written to {written}", err=True)


@app.command()
def main(
    left: Annotated[
        Path,
        typer.Argument(help="Original file to compare."),
    ],
    right: Annotated[
        Path,
        typer.Argument(help="Modified file to compare."),
    ],
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output mode: rich, tui, json, or xlsx."),
    ] = "rich",
    detailed: Annotated[
        bool,
        typer.Option("--detailed", "-d", help="List each change instead of a side-by-side view."),
    ] = False,
    stat: Annotated[
        bool,
        typer.Option("--stat", help="Show only summary counts."),
    ] = False,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-x",
            help="Write the portable report (JSON, or XLSX for spreadsheets) to a file or directory.",
        ),
    ] = None,
    encoding: Annotated[
        str,
        typer.Option("--encoding", help="Text encoding for text and CSV inputs."),
    ] = "utf-8",
    concurrent: Annotated[
        bool,
        typer.Option("--concurrent", help="Read both files at the same time."),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv)."),
    ] = 0,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Compare two files position by position.

    Text, CSV, and XLSX files are compared by content; Word, PDF, and image
    files are compared by their metadata.
    """
    configure_logging(verbose)

    try:
        output_mode = _parse_output_mode(output)
        if output_mode == OutputMode.xlsx and export_path is None:
            msg = "--output xlsx requires --export PATH"
            raise typer.BadParameter(msg)

        config = CompareConfig(encoding=encoding, concurrent_reads=concurrent)
        result = Comparator(config).compare(left, right)

        # TUI runs its own event loop, so it bypasses the renderers
        if output_mode == OutputMode.tui:
            from file_compare.tui import FileCompareApp

            FileCompareApp(result, stat_only=stat).run()
        elif output_mode != OutputMode.xlsx:
            renderer = _get_renderer(output_mode, detailed=detailed)
            if stat:
                renderer.render_stats(result.summary)
            else:
                renderer.render(result)

        if export_path is not None:
            workbook = True if output_mode == OutputMode.xlsx else None
            _write_export(result, export_path, workbook=workbook)

    except FileCompareError as exc:
        logger.debug("Comparison failed", exc_info=exc)
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=2) from None
    except OSError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None
