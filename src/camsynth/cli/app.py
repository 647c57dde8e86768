"""CLI application entry point for camsynth.

This module provides the main CLI interface using Typer.
"""

import sys
import time
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from camsynth import __version__
from camsynth.cli.output import (
    console,
    print_curve_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from camsynth.config import CamSynthSettings, LinkageConfig, LoggingConfig
from camsynth.core.processor import CamProcessor
from camsynth.exceptions import (
    CamSynthError,
    LinkageInfeasibleError,
    OutputError,
    SourceReadError,
    UnsupportedGeometryError,
)
from camsynth.io import ProfileWriter, select_paths_by_id


class LogLevel(str, Enum):
    """Console log levels accepted by --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# Create the Typer app
app = typer.Typer(
    name="camsynth",
    help="Synthesize four-bar linkage cam-follower profiles from an SVG curve.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]camsynth[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def synthesize(
    svg_file: Annotated[
        Path | None,
        typer.Argument(
            help="SVG file defining the curve (default: standard input)",
            show_default=False,
        ),
    ] = None,
    svg_output: Annotated[
        Path | None,
        typer.Option(
            "--svg-output",
            "-o",
            help="SVG output file ('-' for standard output)",
        ),
    ] = None,
    ldraw_output: Annotated[
        Path | None,
        typer.Option(
            "--ldraw-output",
            "-l",
            help="LDraw output file, written as {name}_1 and {name}_2",
        ),
    ] = None,
    stl_output: Annotated[
        Path | None,
        typer.Option(
            "--stl-output",
            "-s",
            help="STL output file, written as {name}_1 and {name}_2",
        ),
    ] = None,
    svg_template: Annotated[
        Path | None,
        typer.Option(
            "--svg-template",
            help="Write an empty SVG template for the curve and exit",
        ),
    ] = None,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            "-n",
            help="Angular steps per revolution",
            min=3,
            max=100_000,
        ),
    ] = 400,
    path_ids: Annotated[
        list[str] | None,
        typer.Option(
            "--path-id",
            help="Only use path elements with this id (repeatable)",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Synthesize the follower profiles of a four-bar linkage tracing an SVG curve.

    The curve is read from the path elements of the SVG document, sampled
    uniformly by arc length over one revolution, and turned into two
    follower profiles. Only the first of -o, -l and -s is used.

    Example:
        camsynth curve.svg -o profiles.svg
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = CamSynthSettings(
        linkage=LinkageConfig(samples=samples),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="INFO" if verbose else log_level.value,
        ),
    )
    writer = ProfileWriter(settings.mesh)

    try:
        # Template mode never touches the input
        if svg_template is not None:
            writer.write_template(svg_template)
            raise typer.Exit(code=0)

        if svg_file is not None and not svg_file.is_file():
            print_error(
                f"Input file not found: {svg_file}",
                details=f"The file '{svg_file}' does not exist or is not a file.",
            )
            raise typer.Exit(code=1)

        if not quiet:
            print_header(__version__)
            print_step("Reading curve")

        include = select_paths_by_id(path_ids) if path_ids else None
        processor = CamProcessor(settings, include=include)
        processor.stats.start_time = time.time()
        source = svg_file if svg_file is not None else sys.stdin.buffer

        segments = processor.load_segments(source)
        curve = processor.build_curve(segments)
        if not quiet:
            print_curve_info(
                source=str(svg_file) if svg_file is not None else "<stdin>",
                segments=len(segments),
                primitives=len(curve),
                length=curve.length(),
            )
            print_step("Synthesizing")

        profiles = processor.synthesize(curve)

        written: list[Path] = []
        file_format = ""
        if svg_output is not None:
            written = writer.write_svg(profiles, svg_output)
            file_format = "svg"
        elif ldraw_output is not None:
            written = writer.write_ldraw(profiles, ldraw_output)
            file_format = "ldraw"
        elif stl_output is not None:
            written = writer.write_stl(profiles, stl_output)
            file_format = "stl"
        for path in written:
            processor.synthesis_logger.log_output_written(str(path), file_format)
        processor.stats.end_time = time.time()

        if not quiet:
            if not written:
                console.print("\nNo output requested (use -o, -l or -s).")
            print_success(
                outputs=[str(path) for path in written],
                total_time_s=processor.stats.duration_seconds,
                samples=samples,
                points=len(profiles),
            )

    except SourceReadError as e:
        print_error(f"Could not read curve: {e.reason}")
        raise typer.Exit(code=1)
    except UnsupportedGeometryError as e:
        print_error(f"Unsupported geometry: {e.reason}", details=repr(e.segment))
        raise typer.Exit(code=1)
    except LinkageInfeasibleError as e:
        print_error(str(e), details="Check the curve size against the linkage dimensions.")
        raise typer.Exit(code=1)
    except OutputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except CamSynthError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
