"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library.
Messages go to stderr, because standard output may carry profile data.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]camsynth[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_curve_info(source: str, segments: int, primitives: int, length: float) -> None:
    """Print information about the extracted curve.

    Args:
        source: Name of the SVG source
        segments: Number of extracted segment descriptors
        primitives: Number of curve primitives in the composite
        length: Total arc length of the curve
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(
        f"  {segments} segments {SYM_DOT} {primitives} primitives {SYM_DOT} length {length:.3f}"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(outputs: list[str], total_time_s: float, samples: int, points: int) -> None:
    """Print success message with summary.

    Args:
        outputs: Paths of the written files
        total_time_s: Total processing time in seconds
        samples: Angular samples per revolution
        points: Points per follower profile
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    for output in outputs:
        line = Text("  ")
        line.append(output, style="bold")
        console.print(line)
    console.print(f"  {samples} samples {SYM_DOT} {points} points per profile")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
