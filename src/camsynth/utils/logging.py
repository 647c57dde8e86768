"""Logging utilities for camsynth."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class SynthesisStats:
    """Statistics from a synthesis run."""

    segment_count: int = 0
    primitive_count: int = 0
    curve_length: float = 0.0
    sample_count: int = 0
    profile_points: int = 0
    outputs_written: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console records go to stderr so that profiles written to standard
    output stay clean.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_camsynth", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._camsynth = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._camsynth = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("camsynth")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SynthesisLogger:
    """Logger for tracking pipeline progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SynthesisStats()

    def log_segments_extracted(self, source: str, segment_count: int) -> None:
        """Log path extraction result."""
        self._logger.info("Segments extracted", source=source, segments=segment_count)
        self._stats.segment_count = segment_count

    def log_curve_built(self, primitive_count: int, length: float) -> None:
        """Log composite curve construction."""
        self._logger.info(
            "Curve built",
            primitives=primitive_count,
            length=round(length, 4),
        )
        self._stats.primitive_count = primitive_count
        self._stats.curve_length = length

    def log_profiles(self, samples: int, points: int, duration_ms: float) -> None:
        """Log successful linkage synthesis."""
        self._logger.info(
            "Profiles synthesized",
            samples=samples,
            points=points,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.sample_count = samples
        self._stats.profile_points = points

    def log_output_written(self, path: str, file_format: str) -> None:
        """Log a written output file."""
        self._logger.info("Output written", path=path, format=file_format)
        self._stats.outputs_written += 1

    def log_error(self, stage: str, error: Exception) -> None:
        """Log a failed pipeline stage."""
        self._logger.error(
            "Synthesis failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> SynthesisStats:
        """Get current synthesis statistics."""
        return self._stats
