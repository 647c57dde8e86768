"""Pipeline orchestration for cam-follower synthesis.

This module coordinates the full workflow: SVG path extraction, conversion
of the segments into a composite curve, and linkage synthesis of the two
follower profiles.

Key components:
- CamProcessor: Main orchestrator class
"""

import time
from pathlib import Path

from camsynth.config import CamSynthSettings
from camsynth.core.composite import CompositeCurve
from camsynth.core.linkage import FollowerProfiles, LinkageSynthesizer
from camsynth.domain import Segment, Transform
from camsynth.exceptions import CamSynthError
from camsynth.io.converter import segments_to_curve
from camsynth.io.reader import PathFilter, SvgPathReader, SvgSource
from camsynth.utils import SynthesisLogger, SynthesisStats, configure_logging


class CamProcessor:
    """Orchestrates cam-follower profile synthesis.

    Manages the complete workflow:
    1. Read the SVG document and extract path segments
    2. Convert the segments into a composite curve
    3. Sample the curve and synthesize both follower profiles

    Example:
        settings = CamSynthSettings()
        processor = CamProcessor(settings)
        profiles = processor.run(Path("curve.svg"))
    """

    def __init__(
        self,
        config: CamSynthSettings,
        include: PathFilter | None = None,
        transform: Transform | None = None,
    ) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings for curves, linkage, meshes and logging
            include: Filter selecting the path elements to use
            transform: Transform applied to all extracted coordinates
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.synthesis_logger = SynthesisLogger(self.logger)
        self.reader = SvgPathReader(transform=transform, include=include)
        self.synthesizer = LinkageSynthesizer(config.linkage)

    @property
    def stats(self) -> SynthesisStats:
        """Statistics of the current run."""
        return self.synthesis_logger.stats

    def load_segments(self, source: SvgSource) -> list[Segment]:
        """Extract the segment descriptors of an SVG document."""
        name = str(source) if isinstance(source, (str, Path)) else getattr(source, "name", "<stream>")
        try:
            segments = self.reader.read(source)
        except CamSynthError as e:
            self.synthesis_logger.log_error("extract", e)
            raise
        self.synthesis_logger.log_segments_extracted(str(name), len(segments))
        return segments

    def build_curve(self, segments: list[Segment]) -> CompositeCurve:
        """Convert segment descriptors into a composite curve."""
        try:
            curve = segments_to_curve(segments, self.config.curve)
        except CamSynthError as e:
            self.synthesis_logger.log_error("convert", e)
            raise
        self.synthesis_logger.log_curve_built(len(curve), curve.length())
        return curve

    def synthesize(self, curve: CompositeCurve) -> FollowerProfiles:
        """Run the linkage synthesis over the composite curve."""
        start = time.perf_counter()
        try:
            profiles = self.synthesizer.synthesize(curve)
        except CamSynthError as e:
            self.synthesis_logger.log_error("synthesize", e)
            raise
        duration_ms = (time.perf_counter() - start) * 1000
        self.synthesis_logger.log_profiles(
            samples=self.config.linkage.samples,
            points=len(profiles),
            duration_ms=duration_ms,
        )
        return profiles

    def run(self, source: SvgSource) -> FollowerProfiles:
        """Process an SVG document end to end.

        Args:
            source: SVG file path or stream

        Returns:
            The two synthesized follower profiles

        Raises:
            CamSynthError: If any stage fails
        """
        self.stats.start_time = time.time()
        segments = self.load_segments(source)
        curve = self.build_curve(segments)
        profiles = self.synthesize(curve)
        self.stats.end_time = time.time()
        return profiles
