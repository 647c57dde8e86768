"""Configuration settings for camsynth."""

import math
from pathlib import Path

from pydantic import BaseModel, Field


class CurveConfig(BaseModel):
    """Configuration for curve construction and segment conversion."""

    bezier_intervals: int = Field(
        default=64,
        ge=4,
        le=4096,
        description="Parameter intervals in each Bezier arc-length table",
    )
    bezier_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1e-3,
        description="Relative tolerance for Bezier interval length integration",
    )
    close_tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        le=1.0,
        description="Closing segments shorter than this are dropped",
    )
    radius_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        le=1e-2,
        description="Relative difference allowed between arc radii",
    )


class LinkageConfig(BaseModel):
    """Mechanism constants of the four-bar linkage.

    Lengths are in millimetres. Defaults derive from a base unit of 8 mm.
    """

    base_offset: float = Field(
        default=64.0,
        gt=0.0,
        description="Distance along x from the cam origin to the input pivot",
    )
    coupler_length: float = Field(
        default=64.0,
        gt=0.0,
        description="Length of both coupler arms",
    )
    arm_length: float = Field(
        default=48.0,
        gt=0.0,
        description="Output arm extent along the coupler direction",
    )
    arm_offset: float = Field(
        default=24.0,
        ge=0.0,
        description="Output arm extent perpendicular to the coupler direction",
    )
    pivot_x: float = Field(
        default=56.0,
        description="X position of the output arm pivot",
    )
    follower_radius: float = Field(
        default=4.0,
        ge=0.0,
        description="Radius of the follower contact",
    )
    samples: int = Field(
        default=400,
        ge=3,
        le=100_000,
        description="Angular steps per revolution",
    )

    @property
    def step_angle(self) -> float:
        """Input rotation between consecutive samples."""
        return 2.0 * math.pi / self.samples


class MeshConfig(BaseModel):
    """Configuration for the LDraw and STL exporters."""

    ldraw_lower: float = Field(default=0.0, description="LDraw bottom height")
    ldraw_upper: float = Field(default=20.0, description="LDraw top height")
    ldraw_scale: float = Field(
        default=20.0 / 8.0,
        gt=0.0,
        description="Scale from millimetres to LDraw units",
    )
    ldraw_inner_radius: float = Field(
        default=6.0,
        gt=0.0,
        description="Inner wall radius in LDraw units",
    )
    stl_lower: float = Field(default=0.0, description="STL bottom height")
    stl_upper: float = Field(default=8.0, description="STL top height")
    stl_inner_radius: float = Field(
        default=6.0,
        gt=0.0,
        description="Inner wall radius in millimetres",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class CamSynthSettings(BaseModel):
    """Main application settings."""

    curve: CurveConfig = Field(default_factory=CurveConfig)
    linkage: LinkageConfig = Field(default_factory=LinkageConfig)
    mesh: MeshConfig = Field(default_factory=MeshConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> CamSynthSettings:
    """Get default application settings."""
    return CamSynthSettings()
