"""Configuration management for camsynth.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CurveConfig: Curve construction and conversion tolerances
- LinkageConfig: Four-bar linkage constants
- MeshConfig: LDraw/STL export dimensions
- LoggingConfig: Logging settings
- CamSynthSettings: Main application settings
"""

from camsynth.config.settings import (
    CamSynthSettings,
    CurveConfig,
    LinkageConfig,
    LoggingConfig,
    MeshConfig,
    get_default_settings,
)

__all__ = [
    "CamSynthSettings",
    "CurveConfig",
    "LinkageConfig",
    "LoggingConfig",
    "MeshConfig",
    "get_default_settings",
]
