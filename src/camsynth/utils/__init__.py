"""Utility functions for camsynth.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline statistics tracking
"""

from camsynth.utils.logging import (
    SynthesisLogger,
    SynthesisStats,
    configure_logging,
)

__all__ = [
    "SynthesisLogger",
    "SynthesisStats",
    "configure_logging",
]
