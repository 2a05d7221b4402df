"""
accessibility.
==============

Does: WCAG contrast, color-blindness simulation and the composite
      accessibility report.
Used by: Orchestrator, local heuristic provider, CLI.
"""

from .analyzer import (
    DEFAULT_BACKGROUNDS,
    AccessibilityReport,
    ColorBlindnessReport,
    Recommendation,
    analyze,
)
from .color_blindness import DEFICIENCIES, delta_e76, simulate
from .contrast import ContrastResult, contrast_ratio, evaluate_pair, relative_luminance

__all__ = [
    "analyze",
    "AccessibilityReport",
    "ColorBlindnessReport",
    "Recommendation",
    "DEFAULT_BACKGROUNDS",
    "ContrastResult",
    "contrast_ratio",
    "evaluate_pair",
    "relative_luminance",
    "DEFICIENCIES",
    "delta_e76",
    "simulate",
]
__docformat__ = "google"
