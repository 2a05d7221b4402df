"""
palette_intelligence
====================

Does: Root package for palette generation: base color + design context in,
      accessible color scales serialized as design tokens out.
Returns: Re-exports the public entry points of `engine.*`.
Used by: CLI (`palette-intelligence`) and library callers.
"""

from palette_intelligence.engine.accessibility.analyzer import AccessibilityReport, analyze
from palette_intelligence.engine.color.scale import ColorScale, generate_scale, steps_for_size
from palette_intelligence.engine.color.space import Color, hex_to_uniform, normalize_hex, uniform_to_hex
from palette_intelligence.engine.errors import (
    AllProvidersFailed,
    ExternalServiceError,
    FormatDetectionInconclusive,
    InvalidColorFormat,
    PaletteError,
    ProviderUnavailable,
    UnknownTokenFormat,
)
from palette_intelligence.engine.orchestrator import PaletteOrchestrator
from palette_intelligence.engine.tokens import (
    convert,
    convert_document,
    detect_format,
    get_token_format,
    list_available_formats,
    parse,
)
from palette_intelligence.engine.types import DesignContext, EnhancedPalette, FormattedPalette, PaletteRequest

__version__ = "0.1.0"

__all__ = [
    "PaletteOrchestrator",
    "PaletteRequest",
    "DesignContext",
    "EnhancedPalette",
    "FormattedPalette",
    "Color",
    "ColorScale",
    "normalize_hex",
    "hex_to_uniform",
    "uniform_to_hex",
    "generate_scale",
    "steps_for_size",
    "analyze",
    "AccessibilityReport",
    "get_token_format",
    "list_available_formats",
    "convert",
    "parse",
    "convert_document",
    "detect_format",
    "PaletteError",
    "InvalidColorFormat",
    "ProviderUnavailable",
    "ExternalServiceError",
    "AllProvidersFailed",
    "UnknownTokenFormat",
    "FormatDetectionInconclusive",
]
__docformat__ = "google"
