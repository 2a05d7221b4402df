"""
local.py
========

Does: Offline heuristic provider. Derives the secondary color from the base
      by a style-dependent hue move in OKLCH, tints the neutral toward the
      base (or warm/slate by context) and builds semantic colors on fixed
      hues, darkening them to AA contrast on white when requested.
Returns: EnhancedPalette with provider "local-heuristic".
Used by: PaletteOrchestrator (second in line).
"""

from __future__ import annotations

import logging
import os

from palette_intelligence.engine.accessibility.contrast import AA_NORMAL, contrast_ratio
from palette_intelligence.engine.color.context import ContextRuleTable
from palette_intelligence.engine.color.providers.base import Provider
from palette_intelligence.engine.color.space import Color, uniform_to_hex
from palette_intelligence.engine.types import DesignContext, EnhancedPalette, PaletteRequest

__all__ = ["LocalHeuristicProvider", "secondary_for_style", "neutral_for_context", "semantic_for"]

logger = logging.getLogger(__name__)

LOCAL_HEURISTICS_ENABLED = os.getenv("PALETTE_LOCAL_HEURISTICS", "1") not in ("0", "false", "no")

# style -> (hue rotation in degrees, chroma factor)
STYLE_ROTATION: dict[str, tuple[float, float]] = {
    "professional": (30.0, 0.85),
    "vibrant": (150.0, 1.15),
    "minimal": (20.0, 0.5),
}
# warm/cool pull the hue toward a target instead of rotating
STYLE_PULL: dict[str, tuple[float, float]] = {
    "warm": (55.0, 0.6),
    "cool": (235.0, 0.6),
}

SEMANTIC_HUES: dict[str, float] = {"success": 150.0, "warning": 75.0, "error": 27.0, "info": 250.0}
SEMANTIC_LIGHTNESS = 0.65
SEMANTIC_CHROMA = 0.16
DARKEN_STEP = 0.02
DARKEN_FLOOR = 0.25

MIN_SECONDARY_CHROMA = 0.04
MAX_SECONDARY_CHROMA = 0.25
WHITE = "#ffffff"


def _pull_hue(h: float, target: float, amount: float) -> float:
    delta = ((target - h + 180.0) % 360.0) - 180.0
    return (h + delta * amount) % 360.0


def secondary_for_style(base: Color, style: str) -> Color:
    L, C, H = base.uniform
    if style in STYLE_PULL:
        target, amount = STYLE_PULL[style]
        hue, factor = _pull_hue(H, target, amount), 1.0
    else:
        rotation, factor = STYLE_ROTATION.get(style, STYLE_ROTATION["professional"])
        hue = (H + rotation) % 360.0
    chroma = min(MAX_SECONDARY_CHROMA, max(MIN_SECONDARY_CHROMA, C * factor))
    lightness = min(0.75, max(0.45, L))
    return Color(uniform_to_hex(lightness, chroma, hue))


def neutral_for_context(base: Color, context: DesignContext, style: str) -> Color:
    if context.industry in ("tech", "finance"):
        hue, chroma = 255.0, 0.03  # slate
    elif context.emotional == "approachable" or context.audience == "children":
        hue, chroma = 60.0, 0.015  # stone
    else:
        hue, chroma = base.hue, (0.008 if style == "minimal" else 0.015)
    return Color(uniform_to_hex(0.55, chroma, hue))


def semantic_for(accessibility: bool) -> dict[str, str]:
    out: dict[str, str] = {}
    for role, hue in SEMANTIC_HUES.items():
        L = SEMANTIC_LIGHTNESS
        color = uniform_to_hex(L, SEMANTIC_CHROMA, hue)
        while accessibility and contrast_ratio(color, WHITE) < AA_NORMAL and L > DARKEN_FLOOR:
            L -= DARKEN_STEP
            color = uniform_to_hex(L, SEMANTIC_CHROMA, hue)
        out[role] = color
    return out


class LocalHeuristicProvider(Provider):
    name = "local-heuristic"
    confidence = 0.75

    def __init__(self, rules: ContextRuleTable | None = None, enabled: bool | None = None):
        super().__init__(rules)
        self.enabled = LOCAL_HEURISTICS_ENABLED if enabled is None else enabled

    def check_availability(self) -> bool:
        return self.enabled

    def generate(self, request: PaletteRequest) -> EnhancedPalette:
        adjustment = self.prepare_base(request)
        base = adjustment.color
        ctx = request.design_context
        return self.assemble(
            request,
            base=base,
            secondary=secondary_for_style(base, request.style),
            neutral=neutral_for_context(base, ctx, request.style),
            semantic=semantic_for(request.accessibility),
            contextual=self.default_contextual(ctx.industry),
            reasoning=self.describe(request, adjustment, "Locally derived"),
        )
