"""
rule_based.py
=============

Does: Last-resort provider: fixed secondary/neutral/semantic tables keyed by
      industry and audience. Always available, never touches the network.
"""

from __future__ import annotations

from palette_intelligence.engine.color.constants import (
    DEFAULT_SECONDARY,
    NEUTRAL_COOL,
    NEUTRAL_DEFAULT,
    NEUTRAL_WARM,
    SECONDARY_BY_INDUSTRY,
)
from palette_intelligence.engine.color.providers.base import Provider
from palette_intelligence.engine.types import DesignContext, EnhancedPalette, PaletteRequest

__all__ = ["RuleBasedProvider", "pick_neutral"]


def pick_neutral(context: DesignContext) -> str:
    # industry wins over audience/emotion when both apply
    if context.industry in ("tech", "finance"):
        return NEUTRAL_COOL
    if context.emotional == "approachable" or context.audience == "children":
        return NEUTRAL_WARM
    return NEUTRAL_DEFAULT


class RuleBasedProvider(Provider):
    name = "rule-based"
    confidence = 0.6

    def check_availability(self) -> bool:
        return True

    def generate(self, request: PaletteRequest) -> EnhancedPalette:
        adjustment = self.prepare_base(request)
        ctx = request.design_context
        return self.assemble(
            request,
            base=adjustment.color,
            secondary=SECONDARY_BY_INDUSTRY.get(ctx.industry or "", DEFAULT_SECONDARY),
            neutral=pick_neutral(ctx),
            semantic=self.default_semantic(ctx.industry),
            contextual=self.default_contextual(ctx.industry),
            reasoning=self.describe(request, adjustment, "Rule-based"),
        )
