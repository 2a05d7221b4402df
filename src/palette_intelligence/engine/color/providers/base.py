"""
base.py
=======

Does: Define the Provider contract (name, check_availability, generate) and
      the shared assembly step every variant uses: context-adjust the base,
      build the three scales and wrap everything in an EnhancedPalette.
Used by: ExternalServiceProvider, LocalHeuristicProvider, RuleBasedProvider,
         PaletteOrchestrator.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

from palette_intelligence.engine.color.constants import (
    CONTEXTUAL_BY_INDUSTRY,
    SEMANTIC_BY_INDUSTRY,
    SEMANTIC_DEFAULTS,
)
from palette_intelligence.engine.color.context import ContextAdjustment, ContextRuleTable, apply_context
from palette_intelligence.engine.color.scale import generate_scale, steps_for_size
from palette_intelligence.engine.color.space import Color, normalize_hex
from palette_intelligence.engine.types import (
    EnhancedPalette,
    PaletteMetadata,
    PaletteRequest,
    SemanticColors,
)

__all__ = ["Provider"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class Provider(ABC):
    """One way of producing a palette. Subclasses set `name` and `confidence`."""

    name: str = "provider"
    confidence: float = 0.5

    def __init__(self, rules: ContextRuleTable | None = None):
        self._rules = rules

    @abstractmethod
    def check_availability(self) -> bool:
        """Return True when generate() can be attempted right now."""

    @abstractmethod
    def generate(self, request: PaletteRequest) -> EnhancedPalette:
        """Build a palette for the request or raise."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # ── Shared steps ─────────────────────────────────────────────────────────
    def prepare_base(self, request: PaletteRequest) -> ContextAdjustment:
        return apply_context(normalize_hex(request.base_color), request.context, self._rules)

    @staticmethod
    def default_semantic(industry: str | None) -> Mapping[str, str]:
        return SEMANTIC_BY_INDUSTRY.get(industry or "", SEMANTIC_DEFAULTS)

    @staticmethod
    def default_contextual(industry: str | None) -> Mapping[str, str]:
        return CONTEXTUAL_BY_INDUSTRY.get(industry or "", {})

    def assemble(
        self,
        request: PaletteRequest,
        base: Color,
        secondary: str | Color,
        neutral: str | Color,
        semantic: Mapping[str, str],
        reasoning: str,
        contextual: Mapping[str, str] | None = None,
    ) -> EnhancedPalette:
        steps = steps_for_size(request.size)
        return EnhancedPalette(
            primary=generate_scale(base, steps),
            secondary=generate_scale(secondary, steps),
            neutral=generate_scale(neutral, steps),
            semantic=SemanticColors.from_hex(semantic),
            contextual={k: Color(v) for k, v in (contextual or {}).items()},
            metadata=PaletteMetadata(
                provider=self.name,
                reasoning=reasoning,
                confidence=self.confidence,
                context=request.context,
            ),
        )

    @staticmethod
    def describe(request: PaletteRequest, adjustment: ContextAdjustment, lead: str) -> str:
        industry = request.context.industry if request.context and request.context.industry else "general"
        parts = [f"{lead} {request.style} palette for {industry} use"]
        parts.extend(adjustment.reasons)
        return ". ".join(parts)
