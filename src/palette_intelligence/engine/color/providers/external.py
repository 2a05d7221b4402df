"""
external.py
===========

Does: Provider backed by a local Ollama model. The model proposes seed
      colors; scales are always built locally so every scale invariant holds.
Returns: EnhancedPalette with provider "ollama".
Used by: PaletteOrchestrator (first in line).
"""

from __future__ import annotations

import logging

from palette_intelligence.engine.color.context import ContextRuleTable
from palette_intelligence.engine.color.llm.ollama_client import OllamaClient
from palette_intelligence.engine.color.providers.base import Provider
from palette_intelligence.engine.types import EnhancedPalette, PaletteRequest

__all__ = ["ExternalServiceProvider"]

logger = logging.getLogger(__name__)


class ExternalServiceProvider(Provider):
    name = "ollama"
    confidence = 0.85

    def __init__(self, client: OllamaClient | None = None, rules: ContextRuleTable | None = None):
        super().__init__(rules)
        self.client = client or OllamaClient()

    def check_availability(self) -> bool:
        return self.client.is_available()

    def generate(self, request: PaletteRequest) -> EnhancedPalette:
        adjustment = self.prepare_base(request)
        base = adjustment.color
        suggestion = self.client.suggest_palette(
            base.hex, request.style, request.context, request.accessibility
        )
        ctx = request.design_context
        semantic = dict(self.default_semantic(ctx.industry))
        semantic.update(suggestion.semantic)

        reasoning = self.describe(request, adjustment, "AI-generated")
        if suggestion.reasoning:
            reasoning = f"{reasoning}. {suggestion.reasoning}"
        return self.assemble(
            request,
            base=base,
            secondary=suggestion.secondary,
            neutral=suggestion.neutral,
            semantic=semantic,
            contextual=self.default_contextual(ctx.industry),
            reasoning=reasoning,
        )
