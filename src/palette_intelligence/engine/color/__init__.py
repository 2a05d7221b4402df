"""
color.
======

Does: Color-domain core: hex/OKLCH conversions, scale generation, context
      rules and the shared vocabularies. Providers and the Ollama client live
      in the `providers` and `llm` subpackages.
Used By: Providers, accessibility analysis, orchestrator.
Returns: Pure functions and immutable value types.
"""

# ── Space & scale ────────────────────────────────────────────────────────────
from .context import ContextAdjustment, ContextRule, ContextRuleTable, apply_context, default_rule_table
from .scale import ColorScale, generate_scale, steps_for_size
from .space import (
    Color,
    delta_e_ok,
    hex_to_uniform,
    normalize_hex,
    rotate_hue,
    uniform_to_hex,
)

__all__ = [
    "Color",
    "normalize_hex",
    "hex_to_uniform",
    "uniform_to_hex",
    "delta_e_ok",
    "rotate_hue",
    "ColorScale",
    "generate_scale",
    "steps_for_size",
    "ContextRule",
    "ContextRuleTable",
    "ContextAdjustment",
    "apply_context",
    "default_rule_table",
]
__docformat__ = "google"
