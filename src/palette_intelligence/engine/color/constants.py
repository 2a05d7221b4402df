# constants.py
# ============

"""
constants.
=========

Does: Define immutable palette-domain constants: context vocabularies, style
      names, scale step sets and the fixed color tables used by the
      rule-based provider (secondary, neutral, semantic, industry colors).
Used By: DesignContext validation, scale generation, providers, CLI.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = [
    "STYLES",
    "INDUSTRIES",
    "AUDIENCES",
    "MEDIUMS",
    "ACCESSIBILITY_LEVELS",
    "CULTURAL_CONTEXTS",
    "EMOTIONAL_TONES",
    "CONTEXT_VOCABULARY",
    "SCALE_STEPS",
    "SEMANTIC_ROLES",
    "SECONDARY_BY_INDUSTRY",
    "DEFAULT_SECONDARY",
    "NEUTRAL_DEFAULT",
    "NEUTRAL_WARM",
    "NEUTRAL_COOL",
    "SEMANTIC_DEFAULTS",
    "SEMANTIC_BY_INDUSTRY",
    "CONTEXTUAL_BY_INDUSTRY",
    "STYLE_TO_EMOTION",
]
__docformat__ = "google"


# ── 1) Vocabularies ──────────────────────────────────────────────────────────

STYLES: tuple[str, ...] = ("professional", "vibrant", "minimal", "warm", "cool")

INDUSTRIES: tuple[str, ...] = (
    "tech",
    "healthcare",
    "finance",
    "creative",
    "retail",
    "education",
    "government",
    "nonprofit",
    "entertainment",
    "real-estate",
    "automotive",
    "food-beverage",
)

AUDIENCES: tuple[str, ...] = (
    "children",
    "teenagers",
    "young-adults",
    "professionals",
    "seniors",
    "general",
    "experts",
    "consumers",
)

MEDIUMS: tuple[str, ...] = ("web", "mobile", "print", "display", "signage", "packaging", "presentation")

ACCESSIBILITY_LEVELS: tuple[str, ...] = (
    "standard",
    "high-contrast",
    "color-blind-friendly",
    "low-vision",
    "comprehensive",
)

CULTURAL_CONTEXTS: tuple[str, ...] = (
    "western",
    "eastern",
    "global",
    "regional",
    "north-american",
    "european",
    "asian",
    "latin-american",
    "middle-eastern",
    "african",
)

EMOTIONAL_TONES: tuple[str, ...] = (
    "calm",
    "energetic",
    "trustworthy",
    "playful",
    "professional",
    "innovative",
    "luxury",
    "approachable",
    "bold",
    "sophisticated",
)

# DesignContext field -> allowed values
CONTEXT_VOCABULARY: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "industry": INDUSTRIES,
        "audience": AUDIENCES,
        "medium": MEDIUMS,
        "accessibility": ACCESSIBILITY_LEVELS,
        "cultural": CULTURAL_CONTEXTS,
        "emotional": EMOTIONAL_TONES,
    }
)

# CLI --style maps onto an emotional tone when none is given
STYLE_TO_EMOTION: Mapping[str, str] = MappingProxyType(
    {
        "vibrant": "energetic",
        "minimal": "calm",
        "warm": "playful",
        "cool": "trustworthy",
        "professional": "professional",
    }
)


# ── 2) Scale steps ───────────────────────────────────────────────────────────

# size -> ordered step keys (lightest first)
SCALE_STEPS: Mapping[int, tuple[int, ...]] = MappingProxyType(
    {
        9: (100, 200, 300, 400, 500, 600, 700, 800, 900),
        10: (50, 100, 200, 300, 400, 500, 600, 700, 800, 900),
        11: (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950),
    }
)

SEMANTIC_ROLES: tuple[str, ...] = ("success", "warning", "error", "info")


# ── 3) Rule-based color tables ───────────────────────────────────────────────

SECONDARY_BY_INDUSTRY: Mapping[str, str] = MappingProxyType(
    {
        "healthcare": "#4ade80",  # calming green
        "finance": "#3b82f6",  # conservative blue
        "creative": "#f59e0b",  # bold amber
    }
)
DEFAULT_SECONDARY = "#6366f1"

NEUTRAL_DEFAULT = "#6b7280"  # gray
NEUTRAL_WARM = "#78716c"  # stone, approachable / children
NEUTRAL_COOL = "#64748b"  # slate, tech / finance (wins over warm)

SEMANTIC_DEFAULTS: Mapping[str, str] = MappingProxyType(
    {"success": "#10b981", "warning": "#f59e0b", "error": "#ef4444", "info": "#3b82f6"}
)

SEMANTIC_BY_INDUSTRY: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "healthcare": MappingProxyType(
            {"success": "#059669", "warning": "#d97706", "error": "#dc2626", "info": "#0369a1"}
        ),
        "finance": MappingProxyType(
            {"success": "#16a34a", "warning": "#ca8a04", "error": "#dc2626", "info": "#2563eb"}
        ),
        "education": MappingProxyType(
            {"success": "#22c55e", "warning": "#eab308", "error": "#f87171", "info": "#60a5fa"}
        ),
    }
)

CONTEXTUAL_BY_INDUSTRY: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "healthcare": MappingProxyType(
            {
                "medical-emergency": "#dc2626",
                "medical-safe": "#10b981",
                "medical-neutral": "#6b7280",
                "hospital-blue": "#0369a1",
            }
        ),
        "finance": MappingProxyType(
            {"profit": "#16a34a", "loss": "#dc2626", "neutral": "#6b7280", "premium": "#7c3aed"}
        ),
        "education": MappingProxyType(
            {
                "grade-a": "#16a34a",
                "grade-b": "#65a30d",
                "grade-c": "#eab308",
                "grade-d": "#f59e0b",
                "grade-f": "#ef4444",
            }
        ),
    }
)
