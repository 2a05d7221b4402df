"""
types.py
========

Does: Define the immutable value types that flow through the pipeline:
      DesignContext, PaletteRequest, SemanticColors, PaletteMetadata,
      EnhancedPalette and FormattedPalette.
Returns: Frozen dataclasses (validated on construction).
Used by: Orchestrator, providers, token adapter, CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

from rapidfuzz import fuzz, process, utils

from palette_intelligence.engine.color.constants import (
    CONTEXT_VOCABULARY,
    SCALE_STEPS,
    SEMANTIC_ROLES,
    STYLES,
)
from palette_intelligence.engine.color.scale import ColorScale
from palette_intelligence.engine.color.space import Color

if TYPE_CHECKING:
    from palette_intelligence.engine.accessibility.analyzer import AccessibilityReport
    from palette_intelligence.engine.tokens.formats import TokenFormatDescriptor

__all__ = [
    "Style",
    "DesignContext",
    "PaletteRequest",
    "SemanticColors",
    "PaletteMetadata",
    "EnhancedPalette",
    "FormattedPalette",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Style = Literal["professional", "vibrant", "minimal", "warm", "cool"]

# Similarity needed before a loose user value is snapped to a vocabulary term
FUZZY_CUTOFF = 85.0


def _resolve_term(field_name: str, raw: str) -> str:
    vocab = CONTEXT_VOCABULARY[field_name]
    candidate = raw.strip().lower().replace("_", "-")
    if candidate in vocab:
        return candidate
    hit = process.extractOne(
        candidate.replace("-", " "),
        {v: v.replace("-", " ") for v in vocab},
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        score_cutoff=FUZZY_CUTOFF,
    )
    if hit is None:
        raise ValueError(f"Unknown {field_name} {raw!r}; expected one of {list(vocab)}")
    logger.debug("Resolved %s %r -> %r (score=%.1f)", field_name, raw, hit[2], hit[1])
    return hit[2]


# ── Context ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class DesignContext:
    """Where and for whom the palette will be used. All fields optional."""

    industry: str | None = None
    audience: str | None = None
    medium: str | None = None
    accessibility: str | None = None
    cultural: str | None = None
    emotional: str | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and value not in CONTEXT_VOCABULARY[f.name]:
                raise ValueError(
                    f"Invalid {f.name} {value!r}; expected one of {list(CONTEXT_VOCABULARY[f.name])}"
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> DesignContext:
        """Does: Build a context from loosely-typed user strings.

        Values such as "Health care" or "senior" are snapped to the closest
        vocabulary member; unknown keys are ignored, empty values skipped.

        Raises:
            ValueError: when a value is not close enough to any member.
        """
        kwargs: dict[str, str] = {}
        for key, raw in (data or {}).items():
            if key not in CONTEXT_VOCABULARY or raw is None or not str(raw).strip():
                continue
            kwargs[key] = _resolve_term(key, str(raw))
        return cls(**kwargs)

    def as_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self) -> bool:
        return not self.as_dict()


# ── Request ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PaletteRequest:
    """One palette generation request.

    `base_color` is kept as given; the orchestrator normalizes it so a bad
    value fails before any provider runs.
    """

    base_color: str
    style: Style = "professional"
    context: DesignContext | None = None
    accessibility: bool = True
    size: int = 10
    format: str | None = None
    namespace: str | None = None

    def __post_init__(self) -> None:
        if self.style not in STYLES:
            raise ValueError(f"Invalid style {self.style!r}; expected one of {list(STYLES)}")
        if self.size not in SCALE_STEPS:
            raise ValueError(f"Invalid size {self.size!r}; expected one of {sorted(SCALE_STEPS)}")

    @property
    def design_context(self) -> DesignContext:
        return self.context or DesignContext()


# ── Palette ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class SemanticColors:
    success: Color
    warning: Color
    error: Color
    info: Color

    @classmethod
    def from_hex(cls, mapping: Mapping[str, str]) -> SemanticColors:
        return cls(**{role: Color(mapping[role]) for role in SEMANTIC_ROLES})

    def as_dict(self) -> dict[str, Color]:
        return {role: getattr(self, role) for role in SEMANTIC_ROLES}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PaletteMetadata:
    provider: str
    reasoning: str
    confidence: float
    context: DesignContext | None = None
    timestamp: datetime = field(default_factory=_utcnow)
    accessibility: AccessibilityReport | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "reasoning": self.reasoning,
            "confidence": self.confidence,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.as_dict() if self.context else None,
            "accessibility": self.accessibility.to_dict() if self.accessibility else None,
        }


@dataclass(frozen=True)
class EnhancedPalette:
    """Three scales, a semantic group, optional industry colors and metadata."""

    primary: ColorScale
    secondary: ColorScale
    neutral: ColorScale
    semantic: SemanticColors
    metadata: PaletteMetadata
    contextual: Mapping[str, Color] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.contextual, MappingProxyType):
            object.__setattr__(self, "contextual", MappingProxyType(dict(self.contextual)))

    def scales(self) -> dict[str, ColorScale]:
        return {"primary": self.primary, "secondary": self.secondary, "neutral": self.neutral}

    def key_colors(self) -> dict[str, str]:
        """Does: Name -> hex for the colors that get scored (scale anchors + semantic)."""
        out = {f"{name}-500": scale.base.hex for name, scale in self.scales().items()}
        out.update({role: c.hex for role, c in self.semantic.as_dict().items()})
        return out


@dataclass(frozen=True)
class FormattedPalette:
    palette: EnhancedPalette
    descriptor: TokenFormatDescriptor
    document: dict[str, Any]
    reasoning: str
