"""
analyzer.py
===========

Does: Score a set of colors for accessibility: WCAG contrast of every
      color against each background, color-blindness simulation of the
      set, a composite 0..100 score and prioritized recommendations.
      Unparseable inputs are excluded and the report is flagged degraded.
Returns: AccessibilityReport (immutable, JSON-ready via to_dict()).
Used by: PaletteOrchestrator (after a provider succeeds), CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from palette_intelligence.engine.accessibility.color_blindness import (
    DEFICIENCIES,
    PairIssue,
    Simulation,
    intended_pairs,
    simulate_palette,
)
from palette_intelligence.engine.accessibility.contrast import ContrastResult, evaluate_pair
from palette_intelligence.engine.color.space import normalize_hex
from palette_intelligence.engine.errors import AccessibilityAnalysisDegraded, InvalidColorFormat

__all__ = [
    "DEFAULT_BACKGROUNDS",
    "Compliance",
    "Recommendation",
    "ColorBlindnessReport",
    "AccessibilityReport",
    "analyze",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUNDS: tuple[str, ...] = ("#ffffff", "#000000")

CONTRAST_WEIGHT = 0.6
COLOR_BLIND_WEIGHT = 0.4
COLOR_BLIND_WARN_BELOW = 70.0
MAX_RECOMMENDATIONS_PER_CATEGORY = 3

Compliance = Literal["aaa", "aa", "partial", "none"]
Priority = Literal["critical", "high", "medium", "low"]
_PRIORITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}


@dataclass(frozen=True)
class Recommendation:
    priority: Priority
    category: Literal["contrast", "color-blindness", "analysis"]
    issue: str
    solution: str
    impact: str
    effort: Literal["low", "medium", "high"] = "medium"

    def to_dict(self) -> dict[str, str]:
        return {
            "priority": self.priority,
            "category": self.category,
            "issue": self.issue,
            "solution": self.solution,
            "impact": self.impact,
            "effort": self.effort,
        }


@dataclass(frozen=True)
class ColorBlindnessReport:
    score: float
    simulations: dict[str, Simulation]
    problematic_pairs: tuple[PairIssue, ...]
    intended_pair_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": round(self.score, 1),
            "simulations": {k: v.to_dict() for k, v in self.simulations.items()},
            "problematic_pairs": [p.to_dict() for p in self.problematic_pairs],
        }


@dataclass(frozen=True)
class AccessibilityReport:
    score: int
    wcag_compliance: Compliance
    contrast: tuple[ContrastResult, ...]
    color_blindness: ColorBlindnessReport
    recommendations: tuple[Recommendation, ...]
    colors: dict[str, str] = field(default_factory=dict)  # name -> hex that was analyzed
    degraded: bool = False
    excluded: tuple[str, ...] = ()

    @property
    def aa_pass_rate(self) -> float:
        if not self.contrast:
            return 0.0
        return sum(1 for c in self.contrast if c.passes_aa) / len(self.contrast)

    def matrix(self) -> dict[str, dict[str, float]]:
        """Does: foreground -> background -> ratio lookup."""
        out: dict[str, dict[str, float]] = {}
        for c in self.contrast:
            out.setdefault(c.foreground, {})[c.background] = c.ratio
        return out

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "wcag_compliance": self.wcag_compliance,
            "contrast": [c.to_dict() for c in self.contrast],
            "color_blindness": self.color_blindness.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "degraded": self.degraded,
            "excluded": list(self.excluded),
        }


# =============================================================================
# Helpers
# =============================================================================

def _collect(
    colors: Mapping[str, Any] | Iterable[Any], prefix: str = ""
) -> tuple[dict[str, str], list[str]]:
    """name -> hex for valid inputs, plus a description of every excluded one."""
    items = colors.items() if isinstance(colors, Mapping) else ((str(i), v) for i, v in enumerate(colors))
    valid: dict[str, str] = {}
    excluded: list[str] = []
    for name, value in items:
        try:
            valid[str(name)] = normalize_hex(value)
        except InvalidColorFormat:
            excluded.append(f"{prefix}{name}={value!r}")
    return valid, excluded


def _compliance(results: list[ContrastResult]) -> Compliance:
    if not results:
        return "none"
    if all(r.passes_aaa for r in results):
        return "aaa"
    if all(r.passes_aa for r in results):
        return "aa"
    if any(r.passes_aa for r in results):
        return "partial"
    return "none"


def _color_blindness(hexes: list[str]) -> ColorBlindnessReport:
    simulations = {d: simulate_palette(hexes, d) for d in DEFICIENCIES}
    seen: dict[tuple[str, str], PairIssue] = {}
    for sim in simulations.values():
        for issue in sim.issues:
            seen.setdefault((issue.color1, issue.color2), issue)
    intended = len(intended_pairs(hexes))
    score = 100.0 if intended == 0 else 100.0 * (1.0 - len(seen) / intended)
    return ColorBlindnessReport(
        score=score,
        simulations=simulations,
        problematic_pairs=tuple(seen.values()),
        intended_pair_count=intended,
    )


def _recommend(
    compliance: Compliance,
    contrast: list[ContrastResult],
    cb: ColorBlindnessReport,
    excluded: list[str],
) -> tuple[Recommendation, ...]:
    recs: list[Recommendation] = []

    if compliance in ("none", "partial") and contrast:
        recs.append(
            Recommendation(
                priority="critical" if compliance == "none" else "high",
                category="contrast",
                issue="Insufficient color contrast for text readability",
                solution="Increase contrast ratios to meet WCAG AA standards (4.5:1 minimum)",
                impact="Improves readability for users with visual impairments",
            )
        )
        worst = sorted((c for c in contrast if not c.passes_aa), key=lambda c: c.ratio)
        for c in worst:
            if c.passes_aa_large:
                recs.append(
                    Recommendation(
                        priority="low",
                        category="contrast",
                        issue=f"{c.foreground} on {c.background} ({c.ratio:.2f}:1) passes only for large text",
                        solution="Reserve this pairing for headings and text of 18pt / 14pt bold or larger",
                        impact="Keeps body text readable",
                        effort="low",
                    )
                )
            else:
                recs.append(
                    Recommendation(
                        priority="medium",
                        category="contrast",
                        issue=f"{c.foreground} on {c.background} has contrast {c.ratio:.2f}:1",
                        solution="Darken or lighten the foreground until it reaches 4.5:1",
                        impact="Text in this pairing fails WCAG AA",
                        effort="low",
                    )
                )

    if cb.score < COLOR_BLIND_WARN_BELOW:
        recs.append(
            Recommendation(
                priority="high",
                category="color-blindness",
                issue="Colors may be difficult to distinguish for color blind users",
                solution="Use patterns, textures, or additional visual cues beyond color alone",
                impact="Ensures accessibility for 8% of men and 0.5% of women with color vision deficiency",
            )
        )
    for pair in cb.problematic_pairs:
        recs.append(
            Recommendation(
                priority="medium",
                category="color-blindness",
                issue=f"{pair.color1} and {pair.color2} look alike under color vision deficiency",
                solution="Separate the pair in lightness, not only in hue",
                impact="Avoids relying on hue alone to convey meaning",
                effort="low",
            )
        )

    if excluded:
        recs.append(
            Recommendation(
                priority="low",
                category="analysis",
                issue=f"{len(excluded)} input(s) could not be parsed and were skipped",
                solution="Supply colors as #rgb or #rrggbb hex values",
                impact="The score only reflects the colors that were analyzed",
                effort="low",
            )
        )

    recs.sort(key=lambda r: _PRIORITY_ORDER[r.priority])
    capped: list[Recommendation] = []
    per_category: dict[str, int] = {}
    for r in recs:
        n = per_category.get(r.category, 0)
        if n < MAX_RECOMMENDATIONS_PER_CATEGORY:
            capped.append(r)
            per_category[r.category] = n + 1
    return tuple(capped)


# =============================================================================
# Public API
# =============================================================================

def analyze(
    colors: Mapping[str, Any] | Iterable[Any],
    backgrounds: Iterable[str] = DEFAULT_BACKGROUNDS,
) -> AccessibilityReport:
    """Does: Analyze colors for contrast and color-vision accessibility.

    Args:
        colors: name -> hex mapping, or an iterable of hex strings.
        backgrounds: Backgrounds every color is tested against.

    Returns:
        AccessibilityReport. Invalid inputs never raise; they are listed in
        `excluded` and set `degraded`.
    """
    valid, excluded = _collect(colors)
    valid_bgs, excluded_bgs = _collect(backgrounds, prefix="background ")
    bgs = list(dict.fromkeys(valid_bgs.values()))
    excluded.extend(excluded_bgs)
    if excluded:
        logger.warning("%s: %s", AccessibilityAnalysisDegraded.__name__, ", ".join(excluded))

    hexes = list(valid.values())
    contrast = [evaluate_pair(fg, bg) for bg in bgs for fg in dict.fromkeys(hexes) if fg != bg]
    compliance = _compliance(contrast)
    cb = _color_blindness(hexes)

    aa_rate = (sum(1 for c in contrast if c.passes_aa) / len(contrast)) if contrast else 0.0
    score = round(CONTRAST_WEIGHT * aa_rate * 100.0 + COLOR_BLIND_WEIGHT * cb.score)
    score = max(0, min(100, score))

    return AccessibilityReport(
        score=score,
        wcag_compliance=compliance,
        contrast=tuple(contrast),
        color_blindness=cb,
        recommendations=_recommend(compliance, contrast, cb, excluded),
        colors=valid,
        degraded=bool(excluded),
        excluded=tuple(excluded),
    )
