"""
contrast.py
===========

Does: WCAG 2.1 relative luminance and contrast ratio between two colors,
      with the AA / AAA (normal and large text) pass thresholds.
Returns: Floats (ratio in [1, 21]) and ContrastResult records.
Used by: Accessibility analyzer, local heuristic provider (semantic darkening).
"""

from __future__ import annotations

from dataclasses import dataclass

from palette_intelligence.engine.color.space import hex_to_rgb, normalize_hex, srgb_to_linear

__all__ = [
    "AA_NORMAL",
    "AAA_NORMAL",
    "AA_LARGE",
    "AAA_LARGE",
    "ContrastResult",
    "relative_luminance",
    "contrast_ratio",
    "evaluate_pair",
]
__docformat__ = "google"

AA_NORMAL = 4.5
AAA_NORMAL = 7.0
AA_LARGE = 3.0
AAA_LARGE = 4.5


def relative_luminance(color: str) -> float:
    """Does: WCAG relative luminance of a hex color (0 black .. 1 white)."""
    r, g, b = (srgb_to_linear(c / 255.0) for c in hex_to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: str, b: str) -> float:
    """Does: (L_lighter + 0.05) / (L_darker + 0.05), order-independent."""
    la, lb = relative_luminance(a), relative_luminance(b)
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


@dataclass(frozen=True)
class ContrastResult:
    foreground: str
    background: str
    ratio: float
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_aaa_large: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "ratio": round(self.ratio, 2),
            "passes": {
                "aa": self.passes_aa,
                "aaa": self.passes_aaa,
                "aa_large": self.passes_aa_large,
                "aaa_large": self.passes_aaa_large,
            },
        }


def evaluate_pair(foreground: str, background: str) -> ContrastResult:
    fg, bg = normalize_hex(foreground), normalize_hex(background)
    ratio = contrast_ratio(fg, bg)
    return ContrastResult(
        foreground=fg,
        background=bg,
        ratio=ratio,
        passes_aa=ratio >= AA_NORMAL,
        passes_aaa=ratio >= AAA_NORMAL,
        passes_aa_large=ratio >= AA_LARGE,
        passes_aaa_large=ratio >= AAA_LARGE,
    )
