"""
space.py
========

Does: Parse/normalize hex colors and convert between sRGB hex and the
      perceptually-uniform OKLCH space (sRGB -> linear -> OKLab -> OKLCH),
      projecting out-of-gamut colors back into sRGB by bisecting chroma.
Returns: Canonical '#rrggbb' strings, (L, C, H) tuples with L in [0, 1] and
         H in [0, 360), the immutable `Color` value type and distance helpers.
Used by: Scale generation, context rules, providers, accessibility analysis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

import webcolors

from palette_intelligence.engine.errors import InvalidColorFormat

__all__ = [
    "UniformColor",
    "Color",
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_uniform",
    "uniform_to_hex",
    "delta_e_ok",
    "rotate_hue",
    "srgb_to_linear",
]
__docformat__ = "google"

# (lightness, chroma, hue-degrees)
UniformColor = tuple[float, float, float]

GAMUT_EPSILON = 1e-6
BISECT_ITERATIONS = 24
ACHROMATIC_CHROMA = 1e-9


# =============================================================================
# 1) PARSING
# =============================================================================

def normalize_hex(value: object) -> str:
    """Does: Canonicalize '#rgb' / '#rrggbb' (leading '#' optional, any case).

    Returns:
        Lowercase '#rrggbb'.

    Raises:
        InvalidColorFormat: for anything else, including non-strings.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    text = value.strip()
    if not text.startswith("#"):
        text = f"#{text}"
    try:
        return webcolors.normalize_hex(text)
    except ValueError as e:
        raise InvalidColorFormat(value) from e


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Does: Parse a hex color into 0..255 integer channels."""
    rgb = webcolors.hex_to_rgb(normalize_hex(value))
    return rgb.red, rgb.green, rgb.blue


# =============================================================================
# 2) TRANSFER FUNCTIONS & OKLAB
# =============================================================================

def srgb_to_linear(c: float) -> float:
    """Does: sRGB companding inverse for a channel in [0, 1]."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0:
        return 0.0
    if c >= 1.0:
        return 1.0
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def _linear_rgb_to_oklab(rl: float, gl: float, bl: float) -> tuple[float, float, float]:
    l = 0.4122214708 * rl + 0.5363325363 * gl + 0.0514459929 * bl
    m = 0.2119034982 * rl + 0.6806995451 * gl + 0.1073969566 * bl
    s = 0.0883024619 * rl + 0.2817188376 * gl + 0.6299787005 * bl

    l_ = math.copysign(abs(l) ** (1 / 3), l)
    m_ = math.copysign(abs(m) ** (1 / 3), m)
    s_ = math.copysign(abs(s) ** (1 / 3), s)

    return (
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def _oklch_to_linear_rgb(L: float, C: float, H: float) -> tuple[float, float, float]:
    """Unclamped linear-light RGB; components outside [0, 1] mean out of gamut."""
    h_rad = math.radians(H)
    a = C * math.cos(h_rad)
    b = C * math.sin(h_rad)

    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l, m, s = l_**3, m_**3, s_**3

    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def _in_gamut(rgb: tuple[float, float, float]) -> bool:
    return all(-GAMUT_EPSILON <= c <= 1.0 + GAMUT_EPSILON for c in rgb)


# =============================================================================
# 3) HEX <-> OKLCH
# =============================================================================

@lru_cache(maxsize=4096)
def _uniform_from_canonical(hex_value: str) -> UniformColor:
    r, g, b = webcolors.hex_to_rgb(hex_value)
    L, a, b_ok = _linear_rgb_to_oklab(
        srgb_to_linear(r / 255.0), srgb_to_linear(g / 255.0), srgb_to_linear(b / 255.0)
    )
    C = math.hypot(a, b_ok)
    if C < ACHROMATIC_CHROMA:
        return max(0.0, min(1.0, L)), 0.0, 0.0
    H = math.degrees(math.atan2(b_ok, a)) % 360.0
    return max(0.0, min(1.0, L)), C, H


def hex_to_uniform(value: str) -> UniformColor:
    """Does: Convert a hex color to OKLCH.

    Returns:
        (L, C, H) with L in [0, 1], C >= 0 and H in degrees [0, 360).
        Achromatic colors report hue 0.
    """
    return _uniform_from_canonical(normalize_hex(value))


def uniform_to_hex(L: float, C: float, H: float) -> str:
    """Does: Convert OKLCH to the nearest displayable '#rrggbb'. Never fails.

    L is clamped to [0, 1], negative/NaN chroma counts as 0 and hue is
    wrapped. Out-of-gamut input keeps L and H and takes the largest chroma
    that fits in sRGB (bisection), then rounds to 8-bit channels.
    """
    L = 0.0 if math.isnan(L) else max(0.0, min(1.0, L))
    C = 0.0 if (math.isnan(C) or C < 0.0) else C
    H = 0.0 if math.isnan(H) else H % 360.0

    rgb = _oklch_to_linear_rgb(L, C, H)
    if not _in_gamut(rgb):
        lo, hi = 0.0, C
        for _ in range(BISECT_ITERATIONS):
            mid = (lo + hi) / 2.0
            if _in_gamut(_oklch_to_linear_rgb(L, mid, H)):
                lo = mid
            else:
                hi = mid
        rgb = _oklch_to_linear_rgb(L, lo, H)

    r, g, b = (round(_linear_to_srgb(c) * 255) for c in rgb)
    return webcolors.rgb_to_hex((r, g, b))


def delta_e_ok(a: str, b: str) -> float:
    """Does: Euclidean distance in OKLab between two hex colors."""
    L1, C1, H1 = hex_to_uniform(a)
    L2, C2, H2 = hex_to_uniform(b)
    a1, b1 = C1 * math.cos(math.radians(H1)), C1 * math.sin(math.radians(H1))
    a2, b2 = C2 * math.cos(math.radians(H2)), C2 * math.sin(math.radians(H2))
    return math.sqrt((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def rotate_hue(value: str, degrees: float) -> str:
    """Does: Rotate the OKLCH hue of a color, keeping L and C."""
    L, C, H = hex_to_uniform(value)
    return uniform_to_hex(L, C, H + degrees)


# =============================================================================
# 4) VALUE TYPE
# =============================================================================

@dataclass(frozen=True)
class Color:
    """An sRGB color stored as canonical hex.

    Lightness, chroma and hue are derived from `hex` on access and never
    stored, so they cannot drift from it.
    """

    hex: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", normalize_hex(self.hex))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        return cls(value)

    @classmethod
    def from_uniform(cls, L: float, C: float, H: float) -> Color:
        return cls(uniform_to_hex(L, C, H))

    @property
    def uniform(self) -> UniformColor:
        return _uniform_from_canonical(self.hex)

    @property
    def lightness(self) -> float:
        return self.uniform[0]

    @property
    def chroma(self) -> float:
        return self.uniform[1]

    @property
    def hue(self) -> float:
        return self.uniform[2]

    @property
    def rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.hex)

    def with_uniform(
        self,
        *,
        lightness: float | None = None,
        chroma: float | None = None,
        hue: float | None = None,
    ) -> Color:
        """Does: Return a new Color with some OKLCH components replaced."""
        L, C, H = self.uniform
        return Color.from_uniform(
            L if lightness is None else lightness,
            C if chroma is None else chroma,
            H if hue is None else hue,
        )

    def __str__(self) -> str:
        return self.hex
