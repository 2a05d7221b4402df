"""
scale.py
========

Does: Generate an ordered lightness scale (50..950) from one base color in
      OKLCH: hue fixed, lightness eased toward the light/dark ends, chroma
      attenuated near the extremes, step 500 pinned to the base.
Returns: `ColorScale`, a read-only ordered mapping step-key -> Color.
Used by: Every provider (primary/secondary/neutral scales).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from palette_intelligence.engine.color.constants import SCALE_STEPS
from palette_intelligence.engine.color.space import Color, hex_to_uniform, uniform_to_hex
from palette_intelligence.engine.general.utils.log import debug

__all__ = ["ColorScale", "generate_scale", "steps_for_size"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Curve parameters ─────────────────────────────────────────────────────────
LIGHT_END = 0.97
DARK_END = 0.12
EASE_EXPONENT = 1.5
CHROMA_FALLOFF = 0.6
NUDGE_STEP = 0.004
MAX_NUDGES = 60


def steps_for_size(size: int) -> tuple[int, ...]:
    """Does: Map a palette size (9, 10 or 11) to its ordered step keys.

    Raises:
        ValueError: for any other size.
    """
    try:
        return SCALE_STEPS[size]
    except KeyError:
        raise ValueError(f"Unsupported scale size {size!r}; expected one of {sorted(SCALE_STEPS)}") from None


class ColorScale(Mapping[str, Color]):
    """Ordered read-only mapping '50'..'950' -> Color, lightest first."""

    __slots__ = ("_colors",)

    def __init__(self, colors: Mapping[int | str, Color]):
        ordered = sorted(((int(k), c) for k, c in colors.items()), key=lambda kv: kv[0])
        self._colors: dict[str, Color] = {str(k): c for k, c in ordered}

    def __getitem__(self, key: int | str) -> Color:  # type: ignore[override]
        return self._colors[str(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorScale):
            return self._colors == other._colors
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._colors.items()))

    def __repr__(self) -> str:
        return f"ColorScale({self.to_hex_dict()!r})"

    @property
    def base(self) -> Color:
        return self._colors["500"]

    def to_hex_dict(self) -> dict[str, str]:
        return {k: c.hex for k, c in self._colors.items()}


# =============================================================================
# Generation
# =============================================================================

def _ease_out(t: float) -> float:
    return 1.0 - (1.0 - t) ** EASE_EXPONENT


def _chroma_weight(L: float) -> float:
    return 1.0 - CHROMA_FALLOFF * (abs(L - 0.5) / 0.5) ** 2


def _chroma_for(L: float, base_L: float, base_C: float) -> float:
    # Never exceed the base chroma; scale down as lightness leaves the middle.
    ref = max(_chroma_weight(base_L), 1e-6)
    return base_C * min(1.0, _chroma_weight(L) / ref)


def _normalize_steps(steps: Iterable[int | str]) -> list[int]:
    keys = sorted({int(s) for s in steps})
    if 500 not in keys:
        raise ValueError(f"Scale steps must include 500, got {keys}")
    if keys[0] < 0 or keys[-1] > 1000:
        raise ValueError(f"Scale steps must lie in 0..1000, got {keys}")
    return keys


def generate_scale(base: Color | str, steps: Iterable[int | str] | None = None) -> ColorScale:
    """Does: Build a lightness scale around `base` (step 500 == base exactly).

    Lightness moves from the base toward ~0.97 on the light side and ~0.12 on
    the dark side (the ends widen when the base is already beyond them) along
    an ease-out curve. A post-pass nudges targets so the *quantized* hex
    lightness is strictly decreasing from lightest to darkest; near pure
    white/black there may be no room left, which is logged, not raised.

    Args:
        base: Base color or hex string.
        steps: Step keys; defaults to the size-10 set (50..900).

    Returns:
        ColorScale ordered lightest first.
    """
    base_color = base if isinstance(base, Color) else Color(base)
    keys = _normalize_steps(steps if steps is not None else steps_for_size(10))
    L0, C0, H0 = base_color.uniform

    light_end = max(LIGHT_END, L0 + (1.0 - L0) * 0.75)
    dark_end = min(DARK_END, L0 * 0.25)
    lo_key, hi_key = keys[0], keys[-1]

    targets: dict[int, float] = {}
    for k in keys:
        if k < 500:
            t = (500 - k) / (500 - lo_key)
            targets[k] = L0 + (light_end - L0) * _ease_out(t)
        elif k > 500:
            t = (k - 500) / (hi_key - 500)
            targets[k] = L0 - (L0 - dark_end) * _ease_out(t)

    colors: dict[int, Color] = {500: base_color}

    def _render(L: float) -> Color:
        return Color(uniform_to_hex(L, _chroma_for(L, L0, C0), H0))

    # Walk outward from 500 so every step only has to clear its inner neighbour.
    light_side = [k for k in reversed(keys) if k < 500]
    dark_side = [k for k in keys if k > 500]
    for side, direction in ((light_side, 1.0), (dark_side, -1.0)):
        prev_L = L0
        for k in side:
            L = targets[k]
            color = _render(L)
            nudges = 0
            while (color.lightness - prev_L) * direction <= 0.0 and nudges < MAX_NUDGES:
                L += NUDGE_STEP * direction
                color = _render(L)
                nudges += 1
            if (color.lightness - prev_L) * direction <= 0.0:
                logger.warning(
                    "Scale step %s of %s has no lightness room left (L=%.4f)", k, base_color.hex, prev_L
                )
            elif nudges:
                debug(f"step {k} nudged {nudges}x to L={L:.4f}", topic="scale")
            colors[k] = color
            prev_L = hex_to_uniform(color.hex)[0]

    debug(f"{base_color.hex} -> {[colors[k].hex for k in keys]}", topic="scale")
    return ColorScale(colors)
