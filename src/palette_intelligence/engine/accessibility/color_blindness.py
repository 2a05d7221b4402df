"""
color_blindness.py
==================

Does: Simulate protanopia, deuteranopia and tritanopia with the Machado,
      Oliveira & Fernandes (2009) full-severity matrices (applied in linear
      RGB) and measure how far pairs of colors drift together (CIE ΔE76).
Returns: Simulated hex colors, ΔE76 distances, per-deficiency Simulation records.
Used by: Accessibility analyzer.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from itertools import combinations
from typing import Literal

from palette_intelligence.engine.color.space import hex_to_rgb, srgb_to_linear

__all__ = [
    "Deficiency",
    "DEFICIENCIES",
    "MACHADO_MATRICES",
    "INTENDED_DISTINCT_DELTA_E",
    "JUST_NOTICEABLE_DELTA_E",
    "PairIssue",
    "Simulation",
    "simulate",
    "delta_e76",
    "intended_pairs",
    "simulate_palette",
]
__docformat__ = "google"

Deficiency = Literal["protanopia", "deuteranopia", "tritanopia"]
DEFICIENCIES: tuple[Deficiency, ...] = ("protanopia", "deuteranopia", "tritanopia")

Matrix = tuple[tuple[float, float, float], ...]

MACHADO_MATRICES: dict[str, Matrix] = {
    "protanopia": (
        (0.152286, 1.052583, -0.204868),
        (0.114503, 0.786281, 0.099216),
        (-0.003882, -0.048116, 1.051998),
    ),
    "deuteranopia": (
        (0.367322, 0.860646, -0.227968),
        (0.280085, 0.672501, 0.047413),
        (-0.011820, 0.042940, 0.968881),
    ),
    "tritanopia": (
        (1.255528, -0.076749, -0.178779),
        (-0.078411, 0.930809, 0.147602),
        (0.004733, 0.691367, 0.303900),
    ),
}

# Pairs at least this far apart are meant to be told apart;
# below the second threshold they read as the same color.
INTENDED_DISTINCT_DELTA_E = 10.0
JUST_NOTICEABLE_DELTA_E = 5.0


# ── CIE Lab (D65) ────────────────────────────────────────────────────────────
def _f_lab(t: float) -> float:
    d = 6 / 29
    return t ** (1 / 3) if t > d**3 else (t / (3 * d * d) + 4 / 29)


@lru_cache(maxsize=4096)
def _hex_to_lab(color: str) -> tuple[float, float, float]:
    r, g, b = (srgb_to_linear(c / 255.0) for c in hex_to_rgb(color))
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883
    fx, fy, fz = _f_lab(x / Xn), _f_lab(y / Yn), _f_lab(z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def delta_e76(a: str, b: str) -> float:
    """Does: Euclidean distance in CIE Lab between two hex colors."""
    L1, a1, b1 = _hex_to_lab(a)
    L2, a2, b2 = _hex_to_lab(b)
    return ((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2) ** 0.5


# ── Simulation ───────────────────────────────────────────────────────────────
def _linear_to_8bit(c: float) -> int:
    c = max(0.0, min(1.0, c))
    v = 12.92 * c if c <= 0.0031308 else 1.055 * (c ** (1 / 2.4)) - 0.055
    return round(v * 255)


@lru_cache(maxsize=4096)
def simulate(color: str, deficiency: Deficiency) -> str:
    """Does: Return how `color` appears under the given full-severity deficiency."""
    m = MACHADO_MATRICES[deficiency]
    lin = [srgb_to_linear(c / 255.0) for c in hex_to_rgb(color)]
    out = [sum(m[i][j] * lin[j] for j in range(3)) for i in range(3)]
    return "#" + "".join(f"{_linear_to_8bit(c):02x}" for c in out)


@dataclass(frozen=True)
class PairIssue:
    color1: str
    color2: str
    original_distance: float
    perceived_distance: float

    def to_dict(self) -> dict[str, object]:
        return {
            "color1": self.color1,
            "color2": self.color2,
            "original_distance": round(self.original_distance, 2),
            "perceived_distance": round(self.perceived_distance, 2),
        }


@dataclass(frozen=True)
class Simulation:
    deficiency: Deficiency
    perceived: dict[str, str]  # original hex -> simulated hex
    shift: dict[str, float]  # original hex -> ΔE76 original vs simulated
    issues: tuple[PairIssue, ...]
    severity: Literal["none", "mild", "moderate", "severe"]

    def to_dict(self) -> dict[str, object]:
        return {
            "deficiency": self.deficiency,
            "perceived": dict(self.perceived),
            "severity": self.severity,
            "issues": [i.to_dict() for i in self.issues],
        }


def _severity(shifts: list[float], issue_count: int) -> Literal["none", "mild", "moderate", "severe"]:
    avg = sum(shifts) / len(shifts) if shifts else 0.0
    if avg < 5 and issue_count == 0:
        return "none"
    if avg < 15 and issue_count <= 1:
        return "mild"
    if avg < 30 and issue_count <= 3:
        return "moderate"
    return "severe"


def intended_pairs(colors: list[str]) -> list[tuple[str, str, float]]:
    """Does: Unique pairs whose original ΔE76 marks them as meant to differ."""
    out = []
    for a, b in combinations(dict.fromkeys(colors), 2):
        d = delta_e76(a, b)
        if d >= INTENDED_DISTINCT_DELTA_E:
            out.append((a, b, d))
    return out


def simulate_palette(colors: list[str], deficiency: Deficiency) -> Simulation:
    """Does: Simulate every color and collect intended pairs that collapse
    below the just-noticeable difference.
    """
    unique = list(dict.fromkeys(colors))
    perceived = {c: simulate(c, deficiency) for c in unique}
    shift = {c: delta_e76(c, perceived[c]) for c in unique}
    issues = []
    for a, b, d in intended_pairs(unique):
        seen = delta_e76(perceived[a], perceived[b])
        if seen < JUST_NOTICEABLE_DELTA_E:
            issues.append(PairIssue(a, b, d, seen))
    return Simulation(
        deficiency=deficiency,
        perceived=perceived,
        shift=shift,
        issues=tuple(issues),
        severity=_severity(list(shift.values()), len(issues)),
    )
