# tests/test_color_space.py
import math

import pytest

from palette_intelligence.engine.color.space import (
    Color,
    delta_e_ok,
    hex_to_rgb,
    hex_to_uniform,
    normalize_hex,
    rotate_hue,
    uniform_to_hex,
)
from palette_intelligence.engine.errors import InvalidColorFormat, PaletteError


# ── normalize_hex ─────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#3B82F6", "#3b82f6"),
        ("3b82f6", "#3b82f6"),
        ("#abc", "#aabbcc"),
        ("ABC", "#aabbcc"),
        ("  #ffffff ", "#ffffff"),
    ],
)
def test_case_01_normalize_hex_accepts_variants(raw, expected):
    assert normalize_hex(raw) == expected


@pytest.mark.parametrize("raw", ["", "#", "#12", "#12345", "#1234567", "#ggg", "blue", None, 0x3B82F6, (1, 2, 3)])
def test_case_02_normalize_hex_rejects_garbage(raw):
    with pytest.raises(InvalidColorFormat) as exc:
        normalize_hex(raw)
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, PaletteError)
    assert exc.value.value == raw


def test_case_03_hex_to_rgb():
    assert hex_to_rgb("#3b82f6") == (59, 130, 246)
    assert hex_to_rgb("fff") == (255, 255, 255)


# ── OKLCH conversions ─────────────────────────────────────────────────────────
def test_case_04_white_black_and_gray_are_achromatic():
    L, C, H = hex_to_uniform("#ffffff")
    assert L == pytest.approx(1.0, abs=1e-3)
    assert C < 1e-3
    L, C, H = hex_to_uniform("#000000")
    assert L == pytest.approx(0.0, abs=1e-6)
    assert C == 0.0 and H == 0.0
    _, C, _ = hex_to_uniform("#808080")
    assert C < 1e-3


def test_case_05_known_reference_values():
    # sRGB red in OKLCH ≈ (0.628, 0.258, 29.2)
    L, C, H = hex_to_uniform("#ff0000")
    assert L == pytest.approx(0.628, abs=0.005)
    assert C == pytest.approx(0.258, abs=0.005)
    assert H == pytest.approx(29.2, abs=0.5)


@pytest.mark.parametrize("hex_value", ["#3b82f6", "#10b981", "#ef4444", "#6b7280", "#f59e0b", "#000000", "#ffffff"])
def test_case_06_uniform_to_hex_inverts_hex_to_uniform(hex_value):
    assert uniform_to_hex(*hex_to_uniform(hex_value)) == hex_value


def test_case_07_uniform_to_hex_never_fails_on_odd_input():
    assert uniform_to_hex(1.5, 0.0, 0.0) == "#ffffff"
    assert uniform_to_hex(-0.2, 0.3, 40.0) == "#000000"
    assert uniform_to_hex(0.6, -0.5, 100.0) == uniform_to_hex(0.6, 0.0, 100.0)
    assert uniform_to_hex(0.6, float("nan"), 100.0) == uniform_to_hex(0.6, 0.0, 0.0)
    assert uniform_to_hex(0.6, 0.1, 400.0) == uniform_to_hex(0.6, 0.1, 40.0)
    assert uniform_to_hex(0.6, 0.1, -320.0) == uniform_to_hex(0.6, 0.1, 40.0)


def test_case_08_gamut_mapping_keeps_lightness_and_hue():
    out = uniform_to_hex(0.7, 5.0, 145.0)  # impossible chroma
    assert normalize_hex(out) == out
    L, C, H = hex_to_uniform(out)
    assert L == pytest.approx(0.7, abs=0.01)
    assert H == pytest.approx(145.0, abs=2.0)
    assert C > 0.05


def test_case_09_gamut_mapping_returns_most_chromatic_fit():
    out = uniform_to_hex(0.6, 1.0, 260.0)
    _, C_mapped, _ = hex_to_uniform(out)
    # a bit more chroma than the mapped color must leave the gamut or
    # round back to (almost) the same color
    richer = uniform_to_hex(0.6, C_mapped + 0.02, 260.0)
    _, C_richer, _ = hex_to_uniform(richer)
    assert C_richer <= C_mapped + 0.005


# ── Color value type ──────────────────────────────────────────────────────────
def test_case_10_color_is_canonical_and_immutable():
    c = Color("#3B82F6")
    assert c.hex == "#3b82f6"
    assert c == Color("3b82f6")
    assert str(c) == "#3b82f6"
    with pytest.raises(Exception):
        c.hex = "#000000"  # type: ignore[misc]
    with pytest.raises(InvalidColorFormat):
        Color("nope")


def test_case_11_color_components_derive_from_hex():
    c = Color.from_hex("#3b82f6")
    assert (c.lightness, c.chroma, c.hue) == hex_to_uniform("#3b82f6")
    assert 0.0 <= c.lightness <= 1.0
    assert 0.0 <= c.hue < 360.0
    assert c.rgb == (59, 130, 246)


def test_case_12_with_uniform_and_from_uniform():
    c = Color("#3b82f6")
    lighter = c.with_uniform(lightness=0.9)
    assert lighter.lightness == pytest.approx(0.9, abs=0.01)
    assert lighter.hue == pytest.approx(c.hue, abs=5.0)
    assert Color.from_uniform(*c.uniform) == c


def test_case_13_delta_e_and_rotate_hue():
    assert delta_e_ok("#3b82f6", "#3b82f6") == 0.0
    assert delta_e_ok("#000000", "#ffffff") == pytest.approx(1.0, abs=0.01)
    rotated = rotate_hue("#3b82f6", 120.0)
    diff = (hex_to_uniform(rotated)[2] - hex_to_uniform("#3b82f6")[2]) % 360.0
    assert math.isclose(diff, 120.0, abs_tol=4.0)
