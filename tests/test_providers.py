# tests/test_providers.py
import pytest

from palette_intelligence.engine.accessibility.contrast import AA_NORMAL, contrast_ratio
from palette_intelligence.engine.color.constants import (
    DEFAULT_SECONDARY,
    NEUTRAL_COOL,
    NEUTRAL_DEFAULT,
    NEUTRAL_WARM,
    SEMANTIC_DEFAULTS,
)
from palette_intelligence.engine.color.llm import PaletteSuggestion
from palette_intelligence.engine.color.providers import (
    ExternalServiceProvider,
    LocalHeuristicProvider,
    RuleBasedProvider,
    default_providers,
)
from palette_intelligence.engine.color.providers.local import secondary_for_style, semantic_for
from palette_intelligence.engine.color.providers.rule_based import pick_neutral
from palette_intelligence.engine.color.space import Color
from palette_intelligence.engine.errors import ExternalServiceError
from palette_intelligence.engine.types import DesignContext, PaletteRequest


class FakeClient:
    def __init__(self, available=True, suggestion=None, error=None):
        self.available = available
        self.suggestion = suggestion
        self.error = error
        self.calls = []

    def is_available(self):
        return self.available

    def suggest_palette(self, base_color, style, context=None, accessibility=True):
        self.calls.append((base_color, style, context, accessibility))
        if self.error:
            raise self.error
        return self.suggestion


def _scale_hexes(scale):
    return list(scale.to_hex_dict().values())


# ── default order ─────────────────────────────────────────────────────────────
def test_case_01_default_provider_order():
    names = [p.name for p in default_providers()]
    assert names == ["ollama", "local-heuristic", "rule-based"]


# ── rule-based ────────────────────────────────────────────────────────────────
def test_case_02_rule_based_uses_tables():
    req = PaletteRequest("#3b82f6", context=DesignContext(industry="healthcare"), size=9)
    pal = RuleBasedProvider().generate(req)
    assert pal.metadata.provider == "rule-based"
    assert pal.metadata.confidence == 0.6
    assert pal.secondary.base.hex == "#4ade80"
    assert pal.semantic.error.hex == "#dc2626"
    assert "medical-emergency" in pal.contextual
    assert list(pal.primary) == ["100", "200", "300", "400", "500", "600", "700", "800", "900"]


def test_case_03_rule_based_defaults_without_context():
    pal = RuleBasedProvider().generate(PaletteRequest("#3b82f6"))
    assert pal.secondary.base.hex == DEFAULT_SECONDARY
    assert pal.neutral.base.hex == NEUTRAL_DEFAULT
    assert {k: v.hex for k, v in pal.semantic.as_dict().items()} == dict(SEMANTIC_DEFAULTS)
    assert pal.primary.base.hex == "#3b82f6"
    assert len(pal.contextual) == 0
    assert pal.metadata.reasoning.startswith("Rule-based professional palette for general use")


def test_case_04_neutral_precedence():
    assert pick_neutral(DesignContext(industry="tech", audience="children")) == NEUTRAL_COOL
    assert pick_neutral(DesignContext(audience="children")) == NEUTRAL_WARM
    assert pick_neutral(DesignContext(emotional="approachable")) == NEUTRAL_WARM
    assert pick_neutral(DesignContext()) == NEUTRAL_DEFAULT


def test_case_05_context_adjustment_reaches_primary_and_reasoning():
    req = PaletteRequest("#ef4444", context=DesignContext(industry="healthcare"))
    pal = RuleBasedProvider().generate(req)
    assert pal.primary.base.hex != "#ef4444"
    assert "healthcare" in pal.metadata.reasoning


# ── local heuristic ───────────────────────────────────────────────────────────
def test_case_06_local_provider_respects_enabled_flag():
    assert LocalHeuristicProvider(enabled=False).check_availability() is False
    assert LocalHeuristicProvider(enabled=True).check_availability() is True


def test_case_07_local_semantic_colors_meet_aa_on_white():
    for hex_value in semantic_for(accessibility=True).values():
        assert contrast_ratio(hex_value, "#ffffff") >= AA_NORMAL


@pytest.mark.parametrize("style", ["professional", "vibrant", "minimal"])
def test_case_08_secondary_rotates_hue(style):
    base = Color("#3b82f6")
    sec = secondary_for_style(base, style)
    diff = abs((sec.hue - base.hue + 180.0) % 360.0 - 180.0)
    assert diff > 10.0


def test_case_09_warm_and_cool_pull_toward_target():
    base = Color("#10b981")  # green, hue ~ 160
    warm = secondary_for_style(base, "warm")
    cool = secondary_for_style(base, "cool")
    assert abs((warm.hue - 55.0 + 180.0) % 360.0 - 180.0) < abs((base.hue - 55.0 + 180.0) % 360.0 - 180.0)
    assert abs((cool.hue - 235.0 + 180.0) % 360.0 - 180.0) < abs((base.hue - 235.0 + 180.0) % 360.0 - 180.0)


def test_case_10_local_provider_builds_full_palette():
    req = PaletteRequest("#3b82f6", style="vibrant", context=DesignContext(industry="finance"), size=11)
    pal = LocalHeuristicProvider(enabled=True).generate(req)
    assert pal.metadata.provider == "local-heuristic"
    assert len(pal.primary) == len(pal.secondary) == len(pal.neutral) == 11
    assert "profit" in pal.contextual
    assert len(set(_scale_hexes(pal.neutral))) == 11


# ── external ──────────────────────────────────────────────────────────────────
def test_case_11_external_provider_uses_client_seeds():
    client = FakeClient(
        suggestion=PaletteSuggestion(
            secondary="#8b5cf6",
            neutral="#64748b",
            semantic={"success": "#16a34a"},
            reasoning="Violet complements the blue.",
        )
    )
    provider = ExternalServiceProvider(client=client)
    assert provider.check_availability() is True

    pal = provider.generate(PaletteRequest("#3b82f6", size=9))
    assert pal.metadata.provider == "ollama"
    assert pal.metadata.confidence == 0.85
    assert pal.secondary.base.hex == "#8b5cf6"
    assert pal.neutral.base.hex == "#64748b"
    assert pal.semantic.success.hex == "#16a34a"
    assert pal.semantic.error.hex == SEMANTIC_DEFAULTS["error"]
    assert pal.metadata.reasoning.endswith("Violet complements the blue.")
    assert client.calls[0][0] == "#3b82f6"


def test_case_12_external_provider_propagates_client_failure():
    provider = ExternalServiceProvider(client=FakeClient(available=False, error=ExternalServiceError("down")))
    assert provider.check_availability() is False
    with pytest.raises(ExternalServiceError):
        provider.generate(PaletteRequest("#3b82f6"))
