"""
context.py
==========

Does: Nudge a base color's saturation, hue and lightness (HSL) according to
      a pluggable rule table keyed by industry, audience and culture.
      The packaged table (data/context_rules.json) is partial:
      contexts without rules leave the color untouched.
Returns: ContextAdjustment(color, reasons).
Used by: Providers, before any scale is generated.
"""

from __future__ import annotations

import colorsys
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from palette_intelligence.engine.color.space import Color
from palette_intelligence.engine.general.utils.load_config import load_config

__all__ = [
    "ContextRule",
    "ContextRuleTable",
    "ContextAdjustment",
    "RULE_DIMENSIONS",
    "default_rule_table",
    "apply_context",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# Applied in this order; each dimension sees the previous one's output.
RULE_DIMENSIONS: tuple[str, ...] = ("industry", "audience", "cultural")
RULES_FILE = "context_rules"


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _hue_in(h: float, bounds: tuple[float, float]) -> bool:
    lo, hi = bounds
    return lo <= h <= hi


@dataclass(frozen=True)
class ContextRule:
    """One conditional HSL adjustment (hue in degrees, s/l in [0, 1])."""

    reason: str = ""
    when_hue: tuple[float, float] | None = None
    when_hue_outside: tuple[float, float] | None = None
    saturation_shift: float | None = None
    saturation_min: float | None = None
    saturation_max: float | None = None
    lightness_min: float | None = None
    lightness_max: float | None = None
    hue_shift: float | None = None
    hue_set: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContextRule:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown context rule keys: {sorted(unknown)}")
        kwargs = dict(data)
        for key in ("when_hue", "when_hue_outside"):
            if kwargs.get(key) is not None:
                lo, hi = kwargs[key]
                kwargs[key] = (float(lo), float(hi))
        return cls(**kwargs)

    def matches(self, hue: float) -> bool:
        if self.when_hue is not None and not _hue_in(hue, self.when_hue):
            return False
        if self.when_hue_outside is not None and _hue_in(hue, self.when_hue_outside):
            return False
        return True

    def apply(self, h: float, s: float, l: float) -> tuple[float, float, float]:
        if self.saturation_shift is not None:
            s = _clamp01(s + self.saturation_shift)
        if self.saturation_min is not None:
            s = max(self.saturation_min, s)
        if self.saturation_max is not None:
            s = min(self.saturation_max, s)
        if self.lightness_min is not None:
            l = max(self.lightness_min, l)
        if self.lightness_max is not None:
            l = min(self.lightness_max, l)
        if self.hue_set is not None:
            h = self.hue_set % 360.0
        elif self.hue_shift is not None:
            h = (h + self.hue_shift) % 360.0
        return h, s, l


@dataclass(frozen=True)
class ContextAdjustment:
    color: Color
    reasons: tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.reasons)


class ContextRuleTable:
    """dimension -> context value -> ordered rules. `register` extends it."""

    def __init__(self, rules: Mapping[str, Mapping[str, list[ContextRule]]] | None = None):
        self._rules: dict[str, dict[str, list[ContextRule]]] = {d: {} for d in RULE_DIMENSIONS}
        for dimension, by_value in (rules or {}).items():
            for value, items in by_value.items():
                for rule in items:
                    self.register(dimension, value, rule)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContextRuleTable:
        table = cls()
        for dimension, by_value in data.items():
            for value, items in by_value.items():
                for item in items:
                    table.register(dimension, value, ContextRule.from_dict(item))
        return table

    def register(self, dimension: str, value: str, rule: ContextRule) -> ContextRuleTable:
        if dimension not in self._rules:
            raise ValueError(f"Unknown rule dimension {dimension!r}; expected one of {list(RULE_DIMENSIONS)}")
        self._rules[dimension].setdefault(value, []).append(rule)
        return self

    def rules_for(self, dimension: str, value: str | None) -> tuple[ContextRule, ...]:
        if value is None:
            return ()
        return tuple(self._rules.get(dimension, {}).get(value, ()))

    def covers(self, dimension: str, value: str) -> bool:
        return bool(self.rules_for(dimension, value))


def _validate_rules(data: dict[str, Any]) -> dict[str, Any]:
    for dimension, by_value in data.items():
        if dimension not in RULE_DIMENSIONS:
            raise ValueError(f"unknown dimension {dimension!r}")
        if not isinstance(by_value, dict):
            raise ValueError(f"{dimension}: expected object")
        for value, items in by_value.items():
            if not isinstance(items, list):
                raise ValueError(f"{dimension}.{value}: expected list of rules")
    return data


def default_rule_table() -> ContextRuleTable:
    """Does: Build a fresh table from the packaged data/context_rules.json."""
    data = load_config(RULES_FILE, mode="validated_dict", validator=_validate_rules)
    return ContextRuleTable.from_dict(data)


def apply_context(
    color: Color | str,
    context: Any = None,
    rules: ContextRuleTable | None = None,
) -> ContextAdjustment:
    """Does: Apply every matching rule for the context's industry, audience
    and cultural values, in that order.

    Args:
        color: Base color.
        context: DesignContext (or anything exposing those attributes), or None.
        rules: Rule table; defaults to the packaged one.

    Returns:
        The adjusted color and one reason per rule that fired.
    """
    base = color if isinstance(color, Color) else Color(color)
    if context is None:
        return ContextAdjustment(base)

    table = rules or default_rule_table()
    r, g, b = (c / 255.0 for c in base.rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    h *= 360.0

    reasons: list[str] = []
    fired = False
    for dimension in RULE_DIMENSIONS:
        for rule in table.rules_for(dimension, getattr(context, dimension, None)):
            if not rule.matches(h):
                continue
            h, s, l = rule.apply(h, s, l)
            fired = True
            if rule.reason:
                reasons.append(rule.reason)

    if not fired:
        return ContextAdjustment(base)

    rgb = colorsys.hls_to_rgb(h / 360.0, l, s)
    adjusted = Color("#" + "".join(f"{round(_clamp01(c) * 255):02x}" for c in rgb))
    if adjusted.hex != base.hex:
        logger.debug("Context adjusted %s -> %s (%s)", base.hex, adjusted.hex, "; ".join(reasons))
    return ContextAdjustment(adjusted, tuple(reasons))
