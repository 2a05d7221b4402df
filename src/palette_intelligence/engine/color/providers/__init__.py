"""
providers.
==========

Does: The three palette providers, in fallback order.
Used by: PaletteOrchestrator.
"""

from .base import Provider
from .external import ExternalServiceProvider
from .local import LocalHeuristicProvider
from .rule_based import RuleBasedProvider


def default_providers() -> tuple[Provider, ...]:
    """Does: Fresh provider tuple in priority order (ollama, local, rules)."""
    return (ExternalServiceProvider(), LocalHeuristicProvider(), RuleBasedProvider())


__all__ = [
    "Provider",
    "ExternalServiceProvider",
    "LocalHeuristicProvider",
    "RuleBasedProvider",
    "default_providers",
]
__docformat__ = "google"
