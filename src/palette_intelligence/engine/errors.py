"""
errors.py
=========

Does: Define the exception hierarchy shared by the generation pipeline
      (color parsing, providers, orchestration, token formats, analysis).
Returns: Exception classes only.
Used by: Color space engine, providers, orchestrator, token adapter, CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "PaletteError",
    "InvalidColorFormat",
    "ProviderUnavailable",
    "ExternalServiceError",
    "ProviderDiagnostic",
    "AllProvidersFailed",
    "UnknownTokenFormat",
    "FormatDetectionInconclusive",
    "AccessibilityAnalysisDegraded",
]
__docformat__ = "google"


class PaletteError(Exception):
    """Base class for every error raised by the palette pipeline."""


class InvalidColorFormat(PaletteError, ValueError):
    """Raise when a color string is not a #rgb / #rrggbb hex value."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid color format: {value!r} (expected #rgb or #rrggbb)")


class ProviderUnavailable(PaletteError):
    """Raise when a provider's availability probe fails or times out."""


class ExternalServiceError(PaletteError):
    """Raise when the external generation service fails or replies badly."""


@dataclass(frozen=True)
class ProviderDiagnostic:
    """One provider attempt as seen by the orchestrator."""

    provider: str
    stage: str  # "availability" | "generate"
    message: str

    def __str__(self) -> str:
        return f"{self.provider} [{self.stage}]: {self.message}"


class AllProvidersFailed(PaletteError):
    """Raise when no provider in the priority list produced a palette."""

    def __init__(self, diagnostics: tuple[ProviderDiagnostic, ...] | list[ProviderDiagnostic]):
        self.diagnostics = tuple(diagnostics)
        detail = "; ".join(str(d) for d in self.diagnostics) or "no providers configured"
        super().__init__(f"All palette providers failed: {detail}")


class UnknownTokenFormat(PaletteError, KeyError):
    """Raise when a token format name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown token format: {self.name!r}"


class FormatDetectionInconclusive(PaletteError, UserWarning):
    """Warn when no token file in a directory matches a known schema."""


class AccessibilityAnalysisDegraded(PaletteError, UserWarning):
    """Warn when some colors had to be excluded from the analysis."""
