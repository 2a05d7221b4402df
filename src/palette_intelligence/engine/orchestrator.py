"""
orchestrator.py
===============

Does: Try palette providers in fixed priority order (ollama, local
      heuristics, rules), score the first palette that succeeds and,
      for formatted generation, serialize it into the requested or detected
      token schema.
Returns:
  - generate_palette(request) -> EnhancedPalette (accessibility report attached)
  - generate_formatted_palette(request, output_path_hint) -> FormattedPalette
  - available_providers() -> list[str]
Used by: CLI and library callers.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import warnings
from collections.abc import Sequence

from palette_intelligence.engine.accessibility.analyzer import analyze
from palette_intelligence.engine.color.providers import Provider, default_providers
from palette_intelligence.engine.color.space import normalize_hex
from palette_intelligence.engine.errors import (
    AllProvidersFailed,
    FormatDetectionInconclusive,
    ProviderDiagnostic,
    ProviderUnavailable,
    UnknownTokenFormat,
)
from palette_intelligence.engine.general.utils.observability import NullCollector, ObservabilityCollector
from palette_intelligence.engine.tokens.convert import convert
from palette_intelligence.engine.tokens.detect import detect_format
from palette_intelligence.engine.tokens.formats import DEFAULT_FORMAT, TokenFormatDescriptor, get_token_format
from palette_intelligence.engine.tokens.tree import build_token_tree
from palette_intelligence.engine.types import EnhancedPalette, FormattedPalette, PaletteRequest

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "ai-generated"

__all__ = ["PaletteOrchestrator", "DEFAULT_NAMESPACE"]


class PaletteOrchestrator:
    """Sequential fallback over an immutable provider tuple.

    Outputs of different providers are never merged: the first provider
    that is available *and* generates successfully wins.
    """

    def __init__(
        self,
        providers: Sequence[Provider] | None = None,
        collector: ObservabilityCollector | None = None,
    ):
        self._providers: tuple[Provider, ...] = tuple(providers) if providers is not None else default_providers()
        self._collector: ObservabilityCollector = collector or NullCollector()

    @property
    def providers(self) -> tuple[Provider, ...]:
        return self._providers

    # ── Availability ─────────────────────────────────────────────────────────
    def _probe(self, provider: Provider) -> tuple[bool, Exception | None]:
        with self._collector.timed("provider.availability", provider=provider.name) as attrs:
            try:
                ok = bool(provider.check_availability())
            except Exception as e:
                logger.warning("Availability check for %s raised: %s", provider.name, e)
                attrs["available"] = False
                return False, e
            attrs["available"] = ok
            return ok, None

    def available_providers(self) -> list[str]:
        """Does: Names of providers whose availability check passes right now."""
        return [p.name for p in self._providers if self._probe(p)[0]]

    # ── Generation ───────────────────────────────────────────────────────────
    def generate_palette(self, request: PaletteRequest) -> EnhancedPalette:
        """Does: Run the provider fallback and attach an accessibility report.

        Raises:
            InvalidColorFormat: before any provider runs, for a bad base color.
            AllProvidersFailed: when every provider is unavailable or fails.
        """
        base = normalize_hex(request.base_color)
        if base != request.base_color:
            request = dataclasses.replace(request, base_color=base)

        diagnostics: list[ProviderDiagnostic] = []
        last_error: Exception | None = None

        for provider in self._providers:
            available, probe_error = self._probe(provider)
            if not available:
                reason = f"availability check raised {probe_error!r}" if probe_error else "not available"
                last_error = ProviderUnavailable(f"{provider.name}: {reason}")
                if probe_error is not None:
                    last_error.__cause__ = probe_error
                diagnostics.append(ProviderDiagnostic(provider.name, "availability", reason))
                logger.info("Provider %s unavailable (%s)", provider.name, reason)
                continue

            try:
                with self._collector.timed("provider.generate", provider=provider.name):
                    palette = provider.generate(request)
            except Exception as e:
                logger.warning("Provider %s failed: %s", provider.name, e)
                diagnostics.append(ProviderDiagnostic(provider.name, "generate", f"{type(e).__name__}: {e}"))
                last_error = e
                continue

            if diagnostics:
                logger.info("Palette generated by fallback provider %s", provider.name)
            return self._with_report(palette)

        raise AllProvidersFailed(diagnostics) from last_error

    def _with_report(self, palette: EnhancedPalette) -> EnhancedPalette:
        with self._collector.timed("accessibility.analyze", provider=palette.metadata.provider) as attrs:
            report = analyze(palette.key_colors())
            attrs["score"] = report.score
        if report.degraded:
            logger.warning("Accessibility analysis degraded: %s", ", ".join(report.excluded))
        metadata = dataclasses.replace(palette.metadata, accessibility=report)
        return dataclasses.replace(palette, metadata=metadata)

    # ── Formatted generation ─────────────────────────────────────────────────
    def resolve_format(
        self,
        request: PaletteRequest,
        output_path_hint: str | os.PathLike[str] | None = None,
    ) -> tuple[TokenFormatDescriptor, str]:
        """Does: Pick the output schema and say why.

        Explicit request format wins (unknown names fall back to W3C with a
        warning); otherwise detect from the hint's directory; otherwise W3C
        with a FormatDetectionInconclusive warning.
        """
        if request.format:
            try:
                return get_token_format(request.format), f"requested format {request.format!r}"
            except UnknownTokenFormat as e:
                logger.warning("%s, falling back to %s", e, DEFAULT_FORMAT.name)
                warnings.warn(f"{e}; falling back to {DEFAULT_FORMAT.name}", UserWarning, stacklevel=3)
                return DEFAULT_FORMAT, f"unknown format {request.format!r}, defaulted to {DEFAULT_FORMAT.name}"

        if output_path_hint is not None:
            directory = os.path.dirname(os.fspath(output_path_hint)) or "."
            found = detect_format(directory)
            if found is not None:
                return found, f"detected {found.name} from existing tokens in {directory}"
            msg = f"No known token format detected in {directory}; using {DEFAULT_FORMAT.name}"
        else:
            msg = f"No format requested and no output path to inspect; using {DEFAULT_FORMAT.name}"

        logger.info(msg)
        warnings.warn(msg, FormatDetectionInconclusive, stacklevel=3)
        return DEFAULT_FORMAT, msg

    def generate_formatted_palette(
        self,
        request: PaletteRequest,
        output_path_hint: str | os.PathLike[str] | None = None,
    ) -> FormattedPalette:
        """Does: generate_palette + serialization into a token document."""
        descriptor, why = self.resolve_format(request, output_path_hint)
        palette = self.generate_palette(request)
        namespace = request.namespace or DEFAULT_NAMESPACE
        document = convert(
            build_token_tree(palette),
            descriptor,
            namespace,
            description=palette.metadata.reasoning,
        )
        reasoning = f"{palette.metadata.reasoning}. Output: {descriptor.display_name} ({why})"
        return FormattedPalette(palette=palette, descriptor=descriptor, document=document, reasoning=reasoning)
