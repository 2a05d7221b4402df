"""
ollama_client.py.
=================

Does: Build the palette prompt from style/context guidance, call a local
      Ollama server (/api/tags probe, /api/generate in JSON mode) and parse
      the reply into seed colors (secondary, neutral, optional semantic).
Returns: PaletteSuggestion on success; raises ExternalServiceError otherwise.
Used by: ExternalServiceProvider ("ollama").
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import json
import logging
import os
import random
import time
from dataclasses import dataclass, field
from typing import Any

import requests  # type: ignore[import-untyped]

from palette_intelligence.engine.color.constants import SEMANTIC_ROLES
from palette_intelligence.engine.color.space import normalize_hex
from palette_intelligence.engine.errors import ExternalServiceError, InvalidColorFormat
from palette_intelligence.engine.general.utils.load_config import load_config

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

# ── Config (env-overridable) ─────────────────────────────────────────────────
OLLAMA_HOST = os.getenv("OLLAMA_HOST", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("PALETTE_OLLAMA_MODEL", "llama3.2")
OLLAMA_TIMEOUT = float(os.getenv("PALETTE_OLLAMA_TIMEOUT", "30"))  # seconds
OLLAMA_PROBE_TIMEOUT = float(os.getenv("PALETTE_OLLAMA_PROBE_TIMEOUT", "2"))  # seconds

# Backoff config
BACKOFF_BASE = 0.5  # base seconds added each attempt
BACKOFF_MIN = 1.2  # min multiplier
BACKOFF_SPREAD = 0.6  # random spread added to multiplier

GUIDANCE_FILE = "prompt_guidance"

# Single session for connection reuse
_session = requests.Session()

__all__ = [
    "PaletteSuggestion",
    "OllamaClient",
    "build_palette_prompt",
    "parse_palette_reply",
]


@dataclass(frozen=True)
class PaletteSuggestion:
    """Seed colors proposed by the model; scales are derived locally."""

    secondary: str
    neutral: str
    semantic: dict[str, str] = field(default_factory=dict)
    reasoning: str = ""


# ── Prompt construction ──────────────────────────────────────────────────────
def _guidance() -> dict[str, dict[str, str]]:
    return load_config(GUIDANCE_FILE, mode="validated_dict")


def build_palette_prompt(
    base_color: str,
    style: str,
    context: Any = None,
    accessibility: bool = True,
) -> str:
    """Does: Build an instruction asking for seed colors as strict JSON.
    Args: base_color: '#rrggbb'; style: palette style; context: DesignContext|None;
          accessibility: ask for WCAG AA friendly colors.
    Returns: Prompt string.
    """
    guidance = _guidance()
    lines: list[str] = []

    if context is not None:
        ctx_lines = []
        for dimension, label in (("industry", "Industry"), ("audience", "Audience"), ("emotional", "Emotional tone")):
            value = getattr(context, dimension, None)
            hint = guidance.get(dimension, {}).get(value) if value else None
            if hint:
                ctx_lines.append(f"{label}: {value} - {hint}")
        if ctx_lines:
            lines.append("Context considerations:")
            lines.extend(ctx_lines)
            lines.append("")

    style_hint = guidance.get("style", {}).get(style) or guidance.get("style", {}).get("professional", "")
    goal = "meet WCAG AA contrast standards" if accessibility else "be visually appealing"
    lines.extend(
        [
            f"Generate a {style} color palette based on the base color {base_color}.",
            style_hint,
            "",
            "Respond ONLY with a JSON object in this exact shape:",
            '{"secondary": "#rrggbb", "neutral": "#rrggbb", '
            '"semantic": {"success": "#rrggbb", "warning": "#rrggbb", "error": "#rrggbb", "info": "#rrggbb"}, '
            '"reasoning": "one sentence"}',
            f"All hex codes must be valid, harmonious with the base color, and {goal}.",
        ]
    )
    return "\n".join(lines)


# ── Reply parsing ────────────────────────────────────────────────────────────
def parse_palette_reply(content: str) -> PaletteSuggestion:
    """Does: Parse the model's JSON reply into a PaletteSuggestion.
    Args: content: raw 'response' string from /api/generate.
    Returns: PaletteSuggestion with normalized hex values.
    Raises: ExternalServiceError on malformed JSON, missing keys or bad colors.
    """
    try:
        data = json.loads((content or "").strip())
    except json.JSONDecodeError as e:
        raise ExternalServiceError(f"Ollama reply is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ExternalServiceError(f"Ollama reply must be a JSON object, got {type(data).__name__}")

    try:
        secondary = normalize_hex(data["secondary"])
        neutral = normalize_hex(data["neutral"])
    except KeyError as e:
        raise ExternalServiceError(f"Ollama reply missing key {e.args[0]!r}") from e
    except InvalidColorFormat as e:
        raise ExternalServiceError(f"Ollama reply has a bad color: {e}") from e

    semantic: dict[str, str] = {}
    raw_semantic = data.get("semantic") or {}
    if isinstance(raw_semantic, dict):
        for role in SEMANTIC_ROLES:
            if role not in raw_semantic:
                continue
            try:
                semantic[role] = normalize_hex(raw_semantic[role])
            except InvalidColorFormat:
                logger.warning("[ollama] ignoring bad %s color %r", role, raw_semantic[role])

    return PaletteSuggestion(
        secondary=secondary,
        neutral=neutral,
        semantic=semantic,
        reasoning=str(data.get("reasoning") or "").strip(),
    )


# ── Client ───────────────────────────────────────────────────────────────────
def _backoff_sleep(attempt: int) -> None:
    """Does: Sleep with exponential backoff + jitter based on attempt index."""
    sleep_s = (BACKOFF_BASE + attempt) * (BACKOFF_MIN + random.random() * BACKOFF_SPREAD)
    time.sleep(sleep_s)


class OllamaClient:
    """Does: Thin HTTP client for a local Ollama server.
    Args: host: base URL; model: model tag; timeout / probe_timeout: seconds.
    """

    def __init__(
        self,
        host: str = OLLAMA_HOST,
        model: str = OLLAMA_MODEL,
        timeout: float = OLLAMA_TIMEOUT,
        probe_timeout: float = OLLAMA_PROBE_TIMEOUT,
        retries: int = 1,
    ):
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.probe_timeout = probe_timeout
        self.retries = retries

    def is_available(self) -> bool:
        """Does: Probe GET /api/tags within probe_timeout.
        Returns: True on HTTP 200, False on any error or timeout.
        """
        try:
            resp = _session.get(f"{self.host}/api/tags", timeout=self.probe_timeout)
        except requests.RequestException as e:
            logger.debug("[ollama] probe failed: %s", e)
            return False
        if resp.status_code != 200:
            logger.debug("[ollama] probe status=%s", resp.status_code)
            return False
        return True

    def generate(self, prompt: str) -> str:
        """Does: POST /api/generate (format=json, stream=false) with retries.
        Returns: The model's raw 'response' string.
        Raises: ExternalServiceError after the last failed attempt.
        """
        payload = {"model": self.model, "prompt": prompt, "format": "json", "stream": False}
        last_error: Exception | None = None

        for attempt in range(self.retries + 1):
            try:
                resp = _session.post(f"{self.host}/api/generate", json=payload, timeout=self.timeout)
            except requests.RequestException as e:
                logger.warning("[ollama] request failed on attempt %d: %s", attempt + 1, e)
                last_error = e
            else:
                if resp.status_code == 200:
                    try:
                        body = resp.json()
                    except ValueError as e:
                        raise ExternalServiceError(f"Ollama returned a non-JSON body: {e}") from e
                    if not isinstance(body, dict):
                        raise ExternalServiceError(
                            f"Ollama body must be a JSON object, got {type(body).__name__}"
                        )
                    content = body.get("response", "")
                    if not content:
                        raise ExternalServiceError("Ollama returned an empty response")
                    return content
                logger.warning("[ollama] status %s: %s", resp.status_code, resp.text)
                last_error = ExternalServiceError(f"Ollama returned HTTP {resp.status_code}")
                if resp.status_code < 500 and resp.status_code != 429:
                    break

            if attempt < self.retries:
                _backoff_sleep(attempt)

        raise ExternalServiceError(f"Ollama generation failed: {last_error}") from last_error

    def suggest_palette(
        self,
        base_color: str,
        style: str,
        context: Any = None,
        accessibility: bool = True,
    ) -> PaletteSuggestion:
        prompt = build_palette_prompt(base_color, style, context, accessibility)
        return parse_palette_reply(self.generate(prompt))
