"""
llm.
====

Does: Public facade for the Ollama-backed palette suggestion client.
Used by: ExternalServiceProvider.
"""

from .ollama_client import (
    OllamaClient,
    PaletteSuggestion,
    build_palette_prompt,
    parse_palette_reply,
)

__all__ = [
    "OllamaClient",
    "PaletteSuggestion",
    "build_palette_prompt",
    "parse_palette_reply",
]
__docformat__ = "google"
