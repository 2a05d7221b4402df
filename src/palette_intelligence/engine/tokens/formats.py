"""
formats.py
==========

Does: Describe the four supported token document schemas (W3C, Style
      Dictionary, Figma Variables, Tokens Studio) in a read-only registry
      and look them up by name.
Returns: TokenFormatDescriptor instances, help text.
Used by: Token conversion, detection, orchestrator, CLI --list-formats.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from palette_intelligence.engine.errors import UnknownTokenFormat

__all__ = [
    "TokenFormatDescriptor",
    "TOKEN_FORMATS",
    "DEFAULT_FORMAT",
    "get_token_format",
    "list_available_formats",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenFormatDescriptor:
    name: str
    display_name: str
    value_key: str
    type_key: str | None
    root_key: str
    nested: bool
    description: str
    common_use: tuple[str, ...]

    def __str__(self) -> str:
        return self.name


TOKEN_FORMATS: Mapping[str, TokenFormatDescriptor] = MappingProxyType(
    {
        "w3c": TokenFormatDescriptor(
            name="w3c",
            display_name="W3C Design Token Community Group",
            value_key="$value",
            type_key="$type",
            root_key="colors",
            nested=True,
            description="Modern W3C Design Token Community Group specification",
            common_use=("Future-proof projects", "W3C compliance", "Modern toolchains"),
        ),
        "style-dictionary": TokenFormatDescriptor(
            name="style-dictionary",
            display_name="Style Dictionary v3/v4",
            value_key="value",
            type_key=None,
            root_key="color",
            nested=True,
            description="Amazon Style Dictionary format (most common)",
            common_use=("Existing Style Dictionary projects", "Multi-platform apps", "Design systems"),
        ),
        "figma": TokenFormatDescriptor(
            name="figma",
            display_name="Figma Variables",
            value_key="value",
            type_key="type",
            root_key="tokens",
            nested=False,
            description="Figma Variables and design tool integration",
            common_use=("Figma workflows", "Design-to-dev handoff", "Creative teams"),
        ),
        "tokens-studio": TokenFormatDescriptor(
            name="tokens-studio",
            display_name="Tokens Studio (Figma Plugin)",
            value_key="value",
            type_key="type",
            root_key="global",
            nested=True,
            description="Tokens Studio Figma plugin format",
            common_use=("Figma + Tokens Studio", "Design system teams", "Collaborative workflows"),
        ),
    }
)

DEFAULT_FORMAT = TOKEN_FORMATS["w3c"]


def get_token_format(name: str) -> TokenFormatDescriptor:
    """Does: Look up a descriptor by name, case-insensitively.

    Raises:
        UnknownTokenFormat: when the name is not registered.
    """
    key = (name or "").strip().lower()
    try:
        return TOKEN_FORMATS[key]
    except KeyError:
        raise UnknownTokenFormat(name) from None


def list_available_formats() -> str:
    """Does: Human-readable summary of every registered format (CLI help)."""
    blocks = []
    for fmt in TOKEN_FORMATS.values():
        structure = f"{fmt.root_key} → {fmt.value_key}"
        common = ", ".join(fmt.common_use[:2])
        blocks.append(
            f"  {fmt.name:<15} - {fmt.display_name}\n"
            f"    Structure: {structure:<20} | Common use: {common}"
        )
    return "\n\n".join(blocks)
