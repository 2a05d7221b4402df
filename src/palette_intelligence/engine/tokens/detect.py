"""
detect.py
=========

Does: Guess which token schema a project already uses by scanning the
      *.json files of one directory (not recursive, sorted by name).
      Per file the signatures are tried W3C -> Style Dictionary ->
      Tokens Studio -> Figma; the first file that matches decides.
Returns: TokenFormatDescriptor or None (missing/unreadable/empty dir, no match).
Used by: Orchestrator (formatted generation without an explicit format).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from palette_intelligence.engine.general.utils.log import debug
from palette_intelligence.engine.tokens.formats import TOKEN_FORMATS, TokenFormatDescriptor

__all__ = ["detect_format", "detect_document_format"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


def _has_deep_key(obj: Any, key: str) -> bool:
    if isinstance(obj, dict):
        if key in obj:
            return True
        return any(_has_deep_key(v, key) for v in obj.values())
    if isinstance(obj, list):
        return any(_has_deep_key(v, key) for v in obj)
    return False


def _is_w3c(content: dict[str, Any]) -> bool:
    return "colors" in content and any(_has_deep_key(content, k) for k in ("$value", "$type", "$description"))


def _is_style_dictionary(content: dict[str, Any]) -> bool:
    return (
        "color" in content
        and _has_deep_key(content, "value")
        and not _has_deep_key(content, "$value")
        and not _has_deep_key(content, "type")
    )


def detect_document_format(content: Any) -> TokenFormatDescriptor | None:
    """Does: Match one parsed JSON document against the known signatures."""
    if not isinstance(content, dict):
        return None
    if _is_w3c(content):
        return TOKEN_FORMATS["w3c"]
    if _is_style_dictionary(content):
        return TOKEN_FORMATS["style-dictionary"]
    if "global" in content:
        return TOKEN_FORMATS["tokens-studio"]
    if "tokens" in content:
        return TOKEN_FORMATS["figma"]
    return None


def detect_format(directory: str | os.PathLike[str]) -> TokenFormatDescriptor | None:
    """Does: Detect the schema of existing token files in `directory`.

    Invalid or unreadable JSON files are skipped. When several files match
    different schemas, the lexicographically first matching file wins.
    """
    base = Path(directory)
    try:
        candidates = sorted(p for p in base.iterdir() if p.suffix == ".json" and p.is_file())
    except OSError as e:
        logger.debug("Token detection: cannot list %s (%s)", base, e)
        return None

    for path in candidates:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            debug(f"skip {path.name}: {e}", topic="detect")
            continue
        found = detect_document_format(content)
        if found is not None:
            debug(f"{path.name} -> {found.name}", topic="detect")
            return found

    debug(f"no token schema recognised in {base}", topic="detect")
    return None
