"""
tokens.
=======

Does: Token format registry, tree <-> document conversion and detection.
Used by: Orchestrator, CLI.
"""

from .convert import convert, convert_document, parse
from .detect import detect_document_format, detect_format
from .formats import (
    DEFAULT_FORMAT,
    TOKEN_FORMATS,
    TokenFormatDescriptor,
    get_token_format,
    list_available_formats,
)
from .tree import TokenLeaf, build_token_tree, iter_leaves

__all__ = [
    "TokenFormatDescriptor",
    "TOKEN_FORMATS",
    "DEFAULT_FORMAT",
    "get_token_format",
    "list_available_formats",
    "TokenLeaf",
    "build_token_tree",
    "iter_leaves",
    "convert",
    "parse",
    "convert_document",
    "detect_format",
    "detect_document_format",
]
__docformat__ = "google"
