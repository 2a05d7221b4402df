"""
convert.py
==========

Does: Serialize a token tree into one of the registered document schemas
      and parse such a document back into a tree.
      Nested formats put the namespace in as one extra group under the
      root; the flat format (Figma) joins path segments with '/', namespace
      first, and refuses segments that already contain '/'.
Returns: JSON-ready dicts (convert), token trees (parse).
Used by: Orchestrator (formatted generation), CLI.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from palette_intelligence.engine.tokens.formats import TokenFormatDescriptor, get_token_format
from palette_intelligence.engine.tokens.tree import TokenLeaf, TokenTree, iter_leaves

__all__ = ["PATH_SEPARATOR", "convert", "parse", "convert_document"]
__docformat__ = "google"

PATH_SEPARATOR = "/"


def _descriptor(fmt: TokenFormatDescriptor | str) -> TokenFormatDescriptor:
    return fmt if isinstance(fmt, TokenFormatDescriptor) else get_token_format(fmt)


def _check_segment(segment: str, descriptor: TokenFormatDescriptor) -> None:
    if not segment:
        raise ValueError("Token path segments must be non-empty")
    if not descriptor.nested and PATH_SEPARATOR in segment:
        raise ValueError(f"Token path segment {segment!r} contains {PATH_SEPARATOR!r}")
    if descriptor.nested and (
        segment.startswith("$") or segment in (descriptor.value_key, descriptor.type_key)
    ):
        raise ValueError(f"Token path segment {segment!r} clashes with a reserved key of {descriptor.name}")


def _leaf_document(leaf: TokenLeaf, descriptor: TokenFormatDescriptor) -> dict[str, Any]:
    out: dict[str, Any] = {descriptor.value_key: leaf.value}
    if descriptor.type_key:
        out[descriptor.type_key] = leaf.type
    return out


def _nested(tree: TokenTree, descriptor: TokenFormatDescriptor) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, node in tree.items():
        key = str(key)
        _check_segment(key, descriptor)
        out[key] = _leaf_document(node, descriptor) if isinstance(node, TokenLeaf) else _nested(node, descriptor)
    return out


def convert(
    tree: TokenTree,
    descriptor: TokenFormatDescriptor | str,
    namespace: str | None = None,
    *,
    description: str | None = None,
) -> dict[str, Any]:
    """Does: Serialize a token tree into the given document schema.

    Args:
        tree: Nested groups with TokenLeaf leaves.
        descriptor: Target format (descriptor or registered name).
        namespace: Optional top-level group / flat-key prefix.
        description: Only emitted for W3C, as the root group's `$description`.

    Returns:
        `{root_key: {...}}` ready for json.dumps.

    Raises:
        ValueError: when a path segment would make two tokens collide.
    """
    fmt = _descriptor(descriptor)
    if namespace is not None:
        _check_segment(namespace, fmt)

    if fmt.nested:
        body = _nested(tree, fmt)
        root: dict[str, Any] = {namespace: body} if namespace else body
    else:
        root = {}
        for path, leaf in iter_leaves(tree):
            for segment in path:
                _check_segment(str(segment), fmt)
            full = (namespace, *path) if namespace else path
            root[PATH_SEPARATOR.join(str(s) for s in full)] = _leaf_document(leaf, fmt)

    if description and fmt.name == "w3c":
        root = {"$description": description, **root}
    return {fmt.root_key: root}


def _is_leaf(node: Mapping[str, Any], fmt: TokenFormatDescriptor) -> bool:
    return fmt.value_key in node


def _parse_leaf(node: Mapping[str, Any], fmt: TokenFormatDescriptor) -> TokenLeaf:
    kind = node.get(fmt.type_key, "color") if fmt.type_key else "color"
    return TokenLeaf(node[fmt.value_key], kind)


def _parse_nested(node: Mapping[str, Any], fmt: TokenFormatDescriptor) -> TokenTree:
    out: TokenTree = {}
    for key, child in node.items():
        if key.startswith("$") or not isinstance(child, Mapping):
            continue  # group metadata ($description, $type, ...)
        out[key] = _parse_leaf(child, fmt) if _is_leaf(child, fmt) else _parse_nested(child, fmt)
    return out


def parse(
    document: Mapping[str, Any],
    descriptor: TokenFormatDescriptor | str,
    namespace: str | None = None,
) -> TokenTree:
    """Does: Inverse of `convert`: read a document back into a token tree.

    Raises:
        ValueError: when the root key or namespace group is missing.
    """
    fmt = _descriptor(descriptor)
    root = document.get(fmt.root_key) if isinstance(document, Mapping) else None
    if not isinstance(root, Mapping):
        raise ValueError(f"Document has no {fmt.root_key!r} object for format {fmt.name}")

    if fmt.nested:
        if namespace:
            if not isinstance(root.get(namespace), Mapping):
                raise ValueError(f"Namespace {namespace!r} not found under {fmt.root_key!r}")
            root = root[namespace]
        return _parse_nested(root, fmt)

    tree: TokenTree = {}
    for key, node in root.items():
        if not isinstance(node, Mapping) or not _is_leaf(node, fmt):
            continue
        path = key.split(PATH_SEPARATOR)
        if namespace:
            if path[0] != namespace:
                continue
            path = path[1:]
        if not path:
            continue
        cursor = tree
        for segment in path[:-1]:
            nxt = cursor.setdefault(segment, {})
            if isinstance(nxt, TokenLeaf):
                raise ValueError(f"Token {key!r} nests under a leaf")
            cursor = nxt
        cursor[path[-1]] = _parse_leaf(node, fmt)
    return tree


def convert_document(
    document: Mapping[str, Any],
    source: TokenFormatDescriptor | str,
    target: TokenFormatDescriptor | str,
    namespace: str | None = None,
) -> dict[str, Any]:
    """Does: Re-encode a document from one schema to another, same namespace."""
    return convert(parse(document, source, namespace), target, namespace)
