"""
tree.py
=======

Does: Format-neutral token tree: nested dicts of group name -> subtree,
      with TokenLeaf(value, type) at the leaves.
Used by: Token conversion, orchestrator.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from palette_intelligence.engine.types import EnhancedPalette

__all__ = ["TokenLeaf", "TokenTree", "build_token_tree", "iter_leaves"]
__docformat__ = "google"


@dataclass(frozen=True)
class TokenLeaf:
    value: Any
    type: str = "color"


TokenTree = dict[str, Union["TokenTree", TokenLeaf]]


def build_token_tree(palette: EnhancedPalette) -> TokenTree:
    """Does: {primary: {50: leaf, ...}, secondary, neutral, semantic, [contextual]}."""
    tree: TokenTree = {
        name: {step: TokenLeaf(color.hex) for step, color in scale.items()}
        for name, scale in palette.scales().items()
    }
    tree["semantic"] = {role: TokenLeaf(c.hex) for role, c in palette.semantic.as_dict().items()}
    if palette.contextual:
        tree["contextual"] = {name: TokenLeaf(c.hex) for name, c in palette.contextual.items()}
    return tree


def iter_leaves(tree: TokenTree, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], TokenLeaf]]:
    """Does: Yield (path, leaf) pairs depth-first, in insertion order."""
    for key, node in tree.items():
        path = (*prefix, key)
        if isinstance(node, TokenLeaf):
            yield path, node
        else:
            yield from iter_leaves(node, path)
