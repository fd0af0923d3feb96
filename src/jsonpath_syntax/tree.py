"""Helpers for walking the Lark Tree/Token nodes both parsers produce."""
from __future__ import annotations
from typing import List, Optional

from lark import Token, Tree
from typing_extensions import TypeAlias, TypeGuard


Node: TypeAlias = Tree | Token


def is_tree(node: Node) -> TypeGuard[Tree]:
    return isinstance(node, Tree)

def is_token(node: Node) -> TypeGuard[Token]:
    return isinstance(node, Token)

def tree_label(node: Node) -> Optional[str]:
    return node.data if is_tree(node) else None

def tree_children(node: Node) -> List[Node]:
    if not is_tree(node):
        return []

    return list(node.children)
