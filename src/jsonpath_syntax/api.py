from __future__ import annotations

from typing import Optional

from lark import Tree

from .config import resolve_backend
from .errors import PathSyntaxError
from .lower import lower
from .nodes import ComparisonSign, NumberLiteral, PathExpression
from .parser_lark import parse_source_lark
from .parser_rd import parse_number_source, parse_sign_source, parse_source


def parse_tree(source: str, backend: Optional[str] = None) -> Tree:
    """Parse tree from the selected backend; every backend builds the same shape."""
    backend = resolve_backend(backend)
    if backend == "rd":
        return parse_source(source)
    return parse_source_lark(source, parser_kind=backend)


def parse_path(source: str, backend: Optional[str] = None) -> PathExpression:
    """
    Parse a path expression such as ``$.store.book[0].title``.

    Raises PathSyntaxError when the text is not a complete path.
    """
    return lower(parse_tree(source, backend))


def is_valid_path(source: str, backend: Optional[str] = None) -> bool:
    """True exactly when parse_path would succeed"""
    try:
        parse_path(source, backend)
    except PathSyntaxError:
        return False
    return True


def parse_comparison_sign(source: str) -> ComparisonSign:
    """Reserved for filter expressions: parse a single comparison sign."""
    return lower(parse_sign_source(source))


def parse_number_literal(source: str) -> NumberLiteral:
    """Reserved for filter expressions: parse a single number literal."""
    return lower(parse_number_source(source))
