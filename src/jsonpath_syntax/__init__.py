"""Syntax and parser for JSONPath-style path expressions."""

from .api import (
    is_valid_path,
    parse_comparison_sign,
    parse_number_literal,
    parse_path,
    parse_tree,
)
from .errors import PathSyntaxError
from .lower import decode_quoted, lower
from .nodes import (
    BareKey,
    ComparisonSign,
    Current,
    Descent,
    Field,
    Index,
    Key,
    NumberLiteral,
    PathExpression,
    QuotedKey,
    Root,
    Selector,
    Wildcard,
)
from .parser_lark import parse_source_lark
from .parser_rd import parse_source
from .render import format_path, quote_key
from .token_types import TT

__version__ = '0.1.0'
