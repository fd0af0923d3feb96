from __future__ import annotations

import re
from typing import Union

from lark import Token, Tree, v_args
from lark.exceptions import VisitError
from lark.visitors import Transformer_NonRecursive

from .tree import tree_label

from .nodes import (
    BareKey,
    ComparisonSign,
    Current,
    Descent,
    Field,
    Index,
    NumberLiteral,
    PathExpression,
    QuotedKey,
    Root,
    Wildcard,
)

_SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

# A surrogate pair written as two \u escapes decodes to one code point
_ESCAPE_RE = re.compile(
    r"\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})"
    r"|\\u([0-9a-fA-F]{4})"
    r"|\\(.)",
    re.DOTALL,
)


def _decode_escape(match: re.Match) -> str:
    high, low, unit, simple = match.groups()

    if high is not None:
        return chr(0x10000 + ((int(high, 16) - 0xD800) << 10) + (int(low, 16) - 0xDC00))
    if unit is not None:
        return chr(int(unit, 16))
    if simple not in _SIMPLE_ESCAPES:
        raise ValueError(f"Invalid escape sequence \\{simple}")
    return _SIMPLE_ESCAPES[simple]


def decode_quoted(literal: str) -> str:
    """Strip the quotes from a STRING_QT literal and decode its escapes"""
    if len(literal) < 2 or literal[0] != "'" or literal[-1] != "'":
        raise ValueError(f"Not a quoted string literal: {literal!r}")
    return _ESCAPE_RE.sub(_decode_escape, literal[1:-1])


# int() refuses decimal strings past sys.get_int_max_str_digits()
_DIGIT_CHUNK = 1000


def unsigned_value(digits: str) -> int:
    """Decimal digits -> int, for any number of digits"""
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"Not an unsigned integer: {digits!r}")

    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


@v_args(inline=True)
class Lower(Transformer_NonRecursive):
    """Parse tree (from either parser) -> typed nodes; walks the tree without recursion"""

    def path(self, *selectors):
        return PathExpression(selectors)

    def root(self):
        return Root()

    def descent(self, key):
        return Descent(key)

    def wildcard(self):
        return Wildcard()

    def current(self, *selectors):
        return Current(PathExpression(selectors))

    def field(self, key):
        return Field(key)

    def index(self, value: Token):
        return Index(unsigned_value(str(value)))

    def bare_key(self, name: Token):
        return BareKey(str(name))

    def quoted_key(self, literal: Token):
        return QuotedKey(decode_quoted(str(literal)))

    def sign(self, tok: Token):
        return ComparisonSign(str(tok))

    def number(self, tok: Token):
        return NumberLiteral(str(tok))


LOWERABLE = ("path", "sign", "number")


def lower(tree: Tree) -> Union[PathExpression, ComparisonSign, NumberLiteral]:
    if tree_label(tree) not in LOWERABLE:
        raise ValueError(f"Cannot lower {tree_label(tree) or type(tree).__name__!r}, expected one of {', '.join(LOWERABLE)}")
    try:
        return Lower().transform(tree)
    except VisitError as err:
        raise err.orig_exc from err
