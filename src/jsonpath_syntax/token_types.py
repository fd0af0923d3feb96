"""
Token Types for the JSONPath syntax

Shared between the lexer, both parsers and PathSyntaxError to avoid circular
dependencies. Member names match the terminal names in grammar.lark (the
punctuation terminals there carry a leading underscore so Lark filters them
out of the tree).
"""

from enum import Enum


class TT(Enum):
    """Token Types - mirrors grammar terminals. Values are the spellings used in error messages."""

    # Punctuation
    DOLLAR = "'$'"
    DOTDOT = "'..'"
    DOT = "'.'"
    LSQB = "'['"
    RSQB = "']'"
    STAR = "'*'"
    AT = "'@'"

    # Literals
    KEY_LIM = "key"
    UNSIGNED = "unsigned integer"
    STRING_QT = "quoted string"

    # Reserved for filter expressions
    SIGN = "comparison sign"
    NUMBER = "number"

    # Special
    EOF = "end of input"

    @property
    def terminal(self) -> str:
        """Terminal name as spelled in grammar.lark"""
        if self in PUNCTUATION_TYPES:
            return '_' + self.name
        return self.name


PUNCTUATION_TYPES = frozenset({TT.DOLLAR, TT.DOTDOT, TT.DOT, TT.LSQB, TT.RSQB, TT.STAR, TT.AT})

# Literal spelling for each punctuation token
PUNCTUATION = {
    TT.DOLLAR: '$',
    TT.DOTDOT: '..',
    TT.DOT: '.',
    TT.LSQB: '[',
    TT.RSQB: ']',
    TT.STAR: '*',
    TT.AT: '@',
}


def tt_for_terminal(name: str):
    """Map a Lark terminal name back to its token type, or None for terminals we don't track."""
    if name == '$END':
        return TT.EOF
    try:
        return TT[name.lstrip('_')]
    except KeyError:
        return None
