"""
Lexer for JSONPath - Recursive Descent Parser

Character-level scanners for the lexical atoms of the path language.

Features:
- Scans on demand: the parser decides which atom to try at each position
- Raw mode inside literals (whitespace is only skipped between tokens)
- Rightmost-failure tracking for error reporting
"""

import string
from typing import Optional, Set

from lark import Token

from .errors import PathSyntaxError
from .token_types import PUNCTUATION, TT

# ============================================================================
# Lexer Implementation
# ============================================================================

class Lexer:
    """
    JSONPath lexer.

    Every scan_* method either consumes one atom and returns its Token, or
    leaves the position untouched, records the failure and returns None.
    Only the rightmost failure offset is kept, together with every token type
    that was tried there.
    """

    # CRLF before LF so the pair is consumed as one unit; a lone CR is not whitespace
    WHITESPACE = ('\r\n', '\n', ' ', '\t')

    KEY_CHARS = frozenset(string.ascii_letters + string.digits + '_-/\\#')
    DIGITS = frozenset(string.digits)
    NONZERO_DIGITS = frozenset('123456789')
    HEX_DIGITS = frozenset(string.hexdigits)

    # Characters that may not appear unescaped inside a quoted string
    STRING_FORBIDDEN = frozenset('"\'\\')
    SIMPLE_ESCAPES = frozenset('"\'\\/bfnrt')

    # Comparison signs in ordered-choice order: longest spelling before its prefix
    SIGNS = (
        '==', '!=', '~=',
        '>=', '>',
        '<=', '<',
        'in', 'nin', 'size',
        'noneOf', 'anyOf', 'subsetOf',
    )

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

        # Rightmost failure
        self.fail_pos = -1
        self.fail_expected: Set[TT] = set()

    # ========================================================================
    # Whitespace and Punctuation
    # ========================================================================

    def skip_whitespace(self) -> bool:
        """Skip whitespace between tokens, return True if any skipped"""
        skipped = False
        while True:
            for ws in self.WHITESPACE:
                if self.source.startswith(ws, self.pos):
                    self.advance(len(ws))
                    skipped = True
                    break
            else:
                return skipped

    def scan_literal(self, token_type: TT) -> Optional[Token]:
        """Scan a punctuation token: $ .. . [ ] * @"""
        text = PUNCTUATION[token_type]
        if not self.source.startswith(text, self.pos):
            self.fail(token_type)
            return None

        start = self.pos
        self.advance(len(text))
        return self.make_token(token_type, text, start)

    def scan_eof(self) -> bool:
        if self.at_end():
            return True
        self.fail(TT.EOF)
        return False

    # ========================================================================
    # Token Scanners
    # ========================================================================

    def scan_key(self) -> Optional[Token]:
        """Scan a bare key: letters, digits and _ - / \\ #"""
        start = self.pos
        while self.peek() in self.KEY_CHARS:
            self.advance()

        if self.pos == start:
            self.fail(TT.KEY_LIM)
            return None
        return self.make_token(TT.KEY_LIM, self.source[start:self.pos], start)

    def scan_unsigned(self) -> Optional[Token]:
        """Scan a non-negative integer without leading zeros"""
        start = self.pos

        if self.peek() == '0':
            self.advance()
        elif self.peek() in self.NONZERO_DIGITS:
            while self.peek() in self.DIGITS:
                self.advance()
        else:
            self.fail(TT.UNSIGNED)
            return None

        return self.make_token(TT.UNSIGNED, self.source[start:self.pos], start)

    def scan_string(self) -> Optional[Token]:
        """
        Scan a single-quoted string: '...'

        The token keeps its quotes and escape sequences as written; lowering
        decodes them.
        """
        start = self.pos
        if self.peek() != "'":
            self.fail(TT.STRING_QT)
            return None
        self.advance()

        while True:
            ch = self.peek()

            if ch == "'":
                self.advance()
                return self.make_token(TT.STRING_QT, self.source[start:self.pos], start)

            if ch == '\\':
                if self.peek(1) in self.SIMPLE_ESCAPES:
                    self.advance(2)
                    continue
                if self.peek(1) == 'u' and all(self.peek(2 + i) in self.HEX_DIGITS for i in range(4)):
                    self.advance(6)
                    continue
                break

            if ch == '' or ch in self.STRING_FORBIDDEN:
                break
            self.advance()

        # Atomic: the whole literal fails at its opening quote
        self.pos = start
        self.fail(TT.STRING_QT)
        return None

    def scan_number(self) -> Optional[Token]:
        """Scan a signed decimal literal with optional fraction and exponent"""
        start = self.pos

        if self.peek() == '-':
            self.advance()

        # Integer part
        if self.peek() == '0':
            self.advance()
        elif self.peek() in self.NONZERO_DIGITS:
            while self.peek() in self.DIGITS:
                self.advance()
        else:
            self.pos = start
            self.fail(TT.NUMBER)
            return None

        # Decimal part
        if self.peek() == '.' and self.peek(1) in self.DIGITS:
            self.advance()
            while self.peek() in self.DIGITS:
                self.advance()

        # Scientific notation, only taken when digits follow
        if self.peek() in ('e', 'E'):
            mark = self.pos
            self.advance()
            if self.peek() in ('+', '-'):
                self.advance()
            if self.peek() in self.DIGITS:
                while self.peek() in self.DIGITS:
                    self.advance()
            else:
                self.pos = mark

        return self.make_token(TT.NUMBER, self.source[start:self.pos], start)

    def scan_sign(self) -> Optional[Token]:
        """Scan a comparison sign"""
        for sign in self.SIGNS:
            if self.source.startswith(sign, self.pos):
                start = self.pos
                self.advance(len(sign))
                return self.make_token(TT.SIGN, sign, start)

        self.fail(TT.SIGN)
        return None

    # ========================================================================
    # Failure Tracking
    # ========================================================================

    def fail(self, token_type: TT) -> None:
        """Record that token_type was expected at the current position"""
        if self.pos > self.fail_pos:
            self.fail_pos = self.pos
            self.fail_expected = {token_type}
        elif self.pos == self.fail_pos:
            self.fail_expected.add(token_type)

    def error(self) -> PathSyntaxError:
        """Build the error for the rightmost failure seen so far"""
        if self.fail_pos < 0:
            return PathSyntaxError(self.source, self.pos)
        return PathSyntaxError(self.source, self.fail_pos, self.fail_expected)

    # ========================================================================
    # Utilities
    # ========================================================================

    def peek(self, offset: int = 0) -> str:
        """Look ahead at character, empty string past the end"""
        idx = self.pos + offset
        if idx < len(self.source):
            return self.source[idx]
        return ''

    def advance(self, n: int = 1) -> str:
        """Consume n characters and return them as a string"""
        if n < 0:
            raise ValueError(f"advance() requires n >= 0, got {n}")
        result = self.source[self.pos:self.pos + n]
        self.pos = min(self.pos + n, len(self.source))
        return result

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def make_token(self, token_type: TT, value: str, start: int) -> Token:
        line = self.source.count('\n', 0, start) + 1
        column = start - (self.source.rfind('\n', 0, start) + 1) + 1
        return Token(
            token_type.terminal,
            value,
            start_pos=start,
            line=line,
            column=column,
            end_pos=self.pos,
        )
