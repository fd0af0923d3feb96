"""
Recursive Descent Parser for JSONPath

This serves as:
1. The default parser behind parse_path()
2. An ordered-choice (PEG) reading of grammar.lark
3. Documentation of how overlapping prefixes are disambiguated

Structure:
- Lexer: character-level scans, driven by the parser
- Parser: ordered choice over the six selector kinds
- AST: same tree structure as the Lark parser output
"""

from typing import Callable, List, Optional

from lark import Token, Tree

from .errors import PathSyntaxError
from .lexer_rd import Lexer
from .token_types import TT

# ============================================================================
# Parser
# ============================================================================

class Parser:
    """
    Recursive descent parser for path expressions.

    Selector alternatives in precedence order (first match wins):
    1. root      $
    2. descent   .. key
    3. wildcard  .? [*]  |  .*
    4. current   @ chain (folded by parse_chain, no recursion)
    5. field     .? ['quoted']  |  .key
    6. index     [unsigned]

    A failed alternative restores the position before the next one is tried.
    Once an alternative succeeds it is never revisited.
    """

    def __init__(self, source: str):
        self.lexer = Lexer(source)

    # ========================================================================
    # Token Navigation
    # ========================================================================

    def mark(self) -> int:
        return self.lexer.pos

    def reset(self, pos: int) -> None:
        self.lexer.pos = pos

    def match(self, token_type: TT) -> Optional[Token]:
        """Skip whitespace and consume a punctuation token if present"""
        start = self.mark()
        self.lexer.skip_whitespace()
        tok = self.lexer.scan_literal(token_type)
        if tok is None:
            self.reset(start)
        return tok

    def scan(self, scanner: Callable[[], Optional[Token]]) -> Optional[Token]:
        """Skip whitespace and run an atomic literal scanner"""
        start = self.mark()
        self.lexer.skip_whitespace()
        tok = scanner()
        if tok is None:
            self.reset(start)
        return tok

    def at_end(self) -> bool:
        start = self.mark()
        self.lexer.skip_whitespace()
        if self.lexer.scan_eof():
            return True
        self.reset(start)
        return False

    def attempt(self, rule: Callable[[], Optional[Tree]]) -> Optional[Tree]:
        """Run one alternative; rewind on failure"""
        start = self.mark()
        node = rule()
        if node is None:
            self.reset(start)
        return node

    # ========================================================================
    # Top-Level Parsing
    # ========================================================================

    def parse(self) -> Tree:
        """Parse an entire path: chain anchored to end of input"""
        selectors = self.parse_chain()
        if selectors is None or not self.at_end():
            raise self.lexer.error()
        return Tree('path', selectors)

    def parse_chain(self) -> Optional[List[Tree]]:
        """
        One or more selectors, left to right.

        Each @ opens a nested run that takes the rest of the chain, so the
        runs are collected flat and folded into current trees innermost first.
        Nesting depth is bounded by input length only.
        """
        runs: List[List[Tree]] = [[]]
        at_marks: List[int] = []

        while True:
            node = self.parse_selector()
            if node is not None:
                runs[-1].append(node)
                continue

            start = self.mark()
            if self.match(TT.AT):
                at_marks.append(start)
                runs.append([])
                continue
            break

        while len(runs) > 1:
            selectors = runs.pop()
            start = at_marks.pop()
            if selectors:
                runs[-1].append(Tree('current', selectors))
            else:
                # @ with nothing after it is not a selector
                self.reset(start)

        return runs[0] or None

    def parse_selector(self) -> Optional[Tree]:
        """Every selector except current, which parse_chain handles"""
        for alternative in (
            self.parse_root,
            self.parse_descent,
            self.parse_wildcard,
            self.parse_field,
            self.parse_index,
        ):
            node = self.attempt(alternative)
            if node is not None:
                return node
        return None

    # ========================================================================
    # Selectors
    # ========================================================================

    def parse_root(self) -> Optional[Tree]:
        if self.match(TT.DOLLAR):
            return Tree('root', [])
        return None

    def parse_descent(self) -> Optional[Tree]:
        """.. followed by a bare or bracket-quoted key"""
        if not self.match(TT.DOTDOT):
            return None

        key = self.attempt(self.parse_bare_key)
        if key is None:
            key = self.attempt(self.parse_bracket_key)
        if key is None:
            return None
        return Tree('descent', [key])

    def parse_wildcard(self) -> Optional[Tree]:
        """.?[*] or .*"""
        start = self.mark()

        self.match(TT.DOT)
        if self.match(TT.LSQB) and self.match(TT.STAR) and self.match(TT.RSQB):
            return Tree('wildcard', [])
        self.reset(start)

        if self.match(TT.DOT) and self.match(TT.STAR):
            return Tree('wildcard', [])
        return None

    def parse_field(self) -> Optional[Tree]:
        """.?['quoted'] or .key"""
        start = self.mark()

        self.match(TT.DOT)
        key = self.attempt(self.parse_bracket_key)
        if key is not None:
            return Tree('field', [key])
        self.reset(start)

        if self.match(TT.DOT):
            key = self.attempt(self.parse_bare_key)
            if key is not None:
                return Tree('field', [key])
        return None

    def parse_index(self) -> Optional[Tree]:
        """[unsigned]"""
        if not self.match(TT.LSQB):
            return None

        value = self.scan(self.lexer.scan_unsigned)
        if value is None or not self.match(TT.RSQB):
            return None
        return Tree('index', [value])

    # ========================================================================
    # Keys
    # ========================================================================

    def parse_bare_key(self) -> Optional[Tree]:
        tok = self.scan(self.lexer.scan_key)
        if tok is None:
            return None
        return Tree('bare_key', [tok])

    def parse_bracket_key(self) -> Optional[Tree]:
        """['quoted']"""
        if not self.match(TT.LSQB):
            return None

        tok = self.scan(self.lexer.scan_string)
        if tok is None or not self.match(TT.RSQB):
            return None
        return Tree('quoted_key', [tok])

    # ========================================================================
    # Reserved tokens (filter expressions)
    # ========================================================================

    def parse_sign(self) -> Optional[Tree]:
        """Comparison sign; not reachable from parse()"""
        tok = self.scan(self.lexer.scan_sign)
        if tok is None:
            return None
        return Tree('sign', [tok])

    def parse_number(self) -> Optional[Tree]:
        """Signed number literal; not reachable from parse()"""
        tok = self.scan(self.lexer.scan_number)
        if tok is None:
            return None
        return Tree('number', [tok])

    def parse_anchored(self, rule: Callable[[], Optional[Tree]]) -> Tree:
        """Run a single rule against the whole input"""
        node = rule()
        if node is None or not self.at_end():
            raise self.lexer.error()
        return node


# ============================================================================
# Entry points
# ============================================================================

def parse_source(source: str) -> Tree:
    """
    Parse a path expression into a tree.

    Returns the same Tree structure as the Lark grammar; raises
    PathSyntaxError at the rightmost failure.
    """
    return Parser(source).parse()


def parse_sign_source(source: str) -> Tree:
    parser = Parser(source)
    return parser.parse_anchored(parser.parse_sign)


def parse_number_source(source: str) -> Tree:
    parser = Parser(source)
    return parser.parse_anchored(parser.parse_number)


if __name__ == '__main__':
    import sys

    source = sys.argv[1] if len(sys.argv) > 1 else sys.stdin.read()

    try:
        print(parse_source(source).pretty())
    except PathSyntaxError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)
