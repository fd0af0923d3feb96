from __future__ import annotations

from typing import FrozenSet, Iterable

from .token_types import TT


def _describe_expected(expected: FrozenSet[TT]) -> str:
    names = sorted(tt.value for tt in expected)
    if not names:
        return "nothing"
    if len(names) == 1:
        return names[0]
    return "one of " + ", ".join(names)


class PathSyntaxError(Exception):
    """
    Malformed or incomplete path expression.

    Reports the rightmost offset the parser reached and the token types that
    would have been accepted there.
    """

    def __init__(self, source: str, offset: int, expected: Iterable[TT] = ()):
        self.source = source
        self.offset = offset
        self.expected: FrozenSet[TT] = frozenset(expected)
        super().__init__(
            f"{self.describe()} at line {self.line}, col {self.column}"
        )

    @property
    def line(self) -> int:
        return self.source.count('\n', 0, self.offset) + 1

    @property
    def column(self) -> int:
        return self.offset - (self.source.rfind('\n', 0, self.offset) + 1) + 1

    @property
    def found(self) -> str:
        """Character at the failure offset, empty at end of input"""
        return self.source[self.offset:self.offset + 1]

    def describe(self) -> str:
        found = repr(self.found) if self.found else "end of input"
        return f"Unexpected {found}, expected {_describe_expected(self.expected)}"
