"""
Lark front end for grammar.lark.

Builds the same trees as parser_rd and translates Lark's exceptions into
PathSyntaxError so callers never see a Lark-specific error type.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Optional

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .errors import PathSyntaxError
from .token_types import tt_for_terminal

PARSER_KINDS = ("lalr", "earley")
START_SYMBOLS = ["path", "sign", "number"]


def grammar_text() -> str:
    return resources.files(__package__).joinpath("grammar.lark").read_text(encoding="utf-8")


@lru_cache(maxsize=None)
def build_parser(parser_kind: str = "lalr") -> Lark:
    if parser_kind not in PARSER_KINDS:
        raise ValueError(f"Unknown parser kind {parser_kind!r}, expected one of {', '.join(PARSER_KINDS)}")

    if parser_kind == "lalr":
        return Lark(
            grammar_text(),
            parser="lalr",
            lexer="contextual",
            start=START_SYMBOLS,
            maybe_placeholders=False,
            propagate_positions=True,
        )
    return Lark(
        grammar_text(),
        parser="earley",
        lexer="dynamic",
        start=START_SYMBOLS,
        maybe_placeholders=False,
        propagate_positions=True,
    )


def _error_offset(source: str, err: UnexpectedInput) -> int:
    if isinstance(err, UnexpectedToken) and err.token.type == "$END":
        return len(source)
    if isinstance(err, UnexpectedEOF):
        return len(source)
    pos: Optional[int] = getattr(err, "pos_in_stream", None)
    if pos is None or pos < 0:
        return len(source)
    return pos


def _error_expected(err: UnexpectedInput) -> set:
    if isinstance(err, UnexpectedCharacters):
        names = err.allowed or set()
    else:
        names = getattr(err, "expected", None) or set()

    expected = set()
    for name in names:
        tt = tt_for_terminal(name)
        if tt is not None:
            expected.add(tt)
    return expected


def parse_source_lark(source: str, parser_kind: str = "lalr", start: str = "path") -> Tree:
    """Parse with Lark, re-raising any failure as PathSyntaxError"""
    parser = build_parser(parser_kind)
    try:
        return parser.parse(source, start=start)
    except UnexpectedInput as err:
        raise PathSyntaxError(source, _error_offset(source, err), _error_expected(err)) from err
