"""Canonical text for parsed paths; parse_path(format_path(p)) == p."""

from __future__ import annotations

from typing import List

from .lexer_rd import Lexer
from .nodes import (
    BareKey,
    Current,
    Descent,
    Field,
    Index,
    Key,
    PathExpression,
    QuotedKey,
    Root,
    Selector,
    Wildcard,
)

_ESCAPES = {
    '\\': '\\\\',
    "'": "\\'",
    '"': '\\"',
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}


def quote_key(name: str) -> str:
    parts: List[str] = ["'"]

    for ch in name:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)

    parts.append("'")
    return "".join(parts)


_DIGIT_CHUNK = 1000


def format_unsigned(value: int) -> str:
    """str(value) without the interpreter's int-string digit limit"""
    chunks: List[str] = []
    base = 10 ** _DIGIT_CHUNK
    while value >= base:
        value, low = divmod(value, base)
        chunks.append(f"{low:0{_DIGIT_CHUNK}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _bare_name(key: BareKey) -> str:
    if not key.name or any(ch not in Lexer.KEY_CHARS for ch in key.name):
        raise ValueError(f"Not a valid bare key: {key.name!r}")
    return key.name


def format_key(key: Key, prefix: str) -> str:
    """Render a key after its prefix: '.' for fields, '..' for descent"""
    match key:
        case BareKey():
            return prefix + _bare_name(key)
        case QuotedKey(name=name):
            # Field drops the dot before brackets, descent keeps '..'
            lead = "" if prefix == "." else prefix
            return f"{lead}[{quote_key(name)}]"
    raise TypeError(f"Unknown key: {key!r}")


def format_selector(selector: Selector) -> str:
    match selector:
        case Root():
            return "$"
        case Descent(key=key):
            return format_key(key, "..")
        case Wildcard():
            return "[*]"
        case Current(path=path):
            return "@" + format_path(path)
        case Field(key=key):
            return format_key(key, ".")
        case Index(value=value):
            return f"[{format_unsigned(value)}]"
    raise TypeError(f"Unknown selector: {selector!r}")


def format_path(path: PathExpression) -> str:
    parts: List[str] = []
    pending = [iter(path)]

    # Nested current paths are walked with a stack, not recursion
    while pending:
        for selector in pending[-1]:
            if isinstance(selector, Current):
                parts.append("@")
                pending.append(iter(selector.path))
                break
            parts.append(format_selector(selector))
        else:
            pending.pop()

    return "".join(parts)
