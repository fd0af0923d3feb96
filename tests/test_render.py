from __future__ import annotations

import pytest

from jsonpath_syntax import (
    BareKey,
    Current,
    Descent,
    Field,
    Index,
    PathExpression,
    QuotedKey,
    Root,
    Wildcard,
    format_path,
    parse_path,
    quote_key,
)

ROUND_TRIP_SOURCES = [
    "$",
    "$.store.book[0].title",
    "$..price",
    "$..['price tag']",
    "$.*",
    "$.[*]",
    "$.items['a-b_c#']",
    "@.x",
    "$@.a[1]@..b",
    "@@@$",
    "$.123",
    "$.a/b\\c#d",
    " $ . a [ 7 ] ",
    r"$['it\'s']",
    r"$['\"\\\/\b\f\n\r\t']",
    r"$['\u0001\u001f\u007f']",
    r"$['caf\u00e9 \uD83D\uDE00']",
    "$['żółw']",
    "$['']",
    "..a[2]",
]

CANONICAL_CASES = [
    ("$.*", "$[*]"),
    ("$.[*]", "$[*]"),
    ("$ .a [ 0 ]", "$.a[0]"),
    ("$.['a']", "$['a']"),
    (r"$['\/']", "$['/']"),
    (r"$['\u0041']", "$['A']"),
    (r"$['\u000a']", r"$['\n']"),
    (r"$['\u0000']", r"$['\u0000']"),
    ("$..['k']", "$..['k']"),
    ("@ .x", "@.x"),
]


@pytest.mark.parametrize("source", ROUND_TRIP_SOURCES)
def test_round_trip(source: str) -> None:
    path = parse_path(source)
    assert parse_path(format_path(path)) == path


@pytest.mark.parametrize("source, canonical", CANONICAL_CASES)
def test_canonical_form(source: str, canonical: str) -> None:
    assert format_path(parse_path(source)) == canonical


def test_str_is_canonical() -> None:
    assert str(parse_path("$ . store [ 0 ]")) == "$.store[0]"


def test_render_built_path() -> None:
    path = PathExpression(
        [
            Root(),
            Descent(BareKey("a")),
            Field(QuotedKey("b c")),
            Wildcard(),
            Index(3),
            Current(PathExpression([Field(BareKey("d"))])),
        ]
    )
    assert format_path(path) == "$..a['b c'][*][3]@.d"
    assert parse_path(format_path(path)) == path


@pytest.mark.parametrize(
    "name, quoted",
    [
        ("abc", "'abc'"),
        ("", "''"),
        ("it's", r"'it\'s'"),
        ('a"b', r"'a\"b'"),
        ("a\\b", r"'a\\b'"),
        ("\x01", r"'\u0001'"),
        ("\t", r"'\t'"),
        ("/", "'/'"),
    ],
)
def test_quote_key(name: str, quoted: str) -> None:
    assert quote_key(name) == quoted


@pytest.mark.parametrize("name", ["", "a b", "a.b", "é"])
def test_invalid_bare_key_is_rejected(name: str) -> None:
    with pytest.raises(ValueError):
        format_path(PathExpression([Field(BareKey(name))]))


def test_negative_index_is_rejected() -> None:
    with pytest.raises(ValueError):
        Index(-1)


def test_large_index_repr() -> None:
    index = Index(10 ** 5000)
    assert repr(index) == "Index(value=1" + "0" * 5000 + ")"
    assert format_path(PathExpression([Root(), index])) == "$[1" + "0" * 5000 + "]"
