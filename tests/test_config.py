from __future__ import annotations

import pytest

from jsonpath_syntax import PathSyntaxError, parse_path
from jsonpath_syntax.config import BACKEND_ENV, DEBUG_ENV, debug_enabled, resolve_backend


def test_default_backend() -> None:
    assert resolve_backend() == "rd"


@pytest.mark.parametrize("raw, expected", [("lalr", "lalr"), ("EARLEY", "earley"), (" rd ", "rd"), ("", "rd")])
def test_backend_from_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv(BACKEND_ENV, raw)
    assert resolve_backend() == expected


def test_explicit_backend_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BACKEND_ENV, "earley")
    assert resolve_backend("lalr") == "lalr"


def test_unknown_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BACKEND_ENV, "pest")
    with pytest.raises(ValueError):
        resolve_backend()


@pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("", False)])
def test_debug_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv(DEBUG_ENV, raw)
    assert debug_enabled() is expected


def test_parse_path_uses_env_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BACKEND_ENV, "lalr")
    with pytest.raises(PathSyntaxError) as info:
        parse_path("$.")
    assert isinstance(info.value.__cause__, Exception)
