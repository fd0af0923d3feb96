"""Environment-driven settings, read at call time."""

from __future__ import annotations

import os

BACKEND_ENV = "JSONPATH_SYNTAX_BACKEND"
DEBUG_ENV = "JSONPATH_SYNTAX_DEBUG"

BACKENDS = ("rd", "lalr", "earley")
DEFAULT_BACKEND = "rd"


def _flag(name: str) -> bool:
    return os.getenv(name, "").lower() in {"1", "true", "yes"}


def resolve_backend(backend: str | None = None) -> str:
    """Explicit argument first, then $JSONPATH_SYNTAX_BACKEND, then 'rd'."""
    if backend is None:
        backend = os.getenv(BACKEND_ENV, "").strip().lower() or DEFAULT_BACKEND

    if backend not in BACKENDS:
        raise ValueError(f"Unknown parser backend {backend!r}, expected one of {', '.join(BACKENDS)}")
    return backend


def debug_enabled() -> bool:
    return _flag(DEBUG_ENV)
