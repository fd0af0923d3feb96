from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

# ---------- Keys ----------

@dataclass(frozen=True)
class BareKey:
    """Unquoted key: ASCII letters, digits and _ - / \\ #"""
    name: str

@dataclass(frozen=True)
class QuotedKey:
    """Bracket-quoted key; name holds the decoded string"""
    name: str

Key = Union[BareKey, QuotedKey]

# ---------- Selectors ----------

@dataclass(frozen=True)
class Root:
    pass

@dataclass(frozen=True)
class Descent:
    key: Key

@dataclass(frozen=True)
class Wildcard:
    pass

@dataclass(frozen=True)
class Current:
    path: PathExpression

@dataclass(frozen=True)
class Field:
    key: Key

@dataclass(frozen=True)
class Index:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Index must be non-negative, got {self.value}")

    def __repr__(self) -> str:
        from .render import format_unsigned
        return f"Index(value={format_unsigned(self.value)})"

Selector = Union[Root, Descent, Wildcard, Current, Field, Index]

# ---------- Path ----------

@dataclass(frozen=True)
class PathExpression:
    """Ordered selectors produced by a single parse; never mutated afterwards."""
    selectors: Tuple[Selector, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.selectors, tuple):
            object.__setattr__(self, "selectors", tuple(self.selectors))

    @property
    def is_absolute(self) -> bool:
        """True when anchored at the document root"""
        return bool(self.selectors) and isinstance(self.selectors[0], Root)

    def __iter__(self) -> Iterator[Selector]:
        return iter(self.selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def __getitem__(self, idx: int) -> Selector:
        return self.selectors[idx]

    def __str__(self) -> str:
        from .render import format_path
        return format_path(self)

# ---------- Reserved (filter expressions) ----------

class ComparisonSign(Enum):
    EQ = "=="
    NE = "!="
    REGEX = "~="
    GE = ">="
    GT = ">"
    LE = "<="
    LT = "<"
    IN = "in"
    NIN = "nin"
    SIZE = "size"
    NONE_OF = "noneOf"
    ANY_OF = "anyOf"
    SUBSET_OF = "subsetOf"

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class NumberLiteral:
    """Signed decimal literal, kept as written"""
    text: str

    @property
    def value(self) -> Union[int, float]:
        if any(ch in self.text for ch in ".eE"):
            return float(self.text)
        return int(self.text)

    def __str__(self) -> str:
        return self.text
