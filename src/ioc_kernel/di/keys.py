# ioc_kernel/di/keys.py
"""
Composite lookup keys
──────────────────────────────────────────────
Every container table is keyed by a KeyedPair:
    • (type, name)  → mappings and instances
    • (type, type)  → relations

Equality is component-wise (None only equals None).
Hash is the XOR of each non-None component's hash.
──────────────────────────────────────────────
"""
from __future__ import annotations

from typing import Any, Optional


class KeyedPair:
    """Immutable two-part key with value equality."""

    __slots__ = ("first", "second")

    def __init__(self, first: Any, second: Any):
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "second", second)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyedPair):
            return NotImplemented
        return _component_eq(self.first, other.first) and _component_eq(self.second, other.second)

    def __hash__(self) -> int:
        h = 0
        if self.first is not None:
            h ^= hash(self.first)
        if self.second is not None:
            h ^= hash(self.second)
        return h

    def __iter__(self):
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"KeyedPair({_describe(self.first)}, {_describe(self.second)})"


def _component_eq(a: Any, b: Any) -> bool:
    if a is None:
        return b is None
    if b is None:
        return False
    return a == b


def _describe(part: Any) -> str:
    if isinstance(part, type):
        return part.__qualname__
    return repr(part)


def normalize_name(name: Optional[str]) -> Optional[str]:
    """Fold the empty string into None: both mean the default registration."""
    return name or None


def type_key(type_: Any, name: Optional[str] = None) -> KeyedPair:
    return KeyedPair(type_, normalize_name(name))


def relation_key(context_type: Any, base_type: Any) -> KeyedPair:
    return KeyedPair(context_type, base_type)
