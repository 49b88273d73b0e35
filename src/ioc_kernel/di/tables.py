# ioc_kernel/di/tables.py
"""
Lookup tables owned by the container.

Each table is a plain dict keyed by KeyedPair, with an indexer that takes
the two key parts directly:

    mappings[IFoo, "a"] = Foo
    mappings[IFoo]                 # unnamed registration
    relations[Context, IBase]

Reads of missing keys return None instead of raising KeyError.
"""
from __future__ import annotations

from typing import Any, Optional

from .keys import KeyedPair, relation_key, type_key


class _KeyedTable(dict):
    """dict keyed by KeyedPair; subclasses decide how index tuples become keys."""

    def _make_key(self, first: Any, second: Any) -> KeyedPair:
        raise NotImplementedError

    def _key(self, item: Any) -> KeyedPair:
        if isinstance(item, KeyedPair):
            return item
        if isinstance(item, tuple):
            if len(item) != 2:
                raise TypeError(f"{type(self).__name__} index takes 2 parts, got {len(item)}")
            return self._make_key(*item)
        return self._make_key(item, None)

    def __getitem__(self, item: Any) -> Any:
        return dict.get(self, self._key(item))

    def __setitem__(self, item: Any, value: Any) -> None:
        dict.__setitem__(self, self._key(item), value)

    def __delitem__(self, item: Any) -> None:
        dict.__delitem__(self, self._key(item))

    def __contains__(self, item: object) -> bool:
        return dict.__contains__(self, self._key(item))


class TypeMappingCollection(_KeyedTable):
    """(abstract type, name) → concrete type."""

    def _make_key(self, from_: Any, name: Optional[str]) -> KeyedPair:
        return type_key(from_, name)


class TypeInstanceCollection(_KeyedTable):
    """(type, name) → registered object."""

    def _make_key(self, from_: Any, name: Optional[str]) -> KeyedPair:
        return type_key(from_, name)


class TypeRelationCollection(_KeyedTable):
    """(context type, base type) → concrete type."""

    def _make_key(self, for_: Any, base: Any) -> KeyedPair:
        return relation_key(for_, base)
