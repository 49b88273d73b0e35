# ioc_kernel/di/introspection.py
"""
Type introspection used by construction and injection
──────────────────────────────────────────────
• get_constructors(cls)      → public constructors with their parameters
• sequence_element_type(t)   → element type for list[T], Sequence[T], tuple[T, ...]
• unwrap_optional(t)         → T for Optional[T] / T | None
──────────────────────────────────────────────
"""
from __future__ import annotations

import collections.abc
import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Type, Union, get_args, get_origin, get_type_hints

from .markers import is_constructor

NoneType = type(None)

_LIST_ORIGINS = (
    list,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Iterable,
    collections.abc.Collection,
)

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def unwrap_optional(typ: Any) -> Any:
    origin = get_origin(typ)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(typ) if a is not NoneType]
        if len(args) == 1:
            return args[0]
    return typ


def sequence_element_type(typ: Any) -> Optional[Tuple[Any, Callable[[Any], Any]]]:
    """
    Return (element_type, collect) when 'typ' is a homogeneous sequence type,
    where collect turns an iterable of resolved items into the argument value.
    Returns None for everything else, including bare `list` without a parameter.
    """
    origin = get_origin(typ)
    args = get_args(typ)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0], tuple
        return None
    if origin in _LIST_ORIGINS and len(args) == 1:
        return args[0], list
    return None


@dataclass(frozen=True)
class ParameterInfo:
    name: str
    annotation: Any
    keyword_only: bool = False


@dataclass(frozen=True)
class ConstructorInfo:
    """A callable that builds an instance, and the parameters it declares."""

    name: str
    factory: Callable[..., Any]
    parameters: Tuple[ParameterInfo, ...]

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def invoke(self, values: List[Any]) -> Any:
        args: List[Any] = []
        kwargs = {}
        for param, value in zip(self.parameters, values):
            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)
        return self.factory(*args, **kwargs)


def _parameters(func: Callable[..., Any]) -> Tuple[ParameterInfo, ...]:
    # First parameter is self/cls.
    params = list(inspect.signature(func).parameters.values())[1:]
    hints = get_type_hints(func)
    return tuple(
        ParameterInfo(
            name=p.name,
            annotation=unwrap_optional(hints.get(p.name, object)),
            keyword_only=p.kind is inspect.Parameter.KEYWORD_ONLY,
        )
        for p in params
        if p.kind not in _SKIPPED_KINDS
    )


def get_constructors(cls: Type[Any]) -> List[ConstructorInfo]:
    """
    Public constructors of 'cls', in discovery order:
      1) __init__, when a Python-level one exists anywhere below `object`
      2) @constructor classmethods, walking the MRO from the class itself
    """
    found: List[ConstructorInfo] = []

    init = getattr(cls, "__init__", None)
    if inspect.isfunction(init):
        found.append(ConstructorInfo("__init__", cls, _parameters(init)))

    seen = set()
    for klass in cls.__mro__:
        for attr_name, attr in vars(klass).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)
            if is_constructor(attr):
                found.append(ConstructorInfo(attr_name, getattr(cls, attr_name), _parameters(attr.__func__)))
    return found
