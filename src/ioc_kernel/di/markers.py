# ioc_kernel/di/markers.py
"""
──────────────────────────────────────────────────────────────────────────────
Declarative markers
──────────────────────────────────────────────────────────────────────────────
Inject(name=None)
    Flags a member for injection, optionally with a name qualifier.

    Fields use it as Annotated metadata:

        class ReportService:
            repo: Annotated[ReportRepo, Inject()]
            audit: Annotated[Optional[Logger], Inject("audit")]

    Properties decorate the getter (the property needs a setter):

        class ReportService:
            @property
            @Inject("audit")
            def logger(self) -> Logger:
                return self._logger

            @logger.setter
            def logger(self, value: Logger) -> None:
                self._logger = value

constructor
    Marks a classmethod as an extra public constructor, taking part in
    greedy constructor selection next to __init__.
──────────────────────────────────────────────────────────────────────────────
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

INJECT_ATTR = "__ioc_inject__"
CONSTRUCTOR_ATTR = "__ioc_constructor__"


@dataclass(frozen=True)
class Inject:
    name: Optional[str] = None

    def __call__(self, fn: F) -> F:
        setattr(fn, INJECT_ATTR, self)
        return fn


def get_inject_marker(obj: Any) -> Optional[Inject]:
    """Marker attached to a property getter, if any."""
    marker = getattr(obj, INJECT_ATTR, None)
    return marker if isinstance(marker, Inject) else None


def constructor(fn):
    """Register a classmethod (or plain function, wrapped for you) as a constructor."""
    if isinstance(fn, classmethod):
        setattr(fn.__func__, CONSTRUCTOR_ATTR, True)
        return fn
    setattr(fn, CONSTRUCTOR_ATTR, True)
    return classmethod(fn)


def is_constructor(attr: Any) -> bool:
    return isinstance(attr, classmethod) and getattr(attr.__func__, CONSTRUCTOR_ATTR, False)
