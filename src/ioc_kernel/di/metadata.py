# ioc_kernel/di/metadata.py
"""
──────────────────────────────────────────────────────────────────────────────
Injection Metadata Cache
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Remember, per concrete type, which members carry the Inject marker.

Mechanics:
    - Properties: walks the MRO for `property` objects whose getter is marked
      and which have a setter; declared type = getter return annotation
    - Fields: reads class annotations (include_extras) for Annotated[T, Inject()]
    - Supports Optional[T] on both
    - Built once per type on first use, immutable afterwards

Used by:
    Container.inject() → one lookup per injected object
──────────────────────────────────────────────────────────────────────────────
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Optional, Tuple, Type, get_args, get_origin, get_type_hints

from .introspection import unwrap_optional
from .markers import Inject, get_inject_marker

logger = logging.getLogger(__name__)


class MemberKind(str, enum.Enum):
    PROPERTY = "property"
    FIELD = "field"


@dataclass(frozen=True)
class InjectionMember:
    name: str
    member_type: Any
    inject_name: Optional[str]
    kind: MemberKind

    def set_value(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


@dataclass(frozen=True)
class TypeInjectionInfo:
    properties: Tuple[InjectionMember, ...] = ()
    fields: Tuple[InjectionMember, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.properties and not self.fields


def _property_members(cls: Type[Any]) -> List[InjectionMember]:
    members: List[InjectionMember] = []
    seen = set()
    for klass in cls.__mro__:
        for attr_name, attr in vars(klass).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)
            if not isinstance(attr, property) or attr.fget is None:
                continue
            marker = get_inject_marker(attr.fget)
            if marker is None:
                continue
            if attr.fset is None:
                logger.debug("[kernel] %s.%s is marked but read-only; skipped", cls.__qualname__, attr_name)
                continue
            declared = get_type_hints(attr.fget).get("return", object)
            members.append(InjectionMember(attr_name, unwrap_optional(declared), marker.name, MemberKind.PROPERTY))
    return members


def _field_members(cls: Type[Any]) -> List[InjectionMember]:
    members: List[InjectionMember] = []
    for attr_name, hint in get_type_hints(cls, include_extras=True).items():
        if get_origin(hint) is not Annotated:
            continue
        marker = next((m for m in hint.__metadata__ if isinstance(m, Inject)), None)
        if marker is None:
            continue
        declared = get_args(hint)[0]
        members.append(InjectionMember(attr_name, unwrap_optional(declared), marker.name, MemberKind.FIELD))
    return members


def build_injection_info(cls: Type[Any]) -> TypeInjectionInfo:
    return TypeInjectionInfo(
        properties=tuple(_property_members(cls)),
        fields=tuple(_field_members(cls)),
    )


class InjectionMetadataCache:
    """
    Type → TypeInjectionInfo, append-only.

    Entries are never invalidated: markers are fixed when a class is created.
    clear() exists for tests that redefine classes under the same identity.
    """

    def __init__(self) -> None:
        self._infos: Dict[type, TypeInjectionInfo] = {}

    def get(self, cls: Type[Any]) -> TypeInjectionInfo:
        info = self._infos.get(cls)
        if info is None:
            info = build_injection_info(cls)
            self._infos[cls] = info
            logger.debug(
                "[kernel] injection metadata built for %s (%d properties, %d fields)",
                cls.__qualname__, len(info.properties), len(info.fields),
            )
        return info

    def __contains__(self, cls: object) -> bool:
        return cls in self._infos

    def __len__(self) -> int:
        return len(self._infos)

    def clear(self) -> None:
        self._infos.clear()


# Opt-in process-wide cache (KernelSettings.share_metadata_cache)
shared_metadata_cache = InjectionMetadataCache()
