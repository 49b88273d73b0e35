# ioc_kernel/di/container.py
"""
──────────────────────────────────────────────────────────────────────────────
Type Registry / Resolver
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Map requested types (optionally named) to concrete types or to already
    built instances, construct objects by greedy constructor selection, and
    inject marked members after construction.

APIs:
    - register(source, target, name=None)
    - register_instance(base_type, instance, name=None, inject_now=None)
    - register_relation(context_type, base_type, concrete_type)
    - resolve(base_type, name=None, require_instance=False, *args) → object | None
    - resolve_all(base_type) → generator
    - resolve_relation(context_type, base_type, *args) → object | None
    - create_instance(type, *args) → object
    - inject(obj) / inject_all()
    - clear()

Lookup order for resolve():
    instances → (stop if require_instance) → mappings → construct
    Nothing found is a None result, never an exception.

Usage:
    container = Container()
    container.register(IRepo, SqlRepo)
    container.register_instance(Settings, settings)
    service = container.create_instance(ReportService)
──────────────────────────────────────────────────────────────────────────────
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Type

from ioc_kernel.config.base_settings import KernelSettings
from ioc_kernel.errors import ConstructionError

from .introspection import ConstructorInfo, ParameterInfo, get_constructors, sequence_element_type
from .metadata import InjectionMetadataCache, shared_metadata_cache
from .tables import TypeInstanceCollection, TypeMappingCollection, TypeRelationCollection

logger = logging.getLogger(__name__)


def _name_of(type_: Any) -> str:
    return getattr(type_, "__qualname__", None) or repr(type_)


def _is_assignable(target: Any, source: Any) -> bool:
    """True when a value of type 'source' can be used where 'target' is expected."""
    if target is source or target in getattr(source, "__mro__", ()):
        return True
    if isinstance(target, type) and isinstance(source, type):
        try:
            return issubclass(source, target)
        except TypeError:
            # non-runtime protocols only allow the nominal check above
            return False
    return False


class Container:
    """
    Registry of mappings, instances and relations plus the factory built on them.

    Not thread-safe; callers serialize access if they share a container.
    """

    def __init__(
        self,
        settings: Optional[KernelSettings] = None,
        metadata_cache: Optional[InjectionMetadataCache] = None,
    ):
        self.settings = settings or KernelSettings()
        if metadata_cache is None:
            metadata_cache = shared_metadata_cache if self.settings.share_metadata_cache else InjectionMetadataCache()
        self._metadata_cache = metadata_cache
        self._mappings = TypeMappingCollection()
        self._instances = TypeInstanceCollection()
        self._relationship_mappings = TypeRelationCollection()

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------
    @property
    def mappings(self) -> TypeMappingCollection:
        return self._mappings

    @mappings.setter
    def mappings(self, value: TypeMappingCollection) -> None:
        self._mappings = value

    @property
    def instances(self) -> TypeInstanceCollection:
        return self._instances

    @instances.setter
    def instances(self, value: TypeInstanceCollection) -> None:
        self._instances = value

    @property
    def relationship_mappings(self) -> TypeRelationCollection:
        return self._relationship_mappings

    @relationship_mappings.setter
    def relationship_mappings(self, value: TypeRelationCollection) -> None:
        self._relationship_mappings = value

    @property
    def metadata_cache(self) -> InjectionMetadataCache:
        return self._metadata_cache

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(self, source: Any, target: Type[Any], name: Optional[str] = None) -> None:
        """Requests for 'source' (named 'name') construct a 'target'."""
        self.mappings[source, name] = target
        logger.debug("[kernel] mapping %s[%s] → %s", _name_of(source), name or "", _name_of(target))

    def register_instance(
        self,
        base_type: Any,
        instance: Any = None,
        name: Optional[str] = None,
        inject_now: Optional[bool] = None,
    ) -> None:
        """
        Requests for 'base_type' (named 'name') return exactly 'instance'.
        inject_now=None falls back to settings.inject_on_register.
        """
        self.instances[base_type, name] = instance
        logger.debug("[kernel] instance %s[%s] → %r", _name_of(base_type), name or "", instance)
        if inject_now is None:
            inject_now = self.settings.inject_on_register
        if inject_now:
            self.inject(instance)

    def register_relation(self, context_type: Any, base_type: Any, concrete_type: Type[Any]) -> None:
        """Requests for 'base_type' on behalf of 'context_type' construct a 'concrete_type'."""
        self.relationship_mappings[context_type, base_type] = concrete_type
        logger.debug(
            "[kernel] relation %s/%s → %s",
            _name_of(context_type), _name_of(base_type), _name_of(concrete_type),
        )

    def clear(self) -> None:
        """Drop all mappings, instances and relations. The metadata cache survives."""
        self.instances.clear()
        self.mappings.clear()
        self.relationship_mappings.clear()
        logger.debug("[kernel] container cleared")

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve(
        self,
        base_type: Any,
        name: Optional[str] = None,
        require_instance: bool = False,
        *constructor_args: Any,
    ) -> Any:
        """
        Registered instance first (even a registered None), then a fresh
        object built from the mapping. Returns None when neither exists, or
        when require_instance is set and no instance is registered.
        """
        if (base_type, name) in self.instances:
            return self.instances[base_type, name]
        if require_instance:
            return None

        concrete = self.mappings[base_type, name]
        if concrete is None:
            return None
        return self.create_instance(concrete, *constructor_args)

    def resolve_all(self, base_type: Any) -> Iterator[Any]:
        """
        Named instances registered exactly under 'base_type', then one new
        object per named mapping whose key type is assignable to 'base_type'.
        Unnamed registrations are never yielded.
        """
        for key, value in self.instances.items():
            if key.first == base_type and key.second:
                yield value

        for key, concrete in self.mappings.items():
            if key.second and _is_assignable(base_type, key.first):
                item = concrete()
                self.inject(item)
                yield item

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def create_instance(self, type_: Type[Any], *constructor_args: Any) -> Any:
        """
        Build a 'type_' and inject it.

        With explicit args they go straight to the class. Otherwise the
        constructor with the most parameters wins and each parameter is
        resolved from the container: sequences via resolve_all(element),
        anything else via resolve(type), then resolve(type, param_name).
        Unresolved parameters are passed as None.
        """
        if constructor_args:
            obj = type_(*constructor_args)
            self.inject(obj)
            return obj

        constructors = get_constructors(type_)
        if not constructors:
            obj = type_()
            self.inject(obj)
            return obj

        chosen = self._select_constructor(constructors)
        logger.debug("[kernel] constructing %s via %s/%d", _name_of(type_), chosen.name, chosen.arity)

        values = [self._resolve_parameter(type_, param) for param in chosen.parameters]
        obj = chosen.invoke(values)
        self.inject(obj)
        return obj

    @staticmethod
    def _select_constructor(constructors: List[ConstructorInfo]) -> ConstructorInfo:
        chosen = constructors[0]
        for candidate in constructors:
            if candidate.arity > chosen.arity:
                chosen = candidate
        return chosen

    def _resolve_parameter(self, owner: Type[Any], param: ParameterInfo) -> Any:
        sequence = sequence_element_type(param.annotation)
        if sequence is not None:
            element_type, collect = sequence
            return collect(self.resolve_all(element_type))

        value = self.resolve(param.annotation)
        if value is None:
            value = self.resolve(param.annotation, param.name)
        if value is None and self.settings.warn_unresolved:
            logger.warning(
                "[kernel] %s: parameter '%s' (%s) resolved to None",
                _name_of(owner), param.name, _name_of(param.annotation),
            )
        return value

    # ------------------------------------------------------------------
    # Injection
    # ------------------------------------------------------------------
    def inject(self, obj: Any) -> None:
        """Set every marked property, then every marked field, of 'obj'."""
        if obj is None:
            return
        info = self._metadata_cache.get(type(obj))
        for member in info.properties:
            member.set_value(obj, self.resolve(member.member_type, member.inject_name))
        for member in info.fields:
            member.set_value(obj, self.resolve(member.member_type, member.inject_name))

    def inject_all(self) -> None:
        """Re-run injection on every registered instance."""
        for instance in list(self.instances.values()):
            self.inject(instance)

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------
    def resolve_relation(self, context_type: Any, base_type: Any, *args: Any) -> Any:
        concrete = self.relationship_mappings[context_type, base_type]
        if concrete is None:
            return None
        return self.create_instance(concrete, *args)

    def resolve_relation_as(self, base_type: Any, context_type: Any, *args: Any) -> Any:
        """Like resolve_relation, but the result must be a 'base_type' (None passes)."""
        result = self.resolve_relation(context_type, base_type, *args)
        if result is None or base_type in type(result).__mro__:
            return result
        try:
            if not isinstance(result, base_type):
                raise TypeError(f"{_name_of(type(result))} is not a {_name_of(base_type)}")
        except TypeError as cast_issue:
            raise ConstructionError(
                f"Resolve relation couldn't cast to {_name_of(base_type)} from {_name_of(context_type)}",
                base_type=base_type,
                context_type=context_type,
            ) from cast_issue
        return result
