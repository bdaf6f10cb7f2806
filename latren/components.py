"""Components, contiguous per-type component pools and the manager that owns them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

EntityIndex = int
ComponentType = type


class Component:
    """Base class for components attached to entities.

    Subclasses override the lifecycle hooks ``start``, ``delete``, ``update``
    and ``fixed_update``.  The default hooks only keep the component's own
    bookkeeping: ``start`` marks it started, ``update`` and ``fixed_update``
    count the ticks it has received and ``delete`` detaches it from its pool
    and entity.
    """

    parent: EntityIndex | None = None
    pool: ComponentMemoryPool | None = None
    update_count: int = 0
    fixed_update_count: int = 0
    _has_started: bool = False
    _type_override: ComponentType | None = None

    @property
    def has_started(self) -> bool:
        return self._has_started

    @property
    def component_type(self) -> ComponentType:
        """The type this component is registered under."""
        return self._type_override or type(self)

    @component_type.setter
    def component_type(self, value: ComponentType) -> None:
        self._type_override = value

    def run_start(self) -> None:
        """Mark the component as started and run its ``start`` hook."""
        self._has_started = True
        self.start()

    def start(self) -> None:
        self._has_started = True

    def delete(self) -> None:
        self.pool = None
        self.parent = None

    def update(self) -> None:
        self.update_count += 1

    def fixed_update(self) -> None:
        self.fixed_update_count += 1


@dataclass(frozen=True)
class ComponentReference:
    """A stable handle to an entity's component inside a pool."""

    pool: ComponentMemoryPool | None
    index: EntityIndex

    def component(self) -> Any:
        """Return the referenced component; raises ``KeyError`` if it is gone."""
        if self.pool is None:
            raise KeyError(self.index)
        return self.pool.get_component(self.index)

    def delete(self) -> None:
        if self.pool is not None:
            self.pool.destroy_component(self.index)

    def is_null(self) -> bool:
        return self.pool is None or not self.pool.has_component(self.index)


class ComponentMemoryPool:
    """Stores all components of one type in order, indexed by entity."""

    def __init__(self, component_type: ComponentType) -> None:
        if not isinstance(component_type, type) or not issubclass(component_type, Component):
            raise TypeError(f"{component_type!r} is not a component type")
        if component_type is Component:
            raise TypeError("the abstract Component base cannot be pooled")
        self.component_type = component_type
        self._components: list[Component] = []
        self._references: dict[EntityIndex, int] = {}

    def alloc_new_component(self, entity: EntityIndex) -> ComponentReference:
        """Create a new component for ``entity`` and return a reference to it."""
        component = self.component_type()
        component.pool = self
        component.parent = entity
        component.component_type = self.component_type
        self._components.append(component)
        self._references[entity] = len(self._components) - 1
        return ComponentReference(self, entity)

    def destroy_component(self, entity: EntityIndex) -> None:
        """Remove ``entity``'s component, keeping the others in order."""
        position = self._references.get(entity)
        if position is None or position >= len(self._components):
            return
        del self._components[position]
        del self._references[entity]
        for key, value in self._references.items():
            if value > position:
                self._references[key] = value - 1

    def clear_all_components(self) -> None:
        self._references.clear()
        self._components.clear()

    def get_component(self, entity: EntityIndex) -> Component:
        """Return ``entity``'s component; raises ``KeyError`` if it has none."""
        if not self.has_component(entity):
            raise KeyError(entity)
        return self._components[self._references[entity]]

    def has_component(self, entity: EntityIndex) -> bool:
        position = self._references.get(entity)
        return position is not None and position < len(self._components)

    def can_cast_components_to(self, cls: type) -> bool:
        """Whether the pooled components are instances of ``cls``."""
        return bool(self._components) and isinstance(self._components[0], cls)

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._components))

    def __len__(self) -> int:
        return len(self._components)


class ComponentMemoryManager:
    """Holds one component pool per component type."""

    def __init__(self) -> None:
        self._pools: dict[ComponentType, ComponentMemoryPool] = {}

    def move_pools(self, pools: Mapping[ComponentType, ComponentMemoryPool]) -> None:
        """Replace all pools with ``pools``."""
        self._pools = dict(pools)

    def get_pool(self, component_type: ComponentType) -> ComponentMemoryPool:
        """Return the pool for ``component_type``; raises ``KeyError`` if absent."""
        try:
            return self._pools[component_type]
        except KeyError:
            raise KeyError(f"no component pool for {component_type!r}") from None

    def alloc_new_component(self, entity: EntityIndex, component_type: ComponentType) -> ComponentReference:
        return self.get_pool(component_type).alloc_new_component(entity)

    def destroy_component(self, entity: EntityIndex, component_type: ComponentType) -> None:
        self.get_pool(component_type).destroy_component(entity)

    def iter_pools(self) -> Iterator[ComponentMemoryPool]:
        yield from list(self._pools.values())

    def iter_all_components(self) -> Iterator[Component]:
        for pool in self.iter_pools():
            yield from pool

    def iter_derived_components(self, cls: type) -> Iterator[tuple[Component, ComponentMemoryPool]]:
        """Yield ``(component, pool)`` for every pool whose components are ``cls`` instances."""
        for pool in self.iter_pools():
            if pool.can_cast_components_to(cls):
                for component in pool:
                    yield component, pool