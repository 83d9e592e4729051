"""
Entity class - a container for components.

Entities are lightweight containers that hold components.
They have no behavior themselves - all logic is in Systems.

Usage:
    entity = Entity("Ball")
    entity.add(Transform(x=0, y=0))
    entity.add(Velocity(vx=-500, vy=0))

    transform = entity.get(Transform)
    if entity.has(Velocity):
        velocity = entity.get(Velocity)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, Iterator
import itertools

from pong_engine.core.component import Component

if TYPE_CHECKING:
    from pong_engine.core.world import World


# Type variable for component types
C = TypeVar('C', bound=Component)


class Entity:
    """
    A container for components.

    Entities are identified by unique integer ids and hold at most
    one component per component type.
    """

    # Global entity ID counter
    _id_counter = itertools.count(1)

    def __init__(self, name: str = ""):
        self._id = next(Entity._id_counter)
        self._name = name or f"Entity_{self._id}"
        self._components: dict[type[Component], Component] = {}
        self._world: World | None = None  # Set by World when added

    @property
    def id(self) -> int:
        """Unique entity identifier."""
        return self._id

    @property
    def name(self) -> str:
        """Entity name (for debugging)."""
        return self._name

    @property
    def world(self) -> World | None:
        """The World this entity belongs to."""
        return self._world

    @property
    def alive(self) -> bool:
        """Whether the entity is still stored in a world."""
        return self._world is not None

    def add(self, component: C) -> C:
        """
        Add a component to this entity.

        Args:
            component: The component to add

        Returns:
            The added component (for chaining)

        Raises:
            ValueError: If entity already has this component type
        """
        comp_type = type(component)

        if comp_type in self._components:
            raise ValueError(
                f"Entity {self._name} already has component {comp_type.__name__}"
            )

        component._entity_id = self._id
        self._components[comp_type] = component

        if self._world:
            self._world._on_component_added(self, component)

        return component

    def remove(self, component_type: type[C]) -> C | None:
        """
        Remove a component from this entity.

        Args:
            component_type: The component class to remove

        Returns:
            The removed component, or None if not found
        """
        component = self._components.pop(component_type, None)

        if component is not None:
            component._entity_id = None

            if self._world:
                self._world._on_component_removed(self, component)

        return component  # type: ignore

    def get(self, component_type: type[C]) -> C:
        """
        Get a component by type.

        Raises:
            KeyError: If component not found
        """
        if component_type not in self._components:
            raise KeyError(
                f"Entity {self._name} does not have component {component_type.__name__}"
            )
        return self._components[component_type]  # type: ignore

    def try_get(self, component_type: type[C]) -> C | None:
        """Get a component by type, or None if the entity lacks it."""
        return self._components.get(component_type)  # type: ignore

    def has(self, *component_types: type[Component]) -> bool:
        """Check if entity has all specified component types."""
        return all(ct in self._components for ct in component_types)

    @property
    def components(self) -> Iterator[Component]:
        """Iterate over all components."""
        return iter(self._components.values())

    def __repr__(self) -> str:
        components = ", ".join(c.__name__ for c in self._components.keys())
        return f"Entity({self._name}, id={self._id}, components=[{components}])"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._id == other._id
        return False
