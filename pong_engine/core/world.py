"""
World container for entities and systems.

The World is the main container that holds:
- All entities, keyed by integer id
- All systems, split by schedule
- Component indices for fast queries

Usage:
    world = World()
    world.add_system(PaddleControlSystem(...))
    world.add_system(ShapeRenderSystem(...))

    ball = world.create_entity("Ball")
    ball.add(Transform(x=0, y=0))
    ball.add(Velocity(vx=-500))

    # In game loop:
    world.update(fixed_dt)       # fixed schedule
    world.frame_update(frame_dt) # frame schedule
    world.render(alpha)
"""

from __future__ import annotations

from typing import Iterator, TypeVar

from pong_engine.core.entity import Entity
from pong_engine.core.component import Component
from pong_engine.core.system import Schedule, System, RenderSystem
from pong_engine.core.events import EventBus, EngineEvent


C = TypeVar('C', bound=Component)


class QuerySingleError(RuntimeError):
    """Raised when a query expected exactly one entity."""


class World:
    """
    Container for entities and systems.

    Provides:
    - Entity management (create, destroy, query)
    - System management (add, remove, update)
    - Component indices for fast entity queries
    - Event bus integration
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()

        # Entity storage
        self._entities: dict[int, Entity] = {}
        self._entities_to_destroy: list[int] = []

        # Component index: component_type -> set of entity IDs
        self._component_index: dict[type[Component], set[int]] = {}

        # Systems (sorted by priority)
        self._systems: dict[Schedule, list[System]] = {
            schedule: [] for schedule in Schedule
        }
        self._render_systems: list[RenderSystem] = []

    # Entity Management

    def create_entity(self, name: str = "") -> Entity:
        """
        Create a new entity in this world.

        Args:
            name: Optional entity name

        Returns:
            The new entity
        """
        entity = Entity(name)
        self._add_entity(entity)
        return entity

    def add_entity(self, entity: Entity) -> Entity:
        """
        Add an existing entity to this world.

        Raises:
            ValueError: If the entity is already stored here
        """
        if entity.id in self._entities:
            raise ValueError(f"Entity {entity.id} already in world")

        self._add_entity(entity)
        return entity

    def _add_entity(self, entity: Entity) -> None:
        """Internal: add entity to world."""
        entity._world = self
        self._entities[entity.id] = entity

        for component in entity.components:
            self._index_component(entity, type(component))

        self.event_bus.publish(
            EngineEvent.ENTITY_CREATED,
            entity=entity
        )

    def destroy_entity(self, entity: Entity | int) -> None:
        """
        Mark an entity for destruction.

        Entity will be removed at the end of the current update.
        Destroying the same entity twice is a no-op.

        Args:
            entity: Entity or entity ID to destroy
        """
        entity_id = entity.id if isinstance(entity, Entity) else entity

        if entity_id not in self._entities:
            return

        if entity_id not in self._entities_to_destroy:
            self._entities_to_destroy.append(entity_id)

    def is_pending_destroy(self, entity: Entity | int) -> bool:
        """Whether an entity is marked for removal at the end of the update."""
        entity_id = entity.id if isinstance(entity, Entity) else entity
        return entity_id in self._entities_to_destroy

    def _process_destroyed_entities(self) -> None:
        """Internal: remove destroyed entities."""
        for entity_id in self._entities_to_destroy:
            if entity_id not in self._entities:
                continue

            entity = self._entities.pop(entity_id)

            for component in entity.components:
                self._unindex_component(entity, type(component))

            entity._world = None

            self.event_bus.publish(
                EngineEvent.ENTITY_DESTROYED,
                entity=entity
            )

        self._entities_to_destroy.clear()

    def get_entity(self, entity_id: int) -> Entity | None:
        """Get entity by ID."""
        return self._entities.get(entity_id)

    @property
    def entities(self) -> Iterator[Entity]:
        """Iterate over all entities."""
        return iter(self._entities.values())

    @property
    def entity_count(self) -> int:
        """Get number of entities."""
        return len(self._entities)

    # Component indexing

    def _index_component(self, entity: Entity, component_type: type[Component]) -> None:
        """Add entity to component index."""
        if component_type not in self._component_index:
            self._component_index[component_type] = set()
        self._component_index[component_type].add(entity.id)

    def _unindex_component(self, entity: Entity, component_type: type[Component]) -> None:
        """Remove entity from component index."""
        if component_type in self._component_index:
            self._component_index[component_type].discard(entity.id)

    def _on_component_added(self, entity: Entity, component: Component) -> None:
        """Called when a component is added to an entity."""
        self._index_component(entity, type(component))
        self.event_bus.publish(
            EngineEvent.COMPONENT_ADDED,
            entity=entity,
            component=component
        )

    def _on_component_removed(self, entity: Entity, component: Component) -> None:
        """Called when a component is removed from an entity."""
        self._unindex_component(entity, type(component))
        self.event_bus.publish(
            EngineEvent.COMPONENT_REMOVED,
            entity=entity,
            component=component
        )

    # Queries

    def get_entities_with(self, *component_types: type[Component]) -> Iterator[Entity]:
        """
        Get all entities that have ALL specified components.

        Entities are yielded in creation order.

        Args:
            *component_types: Component types to match

        Returns:
            Iterator of matching entities
        """
        if not component_types:
            return iter([])

        candidate_ids: set[int] | None = None
        for comp_type in component_types:
            ids = self._component_index.get(comp_type)
            if not ids:
                return iter([])
            candidate_ids = ids.copy() if candidate_ids is None else candidate_ids & ids

        return (
            self._entities[entity_id]
            for entity_id in sorted(candidate_ids or ())
            if entity_id in self._entities
        )

    def single(
        self,
        *component_types: type[Component],
        allow_missing: bool = False,
    ) -> Entity | None:
        """
        Get the only entity that has ALL specified components.

        Args:
            *component_types: Component types to match
            allow_missing: Return None instead of raising when nothing matches

        Returns:
            The matching entity (or None when allowed)

        Raises:
            QuerySingleError: If several entities match, or none match
                and allow_missing is False
        """
        matches = list(self.get_entities_with(*component_types))
        names = ", ".join(c.__name__ for c in component_types)

        if len(matches) > 1:
            raise QuerySingleError(
                f"Expected one entity with [{names}], found {len(matches)}"
            )
        if not matches:
            if allow_missing:
                return None
            raise QuerySingleError(f"Expected one entity with [{names}], found none")

        return matches[0]

    # System Management

    def add_system(self, system: System) -> None:
        """
        Add a system to this world.

        Systems of the same schedule run in descending priority order;
        equal priorities keep insertion order.
        """
        if isinstance(system, RenderSystem):
            self._render_systems.append(system)
            self._render_systems.sort(key=lambda s: -s.priority)
        else:
            systems = self._systems[system.schedule]
            systems.append(system)
            systems.sort(key=lambda s: -s.priority)

        system.on_add(self)

    def remove_system(self, system: System) -> None:
        """Remove a system from this world."""
        if isinstance(system, RenderSystem):
            systems: list = self._render_systems
        else:
            systems = self._systems[system.schedule]

        if system in systems:
            systems.remove(system)
            system.on_remove()

    def get_system(self, system_type: type[System]) -> System | None:
        """Get a system by type."""
        for system in self.systems:
            if isinstance(system, system_type):
                return system
        return None

    @property
    def systems(self) -> Iterator[System]:
        """Iterate over all systems: fixed, frame, then render."""
        yield from self._systems[Schedule.FIXED]
        yield from self._systems[Schedule.FRAME]
        yield from self._render_systems

    # Update and Render

    def update(self, dt: float) -> None:
        """
        Run all fixed-schedule systems.

        Args:
            dt: Fixed delta time in seconds
        """
        self._run_schedule(Schedule.FIXED, dt)

    def frame_update(self, dt: float) -> None:
        """
        Run all frame-schedule systems.

        Args:
            dt: Real time since the previous frame in seconds
        """
        self._run_schedule(Schedule.FRAME, dt)

    def _run_schedule(self, schedule: Schedule, dt: float) -> None:
        for system in self._systems[schedule]:
            if system.enabled:
                system.update(dt)

        # Process destroyed entities at end of update
        self._process_destroyed_entities()

    def render(self, alpha: float) -> None:
        """
        Render all render systems.

        Args:
            alpha: Interpolation factor
        """
        for system in self._render_systems:
            if system.enabled:
                system.render(alpha)

    def clear(self) -> None:
        """Remove all entities and systems."""
        for entity_id in list(self._entities.keys()):
            self.destroy_entity(entity_id)
        self._process_destroyed_entities()

        for system in list(self.systems):
            self.remove_system(system)

        self._component_index.clear()
