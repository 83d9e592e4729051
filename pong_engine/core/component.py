"""
Component base class for data-only components.

Components are pure data containers with NO logic.
All logic lives in Systems. This keeps gameplay rules in one
place and makes every component trivially inspectable.

Usage:
    class Transform(Component):
        x: float = 0.0
        y: float = 0.0

    class Velocity(Component):
        vx: float = 0.0
        vy: float = 0.0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Components are data-only containers using Pydantic for:
    - Automatic validation
    - Type hints
    - Default values

    IMPORTANT: Do NOT add methods that modify state.
    All logic belongs in Systems.
    """

    model_config = ConfigDict(
        # Allow arbitrary types (for references)
        arbitrary_types_allowed=True,
        # Validate on assignment
        validate_assignment=True,
        extra='forbid',
    )

    # Owning entity id (set by entity when attached)
    _entity_id: int | None = None

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to."""
        return self._entity_id

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)
