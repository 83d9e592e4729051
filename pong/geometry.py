"""
Axis-aligned bounding boxes and playfield geometry.

All coordinates are center-origin with y pointing up.
"""

from __future__ import annotations

from dataclasses import dataclass

from pong_engine.core import Entity
from pong.components import Size, Transform


@dataclass(frozen=True)
class Aabb2d:
    """
    Axis-aligned box given by its center and half extents.

    Attributes:
        center: (x, y) of the box center
        half_size: (half width, half height)
    """
    center: tuple[float, float]
    half_size: tuple[float, float]

    @classmethod
    def from_center_size(cls, x: float, y: float, width: float, height: float) -> Aabb2d:
        """Build a box from its center and full size."""
        return cls((x, y), (width / 2, height / 2))

    @property
    def min(self) -> tuple[float, float]:
        """Bottom-left corner."""
        return (self.center[0] - self.half_size[0], self.center[1] - self.half_size[1])

    @property
    def max(self) -> tuple[float, float]:
        """Top-right corner."""
        return (self.center[0] + self.half_size[0], self.center[1] + self.half_size[1])

    def intersects(self, other: Aabb2d) -> bool:
        """
        Check whether two boxes overlap.

        Intervals are closed on both axes, so boxes whose edges
        touch count as intersecting.
        """
        dx = abs(self.center[0] - other.center[0])
        dy = abs(self.center[1] - other.center[1])
        return (
            dx <= self.half_size[0] + other.half_size[0]
            and dy <= self.half_size[1] + other.half_size[1]
        )


def bounding_box(entity: Entity) -> Aabb2d:
    """Box of an entity with Transform (center) and Size."""
    transform = entity.get(Transform)
    size = entity.get(Size)
    return Aabb2d.from_center_size(transform.x, transform.y, size.width, size.height)


@dataclass
class Playfield:
    """Visible play area, centered on the origin."""
    width: float
    height: float

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
