"""
2D geometry shared by entities and systems.

Positions, sizes and velocities are mini-arcade-core's. Motion is one fixed
step per tick, so velocities always advance by ``TICK``.
"""

from __future__ import annotations

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

__all__ = ["TICK", "Position2D", "Size2D", "StrictRectCollider", "Velocity2D"]

TICK = 1


class StrictRectCollider(RectCollider):
    """
    Axis-aligned box whose edges are exclusive.

    Boxes that only share an edge do not intersect.
    """

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def right(self) -> float:
        return self.position.x + self.size.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.size.height

    def intersects(self, other: RectCollider) -> bool:
        other = StrictRectCollider(other.position, other.size)
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )
