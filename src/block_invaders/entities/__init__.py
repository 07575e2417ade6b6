"""
Block Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass

from block_invaders.geometry import (
    Position2D,
    Size2D,
    StrictRectCollider,
    Velocity2D,
)


@dataclass
class Player:
    """
    Player ship
    """

    position: Position2D
    size: Size2D
    speed: float
    color: str

    @property
    def collider(self) -> StrictRectCollider:
        return StrictRectCollider(self.position, self.size)

    @property
    def center_x(self) -> float:
        return self.position.x + self.size.width / 2


@dataclass(eq=False)
class Bullet:
    """
    Bullet entity
    """

    position: Position2D
    size: Size2D
    velocity: Velocity2D
    color: str

    @property
    def collider(self) -> StrictRectCollider:
        return StrictRectCollider(self.position, self.size)


@dataclass(eq=False)
class Enemy:
    """
    Enemy entity.

    ``velocity`` is the formation's velocity and is shared by reference with
    every other enemy of the same formation.
    """

    position: Position2D
    size: Size2D
    velocity: Velocity2D
    color: str
    row: int = 0
    col: int = 0

    @property
    def collider(self) -> StrictRectCollider:
        return StrictRectCollider(self.position, self.size)
