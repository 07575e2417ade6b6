"""
Enemy formation.

The formation moves as one unit: every enemy holds a reference to the same
``Velocity2D``, so reversing the formation is a single sign flip.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from block_invaders.entities import Enemy
from block_invaders.geometry import TICK, Position2D, Size2D, Velocity2D
from block_invaders.settings import GameSettings
from block_invaders.utils import logger


def create_enemies(
    settings: GameSettings, velocity: Velocity2D | None = None
) -> list[Enemy]:
    """
    Build the enemy grid, column-major (every row of column 0 first).

    :param settings: Game settings
    :type settings: GameSettings

    :param velocity: Shared formation velocity, a new one if omitted
    :type velocity: Velocity2D | None

    :return: The enemies, in a fixed order
    :rtype: list[Enemy]
    """
    enemy = settings.enemy
    layout = settings.formation

    if velocity is None:
        velocity = Velocity2D(enemy.dx, 0)

    size = Size2D(enemy.width, enemy.height)
    enemies = []
    for col in range(layout.columns):
        for row in range(layout.rows):
            enemies.append(
                Enemy(
                    position=Position2D(
                        col * (enemy.width + layout.spacing) + layout.offset_x,
                        row * (enemy.height + layout.spacing) + layout.offset_y,
                    ),
                    size=size,
                    velocity=velocity,
                    color=enemy.color,
                    row=row,
                    col=col,
                )
            )

    return enemies


@dataclass
class Formation:
    """
    Alive enemies plus the velocity they share.
    """

    velocity: Velocity2D
    descend_step: float
    enemies: list[Enemy] = field(default_factory=list)

    @classmethod
    def create(cls, settings: GameSettings) -> Formation:
        velocity = Velocity2D(settings.enemy.dx, 0)
        enemies = create_enemies(settings, velocity)
        logger.debug(f"Formation created with {len(enemies)} enemies")
        return cls(
            velocity=velocity,
            descend_step=settings.formation.descend_step,
            enemies=enemies,
        )

    @property
    def dx(self) -> float:
        return self.velocity.vx

    def __len__(self) -> int:
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)

    def advance(self):
        """
        Move every enemy by the shared velocity.
        """
        for e in self.enemies:
            e.position.x, e.position.y = self.velocity.advance(
                e.position.x, e.position.y, TICK
            )

    def touches_edge(self, surface_width: float) -> bool:
        """
        :param surface_width: Width of the draw surface
        :type surface_width: float

        :return: Whether any enemy is past the left or right edge
        :rtype: bool
        """
        return any(
            e.collider.left < 0 or e.collider.right > surface_width
            for e in self.enemies
        )

    def reverse_and_descend(self):
        """
        Flip the shared horizontal velocity and step every enemy down.
        """
        self.velocity.vx = -self.velocity.vx
        for e in self.enemies:
            e.position.y += self.descend_step

    def lowest_edge(self) -> float | None:
        if not self.enemies:
            return None
        return max(e.collider.bottom for e in self.enemies)
