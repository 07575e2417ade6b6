"""
Block Invaders world state
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from block_invaders.entities import Bullet, Enemy, Player
from block_invaders.formation import Formation
from block_invaders.geometry import Position2D, Size2D
from block_invaders.settings import GameSettings


class GameState(str, Enum):
    PLAYING = "playing"
    DEFEATED = "defeated"
    CLEARED = "cleared"

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.PLAYING


@dataclass
class InputState:
    """
    Held movement keys.

    Flags are level-triggered: they stay set until the key is released.
    """

    move_left: bool = False
    move_right: bool = False


@dataclass
class BlockInvadersWorld:
    """
    Everything one game session simulates.
    """

    viewport: tuple[float, float]
    player: Player
    formation: Formation
    bullets: list[Bullet] = field(default_factory=list)
    state: GameState = GameState.PLAYING
    ticks: int = 0

    @classmethod
    def create(cls, settings: GameSettings) -> BlockInvadersWorld:
        """
        Fresh player, fresh formation, no bullets.

        :param settings: Game settings
        :type settings: GameSettings

        :return: World in the PLAYING state
        :rtype: BlockInvadersWorld
        """
        vw, vh = settings.surface_size
        p = settings.player
        player = Player(
            position=Position2D(vw / 2 - p.width / 2, vh - p.bottom_offset),
            size=Size2D(p.width, p.height),
            speed=p.speed,
            color=p.color,
        )
        return cls(
            viewport=(vw, vh),
            player=player,
            formation=Formation.create(settings),
        )

    @property
    def enemies(self) -> list[Enemy]:
        return self.formation.enemies


@dataclass
class BlockInvadersTickContext:
    """
    What a system sees during one tick.
    """

    world: BlockInvadersWorld
    input_state: InputState
