"""
Game session: the single object that owns one game's state.
"""

from __future__ import annotations

from block_invaders.entities import Bullet
from block_invaders.geometry import Position2D, Size2D, Velocity2D
from block_invaders.settings import GameSettings
from block_invaders.systems import BlockInvadersPipeline, build_pipeline
from block_invaders.utils import logger
from block_invaders.world import (
    BlockInvadersTickContext,
    BlockInvadersWorld,
    GameState,
    InputState,
)


class GameSession:
    """
    One game, from the first tick to a terminal state.

    There is no reset: restarting means building a new session.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        pipeline: BlockInvadersPipeline | None = None,
    ):
        """
        :param settings: Game settings, defaults if omitted
        :type settings: GameSettings | None

        :param pipeline: Systems run on every tick
        :type pipeline: BlockInvadersPipeline | None
        """
        self.settings = settings or GameSettings()
        self.world = BlockInvadersWorld.create(self.settings)
        self.input_state = InputState()
        self._pipeline = pipeline or build_pipeline()

        logger.debug(
            f"Session created, surface {self.world.viewport}, "
            f"{len(self.world.formation)} enemies"
        )

    @property
    def state(self) -> GameState:
        return self.world.state

    @property
    def player(self):
        return self.world.player

    @property
    def bullets(self):
        return self.world.bullets

    @property
    def enemies(self):
        return self.world.enemies

    def set_move_left(self, held: bool):
        self.input_state.move_left = held

    def set_move_right(self, held: bool):
        self.input_state.move_right = held

    def fire(self) -> Bullet | None:
        """
        Shoot one bullet from the player's horizontal center.

        :return: The new bullet, None once the game is over
        :rtype: Bullet | None
        """
        if self.state.is_terminal:
            logger.debug(f"Ignoring fire, game is {self.state.value}")
            return None

        b = self.settings.bullet
        player = self.world.player
        bullet = Bullet(
            position=Position2D(player.center_x - b.width / 2, player.position.y),
            size=Size2D(b.width, b.height),
            velocity=Velocity2D(0, b.dy),
            color=b.color,
        )
        self.world.bullets.append(bullet)

        logger.debug(f"Shooting bullet at {bullet.position.to_tuple()}")
        return bullet

    def update(self) -> GameState:
        """
        Advance the game by one tick.

        :return: The state after the tick
        :rtype: GameState
        """
        if self.state.is_terminal:
            return self.state

        ctx = BlockInvadersTickContext(world=self.world, input_state=self.input_state)
        self._pipeline.step(ctx)
        self.world.ticks += 1

        if self.state.is_terminal:
            logger.debug(f"Game {self.state.value} after {self.world.ticks} ticks")

        return self.state
