"""
Game loop: one simulation step and one render per scheduler frame.
"""

from __future__ import annotations

from typing import Callable, Protocol

from block_invaders.render import (
    DrawSurface,
    RestartControl,
    render_terminal,
    render_world,
)
from block_invaders.session import GameSession
from block_invaders.utils import logger
from block_invaders.world import GameState


class Scheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> int: ...

    def cancel(self, request_id: int): ...


class GameLoop:
    """
    Drives a session until it reaches a terminal state.
    """

    def __init__(
        self,
        session: GameSession,
        surface: DrawSurface,
        scheduler: Scheduler,
        restart_control: RestartControl | None = None,
        on_finish: Callable[[GameState], None] | None = None,
    ):  # pylint: disable=too-many-arguments,too-many-positional-arguments
        """
        :param session: Session to advance
        :type session: GameSession

        :param surface: Where frames are drawn
        :type surface: DrawSurface

        :param scheduler: Source of frame ticks
        :type scheduler: Scheduler

        :param restart_control: Revealed on the end screen
        :type restart_control: RestartControl | None

        :param on_finish: Called once with the terminal state
        :type on_finish: Callable[[GameState], None] | None

        :raises ValueError: If the surface size differs from the session's
        """
        surface_size = (surface.width, surface.height)
        if surface_size != tuple(session.world.viewport):
            raise ValueError(
                f"Surface size {surface_size} does not match the session "
                f"viewport {session.world.viewport}"
            )

        self.session = session
        self._surface = surface
        self._scheduler = scheduler
        self._restart_control = restart_control
        self._on_finish = on_finish
        self._request_id: int | None = None

    @property
    def running(self) -> bool:
        return self._request_id is not None

    def start(self):
        if self.running:
            return
        if self.session.state.is_terminal:
            logger.debug("Not starting loop, session already over")
            return

        logger.debug("Starting game loop")
        self._request_id = self._scheduler.request_frame(self._tick)

    def stop(self):
        if self._request_id is None:
            return

        self._scheduler.cancel(self._request_id)
        self._request_id = None
        logger.debug("Game loop stopped")

    def _tick(self):
        # the request that fired this tick is spent
        self._request_id = None

        state = self.session.update()
        if state.is_terminal:
            render_terminal(state, self._surface, self._restart_control)
            logger.debug(f"Game loop halted, session {state.value}")
            if self._on_finish is not None:
                self._on_finish(state)
            return

        render_world(self.session.world, self._surface)
        self._request_id = self._scheduler.request_frame(self._tick)
