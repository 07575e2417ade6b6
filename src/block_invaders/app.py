"""
Block Invaders pygame front end
"""

from __future__ import annotations

import itertools
import os
from abc import ABC, abstractmethod
from typing import Callable

import pygame

from block_invaders import constants
from block_invaders.loop import GameLoop
from block_invaders.render import PygameSurface
from block_invaders.session import GameSession
from block_invaders.settings import GameSettings
from block_invaders.utils import configure_logging, logger, set_screen
from block_invaders.world import GameState

LOG_LEVEL_ENV = "BLOCK_INVADERS_LOG_LEVEL"


class FrameScheduler:
    """
    Runs requested callbacks on the next frame.

    Callbacks requested while a frame runs are due on the following frame.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: dict[int, Callable[[], None]] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: Callable[[], None]) -> int:
        request_id = next(self._ids)
        self._pending[request_id] = callback
        return request_id

    def cancel(self, request_id: int):
        self._pending.pop(request_id, None)

    def run_frame(self):
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback()


class RestartButton:
    """
    Clickable button shown on the end screen.
    """

    def __init__(
        self, center: tuple[int, int], size: tuple[int, int] = (160, 48)
    ):
        """
        :param center: Center of the button in surface pixels
        :type center: tuple[int, int]

        :param size: Width and height of the button
        :type size: tuple[int, int]
        """
        self.rect = pygame.Rect((0, 0), size)
        self.rect.center = center
        self.visible = False

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def contains(self, pos: tuple[int, int]) -> bool:
        return self.visible and self.rect.collidepoint(pos)

    def draw(self, surface: PygameSurface):
        if not self.visible:
            return

        surface.fill_rect(*self.rect, "white")
        inner = self.rect.inflate(-4, -4)
        surface.fill_rect(*inner, "gray20")
        surface.fill_text(
            constants.RESTART_LABEL,
            self.rect.centerx,
            self.rect.centery,
            color="white",
            font=("sans", 24),
            align="center",
        )


class Game(ABC):
    """
    Game class
    """

    def __init__(self, name: str):
        """
        :param name: Name of the game
        :type name: str
        """
        logger.debug(f"Initializing {name}")
        self._name = name
        self._clock = pygame.time.Clock()
        self._carry_on = True
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        """
        Set the screen

        :param width: Width of the screen
        :type width: int

        :param height: Height of the screen
        :type height: int

        :return: pygame.Surface
        :rtype: pygame.Surface

        :raise pygame.error: If the window cannot be opened
        """
        logger.debug("Setting screen")

        try:
            return set_screen(self._name, width, height)
        except pygame.error as e:
            logger.error(f"Failed to open a {width}x{height} window: {e}")
            raise

    @abstractmethod
    def handle_events(self):
        """
        Handle the events
        """

    @abstractmethod
    def handle_game_logic(self):
        """
        Handle the game logic
        """

    @abstractmethod
    def draw_stuff(self):
        """
        Draw the stuff
        """


class BlockInvaders(Game):
    """
    Block Invaders class
    """

    def __init__(self, settings: GameSettings | None = None):
        self.settings = settings or GameSettings()
        super().__init__(self.settings.window.title)

        width, height = self.settings.surface_size
        self._fps = self.settings.window.fps
        self._screen = self._set_screen(width, height)
        self._surface = PygameSurface(
            self._screen, background_color=self.settings.window.background_color
        )
        self._scheduler = FrameScheduler()
        self._restart_button = RestartButton((width // 2, height // 2 + 70))

        self.session: GameSession | None = None
        self._loop: GameLoop | None = None

    def new_game(self):
        """
        Throw away the current session, if any, and start a fresh one.
        """
        if self._loop is not None:
            self._loop.stop()
        self._restart_button.hide()

        self.session = GameSession(self.settings)
        self._loop = GameLoop(
            self.session,
            self._surface,
            self._scheduler,
            restart_control=self._restart_button,
            on_finish=self._on_finish,
        )
        self._loop.start()
        logger.debug("New game started")

    def _on_finish(self, state: GameState):
        logger.info(f"Game finished: {state.value}")

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN:
                self._on_key_down(event.key)
            elif event.type == pygame.KEYUP:
                self._on_key_up(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self._restart_button.contains(event.pos):
                    logger.debug("Restart clicked")
                    self.new_game()

    def _on_key_down(self, key: int):
        if key == pygame.K_ESCAPE:
            logger.debug("Quitting the game")
            self._carry_on = False
        elif key == pygame.K_RIGHT:
            self.session.set_move_right(True)
        elif key == pygame.K_LEFT:
            self.session.set_move_left(True)
        elif key == pygame.K_SPACE:
            self.session.fire()

    def _on_key_up(self, key: int):
        if key == pygame.K_RIGHT:
            self.session.set_move_right(False)
        elif key == pygame.K_LEFT:
            self.session.set_move_left(False)

    def handle_game_logic(self):
        """
        Handle the game logic
        """
        self._scheduler.run_frame()

    def draw_stuff(self):
        """
        Draw the stuff
        """
        self._restart_button.draw(self._surface)
        pygame.display.flip()

    def run(self):
        """
        Run the game
        """
        logger.debug("Running the game")

        self.new_game()

        while self._carry_on:
            self._clock.tick(self._fps)
            self.handle_events()
            self.handle_game_logic()
            self.draw_stuff()

        pygame.quit()


def run():
    """
    Main entry point for Block Invaders.

    - Builds the settings from a dictionary, the log level can be overridden
      with the ``BLOCK_INVADERS_LOG_LEVEL`` environment variable.
    - Opens the window and plays until it is closed.
    """
    w_width, w_height = constants.WINDOW_SIZE

    settings_data = {
        "window": {
            "width": w_width,
            "height": w_height,
            "title": constants.WINDOW_TITLE,
            "fps": constants.FPS,
        },
        "logging": {"level": os.environ.get(LOG_LEVEL_ENV, "INFO")},
    }
    settings = GameSettings.from_dict(settings_data)

    configure_logging(settings.logging.level)
    logger.info("Starting Block Invaders...")
    logger.info(settings.to_dict())

    game = BlockInvaders(settings)
    game.run()


if __name__ == "__main__":
    run()
