"""
Block Invaders utils
"""

from __future__ import annotations

import logging

import pygame

logger = logging.getLogger("block_invaders")


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure logging for the game.

    :param level: Logging level name or number
    :type level: str | int
    """
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(level)


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
