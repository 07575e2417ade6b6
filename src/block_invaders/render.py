"""
Rendering.

Everything is drawn as filled rectangles and text on a ``DrawSurface``.
Rendering only reads the world.
"""

from __future__ import annotations

from typing import Protocol

import pygame

from block_invaders import constants
from block_invaders.world import BlockInvadersWorld, GameState

Color = str | tuple[int, int, int]
Font = tuple[str, int]


class DrawSurface(Protocol):
    width: int
    height: int

    def clear(self): ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color): ...

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = ...,
        font: Font = ...,
        align: str = ...,
    ): ...


class RestartControl(Protocol):
    def show(self): ...

    def hide(self): ...


class PygameSurface:
    """
    ``DrawSurface`` backed by a pygame surface (the window or an off-screen
    one).
    """

    def __init__(
        self,
        surface: pygame.Surface,
        background_color: Color = constants.BACKGROUND_COLOR,
    ):
        """
        :param surface: Target surface
        :type surface: pygame.Surface

        :param background_color: Color used by ``clear``
        :type background_color: Color
        """
        self._surface = surface
        self._background_color = pygame.Color(background_color)
        self._fonts: dict[Font, pygame.font.Font] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def clear(self):
        self._surface.fill(self._background_color)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color):
        pygame.draw.rect(
            self._surface,
            pygame.Color(color),
            pygame.Rect(int(x), int(y), int(w), int(h)),
        )

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = constants.MESSAGE_COLOR,
        font: Font = constants.MESSAGE_FONT,
        align: str = "left",
    ):
        """
        Draw ``text`` vertically centered on ``y``.

        :param align: "left", "center" or "right", relative to ``x``
        :type align: str
        """
        rendered = self._font(font).render(text, True, pygame.Color(color))
        rect = rendered.get_rect()
        rect.centery = int(y)
        if align == "center":
            rect.centerx = int(x)
        elif align == "right":
            rect.right = int(x)
        else:
            rect.left = int(x)

        self._surface.blit(rendered, rect)

    def _font(self, font: Font) -> pygame.font.Font:
        if font not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            name, size = font
            # SysFont falls back to pygame's bundled font when name is missing
            self._fonts[font] = pygame.font.SysFont(name, size)
        return self._fonts[font]


class Drawable(Protocol):
    def draw(self, surface: DrawSurface, world: BlockInvadersWorld): ...


class DrawPlayer:
    def draw(self, surface: DrawSurface, world: BlockInvadersWorld):
        player = world.player
        x, y = player.position.to_tuple()
        w, h = player.size.to_tuple()
        surface.fill_rect(x, y, w, h, player.color)


class DrawBullets:
    def draw(self, surface: DrawSurface, world: BlockInvadersWorld):
        for b in world.bullets:
            x, y = b.position.to_tuple()
            w, h = b.size.to_tuple()
            surface.fill_rect(x, y, w, h, b.color)


class DrawEnemies:
    def draw(self, surface: DrawSurface, world: BlockInvadersWorld):
        for e in world.enemies:
            x, y = e.position.to_tuple()
            w, h = e.size.to_tuple()
            surface.fill_rect(x, y, w, h, e.color)


DRAW_OPS: tuple[Drawable, ...] = (DrawPlayer(), DrawBullets(), DrawEnemies())

TERMINAL_MESSAGES = {
    GameState.CLEARED: constants.CLEARED_MESSAGE,
    GameState.DEFEATED: constants.DEFEATED_MESSAGE,
}


def render_world(world: BlockInvadersWorld, surface: DrawSurface):
    """
    Clear the surface and draw the player, bullets and enemies, in that order.

    :param world: World to draw
    :type world: BlockInvadersWorld

    :param surface: Target surface
    :type surface: DrawSurface
    """
    surface.clear()
    for op in DRAW_OPS:
        op.draw(surface, world)


def render_terminal(
    state: GameState,
    surface: DrawSurface,
    restart_control: RestartControl | None = None,
):
    """
    Draw the end screen for ``state`` and reveal the restart control.

    :param state: DEFEATED or CLEARED
    :type state: GameState

    :param surface: Target surface
    :type surface: DrawSurface

    :param restart_control: Control offering a new game
    :type restart_control: RestartControl | None

    :raises ValueError: If ``state`` is not terminal
    """
    if not state.is_terminal:
        raise ValueError(f"No end screen for state {state.value}")

    surface.fill_rect(
        0, 0, surface.width, surface.height, constants.MESSAGE_BACKGROUND
    )
    surface.fill_text(
        TERMINAL_MESSAGES[state],
        surface.width / 2,
        surface.height / 2,
        color=constants.MESSAGE_COLOR,
        font=constants.MESSAGE_FONT,
        align="center",
    )

    if restart_control is not None:
        restart_control.show()
