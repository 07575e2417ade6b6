"""Tests for the render step and the pygame draw surface."""

import pygame
import pytest

from block_invaders.render import PygameSurface, render_terminal, render_world
from block_invaders.world import GameState


class TestRenderWorld:
    def test_clears_before_drawing(self, session, surface):
        render_world(session.world, surface)
        assert surface.calls[0] == ("clear",)

    def test_draws_player_then_bullets_then_enemies(self, session, surface):
        session.fire()
        render_world(session.world, surface)

        colors = [c[5] for c in surface.calls if c[0] == "fill_rect"]
        assert colors == ["green", "white"] + ["red"] * 15

    def test_rects_use_entity_geometry(self, session, surface):
        bullet = session.fire()
        render_world(session.world, surface)

        assert surface.rects("green") == [(385, 570, 30, 10)]
        assert surface.rects("white") == [(bullet.position.x, 570, 3, 10)]
        assert surface.rects("red")[0] == (60, 30, 20, 20)

    def test_does_not_mutate_world(self, session, surface):
        session.fire()
        before = (
            session.player.position.to_tuple(),
            [b.position.to_tuple() for b in session.bullets],
            [e.position.to_tuple() for e in session.enemies],
        )

        render_world(session.world, surface)

        after = (
            session.player.position.to_tuple(),
            [b.position.to_tuple() for b in session.bullets],
            [e.position.to_tuple() for e in session.enemies],
        )
        assert before == after


class TestRenderTerminal:
    def test_cleared_screen(self, surface, restart_control):
        render_terminal(GameState.CLEARED, surface, restart_control)

        assert surface.calls == [
            ("fill_rect", 0, 0, 800, 600, "black"),
            ("fill_text", "Stage Clear", 400, 300, "white", ("serif", 48), "center"),
        ]
        assert restart_control.visible

    def test_defeated_screen(self, surface, restart_control):
        render_terminal(GameState.DEFEATED, surface, restart_control)

        assert surface.texts() == ["Game Over"]
        assert restart_control.visible

    def test_restart_control_is_optional(self, surface):
        render_terminal(GameState.CLEARED, surface)
        assert surface.texts() == ["Stage Clear"]

    def test_playing_has_no_end_screen(self, surface):
        with pytest.raises(ValueError):
            render_terminal(GameState.PLAYING, surface)


class TestPygameSurface:
    @pytest.fixture
    def target(self):
        pygame.font.init()
        yield PygameSurface(pygame.Surface((100, 50)), background_color="black")
        pygame.font.quit()

    def test_size(self, target):
        assert (target.width, target.height) == (100, 50)

    def test_clear_fills_background(self, target):
        target.surface.fill(pygame.Color("blue"))
        target.clear()
        assert target.surface.get_at((50, 25)) == pygame.Color("black")

    def test_fill_rect(self, target):
        target.clear()
        target.fill_rect(10, 10, 5, 5, "red")

        assert target.surface.get_at((10, 10)) == pygame.Color("red")
        assert target.surface.get_at((14, 14)) == pygame.Color("red")
        assert target.surface.get_at((15, 15)) == pygame.Color("black")

    def test_fill_text_draws_pixels(self, target):
        target.clear()
        target.fill_text(
            "Hi", 50, 25, color="white", font=("serif", 24), align="center"
        )

        lit = [
            (x, y)
            for x in range(target.width)
            for y in range(target.height)
            if target.surface.get_at((x, y)) != pygame.Color("black")
        ]
        assert lit
        # centered text straddles the center column
        assert min(x for x, _ in lit) < 50 < max(x for x, _ in lit)
