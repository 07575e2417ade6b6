"""
Simulation systems.

One tick runs every system of a mini-arcade-core ``SystemPipeline`` in
ascending ``order``.
The order is part of the game rules: the player moves, then bullets, then the
formation, then collisions are resolved, then loss and win are checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mini_arcade_core.scenes.systems.base_system import BaseSystem
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from block_invaders.entities import Bullet
from block_invaders.geometry import TICK
from block_invaders.utils import logger
from block_invaders.world import BlockInvadersTickContext, GameState

BlockInvadersSystem = BaseSystem[BlockInvadersTickContext]
BlockInvadersPipeline = SystemPipeline[BlockInvadersTickContext]


@dataclass
class PlayerMoveSystem(BlockInvadersSystem):
    """
    Move the player from the held keys.

    Right wins over left when both are held. A step that would cross an edge
    is skipped rather than clamped, so the player may stop short of the edge
    by up to one step.
    """

    name: str = "block_invaders_player_move"
    order: int = 10

    def step(self, ctx: BlockInvadersTickContext):
        vw, _ = ctx.world.viewport
        player = ctx.world.player
        box = player.collider

        if ctx.input_state.move_right and box.right + player.speed <= vw:
            player.position.x += player.speed
        elif ctx.input_state.move_left and box.left - player.speed >= 0:
            player.position.x -= player.speed


@dataclass
class BulletMoveSystem(BlockInvadersSystem):
    """Moves all bullets and drops the ones above the top edge."""

    name: str = "block_invaders_bullet_move"
    order: int = 20

    def step(self, ctx: BlockInvadersTickContext):
        if not ctx.world.bullets:
            return

        alive: list[Bullet] = []
        for b in ctx.world.bullets:
            b.position.x, b.position.y = b.velocity.advance(
                b.position.x, b.position.y, TICK
            )
            if b.position.y < 0:
                continue
            alive.append(b)

        ctx.world.bullets = alive


@dataclass
class FormationSystem(BlockInvadersSystem):
    """
    Move the formation:
    - Move horizontally
    - If any enemy is past a wall -> reverse direction and drop down
    """

    name: str = "block_invaders_formation"
    order: int = 30

    def step(self, ctx: BlockInvadersTickContext):
        formation = ctx.world.formation
        if not formation.enemies:
            return

        vw, _ = ctx.world.viewport
        formation.advance()

        if formation.touches_edge(vw):
            formation.reverse_and_descend()
            logger.debug(
                f"Formation bounced, dx={formation.dx}, "
                f"lowest edge={formation.lowest_edge()}"
            )


@dataclass
class BulletEnemyCollisionSystem(BlockInvadersSystem):
    """
    Removes bullets and the enemies they hit.

    A bullet hits at most one enemy per tick: the first overlapping enemy in
    formation order.
    """

    name: str = "block_invaders_bullet_enemy_collision"
    order: int = 40

    def step(self, ctx: BlockInvadersTickContext):
        world = ctx.world
        if not world.bullets or not world.formation.enemies:
            return

        hit_enemies: set[int] = set()
        alive_bullets: list[Bullet] = []
        for b in world.bullets:
            target = None
            for e in world.formation.enemies:
                if id(e) in hit_enemies:
                    continue
                if b.collider.intersects(e.collider):
                    target = e
                    break

            if target is None:
                alive_bullets.append(b)
                continue

            hit_enemies.add(id(target))
            logger.debug(
                f"Hit! enemy at row {target.row} col {target.col}, "
                f"position {target.position.to_tuple()}"
            )

        if not hit_enemies:
            return

        world.bullets = alive_bullets
        world.formation.enemies = [
            e for e in world.formation.enemies if id(e) not in hit_enemies
        ]


@dataclass
class DefeatSystem(BlockInvadersSystem):
    """Ends the game once an enemy's bottom edge is below the player's top."""

    name: str = "block_invaders_defeat"
    order: int = 50

    def step(self, ctx: BlockInvadersTickContext):
        world = ctx.world
        player_y = world.player.position.y
        for e in world.formation.enemies:
            if e.collider.bottom > player_y:
                world.state = GameState.DEFEATED
                logger.debug(f"You lost! enemy reached y={e.collider.bottom}")
                return


@dataclass
class ClearedSystem(BlockInvadersSystem):
    name: str = "block_invaders_cleared"
    order: int = 60

    def enabled(self, ctx: BlockInvadersTickContext) -> bool:
        # terminal states are final
        return not ctx.world.state.is_terminal

    def step(self, ctx: BlockInvadersTickContext):
        world = ctx.world
        if not world.formation.enemies:
            world.state = GameState.CLEARED
            logger.debug("You won!")


def default_systems() -> list[BlockInvadersSystem]:
    return [
        PlayerMoveSystem(),
        BulletMoveSystem(),
        FormationSystem(),
        BulletEnemyCollisionSystem(),
        DefeatSystem(),
        ClearedSystem(),
    ]


def build_pipeline(
    systems: Iterable[BlockInvadersSystem] | None = None,
) -> BlockInvadersPipeline:
    """
    Build the tick pipeline, sorted by ``order``.

    :param systems: Systems to run, the game rules if omitted
    :type systems: Iterable[BlockInvadersSystem] | None

    :return: Pipeline ready to step
    :rtype: BlockInvadersPipeline
    """
    pipeline = BlockInvadersPipeline()
    pipeline.extend(default_systems() if systems is None else systems)
    return pipeline
