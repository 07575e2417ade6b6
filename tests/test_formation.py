"""Tests for the enemy formation factory and formation movement."""

from block_invaders.formation import Formation, create_enemies
from block_invaders.settings import GameSettings


class TestCreateEnemies:
    def test_builds_fifteen_enemies(self, settings):
        assert len(create_enemies(settings)) == 15

    def test_column_major_positions(self, settings):
        positions = [e.position.to_tuple() for e in create_enemies(settings)]

        expected = [
            (c * 40 + 60, r * 40 + 30) for c in range(5) for r in range(3)
        ]
        assert positions == expected

    def test_is_deterministic(self, settings):
        first = [e.position.to_tuple() for e in create_enemies(settings)]
        second = [e.position.to_tuple() for e in create_enemies(settings)]
        assert first == second

    def test_enemy_defaults(self, settings):
        for e in create_enemies(settings):
            assert e.size.to_tuple() == (20, 20)
            assert e.color == "red"
            assert e.velocity.vx == 2

    def test_all_enemies_share_one_velocity(self, settings):
        enemies = create_enemies(settings)
        assert all(e.velocity is enemies[0].velocity for e in enemies)

    def test_initial_x_range(self, settings):
        enemies = create_enemies(settings)
        assert min(e.collider.left for e in enemies) >= 60
        assert max(e.collider.right for e in enemies) <= 60 + 4 * (20 + 20) + 20

    def test_custom_layout(self):
        settings = GameSettings.from_dict({"formation": {"columns": 2, "rows": 4}})
        enemies = create_enemies(settings)
        assert len(enemies) == 8
        assert [(e.col, e.row) for e in enemies[:4]] == [(0, r) for r in range(4)]


class TestFormation:
    def test_create_wraps_shared_velocity(self, settings):
        formation = Formation.create(settings)
        assert len(formation) == 15
        assert formation.dx == 2
        assert all(e.velocity is formation.velocity for e in formation)

    def test_advance_moves_every_enemy(self, settings):
        formation = Formation.create(settings)
        before = [e.position.to_tuple() for e in formation]

        formation.advance()

        after = [e.position.to_tuple() for e in formation]
        assert after == [(x + 2, y) for x, y in before]

    def test_reverse_and_descend(self, settings):
        formation = Formation.create(settings)
        ys = [e.position.y for e in formation]

        formation.reverse_and_descend()

        assert formation.dx == -2
        assert all(e.velocity.vx == -2 for e in formation)
        assert [e.position.y for e in formation] == [y + 20 for y in ys]

    def test_touches_edge(self, settings):
        formation = Formation.create(settings)
        assert not formation.touches_edge(800)

        formation.enemies[-1].position.x = 781
        assert formation.touches_edge(800)

        formation.enemies[-1].position.x = 780
        formation.enemies[0].position.x = -1
        assert formation.touches_edge(800)

    def test_lowest_edge(self, settings):
        formation = Formation.create(settings)
        assert formation.lowest_edge() == 130

        formation.enemies = []
        assert formation.lowest_edge() is None
