"""Tests for the geometry primitives used by collision detection."""

from mini_arcade_core.spaces.d2.collision2d import RectCollider

from block_invaders.geometry import (
    TICK,
    Position2D,
    Size2D,
    StrictRectCollider,
    Velocity2D,
)


def box(x, y, w, h):
    return StrictRectCollider(Position2D(x, y), Size2D(w, h))


class TestStrictRectCollider:
    """Strict axis-aligned overlap."""

    def test_overlapping_boxes_intersect(self):
        assert box(0, 0, 10, 10).intersects(box(5, 5, 10, 10))
        assert box(5, 5, 10, 10).intersects(box(0, 0, 10, 10))

    def test_contained_box_intersects(self):
        assert box(0, 0, 20, 20).intersects(box(5, 5, 3, 3))

    def test_shared_vertical_edge_does_not_intersect(self):
        assert not box(0, 0, 10, 10).intersects(box(10, 0, 10, 10))
        assert not box(10, 0, 10, 10).intersects(box(0, 0, 10, 10))

    def test_shared_horizontal_edge_does_not_intersect(self):
        assert not box(0, 0, 10, 10).intersects(box(0, 10, 10, 10))
        assert not box(0, 10, 10, 10).intersects(box(0, 0, 10, 10))

    def test_separated_boxes_do_not_intersect(self):
        assert not box(0, 0, 10, 10).intersects(box(50, 50, 10, 10))

    def test_edges(self):
        b = box(3, 4, 10, 20)
        assert (b.left, b.top, b.right, b.bottom) == (3, 4, 13, 24)

    def test_is_a_library_collider(self):
        assert isinstance(box(0, 0, 1, 1), RectCollider)

    def test_accepts_a_plain_library_collider(self):
        plain = RectCollider(Position2D(10, 0), Size2D(10, 10))
        assert not box(0, 0, 10, 10).intersects(plain)
        assert box(0, 0, 11, 10).intersects(plain)

    def test_stricter_than_library_collider_on_touching_edges(self):
        a = RectCollider(Position2D(0, 0), Size2D(10, 10))
        b = RectCollider(Position2D(10, 0), Size2D(10, 10))
        assert a.intersects(b)
        assert not box(0, 0, 10, 10).intersects(box(10, 0, 10, 10))


def test_velocity_advance_by_one_tick():
    assert Velocity2D(2, -7).advance(10, 10, TICK) == (12, 3)
