"""Tests for the coordinate projector."""

import pytest

from pitchside.core.models.entity import BoardPoint, WorldPoint
from pitchside.core.projector import (
    DEFAULT_PROJECTOR,
    Projector,
    ScreenRect,
    board_to_world,
    screen_to_board,
)


IDENTITY_RECT = ScreenRect(0, 0, 100, 100)


class TestBoardToWorld:
    """Tests for board -> world projection."""

    def test_centre_maps_to_origin(self):
        assert DEFAULT_PROJECTOR.board_to_world(BoardPoint(50, 50)) == WorldPoint(0, 0, 0)

    def test_corners(self):
        assert DEFAULT_PROJECTOR.board_to_world(BoardPoint(0, 0)) == pytest.approx((-50, 0, -35))
        assert DEFAULT_PROJECTOR.board_to_world(BoardPoint(100, 100)) == pytest.approx((50, 0, 35))

    def test_depth_axis_scaled(self):
        world = board_to_world(BoardPoint(50, 60))
        assert world.x == 0
        assert world.z == pytest.approx(7.0)

    def test_bench_maps_outside_pitch(self):
        world = DEFAULT_PROJECTOR.board_to_world(BoardPoint(105, 10))
        assert world.x == pytest.approx(55)

    def test_custom_depth_scale(self):
        projector = Projector(depth_scale=0.5)
        assert projector.board_to_world(BoardPoint(50, 100)).z == pytest.approx(25)

    def test_elevation(self):
        assert DEFAULT_PROJECTOR.board_to_world(BoardPoint(50, 50), elevation=2.0).y == 2.0

    def test_pure(self):
        point = BoardPoint(37.5, 81.25)
        assert DEFAULT_PROJECTOR.board_to_world(point) == DEFAULT_PROJECTOR.board_to_world(point)


class TestScreenToBoard:
    """Pointer mapping is relative to the pitch's own rectangle."""

    def test_relative_to_rect_origin(self):
        rect = ScreenRect(left=200, top=100, width=400, height=280)
        point = screen_to_board(200 + 160, 100 + 168, rect)
        assert point == pytest.approx((40, 60))

    def test_outer_container_offset_does_not_leak(self):
        """Same relative pointer position, different page offset, same result."""
        a = ScreenRect(left=0, top=0, width=400, height=280)
        b = ScreenRect(left=57, top=33, width=400, height=280)
        assert screen_to_board(100, 70, a) == pytest.approx(screen_to_board(157, 103, b))

    def test_right_of_pitch_is_bench(self):
        rect = ScreenRect(0, 0, 200, 140)
        assert screen_to_board(210, 14, rect) == pytest.approx((105, 10))

    def test_zoomed_rect(self):
        """After a 1.5x zoom the rendered rect is larger; the mapping follows it."""
        rect = ScreenRect(10, 10, 200, 140).scaled(1.5)
        assert rect.width == 300
        assert screen_to_board(10 + 150, 10 + 105, rect) == pytest.approx((50, 50))

    def test_degenerate_rect(self):
        assert screen_to_board(5, 5, ScreenRect(0, 0, 0, 0)) == (50, 50)


class TestRoundTrip:
    def test_world_back_to_board(self):
        for x, y in [(0, 0), (10, 50), (33.3, 71.7), (100, 100), (105, 235)]:
            original = BoardPoint(x, y)
            world = DEFAULT_PROJECTOR.board_to_world(original)
            back = DEFAULT_PROJECTOR.world_to_board(world)
            sx, sy = Projector.board_to_screen(back, IDENTITY_RECT)
            assert screen_to_board(sx, sy, IDENTITY_RECT) == pytest.approx((x, y))

    def test_screen_round_trip_with_offset_rect(self):
        rect = ScreenRect(12, 3, 80, 28)
        sx, sy = Projector.board_to_screen(BoardPoint(40, 60), rect)
        assert screen_to_board(sx, sy, rect) == pytest.approx((40, 60))
