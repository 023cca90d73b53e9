"""Tests for the board drag state machine."""

import pytest

from pitchside.core.layout import assign_layout
from pitchside.core.models.entity import BALL_ID, Player
from pitchside.core.projector import ScreenRect
from pitchside.state.drag import DragController, DragPhase
from pitchside.state.store import LayoutStore


RECT = ScreenRect(left=100, top=50, width=500, height=350)


@pytest.fixture
def store() -> LayoutStore:
    store = LayoutStore()
    store.load(assign_layout([Player(id=i) for i in range(12)]))
    return store


@pytest.fixture
def drag(store) -> DragController:
    return DragController(store)


def _pointer(x_pct: float, y_pct: float) -> tuple[float, float]:
    return RECT.left + RECT.width * x_pct / 100, RECT.top + RECT.height * y_pct / 100


class TestDragScenario:
    def test_drag_entity_zero(self, store, drag):
        """Drag id 0 to 40% / 60% of the pitch rect, then release."""
        assert drag.pointer_down(0)
        assert drag.phase is DragPhase.DRAGGING
        assert drag.is_dragging_entity(0)

        drag.pointer_move(*_pointer(40, 60), RECT)
        drag.pointer_up()

        entity = store.get(0)
        assert (entity.x, entity.y) == pytest.approx((40, 60))
        assert drag.phase is DragPhase.IDLE

    def test_move_without_pointer_down_is_noop(self, store, drag):
        before = store.snapshot()
        version = store.version
        assert drag.pointer_move(*_pointer(10, 10), RECT) is None
        assert store.snapshot() == before
        assert store.version == version

    def test_move_after_release_is_noop(self, store, drag):
        drag.pointer_down(3)
        drag.pointer_up()
        before = store.snapshot()
        drag.pointer_move(*_pointer(90, 90), RECT)
        assert store.snapshot() == before

    def test_every_move_writes(self, store, drag):
        drag.pointer_down(5)
        for pct in (10, 20, 30):
            point = drag.pointer_move(*_pointer(pct, pct), RECT)
            assert point == pytest.approx((pct, pct))
            assert (store.get(5).x, store.get(5).y) == pytest.approx((pct, pct))

    def test_leave_ends_drag(self, drag):
        drag.pointer_down(2)
        drag.pointer_leave()
        assert drag.phase is DragPhase.IDLE
        assert drag.dragging_id is None

    def test_release_without_move(self, store, drag):
        before = (store.get(4).x, store.get(4).y)
        drag.pointer_down(4)
        drag.pointer_up()
        assert (store.get(4).x, store.get(4).y) == before

    def test_up_when_idle_is_harmless(self, drag):
        drag.pointer_up()
        drag.pointer_leave()
        assert drag.phase is DragPhase.IDLE


class TestDragIdentity:
    def test_zero_is_a_real_drag(self, drag):
        drag.pointer_down(0)
        assert drag.is_dragging
        assert drag.is_dragging_entity(0)
        assert not drag.is_dragging_entity(1)

    def test_idle_matches_nothing(self, drag):
        assert not drag.is_dragging_entity(0)
        assert not drag.is_dragging_entity(BALL_ID)

    def test_unknown_entity_stays_idle(self, drag):
        assert drag.pointer_down(404) is False
        assert drag.phase is DragPhase.IDLE

    def test_ball_drags_like_a_player(self, store, drag):
        drag.pointer_down(BALL_ID)
        drag.pointer_move(*_pointer(75, 25), RECT)
        assert store.ball().position == pytest.approx((75, 25))

    def test_drag_onto_bench(self, store, drag):
        drag.pointer_down(1)
        drag.pointer_move(RECT.right + RECT.width * 0.1, RECT.top, RECT)
        assert store.get(1).x == pytest.approx(110)

    def test_reload_mid_drag_drops_drag(self, store, drag):
        drag.pointer_down(11)
        store.load(assign_layout([Player(id=0)]))
        assert drag.pointer_move(*_pointer(50, 50), RECT) is None
        assert drag.phase is DragPhase.IDLE
