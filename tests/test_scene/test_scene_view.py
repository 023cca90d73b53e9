"""Tests for the scene view and its props."""

import pytest

from pitchside.core.config import ColorScheme
from pitchside.core.models.entity import BALL_ID, Ball, Player
from pitchside.core.projector import Projector
from pitchside.scene import PropCollector, PropShape, SceneView, pitch_outline
from pitchside.scene.scene import make_prop


@pytest.fixture
def scene(loaded_controller):
    target = PropCollector()
    view = SceneView(
        loaded_controller.store,
        target,
        projector=loaded_controller.projector,
        colors=loaded_controller.config.colors,
    )
    view.attach()
    yield view, target
    view.detach()


class TestMakeProp:
    def test_player_prop(self):
        player = Player(id=3, name="Alice", number="9", grade=3, x=50, y=50)
        prop = make_prop(player, Projector(), ColorScheme())
        assert prop.shape is PropShape.DISC_PILLAR
        assert prop.position == pytest.approx((0, 0, 0))
        assert prop.label == "9"
        assert prop.sublabel == "Alice"
        assert prop.color == "#f44336"

    def test_ball_prop(self):
        prop = make_prop(Ball(x=100, y=0), Projector(), ColorScheme())
        assert prop.shape is PropShape.SPHERE
        assert prop.position == pytest.approx((50, 0, -35))
        assert prop.scale < 1.0
        assert prop.label == ""

    def test_not_an_entity(self):
        with pytest.raises(TypeError):
            make_prop("player", Projector(), ColorScheme())


class TestSceneView:
    def test_attach_draws_current_state(self, scene, loaded_controller):
        view, target = scene
        assert len(target.props) == len(loaded_controller.store)
        assert target.props[-1].entity_id == BALL_ID

    def test_follows_store_moves(self, scene, loaded_controller):
        view, target = scene
        loaded_controller.store.move_entity(0, 100, 100)
        prop = next(p for p in target.props if p.entity_id == 0)
        assert prop.position == pytest.approx((50, 0, 35))

    def test_follows_reload(self, scene, loaded_controller, sheet_factory):
        view, target = scene
        loaded_controller.load_text(sheet_factory(2))
        assert [p.entity_id for p in target.props] == [0, 1, BALL_ID]

    def test_follows_failed_load(self, scene, loaded_controller):
        view, target = scene
        loaded_controller.store.clear()
        assert target.props == []

    def test_detach_stops_updates(self, scene, loaded_controller):
        view, target = scene
        view.detach()
        before = target.props
        loaded_controller.store.move_entity(0, 1, 1)
        assert target.props == before

    def test_two_views_agree(self, scene, loaded_controller):
        view, target = scene
        other = PropCollector()
        SceneView(loaded_controller.store, other, projector=loaded_controller.projector).attach()
        loaded_controller.store.move_entity(BALL_ID, 20, 80)
        assert [p.position for p in other.props] == [p.position for p in target.props]


class TestPitchOutline:
    def test_border_corners(self):
        border, halfway, circle = pitch_outline()
        xs = {p.x for p in border}
        zs = {p.z for p in border}
        assert xs == {-50, 50}
        assert zs == {-35, 35}
        assert border[0] == border[-1]

    def test_circle_is_closed(self):
        circle = pitch_outline(segments=12)[2]
        assert len(circle) == 13
        assert circle[0] == pytest.approx(circle[-1])
        for point in circle:
            assert (point.x ** 2 + point.z ** 2) ** 0.5 == pytest.approx(9)
