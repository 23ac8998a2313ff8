import logging

import pytest

from bezier_sketch.config import SceneConfig
from bezier_sketch.errors import ConfigError
from bezier_sketch.scene import DragState, Scene
from bezier_sketch.vector2 import Vector2


def test_new_scene_is_idle(scene):
    assert scene.points == []
    assert scene.curves == []
    assert scene.drag_state is DragState.IDLE
    assert scene.drag_index is None
    assert not scene.left_down_last_frame
    assert not scene.curve_key_down_last_frame


def test_invalid_config_is_rejected():
    with pytest.raises(ConfigError):
        Scene(SceneConfig(click_radius=0))


# --- Picking ---

def test_pick_within_click_radius(scene):
    scene.add_point(Vector2(100, 100), 4)
    assert scene.pick_point(Vector2(105, 100)) == 0
    assert scene.pick_point(Vector2(200, 200)) is None


def test_pick_includes_points_exactly_on_the_radius(scene):
    scene.add_point(Vector2(0, 0))
    assert scene.pick_point(Vector2(20, 0)) == 0
    assert scene.pick_point(Vector2(20.5, 0)) is None


def test_pick_prefers_closest_point(scene):
    scene.add_point(Vector2(115, 0))
    scene.add_point(Vector2(90, 0))
    assert scene.pick_point(Vector2(100, 0)) == 1


def test_pick_tie_goes_to_earliest_point(scene):
    scene.add_point(Vector2(-10, 0))
    scene.add_point(Vector2(10, 0))
    scene.add_point(Vector2(0, 10))
    assert scene.pick_point(Vector2(0, 0)) == 0


def test_pick_uses_configured_click_radius():
    scene = Scene(SceneConfig(click_radius=5))
    scene.add_point(Vector2(0, 0))
    assert scene.pick_point(Vector2(6, 0)) is None
    scene.set_click_radius(10)
    assert scene.pick_point(Vector2(6, 0)) == 0


# --- Point creation ---

def test_add_point_defaults():
    scene = Scene(SceneConfig(point_radius=7))
    point = scene.add_point()
    assert point.pos == Vector2(0, 0)
    assert point.radius == 7
    assert point.index == 0
    assert scene.add_point(Vector2(1, 1), 2).index == 1


def test_shift_click_creates_point_at_mouse(frame, scene):
    frame(30, 40, left=True, shift=True)
    assert len(scene.points) == 1
    assert scene.points[0].pos == Vector2(30, 40)
    assert scene.points[0].radius == 4
    assert scene.drag_state is DragState.IDLE


def test_holding_shift_click_creates_only_one_point(frame, scene):
    frame(30, 40, left=True, shift=True)
    frame(35, 40, left=True, shift=True)
    frame(40, 40, left=True, shift=True)
    assert len(scene.points) == 1


def test_new_points_use_updated_radius(frame, scene):
    scene.set_point_radius(9)
    frame(1, 1, left=True, shift=True)
    assert scene.points[0].radius == 9


def test_shift_click_on_existing_point_creates_instead_of_picking(frame, scene):
    scene.add_point(Vector2(50, 50))
    frame(50, 50, left=True, shift=True)
    assert len(scene.points) == 2
    assert scene.drag_state is DragState.IDLE


# --- Dragging ---

def test_press_hold_release_drags_point(frame, scene):
    scene.add_point(Vector2(100, 100))

    frame(110, 100, left=True)
    assert scene.drag_state is DragState.DRAGGING
    assert scene.drag_index == 0
    assert scene.points[0].pos == Vector2(110, 100)

    for x, y in [(120, 105), (150, 130), (200, 180)]:
        frame(x, y, left=True)
        assert scene.points[0].pos == Vector2(x, y)

    frame(300, 300, left=False)
    assert scene.points[0].pos == Vector2(200, 180)
    assert scene.drag_state is DragState.IDLE
    assert scene.drag_index is None

    frame(310, 310, left=False)
    assert scene.points[0].pos == Vector2(200, 180)


def test_click_on_empty_space_stays_idle(frame, scene):
    scene.add_point(Vector2(0, 0))
    frame(500, 500, left=True)
    frame(0, 0, left=True)
    assert scene.drag_state is DragState.IDLE
    assert scene.points[0].pos == Vector2(0, 0)


def test_drag_only_moves_the_picked_point(frame, scene):
    scene.add_point(Vector2(0, 0))
    scene.add_point(Vector2(100, 0))
    frame(98, 0, left=True)
    frame(60, 60, left=True)
    assert scene.points[0].pos == Vector2(0, 0)
    assert scene.points[1].pos == Vector2(60, 60)


def test_new_press_picks_again(frame, scene):
    scene.add_point(Vector2(0, 0))
    scene.add_point(Vector2(100, 0))
    frame(0, 0, left=True)
    frame(0, 0, left=False)
    frame(100, 5, left=True)
    assert scene.drag_index == 1
    assert scene.points[1].pos == Vector2(100, 5)


def test_shift_during_drag_holds_point(frame, scene):
    scene.add_point(Vector2(0, 0))
    frame(0, 0, left=True)
    frame(10, 10, left=True, shift=True)
    assert scene.points[0].pos == Vector2(0, 0)
    assert len(scene.points) == 1
    frame(20, 20, left=True)
    assert scene.points[0].pos == Vector2(20, 20)


# --- Curves ---

def test_curve_uses_last_three_points(scene):
    p0 = scene.add_point(Vector2(0, 0))
    scene.add_point(Vector2(10, 0))
    p2 = scene.add_point(Vector2(0, 10))
    scene.config = SceneConfig(sample_step=1.0)

    curve = scene.add_curve()
    assert curve.point_indices == (2, 1, 0)
    samples = curve.update_samples(scene.points)
    assert samples[0] == p0.pos
    assert samples[-1] == p2.pos


def test_curve_key_rising_edge_creates_one_curve(frame, scene):
    for i in range(4):
        scene.add_point(Vector2(i * 10, 0))
    frame(curve_key=True)
    frame(curve_key=True)
    assert len(scene.curves) == 1
    assert scene.curves[0].point_indices == (3, 2, 1)

    frame(curve_key=False)
    frame(curve_key=True)
    assert len(scene.curves) == 2


@pytest.mark.parametrize("count", [0, 1, 2])
def test_curve_gesture_with_too_few_points_is_ignored(frame, scene, caplog, count):
    for i in range(count):
        scene.add_point(Vector2(i, i))
    with caplog.at_level(logging.WARNING, logger="bezier_sketch.scene"):
        frame(curve_key=True)
    assert scene.curves == []
    assert "needs 3 points" in caplog.text
    assert scene.add_curve() is None


def test_curve_key_and_click_in_same_frame(frame, scene):
    scene.add_point(Vector2(0, 0))
    scene.add_point(Vector2(50, 0))
    frame(100, 100, left=True, shift=True, curve_key=True)
    assert len(scene.points) == 3
    assert scene.curves[0].point_indices == (2, 1, 0)


def test_curve_follows_dragged_point(frame, scene, surface):
    scene.add_point(Vector2(0, 0))
    scene.add_point(Vector2(50, 0))
    scene.add_point(Vector2(100, 0))
    frame(curve_key=True)
    midpoint = scene.curves[0].samples[50]
    assert (midpoint.x, midpoint.y) == pytest.approx((50, 0))

    frame(50, 0, left=True, curve_key=True)
    frame(50, 100, left=True, curve_key=True)
    midpoint = scene.curves[0].samples[50]
    assert (midpoint.x, midpoint.y) == pytest.approx((50, 50))


# --- Rendering ---

def test_render_draws_points_then_curves(frame, scene, surface):
    scene.add_point(Vector2(10, 10), 4)
    scene.add_point(Vector2(20, 10), 4)
    scene.add_point(Vector2(30, 10), 4)
    frame(curve_key=True)

    assert surface.circles == [
        (Vector2(6, 6), 4),
        (Vector2(16, 6), 4),
        (Vector2(26, 6), 4),
    ]
    assert len(surface.lines) == 100


def test_curve_with_stale_reference_is_dropped(scene, surface, caplog):
    for i in range(3):
        scene.add_point(Vector2(i, 0))
    scene.add_curve()
    del scene.points[2]

    with caplog.at_level(logging.WARNING, logger="bezier_sketch.scene"):
        scene.render(surface)
    assert scene.curves == []
    assert "Dropping curve" in caplog.text
    assert len(surface.circles) == 2


def test_clear_resets_everything(frame, scene):
    for i in range(3):
        scene.add_point(Vector2(i * 10, 0))
    frame(0, 0, left=True, curve_key=True)
    assert scene.is_dragging

    scene.clear()
    assert scene.points == []
    assert scene.curves == []
    assert scene.drag_state is DragState.IDLE
    assert not scene.left_down_last_frame
    assert not scene.curve_key_down_last_frame
