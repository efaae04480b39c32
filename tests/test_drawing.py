import pytest

from shapesketch.drawing import DrawMode, MouseButton, Sketcher, mode_for_key
from shapesketch.shapes import Arc, Circle, Dot, Line, Vec3, rectangle_corners, rectangle_edges
from shapesketch.world import ReloadLevel, World

LEFT = MouseButton.LEFT
RIGHT = MouseButton.RIGHT

A = Vec3(1.0, 0.0, 1.0)
B = Vec3(3.0, 0.0, -2.0)
C = Vec3(-1.0, 0.0, 4.0)


def make(mode):
    world = World()
    sketcher = Sketcher(world)
    sketcher.set_mode(mode)
    return world, sketcher


@pytest.mark.parametrize(
    "key, mode",
    [
        ("Escape", DrawMode.NONE),
        ("d", DrawMode.DOT),
        ("s", DrawMode.LINE),
        ("r", DrawMode.RECTANGLE),
        ("c", DrawMode.CIRCLE),
        ("a", DrawMode.ARC),
    ],
)
def test_mode_for_key(key, mode):
    assert mode_for_key(key) is mode


def test_unknown_key_selects_nothing():
    assert mode_for_key("q") is None


def test_none_mode_ignores_clicks():
    world, sketcher = make(DrawMode.NONE)
    assert sketcher.click(LEFT, A) == []
    assert len(world) == 0


def test_dot_mode_spawns_on_left_only():
    world, sketcher = make(DrawMode.DOT)
    assert sketcher.click(LEFT, A) == [Dot(A)]
    assert sketcher.click(RIGHT, B) == []
    assert world.of_type(Dot) == [Dot(A)]


def test_spawned_shapes_survive_soft_reload():
    world, sketcher = make(DrawMode.DOT)
    sketcher.click(LEFT, A)
    assert world.despawn_up_to(ReloadLevel.SOFT) == 0
    assert world.despawn_up_to(ReloadLevel.HARD) == 1


def test_line_chain():
    world, sketcher = make(DrawMode.LINE)
    assert sketcher.click(LEFT, A) == []
    assert sketcher.click(LEFT, B) == [Dot(A), Dot(B), Line(A, B)]
    assert sketcher.click(LEFT, C) == [Dot(C), Line(B, C)]
    assert sketcher.chain_count == 2
    assert world.of_type(Line) == [Line(A, B), Line(B, C)]


def test_line_right_click_ends_chain():
    world, sketcher = make(DrawMode.LINE)
    sketcher.click(LEFT, A)
    sketcher.click(LEFT, B)
    sketcher.click(RIGHT, B)
    assert sketcher.chain_count == 0
    assert sketcher.preview(C) == []
    sketcher.click(LEFT, B)
    assert sketcher.click(LEFT, C) == [Dot(B), Dot(C), Line(B, C)]


def test_rectangle_spawns_corners_and_edges():
    world, sketcher = make(DrawMode.RECTANGLE)
    sketcher.click(LEFT, A)
    sketcher.click(LEFT, B)
    assert world.of_type(Dot) == [Dot(p) for p in rectangle_corners(A, B)]
    assert world.of_type(Line) == rectangle_edges(A, B)
    assert sketcher.points == [None, None, None]


def test_rectangle_right_click_cancels():
    world, sketcher = make(DrawMode.RECTANGLE)
    sketcher.click(LEFT, A)
    sketcher.click(RIGHT, B)
    sketcher.click(LEFT, B)
    assert len(world) == 0


def test_circle_radius_is_distance():
    world, sketcher = make(DrawMode.CIRCLE)
    sketcher.click(LEFT, A)
    spawned = sketcher.click(LEFT, B)
    assert spawned[0] == Dot(A)
    circle = spawned[1]
    assert circle.center == A
    assert circle.radius == pytest.approx(A.distance(B))


def test_arc_needs_three_clicks():
    world, sketcher = make(DrawMode.ARC)
    assert sketcher.click(LEFT, A) == []
    assert sketcher.click(LEFT, B) == []
    assert sketcher.click(LEFT, C) == [Dot(A), Arc(A, B, C)]
    assert sketcher.points == [None, None, None]


def test_set_mode_discards_progress():
    world, sketcher = make(DrawMode.LINE)
    sketcher.click(LEFT, A)
    sketcher.set_mode(DrawMode.CIRCLE)
    assert sketcher.mode is DrawMode.CIRCLE
    assert sketcher.points == [None, None, None]


def test_preview_line_and_rectangle():
    _, sketcher = make(DrawMode.LINE)
    assert sketcher.preview(B) == []
    sketcher.click(LEFT, A)
    assert sketcher.preview(B) == [Line(A, B)]
    _, rect = make(DrawMode.RECTANGLE)
    rect.click(LEFT, A)
    assert rect.preview(C) == rectangle_edges(A, C)


def test_preview_circle_follows_cursor():
    _, sketcher = make(DrawMode.CIRCLE)
    sketcher.click(LEFT, A)
    (guide,) = sketcher.preview(C)
    assert guide.center == A
    assert guide.radius == pytest.approx(A.distance(C))


def test_preview_arc_after_start():
    _, sketcher = make(DrawMode.ARC)
    sketcher.click(LEFT, A)
    circle, spoke = sketcher.preview(C)
    assert circle.radius == pytest.approx(A.distance(C))
    assert spoke == Line(A, C)
    sketcher.click(LEFT, B)
    circle, spoke, tracker = sketcher.preview(C)
    assert circle == Circle(A, A.distance(B))
    assert spoke == Line(A, B)
    assert tracker == Line(A, C)