import pytest

from mandelscope.plane import Plane, Vec2d, Vec2i


def make_plane(zoom=1.0):
    return Plane(
        screen=Vec2i(1920, 1080),
        offset=Vec2d(2.5, -1.0),
        scale=1920 / 3.5,
        zoom=zoom,
    )


def test_default_vectors_are_origin():
    plane = Plane()
    assert plane.screen == Vec2i(0, 0)
    assert plane.offset == Vec2d(0.0, 0.0)


@pytest.mark.parametrize("point", [(0.0, 0.0), (-2.5, 1.0), (0.3, -0.7), (1.25, 0.5)])
@pytest.mark.parametrize("zoom", [1.0, 3.0, 250.0])
def test_to_screen_then_from_screen_round_trip(point, zoom):
    plane = make_plane(zoom)
    screen = plane.to_screen(*point)
    back = plane.from_screen(screen.x, screen.y)
    assert back.x == pytest.approx(point[0])
    assert back.y == pytest.approx(point[1])


def test_negative_offset_point_maps_to_screen_origin():
    plane = make_plane()
    screen = plane.to_screen(-plane.offset.x, -plane.offset.y)
    assert screen.x == pytest.approx(0.0)
    assert screen.y == pytest.approx(0.0)


def test_from_screen_is_no_offset_minus_offset():
    plane = make_plane(zoom=7.0)
    raw = plane.from_screen_no_offset(123.0, 456.0)
    full = plane.from_screen(123.0, 456.0)
    assert full.x == pytest.approx(raw.x - plane.offset.x)
    assert full.y == pytest.approx(raw.y - plane.offset.y)


def test_from_screen_no_offset_flips_y_axis():
    plane = make_plane()
    down = plane.from_screen_no_offset(0.0, 100.0)
    assert down.y < 0
    assert down.x == 0


def test_from_screen_no_offset_shrinks_with_zoom():
    near = make_plane(zoom=1.0).from_screen_no_offset(100.0, 0.0)
    far = make_plane(zoom=4.0).from_screen_no_offset(100.0, 0.0)
    assert far.x == pytest.approx(near.x / 4.0)


def test_zoom_around_changes_zoom_by_dz():
    plane = make_plane()
    plane.zoom_around(500, 300, 0.75)
    assert plane.zoom == pytest.approx(1.75)


@pytest.mark.parametrize("mouse", [(0, 0), (960, 540), (1919, 1079), (17, 900)])
def test_zoom_around_keeps_point_under_mouse(mouse):
    plane = make_plane()
    before = plane.from_screen(*mouse)
    plane.zoom_around(mouse[0], mouse[1], 2.5)
    after = plane.from_screen(*mouse)
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_zoom_around_screen_origin_keeps_offset():
    plane = make_plane()
    plane.zoom_around(0, 0, 5.0)
    assert plane.offset == Vec2d(2.5, -1.0)


def test_zoom_around_truncates_mouse_position():
    exact = make_plane()
    fractional = make_plane()
    exact.zoom_around(10, 20, 1.0)
    fractional.zoom_around(10.9, 20.7, 1.0)
    assert fractional.offset == exact.offset
    assert fractional.zoom == exact.zoom


def test_zoom_in_then_out_restores_view():
    plane = make_plane()
    plane.zoom_around(700, 400, 3.0)
    plane.zoom_around(700, 400, -3.0)
    assert plane.zoom == pytest.approx(1.0)
    assert plane.offset.x == pytest.approx(2.5)
    assert plane.offset.y == pytest.approx(-1.0)