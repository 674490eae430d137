import pytest

from wirefdf.geometry import Camera, Point, project
from wirefdf.heightmap import HeightMap
from wirefdf.raster import Canvas, draw_line, line_pixels, render


def test_canvas_put_and_get_round_trip():
    canvas = Canvas(10, 10)
    canvas.put_pixel(3, 4, 0x123456)
    assert canvas.get_pixel(3, 4) == 0x123456
    assert canvas.get_pixel(4, 3) == 0


def test_canvas_keeps_only_24_bits():
    canvas = Canvas(4, 4)
    canvas.put_pixel(1, 1, 0x7F00FF00)
    assert canvas.get_pixel(1, 1) == 0x00FF00


def test_canvas_ignores_out_of_range_pixels():
    canvas = Canvas(4, 4)
    canvas.put_pixel(-1, 0, 0xFFFFFF)
    canvas.put_pixel(4, 0, 0xFFFFFF)
    canvas.put_pixel(0, 4, 0xFFFFFF)
    pixels = [canvas.get_pixel(x, y) for y in range(4) for x in range(4)]
    assert pixels == [0] * 16


def test_canvas_get_pixel_out_of_range_raises():
    canvas = Canvas(4, 4)
    with pytest.raises(IndexError):
        canvas.get_pixel(4, 0)


def test_canvas_clear():
    canvas = Canvas(5, 5)
    canvas.put_pixel(2, 2, 0xABCDEF)
    canvas.clear()
    assert canvas.get_pixel(2, 2) == 0
    assert len(canvas.data) == 5 * 5 * 3


def test_canvas_rejects_bad_size():
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_horizontal_line_covers_every_column():
    pixels = list(line_pixels(Point(0, 0, color=1), Point(5, 0, color=1)))
    assert [(x, y) for x, y, _ in pixels] == [(x, 0) for x in range(6)]


def test_line_is_drawn_from_leftmost_point():
    pixels = list(line_pixels(Point(5, 1), Point(0, 0)))
    assert pixels[0][:2] == (0, 0)
    assert pixels[-1][:2] == (5, 1)


def test_diagonal_line():
    pixels = list(line_pixels(Point(0, 0), Point(3, 3)))
    assert [(x, y) for x, y, _ in pixels] == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_steep_line_visits_each_row_once():
    pixels = list(line_pixels(Point(0, 0), Point(-2, 5)))
    ys = [y for _, y, _ in pixels]
    xs = [x for x, _, _ in pixels]
    assert ys == list(range(6))
    assert xs[0] == 0 and xs[-1] == -2
    assert all(a >= b for a, b in zip(xs, xs[1:]))


def test_zero_length_line_draws_nothing():
    assert list(line_pixels(Point(2, 2), Point(2, 2))) == []


def test_gradient_endpoints_match_point_colors():
    start = Point(0, 0, color=0x000000)
    end = Point(255, 10, color=0x0000FF)
    pixels = list(line_pixels(start, end))
    assert pixels[0][2] == 0x000000
    assert pixels[-1][2] == 0x0000FF
    blues = [color & 0xFF for _, _, color in pixels]
    assert blues == sorted(blues)


def test_uniform_color_line():
    pixels = list(line_pixels(Point(0, 0, color=0x445566), Point(7, 3, color=0x445566)))
    assert {color for _, _, color in pixels} == {0x445566}


def test_draw_line_sets_pixels():
    canvas = Canvas(10, 10)
    draw_line(canvas, Point(1, 1, color=0x00FF00), Point(8, 1, color=0x00FF00))
    assert all(canvas.get_pixel(x, 1) == 0x00FF00 for x in range(1, 9))
    assert canvas.get_pixel(0, 1) == 0


def test_render_draws_vertices_and_clears():
    color = 0x336699
    hmap = HeightMap(heights=[[0, 0], [0, 0]], colors=[[color, color], [color, color]])
    camera = Camera(zoom=5, position_x=20, position_y=20)
    canvas = Canvas(40, 40)
    canvas.put_pixel(0, 0, 0xFFFFFF)
    render(canvas, camera, hmap)
    assert canvas.get_pixel(0, 0) == 0
    for x in range(2):
        for y in range(2):
            point = project(camera, hmap, x, y)
            assert canvas.get_pixel(point.x, point.y) == color
    drawn = {
        canvas.get_pixel(x, y)
        for x in range(40)
        for y in range(40)
        if canvas.get_pixel(x, y)
    }
    assert drawn == {color}