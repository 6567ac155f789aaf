import pytest

from coordinate_system import TileMapper
from drawing_utils import circle_layout, draw_circle, draw_dome, draw_ellipse, draw_grid, ellipse_layout
from pixel_buffer import PixelBuffer
from raster import InvalidArgumentError
from render_config import RenderConfig, DomeDimensions

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
GREY = (153, 153, 153, 255)
CIRCLE_DOT = (208, 0, 0, 255)
ELLIPSE_DOT = (0, 0, 208, 255)


@pytest.fixture
def config():
    # 20x10 tiles of 10px, tile fill 9px
    return RenderConfig.from_canvas_size(200, 100, tile_spacing=10)


@pytest.fixture
def mapper(config):
    return TileMapper.for_config(PixelBuffer(), config)


def tile_color(mapper, tile):
    x, y = tile
    return mapper.pixel_buffer.getpixel(x * 10 + 5, y * 10 + 5)


def test_draw_grid_paints_tiles_with_border(mapper, config):
    draw_grid(mapper, config)
    buffer = mapper.pixel_buffer
    assert buffer.image.size == (200, 100)
    assert buffer.getpixel(0, 0) == WHITE
    assert buffer.getpixel(8, 8) == WHITE
    assert buffer.getpixel(9, 0) == BLACK
    assert buffer.getpixel(0, 9) == BLACK
    assert buffer.getpixel(195, 95) == WHITE


def test_draw_grid_without_border(config):
    config = config.with_grid(False)
    mapper = TileMapper.for_config(PixelBuffer(), config)
    draw_grid(mapper, config)
    assert mapper.pixel_buffer.getpixel(9, 9) == WHITE


def test_circle_layout_is_centered(config):
    points, center = circle_layout(config, 3)
    assert center == (10, 5)
    assert (0, 3) in points


def test_ellipse_layout_corner_and_marker(config):
    points, corner, marker = ellipse_layout(config, 4, 6)
    assert corner == (7, 3)
    assert marker == (3, 2)
    assert (0, 2) in points


def test_ellipse_layout_odd_size(config):
    _, corner, marker = ellipse_layout(config, 3, 5)
    assert corner == (7, 3)
    assert marker == (2, 1)


def test_draw_dome_circle(mapper, config):
    markers = draw_dome(mapper, config, True, False, DomeDimensions(radius=3))
    assert markers == [(10, 5)]
    assert tile_color(mapper, (10, 5)) == CIRCLE_DOT
    assert tile_color(mapper, (10, 8)) == BLACK
    assert tile_color(mapper, (13, 5)) == BLACK
    assert tile_color(mapper, (11, 5)) == WHITE


def test_draw_dome_ellipse(mapper, config):
    markers = draw_dome(mapper, config, False, True, DomeDimensions(height=4, width=6))
    assert markers == [(10, 5)]
    assert tile_color(mapper, (10, 5)) == ELLIPSE_DOT
    assert tile_color(mapper, (7, 5)) == GREY
    assert tile_color(mapper, (13, 5)) == GREY


def test_draw_dome_both_paints_ellipse_last(mapper, config):
    markers = draw_dome(mapper, config, True, True, DomeDimensions(radius=3, height=4, width=6))
    assert markers == [(10, 5), (10, 5)]
    assert tile_color(mapper, (10, 5)) == ELLIPSE_DOT


def test_draw_dome_nothing_selected(mapper, config):
    assert draw_dome(mapper, config, False, False, DomeDimensions()) == []
    assert tile_color(mapper, (10, 5)) == WHITE


def test_draw_dome_zero_radius_marks_center(mapper, config):
    draw_dome(mapper, config, True, False, DomeDimensions(radius=0))
    assert tile_color(mapper, (10, 5)) == CIRCLE_DOT


def test_draw_dome_shapes_may_leave_the_grid(mapper, config):
    markers = draw_dome(mapper, config, True, False, DomeDimensions(radius=30))
    assert markers == [(10, 5)]


@pytest.mark.parametrize("circle, ellipse, dimensions", [
    (True, False, DomeDimensions(radius=-1)),
    (False, True, DomeDimensions(height=-1, width=4)),
    (True, True, DomeDimensions(radius=3, height=2, width=-4)),
])
def test_draw_dome_invalid_leaves_buffer_untouched(mapper, config, circle, ellipse, dimensions):
    buffer = mapper.pixel_buffer
    buffer.ensure((200, 100))
    buffer.fill((1, 2, 3, 255))
    with pytest.raises(InvalidArgumentError):
        draw_dome(mapper, config, circle, ellipse, dimensions)
    assert buffer.getpixel(55, 55) == (1, 2, 3, 255)


def test_draw_circle_and_ellipse_return_markers(mapper, config):
    draw_grid(mapper, config)
    assert draw_circle(mapper, config, 2) == (10, 5)
    assert draw_ellipse(mapper, config, 2, 2) == (10, 5)
