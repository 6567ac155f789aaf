import pytest

from coordinate_system import TileMapper, tile_bounds, tile_to_pixel
from pixel_buffer import PixelBuffer
from render_config import RenderConfig

BLACK = (0, 0, 0, 255)
RED = (208, 0, 0, 255)


@pytest.fixture
def buffer():
    pixel_buffer = PixelBuffer()
    pixel_buffer.ensure((80, 80))
    return pixel_buffer


def test_tile_to_pixel_origin():
    assert tile_to_pixel((0, 0), (0, 0), 40) == (20, 20)


def test_tile_to_pixel_with_center_offset():
    assert tile_to_pixel((1, -2), (15, 10), 40) == (660, 340)


def test_to_pixel_matches_module_function():
    assert TileMapper.to_pixel((3, 4), (1, 1), 10) == tile_to_pixel((3, 4), (1, 1), 10)


@pytest.mark.parametrize("pixel_point, size, expected", [
    ((20, 20), 39, (0, 0, 38, 38)),
    ((20, 20), 40, (0, 0, 39, 39)),
    ((15, 5), 9, (10, 0, 18, 8)),
    ((-5, -5), 9, (-10, -10, -2, -2)),
])
def test_tile_bounds(pixel_point, size, expected):
    assert tile_bounds(pixel_point, size) == expected


def test_paint_fills_tile_and_leaves_border(buffer):
    mapper = TileMapper(buffer, 40, 39)
    mapper.paint((20, 20), "#d00000", 39)
    assert buffer.getpixel(0, 0) == RED
    assert buffer.getpixel(38, 38) == RED
    assert buffer.getpixel(39, 39) == BLACK
    assert buffer.getpixel(60, 60) == BLACK


def test_paint_zero_size_is_noop(buffer):
    TileMapper(buffer, 40, 0).paint((20, 20), "#d00000", 0)
    assert buffer.getpixel(20, 20) == BLACK


def test_paint_tile_uses_config(buffer):
    config = RenderConfig.from_canvas_size(80, 80, tile_spacing=40, show_grid=False)
    mapper = TileMapper.for_config(buffer, config)
    mapper.paint_tile((0, 0), (1, 1), "#d00000")
    assert buffer.getpixel(40, 40) == RED
    assert buffer.getpixel(79, 79) == RED
    assert buffer.getpixel(39, 39) == BLACK


def test_hex_to_rgba():
    assert PixelBuffer.hex_to_rgba("#999999") == (153, 153, 153, 255)
    assert PixelBuffer.hex_to_rgba("#fff") == (255, 255, 255, 255)
    assert PixelBuffer.hex_to_rgba("#00000080") == (0, 0, 0, 128)
    assert PixelBuffer.hex_to_rgba("transparent") == (0, 0, 0, 0)


def test_ensure_resizes(buffer):
    buffer.ensure((20, 10))
    assert buffer.image.size == (20, 10)


def test_present_without_canvas(buffer):
    assert buffer.present() is None
