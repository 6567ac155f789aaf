import pytest

from raster import InvalidArgumentError
from render_config import RenderConfig, DomeDimensions, DEFAULT_TILE_SPACING, ZOOM_MIN, ZOOM_MAX
from utils import round_half_up


def test_defaults():
    config = RenderConfig()
    assert config.tile_spacing == DEFAULT_TILE_SPACING
    assert (config.grid_width, config.grid_height) == (30, 20)
    assert config.tile_size == DEFAULT_TILE_SPACING - 1


def test_from_canvas_size():
    config = RenderConfig.from_canvas_size(400, 300, tile_spacing=20)
    assert (config.grid_width, config.grid_height) == (20, 15)
    assert config.tile_size == 19
    assert config.grid_center() == (10, 7)


def test_grid_size_rounds_half_up():
    config = RenderConfig.from_canvas_size(1220, 780, tile_spacing=40)
    assert (config.grid_width, config.grid_height) == (31, 20)


def test_hidden_grid_fills_whole_cell():
    config = RenderConfig().with_grid(False)
    assert config.tile_size == config.tile_spacing


def test_with_zoom_recomputes_grid_without_mutating():
    config = RenderConfig.from_canvas_size(800, 400, tile_spacing=40)
    zoomed = config.with_zoom(20)
    assert (zoomed.grid_width, zoomed.grid_height) == (40, 20)
    assert zoomed.tile_size == 19
    assert config.tile_spacing == 40
    assert (config.grid_width, config.grid_height) == (20, 10)


@pytest.mark.parametrize("requested, expected", [(1, ZOOM_MIN), (1000, ZOOM_MAX), (33.7, 33)])
def test_with_zoom_clamps(requested, expected):
    assert RenderConfig().with_zoom(requested).tile_spacing == expected


def test_with_canvas_size_keeps_grid_flag():
    config = RenderConfig(show_grid=False).with_canvas_size(100, 60)
    assert not config.show_grid
    assert (config.grid_width, config.grid_height) == (round_half_up(100 / 40), round_half_up(60 / 40))


def test_equality():
    assert RenderConfig().with_zoom(20) == RenderConfig(tile_spacing=20)
    assert RenderConfig() != RenderConfig().with_grid(False)


@pytest.mark.parametrize("spacing", [0, -5, 2.5, True])
def test_invalid_spacing_rejected(spacing):
    with pytest.raises(InvalidArgumentError):
        RenderConfig(tile_spacing=spacing)


def test_negative_canvas_rejected():
    with pytest.raises(InvalidArgumentError):
        RenderConfig.from_canvas_size(-1, 100)


def test_dimensions_repr():
    assert repr(DomeDimensions(6, 10, 16)) == "DomeDimensions(radius=6, height=10, width=16)"
