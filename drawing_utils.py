# drawing_utils.py

"""
Drawing utilities for the tile grid, the circle and the ellipse in DomeApp.
"""
import math

from raster import TileRasterization
from render_config import RenderColors
from utils import log_message


def circle_layout(config, radius):
    """
    计算圆的瓦片布局（不绘制）。
    返回 (points, center_offset)，points 是相对网格中心的瓦片坐标集合。
    """
    points = TileRasterization.midpoint_circle(radius)
    return points, config.grid_center()


def ellipse_layout(config, height, width):
    """
    计算椭圆的瓦片布局（不绘制）。
    返回 (points, corner_offset, marker)，points 相对外接矩形左上角，
    marker 是椭圆中心瓦片（同样相对角点）。
    """
    points = TileRasterization.ellipse(height, width)
    corner_offset = (
        math.floor(config.grid_width / 2 - width / 2),
        math.floor(config.grid_height / 2 - height / 2),
    )
    return points, corner_offset, (width // 2, height // 2)


def draw_grid(mapper, config):
    """绘制整张网格：先铺背景色（作为边框），再逐个画背景瓦片"""
    buffer = mapper.pixel_buffer
    buffer.ensure((config.canvas_width, config.canvas_height))
    buffer.fill(buffer.hex_to_rgba(RenderColors.GRID_BG))

    for x in range(config.grid_width):
        for y in range(config.grid_height):
            mapper.paint_tile((x, y), (0, 0), RenderColors.BG_TILE)


def _paint_shape(mapper, points, offset, color, marker, marker_color):
    for point in points:
        mapper.paint_tile(point, offset, color)
    mapper.paint_tile(marker, offset, marker_color)
    return (marker[0] + offset[0], marker[1] + offset[1])


def draw_circle(mapper, config, radius):
    """在网格中心画圆，返回中心标记瓦片的网格坐标"""
    points, center = circle_layout(config, radius)
    log_message('debug', f"圆: 半径 {radius}, {len(points)} 个瓦片")
    return _paint_shape(mapper, points, center, RenderColors.LINE_CIRCLE, (0, 0), RenderColors.CIRCLE_DOT)


def draw_ellipse(mapper, config, height, width):
    """在网格中心画椭圆，返回中心标记瓦片的网格坐标"""
    points, corner, marker = ellipse_layout(config, height, width)
    log_message('debug', f"椭圆: {width}x{height}, {len(points)} 个瓦片")
    return _paint_shape(mapper, points, corner, RenderColors.LINE_ELLIPSE, marker, RenderColors.ELLIPSE_DOT)


def draw_dome(mapper, config, circle, ellipse, dimensions):
    """
    绘制圆与椭圆的轮廓。
    circle: bool, 是否画圆
    ellipse: bool, 是否画椭圆
    dimensions: DomeDimensions (radius, height, width)

    先对所有要画的图形做光栅化，参数非法时直接抛出 InvalidArgumentError，缓冲保持不变。
    返回所有中心标记瓦片的网格坐标。
    """
    circle_plan = circle_layout(config, dimensions.radius) if circle else None
    ellipse_plan = ellipse_layout(config, dimensions.height, dimensions.width) if ellipse else None

    draw_grid(mapper, config)

    markers = []
    if circle_plan is not None:
        points, center = circle_plan
        markers.append(_paint_shape(mapper, points, center, RenderColors.LINE_CIRCLE,
                                    (0, 0), RenderColors.CIRCLE_DOT))
    if ellipse_plan is not None:
        points, corner, marker = ellipse_plan
        markers.append(_paint_shape(mapper, points, corner, RenderColors.LINE_ELLIPSE,
                                    marker, RenderColors.ELLIPSE_DOT))

    log_message('debug', f"重绘 {config!r}: {dimensions!r}, 中心标记 {markers}")
    return markers
