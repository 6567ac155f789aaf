# coordinate_system.py
"""
瓦片坐标到像素坐标的映射
核心原则：
1. 光栅化算法输出的是瓦片坐标（相对于图形中心或外接矩形角点的整数偏移）
2. 中心偏移也以瓦片为单位，转换流程：(coord + center_offset) * spacing + spacing / 2 -> 像素中心
3. 绘制时以像素中心为准，画一个边长为 size 的正方形瓦片
"""
import math

from pixel_buffer import PixelBuffer


def tile_to_pixel(coord, center_offset, spacing):
    """
    将瓦片坐标转换为该瓦片中心的像素坐标

    Args:
        coord: (x, y) 瓦片坐标
        center_offset: (x, y) 中心偏移（瓦片单位）
        spacing: 瓦片间距（像素）

    Returns:
        (px, py) 像素坐标
    """
    x, y = coord
    offset_x, offset_y = center_offset
    px = (x + offset_x) * spacing + spacing / 2
    py = (y + offset_y) * spacing + spacing / 2
    return (px, py)


def tile_bounds(pixel_point, size):
    """以像素中心为准的瓦片矩形 (x1, y1, x2, y2)，两端都包含在内"""
    px, py = pixel_point
    x1 = math.floor(px - size / 2)
    y1 = math.floor(py - size / 2)
    return (x1, y1, x1 + size - 1, y1 + size - 1)


class TileMapper:
    """把瓦片坐标放到像素缓冲上并逐个绘制"""

    def __init__(self, pixel_buffer: PixelBuffer, spacing: int, tile_size: int):
        self.pixel_buffer = pixel_buffer
        self.spacing = spacing
        self.tile_size = tile_size

    @classmethod
    def for_config(cls, pixel_buffer, config):
        return cls(pixel_buffer, config.tile_spacing, config.tile_size)

    @staticmethod
    def to_pixel(coord, center_offset, spacing):
        return tile_to_pixel(coord, center_offset, spacing)

    def paint(self, pixel_point, color, size):
        """在 pixel_point 处画一个边长为 size 的瓦片"""
        if size <= 0:
            return
        x1, y1, x2, y2 = tile_bounds(pixel_point, size)
        self.pixel_buffer.draw_rectangle(x1, y1, x2, y2, PixelBuffer.hex_to_rgba(color))

    def paint_tile(self, coord, center_offset, color):
        pixel_point = self.to_pixel(coord, center_offset, self.spacing)
        self.paint(pixel_point, color, self.tile_size)
