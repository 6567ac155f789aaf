# render_config.py
"""
渲染配置
核心原则：
1. RenderConfig 是值对象，缩放、改变窗口尺寸、切换网格边框都返回新的配置
2. 光栅化算法从不读取配置，只接收半径、宽、高、中心偏移等普通整数
"""
from raster import InvalidArgumentError
from utils import round_half_up

DEFAULT_TILE_SPACING = 40
TILE_BORDER = 1
ZOOM_MIN = 5
ZOOM_MAX = 100
DEFAULT_CANVAS_SIZE = (1200, 800)


class RenderColors:
    LINE_CIRCLE = "#000000"
    LINE_ELLIPSE = "#999999"
    BG_TILE = "#ffffff"
    CIRCLE_DOT = "#d00000"
    ELLIPSE_DOT = "#0000d0"
    GRID_BG = "#000000"


class DomeDimensions:
    """界面上选择的圆半径与椭圆宽高（瓦片数）"""

    def __init__(self, radius=0, height=0, width=0):
        self.radius = radius
        self.height = height
        self.width = width

    def __repr__(self):
        return f"DomeDimensions(radius={self.radius}, height={self.height}, width={self.width})"


class RenderConfig:
    """瓦片间距、瓦片填充尺寸、网格宽高（瓦片数）以及画布像素尺寸"""

    def __init__(self, tile_spacing=DEFAULT_TILE_SPACING, canvas_width=DEFAULT_CANVAS_SIZE[0],
                 canvas_height=DEFAULT_CANVAS_SIZE[1], show_grid=True, log_level='info'):
        if isinstance(tile_spacing, bool) or not isinstance(tile_spacing, int) or tile_spacing < 1:
            raise InvalidArgumentError(f"瓦片间距必须是正整数，实际为 {tile_spacing!r}")
        if canvas_width < 0 or canvas_height < 0:
            raise InvalidArgumentError(f"画布尺寸不能为负数: {canvas_width}x{canvas_height}")

        self.tile_spacing = tile_spacing
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.show_grid = show_grid
        self.log_level = log_level

        self.grid_width = round_half_up(canvas_width / tile_spacing)
        self.grid_height = round_half_up(canvas_height / tile_spacing)
        # 显示网格时瓦片比间距小一个像素，露出背景作为边框
        self.tile_size = tile_spacing - (TILE_BORDER if show_grid else 0)

    @classmethod
    def from_canvas_size(cls, width, height, tile_spacing=DEFAULT_TILE_SPACING, show_grid=True):
        return cls(tile_spacing=tile_spacing, canvas_width=width, canvas_height=height, show_grid=show_grid)

    def _rebuilt(self, **changes):
        params = {
            "tile_spacing": self.tile_spacing,
            "canvas_width": self.canvas_width,
            "canvas_height": self.canvas_height,
            "show_grid": self.show_grid,
            "log_level": self.log_level,
        }
        params.update(changes)
        return RenderConfig(**params)

    def with_zoom(self, tile_spacing):
        """设置缩放级别（瓦片间距，像素），超出范围时截断"""
        spacing = max(ZOOM_MIN, min(int(tile_spacing), ZOOM_MAX))
        return self._rebuilt(tile_spacing=spacing)

    def with_canvas_size(self, width, height):
        return self._rebuilt(canvas_width=width, canvas_height=height)

    def with_grid(self, show):
        return self._rebuilt(show_grid=bool(show))

    def grid_center(self):
        """网格中心瓦片"""
        return (self.grid_width // 2, self.grid_height // 2)

    def __eq__(self, other):
        if not isinstance(other, RenderConfig):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self):
        return (f"RenderConfig(tile_spacing={self.tile_spacing}, grid={self.grid_width}x{self.grid_height}, "
                f"tile_size={self.tile_size}, canvas={self.canvas_width}x{self.canvas_height})")
