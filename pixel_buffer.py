from PIL import Image, ImageDraw

from render_config import DEFAULT_CANVAS_SIZE, RenderColors


class PixelBuffer:
    """封装用于和 Canvas 同步的 PIL 像素缓冲，瓦片先画进缓冲再一次性绘回 Canvas。

    用法：在 DomeApp 中创建：
        self.pixel_buffer = PixelBuffer(self.canvas)
        self.pixel_buffer.ensure()

    然后使用：
        self.pixel_buffer.fill(rgba)
        self.pixel_buffer.draw_rectangle(x1, y1, x2, y2, rgba)
        self.pixel_buffer.present()  # 把缓冲绘回 Canvas

    canvas 为 None 时只维护 PIL 图像，便于在没有显示器的环境下渲染。
    """
    IMAGE_TAG = "pixelbuffer_image"

    def __init__(self, canvas=None, canvas_bg_color=RenderColors.GRID_BG):
        self.canvas = canvas
        self.canvas_bg_color = canvas_bg_color
        self.image = None
        self.draw = None
        self._tk_image = None

    @staticmethod
    def hex_to_rgba(hex_color):
        if not hex_color or hex_color == "transparent":
            return (0, 0, 0, 0)
        hex_color = hex_color.lstrip('#')
        if len(hex_color) == 3:
            hex_color = "".join(c * 2 for c in hex_color)
        if len(hex_color) == 6:
            r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
            return (r, g, b, 255)
        elif len(hex_color) == 8:
            r, g, b, a = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4, 6))
            return (r, g, b, a)
        else:
            return (0, 0, 0, 255)

    def ensure(self, size=None):
        """保证缓冲尺寸与 Canvas（或给定的 size）一致，尺寸变化时重建"""
        if size is not None:
            width, height = size
        elif self.canvas is not None:
            try:
                width = int(self.canvas.winfo_width() or DEFAULT_CANVAS_SIZE[0])
                height = int(self.canvas.winfo_height() or DEFAULT_CANVAS_SIZE[1])
            except Exception:
                width, height = DEFAULT_CANVAS_SIZE
        else:
            width, height = DEFAULT_CANVAS_SIZE
        width, height = max(1, int(width)), max(1, int(height))

        if self.image is None or self.image.size != (width, height):
            bg_rgba = self.hex_to_rgba(self.canvas_bg_color)
            self.image = Image.new("RGBA", (width, height), bg_rgba)
            self.draw = ImageDraw.Draw(self.image)

    def fill(self, rgba):
        if self.draw is None:
            self.ensure()
        self.draw.rectangle([0, 0, self.image.width, self.image.height], fill=rgba)

    def draw_rectangle(self, x1, y1, x2, y2, rgba):
        if self.draw is None:
            self.ensure()
        self.draw.rectangle([x1, y1, x2, y2], fill=rgba)

    def getpixel(self, x, y):
        return self.image.getpixel((int(x), int(y)))

    def present(self):
        """把缓冲一次性绘回 Canvas（保持引用避免 GC），返回 canvas image id"""
        if self.canvas is None or self.image is None:
            return None

        from PIL import ImageTk

        tk_img = ImageTk.PhotoImage(self.image)
        self.canvas.delete(self.IMAGE_TAG)
        # 在 Canvas 原点绘制整张图像
        img_id = self.canvas.create_image(0, 0, image=tk_img, anchor='nw', tags=(self.IMAGE_TAG,))
        self._tk_image = tk_img
        return img_id
