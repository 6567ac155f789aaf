import customtkinter as ctk
from tkinter import messagebox
from raster import InvalidArgumentError, TileRasterization
from render_config import RenderConfig, DomeDimensions, DEFAULT_TILE_SPACING
from pixel_buffer import PixelBuffer
from coordinate_system import TileMapper
from drawing_utils import draw_dome
from utils import configure_logger, log_message
from ui_setup import setup_ui


class DomeApp(ctk.CTk):
    def __init__(self):
        super().__init__()

        # --- 基本窗口设置 ---
        self.title("Tile Dome")
        self.geometry("1450x900")
        ctk.set_appearance_mode("Dark")
        ctk.set_default_color_theme("blue")

        # --- 状态变量 ---
        self.render_config = RenderConfig()
        self.dimensions = DomeDimensions(radius=6, height=10, width=16)
        self.show_circle = True
        self.show_ellipse = True
        self.zoom_step = 5

        # UI 已从此文件抽取到 ui_setup.setup_ui
        setup_ui(self)
        configure_logger(self.render_config.log_level, status_callback=self.set_status)

        # --- Pixel buffer 初始化 (瓦片先画进缓冲再一次性绘回 Canvas) ---
        self.pixel_buffer = PixelBuffer(self.canvas)
        self.pixel_buffer.ensure()

        self.update_plan_label()

        # 初始绘制
        self.after(100, self.redraw)

    # --- 绘制 ---
    def redraw(self):
        """按当前配置重绘网格、圆和椭圆"""
        mapper = TileMapper.for_config(self.pixel_buffer, self.render_config)
        try:
            draw_dome(mapper, self.render_config, self.show_circle, self.show_ellipse, self.dimensions)
        except InvalidArgumentError as e:
            log_message('info', f"绘制失败: {e}")
            messagebox.showerror("参数错误", f"无法绘制: \n{e}")
            return
        self.pixel_buffer.present()

    def set_status(self, message):
        self.status_label.configure(text=message)

    def update_plan_label(self):
        octet = TileRasterization.midpoint_octet(self.dimensions.radius)
        plan = TileRasterization.circle_plan([y for _, y in octet])
        self.plan_label.configure(text=f"r={self.dimensions.radius}: {plan}")

    # --- 图形参数 ---
    def set_radius(self, value):
        self.dimensions.radius = int(round(value))
        self.radius_value_label.configure(text=str(self.dimensions.radius))
        self.update_plan_label()
        self.redraw()

    def set_ellipse_width(self, value):
        self.dimensions.width = int(round(value))
        self.width_value_label.configure(text=str(self.dimensions.width))
        self.redraw()

    def set_ellipse_height(self, value):
        self.dimensions.height = int(round(value))
        self.height_value_label.configure(text=str(self.dimensions.height))
        self.redraw()

    def toggle_circle(self):
        self.show_circle = self.circle_var.get()
        self.redraw()

    def toggle_ellipse(self):
        self.show_ellipse = self.ellipse_var.get()
        self.redraw()

    def toggle_grid(self):
        self.render_config = self.render_config.with_grid(self.grid_var.get())
        log_message('info', "显示网格" if self.render_config.show_grid else "隐藏网格")
        self.redraw()

    # --- 画布尺寸 ---
    def on_canvas_resize(self, event):
        """Canvas 尺寸变化时按新尺寸重新计算网格宽高"""
        if (event.width, event.height) == (self.render_config.canvas_width, self.render_config.canvas_height):
            return
        self.render_config = self.render_config.with_canvas_size(event.width, event.height)
        log_message('debug', f"画布尺寸 {event.width}x{event.height}")
        self.redraw()

    # --- 缩放功能 ---
    def zoom_in(self):
        """放大（增大瓦片间距）"""
        self.set_zoom(self.render_config.tile_spacing + self.zoom_step)

    def zoom_out(self):
        """缩小（减小瓦片间距）"""
        self.set_zoom(self.render_config.tile_spacing - self.zoom_step)

    def reset_zoom(self):
        """重置瓦片间距"""
        self.set_zoom(DEFAULT_TILE_SPACING)

    def set_zoom(self, tile_spacing):
        """设置缩放级别（瓦片间距，像素）"""
        self.render_config = self.render_config.with_zoom(tile_spacing)
        spacing = self.render_config.tile_spacing

        # 更新 UI 显示
        self.zoom_label.configure(text=f"{spacing}px")
        self.zoom_slider.set(spacing)
        log_message('info', f"瓦片间距 {spacing}px, 网格 {self.render_config.grid_width}x{self.render_config.grid_height}")
        self.redraw()

    def on_zoom_slider_change(self, value):
        """当缩放滑块改变时"""
        spacing = int(round(value))
        if spacing != self.render_config.tile_spacing:
            self.set_zoom(spacing)

    def on_canvas_mousewheel(self, event):
        """鼠标滚轮缩放"""
        # Windows 中 MouseWheel 事件 delta = 120/-120
        # Linux 中 Button-4 向上，Button-5 向下
        if event.num == 4 or event.delta > 0:
            self.zoom_in()
        elif event.num == 5 or event.delta < 0:
            self.zoom_out()


def main():
    app = DomeApp()
    app.mainloop()


if __name__ == "__main__":
    main()
