import customtkinter as ctk
from tkinter import Canvas, BOTH, YES
from tooltip import Tooltip
from render_config import RenderColors, ZOOM_MIN, ZOOM_MAX

MAX_RADIUS = 60
MAX_ELLIPSE_SIZE = 120


def _dimension_slider(app, parent, title, to, initial, command, tooltip):
    """一个带数值标签的整数滑块，返回 (slider, value_label)"""
    row = ctk.CTkFrame(parent, fg_color="transparent")
    row.pack(fill="x", padx=10, pady=(5, 0))
    ctk.CTkLabel(row, text=title, font=app.ui_font).pack(side="left")
    value_label = ctk.CTkLabel(row, text=str(initial), font=app.ui_font, width=40)
    value_label.pack(side="right")

    slider = ctk.CTkSlider(parent, from_=0, to=to, number_of_steps=to, command=command)
    slider.set(initial)
    slider.pack(pady=5, padx=20, fill="x")
    Tooltip(slider, tooltip)
    return slider, value_label


def setup_ui(app):
    """把 DomeApp.__init__ 中的 UI 创建与布局代码抽离到这里。

    注意：这个函数不会修改应用逻辑，只负责把布局部件绑定到传入的 `app` 实例上。
    """
    app.grid_rowconfigure(0, weight=1)
    app.grid_columnconfigure(0, weight=1)
    app.ui_font = ("Microsoft YaHei", 15)

    # --- 左侧画布 ---
    app.canvas_frame = ctk.CTkFrame(app, corner_radius=0)
    app.canvas_frame.grid(row=0, column=0, sticky="nsew")

    # --- 画布下方的缩放工具条 ---
    app.zoom_toolbar = ctk.CTkFrame(app.canvas_frame, fg_color="transparent", height=40)
    app.zoom_toolbar.pack(side="bottom", fill="x", padx=5, pady=5)

    app.canvas = Canvas(app.canvas_frame, bg=RenderColors.GRID_BG, highlightthickness=0)
    app.canvas.pack(fill=BOTH, expand=YES)

    app.canvas.bind("<Configure>", app.on_canvas_resize)
    app.canvas.bind("<MouseWheel>", app.on_canvas_mousewheel)  # Windows 滚轮
    app.canvas.bind("<Button-4>", app.on_canvas_mousewheel)    # Linux 滚轮上
    app.canvas.bind("<Button-5>", app.on_canvas_mousewheel)    # Linux 滚轮下

    # 缩小按钮
    ctk.CTkButton(app.zoom_toolbar, text="−", width=35, command=app.zoom_out).pack(side="left", padx=2)

    # 瓦片间距标签
    app.zoom_label = ctk.CTkLabel(app.zoom_toolbar, text=f"{app.render_config.tile_spacing}px", width=60,
                                  fg_color=("gray80", "gray20"))
    app.zoom_label.pack(side="left", padx=5)

    # 缩放滑块
    app.zoom_slider = ctk.CTkSlider(
        app.zoom_toolbar,
        from_=ZOOM_MIN,
        to=ZOOM_MAX,
        number_of_steps=ZOOM_MAX - ZOOM_MIN,
        command=app.on_zoom_slider_change
    )
    app.zoom_slider.set(app.render_config.tile_spacing)
    app.zoom_slider.pack(side="left", fill="x", expand=True, padx=5)

    # 放大按钮
    ctk.CTkButton(app.zoom_toolbar, text="＋", width=35, command=app.zoom_in).pack(side="left", padx=2)

    # 重置缩放按钮
    ctk.CTkButton(app.zoom_toolbar, text="重置", width=60, command=app.reset_zoom).pack(side="left", padx=2)

    # --- 右侧参数面板 ---
    app.options_panel = ctk.CTkScrollableFrame(app, width=260, corner_radius=0)
    app.options_panel.grid(row=0, column=1, sticky="ns")

    # 圆形模块
    app.circle_section = ctk.CTkFrame(app.options_panel, fg_color="transparent")
    app.circle_var = ctk.BooleanVar(value=app.show_circle)
    ctk.CTkSwitch(app.circle_section, text="⚪ 圆形", variable=app.circle_var, font=app.ui_font,
                  command=app.toggle_circle).pack(pady=(20, 5), padx=10, anchor="w")
    app.radius_slider, app.radius_value_label = _dimension_slider(
        app, app.circle_section, "半径", MAX_RADIUS, app.dimensions.radius, app.set_radius,
        "圆的半径（瓦片数）")
    app.circle_section.pack(fill="x", padx=10)

    # 椭圆模块
    ctk.CTkFrame(app.options_panel, height=2, fg_color="gray40").pack(pady=10, padx=15, fill="x")
    app.ellipse_section = ctk.CTkFrame(app.options_panel, fg_color="transparent")
    app.ellipse_var = ctk.BooleanVar(value=app.show_ellipse)
    ctk.CTkSwitch(app.ellipse_section, text="⬭ 椭圆", variable=app.ellipse_var, font=app.ui_font,
                  command=app.toggle_ellipse).pack(pady=5, padx=10, anchor="w")
    app.width_slider, app.width_value_label = _dimension_slider(
        app, app.ellipse_section, "宽度", MAX_ELLIPSE_SIZE, app.dimensions.width, app.set_ellipse_width,
        "椭圆外接矩形的宽度（瓦片数）")
    app.height_slider, app.height_value_label = _dimension_slider(
        app, app.ellipse_section, "高度", MAX_ELLIPSE_SIZE, app.dimensions.height, app.set_ellipse_height,
        "椭圆外接矩形的高度（瓦片数）")
    app.ellipse_section.pack(fill="x", padx=10)

    # 网格边框开关
    ctk.CTkFrame(app.options_panel, height=2, fg_color="gray40").pack(pady=10, padx=15, fill="x")
    app.grid_var = ctk.BooleanVar(value=app.render_config.show_grid)
    grid_switch = ctk.CTkSwitch(app.options_panel, text="▦ 显示网格", variable=app.grid_var, font=app.ui_font,
                                command=app.toggle_grid)
    grid_switch.pack(pady=5, padx=20, anchor="w")
    Tooltip(grid_switch, "瓦片之间保留 1 像素边框")

    # 八分圆每行瓦片数
    ctk.CTkFrame(app.options_panel, height=2, fg_color="gray40").pack(pady=10, padx=15, fill="x")
    ctk.CTkLabel(app.options_panel, text="八分圆每行瓦片数", font=(app.ui_font[0], 12, "bold"),
                 text_color="#00BFFF").pack(pady=5)
    app.plan_label = ctk.CTkLabel(app.options_panel, text="", font=("Consolas", 13), wraplength=230,
                                  justify="left")
    app.plan_label.pack(pady=5, padx=10, anchor="w")

    # --- 状态栏 ---
    app.status_label = ctk.CTkLabel(app, text="", anchor="w", font=(app.ui_font[0], 12))
    app.status_label.grid(row=1, column=0, columnspan=2, sticky="ew", padx=10)
