"""
遊戲視窗

用法，每幀重複:
  - clear() 或繪製背景圖清除畫面
  - 處理鍵盤/滑鼠輸入
  - 繪製 sprite
  - paint_frame() 把雙緩衝區呈現到畫面，並等待本幀時間結束
"""

from typing import Optional, Tuple

import pygame

from .config import Settings
from .core import FrameTimer, GameImage, KeyboardState, MouseState
from .rendering import PygameRenderer
from .rendering.renderer import Color


class GameWindow:
    """包含一個繪圖區的視窗，座標以繪圖區左上角為 (0, 0)"""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 title: Optional[str] = None, x: Optional[int] = None, y: Optional[int] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        width = width if width is not None else self.settings.window_width
        height = height if height is not None else self.settings.window_height
        title = title if title is not None else self.settings.title
        x = x if x is not None else self.settings.window_x
        y = y if y is not None else self.settings.window_y

        # 初始化組件
        self.renderer = PygameRenderer(self.settings.font_family,
                                       self.settings.font_size,
                                       tuple(self.settings.font_color))
        self.keyboard = KeyboardState()
        self.mouse = MouseState()
        self.timer = FrameTimer(self.settings.frame_time_ms)
        self.closed = False

        self.renderer.init(width, height, title, x, y)
        print(f"[信息] 視窗已開啟: {self.renderer.width}x{self.renderer.height} \"{title}\"")

        if self.settings.fullscreen:
            self.enter_fullscreen()

        self.timer.start_frame()

    # ────────────────── 全螢幕 ──────────────────

    def enter_fullscreen(self):
        """視窗覆蓋整個螢幕；已是全螢幕時不做任何事"""
        if self.renderer.fullscreen:
            return
        self.renderer.resize(0, 0, fullscreen=True)
        # 切換後的舊事件不再有效
        self._reset_input()

    def leave_fullscreen(self, x: int, y: int, width: int, height: int):
        """回到一般視窗；不是全螢幕時不做任何事"""
        if not self.renderer.fullscreen:
            return
        self.renderer.resize(width, height, fullscreen=False)
        self.renderer.move(x, y)
        self._reset_input()

    def is_fullscreen(self) -> bool:
        return self.renderer.fullscreen

    def _reset_input(self):
        pygame.event.clear()
        self.keyboard.reset()
        self.mouse.reset()

    # ────────────────── 視窗屬性 ──────────────────

    def get_width(self) -> int:
        """繪圖區寬度"""
        return self.renderer.width

    def get_height(self) -> int:
        """繪圖區高度"""
        return self.renderer.height

    def set_size(self, width: int, height: int):
        """改變繪圖區大小"""
        self.renderer.resize(width, height, fullscreen=self.renderer.fullscreen)

    def set_title(self, title: str):
        self.renderer.set_title(title)

    def get_title(self) -> str:
        return self.renderer.title

    def set_location(self, x: int, y: int):
        """移動視窗到螢幕座標 x/y"""
        self.renderer.move(x, y)

    def get_location(self) -> Tuple[int, int]:
        return self.renderer.location

    # ────────────────── 繪製 ──────────────────

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color):
        self.renderer.draw_line(x1, y1, x2, y2, color)

    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color):
        self.renderer.draw_rectangle(x, y, width, height, color)

    def fill_rectangle(self, x: int, y: int, width: int, height: int, color: Color):
        self.renderer.fill_rectangle(x, y, width, height, color)

    def set_font(self, family: str, size: Optional[int] = None):
        """設定 draw_string 使用的字體（預設 Arial）"""
        self.renderer.set_font(family, size)

    def set_font_color(self, color: Color):
        """設定 draw_string 使用的顏色（預設黑色）"""
        self.renderer.set_font_color(color)

    def draw_string(self, text: str, x: int, y: int):
        """在 x/y 寫文字，y 為基線"""
        self.renderer.draw_text(text, x, y)

    def draw_image(self, image: GameImage, x: int, y: int):
        """繪製圖片，x/y 為左上角"""
        self.renderer.draw_image(image, x, y)

    def clear(self, color: Optional[Color] = None):
        """以指定顏色清空繪圖區（預設為背景色）"""
        if color is None:
            color = tuple(self.settings.background_color)
        self.renderer.clear(color)

    def load_image(self, path: str) -> GameImage:
        """載入圖片，套用配置中的嚴格模式"""
        return GameImage(path, strict=self.settings.strict_transforms)

    # ────────────────── 幀控制 ──────────────────

    def process_events(self):
        """把待處理事件分派給鍵盤/滑鼠狀態"""
        for event in self.renderer.poll_events():
            if event.type == pygame.QUIT:
                self.closed = True
            elif not self.keyboard.process_event(event):
                self.mouse.process_event(event)

    def paint_frame(self):
        """
        呈現雙緩衝區，然後等待本幀時間結束

        每幀時間用 set_frame_time() 改變。
        """
        self.process_events()
        self.renderer.present()
        self.timer.wait_frame()

    def set_frame_time(self, frame_time_ms: int):
        """每幀時間（毫秒），預設 25 ms（40 FPS）"""
        self.timer.set_frame_time(frame_time_ms)

    def wait(self, time_ms: int):
        """暫停 time_ms 毫秒"""
        pygame.time.wait(time_ms)

    # ────────────────── 輸入 ──────────────────

    def is_key_down(self, key: int) -> bool:
        """按鍵目前是否被按住（key 為 pygame.K_* 常數）"""
        return self.keyboard.is_key_down(key)

    def is_key_pressed(self, key: int) -> bool:
        """自上次查詢後是否按下過"""
        return self.keyboard.is_key_pressed(key)

    def get_mouse_x(self) -> int:
        return self.mouse.get_x()

    def get_mouse_y(self) -> int:
        return self.mouse.get_y()

    def mouse_button1(self) -> bool:
        return self.mouse.button_pressed(1)

    def mouse_button2(self) -> bool:
        return self.mouse.button_pressed(2)

    def mouse_button3(self) -> bool:
        return self.mouse.button_pressed(3)

    def mouse_wheel(self) -> int:
        """
        自上次呼叫後滾輪轉動的刻度數

        正值: 朝使用者方向；負值: 遠離使用者
        """
        return self.mouse.mouse_wheel()

    # ────────────────── 生命週期 ──────────────────

    def is_closed(self) -> bool:
        """使用者是否已關閉視窗"""
        return self.closed

    def close(self):
        """關閉視窗"""
        self.renderer.cleanup()
        self.closed = True
        print("[信息] 視窗已關閉。")
