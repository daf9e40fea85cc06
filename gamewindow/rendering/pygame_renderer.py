"""
Pygame渲染器實現
"""

import os
from typing import List, Optional, Tuple

import pygame

from .renderer import Renderer, Color
from ..config import constants


class PygameRenderer(Renderer):
    """
    Pygame渲染器

    所有繪製都寫入雙緩衝區，present() 時一次複製到視窗。
    座標以畫布左上角為 (0, 0)。
    """

    def __init__(self, font_family: str = constants.DEFAULT_FONT_FAMILY,
                 font_size: int = constants.DEFAULT_FONT_SIZE,
                 font_color: Color = constants.DEFAULT_FONT_COLOR):
        self.screen = None
        self.buffer = None
        self.font = None
        self.font_family = font_family
        self.font_size = font_size
        self.font_color = font_color
        self.width = 0
        self.height = 0
        self.title = ""
        self.location: Tuple[int, int] = (constants.DEFAULT_WINDOW_X, constants.DEFAULT_WINDOW_Y)
        self.fullscreen = False

    def init(self, width: int, height: int, title: str = "",
             x: Optional[int] = None, y: Optional[int] = None):
        """初始化Pygame"""
        if x is not None and y is not None:
            self.location = (x, y)
        os.environ['SDL_VIDEO_WINDOW_POS'] = f"{self.location[0]},{self.location[1]}"

        pygame.init()
        self.title = title
        pygame.display.set_caption(title)
        self._set_mode(width, height, fullscreen=False)
        self._init_font()

    def _set_mode(self, width: int, height: int, fullscreen: bool):
        """建立視窗與雙緩衝區"""
        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode((width, height))
        self.fullscreen = fullscreen
        self.width, self.height = self.screen.get_size()
        self.buffer = pygame.Surface((self.width, self.height))
        self.buffer.fill(constants.DEFAULT_BACKGROUND_COLOR)

    def _init_font(self):
        """初始化字體"""
        self.font = pygame.font.SysFont(self.font_family, self.font_size)

    def resize(self, width: int, height: int, fullscreen: bool = False):
        """改變畫布大小（畫布內容會被清除）"""
        self._set_mode(width, height, fullscreen)

    def move(self, x: int, y: int):
        """移動視窗（重新建立視窗）"""
        self.location = (x, y)
        if self.fullscreen:
            return
        os.environ['SDL_VIDEO_WINDOW_POS'] = f"{x},{y}"
        pygame.display.quit()
        pygame.display.init()
        pygame.display.set_caption(self.title)
        self._set_mode(self.width, self.height, fullscreen=False)

    def set_title(self, title: str):
        self.title = title
        pygame.display.set_caption(title)

    def set_font(self, family: str, size: Optional[int] = None):
        """設定 draw_text 使用的字體"""
        self.font_family = family
        if size is not None:
            self.font_size = size
        self._init_font()

    def set_font_color(self, color: Color):
        self.font_color = color

    def clear(self, color: Color = constants.DEFAULT_BACKGROUND_COLOR):
        """清空畫面"""
        self.buffer.fill(color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color):
        pygame.draw.line(self.buffer, color, (x1, y1), (x2, y2))

    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color):
        pygame.draw.rect(self.buffer, color, pygame.Rect(x, y, width, height), 1)

    def fill_rectangle(self, x: int, y: int, width: int, height: int, color: Color):
        self.buffer.fill(color, pygame.Rect(x, y, width, height))

    def draw_text(self, text: str, x: int, y: int, color: Optional[Color] = None):
        """繪製文字，y 為基線位置"""
        if color is None:
            color = self.font_color

        surface = self.font.render(text, True, color)
        self.buffer.blit(surface, (x, y - self.font.get_ascent()))

    def draw_image(self, image, x: int, y: int):
        """繪製圖片，x/y 為左上角"""
        surface = image.get_surface()
        size = (image.get_width(), image.get_height())
        if surface.get_size() != size:
            surface = pygame.transform.scale(surface, size)
        self.buffer.blit(surface, (x, y))

    def present(self):
        """把雙緩衝區複製到視窗"""
        self.screen.blit(self.buffer, (0, 0))
        pygame.display.flip()

    def cleanup(self):
        """清理資源"""
        pygame.quit()

    def poll_events(self) -> List[pygame.event.Event]:
        """處理事件"""
        return pygame.event.get()
