#!/usr/bin/env python3
"""
示範: 旋轉、縮放的 sprite

方向鍵左右旋轉，滾輪縮放，滑鼠左鍵移動 sprite，ESC 離開。
"""

import argparse
from typing import Optional

import pygame

from .config import load_settings
from .core import GameImage
from .game_window import GameWindow


def _create_sprite_surface(size: int = 64) -> pygame.Surface:
    """沒有圖片文件時產生一個箭頭圖"""
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    pygame.draw.polygon(surface, (100, 200, 255),
                        [(size // 2, 0), (size - 1, size - 1), (size // 2, size * 3 // 4), (0, size - 1)])
    return surface


class SpriteDemo:
    """示範應用"""

    def __init__(self, window: GameWindow, image_path: Optional[str] = None):
        self.window = window
        if image_path:
            self.image = window.load_image(image_path)
        else:
            self.image = GameImage.from_surface(_create_sprite_surface(),
                                                strict=window.settings.strict_transforms)
        self.image.make_rotatable()

        self.x = window.get_width() // 2
        self.y = window.get_height() // 2
        self.angle = 0.0
        self.scale = 1.0

    def update(self):
        """處理輸入並更新變換"""
        if self.window.is_key_down(pygame.K_LEFT):
            self.angle -= 3.0
        if self.window.is_key_down(pygame.K_RIGHT):
            self.angle += 3.0
        self.angle %= 360.0

        notches = self.window.mouse_wheel()
        if notches:
            self.scale = max(0.1, min(4.0, self.scale * (1.1 ** -notches)))
            self.image.set_scale(self.scale)

        if self.window.mouse_button1():
            self.x = self.window.get_mouse_x()
            self.y = self.window.get_mouse_y()

        self.image.set_rotation(self.angle)

    def render(self):
        """繪製一幀"""
        self.window.clear()
        left = self.x - self.image.get_width() // 2
        top = self.y - self.image.get_height() // 2
        self.window.draw_image(self.image, left, top)

        bounds = self.image.get_bounding_box().move(left, top)
        self.window.draw_rectangle(bounds.x, bounds.y, bounds.width, bounds.height, (255, 80, 80))

        self.window.draw_string(f"Angle: {self.angle:.0f}  Scale: {self.image.get_scale():.2f}", 10, 20)
        self.window.paint_frame()

    def run(self):
        while not self.window.is_closed():
            if self.window.is_key_pressed(pygame.K_ESCAPE):
                break
            self.update()
            self.render()
        self.window.close()


def main():
    """主函數"""
    parser = argparse.ArgumentParser(description="GameWindow sprite demo")
    parser.add_argument("--config", help="yaml/json 配置文件")
    parser.add_argument("--image", help="sprite 圖片路徑")
    args = parser.parse_args()

    settings = load_settings(args.config)
    window = GameWindow(settings=settings)
    SpriteDemo(window, args.image).run()


if __name__ == "__main__":
    main()
