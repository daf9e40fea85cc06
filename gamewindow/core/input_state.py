"""
鍵盤與滑鼠輸入狀態
"""

from typing import Dict, Set

import pygame


class KeyboardState:
    """
    鍵盤狀態

    is_key_down(): 按鍵目前是否被按住
    is_key_pressed(): 自上次查詢後是否按下過（讀取後清除）
    """

    def __init__(self):
        self._down: Set[int] = set()
        self._pressed: Set[int] = set()

    def key_down(self, key: int):
        if key < 0:
            return
        self._down.add(key)
        self._pressed.add(key)

    def key_up(self, key: int):
        self._down.discard(key)

    def is_key_down(self, key: int) -> bool:
        return key in self._down

    def is_key_pressed(self, key: int) -> bool:
        if key in self._pressed:
            self._pressed.discard(key)
            return True
        return False

    def reset(self):
        """清除所有按鍵狀態"""
        self._down.clear()
        self._pressed.clear()

    def process_event(self, event: pygame.event.Event) -> bool:
        """處理鍵盤事件，返回是否已處理"""
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
            return True
        return False


class MouseState:
    """
    滑鼠狀態

    按鍵 1/2/3 為左/中/右鍵，讀取後清除。
    滾輪刻度累積到下一次 mouse_wheel() 為止:
    正值表示朝使用者方向滾動，負值表示遠離使用者。
    """

    BUTTONS = (1, 2, 3)

    def __init__(self):
        self.x = 0
        self.y = 0
        self._buttons: Dict[int, bool] = {button: False for button in self.BUTTONS}
        self._wheel_notches = 0

    def move(self, x: int, y: int):
        self.x = x
        self.y = y

    def press(self, button: int):
        if button in self._buttons:
            self._buttons[button] = True

    def wheel(self, notches: int):
        self._wheel_notches += notches

    def get_x(self) -> int:
        return self.x

    def get_y(self) -> int:
        return self.y

    def button_pressed(self, button: int) -> bool:
        if self._buttons.get(button):
            self._buttons[button] = False
            return True
        return False

    def mouse_wheel(self) -> int:
        notches = self._wheel_notches
        self._wheel_notches = 0
        return notches

    def reset(self):
        for button in self._buttons:
            self._buttons[button] = False
        self._wheel_notches = 0

    def process_event(self, event: pygame.event.Event) -> bool:
        """處理滑鼠事件，返回是否已處理"""
        if event.type == pygame.MOUSEMOTION:
            self.move(*event.pos)
            return True
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.move(*event.pos)
            self.press(event.button)
            return True
        if event.type == pygame.MOUSEWHEEL:
            # pygame 的 y > 0 表示遠離使用者
            self.wheel(-event.y)
            return True
        return False
