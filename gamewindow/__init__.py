"""
gamewindow - 2D 遊戲視窗

開啟視窗、提供雙緩衝繪圖區、處理鍵盤/滑鼠輸入、固定幀率，
並支援可縮放、可旋轉的圖片。
"""

from .core import (GameImage, LoadError, ValidationError, GameWindowError,
                   FrameTimer, KeyboardState, MouseState)
from .config import Settings, load_settings
from .game_window import GameWindow

__version__ = "0.1.0"

__all__ = ['GameWindow', 'GameImage', 'LoadError', 'ValidationError', 'GameWindowError',
           'FrameTimer', 'KeyboardState', 'MouseState', 'Settings', 'load_settings']
