"""核心模組"""

from .errors import GameWindowError, LoadError, ValidationError
from .image import GameImage
from .input_state import KeyboardState, MouseState
from .timer import FrameTimer

__all__ = ['GameWindowError', 'LoadError', 'ValidationError', 'GameImage',
           'KeyboardState', 'MouseState', 'FrameTimer']
