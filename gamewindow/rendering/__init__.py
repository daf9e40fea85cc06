"""渲染系統模組"""

from .renderer import Renderer
from .pygame_renderer import PygameRenderer

__all__ = ['Renderer', 'PygameRenderer']
