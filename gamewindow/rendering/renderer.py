"""
抽象渲染器接口
"""

from abc import ABC, abstractmethod
from typing import List, Tuple, Optional

Color = Tuple[int, ...]


class Renderer(ABC):
    """渲染器抽象基類"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = "",
             x: Optional[int] = None, y: Optional[int] = None):
        """初始化渲染器"""
        pass

    @abstractmethod
    def resize(self, width: int, height: int, fullscreen: bool = False):
        """改變畫布大小"""
        pass

    @abstractmethod
    def clear(self, color: Color):
        """以指定顏色清空畫面"""
        pass

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color):
        """繪製線段"""
        pass

    @abstractmethod
    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color):
        """繪製矩形外框"""
        pass

    @abstractmethod
    def fill_rectangle(self, x: int, y: int, width: int, height: int, color: Color):
        """繪製實心矩形"""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int, color: Optional[Color] = None):
        """繪製文字（y 為基線）"""
        pass

    @abstractmethod
    def draw_image(self, image, x: int, y: int):
        """繪製 GameImage（x/y 為左上角）"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def poll_events(self) -> List:
        """取出待處理事件"""
        pass
