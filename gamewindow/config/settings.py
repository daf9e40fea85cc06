"""
配置管理系統
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml

from . import constants


class Settings:
    """配置管理類"""

    COLOR_KEYS = ('font_color', 'background_color')

    def __init__(self):
        # 視窗配置
        self.window_x = constants.DEFAULT_WINDOW_X
        self.window_y = constants.DEFAULT_WINDOW_Y
        self.window_width = constants.DEFAULT_WINDOW_WIDTH
        self.window_height = constants.DEFAULT_WINDOW_HEIGHT
        self.title = constants.DEFAULT_TITLE
        self.fullscreen = False

        # 幀率
        self.frame_time_ms = constants.DEFAULT_FRAME_TIME_MS

        # 文字
        self.font_family = constants.DEFAULT_FONT_FAMILY
        self.font_size = constants.DEFAULT_FONT_SIZE
        self.font_color = constants.DEFAULT_FONT_COLOR
        self.background_color = constants.DEFAULT_BACKGROUND_COLOR

        # 圖片變換: 無效參數是否拋出例外
        self.strict_transforms = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'window_x': self.window_x,
            'window_y': self.window_y,
            'window_width': self.window_width,
            'window_height': self.window_height,
            'title': self.title,
            'fullscreen': self.fullscreen,
            'frame_time_ms': self.frame_time_ms,
            'font_family': self.font_family,
            'font_size': self.font_size,
            'font_color': list(self.font_color),
            'background_color': list(self.background_color),
            'strict_transforms': self.strict_transforms,
        }

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        # 更新配置
        for key, value in config.items():
            if hasattr(self, key):
                if key in self.COLOR_KEYS and isinstance(value, list):
                    value = tuple(value)
                setattr(self, key, value)
            else:
                print(f"[警告] 未知的配置項: {key}")

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def validate(self) -> bool:
        """驗證配置的有效性，無效值重設為預設值"""
        valid = True

        if self.window_width <= 0 or self.window_height <= 0:
            print(f"[警告] 視窗尺寸無效: {self.window_width}x{self.window_height}")
            self.window_width = constants.DEFAULT_WINDOW_WIDTH
            self.window_height = constants.DEFAULT_WINDOW_HEIGHT
            valid = False

        if self.frame_time_ms < 0:
            print(f"[警告] 每幀時間無效: {self.frame_time_ms}")
            self.frame_time_ms = constants.DEFAULT_FRAME_TIME_MS
            valid = False

        if self.font_size <= 0:
            print(f"[警告] 字體大小無效: {self.font_size}")
            self.font_size = constants.DEFAULT_FONT_SIZE
            valid = False

        for key in self.COLOR_KEYS:
            color = getattr(self, key)
            if len(color) not in (3, 4) or not all(0 <= c <= 255 for c in color):
                print(f"[警告] 顏色無效: {key}={color}")
                setattr(self, key, getattr(constants, f"DEFAULT_{key.upper()}"))
                valid = False

        return valid


def load_settings(config_path: Optional[str] = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)

    settings.validate()
    return settings
