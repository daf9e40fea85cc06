"""
測試共用設定
"""

import os

# 無顯示環境下執行
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 200, 0, 255)


@pytest.fixture
def quadrant_surface():
    """40x40: 左上四分之一紅色，其餘藍色"""
    surface = pygame.Surface((40, 40), pygame.SRCALPHA)
    surface.fill(BLUE)
    surface.fill(RED, pygame.Rect(0, 0, 20, 20))
    return surface


@pytest.fixture
def wide_surface():
    """100x50 綠色"""
    surface = pygame.Surface((100, 50), pygame.SRCALPHA)
    surface.fill(GREEN)
    return surface


@pytest.fixture
def square_surface():
    """100x100 綠色"""
    surface = pygame.Surface((100, 100), pygame.SRCALPHA)
    surface.fill(GREEN)
    return surface


@pytest.fixture
def image_file(tmp_path, wide_surface):
    """儲存到磁碟的 100x50 PNG"""
    path = tmp_path / "sprite.png"
    pygame.image.save(wide_surface, str(path))
    return path
