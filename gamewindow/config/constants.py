"""
預設常數
"""

# 視窗
DEFAULT_WINDOW_X = 100
DEFAULT_WINDOW_Y = 100
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_TITLE = "GameWindow"

# 每幀 25 ms = 40 FPS
DEFAULT_FRAME_TIME_MS = 25

# 文字
DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_FONT_SIZE = 12
DEFAULT_FONT_COLOR = (0, 0, 0)

# 顏色
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DEFAULT_BACKGROUND_COLOR = WHITE
