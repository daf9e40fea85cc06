"""
錯誤類型定義
"""


class GameWindowError(Exception):
    """所有錯誤的基類"""


class LoadError(GameWindowError):
    """圖片文件不存在或無法解碼"""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"無法載入圖片: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ValidationError(GameWindowError, ValueError):
    """嚴格模式下的無效變換參數"""
