"""
可縮放、可旋轉的遊戲圖片
"""

import math
from pathlib import Path
from typing import Optional, Tuple, Union

import pygame

from .errors import LoadError, ValidationError

# 接近 1.0 的縮放比例視為 1.0（避免浮點誤差造成無謂的重新取樣）
SCALE_SNAP_TOLERANCE = 0.0001

# 可旋轉圖片的邊界框邊距比例: (1 - 1/sqrt(2)) / 2
ROTATABLE_MARGIN_RATIO = (1.0 - 1.0 / math.sqrt(2.0)) / 2.0

TRANSPARENT = (0, 0, 0, 0)


def _to_alpha_surface(surface: pygame.Surface) -> pygame.Surface:
    """轉換為帶 alpha 通道的 32 位 Surface"""
    if pygame.display.get_surface() is not None:
        return surface.convert_alpha()

    if surface.get_flags() & pygame.SRCALPHA and surface.get_bitsize() == 32:
        return surface

    # 無顯示視窗時 convert_alpha 不可用
    converted = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    converted.blit(surface, (0, 0))
    return converted


def _copy_onto_clear(dest: pygame.Surface, src: pygame.Surface, pos) -> None:
    """把 src 複製到已清空（全透明）的 dest 上"""
    # 目標全透明時 MAX 混合等同逐像素複製，半透明邊緣不會變暗
    dest.blit(src, pos, special_flags=pygame.BLEND_RGBA_MAX)


class GameImage:
    """
    繪製到 GameWindow 的圖片

    縮放以原圖為基礎，旋轉以縮放後的圖為基礎:
      - 原圖保留，供之後重新縮放
      - 縮放圖保留，供之後重新旋轉
      - 旋轉圖保留到下一次旋轉

    要旋轉必須先呼叫 make_rotatable()，原圖會被放大成正方形（邊長為原圖對角線），
    旋轉時不會被裁切；可旋轉圖片會自動計算碰撞用的邊界框。

    clone() 產生的副本共用同一張原圖。多個 sprite 共用副本時，
    必須先繪製，再改變下一個 sprite 的縮放或旋轉。

    無效的變換參數預設會被忽略（方法回傳 False）；strict=True 時改為拋出 ValidationError。
    """

    def __init__(self, path: Union[str, Path], strict: bool = False):
        """
        從文件載入圖片

        Args:
            path: 圖片路徑
            strict: 是否對無效參數拋出 ValidationError

        Raises:
            LoadError: 文件不存在或無法解碼
        """
        path = Path(path)
        if not path.is_file():
            raise LoadError(path, "文件不存在")

        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as e:
            raise LoadError(path, str(e)) from e

        self._init_state(_to_alpha_surface(surface), strict)

    @classmethod
    def from_surface(cls, surface: pygame.Surface, strict: bool = False) -> "GameImage":
        """從已存在的 Surface 建立圖片（不讀取文件）"""
        image = cls.__new__(cls)
        image._init_state(_to_alpha_surface(surface), strict)
        return image

    def _init_state(self, surface: pygame.Surface, strict: bool):
        """設定初始狀態"""
        self.strict = strict

        self._img_original = surface    # 原圖；可能與其他 GameImage 共用
        self._img_scaled = surface      # 縮放圖；未縮放時即為原圖
        self._img_rotated: Optional[pygame.Surface] = None  # 旋轉圖；無旋轉時即為縮放圖
        self._owns_rotated = False      # 旋轉圖是否為本物件專用（可原地覆寫）

        self._scale_x = 1.0
        self._scale_y = 1.0
        self._rotatable = False
        self._rot_degrees = 0.0

        self._bound_x = 0
        self._bound_y = 0
        self._bound_width = surface.get_width()
        self._bound_height = surface.get_height()

    def clone(self) -> "GameImage":
        """
        建立共用同一組 Surface 的副本

        不分配新的像素資料。雙方都不再擁有旋轉緩衝區，
        下一次旋轉時各自分配新的緩衝區，互不覆寫。
        """
        other = self.__class__.__new__(self.__class__)
        other.strict = self.strict

        other._img_original = self._img_original
        other._img_scaled = self._img_scaled
        other._img_rotated = self._img_rotated
        other._owns_rotated = False
        self._owns_rotated = False

        other._scale_x = self._scale_x
        other._scale_y = self._scale_y
        other._rotatable = self._rotatable
        other._rot_degrees = self._rot_degrees

        other._bound_x = self._bound_x
        other._bound_y = self._bound_y
        other._bound_width = self._bound_width
        other._bound_height = self._bound_height
        return other

    __copy__ = clone

    def _reject(self, message: str) -> bool:
        """處理無效參數"""
        if self.strict:
            raise ValidationError(message)
        return False

    # ────────────────── 尺寸 ──────────────────

    def get_width(self) -> int:
        """縮放後的寬度（旋轉圖與縮放圖大小相同）"""
        return self._img_scaled.get_width()

    def get_height(self) -> int:
        """縮放後的高度"""
        return self._img_scaled.get_height()

    def get_size(self) -> Tuple[int, int]:
        return self._img_scaled.get_size()

    def get_width_original(self) -> int:
        """未縮放的寬度（可旋轉時為放大後的正方形）"""
        return self._img_original.get_width()

    def get_height_original(self) -> int:
        """未縮放的高度"""
        return self._img_original.get_height()

    def get_surface(self) -> pygame.Surface:
        """獲取要繪製到畫面的 Surface（唯讀）"""
        if not self._rotatable or self._img_rotated is None:
            return self._img_scaled
        return self._img_rotated

    # ────────────────── 縮放 ──────────────────

    def get_scale_x(self) -> float:
        return self._scale_x

    def get_scale_y(self) -> float:
        return self._scale_y

    def get_scale(self) -> float:
        """縮放後面積與原圖面積的比例"""
        if self._scale_x == self._scale_y:
            return self._scale_x * self._scale_x

        scaled_area = self._img_scaled.get_width() * self._img_scaled.get_height()
        original_area = self._img_original.get_width() * self._img_original.get_height()
        return scaled_area / original_area

    def set_scale(self, scale_x: float, scale_y: Optional[float] = None) -> bool:
        """
        縮放圖片

        只給一個參數時，它代表面積的縮放比例，寬高各乘以其平方根。
        可旋轉圖片會在縮放後重新旋轉，並重新計算邊界框。

        Args:
            scale_x: 寬度比例（或面積比例）
            scale_y: 高度比例

        Returns:
            是否套用
        """
        if scale_y is None:
            if scale_x <= 0.0:
                return self._reject(f"縮放比例必須為正數: {scale_x}")
            scale_x = scale_y = math.sqrt(scale_x)

        if scale_x <= 0.0 or scale_y <= 0.0:
            return self._reject(f"縮放比例必須為正數: ({scale_x}, {scale_y})")

        if abs(scale_x - 1.0) < SCALE_SNAP_TOLERANCE:
            scale_x = 1.0
        if abs(scale_y - 1.0) < SCALE_SNAP_TOLERANCE:
            scale_y = 1.0

        # 可旋轉圖片必須保持正方形
        if self._rotatable and scale_x != scale_y:
            return self._reject(f"可旋轉圖片不能非等比縮放: ({scale_x}, {scale_y})")

        self._scale_x = scale_x
        self._scale_y = scale_y

        if scale_x == 1.0 and scale_y == 1.0:
            self._img_scaled = self._img_original
        else:
            width = max(1, int(self._img_original.get_width() * scale_x + 0.5))
            height = max(1, int(self._img_original.get_height() * scale_y + 0.5))
            self._img_scaled = pygame.transform.smoothscale(self._img_original, (width, height))

        if self._rotatable:
            self.set_rotation(self._rot_degrees)
            # 邊界框假設放大前的原圖是正方形
            side = self._img_scaled.get_width()
            margin = int(ROTATABLE_MARGIN_RATIO * side)
            self.set_bounding_box(margin, margin, side - 2 * margin, side - 2 * margin)
        else:
            self.set_bounding_box(0, 0, self._img_scaled.get_width(), self._img_scaled.get_height())
        return True

    def set_scale_size(self, width: int, height: int) -> bool:
        """縮放到指定的寬高（以未縮放尺寸為基準）"""
        if width <= 0 or height <= 0:
            return self._reject(f"尺寸必須為正數: ({width}, {height})")

        scale_x = width / self._img_original.get_width()
        scale_y = height / self._img_original.get_height()
        return self.set_scale(scale_x, scale_y)

    # ────────────────── 旋轉 ──────────────────

    def is_rotatable(self) -> bool:
        return self._rotatable

    def make_rotatable(self) -> bool:
        """
        讓圖片可旋轉（不可撤銷）

        原圖被放大成正方形，邊長為原圖對角線，原內容置中。
        產生新的 Surface，共用舊原圖的副本不受影響。
        非等比縮放會被重設為 1.0。
        """
        if self._rotatable:
            return False

        width, height = self._img_original.get_size()
        side = math.ceil(math.hypot(width, height))

        enlarged = pygame.Surface((side, side), pygame.SRCALPHA)
        enlarged.fill(TRANSPARENT)
        _copy_onto_clear(enlarged, self._img_original, ((side - width) // 2, (side - height) // 2))

        self._rotatable = True
        self._img_original = enlarged

        if self._scale_x != self._scale_y:
            self._scale_x = 1.0
            self._scale_y = 1.0
        self.set_scale(self._scale_x, self._scale_y)
        return True

    def get_rotation(self) -> float:
        """旋轉角度（度，正值為順時針）"""
        return self._rot_degrees

    def set_rotation(self, degrees: float,
                     pivot_x: Optional[int] = None, pivot_y: Optional[int] = None) -> bool:
        """
        旋轉縮放後的圖片

        Args:
            degrees: 角度，正值為順時針
            pivot_x: 旋轉中心（相對圖片左上角），預設為圖片中心
            pivot_y: 同上

        Returns:
            是否套用（未呼叫 make_rotatable 時不套用）
        """
        if not self._rotatable:
            return self._reject("圖片尚未設為可旋轉")

        self._rot_degrees = degrees

        if degrees == 0.0:
            self._img_rotated = self._img_scaled
            self._owns_rotated = False
            return True

        width, height = self._img_scaled.get_size()
        if pivot_x is None:
            pivot_x = width // 2
        if pivot_y is None:
            pivot_y = height // 2

        # 只有專屬且尺寸相同的緩衝區才原地覆寫
        target = self._img_rotated
        if (not self._owns_rotated or target is None or target is self._img_scaled
                or target.get_size() != (width, height)):
            target = pygame.Surface((width, height), pygame.SRCALPHA)
            self._img_rotated = target
            self._owns_rotated = True
        target.fill(TRANSPARENT)

        angle = degrees % 360.0
        if angle == 0.0:
            # 整圈旋轉，直接複製
            _copy_onto_clear(target, self._img_scaled, (0, 0))
            return True

        # rotozoom 以逆時針為正，並以圖片中心旋轉
        rotated = pygame.transform.rotozoom(self._img_scaled, -angle, 1.0)

        radians = math.radians(angle)
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        dx = width / 2 - pivot_x
        dy = height / 2 - pivot_y
        center_x = pivot_x + dx * cos_a - dy * sin_a
        center_y = pivot_y + dx * sin_a + dy * cos_a

        rect = rotated.get_rect(center=(round(center_x), round(center_y)))
        _copy_onto_clear(target, rotated, rect)
        return True

    # ────────────────── 邊界框 ──────────────────

    def get_bound_x(self) -> int:
        return self._bound_x

    def get_bound_y(self) -> int:
        return self._bound_y

    def get_bound_width(self) -> int:
        return self._bound_width

    def get_bound_height(self) -> int:
        return self._bound_height

    def get_bounding_box(self) -> pygame.Rect:
        """碰撞檢測用的邊界框（縮放圖座標）"""
        return pygame.Rect(self._bound_x, self._bound_y, self._bound_width, self._bound_height)

    def set_bounding_box(self, x: int, y: int, width: int, height: int):
        """
        自訂邊界框

        注意: 下一次縮放會自動重設邊界框。
        """
        self._bound_x = x
        self._bound_y = y
        self._bound_width = width
        self._bound_height = height

    def __repr__(self) -> str:
        return (f"GameImage(size={self.get_size()}, scale=({self._scale_x:.3f}, {self._scale_y:.3f}), "
                f"rotatable={self._rotatable}, rotation={self._rot_degrees})")
