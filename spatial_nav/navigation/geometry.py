"""
矩形提取器
Rect Extractor

將不透明的元素句柄轉換為標準化的軸對齊邊界矩形及其中心點。
元素本身的幾何信息由「幾何提供者」給出：一個接收元素、返回 BoundingBox
（或 None / 拋出 NoGeometryError 表示元素未佈局或已分離）的可調用對象。

默認提供者讀取元素的 ``bbox`` 屬性（可以是 BoundingBox，也可以是返回
BoundingBox 的方法），元素本身是 BoundingBox 時直接使用。
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from spatial_nav.config.logging_config import get_logger

logger = get_logger("geometry")

class NoGeometryError(Exception):
    """元素沒有可用的幾何信息（未佈局或已從佈局樹分離）"""

@dataclass(frozen=True)
class BoundingBox:
    """2D邊界框（視口像素坐標）"""
    x: float
    y: float
    width: float
    height: float
    
    @property
    def left(self) -> float:
        return self.x
    
    @property
    def right(self) -> float:
        return self.x + self.width
    
    @property
    def top(self) -> float:
        return self.y
    
    @property
    def bottom(self) -> float:
        return self.y + self.height
    
    @classmethod
    def from_edges(cls, left: float, top: float, right: float, bottom: float) -> "BoundingBox":
        """由四條邊構造邊界框"""
        return cls(x=left, y=top, width=right - left, height=bottom - top)

@dataclass(frozen=True)
class Center:
    """
    矩形中心點

    同時以退化矩形的形式暴露（left=right=x, top=bottom=y，寬高為 0），
    使中心與邊緣的距離公式、以及以中心為參考的內部分區可以共用代碼。
    """
    x: float
    y: float
    
    @property
    def left(self) -> float:
        return self.x
    
    @property
    def right(self) -> float:
        return self.x
    
    @property
    def top(self) -> float:
        return self.y
    
    @property
    def bottom(self) -> float:
        return self.y
    
    @property
    def width(self) -> float:
        return 0
    
    @property
    def height(self) -> float:
        return 0

@dataclass(frozen=True, eq=False)
class Rect:
    """帶元素反向引用的標準化矩形"""
    left: float
    top: float
    right: float
    bottom: float
    width: float
    height: float
    element: Any
    center: Center
    
    def __repr__(self) -> str:
        return (f"Rect(left={self.left}, top={self.top}, right={self.right}, "
                f"bottom={self.bottom}, element={self.element!r})")

GeometryProvider = Callable[[Any], Optional[BoundingBox]]

def bbox_geometry(element: Any) -> Optional[BoundingBox]:
    """默認幾何提供者：讀取元素的 ``bbox`` 屬性"""
    if isinstance(element, BoundingBox):
        return element
    bbox = getattr(element, "bbox", None)
    if callable(bbox):
        bbox = bbox()
    return bbox

def get_rect(element: Any, geometry: Optional[GeometryProvider] = None) -> Optional[Rect]:
    """
    提取元素的邊界矩形和中心點
    
    中心使用 left + floor(width / 2)，而非四捨五入，確保結果確定。
    
    Args:
        element: 元素句柄
        geometry: 幾何提供者，None 時使用 bbox_geometry
        
    Returns:
        Optional[Rect]: 矩形；幾何不可用時返回 None
    """
    provider = geometry or bbox_geometry
    try:
        box = provider(element)
    except NoGeometryError:
        box = None
    
    if box is None:
        logger.debug(f"元素沒有幾何信息: {element!r}")
        return None
    
    x = box.left + math.floor(box.width / 2)
    y = box.top + math.floor(box.height / 2)
    return Rect(
        left=box.left,
        top=box.top,
        right=box.right,
        bottom=box.bottom,
        width=box.width,
        height=box.height,
        element=element,
        center=Center(x=x, y=y)
    )
