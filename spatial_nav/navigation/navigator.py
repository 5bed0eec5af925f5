"""
方向導航器
Navigator

給定當前焦點元素、方向和候選元素，選出下一個應獲得焦點的元素。

流程：
1. 提取參考矩形和候選矩形（幾何失敗的候選被靜默丟棄）
2. 全局分區一次；再以參考中心點對同區（4號區）候選分區一次，得到「內部」分區
3. 按方向查表構造三個優先級層級：內部對齊 -> 相鄰直線區 -> 兩個對角區
4. 選出第一個非空層級並排序
5. 記憶來源：反向移動時優先回到上一次移動的來源元素
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from spatial_nav.config.logging_config import get_logger, log_performance
from spatial_nav.config.settings import get_navigation_defaults, get_settings
from spatial_nav.navigation.distance import DistanceFunctions, distance_builder
from spatial_nav.navigation.geometry import GeometryProvider, Rect, get_rect
from spatial_nav.navigation.partition import SAME_ZONE, partition
from spatial_nav.navigation.prioritizer import Priority, prioritize

logger = get_logger("navigator")

class Direction(str, Enum):
    """導航方向（方向鍵或 move() 給出）"""
    
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    
    @property
    def reverse(self) -> "Direction":
        return _REVERSE[self]
    
    @classmethod
    def parse(cls, token: Any) -> Optional["Direction"]:
        """解析方向標記，無法識別時返回 None"""
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except (ValueError, TypeError):
            return None

_REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

class PreviousMove(BaseModel):
    """上一次移動的記錄（由調用方持有）"""
    
    model_config = ConfigDict(frozen=True)
    
    target: Any = Field(description="上一次移動的來源元素")
    destination: Any = Field(description="上一次移動的目標元素")
    reverse: Direction = Field(description="上一次移動方向的反方向")
    
    @classmethod
    def record(cls, source: Any, destination: Any, direction: Direction) -> "PreviousMove":
        """記錄一次從 source 到 destination 的移動"""
        return cls(target=source, destination=destination, reverse=Direction(direction).reverse)

class NavigationConfig(BaseModel):
    """單次導航的參數"""
    
    straight_overlap_threshold: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, description="直線重疊閾值，None 時使用配置默認值"
    )
    straight_only: bool = Field(default=False, description="僅考慮直線方向的候選")
    remember_source: bool = Field(default=False, description="反向移動時優先回到來源元素")
    previous: Optional[PreviousMove] = Field(default=None, description="上一次移動記錄")
    
    @classmethod
    def from_settings(cls) -> "NavigationConfig":
        """由全局導航配置構造"""
        return cls(**get_navigation_defaults())
    
    def extend(self, **overrides: Any) -> "NavigationConfig":
        """返回應用了所有非 None 覆蓋值的副本"""
        update = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(update) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"未知的導航參數: {sorted(unknown)}")
        return self.model_validate({**dict(self), **update})
    
    def resolved_threshold(self) -> float:
        if self.straight_overlap_threshold is None:
            return get_settings().navigation.straight_overlap_threshold
        return self.straight_overlap_threshold

@dataclass(frozen=True)
class DirectionPlan:
    """單個方向的分區和度量查找表條目"""
    internal_zones: Tuple[int, ...]
    straight_zone: int
    diagonal_zones: Tuple[int, ...]
    straight_distance: Tuple[str, ...]
    diagonal_distance: Tuple[str, ...]

DIRECTION_PLANS: Dict[Direction, DirectionPlan] = {
    Direction.LEFT: DirectionPlan(
        internal_zones=(0, 3, 6),
        straight_zone=3,
        diagonal_zones=(0, 6),
        straight_distance=("near_plumb_line_is_better", "top_is_better"),
        diagonal_distance=("near_horizon_is_better", "right_is_better", "near_target_top_is_better"),
    ),
    Direction.RIGHT: DirectionPlan(
        internal_zones=(2, 5, 8),
        straight_zone=5,
        diagonal_zones=(2, 8),
        straight_distance=("near_plumb_line_is_better", "top_is_better"),
        diagonal_distance=("near_horizon_is_better", "left_is_better", "near_target_top_is_better"),
    ),
    Direction.UP: DirectionPlan(
        internal_zones=(0, 1, 2),
        straight_zone=1,
        diagonal_zones=(0, 2),
        straight_distance=("near_horizon_is_better", "left_is_better"),
        diagonal_distance=("near_plumb_line_is_better", "bottom_is_better", "near_target_left_is_better"),
    ),
    Direction.DOWN: DirectionPlan(
        internal_zones=(6, 7, 8),
        straight_zone=7,
        diagonal_zones=(6, 8),
        straight_distance=("near_horizon_is_better", "left_is_better"),
        diagonal_distance=("near_plumb_line_is_better", "top_is_better", "near_target_left_is_better"),
    ),
}

def build_priorities(plan: DirectionPlan,
                     groups: Sequence[List[Rect]],
                     internal_groups: Sequence[List[Rect]],
                     distances: DistanceFunctions) -> List[Priority]:
    """
    按查找表條目構造三個優先級層級
    
    Returns:
        List[Priority]: [內部對齊, 相鄰直線區, 對角區]
    """
    straight = [getattr(distances, name) for name in plan.straight_distance]
    diagonal = [getattr(distances, name) for name in plan.diagonal_distance]
    return [
        Priority(
            group=[rect for zone in plan.internal_zones for rect in internal_groups[zone]],
            distance=straight
        ),
        Priority(group=list(groups[plan.straight_zone]), distance=list(straight)),
        Priority(
            group=[rect for zone in plan.diagonal_zones for rect in groups[zone]],
            distance=diagonal
        ),
    ]

def _extract_rects(candidates: Iterable[Any], geometry: Optional[GeometryProvider]) -> List[Rect]:
    rects = []
    for candidate in candidates:
        rect = get_rect(candidate, geometry)
        if rect is not None:
            rects.append(rect)
    return rects

@log_performance("navigate")
def navigate(target: Any,
             direction: Any,
             candidates: Optional[Iterable[Any]],
             config: Optional[NavigationConfig] = None,
             geometry: Optional[GeometryProvider] = None) -> Optional[Any]:
    """
    選出指定方向上的下一個焦點元素
    
    沒有可移動的目標時返回 None（正常結果，不拋異常）。
    候選集合不應包含 target 本身。
    
    Args:
        target: 當前焦點元素
        direction: 方向（Direction 或 "up"/"down"/"left"/"right"）
        candidates: 候選元素
        config: 導航參數，None 時使用 NavigationConfig()
        geometry: 幾何提供者，None 時讀取元素的 bbox 屬性
        
    Returns:
        Optional[Any]: 被選中的元素
    """
    direction = Direction.parse(direction)
    candidates = list(candidates) if candidates is not None else []
    if target is None or direction is None or not candidates:
        return None
    
    config = config or NavigationConfig()
    
    target_rect = get_rect(target, geometry)
    if target_rect is None:
        return None
    
    rects = _extract_rects(candidates, geometry)
    if len(rects) < len(candidates):
        logger.debug(f"丟棄 {len(candidates) - len(rects)} 個沒有幾何信息的候選")
    if not rects:
        return None
    
    threshold = config.resolved_threshold()
    distances = distance_builder(target_rect)
    groups = partition(rects, target_rect, threshold)
    # 同區候選再以參考中心點細分，區分同行/同列的鄰居
    # 若以完整參考矩形再分區，同區候選會全部落回 4 號區，內部層級恆為空
    internal_groups = partition(groups[SAME_ZONE], target_rect.center, threshold)
    
    priorities = build_priorities(DIRECTION_PLANS[direction], groups, internal_groups, distances)
    if config.straight_only:
        priorities.pop()
    
    dest_group = prioritize(priorities)
    if not dest_group:
        logger.debug(f"方向 {direction.value} 上沒有候選")
        return None
    
    previous = config.previous
    if (config.remember_source and previous is not None
            and previous.destination == target and previous.reverse == direction):
        for rect in dest_group:
            if rect.element == previous.target:
                logger.debug(f"記憶來源覆蓋: 返回 {rect.element!r}")
                return rect.element
    
    return dest_group[0].element
