"""
方向導航模組
Directional Navigation Module

本模組是系統的核心，負責在給定方向上選出下一個焦點元素。

核心算法（按流程順序）：
1. 矩形提取 - 元素 -> 標準化邊界矩形和中心點
2. 空間分區 - 相對參考矩形的 3x3 區域，對角候選按閾值提升為直線候選
3. 距離度量 - 以參考矩形構造的一組排序鍵
4. 優先級選擇 - 第一個非空層級，按度量鏈穩定排序
5. 方向導航 - 按方向查表構造層級，支持記憶來源覆蓋
"""

from spatial_nav.navigation.geometry import (
    BoundingBox,
    Center,
    Rect,
    NoGeometryError,
    GeometryProvider,
    bbox_geometry,
    get_rect
)

from spatial_nav.navigation.partition import (
    ZONE_COUNT,
    SAME_ZONE,
    DIAGONAL_ZONES,
    STRAIGHT_ZONES,
    partition,
    zone_of
)

from spatial_nav.navigation.distance import (
    DistanceFunction,
    DistanceFunctions,
    distance_builder
)

from spatial_nav.navigation.prioritizer import (
    Priority,
    prioritize
)

from spatial_nav.navigation.navigator import (
    Direction,
    PreviousMove,
    NavigationConfig,
    DirectionPlan,
    DIRECTION_PLANS,
    build_priorities,
    navigate
)

from spatial_nav.navigation.selectors import (
    match_selector,
    exclude,
    filter_navigable
)

from spatial_nav.navigation.events import (
    EVENT_PREFIX,
    SpatialEvent,
    SpatialEventDetail,
    EventDispatcher
)

from spatial_nav.navigation.controller import SpatialNavigator

__all__ = [
    # 矩形提取
    "BoundingBox",
    "Center",
    "Rect",
    "NoGeometryError",
    "GeometryProvider",
    "bbox_geometry",
    "get_rect",
    
    # 空間分區
    "ZONE_COUNT",
    "SAME_ZONE",
    "DIAGONAL_ZONES",
    "STRAIGHT_ZONES",
    "partition",
    "zone_of",
    
    # 距離度量
    "DistanceFunction",
    "DistanceFunctions",
    "distance_builder",
    
    # 優先級選擇
    "Priority",
    "prioritize",
    
    # 方向導航
    "Direction",
    "PreviousMove",
    "NavigationConfig",
    "DirectionPlan",
    "DIRECTION_PLANS",
    "build_priorities",
    "navigate",
    
    # 候選輔助與事件
    "match_selector",
    "exclude",
    "filter_navigable",
    "EVENT_PREFIX",
    "SpatialEvent",
    "SpatialEventDetail",
    "EventDispatcher",
    "SpatialNavigator",
]
