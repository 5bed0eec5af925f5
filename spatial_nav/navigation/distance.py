"""
距離度量
Distance Metrics

以參考矩形構造一組距離函數，僅用作排序鍵（越小越好）。
「靠近」類度量返回截斷到 0 的方向性間隙；「邊緣坐標」類度量返回原始坐標
（底部/右側取負），作為最終的確定性平局打破。
"""

from typing import Callable, NamedTuple

from spatial_nav.navigation.geometry import Rect

DistanceFunction = Callable[[Rect], float]

class DistanceFunctions(NamedTuple):
    """以參考矩形為基準的距離函數集合"""
    near_plumb_line_is_better: DistanceFunction
    near_horizon_is_better: DistanceFunction
    near_target_left_is_better: DistanceFunction
    near_target_top_is_better: DistanceFunction
    top_is_better: DistanceFunction
    bottom_is_better: DistanceFunction
    left_is_better: DistanceFunction
    right_is_better: DistanceFunction

def _clamp(distance: float) -> float:
    return distance if distance > 0 else 0

def distance_builder(target_rect: Rect) -> DistanceFunctions:
    """
    構造距離函數集合
    
    Args:
        target_rect: 參考矩形（在構造時捕獲）
        
    Returns:
        DistanceFunctions: 距離函數集合
    """
    target_center = target_rect.center
    
    def near_plumb_line_is_better(rect: Rect) -> float:
        # 到參考中心垂線的水平間隙
        if rect.center.x < target_center.x:
            return _clamp(target_center.x - rect.right)
        return _clamp(rect.left - target_center.x)
    
    def near_horizon_is_better(rect: Rect) -> float:
        # 到參考中心水平線的垂直間隙
        if rect.center.y < target_center.y:
            return _clamp(target_center.y - rect.bottom)
        return _clamp(rect.top - target_center.y)
    
    def near_target_left_is_better(rect: Rect) -> float:
        if rect.center.x < target_center.x:
            return _clamp(target_rect.left - rect.right)
        return _clamp(rect.left - target_rect.left)
    
    def near_target_top_is_better(rect: Rect) -> float:
        if rect.center.y < target_center.y:
            return _clamp(target_rect.top - rect.bottom)
        return _clamp(rect.top - target_rect.top)
    
    return DistanceFunctions(
        near_plumb_line_is_better=near_plumb_line_is_better,
        near_horizon_is_better=near_horizon_is_better,
        near_target_left_is_better=near_target_left_is_better,
        near_target_top_is_better=near_target_top_is_better,
        top_is_better=lambda rect: rect.top,
        bottom_is_better=lambda rect: -1 * rect.bottom,
        left_is_better=lambda rect: rect.left,
        right_is_better=lambda rect: -1 * rect.right,
    )
