"""
優先級選擇器
Prioritizer

按調用方給定的順序選出第一個非空的候選層級，並以該層級的距離函數鏈作為
字典序複合鍵排序。排序是穩定的：所有度量都相等時保留原始相對順序。
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from spatial_nav.navigation.distance import DistanceFunction
from spatial_nav.navigation.geometry import Rect

@dataclass
class Priority:
    """優先級層級：候選分組及其平局打破鏈"""
    group: List[Rect]
    distance: List[DistanceFunction]

def prioritize(priorities: Sequence[Priority]) -> Optional[List[Rect]]:
    """
    選出第一個非空層級並排序
    
    Args:
        priorities: 按偏好順序排列的層級
        
    Returns:
        Optional[List[Rect]]: 排序後的候選；沒有非空層級時返回 None
    """
    dest_priority = next((priority for priority in priorities if priority.group), None)
    if dest_priority is None:
        return None
    
    distances = dest_priority.distance
    return sorted(
        dest_priority.group,
        key=lambda rect: tuple(distance(rect) for distance in distances)
    )
