"""
空間分區器
Partitioner

以參考矩形為中心，把候選矩形劃分到 3x3 共 9 個區域：

    0 | 1 | 2
    --+---+--
    3 | 4 | 5
    --+---+--
    6 | 7 | 8

區域索引 = row * 3 + col，由候選矩形的中心點相對參考矩形的水平/垂直跨度決定。
4 表示與參考矩形同區；0、2、6、8 是對角區；1、3、5、7 是直線區。

對角區的矩形若在正交軸上與參考矩形的重疊達到閾值，會被「提升」到相鄰的
直線區。提升不是重新分配：矩形仍保留在原對角區，同時出現在一到兩個直線區。
"""

from typing import List, Sequence, Union

from spatial_nav.navigation.geometry import Center, Rect

Reference = Union[Rect, Center]

ZONE_COUNT = 9
SAME_ZONE = 4
DIAGONAL_ZONES = (0, 2, 6, 8)
STRAIGHT_ZONES = (1, 3, 5, 7)

# 每個重疊條件成立時，對角區 -> 被提升到的直線區
_PROMOTE_WHEN_LEFT_EDGE_INSIDE = {2: 1, 8: 7}
_PROMOTE_WHEN_RIGHT_EDGE_INSIDE = {0: 1, 6: 7}
_PROMOTE_WHEN_TOP_EDGE_INSIDE = {6: 3, 8: 5}
_PROMOTE_WHEN_BOTTOM_EDGE_INSIDE = {0: 3, 2: 5}

def zone_of(rect: Rect, target_rect: Reference) -> int:
    """計算矩形中心相對參考矩形的區域索引"""
    center = rect.center
    if center.x < target_rect.left:
        col = 0
    elif center.x <= target_rect.right:
        col = 1
    else:
        col = 2
    
    if center.y < target_rect.top:
        row = 0
    elif center.y <= target_rect.bottom:
        row = 1
    else:
        row = 2
    
    return row * 3 + col

def partition(rects: Sequence[Rect], target_rect: Reference,
              straight_overlap_threshold: float) -> List[List[Rect]]:
    """
    把矩形劃分到 9 個區域
    
    閾值比較基於參考矩形（而非候選矩形）的寬高。調用方負責把閾值限制在
    [0, 1]，此處不做校驗。
    
    Args:
        rects: 候選矩形（保持輸入順序）
        target_rect: 參考矩形（或作為退化矩形的中心點）
        straight_overlap_threshold: 直線重疊閾值
        
    Returns:
        List[List[Rect]]: 9 個有序分組
    """
    groups: List[List[Rect]] = [[] for _ in range(ZONE_COUNT)]
    
    horizontal_overlap = target_rect.width * straight_overlap_threshold
    vertical_overlap = target_rect.height * straight_overlap_threshold
    
    for rect in rects:
        group_id = zone_of(rect, target_rect)
        groups[group_id].append(rect)
        
        if group_id not in DIAGONAL_ZONES:
            continue
        
        if rect.left <= target_rect.right - horizontal_overlap:
            _promote(groups, rect, group_id, _PROMOTE_WHEN_LEFT_EDGE_INSIDE)
        if rect.right >= target_rect.left + horizontal_overlap:
            _promote(groups, rect, group_id, _PROMOTE_WHEN_RIGHT_EDGE_INSIDE)
        if rect.top <= target_rect.bottom - vertical_overlap:
            _promote(groups, rect, group_id, _PROMOTE_WHEN_TOP_EDGE_INSIDE)
        if rect.bottom >= target_rect.top + vertical_overlap:
            _promote(groups, rect, group_id, _PROMOTE_WHEN_BOTTOM_EDGE_INSIDE)
    
    return groups

def _promote(groups: List[List[Rect]], rect: Rect, group_id: int, mapping: dict) -> None:
    straight_id = mapping.get(group_id)
    if straight_id is not None:
        groups[straight_id].append(rect)
