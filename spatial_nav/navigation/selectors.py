"""
候選輔助函數
Candidate helpers

匹配、排除和過濾候選元素。選擇器可以是謂詞函數、元素集合或單個元素。
"""

from collections.abc import Collection
from typing import Any, Callable, List, Optional, Sequence

NavigableFilter = Callable[[Any], bool]

def match_selector(element: Any, selector: Any) -> bool:
    """
    判斷元素是否匹配選擇器
    
    Args:
        element: 元素
        selector: 謂詞函數 / 元素集合 / 單個元素
        
    Returns:
        bool: 是否匹配
    """
    if element is None or selector is None:
        return False
    if callable(selector):
        return bool(selector(element))
    if isinstance(selector, Collection) and not isinstance(selector, (str, bytes)):
        return element in selector
    return element == selector

def exclude(elements: Sequence[Any], excluded: Any) -> List[Any]:
    """返回移除了 excluded（單個或列表）首次出現位置的新列表"""
    result = list(elements)
    if not isinstance(excluded, list):
        excluded = [excluded]
    for item in excluded:
        if item in result:
            result.remove(item)
    return result

def filter_navigable(elements: Sequence[Any],
                     navigable_filter: Optional[NavigableFilter] = None) -> List[Any]:
    """保留可導航的元素，未提供過濾器時全部保留"""
    if navigable_filter is None:
        return list(elements)
    return [element for element in elements if navigable_filter(element)]
