"""
導航事件
Navigation events

導航結果的事件載荷和一個同步的事件分發器。事件類型帶 ``sn:`` 前綴，
可取消事件的監聽器可以調用 prevent_default() 阻止移動。
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Optional

from spatial_nav.config.logging_config import get_logger

logger = get_logger("events")

EVENT_PREFIX = "sn:"

WILL_MOVE = "willmove"
NAVIGATE_FAILED = "navigatefailed"

@dataclass
class SpatialEventDetail:
    """導航事件詳情"""
    direction: Optional[str] = None
    previous_element: Any = None             # 移動前的焦點元素
    next_element: Any = None                 # 下一個焦點元素
    cause: Literal["keydown", "api"] = "api" # 按鍵觸發或 API 調用

@dataclass
class SpatialEvent:
    """分發給監聽器的事件對象"""
    type: str
    target: Any
    detail: Optional[SpatialEventDetail] = None
    cancelable: bool = True
    default_prevented: bool = field(default=False, init=False)
    
    def prevent_default(self) -> None:
        if self.cancelable:
            self.default_prevented = True

Listener = Callable[[SpatialEvent], None]

class EventDispatcher:
    """同步事件分發器"""
    
    def __init__(self, prefix: str = EVENT_PREFIX):
        self.prefix = prefix
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)
    
    def add_listener(self, event_type: str, callback: Listener) -> None:
        self._listeners[self.prefix + event_type].append(callback)
    
    def remove_listener(self, event_type: str, callback: Listener) -> None:
        listeners = self._listeners.get(self.prefix + event_type, [])
        if callback in listeners:
            listeners.remove(callback)
    
    def dispatch(self, element: Any, event_type: str,
                 detail: Optional[SpatialEventDetail] = None,
                 cancelable: bool = True) -> bool:
        """
        分發事件
        
        Args:
            element: 事件目標元素
            event_type: 不帶前綴的事件類型
            detail: 事件詳情
            cancelable: 是否可取消
            
        Returns:
            bool: 監聽器調用了 prevent_default() 時返回 False
        """
        event = SpatialEvent(
            type=self.prefix + event_type,
            target=element,
            detail=detail,
            cancelable=cancelable
        )
        # 複製一份，允許監聽器在回調中移除自身
        for callback in list(self._listeners.get(event.type, [])):
            callback(event)
        
        if event.default_prevented:
            logger.debug(f"事件 {event.type} 被取消")
        return not event.default_prevented
