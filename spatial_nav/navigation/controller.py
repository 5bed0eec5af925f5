"""
有狀態導航器
Stateful navigator

包裝 navigate()：過濾候選、分發 ``sn:willmove`` / ``sn:navigatefailed`` 事件，
並在啟用記憶來源時維護上一次移動記錄。
"""

from typing import Any, Iterable, Literal, Optional

from spatial_nav.config.logging_config import get_logger
from spatial_nav.navigation.events import (
    NAVIGATE_FAILED,
    WILL_MOVE,
    EventDispatcher,
    SpatialEventDetail,
)
from spatial_nav.navigation.geometry import GeometryProvider
from spatial_nav.navigation.navigator import Direction, NavigationConfig, PreviousMove, navigate
from spatial_nav.navigation.selectors import NavigableFilter, exclude, filter_navigable

logger = get_logger("controller")

class SpatialNavigator:
    """空間導航控制器"""
    
    def __init__(self,
                 config: Optional[NavigationConfig] = None,
                 dispatcher: Optional[EventDispatcher] = None,
                 geometry: Optional[GeometryProvider] = None,
                 navigable_filter: Optional[NavigableFilter] = None):
        """
        初始化導航控制器
        
        Args:
            config: 導航參數，None 時從全局配置構造
            dispatcher: 事件分發器
            geometry: 幾何提供者
            navigable_filter: 候選過濾器，返回 False 的元素被忽略
        """
        self.config = config or NavigationConfig.from_settings()
        self.dispatcher = dispatcher or EventDispatcher()
        self.geometry = geometry
        self.navigable_filter = navigable_filter
        self._previous: Optional[PreviousMove] = self.config.previous
    
    @property
    def previous(self) -> Optional[PreviousMove]:
        return self._previous
    
    def reset(self) -> None:
        """清空上一次移動記錄"""
        self._previous = None
    
    def move(self,
             reference: Any,
             direction: Any,
             candidates: Iterable[Any],
             cause: Literal["keydown", "api"] = "api") -> Optional[Any]:
        """
        從 reference 向 direction 移動
        
        Returns:
            Optional[Any]: 下一個焦點元素；沒有目標或移動被取消時返回 None
        """
        parsed = Direction.parse(direction)
        if reference is None or parsed is None:
            return None
        
        candidates = exclude(filter_navigable(list(candidates), self.navigable_filter), reference)
        config = self.config.model_copy(update={"previous": self._previous})
        next_element = navigate(reference, parsed, candidates, config, self.geometry)
        
        if next_element is None:
            self.dispatcher.dispatch(
                reference,
                NAVIGATE_FAILED,
                SpatialEventDetail(direction=parsed.value, previous_element=reference, cause=cause),
                cancelable=False
            )
            return None
        
        detail = SpatialEventDetail(
            direction=parsed.value,
            previous_element=reference,
            next_element=next_element,
            cause=cause
        )
        if not self.dispatcher.dispatch(reference, WILL_MOVE, detail):
            logger.debug(f"移動被監聽器取消: {parsed.value}")
            return None
        
        if self.config.remember_source:
            self._previous = PreviousMove.record(reference, next_element, parsed)
        return next_element
