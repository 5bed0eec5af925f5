"""
空間導航庫
Spatial Navigation Library

根據當前焦點元素、方向鍵（上/下/左/右）和候選元素集合，模擬人類的空間直覺
選出下一個應獲得焦點的元素，用於遙控器或鍵盤驅動的二維界面導航。

核心功能：
- 基於 3x3 區域分區的方向候選篩選
- 多層級優先級和距離平局打破
- 反向移動時的「記憶來源」
- 基於Pydantic的類型安全配置、基於loguru的日誌
- FastAPI 導航服務
"""

__version__ = "1.0.0"

VERSION = __version__

from spatial_nav.config.settings import Settings, get_settings
from spatial_nav.config.logging_config import setup_logging, get_logger
from spatial_nav.navigation import (
    BoundingBox,
    Direction,
    NavigationConfig,
    PreviousMove,
    SpatialNavigator,
    navigate
)

__all__ = [
    "VERSION",
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "BoundingBox",
    "Direction",
    "NavigationConfig",
    "PreviousMove",
    "SpatialNavigator",
    "navigate",
]

def get_version() -> str:
    """獲取當前版本號"""
    return __version__
