"""
配置管理模組
Configuration Management Module

本模組負責整個系統的配置管理，包括：
- 基於Pydantic的類型安全配置
- 環境變量管理（NAV_、LOG_、API_ 前綴）
- 基於loguru的日誌配置
"""

from spatial_nav.config.settings import (
    Settings,
    NavigationSettings,
    LoggingSettings,
    APISettings,
    get_settings,
    get_navigation_defaults
)

from spatial_nav.config.logging_config import (
    setup_logging,
    get_logger,
    get_performance_logger,
    log_performance,
    LogConfig
)

__all__ = [
    # 主要配置類
    "Settings",
    "NavigationSettings",
    "LoggingSettings",
    "APISettings",
    
    # 配置獲取函數
    "get_settings",
    "get_navigation_defaults",
    
    # 日誌配置
    "setup_logging",
    "get_logger",
    "get_performance_logger",
    "log_performance",
    "LogConfig",
]
