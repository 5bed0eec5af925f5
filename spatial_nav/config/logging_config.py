"""
日誌配置模組
Logging Configuration Module

基於loguru的日誌系統，提供：
- 文本或結構化（JSON）日誌輸出
- 可選的文件輪轉和保留策略
- 上下文追蹤和性能監控
"""

import sys
import time
import functools
from pathlib import Path
from typing import Optional, Dict, Any
from contextlib import contextmanager
from loguru import logger
from spatial_nav.config.settings import get_settings, LoggingSettings

class LogConfig:
    """日誌配置類"""
    
    def __init__(self, settings: Optional[LoggingSettings] = None):
        """
        初始化日誌配置
        
        Args:
            settings: 日誌設置，如果為None則使用默認設置
        """
        if settings is None:
            settings = get_settings().logging
        
        self.settings = settings
        self._setup_logger()
    
    def _setup_logger(self) -> None:
        """設置日誌記錄器"""
        # 移除已有處理器；未綁定名稱的記錄也能使用下面的格式
        logger.configure(extra={"name": "spatial_nav"})
        logger.remove()
        
        logger.add(
            sys.stderr,
            format=self._get_text_format(),
            level=self.settings.level,
            colorize=self.settings.format == "text",
            serialize=self.settings.format == "json",
            backtrace=True,
            diagnose=False
        )
        
        # 添加文件處理器（如果配置了文件路徑）
        if self.settings.file_path:
            self._add_file_handler()
    
    def _get_text_format(self) -> str:
        """獲取文本格式模板"""
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    
    def _add_file_handler(self) -> None:
        """添加文件處理器"""
        file_path = Path(self.settings.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        
        logger.add(
            str(file_path),
            format=self._get_text_format(),
            level=self.settings.level,
            rotation=self.settings.rotation,
            retention=self.settings.retention,
            compression="gz",
            serialize=self.settings.format == "json",
            enqueue=True,  # 異步日誌
            backtrace=True,
            diagnose=False
        )


class ContextLogger:
    """上下文日誌記錄器"""
    
    def __init__(self, logger_name: str = "spatial_nav"):
        """
        初始化上下文日誌記錄器
        
        Args:
            logger_name: 日誌記錄器名稱
        """
        self.name = logger_name
        self.logger = logger.bind(name=logger_name)
        self.context: Dict[str, Any] = {}
    
    def add_context(self, **kwargs) -> "ContextLogger":
        """
        添加上下文信息
        
        Returns:
            ContextLogger: 返回自身以支持鏈式調用
        """
        self.context.update(kwargs)
        return self
    
    def clear_context(self) -> "ContextLogger":
        """清空上下文信息"""
        self.context.clear()
        return self
    
    def _log_with_context(self, level: str, message: str, **kwargs) -> None:
        """
        帶上下文的日誌記錄
        
        Args:
            level: 日誌級別
            message: 日誌消息
            **kwargs: 額外參數
        """
        extra_data = {**self.context, **kwargs}
        bound_logger = self.logger.bind(**extra_data)
        # 讓loguru報告調用方而不是本包裝器
        bound_logger.opt(depth=2).log(level.upper(), message)
    
    def debug(self, message: str, **kwargs) -> None:
        self._log_with_context("DEBUG", message, **kwargs)
    
    def info(self, message: str, **kwargs) -> None:
        self._log_with_context("INFO", message, **kwargs)
    
    def warning(self, message: str, **kwargs) -> None:
        self._log_with_context("WARNING", message, **kwargs)
    
    def error(self, message: str, **kwargs) -> None:
        self._log_with_context("ERROR", message, **kwargs)
    
    def critical(self, message: str, **kwargs) -> None:
        self._log_with_context("CRITICAL", message, **kwargs)

class PerformanceLogger:
    """性能監控日誌記錄器"""
    
    def __init__(self, logger_name: str = "performance"):
        self.logger = ContextLogger(logger_name)
        self._measurements: Dict[str, float] = {}
    
    @contextmanager
    def measure(self, operation_name: str, **kwargs):
        """
        性能測量上下文管理器
        
        Args:
            operation_name: 操作名稱
            **kwargs: 額外參數
        """
        start_time = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            self._measurements[operation_name] = duration
            self.logger.debug(
                f"Operation '{operation_name}' completed",
                operation_name=operation_name,
                duration_ms=duration * 1000,
                **kwargs
            )
    
    def get_summary(self) -> Dict[str, float]:
        """獲取性能測量摘要"""
        return self._measurements.copy()
    
    def log_function_performance(self, func_name: str, duration: float, **kwargs) -> None:
        """
        記錄函數性能
        
        Args:
            func_name: 函數名稱
            duration: 執行時間（秒）
            **kwargs: 額外參數
        """
        self._measurements[func_name] = duration
        self.logger.debug(
            f"Function {func_name} executed",
            function_name=func_name,
            duration_ms=duration * 1000,
            **kwargs
        )

# 全局日誌配置實例
_log_config: Optional[LogConfig] = None
_loggers: Dict[str, ContextLogger] = {}
_perf_logger: Optional[PerformanceLogger] = None

def setup_logging(settings: Optional[LoggingSettings] = None) -> LogConfig:
    """
    設置日誌系統
    
    Args:
        settings: 日誌配置，如果為None則使用默認配置
        
    Returns:
        LogConfig: 日誌配置實例
    """
    global _log_config
    _log_config = LogConfig(settings)
    return _log_config

def get_logger(name: str = "spatial_nav") -> ContextLogger:
    """
    獲取指定名稱的上下文日誌記錄器（按名稱緩存）
    
    Args:
        name: 日誌記錄器名稱
    """
    if name not in _loggers:
        _loggers[name] = ContextLogger(name)
    return _loggers[name]

def get_performance_logger() -> PerformanceLogger:
    """獲取性能日誌記錄器"""
    global _perf_logger
    if _perf_logger is None:
        _perf_logger = PerformanceLogger()
    return _perf_logger

# 性能監控裝飾器
def log_performance(func_name: Optional[str] = None):
    """
    性能監控裝飾器
    
    Args:
        func_name: 自定義函數名稱，如果為None則使用實際函數名
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                get_performance_logger().log_function_performance(
                    func_name or func.__name__,
                    time.perf_counter() - start_time,
                    status="error",
                    error=str(e)
                )
                raise
            get_performance_logger().log_function_performance(
                func_name or func.__name__,
                time.perf_counter() - start_time,
                status="success"
            )
            return result
        return wrapper
    return decorator

def initialize_logging() -> Optional[LogConfig]:
    """
    初始化日誌系統
    
    導入本包不會改動loguru的處理器，由服務入口（create_app）顯式調用。
    配置無效時退回基本的stderr輸出。
    """
    try:
        config = setup_logging()
    except ValueError as e:
        logger.remove()
        logger.add(sys.stderr, level="INFO")
        logger.warning(f"日誌配置無效，使用默認配置: {e}")
        return None
    get_logger("logging_config").debug("日誌系統初始化成功")
    return config
