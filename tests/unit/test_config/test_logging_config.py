"""
日誌配置單元測試
"""

import importlib

import pytest
from loguru import logger

from spatial_nav.config import logging_config
from spatial_nav.config.settings import LoggingSettings
from spatial_nav.config.logging_config import (
    ContextLogger,
    get_logger,
    get_performance_logger,
    initialize_logging,
    log_performance,
    setup_logging
)


@pytest.fixture
def captured():
    """收集日誌記錄"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.mark.unit
class TestContextLogger:
    """上下文日誌測試類"""
    
    def test_loggers_cached_by_name(self):
        assert get_logger("navigator") is get_logger("navigator")
        assert get_logger("navigator") is not get_logger("events")
        assert get_logger("events").name == "events"
    
    def test_context_is_bound(self, captured):
        """測試上下文和關鍵字字段寫入 extra"""
        context_logger = ContextLogger("test").add_context(session="s-1")
        context_logger.info("moved", direction="down")
        
        record = captured[-1]
        assert record["message"] == "moved"
        assert record["extra"]["name"] == "test"
        assert record["extra"]["session"] == "s-1"
        assert record["extra"]["direction"] == "down"
    
    def test_clear_context(self, captured):
        context_logger = ContextLogger("test").add_context(session="s-1").clear_context()
        context_logger.warning("cleared")
        assert "session" not in captured[-1]["extra"]


@pytest.mark.unit
class TestLogPerformance:
    """性能監控裝飾器測試類"""
    
    def test_records_success(self):
        @log_performance("scaled")
        def scale(value):
            return value * 2
        
        assert scale(21) == 42
        assert "scaled" in get_performance_logger().get_summary()
    
    def test_reraises_errors(self, captured):
        @log_performance()
        def explode():
            raise ValueError("boom")
        
        with pytest.raises(ValueError):
            explode()
        assert any(record["extra"].get("status") == "error" for record in captured)
    
    def test_measure_context(self):
        perf = get_performance_logger()
        with perf.measure("partition_batch"):
            pass
        assert perf.get_summary()["partition_batch"] >= 0


@pytest.mark.unit
class TestSetupLogging:
    """日誌系統設置測試類"""
    
    def test_file_sink(self, tmp_path):
        """測試配置文件路徑時寫入日誌文件"""
        log_file = tmp_path / "logs" / "nav.log"
        try:
            setup_logging(LoggingSettings(level="DEBUG", file_path=log_file))
            get_logger("file-test").info("written to file")
            logger.complete()
            assert "written to file" in log_file.read_text(encoding="utf-8")
        finally:
            setup_logging(LoggingSettings())
    
    def test_json_format(self, tmp_path):
        config = setup_logging(LoggingSettings(format="json"))
        try:
            assert config.settings.format == "json"
        finally:
            setup_logging(LoggingSettings())
    
    def test_import_keeps_existing_sinks(self, captured):
        """測試重新導入模組不會移除宿主應用的處理器"""
        importlib.reload(logging_config)
        get_logger("host").info("still captured")
        assert captured[-1]["message"] == "still captured"
    
    def test_initialize_logging(self):
        config = initialize_logging()
        assert config is not None
        assert config.settings.level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
