"""
FastAPI應用主文件

創建和配置FastAPI應用實例，設置路由、中間件和異常處理。
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from loguru import logger

from .. import __version__
from ..config.settings import APISettings, get_settings
from ..config.logging_config import get_logger, initialize_logging
from .routes import navigate
from .middleware.error_handler import (
    ErrorHandlerMiddleware,
    create_error_response,
    format_validation_errors
)


SERVICE_NAME = "空間導航服務"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """應用生命週期管理"""
    logger.info(f"🚀 {SERVICE_NAME} API 啟動中...")
    yield
    logger.info(f"🛑 {SERVICE_NAME} API 關閉中...")


def create_app(settings: Optional[APISettings] = None) -> FastAPI:
    """
    創建並配置FastAPI應用
    
    Args:
        settings: API配置，如果為None則使用全局配置
        
    Returns:
        配置好的FastAPI應用實例
    """
    if settings is None:
        settings = get_settings().api
    
    initialize_logging()
    app_logger = get_logger("api.app")
    
    app = FastAPI(
        title=f"{SERVICE_NAME} API",
        description="根據當前焦點元素、方向和候選元素選出下一個焦點元素",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json"
    )
    
    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorHandlerMiddleware)
    
    # 註冊路由
    app.include_router(navigate.router, prefix="/api/v1", tags=["導航"])
    
    @app.get("/health", response_model=dict, tags=["系統"])
    async def health_check():
        """健康檢查端點"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": __version__
        }
    
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """HTTP異常處理器"""
        app_logger.warning(f"HTTP異常: {exc.status_code} - {exc.detail}")
        return create_error_response(
            error_type="HTTP_ERROR",
            message=str(exc.detail),
            status_code=exc.status_code
        )
    
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """請求驗證異常處理器"""
        app_logger.warning(f"請求驗證失敗: {request.url.path}")
        return create_error_response(
            error_type="VALIDATION_ERROR",
            message="請求數據驗證失敗",
            status_code=422,
            details=format_validation_errors(exc.errors())
        )
    
    app_logger.debug("✅ FastAPI應用配置完成")
    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False):
    """
    運行服務器
    
    Args:
        host: 綁定的主機地址，None 時使用配置
        port: 綁定的端口，None 時使用配置
        reload: 是否啟用自動重載
    """
    settings = get_settings().api
    uvicorn.run(
        "spatial_nav.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None  # 使用我們自定義的日誌配置
    )


if __name__ == "__main__":
    run_server(reload=True)
