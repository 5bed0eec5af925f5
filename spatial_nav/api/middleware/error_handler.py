"""
錯誤處理中間件

統一處理API請求中的異常，提供標準化的錯誤響應格式。
"""

import traceback
import uuid
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from pydantic import ValidationError
from loguru import logger

from ..models.response_models import ErrorResponse


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    統一錯誤處理中間件
    
    捕獲並處理應用中的各種異常，返回標準化的錯誤響應。
    """
    
    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.logger = logger.bind(name="error_handler")
    
    async def dispatch(self, request: Request, call_next):
        """
        處理請求並捕獲異常
        
        Args:
            request: 請求對象
            call_next: 下一個中間件或路由處理器
        """
        method = request.method
        path = request.url.path
        try:
            self.logger.debug(f"🔄 處理請求: {method} {path}")
            response = await call_next(request)
            
            if response.status_code >= 400:
                self.logger.warning(f"⚠️ 請求 {method} {path} 返回狀態碼: {response.status_code}")
            return response
            
        except HTTPException as exc:
            self.logger.warning(f"🚫 HTTP異常: {exc.status_code} - {exc.detail}")
            return create_error_response(
                error_type="HTTP_ERROR",
                message=str(exc.detail),
                status_code=exc.status_code
            )
        
        except ValidationError as exc:
            # Pydantic驗證錯誤
            self.logger.warning(f"📝 數據驗證錯誤: {str(exc)}")
            return create_error_response(
                error_type="VALIDATION_ERROR",
                message="請求數據驗證失敗",
                status_code=422,
                details=format_validation_errors(exc.errors())
            )
        
        except Exception as exc:
            error_id = f"ERR_{uuid.uuid4().hex[:8].upper()}"
            self.logger.error(
                f"💥 未處理的異常 [ID: {error_id}]: {str(exc)}\n"
                f"Traceback: {traceback.format_exc()}"
            )
            return create_error_response(
                error_type="INTERNAL_SERVER_ERROR",
                message="內部服務器錯誤",
                status_code=500,
                details={"error_id": error_id, "type": type(exc).__name__}
            )


def create_error_response(error_type: str, message: str, status_code: int,
                          details: dict = None) -> JSONResponse:
    """創建標準化錯誤響應"""
    error_response = ErrorResponse(
        error=error_type,
        message=message,
        status_code=status_code,
        details=details
    )
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


def format_validation_errors(errors) -> dict:
    """格式化Pydantic驗證錯誤"""
    return {
        "validation_errors": [
            {
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"]
            }
            for error in errors
        ]
    }
