"""
API響應數據模型

定義導航結果和錯誤信息的響應數據結構。
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class NavigateResponse(BaseModel):
    """導航結果"""
    found: bool = Field(..., description="是否找到下一個焦點元素")
    next_id: Optional[str] = Field(None, description="下一個焦點元素ID")
    previous_id: str = Field(..., description="移動前的焦點元素ID")
    direction: str = Field(..., description="請求的方向")
    
    model_config = {
        "json_schema_extra": {
            "example": {"found": True, "next_id": "b", "previous_id": "a", "direction": "down"}
        }
    }


class ErrorResponse(BaseModel):
    """錯誤響應"""
    error: str = Field(..., description="錯誤類型")
    message: str = Field(..., description="錯誤消息")
    status_code: int = Field(..., description="HTTP狀態碼")
    details: Optional[Dict[str, Any]] = Field(None, description="錯誤詳情")
