"""
API數據模型

定義API請求和響應的Pydantic數據模型。
"""

from .request_models import (
    BoxModel,
    ElementModel,
    PreviousMoveModel,
    NavigateOptions,
    NavigateRequest
)
from .response_models import (
    NavigateResponse,
    ErrorResponse
)

__all__ = [
    "BoxModel",
    "ElementModel",
    "PreviousMoveModel",
    "NavigateOptions",
    "NavigateRequest",
    "NavigateResponse",
    "ErrorResponse"
]
