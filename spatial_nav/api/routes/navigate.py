"""
導航API端點

把請求中的元素和參數轉換為核心導航調用，返回下一個焦點元素的ID。
"""

from typing import Dict, Optional

from fastapi import APIRouter
from loguru import logger

from ...navigation.navigator import Direction, NavigationConfig, PreviousMove, navigate
from ..models.request_models import ElementModel, NavigateOptions, NavigateRequest
from ..models.response_models import NavigateResponse


router = APIRouter()
navigate_logger = logger.bind(name="api.navigate")


def _element_geometry(element: ElementModel):
    """幾何提供者：bbox 為 null 的元素沒有幾何信息"""
    return element.bbox.to_bounding_box() if element.bbox else None


def _build_config(options: Optional[NavigateOptions],
                  elements: Dict[str, ElementModel]) -> NavigationConfig:
    """把請求參數轉換為導航參數，上一次移動記錄中的ID被解析為元素"""
    if options is None:
        return NavigationConfig.from_settings()
    
    previous = None
    reverse = Direction.parse(options.previous.reverse) if options.previous else None
    if options.previous and reverse is not None:
        previous = PreviousMove(
            target=elements.get(options.previous.target),
            destination=elements.get(options.previous.destination),
            reverse=reverse
        )
    
    return NavigationConfig.from_settings().extend(
        straight_overlap_threshold=options.straight_overlap_threshold,
        straight_only=options.straight_only,
        remember_source=options.remember_source,
        previous=previous
    )


@router.post("/navigate", response_model=NavigateResponse, tags=["導航"])
async def navigate_elements(request: NavigateRequest) -> NavigateResponse:
    """
    選出下一個焦點元素
    
    **說明：**
    - 方向無法識別、沒有候選或參考元素沒有幾何信息時，`found` 為 false
    - `bbox` 為 null 的候選被忽略
    - 啟用 `remember_source` 且 `previous` 匹配反向移動時，優先返回來源元素
    """
    elements = {element.id: element for element in request.candidates}
    elements.setdefault(request.reference.id, request.reference)
    
    config = _build_config(request.config, elements)
    chosen = navigate(
        request.reference,
        request.direction,
        request.candidates,
        config,
        geometry=_element_geometry
    )
    
    navigate_logger.debug(
        f"🧭 {request.reference.id} -> {request.direction}: {chosen.id if chosen else None}"
    )
    
    return NavigateResponse(
        found=chosen is not None,
        next_id=chosen.id if chosen is not None else None,
        previous_id=request.reference.id,
        direction=request.direction
    )
