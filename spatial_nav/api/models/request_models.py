"""
API請求數據模型

定義導航端點的請求數據結構。
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from spatial_nav.navigation.geometry import BoundingBox


class BoxModel(BaseModel):
    """邊界框（視口像素坐標），拒絕無窮大和 NaN"""
    model_config = ConfigDict(allow_inf_nan=False)
    
    x: float = Field(..., description="左邊緣")
    y: float = Field(..., description="上邊緣")
    width: float = Field(..., ge=0, description="寬度")
    height: float = Field(..., ge=0, description="高度")
    
    def to_bounding_box(self) -> BoundingBox:
        return BoundingBox(x=self.x, y=self.y, width=self.width, height=self.height)


class ElementModel(BaseModel):
    """可導航元素"""
    id: str = Field(..., min_length=1, description="元素ID")
    bbox: Optional[BoxModel] = Field(
        default=None, description="邊界框，null 表示元素未佈局"
    )
    
    model_config = {
        "json_schema_extra": {
            "example": {"id": "menu-1", "bbox": {"x": 100, "y": 100, "width": 100, "height": 100}}
        }
    }


class PreviousMoveModel(BaseModel):
    """上一次移動記錄（以元素ID表示）"""
    target: str = Field(..., description="來源元素ID")
    destination: str = Field(..., description="目標元素ID")
    reverse: str = Field(..., description="上一次移動方向的反方向")


class NavigateOptions(BaseModel):
    """導航參數"""
    straight_overlap_threshold: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, description="直線重疊閾值"
    )
    straight_only: Optional[bool] = Field(default=None, description="僅考慮直線方向，null 時使用配置")
    remember_source: Optional[bool] = Field(default=None, description="記憶來源，null 時使用配置")
    previous: Optional[PreviousMoveModel] = Field(default=None, description="上一次移動記錄")


class NavigateRequest(BaseModel):
    """導航請求"""
    reference: ElementModel = Field(..., description="當前焦點元素")
    direction: str = Field(..., description="方向: up / down / left / right")
    candidates: List[ElementModel] = Field(default_factory=list, description="候選元素")
    config: Optional[NavigateOptions] = Field(default=None, description="導航參數")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "reference": {"id": "a", "bbox": {"x": 100, "y": 100, "width": 100, "height": 100}},
                "direction": "down",
                "candidates": [
                    {"id": "b", "bbox": {"x": 100, "y": 300, "width": 100, "height": 100}},
                    {"id": "c", "bbox": {"x": 250, "y": 300, "width": 100, "height": 100}}
                ]
            }
        }
    }
