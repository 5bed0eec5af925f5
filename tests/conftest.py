"""
pytest配置文件

定義全局fixtures、測試配置和共用測試工具。
"""

import pytest
from dataclasses import dataclass
from typing import Optional

from fastapi.testclient import TestClient

from spatial_nav.config.settings import APISettings
from spatial_nav.navigation.geometry import BoundingBox, get_rect
from spatial_nav.api.app import create_app


@dataclass(eq=False)
class LayoutElement:
    """測試用的可導航元素，以身份判等"""
    name: str
    bbox: Optional[BoundingBox]
    
    def __repr__(self) -> str:
        return f"<{self.name}>"


# ============ 佈局 Fixtures ============

@pytest.fixture
def make_element():
    """由四條邊創建元素；left 為 None 時創建沒有幾何信息的元素"""
    def factory(name: str, left=None, top=None, right=None, bottom=None) -> LayoutElement:
        if left is None:
            return LayoutElement(name=name, bbox=None)
        return LayoutElement(name=name, bbox=BoundingBox.from_edges(left, top, right, bottom))
    return factory


@pytest.fixture
def make_rect():
    """由四條邊直接創建 Rect"""
    def factory(left, top, right, bottom):
        return get_rect(BoundingBox.from_edges(left, top, right, bottom))
    return factory


@pytest.fixture
def reference_rect(make_rect):
    """參考矩形 {left:100, top:100, right:200, bottom:200}"""
    return make_rect(100, 100, 200, 200)


@pytest.fixture
def grid(make_element):
    """3x3 按鈕網格，單元格 100x100，間距 20；鍵為 (列, 行)"""
    return {
        (col, row): make_element(f"cell-{col}-{row}",
                                 col * 120, row * 120, col * 120 + 100, row * 120 + 100)
        for col in range(3)
        for row in range(3)
    }


# ============ API測試 Fixtures ============

@pytest.fixture
def client():
    """測試用HTTP客戶端"""
    app = create_app(APISettings(debug=True))
    with TestClient(app) as test_client:
        yield test_client
