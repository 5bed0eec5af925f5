"""
矩形提取器單元測試

測試邊界矩形提取、中心點計算和幾何失敗處理。
"""

import pytest

from spatial_nav.navigation.geometry import (
    BoundingBox,
    NoGeometryError,
    bbox_geometry,
    get_rect
)


@pytest.mark.unit
class TestBoundingBox:
    """邊界框測試類"""
    
    def test_edges(self):
        """測試邊緣屬性"""
        box = BoundingBox(x=10, y=20, width=30, height=40)
        assert (box.left, box.top, box.right, box.bottom) == (10, 20, 40, 60)
    
    def test_from_edges(self):
        """測試由四條邊構造"""
        box = BoundingBox.from_edges(100, 100, 200, 250)
        assert box.width == 100
        assert box.height == 150


@pytest.mark.unit
class TestGetRect:
    """矩形提取測試類"""
    
    def test_rect_from_element_bbox(self, make_element):
        """測試從元素的 bbox 屬性提取矩形"""
        element = make_element("a", 100, 100, 200, 200)
        rect = get_rect(element)
        
        assert rect.left == 100
        assert rect.top == 100
        assert rect.right == 200
        assert rect.bottom == 200
        assert rect.width == 100
        assert rect.height == 100
        assert rect.element is element
        assert (rect.center.x, rect.center.y) == (150, 150)
    
    def test_center_uses_floor(self):
        """測試中心點使用向下取整"""
        rect = get_rect(BoundingBox(x=10, y=20, width=5, height=7))
        assert rect.center.x == 12  # 10 + floor(2.5)
        assert rect.center.y == 23  # 20 + floor(3.5)
    
    def test_center_as_degenerate_rect(self):
        """測試中心點以退化矩形暴露"""
        center = get_rect(BoundingBox(x=0, y=0, width=10, height=20)).center
        assert center.left == center.right == 5
        assert center.top == center.bottom == 10
        assert center.width == 0
        assert center.height == 0
    
    def test_zero_size_rect(self):
        """測試零尺寸矩形合法"""
        rect = get_rect(BoundingBox(x=50, y=60, width=0, height=0))
        assert rect is not None
        assert rect.right == rect.left == 50
        assert (rect.center.x, rect.center.y) == (50, 60)
    
    def test_missing_geometry_returns_none(self, make_element):
        """測試沒有幾何信息時返回 None"""
        assert get_rect(make_element("detached")) is None
        assert get_rect(object()) is None
    
    def test_provider_raising_no_geometry(self):
        """測試幾何提供者拋出 NoGeometryError"""
        def provider(element):
            raise NoGeometryError(element)
        
        assert get_rect("anything", geometry=provider) is None
    
    def test_provider_errors_propagate(self):
        """測試其他異常不被吞掉"""
        def provider(element):
            raise RuntimeError("layout engine crashed")
        
        with pytest.raises(RuntimeError):
            get_rect("anything", geometry=provider)
    
    def test_custom_geometry_provider(self):
        """測試自定義幾何提供者"""
        boxes = {"menu": BoundingBox(0, 0, 40, 10)}
        rect = get_rect("menu", geometry=boxes.get)
        assert rect.element == "menu"
        assert rect.right == 40
    
    def test_callable_bbox_attribute(self):
        """測試 bbox 為方法的元素"""
        class Widget:
            def bbox(self):
                return BoundingBox(1, 2, 3, 4)
        
        assert bbox_geometry(Widget()) == BoundingBox(1, 2, 3, 4)
    
    def test_bounding_box_as_element(self):
        """測試元素本身就是邊界框"""
        box = BoundingBox(0, 0, 10, 10)
        assert get_rect(box).element is box
