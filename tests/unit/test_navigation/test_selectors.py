"""
候選輔助函數單元測試
"""

import pytest

from spatial_nav.navigation.selectors import exclude, filter_navigable, match_selector


@pytest.mark.unit
class TestMatchSelector:
    """選擇器匹配測試類"""
    
    def test_predicate(self, make_element):
        element = make_element("button", 0, 0, 10, 10)
        assert match_selector(element, lambda e: e.name == "button")
        assert not match_selector(element, lambda e: e.name == "link")
    
    def test_collection(self, make_element):
        a, b = make_element("a", 0, 0, 1, 1), make_element("b", 0, 0, 1, 1)
        assert match_selector(a, [a])
        assert not match_selector(b, [a])
        assert match_selector("id-1", {"id-1", "id-2"})
    
    def test_single_element(self, make_element):
        a, b = make_element("a", 0, 0, 1, 1), make_element("b", 0, 0, 1, 1)
        assert match_selector(a, a)
        assert not match_selector(a, b)
    
    def test_string_is_not_a_collection(self):
        assert match_selector("menu", "menu")
        assert not match_selector("m", "menu")
    
    def test_none(self, make_element):
        assert not match_selector(None, [None])
        assert not match_selector(make_element("a"), None)


@pytest.mark.unit
class TestExclude:
    """排除測試類"""
    
    def test_exclude_single(self):
        elements = ["a", "b", "c"]
        assert exclude(elements, "b") == ["a", "c"]
        assert elements == ["a", "b", "c"]
    
    def test_exclude_list(self):
        assert exclude(["a", "b", "c"], ["a", "c", "missing"]) == ["b"]
    
    def test_exclude_removes_first_occurrence_only(self):
        assert exclude(["a", "b", "a"], "a") == ["b", "a"]


@pytest.mark.unit
class TestFilterNavigable:
    """可導航過濾測試類"""
    
    def test_without_filter(self):
        assert filter_navigable(("a", "b")) == ["a", "b"]
    
    def test_with_filter(self):
        assert filter_navigable(["a", "bb", "c"], lambda e: len(e) == 1) == ["a", "c"]
