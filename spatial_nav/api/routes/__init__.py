"""
API路由模組

包含所有API端點的路由定義和處理邏輯。
"""

from . import navigate

__all__ = ["navigate"]
