"""
導航服務API模組

基於FastAPI，把方向導航算法暴露為HTTP端點。
"""

from .app import create_app, run_server

__all__ = ["create_app", "run_server"]
