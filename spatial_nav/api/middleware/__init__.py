"""
API中間件模組
"""

from .error_handler import ErrorHandlerMiddleware, create_error_response, format_validation_errors

__all__ = ["ErrorHandlerMiddleware", "create_error_response", "format_validation_errors"]
