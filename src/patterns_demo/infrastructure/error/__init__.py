"""Error handling infrastructure."""
from .error_middleware import ErrorMiddleware
from .exception_handler import ErrorResponse, ExceptionHandler, get_exception_handler

__all__ = ['ErrorMiddleware', 'ErrorResponse', 'ExceptionHandler', 'get_exception_handler']
