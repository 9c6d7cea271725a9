"""Error handling middleware for demo handlers."""
import functools
from typing import Any, Callable, Dict, Optional

from patterns_demo.infrastructure.error.exception_handler import ExceptionHandler, get_exception_handler


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def wrap_handler(self, handler_func: Callable[..., Dict[str, Any]]) -> Callable[..., Dict[str, Any]]:
        """
        Wrap a handler function with error handling.

        Args:
            handler_func: The handler function to wrap

        Returns:
            Wrapped handler returning either the handler's result or an
            error payload with an ``error`` key
        """

        @functools.wraps(handler_func)
        def wrapped_handler(*args, **kwargs):
            try:
                return handler_func(*args, **kwargs)
            except Exception as e:
                return self._error_handler.handle_error(e).to_dict()

        return wrapped_handler
