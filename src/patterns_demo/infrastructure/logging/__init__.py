"""Logging infrastructure - structlog on top of the standard logging module."""
from .logger import get_logger, setup_logging

__all__ = ['get_logger', 'setup_logging']
