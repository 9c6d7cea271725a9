"""Factories - construction indirection for cars and views."""
from .car_factory import CarFactory
from .view_factory import View, ViewFactory, ViewNotFoundError

__all__ = ['CarFactory', 'View', 'ViewFactory', 'ViewNotFoundError']
