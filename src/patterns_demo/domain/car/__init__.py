"""Car domain - the value object built by the car factory."""
from .value_objects import Car

__all__ = ['Car']
