"""Car factory - hides how cars are put together."""
from typing import Any, Mapping

from patterns_demo.domain.car.value_objects import Car
from patterns_demo.infrastructure.logging.logger import get_logger


class CarFactory:
    """Builds fully assembled cars from named components.

    The factory keeps no state between calls, so one instance can be shared
    by any number of callers.
    """

    def __init__(self, logger: Any = None):
        self._logger = logger or get_logger(__name__)

    def make(self, components: Mapping[str, Any]) -> Car:
        car = Car(components=dict(components))
        self._logger.debug("Car assembled", components=sorted(car.components))
        return car
