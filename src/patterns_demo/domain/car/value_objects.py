# src/patterns_demo/domain/car/value_objects.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from patterns_demo.domain.base.exceptions import ValidationError


@dataclass(frozen=True)
class Car:
    """A car assembled from named components, e.g. ``{"battery": "lithium-ion"}``."""
    components: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.components, Mapping):
            raise ValidationError("Car components must be a mapping",
                                  {"components": ["Must be a mapping of name to value"]})
        if not self.components:
            raise ValidationError("A car needs at least one component",
                                  {"components": ["At least one component is required"]})
        bad_names = [name for name in self.components if not isinstance(name, str) or not name]
        if bad_names:
            raise ValidationError("Component names must be non-empty strings",
                                  {"components": [f"Invalid component name: {name!r}" for name in bad_names]})
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))

    def component(self, name: str) -> Any:
        return self.components[name]

    def to_dict(self) -> Dict[str, Any]:
        return {"components": dict(self.components)}
