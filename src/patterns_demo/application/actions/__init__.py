"""Action adapters - one business operation, several entry points."""
from .adapters import (
    Action,
    ActionResponse,
    CommandAdapter,
    ControllerAdapter,
    JobAdapter,
    run,
)

__all__ = ['Action', 'ActionResponse', 'CommandAdapter', 'ControllerAdapter', 'JobAdapter', 'run']
