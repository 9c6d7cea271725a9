"""Patterns Demo - Root Package.

Five object-oriented design patterns exercised against one small domain of
client orders:

    - Repository: order storage behind a swappable contract
    - Resource: output views that decouple orders from their JSON shape
    - Factory: construction of cars and of named views
    - Strategy: delivery cost and time algorithms picked by the caller
    - Action: one password update usable directly, as a request handler,
      as a command or as a queued job

Architecture:
    domain holds entities and contracts, application the use cases built on
    them, infrastructure the storage, factories and cross-cutting concerns,
    and interface/cli the demo entry point. bootstrap wires everything
    through constructor injection.

Usage:
    >>> patterns-demo repository
    >>> patterns-demo strategy --format table
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
