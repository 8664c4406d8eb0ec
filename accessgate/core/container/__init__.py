"""Composition root.

Factory functions that build and cache the package's adapters. Host
applications call these (or override them in FastAPI via
``app.dependency_overrides``) instead of constructing adapters directly.

Usage:
    from accessgate.core.container import get_access_engine

    engine = get_access_engine()
"""

from accessgate.core.container.authorization import (
    get_access_engine,
    get_enforcer,
    get_permission_store,
)
from accessgate.core.container.infrastructure import get_event_bus, get_logger

__all__ = [
    "get_access_engine",
    "get_enforcer",
    "get_event_bus",
    "get_logger",
    "get_permission_store",
]
