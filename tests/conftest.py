"""Shared pytest fixtures.

Provides:
1. Mock collaborators (logger, event bus, permission store)
2. Actor factories for each role
3. A real engine wired to an in-memory permission store
"""

from unittest.mock import AsyncMock, Mock

import pytest

from accessgate.application.services.access_decision_engine import (
    AccessDecisionEngine,
)
from accessgate.core.result import Success
from accessgate.domain.enums import Action, UserRole
from accessgate.domain.value_objects import Actor, PermissionGrant
from accessgate.infrastructure.authorization.in_memory_permission_store import (
    InMemoryPermissionStore,
)


def make_actor(
    role: UserRole | str | None = UserRole.STAFF,
    *,
    actor_id: str = "user-1",
    branch_id: int | None = None,
    can_access_all_branches: bool = False,
    branch_name: str | None = None,
) -> Actor:
    """Helper to create an Actor for testing.

    Usage:
        actor = make_actor(UserRole.MANAGER, branch_id=3)
        unknown = make_actor("accountant")
    """
    return Actor(
        actor_id=actor_id,
        role=role,
        branch_id=branch_id,
        can_access_all_branches=can_access_all_branches,
        branch_name=branch_name,
    )


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    bind()/with_context() return the same mock so calls made through a
    bound logger can be asserted on the fixture directly.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.error.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    logger.bind = Mock(return_value=logger)
    logger.with_context = Mock(return_value=logger)
    return logger


@pytest.fixture
def mock_event_bus():
    """Provide a mock event bus for testing.

    Usage:
        async def test_something(mock_event_bus):
            await engine.decide(...)
            mock_event_bus.publish.assert_called_once()
    """
    event_bus = Mock()
    event_bus.publish = AsyncMock(return_value=None)
    event_bus.subscribe = Mock(return_value=None)
    return event_bus


@pytest.fixture
def mock_permission_store():
    """Provide a mock permission store returning no grants by default."""
    store = Mock()
    store.list_grants = AsyncMock(return_value=Success(value=[]))
    return store


@pytest.fixture
def permission_store() -> InMemoryPermissionStore:
    """In-memory store with a role-only grant set for an unlisted role.

    - "accountant" role: reports read_write, expenses read
    - user-9 is an accountant with expenses read revoked
    """
    return InMemoryPermissionStore(
        role_grants={
            "accountant": [
                PermissionGrant(resource="reports", action=Action.READ_WRITE),
                PermissionGrant(resource="expenses", action=Action.READ),
            ],
        },
        user_grants={
            "user-9": [
                PermissionGrant(resource="expenses", action=Action.READ, granted=False),
                PermissionGrant(resource="billing", action=Action.WRITE),
            ],
        },
        user_roles={"user-8": "accountant", "user-9": "accountant"},
    )


@pytest.fixture
def engine(mock_logger, permission_store) -> AccessDecisionEngine:
    """Engine backed by the in-memory store, no event bus."""
    return AccessDecisionEngine(
        permission_store=permission_store,
        logger=mock_logger,
        timeout_seconds=1.0,
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests against real third-party engines (Casbin)"
    )
    config.addinivalue_line("markers", "api: FastAPI dependency tests")
