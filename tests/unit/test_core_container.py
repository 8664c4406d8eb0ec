"""Unit tests for the composition root.

Tests cover:
- get_logger() and get_event_bus() singletons
- Audit handler subscription controlled by settings
- get_enforcer() loads the packaged model with or without a policy file
- get_access_engine() wiring

Note:
    Factories import adapters inside the function body, so adapters are
    patched at their defining module.
"""

from unittest.mock import MagicMock, patch

import pytest

from accessgate.application.services.access_decision_engine import (
    AccessDecisionEngine,
)
from accessgate.core.config import DEFAULT_CASBIN_MODEL_PATH
from accessgate.core.container import (
    get_access_engine,
    get_enforcer,
    get_event_bus,
    get_logger,
    get_permission_store,
)
from accessgate.domain.events import AccessDecisionRecorded
from accessgate.infrastructure.authorization.casbin_permission_store import (
    CasbinPermissionStore,
)
from accessgate.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset lru_cache singletons around each test."""
    factories = (
        get_logger,
        get_event_bus,
        get_enforcer,
        get_permission_store,
        get_access_engine,
    )
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


@pytest.mark.unit
class TestInfrastructureContainer:
    """Test logger and event bus factories."""

    def test_get_logger_singleton(self):
        """Test get_logger returns the same instance."""
        assert get_logger() is get_logger()

    def test_get_logger_binds_app_identity(self):
        """Test app name, version and environment are bound to the logger."""
        with (
            patch("accessgate.core.container.infrastructure.settings") as mock_settings,
            patch(
                "accessgate.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_adapter,
        ):
            mock_settings.app_name = "accessgate"
            mock_settings.app_version = "9.9.9"
            mock_settings.environment.value = "production"
            mock_settings.environment.renders_json_logs = True
            mock_settings.log_level = "INFO"

            logger = get_logger()

        mock_adapter.assert_called_once_with(use_json=True, level="INFO")
        mock_adapter.return_value.bind.assert_called_once_with(
            app="accessgate",
            app_version="9.9.9",
            environment="production",
        )
        assert logger is mock_adapter.return_value.bind.return_value

    def test_get_event_bus_singleton(self):
        """Test get_event_bus returns the same instance."""
        bus = get_event_bus()

        assert isinstance(bus, InMemoryEventBus)
        assert bus is get_event_bus()

    def test_audit_handler_subscribed(self):
        """Test the audit handler is registered when auditing is on."""
        with patch("accessgate.core.container.infrastructure.settings") as mock_settings:
            mock_settings.audit_decisions = True
            mock_settings.log_level = "INFO"

            bus = get_event_bus()

        assert len(bus._handlers[AccessDecisionRecorded]) == 1

    def test_audit_handler_not_subscribed_when_disabled(self):
        """Test no audit handler when auditing is off."""
        with patch("accessgate.core.container.infrastructure.settings") as mock_settings:
            mock_settings.audit_decisions = False
            mock_settings.log_level = "INFO"

            bus = get_event_bus()

        assert bus._handlers.get(AccessDecisionRecorded, []) == []


@pytest.mark.unit
class TestAuthorizationContainer:
    """Test enforcer, store and engine factories."""

    def test_get_enforcer_without_policy(self):
        """Test an empty enforcer is built from the packaged model."""
        with patch("accessgate.core.container.authorization.settings") as mock_settings:
            mock_settings.casbin_model_path = DEFAULT_CASBIN_MODEL_PATH
            mock_settings.casbin_policy_path = None

            enforcer = get_enforcer()

        assert enforcer.get_policy() == []

    def test_get_enforcer_with_policy(self, tmp_path):
        """Test policy rows are loaded from a CSV file."""
        policy = tmp_path / "policy.csv"
        policy.write_text("p, accountant, reports, read\ng, u-1, accountant\n")

        with patch("accessgate.core.container.authorization.settings") as mock_settings:
            mock_settings.casbin_model_path = DEFAULT_CASBIN_MODEL_PATH
            mock_settings.casbin_policy_path = str(policy)

            enforcer = get_enforcer()

        assert enforcer.enforce("u-1", "reports", "read") is True

    def test_get_enforcer_singleton(self):
        """Test get_enforcer is cached."""
        with patch("casbin.Enforcer") as mock_enforcer_cls:
            mock_enforcer_cls.return_value = MagicMock()

            assert get_enforcer() is get_enforcer()
            mock_enforcer_cls.assert_called_once()

    def test_get_permission_store(self):
        """Test the Casbin store is wired."""
        assert isinstance(get_permission_store(), CasbinPermissionStore)

    def test_get_access_engine(self):
        """Test the engine singleton is built with the configured timeout."""
        with patch("accessgate.core.container.authorization.settings") as mock_settings:
            mock_settings.casbin_model_path = DEFAULT_CASBIN_MODEL_PATH
            mock_settings.casbin_policy_path = None
            mock_settings.permission_store_timeout_seconds = 0.25

            engine = get_access_engine()

        assert isinstance(engine, AccessDecisionEngine)
        assert engine is get_access_engine()
        assert engine._timeout_seconds == 0.25
