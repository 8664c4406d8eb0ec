"""Application services."""

from accessgate.application.services.access_decision_engine import (
    AccessDecisionEngine,
)

__all__ = ["AccessDecisionEngine"]
