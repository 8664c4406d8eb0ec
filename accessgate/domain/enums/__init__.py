"""Domain enums package.

Usage:
    from accessgate.domain.enums import Action, Resource, UserRole
"""

from accessgate.domain.enums.capability import Capability
from accessgate.domain.enums.decision_reason import DecisionReason
from accessgate.domain.enums.permission import Action, Resource
from accessgate.domain.enums.user_role import UserRole

__all__ = [
    "Action",
    "Capability",
    "DecisionReason",
    "Resource",
    "UserRole",
]
