"""Domain value objects.

Usage:
    from accessgate.domain.value_objects import Actor, BranchFilter
"""

from accessgate.domain.value_objects.access import AccessDecision, AccessRequest
from accessgate.domain.value_objects.actor import Actor
from accessgate.domain.value_objects.branch_filter import BranchFilter
from accessgate.domain.value_objects.permission_grant import PermissionGrant

__all__ = [
    "AccessDecision",
    "AccessRequest",
    "Actor",
    "BranchFilter",
    "PermissionGrant",
]
