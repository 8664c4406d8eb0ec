"""Reason codes attached to every access decision.

Each value names the rule that produced the decision, so audit records can
be grouped and alerted on without re-running the evaluation.
"""

from enum import Enum


class DecisionReason(str, Enum):
    """Rule that fired for an access decision."""

    NO_ACTOR = "no-actor"
    """No authenticated actor. Always a deny."""

    ROLE_BYPASS = "role-bypass"
    """Bypass role. Always an allow."""

    ROLE_DENY_LIST = "role-deny-list"
    """Deny-list role. Allowed unless the resource is on the list."""

    ROLE_ALLOW_LIST = "role-allow-list"
    """Allow-list role. Allowed only if the resource is on the list."""

    PERMISSION_STORE_FALLBACK = "permission-store-fallback"
    """A stored grant satisfied the request."""

    PERMISSION_STORE_NO_MATCH = "permission-store-no-match"
    """The store answered but no grant satisfied the request."""

    PERMISSION_STORE_UNAVAILABLE = "permission-store-unavailable"
    """The store failed, timed out or is not configured. Fail-closed deny."""
