"""Permission components for authorization.

Resource and Action enums used for permission checks. A permission is a
resource:action pair (e.g., "reports:read").

The resource namespace is open at the engine boundary (any string can be
checked), but the names the dashboard protects are listed here so role
tables and callers share one spelling.

Usage:
    from accessgate.domain.enums import Action, Resource

    decision = await engine.decide(actor, Resource.PRODUCTS, Action.WRITE)
"""

from enum import Enum


class Resource(str, Enum):
    """Resources protected by the dashboard.

    String Enum:
        Values are lowercase snake_case to match stored grant rows.
    """

    # Overview
    DASHBOARD = "dashboard"
    NOTIFICATIONS = "notifications"

    # Catalog and operations
    PRODUCTS = "products"
    INVENTORY = "inventory"
    ORDERS = "orders"
    PRODUCTION = "production"

    # Relationships
    CUSTOMERS = "customers"
    PARTIES = "parties"

    # Finance
    ASSETS = "assets"
    EXPENSES = "expenses"
    SALES = "sales"
    PURCHASES = "purchases"
    REPORTS = "reports"
    BILLING = "billing"

    # People
    STAFF = "staff"
    ATTENDANCE = "attendance"
    SALARY = "salary"
    LEAVE_REQUESTS = "leave_requests"

    # Administration
    USERS = "users"
    ADMIN = "admin"
    SETTINGS = "settings"
    SUPER_ADMIN = "super_admin"
    """Owner-only functions. Denied to every role except the bypass role."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings.

        Returns:
            list[str]: List of resource values.
        """
        return [resource.value for resource in cls]


class Action(str, Enum):
    """Actions that can be performed on resources.

    Action Semantics:
        READ: View/list access.
        WRITE: Create/update/delete access.
        READ_WRITE: Both. A READ_WRITE grant satisfies READ and WRITE
            requests; a narrower grant never satisfies a wider request.
    """

    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]

    def satisfies(self, requested: "Action") -> bool:
        """Check whether a grant for this action covers a requested action.

        Exact match, or this action is READ_WRITE.

        Args:
            requested: Action being requested.

        Returns:
            bool: True if a grant for ``self`` permits ``requested``.
        """
        return self is requested or self is Action.READ_WRITE
