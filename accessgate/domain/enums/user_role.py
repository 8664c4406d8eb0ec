"""User roles for authorization.

Roles are mutually exclusive: an actor holds exactly one. The set is
closed; anything outside it is treated as an unrecognized role, which is a
valid, fully-denied state rather than an error.

Roles:
    - super_admin: bypasses every check (all resources, all branches)
    - admin: everything except super-admin-scoped resources
    - manager, supervisor, marketer, staff: fixed resource allow-lists

Usage:
    from accessgate.domain.enums import UserRole

    if actor.role == UserRole.SUPER_ADMIN:
        ...

    role = UserRole.from_value("manager")  # UserRole.MANAGER
    UserRole.from_value("intern")          # None
"""

from enum import Enum


class UserRole(str, Enum):
    """Closed set of dashboard roles.

    String Enum:
        Inherits from str so roles compare equal to their stored values
        ("manager" == UserRole.MANAGER) and serialize without conversion.
    """

    SUPER_ADMIN = "super_admin"
    """Owner role. Every decision is unconditional allow."""

    ADMIN = "admin"
    """Administrator. Allowed everywhere except super-admin resources."""

    MANAGER = "manager"
    """Branch manager. Operations, finance and HR pages."""

    SUPERVISOR = "supervisor"
    """Shift supervisor. Operations and attendance pages."""

    MARKETER = "marketer"
    """Sales and marketing pages."""

    STAFF = "staff"
    """Floor staff. Core operations pages only."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()

    @classmethod
    def from_value(cls, value: "UserRole | str | None") -> "UserRole | None":
        """Coerce a stored role value into a UserRole.

        Args:
            value: Enum member, raw string, or None.

        Returns:
            UserRole | None: Matching role, or None when unrecognized.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and cls.is_valid(value):
            return cls(value)
        return None
