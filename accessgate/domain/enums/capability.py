"""Coarse role capabilities.

Capabilities gate whole management areas (user admin, finance views,
settings) independently of per-resource checks. They are granted by role
only; the permission store never contributes to them.
"""

from enum import Enum


class Capability(str, Enum):
    """Management capabilities granted by role."""

    MANAGE_USERS = "manage_users"
    VIEW_SUPER_ADMIN_USERS = "view_super_admin_users"
    MANAGE_STAFF = "manage_staff"
    VIEW_FINANCE = "view_finance"
    MANAGE_SETTINGS = "manage_settings"
    MANAGE_BRANCHES = "manage_branches"
