"""Pure domain services (no I/O)."""

from accessgate.domain.services.branch_scope import BranchScopeResolver
from accessgate.domain.services.role_catalog import (
    ROLE_CATALOG,
    ROLE_RULES,
    RoleCatalog,
    RoleRule,
    RoleRuleKind,
)

__all__ = [
    "BranchScopeResolver",
    "ROLE_CATALOG",
    "ROLE_RULES",
    "RoleCatalog",
    "RoleRule",
    "RoleRuleKind",
]
