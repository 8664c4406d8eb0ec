"""Core errors package.

Usage:
    from accessgate.core.errors import DomainError, AuthorizationError
"""

from accessgate.core.errors.common_errors import AuthorizationError
from accessgate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "AuthorizationError",
]
