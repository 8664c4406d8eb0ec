"""Runtime environments.

Only log rendering depends on the environment: development gets colored
console output, everything else JSON lines.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environment, read from ENVIRONMENT."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def renders_json_logs(self) -> bool:
        """True everywhere except local development."""
        return self is not Environment.DEVELOPMENT
