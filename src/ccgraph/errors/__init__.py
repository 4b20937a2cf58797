"""Error handling for ccgraph."""

from ccgraph.errors.messages import (
    REMEDIATION_TEMPLATES,
    USAGE_HINT,
    get_remediation,
)
from ccgraph.errors.types import (
    CcgraphError,
    ConfigError,
    ErrorCategory,
    ErrorReport,
    ErrorSeverity,
    InputReadError,
    InputTimeoutError,
    NoUsageDataError,
    ParseFailureError,
)

__all__ = [
    # Core types
    "ErrorCategory",
    "ErrorSeverity",
    "ErrorReport",
    # Exceptions
    "CcgraphError",
    "InputTimeoutError",
    "InputReadError",
    "ParseFailureError",
    "NoUsageDataError",
    "ConfigError",
    # Message templates
    "REMEDIATION_TEMPLATES",
    "USAGE_HINT",
    "get_remediation",
]
