"""Error types and classifications."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

import msgspec


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    INPUT_TIMEOUT = "input_timeout"
    INPUT = "input"
    PARSE = "parse"
    NO_USAGE_DATA = "no_usage_data"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ErrorSeverity(StrEnum):
    """Error severity levels."""

    FATAL = "fatal"


class ErrorReport(msgspec.Struct, frozen=True):
    """Structured error with category and remediation."""

    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    remediation: str | None = None
    details: dict | None = None
    timestamp: datetime = msgspec.field(
        default_factory=lambda: datetime.now().astimezone()
    )


class CcgraphError(Exception):
    """Base class for errors that end a ccgraph run."""

    category: ErrorCategory = ErrorCategory.UNKNOWN
    severity: ErrorSeverity = ErrorSeverity.FATAL

    def __init__(
        self,
        message: str,
        *,
        remediation: str | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def to_report(self) -> ErrorReport:
        """Convert to a structured report for display."""
        from ccgraph.errors.messages import get_remediation

        return ErrorReport(
            message=self.message,
            category=self.category,
            severity=self.severity,
            remediation=self.remediation or get_remediation(self.category),
            details=self.details,
        )


class InputTimeoutError(CcgraphError):
    """No bytes arrived on stdin before the deadline."""

    category = ErrorCategory.INPUT_TIMEOUT


class InputReadError(CcgraphError):
    """Reading stdin failed."""

    category = ErrorCategory.INPUT


class ParseFailureError(CcgraphError):
    """Input was not valid ccusage JSON."""

    category = ErrorCategory.PARSE


class NoUsageDataError(CcgraphError):
    """Neither known usage collection held any records."""

    category = ErrorCategory.NO_USAGE_DATA


class ConfigError(CcgraphError):
    """Config file could not be loaded."""

    category = ErrorCategory.CONFIGURATION
