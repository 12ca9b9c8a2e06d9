"""
Error handling utilities for the Tesla Inventory Watch.

This module defines the error taxonomy raised by the pipeline components
and an error tracker that records fatal failures for the run summary.
"""

import traceback
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .logging import get_logger

BODY_SNIPPET_LENGTH = 300


class InventoryWatchError(Exception):
    """Base class for all errors raised by the inventory watch."""


class ConfigurationError(InventoryWatchError):
    """Required configuration (credentials) is missing or invalid."""


class UpstreamError(InventoryWatchError):
    """An upstream HTTP endpoint answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class BlockedAccessError(UpstreamError):
    """The inventory API refused the request (HTTP 403)."""

    def __init__(self, status_code: int = 403, body: str = ""):
        super().__init__(f"Inventory API HTTP {status_code}", status_code)
        self.body_snippet = (body or "")[:BODY_SNIPPET_LENGTH]


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification."""

    NETWORK = "network"
    CONFIGURATION = "configuration"
    BLOCKED_ACCESS = "blocked_access"
    PARSING = "parsing"
    MESSAGE_DELIVERY = "message_delivery"
    SYSTEM = "system"


@dataclass
class ErrorInfo:
    """Information about an error occurrence."""

    timestamp: datetime
    component: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    exception_type: str
    traceback: str
    context: Dict[str, Any]


def categorize_exception(exception: BaseException) -> ErrorCategory:
    """Map an exception to the error category used for tracking."""
    if isinstance(exception, ConfigurationError):
        return ErrorCategory.CONFIGURATION
    if isinstance(exception, BlockedAccessError):
        return ErrorCategory.BLOCKED_ACCESS
    if isinstance(exception, UpstreamError):
        return ErrorCategory.NETWORK
    if isinstance(exception, ValueError):
        # json decoding failures surface as ValueError subclasses
        return ErrorCategory.PARSING

    # requests exceptions are IOError subclasses
    if isinstance(exception, OSError):
        return ErrorCategory.NETWORK
    return ErrorCategory.SYSTEM


class ErrorTracker:
    """
    Tracks errors recorded during a run.
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize error tracker.

        Args:
            max_errors: Maximum number of errors to keep in memory
        """
        self.max_errors = max_errors
        self.errors: List[ErrorInfo] = []
        self.error_counts: Dict[str, int] = {}
        self.logger = get_logger("error_tracker")

    def record_error(
        self,
        component: str,
        category: ErrorCategory,
        severity: ErrorSeverity,
        message: str,
        exception: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> ErrorInfo:
        """
        Record an error occurrence.

        Args:
            component: Component where error occurred
            category: Error category
            severity: Error severity
            message: Error message
            exception: Exception object if available
            context: Additional context information

        Returns:
            ErrorInfo object
        """
        error_info = ErrorInfo(
            timestamp=datetime.now(),
            component=component,
            category=category,
            severity=severity,
            message=message,
            exception_type=type(exception).__name__ if exception else "Unknown",
            traceback=(
                "".join(
                    traceback.format_exception(
                        type(exception), exception, exception.__traceback__
                    )
                )
                if exception
                else ""
            ),
            context=context or {},
        )

        self.errors.append(error_info)
        if len(self.errors) > self.max_errors:
            self.errors.pop(0)

        error_key = f"{component}.{category.value}.{severity.value}"
        self.error_counts[error_key] = self.error_counts.get(error_key, 0) + 1

        self.logger.error(
            f"Error recorded: {message}",
            extra={
                "error_component": component,
                "category": category.value,
                "severity": severity.value,
                "exception_type": error_info.exception_type,
                "context": context,
            },
        )

        return error_info

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics for the current run."""
        return {
            "total_errors": len(self.errors),
            "error_counts": self.error_counts.copy(),
            "severity_breakdown": {
                severity.value: len([e for e in self.errors if e.severity == severity])
                for severity in ErrorSeverity
            },
            "category_breakdown": {
                category.value: len([e for e in self.errors if e.category == category])
                for category in ErrorCategory
            },
        }


# Global error tracker instance
_error_tracker: Optional[ErrorTracker] = None


def get_error_tracker() -> ErrorTracker:
    """Get global error tracker instance."""
    global _error_tracker
    if _error_tracker is None:
        _error_tracker = ErrorTracker()
    return _error_tracker
