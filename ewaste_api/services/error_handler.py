"""
Error Handling Service

Domain exceptions for the e-waste backend and the service that logs and
reports them.
"""

import logging
import uuid
from typing import Dict, Any, Optional
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorSeverity(str, Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    SYSTEM = "system"


class EwasteError(Exception):
    """Base exception for domain errors raised by services."""
    category = ErrorCategory.SYSTEM
    severity = ErrorSeverity.HIGH
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(EwasteError):
    """Missing or malformed input."""
    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.LOW
    default_message = "All fields are required!"


class AuthError(EwasteError):
    """Bad credentials."""
    category = ErrorCategory.AUTHENTICATION
    severity = ErrorSeverity.MEDIUM
    default_message = "Invalid credentials"


class NotFound(EwasteError):
    """A referenced entity does not exist."""
    category = ErrorCategory.NOT_FOUND
    severity = ErrorSeverity.LOW
    default_message = "Not found"


class ListingNotFound(NotFound):
    default_message = "Disposal item not found!"


class RequestNotFound(NotFound):
    default_message = "Request not found!"


class InvalidTransition(EwasteError):
    """A decision was made on a request that is no longer Pending."""
    category = ErrorCategory.CONFLICT
    severity = ErrorSeverity.MEDIUM
    default_message = "Request has already been decided"


class StoreError(EwasteError):
    """The store could not complete the operation."""
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.HIGH


class ConstraintViolation(StoreError):
    """A uniqueness or foreign key constraint rejected the write."""


class ErrorRecord:
    """Represents an error occurrence with context."""

    def __init__(
        self,
        error: Exception,
        category: ErrorCategory,
        severity: ErrorSeverity,
        context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
    ):
        self.error = error
        self.category = category
        self.severity = severity
        self.context = context or {}
        self.operation = operation
        self.timestamp = datetime.utcnow()
        self.error_id = f"{category.value}_{uuid.uuid4().hex[:8]}"
        self.error_type = type(error).__name__
        self.error_message = str(error)


class ErrorHandlerService:
    """Service for logging and reporting errors."""

    _log_levels = {
        ErrorSeverity.LOW: logging.INFO,
        ErrorSeverity.MEDIUM: logging.WARNING,
        ErrorSeverity.HIGH: logging.ERROR,
        ErrorSeverity.CRITICAL: logging.CRITICAL,
    }

    def handle_error(
        self,
        error: Exception,
        category: ErrorCategory,
        severity: ErrorSeverity,
        context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Log an error and build a report for the caller.

        Args:
            error: The exception that occurred
            category: Category of the error
            severity: Severity level of the error
            context: Additional context information
            operation: Name of the operation that failed

        Returns:
            Dictionary describing the error, safe to expose except for
            ``error_type``, ``detail`` and ``context``
        """
        record = ErrorRecord(
            error=error,
            category=category,
            severity=severity,
            context=context,
            operation=operation,
        )
        self._log_error(record)
        return {
            "error_id": record.error_id,
            "category": record.category.value,
            "severity": record.severity.value,
            "operation": record.operation,
            "error_type": record.error_type,
            "detail": record.error_message,
            "context": record.context,
            "timestamp": record.timestamp.isoformat(),
        }

    def _log_error(self, record: ErrorRecord) -> None:
        level = self._log_levels.get(record.severity, logging.ERROR)
        logger.log(
            level,
            f"[{record.error_id}] {record.operation or 'unknown operation'}: "
            f"{record.error_type}: {record.error_message} context={record.context}",
            exc_info=record.error if level >= logging.ERROR else None,
        )


error_handler = ErrorHandlerService()
