"""Service layer exception classes for Recipe of the Day.

Not-found lookups and business-rule violations are ordinary results
(None, SaveResult.errors, DeleteOutcome), not exceptions. Exceptions are
reserved for storage faults and for callers that explicitly ask for one.

Exception Hierarchy:
    ServiceError (base)
    ├── ValidationError
    └── DatabaseError
"""

from typing import Dict, Optional


class ServiceError(Exception):
    """Base exception for all service layer errors."""

    pass


class ValidationError(ServiceError):
    """Raised when a caller unwraps a rejected SaveResult.

    Args:
        errors: Mapping of field name to message

    Example:
        >>> raise ValidationError({"title": "This field is required"})
        ValidationError: Validation failed: title: This field is required
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        error_msg = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Validation failed: {error_msg}")


class DatabaseError(ServiceError):
    """Raised when the storage layer fails (connectivity, constraint violation).

    Args:
        message: Description of the failed operation
        original_error: Underlying SQLAlchemy exception
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")
