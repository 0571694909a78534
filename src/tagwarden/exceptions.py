"""
Custom exceptions for the tagwarden application.

This module defines domain-specific exceptions for error handling
throughout the application, chiefly database failures surfaced by the
repository layer during housekeeping passes.
"""

from __future__ import annotations


class TagwardenError(Exception):
    """Base exception for all tagwarden errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TagwardenError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class RepositoryError(TagwardenError):
    """
    Exception raised for repository/database operation failures.

    This exception wraps database-related errors such as connection
    failures, constraint violations, and query errors. A housekeeping pass
    that hits one aborts and the error reaches the caller unchanged.

    Attributes
    ----------
    message : str
        Human-readable error message.
    operation : str | None
        The database operation that failed (e.g., "select", "delete").
    entity_type : str | None
        The type of entity involved (e.g., "Tag", "ReleaseProfile").
    original_error : Exception | None
        The original database exception that caused this error.

    Examples
    --------
    >>> try:
    ...     await tag_repository.delete_many(session, {1, 2})
    ... except RepositoryError as e:
    ...     print(f"Failed to {e.operation} {e.entity_type}: {e.message}")
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: str | None = None,
        entity_type: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize RepositoryError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Repository operation failed").
        operation : str | None, optional
            The database operation that failed (default: None).
        entity_type : str | None, optional
            The type of entity involved (default: None).
        original_error : Exception | None, optional
            The original database exception (default: None).
        """
        self.operation: str | None = operation
        self.entity_type: str | None = entity_type
        self.original_error: Exception | None = original_error
        super().__init__(message)
