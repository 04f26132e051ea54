# -*- coding: utf-8 -*-
"""Domain exceptions shared by repositories and API handlers.

Every error carries a machine-readable ``error_code`` and a ``context`` dict
so handlers can report whether anything changed before the failure:

- NotFoundError / InvalidItemTypeError: nothing happened.
- ConflictError: the write was rolled back; the caller may fix and retry.
- StoreUnavailableError: the database could not be reached; retry from scratch.
"""

from typing import Any


class NewsdeskError(Exception):
    """Base class for all application errors."""

    error_code: str = "NEWSDESK_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "detail": self.message,
            "error_code": self.error_code,
            "context": self.context,
        }


class NotFoundError(NewsdeskError):
    """Raised when a live entity or recycle-bin record does not exist."""

    error_code = "RESOURCE_NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: str, **extra_context: Any) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            {"resource_type": resource_type, "resource_id": str(resource_id), **extra_context},
        )


class ConflictError(NewsdeskError):
    """Raised when a write collides with existing state (duplicate key)."""

    error_code = "CONFLICT"


class StoreUnavailableError(NewsdeskError):
    """Raised when the database fails for transport or server-side reasons."""

    error_code = "STORE_UNAVAILABLE"


class InvalidItemTypeError(NewsdeskError):
    """Raised when an item type outside the registered set reaches the recycle bin.

    This is a programming or configuration defect and is never handled
    silently.
    """

    error_code = "INVALID_ITEM_TYPE"

    def __init__(self, item_type: str) -> None:
        self.item_type = item_type
        super().__init__(
            f"Unsupported recycle bin item type: {item_type}",
            {"item_type": item_type},
        )


class ValidationError(NewsdeskError):
    """Raised when a request is well-formed but violates a business rule."""

    error_code = "VALIDATION_ERROR"
