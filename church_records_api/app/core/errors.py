"""
Domain exceptions for the records service.

These exceptions are independent of the HTTP layer.  Services raise
them and the API endpoints translate them into status codes:
``ValidationError`` is a client error, ``NotFoundError`` (and its
``MemberNotFoundError`` subclass) a missing record, and
``StoreFailure`` an internal error of the durable store.
"""

from typing import Optional


class RecordsError(Exception):
    """Base exception for all records service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(RecordsError):
    """Raised when an input field set violates an entity's rules."""

    def __init__(self, reason: str, field: Optional[str] = None):
        self.reason = reason
        self.field = field
        super().__init__(message=reason, details={"field": field})


class NotFoundError(RecordsError):
    """Raised when a point lookup by identifier finds no record."""

    def __init__(self, entity: str, entity_id: str, message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            message=message or f"{entity} not found",
            details={"entity": entity, "id": entity_id},
        )


class MemberNotFoundError(NotFoundError):
    """Raised when a contribution references a member that does not exist."""

    def __init__(self, member_id: str):
        super().__init__(
            entity="Member",
            entity_id=member_id,
            message=(
                "Member not found: The provided memberId does not correspond "
                "to any registered member."
            ),
        )


class StoreFailure(RecordsError):
    """Raised when reading or writing the durable map fails."""

    def __init__(self, operation: str, collection: str, reason: Optional[str] = None):
        message = f"Store {operation} on '{collection}' failed"
        if reason:
            message += f": {reason}"
        self.operation = operation
        self.collection = collection
        super().__init__(
            message=message,
            details={"operation": operation, "collection": collection, "reason": reason},
        )
