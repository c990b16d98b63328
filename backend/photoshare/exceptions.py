"""
PhotoShare Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the few error conditions the
       read-only API can hit.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return responses with the matching HTTP status codes.
Who:   Raised by the store and the services; caught by global handlers.

Exception Hierarchy:
    PhotoShareError (base)       → 500 Internal Server Error
    ├── NotFoundError            → 400 Bad Request ("Not found")
    ├── BadParameterError        → 400 Bad Request ("Bad param <value>")
    ├── MissingSchemaInfoError   → 500 Internal Server Error
    └── StoreError               → 500 Internal Server Error (raw driver error)

Lookups by identifier answer 400 rather than 404: a malformed identifier
and an unassigned one are deliberately indistinguishable to the client.
"""

from typing import Any, Dict, Optional


class PhotoShareError(Exception):
    """
    Base exception for all PhotoShare application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(PhotoShareError):
    """
    Raised when a requested record does not exist or cannot be looked up.

    When:    Unknown or malformed user id, or the lookup itself failed.
    HTTP:    400 Bad Request with the bare body "Not found".
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class BadParameterError(PhotoShareError):
    """
    Raised for an unrecognized `/test/<param>` value.

    HTTP:    400 Bad Request, body names the offending value.
    """

    def __init__(self, param: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["param"] = param
        super().__init__(message=f"Bad param {param}", context=ctx)
        self.param = param


class MissingSchemaInfoError(PhotoShareError):
    """
    Raised when the singleton SchemaInfo record is absent.

    HTTP:    500 Internal Server Error. The record is expected to exist in a
             loaded database, so its absence is a server-side fault.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Missing SchemaInfo", context=context)


class StoreError(PhotoShareError):
    """
    Raised when a database operation fails.

    What:    Wraps the driver exception (connection lost, server error, ...).
    HTTP:    500 Internal Server Error.

    The original driver exception is kept on `cause` so the handler can
    serialize it when `expose_error_details` is enabled.
    """

    def __init__(
        self,
        cause: BaseException,
        operation: str = "query",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["operation"] = operation
        ctx["error_type"] = type(cause).__name__
        super().__init__(message=str(cause) or type(cause).__name__, context=ctx)
        self.cause = cause
        self.operation = operation

    def to_dict(self) -> Dict[str, Any]:
        """Raw error payload in the shape returned to clients."""
        payload: Dict[str, Any] = {
            "name": type(self.cause).__name__,
            "message": self.message,
        }
        code = getattr(self.cause, "code", None)
        if code is not None:
            payload["code"] = code
        return payload
