"""
Shared error handling for the group matching engine.
"""

from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class GroupEngineException(Exception):
    """Base exception for the group engine."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class MalformedInputError(GroupEngineException):
    """Input is not well-formed or a field has the wrong shape."""

    def __init__(self, message: str = "Malformed group input", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_INPUT", message, details)


class ValidationError(GroupEngineException):
    """A well-formed group is missing required fields."""

    def __init__(self, missing_fields: List[str], details: Optional[Dict[str, Any]] = None):
        self.missing_fields = list(missing_fields)
        details = dict(details or {})
        details["missing_fields"] = self.missing_fields
        super().__init__(
            "VALIDATION_ERROR",
            f"Group missing required field(s): {', '.join(self.missing_fields)}",
            details
        )


class GroupNotFoundError(GroupEngineException):
    """Lookup of an unknown group id."""

    def __init__(self, group_id: str):
        super().__init__("GROUP_NOT_FOUND", f"Group '{group_id}' not found", {"group_id": group_id})
