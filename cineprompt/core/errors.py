"""
CinePrompt Error Models and Exception Classes
Standard error envelopes and the exit codes the CLI reports.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes"""
    AUTH_FAIL = "auth_fail"
    VALIDATION_ERROR = "validation_error"
    EMPTY_PROMPT = "empty_prompt"
    THIRD_PARTY_FAIL = "third_party_fail"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


class ErrorResponse(BaseModel):
    """Standard error envelope"""
    ok: bool = Field(default=False, description="Always false for errors")
    code: ErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error context")


class SuccessResponse(BaseModel):
    """Standard success envelope"""
    ok: bool = Field(default=True, description="Always true for success")
    data: Any = Field(..., description="Response payload")


# Custom Exception Classes

class CinePromptException(Exception):
    """Base exception for all CinePrompt errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        exit_code: int = 1
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.exit_code = exit_code
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to error response model."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class AuthenticationError(CinePromptException):
    """Missing, malformed or rejected API key."""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code=ErrorCode.AUTH_FAIL,
            message=message,
            details=details,
            exit_code=3
        )


class ValidationError(CinePromptException):
    """Input validation failed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details=details,
            exit_code=2
        )


class EmptyPromptError(CinePromptException):
    """No field produced any prompt text."""

    def __init__(
        self,
        message: str = "no prompt text generated. Check your field values.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            code=ErrorCode.EMPTY_PROMPT,
            message=message,
            details=details,
            exit_code=2
        )


class ThirdPartyError(CinePromptException):
    """Share-link service failed or was unreachable."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code=ErrorCode.THIRD_PARTY_FAIL,
            message=message,
            details=details,
            exit_code=4
        )


class NotFoundError(CinePromptException):
    """Requested resource not found."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=message,
            details=details,
            exit_code=1
        )
