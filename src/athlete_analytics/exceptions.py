"""
Custom exceptions for the athlete analytics engine.

This module defines the hard-failure side of the engine's error handling.
Each exception includes:
- A descriptive message
- An error code for collaborators that serialize errors
- Optional details for debugging

Form-like validation (``validate_*`` functions) never raises; it returns a
list of human-readable messages instead.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error payloads."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Training load errors
    TRAINING_LOAD_INVALID = "TRAINING_LOAD_INVALID"

    # Injury risk errors
    RISK_RATIO_INVALID = "RISK_RATIO_INVALID"


class AnalyticsError(Exception):
    """
    Base exception for all analytics engine errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for error payloads."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors
# ============================================================================

class ValidationError(AnalyticsError):
    """Raised when a direct calculation receives an invalid input."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


class TrainingLoadInputError(ValidationError):
    """Raised when session RPE or duration is outside its valid range."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, field=field, details=details)
        self.code = ErrorCode.TRAINING_LOAD_INVALID


class RiskRatioError(ValidationError):
    """Raised when a workload ratio cannot be placed in any risk zone."""

    def __init__(self, ratio: float) -> None:
        super().__init__(
            message=f"Workload ratio {ratio} does not fall in any risk zone",
            field="ratio",
            details={"ratio": ratio},
        )
        self.code = ErrorCode.RISK_RATIO_INVALID
