"""
Error types and error codes for the cloudiam policy model.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

Every error raised here is a contract violation by the caller. They are
raised before any builder state changes and are never worth retrying.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Error codes used across cloudiam."""
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_STATE = "invalid_state"

    def __str__(self) -> str:
        return self.value


INVALID_ARGUMENT = ErrorCode.INVALID_ARGUMENT
INVALID_STATE = ErrorCode.INVALID_STATE


class IamError(Exception):
    """Base exception for all cloudiam errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INVALID_ARGUMENT,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def is_retryable(self) -> bool:
        """Policy model errors are programmer errors; retrying never helps."""
        return False

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class InvalidArgumentError(IamError, ValueError):
    """Raised when a role, member or collection argument is None or malformed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, INVALID_ARGUMENT, details, cause)
        self.field = field

        if field:
            self.details['field'] = field


class InvalidStateError(IamError):
    """
    Raised when an operation is not allowed in the current state, e.g. a
    legacy role map operation on a version 3 policy.
    """

    def __init__(
        self,
        message: str,
        version: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, INVALID_STATE, details)
        self.version = version

        if version is not None:
            self.details['version'] = version


__all__ = [
    'ErrorCode',
    'INVALID_ARGUMENT',
    'INVALID_STATE',
    'IamError',
    'InvalidArgumentError',
    'InvalidStateError',
]
