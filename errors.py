# errors.py
# Date Code Finder – error taxonomy shared by the encoders, decoders and routes

"""
Every validation failure raises one of these. Nothing is returned as an
error string and nothing is partially built: callers catch DateCodeError
and present the message to the user.
"""

from typing import Optional


class DateCodeError(Exception):
    """Base exception for all date code errors."""

    kind = "date_code_error"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(DateCodeError, ValueError):
    """Raised when a required string is missing or empty, or an era is unknown."""

    kind = "invalid_argument"

    def __init__(self, argument: str, reason: Optional[str] = None):
        message = f"{argument} must not be empty"
        if reason:
            message = f"Invalid {argument}: {reason}"
        super().__init__(message=message, details={"argument": argument, "reason": reason})


class FormatError(DateCodeError, ValueError):
    """Raised when a code is structurally malformed (length, characters, digits)."""

    kind = "format_error"

    def __init__(self, value, reason: str):
        super().__init__(
            message=f"Malformed value {value!r}: {reason}",
            details={"value": value, "reason": reason},
        )


class OutOfRangeError(DateCodeError, ValueError):
    """Raised when a year, month or week parses but falls outside the era window."""

    kind = "out_of_range"

    def __init__(self, field: str, value, allowed: str):
        super().__init__(
            message=f"Manufacturing {field} {value} is out of range ({allowed})",
            details={"field": field, "value": value, "allowed": allowed},
        )


class InvalidCodeError(DateCodeError, ValueError):
    """Raised when a factory location code is unknown or blacklisted."""

    kind = "invalid_code"

    def __init__(self, code: str, reason: Optional[str] = None):
        message = f"Invalid factory location code: {code}"
        if reason:
            message += f" ({reason})"
        super().__init__(message=message, details={"code": code, "reason": reason})
