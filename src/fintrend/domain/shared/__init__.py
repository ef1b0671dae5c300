"""Shared domain components.

This module exports shared exceptions and time helpers used across
domain boundaries.
"""

from fintrend.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from fintrend.domain.shared.time import (
    END_OF_DAY,
    end_of_day,
    ensure_tz_aware,
    start_of_day,
    to_utc,
    utc_now,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    # Utilities
    "END_OF_DAY",
    "end_of_day",
    "ensure_tz_aware",
    "start_of_day",
    "to_utc",
    "utc_now",
]
