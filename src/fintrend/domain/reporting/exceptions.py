"""Reporting domain exceptions."""

from datetime import datetime

from fintrend.domain.shared.exceptions import ErrorCode, ValidationError


class UnknownGranularityError(ValidationError):
    """Raised when a granularity name is not one of the supported buckets."""

    def __init__(self, value: object) -> None:
        super().__init__(
            message=f"Unknown granularity '{value}'",
            code=ErrorCode.UNKNOWN_GRANULARITY,
            details={"value": str(value)},
        )


class UnknownQuickRangeError(ValidationError):
    """Raised when a quick range name cannot be resolved."""

    def __init__(self, value: object) -> None:
        super().__init__(
            message=f"Unknown quick range '{value}'",
            code=ErrorCode.UNKNOWN_QUICK_RANGE,
            details={"value": str(value)},
        )


class UnknownPeriodError(ValidationError):
    """Raised when a current-period name cannot be resolved."""

    def __init__(self, value: object) -> None:
        super().__init__(
            message=f"Unknown period '{value}'",
            code=ErrorCode.UNKNOWN_PERIOD,
            details={"value": str(value)},
        )


class InvalidDateRangeError(ValidationError):
    """Raised when a custom date range ends before it starts."""

    def __init__(self, start: datetime, end: datetime) -> None:
        super().__init__(
            message="Start date must be on or before end date",
            code=ErrorCode.INVALID_DATE_RANGE,
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
