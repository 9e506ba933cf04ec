"""Value models for CronLens."""

from .expression import (
    CronExpression,
    CronSchedule,
    FieldRange,
    InvalidExpression,
    FIELD_RANGES,
    SECONDS,
    MINUTES,
    HOURS,
    DAY_OF_MONTH,
    MONTH,
    DAY_OF_WEEK,
    WILDCARD
)
from .result import CronParseResult

__all__ = [
    "CronExpression",
    "CronSchedule",
    "FieldRange",
    "InvalidExpression",
    "CronParseResult",
    "FIELD_RANGES",
    "SECONDS",
    "MINUTES",
    "HOURS",
    "DAY_OF_MONTH",
    "MONTH",
    "DAY_OF_WEEK",
    "WILDCARD"
]
