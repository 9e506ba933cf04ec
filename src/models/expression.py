"""Cron expression and field value models."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple


class InvalidExpression(ValueError):
    """Raised when a cron expression or one of its fields cannot be parsed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class FieldRange:
    """Closed interval of values a cron field may take."""
    name: str
    lower: int
    upper: int

    def contains(self, value: int) -> bool:
        return self.lower <= value <= self.upper

    def values(self) -> FrozenSet[int]:
        return frozenset(range(self.lower, self.upper + 1))


SECONDS = FieldRange("seconds", 0, 59)
MINUTES = FieldRange("minutes", 0, 59)
HOURS = FieldRange("hours", 0, 23)
DAY_OF_MONTH = FieldRange("day-of-month", 1, 31)
MONTH = FieldRange("month", 1, 12)
DAY_OF_WEEK = FieldRange("day-of-week", 0, 6)  # 0=Sun

FIELD_RANGES = (SECONDS, MINUTES, HOURS, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)

WILDCARD = "*"


@dataclass(frozen=True)
class CronExpression:
    """The six raw field strings of a normalized cron expression."""
    seconds: str
    minutes: str
    hours: str
    day_of_month: str
    month: str
    day_of_week: str

    def fields(self) -> Tuple[str, str, str, str, str, str]:
        return (
            self.seconds,
            self.minutes,
            self.hours,
            self.day_of_month,
            self.month,
            self.day_of_week
        )

    def to_dict(self) -> dict:
        return {
            "seconds": self.seconds,
            "minutes": self.minutes,
            "hours": self.hours,
            "day_of_month": self.day_of_month,
            "month": self.month,
            "day_of_week": self.day_of_week
        }

    def __str__(self) -> str:
        return " ".join(self.fields())


@dataclass(frozen=True)
class CronSchedule:
    """Resolved value sets for every field of an expression."""
    seconds: FrozenSet[int]
    minutes: FrozenSet[int]
    hours: FrozenSet[int]
    days_of_month: FrozenSet[int]
    months: FrozenSet[int]
    days_of_week: FrozenSet[int]
    day_of_month_wildcard: bool = False
    day_of_week_wildcard: bool = False
