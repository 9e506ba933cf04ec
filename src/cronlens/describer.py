"""Human-readable descriptions of cron expressions."""

from typing import Callable, List

from models import CronExpression, WILDCARD
from .calculator import resolve_schedule

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

WEEKDAY_NAMES = [
    "Sunday", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday"
]


def describe(expression: CronExpression) -> str:
    """Describe when an expression fires, as a single English sentence.

    Args:
        expression: Normalized cron expression

    Returns:
        Description such as "Every 5 minutes." or
        "At 00:00, on day 1 of the month or on Monday."

    Raises:
        InvalidExpression: If any field cannot be resolved
    """
    resolve_schedule(expression)

    clauses = [_describe_time(expression)]

    day_clause = _describe_days(expression)
    if day_clause:
        clauses.append(day_clause)

    if expression.month != WILDCARD:
        months = _describe_values(expression.month, "month", "months", _month_name)
        clauses.append(months if months.startswith("every") else f"only in {months}")

    sentence = ", ".join(clauses)
    return sentence[0].upper() + sentence[1:] + "."


def _describe_time(expression: CronExpression) -> str:
    seconds, minutes, hours = expression.seconds, expression.minutes, expression.hours

    # Common patterns
    if hours == WILDCARD and _is_plain_step(minutes) and seconds in (WILDCARD, "0"):
        return _every(minutes[2:], "minute", "minutes")
    if hours == WILDCARD and minutes == WILDCARD:
        return "every minute"

    if minutes == WILDCARD:
        hour_phrase = _describe_values(hours, "hour", "hours")
        joiner = ", " if hour_phrase.startswith("every") else " during "
        clause = "every minute" + joiner + hour_phrase
        if seconds not in (WILDCARD, "0"):
            clause += f", at {_describe_values(seconds, 'second', 'seconds')}"
        return clause

    if hours.isdigit() and minutes.isdigit() and seconds.isdigit():
        clock = f"{int(hours):02d}:{int(minutes):02d}"
        if int(seconds):
            clock += f":{int(seconds):02d}"
        return f"at {clock}"

    steps: List[str] = []
    fixed: List[str] = []
    for part, unit, units in (
        (hours, "hour", "hours"),
        (minutes, "minute", "minutes"),
        (seconds, "second", "seconds")
    ):
        if part == WILDCARD or (unit == "second" and part == "0"):
            continue
        phrase = _describe_values(part, unit, units)
        (steps if phrase.startswith("every") else fixed).append(phrase)

    phrases = list(steps)
    if fixed:
        at_clause = "at " + ", ".join(fixed)
        if hours == WILDCARD and not _is_plain_step(minutes):
            at_clause += " of every hour"
        phrases.append(at_clause)
    return ", ".join(phrases)


def _describe_days(expression: CronExpression) -> str:
    day_of_month, day_of_week = expression.day_of_month, expression.day_of_week
    if day_of_month == WILDCARD and day_of_week == WILDCARD:
        return ""

    month_days = ""
    if day_of_month != WILDCARD:
        month_days = _describe_values(day_of_month, "day", "days") + " of the month"
    weekdays = ""
    if day_of_week != WILDCARD:
        weekdays = _describe_values(day_of_week, "day of the week", "days of the week", _weekday_name)

    if month_days and weekdays:
        # Either constraint is enough for a day to match
        return f"on {month_days} or on {weekdays}"
    return f"on {month_days or weekdays}"


def _describe_values(
    part: str,
    unit: str,
    units: str,
    name: Callable[[str], str] = None
) -> str:
    """Describe a list/range/step field with numbers or calendar names."""
    label = name or (lambda value: str(int(value)))
    singles: List[str] = []
    phrases: List[str] = []

    for item in part.split(","):
        item = item.strip()
        if "/" in item:
            base, step = item.split("/")
            every = _every(step, unit, units)
            if base == WILDCARD:
                phrases.append(every)
            elif "-" in base:
                start, end = base.split("-")
                phrases.append(f"{every} from {label(start)} to {label(end)}")
            else:
                phrases.append(f"{every} starting at {label(base)}")
        elif "-" in item:
            start, end = item.split("-")
            span = f"{label(start)} to {label(end)}"
            phrases.append(span if name else f"{units} {span}")
        else:
            singles.append(label(item))

    if singles:
        values = ", ".join(singles)
        phrases.insert(0, values if name else f"{unit} {values}")
    return ", ".join(phrases)


def _every(step: str, unit: str, units: str) -> str:
    count = int(step)
    return f"every {unit}" if count == 1 else f"every {count} {units}"


def _is_plain_step(part: str) -> bool:
    return part.startswith("*/") and "," not in part


def _month_name(value: str) -> str:
    return MONTH_NAMES[int(value) - 1]


def _weekday_name(value: str) -> str:
    return WEEKDAY_NAMES[int(value) % 7]
