"""Next-run calculation for cron expressions."""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
import heapq
from typing import Iterator, List, Tuple
import logging

from models import (
    CronExpression,
    CronSchedule,
    SECONDS,
    MINUTES,
    HOURS,
    DAY_OF_MONTH,
    MONTH,
    DAY_OF_WEEK,
    WILDCARD
)
from .fields import resolve

logger = logging.getLogger(__name__)

DEFAULT_RUN_COUNT = 5

# Forward search horizon in seconds (about 11.5 days)
SEARCH_LIMIT_SECONDS = 1_000_000


def resolve_schedule(expression: CronExpression) -> CronSchedule:
    """Resolve all six fields of an expression.

    Raises:
        InvalidExpression: On the first field that cannot be resolved
    """
    return CronSchedule(
        seconds=resolve(expression.seconds, SECONDS),
        minutes=resolve(expression.minutes, MINUTES),
        hours=resolve(expression.hours, HOURS),
        days_of_month=resolve(expression.day_of_month, DAY_OF_MONTH),
        months=resolve(expression.month, MONTH),
        days_of_week=resolve(expression.day_of_week, DAY_OF_WEEK),
        day_of_month_wildcard=expression.day_of_month == WILDCARD,
        day_of_week_wildcard=expression.day_of_week == WILDCARD
    )


def cron_weekday(day: date) -> int:
    """Weekday numbered the cron way, 0=Sunday through 6=Saturday."""
    return day.isoweekday() % 7


def day_matches(schedule: CronSchedule, day: date) -> bool:
    """Check the day-of-month / day-of-week constraints for a date.

    When both fields are restricted a date matches if it satisfies either
    one of them (POSIX cron semantics), not both.
    """
    if schedule.day_of_month_wildcard and schedule.day_of_week_wildcard:
        return True
    if schedule.day_of_month_wildcard:
        return cron_weekday(day) in schedule.days_of_week
    if schedule.day_of_week_wildcard:
        return day.day in schedule.days_of_month
    return day.day in schedule.days_of_month or cron_weekday(day) in schedule.days_of_week


def matches(schedule: CronSchedule, moment: datetime) -> bool:
    """Check whether a single instant satisfies every field of a schedule."""
    return (
        moment.second in schedule.seconds
        and moment.minute in schedule.minutes
        and moment.hour in schedule.hours
        and moment.month in schedule.months
        and day_matches(schedule, moment.date())
    )


def next_runs(
    expression: CronExpression,
    start: datetime,
    count: int = DEFAULT_RUN_COUNT,
    search_limit: int = SEARCH_LIMIT_SECONDS
) -> List[datetime]:
    """Compute the next instants at which an expression fires.

    Candidates are the instants start + 1s, start + 2s, ... start + search_limit
    seconds, taken in the calendar of ``start``. Naive datetimes are local
    wall-clock time. Aware ones are matched on the clock of their tzinfo and
    ordered in absolute time, so runs are always strictly after ``start``
    across daylight saving transitions.

    Args:
        expression: Normalized cron expression
        start: Reference instant, excluded from the results
        count: Maximum number of runs to return
        search_limit: Number of seconds to search ahead of ``start``

    Returns:
        Ascending list of at most ``count`` run instants. The list is shorter,
        possibly empty, when the search limit is reached first.

    Raises:
        InvalidExpression: If any field cannot be resolved
    """
    schedule = resolve_schedule(expression)
    runs: List[datetime] = []
    if count <= 0:
        return runs

    if start.tzinfo is None:
        first = start.replace(microsecond=0)
        candidates = _iter_matches(schedule, first, first + timedelta(seconds=search_limit))
    else:
        candidates = _iter_aware_matches(schedule, start.replace(microsecond=0), search_limit)

    for run in candidates:
        if runs and _instant(runs[-1]) == _instant(run):
            continue
        runs.append(run)
        if len(runs) >= count:
            break
    else:
        logger.debug(
            f"Search limit of {search_limit}s reached for '{expression}' "
            f"with {len(runs)}/{count} runs"
        )

    return runs


def _iter_aware_matches(schedule: CronSchedule, start: datetime, search_limit: int) -> Iterator[datetime]:
    """Yield matching instants in (start, start + search_limit] in absolute time order.

    Wall-clock times skipped by a forward transition do not exist and are
    dropped. Wall-clock times repeated by a backward transition yield both
    occurrences, held back until the repeated period is over so the output
    stays ascending.
    """
    tz = start.tzinfo
    begin = _instant(start)
    end = begin + timedelta(seconds=search_limit)
    end_local = end.astimezone(tz)

    first = start.replace(tzinfo=None) - _fold_length(start)
    last = end_local.replace(tzinfo=None) + _fold_length(end_local)

    pending: List[Tuple[datetime, datetime]] = []
    for wall in _iter_matches(schedule, first, last):
        occurrences = _occurrences(wall, tz)
        if len(occurrences) == 1:
            while pending:
                yield heapq.heappop(pending)[1]
        for moment in occurrences:
            utc = _instant(moment)
            if not begin < utc <= end:
                continue
            if len(occurrences) == 1:
                yield moment
            else:
                heapq.heappush(pending, (utc, moment))

    while pending:
        yield heapq.heappop(pending)[1]


def _occurrences(wall: datetime, tz: tzinfo) -> List[datetime]:
    """Aware instants showing ``wall`` on the clock of ``tz`` (0, 1 or 2 of them)."""
    earlier = wall.replace(tzinfo=tz, fold=0)
    if earlier.astimezone(timezone.utc).astimezone(tz).replace(tzinfo=None) != wall:
        return []
    later = wall.replace(tzinfo=tz, fold=1)
    if later.utcoffset() != earlier.utcoffset():
        return [earlier, later]
    return [earlier]


def _fold_length(moment: datetime) -> timedelta:
    """How far the clock is set back if ``moment`` lies in a repeated period."""
    wall = moment.replace(tzinfo=None)
    earlier = wall.replace(tzinfo=moment.tzinfo, fold=0).utcoffset()
    later = wall.replace(tzinfo=moment.tzinfo, fold=1).utcoffset()
    if earlier is None or later is None:
        return timedelta(0)
    return max(earlier - later, timedelta(0))


def _instant(moment: datetime) -> datetime:
    # Aware datetimes sharing a tzinfo compare by wall clock, ignoring fold
    return moment if moment.tzinfo is None else moment.astimezone(timezone.utc)


def _iter_matches(schedule: CronSchedule, first: datetime, last: datetime) -> Iterator[datetime]:
    """Yield matching instants in (first, last], skipping days that cannot match."""
    hours = sorted(schedule.hours)
    minutes = sorted(schedule.minutes)
    seconds = sorted(schedule.seconds)

    day = first.date()
    while day <= last.date():
        if day.month in schedule.months and day_matches(schedule, day):
            on_first_day = day == first.date()
            for hour in hours:
                if on_first_day and hour < first.hour:
                    continue
                for minute in minutes:
                    if on_first_day and hour == first.hour and minute < first.minute:
                        continue
                    for second in seconds:
                        candidate = datetime.combine(day, time(hour, minute, second))
                        if candidate <= first:
                            continue
                        if candidate > last:
                            return
                        yield candidate
        day += timedelta(days=1)
