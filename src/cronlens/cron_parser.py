"""Cron expression parsing and validation."""

from datetime import datetime
from typing import Optional
import logging

from config import settings
from models import CronParseResult, InvalidExpression
from .normalizer import normalize
from .calculator import next_runs, resolve_schedule
from .describer import describe

logger = logging.getLogger(__name__)


def evaluate(
    expression: str,
    base_time: Optional[datetime] = None,
    count: Optional[int] = None
) -> CronParseResult:
    """Parse a cron expression, compute its next runs and describe it.

    Args:
        expression: Cron expression string (5 or 6 fields)
        base_time: Reference instant (default: now, local time)
        count: Number of runs to compute (default: settings.default_run_count)

    Returns:
        CronParseResult; on failure only the error is set
    """
    base = base_time or datetime.now()
    run_count = settings.default_run_count if count is None else count

    try:
        parsed = normalize(expression)
        runs = next_runs(parsed, base, run_count, settings.search_limit_seconds)
        description = describe(parsed)
    except InvalidExpression as e:
        logger.debug(f"Invalid cron expression '{expression}': {e}")
        return CronParseResult.failed(expression, f"Invalid expression: {e.message}")

    if len(runs) < run_count:
        logger.info(f"Only {len(runs)} of {run_count} runs found for '{expression}'")

    return CronParseResult(
        success=True,
        source=expression,
        expression=parsed,
        description=description,
        next_runs=runs
    )


def validate_cron(expression: str) -> bool:
    """Validate a cron expression.

    Args:
        expression: Cron expression string (e.g., "0 */2 * * *")

    Returns:
        True if valid, False otherwise
    """
    try:
        resolve_schedule(normalize(expression))
        return True
    except InvalidExpression as e:
        logger.error(f"Invalid cron expression '{expression}': {e}")
        return False


def parse_cron_expression(expression: str, base_time: Optional[datetime] = None) -> Optional[datetime]:
    """Parse cron expression and get next execution time.

    Args:
        expression: Cron expression string
        base_time: Base time for calculation (default: now)

    Returns:
        Next execution datetime or None if invalid or not found in the search window
    """
    try:
        runs = next_runs(
            normalize(expression),
            base_time or datetime.now(),
            1,
            settings.search_limit_seconds
        )
    except InvalidExpression as e:
        logger.error(f"Failed to parse cron expression '{expression}': {e}")
        return None
    return runs[0] if runs else None


def get_cron_description(expression: str) -> str:
    """Get human-readable description of cron expression.

    Args:
        expression: Cron expression string

    Returns:
        Human-readable description, or the error message if invalid
    """
    try:
        return describe(normalize(expression))
    except InvalidExpression as e:
        logger.debug(f"Could not describe cron expression '{expression}': {e}")
        return f"Invalid expression: {e.message}"
