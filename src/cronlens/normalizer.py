"""Splitting raw cron text into its six fields."""

import logging

from models import CronExpression, InvalidExpression, WILDCARD

logger = logging.getLogger(__name__)

# Both the full-width and half-width question marks mean "no constraint"
NO_CONSTRAINT_ALIASES = ("？", "?")


def normalize(raw: str) -> CronExpression:
    """Normalize a cron expression string.

    Args:
        raw: Cron expression with 5 fields (minute precision) or 6 fields
            (leading seconds field), e.g. "*/5 * * * *"

    Returns:
        CronExpression with all six fields populated

    Raises:
        InvalidExpression: If the expression does not have 5 or 6 fields
    """
    text = raw or ""
    for alias in NO_CONSTRAINT_ALIASES:
        text = text.replace(alias, WILDCARD)

    tokens = text.split()
    if len(tokens) not in (5, 6):
        raise InvalidExpression(f"expected 5 or 6 fields, got {len(tokens)}")

    if len(tokens) == 5:
        # Minute precision: fire on second 0
        tokens.insert(0, "0")

    expression = CronExpression(*tokens)
    logger.debug(f"Normalized '{raw}' to '{expression}'")
    return expression
