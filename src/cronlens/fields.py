"""Resolution of single cron fields into sets of integers."""

import re
from typing import FrozenSet, Set

from models import DAY_OF_WEEK, FieldRange, InvalidExpression, WILDCARD

_NUMBER = re.compile(r"[0-9]+")

# A bare day-of-week 7 is an alias for Sunday; range and step bounds stay within 0-6
SUNDAY_ALIAS = 7


def resolve(field: str, field_range: FieldRange) -> FrozenSet[int]:
    """Resolve a cron field string into the set of values it denotes.

    Supported forms: "*", "v", "a-b", "*/n", "a/n", "a-b/n" and
    comma-separated lists of any of these.

    Args:
        field: Raw field string, e.g. "1-5" or "*/15"
        field_range: Valid range of the field

    Returns:
        Frozen set of integers within the field range

    Raises:
        InvalidExpression: If the field is malformed or out of range
    """
    if field == WILDCARD:
        return field_range.values()

    values: Set[int] = set()
    for token in field.split(","):
        token = token.strip()
        if "/" in token:
            values.update(_resolve_step(token, field_range))
        elif "-" in token:
            start, end = _parse_bounds(token, field_range)
            values.update(range(start, end + 1))
        elif _NUMBER.fullmatch(token):
            value = _fold_sunday(int(token), field_range)
            if not field_range.contains(value):
                raise InvalidExpression(
                    f"{field_range.name} value out of range "
                    f"{field_range.lower}-{field_range.upper}: '{token}'"
                )
            values.add(value)
        else:
            raise InvalidExpression(f"cannot parse {field_range.name} field: '{token}'")

    return frozenset(values)


def _resolve_step(token: str, field_range: FieldRange) -> Set[int]:
    parts = token.split("/")
    if len(parts) != 2 or not _NUMBER.fullmatch(parts[1]) or int(parts[1]) <= 0:
        raise InvalidExpression(
            f"{field_range.name} step must be a positive integer: '{token}'"
        )

    base, step = parts[0], int(parts[1])
    if base == WILDCARD:
        start, end = field_range.lower, field_range.upper
    elif "-" in base:
        start, end = _parse_bounds(base, field_range, token)
    elif _NUMBER.fullmatch(base):
        start, end = int(base), field_range.upper
        if not field_range.contains(start):
            raise InvalidExpression(
                f"{field_range.name} step start out of range "
                f"{field_range.lower}-{field_range.upper}: '{token}'"
            )
    else:
        raise InvalidExpression(f"cannot parse {field_range.name} step: '{token}'")

    return set(range(start, end + 1, step))


def _parse_bounds(text: str, field_range: FieldRange, token: str = None):
    token = token or text
    bounds = text.split("-")
    if len(bounds) != 2 or not all(_NUMBER.fullmatch(bound) for bound in bounds):
        raise InvalidExpression(f"invalid {field_range.name} range: '{token}'")

    start, end = int(bounds[0]), int(bounds[1])
    if not (field_range.contains(start) and field_range.contains(end)):
        raise InvalidExpression(
            f"{field_range.name} range out of bounds "
            f"{field_range.lower}-{field_range.upper}: '{token}'"
        )
    if start > end:
        raise InvalidExpression(
            f"{field_range.name} range start is greater than its end: '{token}'"
        )
    return start, end


def _fold_sunday(value: int, field_range: FieldRange) -> int:
    if field_range == DAY_OF_WEEK and value == SUNDAY_ALIAS:
        return 0
    return value
