"""Cron expression parsing, next-run calculation and descriptions."""

from .normalizer import normalize
from .fields import resolve
from .calculator import next_runs, resolve_schedule, matches
from .describer import describe
from .cron_parser import evaluate, validate_cron, parse_cron_expression, get_cron_description
from .preview import CronEvaluator, PreviewSession

__all__ = [
    "normalize",
    "resolve",
    "next_runs",
    "resolve_schedule",
    "matches",
    "describe",
    "evaluate",
    "validate_cron",
    "parse_cron_expression",
    "get_cron_description",
    "CronEvaluator",
    "PreviewSession"
]
