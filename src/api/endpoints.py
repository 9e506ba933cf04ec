"""API endpoints for cron expression parsing."""

from fastapi import APIRouter, HTTPException, Query
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from config import settings
from cronlens import describe, normalize, resolve_schedule
from models import InvalidExpression
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

EXAMPLES = [
    {"name": "Every minute", "expression": "* * * * *"},
    {"name": "Every 10 minutes at second 0", "expression": "0 */10 * * * *"},
    {"name": "Every day at 03:00", "expression": "0 3 * * *"},
    {"name": "Every weekday at 17:00", "expression": "0 17 * * 1-5"},
    {"name": "Midnight on the 1st and 15th", "expression": "0 0 1,15 * *"},
]


def get_evaluator():
    """Get cron evaluator instance."""
    # Import here to avoid circular import
    from api.http_server import cron_evaluator
    if not cron_evaluator:
        raise RuntimeError("Evaluator not initialized")
    return cron_evaluator


class ParseRequest(BaseModel):
    expression: str = Field(..., min_length=1, max_length=255)
    count: Optional[int] = Field(None, ge=1, le=settings.max_run_count)
    base_time: Optional[datetime] = None


@router.post("/cron/parse")
async def parse_expression(request: ParseRequest):
    """Parse an expression and return its next runs and description."""
    result = await get_evaluator().evaluate_async(
        request.expression,
        request.base_time,
        request.count
    )

    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)

    logger.info(f"Parsed '{request.expression}' with {len(result.next_runs)} runs")
    response = result.to_dict()
    response.pop("success")
    response.pop("error")
    return response


@router.get("/cron/describe")
async def describe_expression(expression: str = Query(..., min_length=1)):
    """Describe an expression in plain English."""
    try:
        description = describe(normalize(expression))
    except InvalidExpression as e:
        raise HTTPException(status_code=400, detail=f"Invalid expression: {e.message}")

    return {"expression": expression, "description": description}


@router.get("/cron/validate")
async def validate_expression(expression: str = Query(..., min_length=1)):
    """Check whether an expression is valid."""
    try:
        resolve_schedule(normalize(expression))
    except InvalidExpression as e:
        return {"expression": expression, "valid": False, "error": e.message}

    return {"expression": expression, "valid": True, "error": None}


@router.get("/cron/examples")
async def list_examples():
    """List common example expressions."""
    return {"examples": EXAMPLES}
