"""Result of evaluating a cron expression."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .expression import CronExpression


@dataclass
class CronParseResult:
    """Outcome of a parse: either runs and a description, or an error."""
    success: bool
    source: str
    expression: Optional[CronExpression] = None
    description: Optional[str] = None
    next_runs: List[datetime] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failed(cls, source: str, error: str) -> "CronParseResult":
        return cls(success=False, source=source, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "expression": str(self.expression) if self.expression else None,
            "fields": self.expression.to_dict() if self.expression else None,
            "description": self.description,
            "next_runs": [run.isoformat() for run in self.next_runs],
            "error": self.error
        }
