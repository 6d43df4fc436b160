"""
Exceptions raised by the schedule evaluator.

Invalid-argument errors mean the caller passed something malformed.
Data-integrity errors mean the caller's lookup data cannot answer a question
the schedule asks of it. Neither is retried here.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ScheduleEvaluationError(Exception):
    """Base exception for all schedule evaluation errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(ScheduleEvaluationError, ValueError):
    """Raised for None inputs, malformed weight vectors and bad ranges."""


class InvalidSectionError(InvalidArgumentError):
    """Raised when a class section has an unusable time window."""


class MissingDistanceError(ScheduleEvaluationError, LookupError):
    """Raised when the distance table has no entry for a building pair."""

    def __init__(self, from_building: str, to_building: str):
        super().__init__(
            f"No distance between {from_building!r} and {to_building!r}",
            details={"from": from_building, "to": to_building},
        )
        self.from_building = from_building
        self.to_building = to_building
