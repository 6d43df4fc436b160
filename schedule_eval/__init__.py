# Schedule evaluator: validity check, objective metrics and weighted score
from .distances import DistanceTable, haversine_m
from .errors import (
    InvalidArgumentError,
    InvalidSectionError,
    MissingDistanceError,
    ScheduleEvaluationError,
)
from .metrics import (
    compute_average_idle_time,
    compute_average_professor_quality,
    compute_max_distance,
)
from .models import Building, ClassSection, Professor, Schedule, ScoreBreakdown
from .scoring import (
    DEFAULT_CONFIG,
    ScoreConfig,
    compute_overall_objective,
    evaluate,
    normalize,
    rank_schedules,
)
from .validator import find_conflicts, validate

__all__ = [
    "Building",
    "ClassSection",
    "Professor",
    "Schedule",
    "ScoreBreakdown",
    "DistanceTable",
    "haversine_m",
    "ScheduleEvaluationError",
    "InvalidArgumentError",
    "InvalidSectionError",
    "MissingDistanceError",
    "validate",
    "find_conflicts",
    "compute_average_professor_quality",
    "compute_max_distance",
    "compute_average_idle_time",
    "normalize",
    "ScoreConfig",
    "DEFAULT_CONFIG",
    "evaluate",
    "compute_overall_objective",
    "rank_schedules",
]
