# schedule_eval/scoring.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .distances import DistanceSource, as_distance_table
from .errors import InvalidArgumentError
from .metrics import (
    NEUTRAL_QUALITY,
    compute_average_idle_time,
    compute_average_professor_quality,
    compute_max_distance,
)
from .models import Schedule, ScoreBreakdown
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreConfig:
    # Rating scale runs 1.0-5.0
    quality_min: float = 1.0
    quality_max: float = 5.0

    # Same building is 0; the farthest pair on record is about 22, so 30 leaves headroom
    distance_min: float = 0.0
    distance_max: float = 30.0

    # Classes run 8:00am-9:00pm, 780 minutes
    idle_min: float = 0.0
    idle_max: float = 780.0

    weight_tolerance: float = 1e-6
    unrated_quality: float = NEUTRAL_QUALITY


DEFAULT_CONFIG = ScoreConfig()


def normalize(value: float, lo: float, hi: float) -> float:
    """
    Min-max normalization into [0,1]. Values outside [lo, hi] are clipped
    to the nearest bound.
    """
    if hi <= lo:
        raise InvalidArgumentError(f"normalize needs lo < hi, got [{lo}, {hi}]")
    if value < lo:
        return 0.0
    if value > hi:
        return 1.0
    return (value - lo) / (hi - lo)


def check_weights(weights: Sequence[float], tolerance: float = 1e-6) -> Tuple[float, float, float]:
    """
    Validates a (quality, distance, idle) weight vector and returns it as a tuple.
    """
    if weights is None:
        raise InvalidArgumentError("weights cannot be None")
    if len(weights) != 3:
        raise InvalidArgumentError(
            "Number of weights must be 3", details={"count": len(weights)}
        )

    try:
        w = tuple(float(x) for x in weights)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            "Weights must be numeric", details={"weights": list(weights)}
        ) from None
    if any(math.isnan(x) or math.isinf(x) or x < 0.0 for x in w):
        raise InvalidArgumentError(
            "Weights must be finite and non-negative", details={"weights": list(w)}
        )
    if abs(sum(w) - 1.0) > tolerance:
        raise InvalidArgumentError(
            "The sum of the weights must be equal to 1", details={"sum": sum(w)}
        )
    return w[0], w[1], w[2]


def evaluate(
    schedule: Schedule,
    distances: DistanceSource,
    weights: Sequence[float],
    cfg: ScoreConfig = DEFAULT_CONFIG,
) -> ScoreBreakdown:
    """
    Scores one schedule and keeps every intermediate value.

    score = w0 * quality + w1 * (1 - distance) + w2 * (1 - idle), each term
    normalized to [0,1]. Distance and idle are inverted since lower is better.
    Does not check the schedule for conflicts; see validator.validate.
    """
    if schedule is None or distances is None or weights is None:
        raise InvalidArgumentError("Parameters cannot be None")
    w_q, w_d, w_i = check_weights(weights, cfg.weight_tolerance)
    table = as_distance_table(distances)

    avg_quality = compute_average_professor_quality(schedule, cfg.unrated_quality)
    max_distance = compute_max_distance(schedule, table)
    avg_idle = compute_average_idle_time(schedule)

    q_score = normalize(avg_quality, cfg.quality_min, cfg.quality_max)
    d_score = normalize(max_distance, cfg.distance_min, cfg.distance_max)
    i_score = normalize(avg_idle, cfg.idle_min, cfg.idle_max)

    final = w_q * q_score + w_d * (1.0 - d_score) + w_i * (1.0 - i_score)
    # Weights may sum to 1 +/- tolerance
    final = min(1.0, max(0.0, final))

    logger.debug(
        "Schedule %r: quality=%.3f dist=%.3f idle=%.1f -> score=%.4f",
        schedule.schedule_id, avg_quality, max_distance, avg_idle, final,
    )
    return ScoreBreakdown(
        schedule=schedule,
        score=final,
        avg_quality=avg_quality,
        max_distance=max_distance,
        avg_idle_min=avg_idle,
        quality_score=q_score,
        distance_score=d_score,
        idle_score=i_score,
        weights=(w_q, w_d, w_i),
    )


def compute_overall_objective(
    schedule: Schedule,
    distances: DistanceSource,
    weights: Sequence[float],
) -> float:
    """
    Overall objective in [0,1] for a schedule, higher is better.

    weights[0] is for average professor quality, weights[1] for max distance
    and weights[2] for average idle time. There must be exactly 3 and they
    must add to 1.0.
    """
    return evaluate(schedule, distances, weights).score


def rank_schedules(
    schedules: Iterable[Schedule],
    distances: DistanceSource,
    weights: Sequence[float],
    top_k: int = 10,
    skip_invalid: bool = True,
    cfg: ScoreConfig = DEFAULT_CONFIG,
) -> List[ScoreBreakdown]:
    """
    End-to-end ranking of candidate schedules: validate -> score -> sort desc -> top_k.

    skip_invalid: if True, schedules with time conflicts are dropped before scoring.
    """
    if schedules is None:
        raise InvalidArgumentError("schedules cannot be None")
    # Fail on bad arguments even if there is nothing to rank
    check_weights(weights, cfg.weight_tolerance)
    table = as_distance_table(distances)

    ranked: List[ScoreBreakdown] = []
    skipped = 0
    for schedule in schedules:
        if skip_invalid and not validate(schedule):
            skipped += 1
            continue
        ranked.append(evaluate(schedule, table, weights, cfg))

    if skipped:
        logger.warning("Skipped %d schedule(s) with time conflicts", skipped)

    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked[: max(top_k, 0)]
