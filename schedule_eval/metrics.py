# schedule_eval/metrics.py
from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .distances import DistanceSource, as_distance_table
from .errors import InvalidArgumentError
from .models import DAY_TOKENS, ClassSection, Schedule

logger = logging.getLogger(__name__)

# Midpoint of the 1.0-5.0 rating scale, used when nobody in the schedule is rated.
NEUTRAL_QUALITY = 3.0


def _require_schedule(schedule: Schedule) -> None:
    if schedule is None:
        raise InvalidArgumentError("schedule cannot be None")


def sections_by_day(schedule: Schedule) -> Dict[str, List[ClassSection]]:
    """
    Groups sections by the days they meet, each day ordered by start time.
    Days with no sections are left out.
    """
    out: Dict[str, List[ClassSection]] = {}
    for s in schedule:
        for day in s.day_tokens():
            out.setdefault(day, []).append(s)

    for day_sections in out.values():
        day_sections.sort(key=lambda s: (s.start_min, s.end_min))
    return {d: out[d] for d in DAY_TOKENS if d in out}


def consecutive_pairs(schedule: Schedule) -> List[Tuple[str, ClassSection, ClassSection]]:
    """
    Returns (day, earlier, later) for each pair of back-to-back sections on a day.
    """
    pairs: List[Tuple[str, ClassSection, ClassSection]] = []
    for day, day_sections in sections_by_day(schedule).items():
        for prev, nxt in zip(day_sections, day_sections[1:]):
            pairs.append((day, prev, nxt))
    return pairs


def compute_average_professor_quality(
    schedule: Schedule,
    unrated_quality: float = NEUTRAL_QUALITY,
) -> float:
    """
    Mean rating of the rated professors in the schedule.

    Unrated professors are left out of the mean. If no section has a rated
    professor (an empty schedule included), returns unrated_quality.
    """
    _require_schedule(schedule)

    ratings = [s.professor.rating for s in schedule if s.professor.rating is not None]
    if not ratings:
        return unrated_quality
    return sum(ratings) / len(ratings)


def compute_max_distance(schedule: Schedule, distances: DistanceSource) -> float:
    """
    Longest walk between consecutive sections on the same day.
    0.0 when no day has two sections. Raises MissingDistanceError when
    the table lacks a building pair the schedule needs.
    """
    _require_schedule(schedule)
    table = as_distance_table(distances)

    worst = 0.0
    for _day, prev, nxt in consecutive_pairs(schedule):
        d = table.distance_between(prev.building_code, nxt.building_code)
        if d > worst:
            worst = d
    return worst


def compute_average_idle_time(schedule: Schedule) -> float:
    """
    Mean gap in minutes between consecutive sections on the same day,
    taken over every gap in the week. 0.0 when there are no gaps.
    """
    _require_schedule(schedule)

    gaps = [
        # Overlaps only happen in invalid schedules; count them as no idle time
        max(0, nxt.start_min - prev.end_min)
        for _day, prev, nxt in consecutive_pairs(schedule)
    ]
    if not gaps:
        return 0.0
    return sum(gaps) / float(len(gaps))
