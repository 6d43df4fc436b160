from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import InvalidArgumentError
from .models import ClassSection, Schedule

logger = logging.getLogger(__name__)


def sections_conflict(a: ClassSection, b: ClassSection) -> bool:
    """
    True if a and b share a day and their [start, end) windows overlap.
    Back-to-back sections (a ends when b starts) do not conflict.
    """
    if not set(a.day_tokens()) & set(b.day_tokens()):
        return False
    return a.start_min < b.end_min and b.start_min < a.end_min


def find_conflicts(schedule: Schedule) -> List[Tuple[ClassSection, ClassSection]]:
    """
    Returns every conflicting pair of sections, in schedule order.
    """
    if schedule is None:
        raise InvalidArgumentError("schedule cannot be None")

    sections = list(schedule)
    out: List[Tuple[ClassSection, ClassSection]] = []
    for i, a in enumerate(sections):
        for b in sections[i + 1 :]:
            if sections_conflict(a, b):
                logger.debug(
                    "Conflict: %s (%s %d-%d) overlaps %s (%s %d-%d)",
                    a.section_id, a.days, a.start_min, a.end_min,
                    b.section_id, b.days, b.start_min, b.end_min,
                )
                out.append((a, b))
    return out


def validate(schedule: Schedule) -> bool:
    """
    True if no two sections in the schedule overlap on a common day.
    Schedules with 0 or 1 sections are always valid.
    """
    if schedule is None:
        raise InvalidArgumentError("schedule cannot be None")
    if len(schedule) < 2:
        return True
    return not find_conflicts(schedule)
