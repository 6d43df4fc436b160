from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidArgumentError, InvalidSectionError

MINUTES_PER_DAY = 24 * 60

# Canonical week order; ClassSection.days uses these tokens concatenated.
DAY_TOKENS: Tuple[str, ...] = ("M", "Tu", "W", "Th", "F", "Sa", "Su")


def parse_days(days_raw: str, strict: bool = False) -> Tuple[str, ...]:
    """
    Splits a compact day string into day tokens in week order.
    Input examples: 'MWF', 'TuTh', 'TR', 'TTh', 'MW F'
    'T' alone is read as Tuesday and 'R' as Thursday.

    strict: if True, raises ValueError on any character that is not part of
    a day token or whitespace. Otherwise such characters are skipped.
    """
    if not days_raw:
        return ()

    s = days_raw.strip()
    found = set()

    i = 0
    while i < len(s):
        # Prefer 2-char tokens first (Tu, Th, Sa, Su)
        if s[i : i + 2] in ("Tu", "Th", "Sa", "Su"):
            found.add(s[i : i + 2])
            i += 2
            continue

        ch = s[i]
        if ch in ("M", "W", "F"):
            found.add(ch)
        elif ch == "T":
            found.add("Tu")
        elif ch == "R":
            found.add("Th")
        elif strict and not ch.isspace():
            raise ValueError(f"Unknown day character {ch!r} in {days_raw!r}")
        i += 1

    return tuple(d for d in DAY_TOKENS if d in found)


@dataclass(frozen=True)
class Building:
    code: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class Professor:
    name: str
    rating: Optional[float] = None   # 1.0 (lowest) .. 5.0 (highest), None if unrated

    def __post_init__(self) -> None:
        if self.rating is None:
            return
        try:
            rating = float(self.rating)
        except (TypeError, ValueError):
            rating = math.nan
        # Out-of-scale ratings are kept; the normalizer clips them
        if not math.isfinite(rating):
            raise InvalidArgumentError(
                f"Professor {self.name!r} has a rating that is not a finite number: {self.rating!r}",
                details={"professor": self.name},
            )


@dataclass(frozen=True)
class ClassSection:
    section_id: str
    course_id: str
    days: str          # e.g., "MWF", "TuTh"
    start_min: int     # minutes since midnight
    end_min: int       # minutes since midnight, exclusive
    building_code: str
    professor: Professor

    def __post_init__(self) -> None:
        if not (0 <= self.start_min < self.end_min <= MINUTES_PER_DAY):
            raise InvalidSectionError(
                f"Section {self.section_id!r} has an invalid time window "
                f"{self.start_min}-{self.end_min}",
                details={"section_id": self.section_id},
            )
        try:
            tokens = parse_days(self.days, strict=True)
        except (AttributeError, TypeError, ValueError):
            tokens = ()
        if not tokens:
            raise InvalidSectionError(
                f"Section {self.section_id!r} has no valid meeting days in {self.days!r}",
                details={"section_id": self.section_id, "days": self.days},
            )

    def day_tokens(self) -> Tuple[str, ...]:
        return parse_days(self.days)

    def meets_on(self, day_token: str) -> bool:
        return day_token in self.day_tokens()


@dataclass(frozen=True)
class Schedule:
    """
    One student's selected sections for a term. May be empty.
    """
    sections: Tuple[ClassSection, ...] = ()
    schedule_id: str = ""

    @classmethod
    def of(cls, sections: Iterable[ClassSection], schedule_id: str = "") -> "Schedule":
        return cls(sections=tuple(sections), schedule_id=schedule_id)

    def __iter__(self) -> Iterator[ClassSection]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)


@dataclass(frozen=True)
class ScoreBreakdown:
    schedule: Schedule
    score: float
    avg_quality: float
    max_distance: float
    avg_idle_min: float
    quality_score: float     # normalized, higher is better
    distance_score: float    # normalized, higher is worse
    idle_score: float        # normalized, higher is worse
    weights: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def contributions(self) -> List[float]:
        """Per-objective terms of the weighted sum, in weight order."""
        w_q, w_d, w_i = self.weights
        return [
            w_q * self.quality_score,
            w_d * (1.0 - self.distance_score),
            w_i * (1.0 - self.idle_score),
        ]
