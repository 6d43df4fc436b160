# schedule_eval/distances.py
from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Mapping, Tuple, Union

from .errors import InvalidArgumentError, MissingDistanceError
from .models import Building

logger = logging.getLogger(__name__)

# Average walking pace used to turn meters into minutes.
WALKING_M_PER_MIN = 80.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points on Earth in meters.
    """
    R = 6371000.0  # meters
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return R * c


def _check_distance(a: str, b: str, d: float) -> float:
    try:
        value = float(d)
    except (TypeError, ValueError):
        value = math.nan
    if not math.isfinite(value) or value < 0.0:
        raise InvalidArgumentError(
            f"Distance from {a!r} to {b!r} must be a finite non-negative number, got {d!r}",
            details={"from": a, "to": b},
        )
    return value


class DistanceTable:
    """
    Read-only travel distances between buildings, keyed by building code.

    A lookup tries (a, b), then (b, a), so a table may list each pair once.
    Same-building lookups are always 0. Anything else missing is a
    MissingDistanceError; there is no default distance.
    """

    def __init__(self, distances: Mapping[str, Mapping[str, float]]):
        if distances is None:
            raise InvalidArgumentError("distances cannot be None")
        self._table: Dict[str, Dict[str, float]] = {
            a: {b: _check_distance(a, b, d) for b, d in row.items()}
            for a, row in distances.items()
        }

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[str, str, float]]) -> "DistanceTable":
        table: Dict[str, Dict[str, float]] = {}
        for a, b, d in rows:
            table.setdefault(a, {})[b] = d
        return cls(table)

    @classmethod
    def from_buildings(
        cls,
        buildings: Mapping[str, Building],
        walking_m_per_min: float = WALKING_M_PER_MIN,
    ) -> "DistanceTable":
        """
        Builds a full table of walking minutes from building coordinates.
        """
        if walking_m_per_min <= 0:
            raise InvalidArgumentError("walking_m_per_min must be positive")

        table: Dict[str, Dict[str, float]] = {}
        for a in buildings.values():
            row = table.setdefault(a.code, {})
            for b in buildings.values():
                if a.code == b.code:
                    continue
                row[b.code] = haversine_m(a.lat, a.lon, b.lat, b.lon) / walking_m_per_min
        logger.debug("Built distance table for %d buildings", len(table))
        return cls(table)

    def distance_between(self, building_a: str, building_b: str) -> float:
        if building_a == building_b:
            return 0.0

        d = self._table.get(building_a, {}).get(building_b)
        if d is None:
            d = self._table.get(building_b, {}).get(building_a)
        if d is None:
            raise MissingDistanceError(building_a, building_b)
        return d

    def buildings(self) -> set:
        out = set(self._table)
        for row in self._table.values():
            out.update(row)
        return out

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        try:
            self.distance_between(pair[0], pair[1])
        except MissingDistanceError:
            return False
        return True


DistanceSource = Union[DistanceTable, Mapping[str, Mapping[str, float]]]


def as_distance_table(distances: DistanceSource) -> DistanceTable:
    """Wraps a plain mapping-of-mapping; passes DistanceTable through."""
    if distances is None:
        raise InvalidArgumentError("distances cannot be None")
    if isinstance(distances, DistanceTable):
        return distances
    return DistanceTable(distances)
