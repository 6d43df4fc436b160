from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Optional

from .distances import DistanceTable
from .models import Building, ClassSection, Professor, Schedule


def load_buildings_csv(path: str | Path) -> Dict[str, Building]:
    """
    Reads data/buildings.csv with header: code,name,lat,lon
    Returns dict keyed by building code.
    """
    p = Path(path)
    out: Dict[str, Building] = {}

    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            code = (row.get("code") or "").strip()
            if not code:
                continue
            out[code] = Building(
                code=code,
                name=(row.get("name") or "").strip(),
                lat=float(row["lat"]),
                lon=float(row["lon"]),
            )
    return out


def _parse_rating(raw: Optional[str]) -> Optional[float]:
    s = (raw or "").strip()
    if not s:
        return None
    return float(s)


def load_sections_csv(path: str | Path) -> List[Schedule]:
    """
    Reads data/sections.csv with header:
    schedule_id,section_id,course_id,days,start_min,end_min,building_code,professor,rating

    schedule_id is optional; rows without it all land in one schedule.
    An empty rating means the professor is unrated.
    Returns schedules in order of first appearance.
    """
    p = Path(path)
    grouped: Dict[str, List[ClassSection]] = {}

    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            schedule_id = (row.get("schedule_id") or "").strip()
            grouped.setdefault(schedule_id, []).append(
                ClassSection(
                    section_id=(row["section_id"] or "").strip(),
                    course_id=(row["course_id"] or "").strip(),
                    days=(row["days"] or "").strip(),
                    start_min=int(row["start_min"]),
                    end_min=int(row["end_min"]),
                    building_code=(row["building_code"] or "").strip(),
                    professor=Professor(
                        name=(row.get("professor") or "").strip(),
                        rating=_parse_rating(row.get("rating")),
                    ),
                )
            )
    return [Schedule.of(sections, schedule_id=sid) for sid, sections in grouped.items()]


def load_distances_csv(path: str | Path) -> DistanceTable:
    """
    Reads a distance table with header: from,to,distance
    Each pair may be listed once; lookups also try the reverse direction.
    """
    p = Path(path)
    rows = []

    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            a = (row.get("from") or "").strip()
            b = (row.get("to") or "").strip()
            if not a or not b:
                continue
            rows.append((a, b, float(row["distance"])))
    return DistanceTable.from_rows(rows)
