import pytest

from schedule_eval.distances import DistanceTable
from schedule_eval.models import ClassSection, Professor, Schedule


def make_section(
    section_id="S1",
    days="M",
    start="9:00",
    end="10:00",
    building="DBH",
    rating=4.0,
    professor="Pattis",
    course_id=None,
):
    """Section factory; times are 'H:MM' on a 24-hour clock."""

    def to_min(hhmm):
        h, m = hhmm.split(":")
        return int(h) * 60 + int(m)

    return ClassSection(
        section_id=section_id,
        course_id=course_id or f"COURSE {section_id}",
        days=days,
        start_min=to_min(start),
        end_min=to_min(end),
        building_code=building,
        professor=Professor(name=professor, rating=rating),
    )


@pytest.fixture
def section():
    """Factory fixture for class sections."""
    return make_section


@pytest.fixture
def distances():
    """Small campus: DBH-ICS 3, DBH-SSLH 12.5, ICS-SSLH 11, RH far away."""
    return DistanceTable(
        {
            "DBH": {"ICS": 3.0, "SSLH": 12.5, "RH": 45.0},
            "ICS": {"SSLH": 11.0},
        }
    )


@pytest.fixture
def weights():
    return [0.5, 0.3, 0.2]


@pytest.fixture
def empty_schedule():
    return Schedule()
