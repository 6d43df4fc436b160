"""
Unit tests for the three objective metrics.

Consecutive sections are ordered per day by start time.
"""

import pytest

from schedule_eval.errors import InvalidArgumentError, MissingDistanceError
from schedule_eval.metrics import (
    NEUTRAL_QUALITY,
    compute_average_idle_time,
    compute_average_professor_quality,
    compute_max_distance,
    sections_by_day,
)
from schedule_eval.models import Schedule


# ============== Professor Quality ==============

class TestAverageProfessorQuality:

    def test_mean_of_ratings(self, section):
        s = Schedule.of([section("A", rating=4.0), section("B", days="Tu", rating=3.0)])
        assert compute_average_professor_quality(s) == pytest.approx(3.5)

    def test_unrated_professors_excluded(self, section):
        s = Schedule.of([
            section("A", rating=5.0),
            section("B", days="Tu", rating=None),
            section("C", days="W", rating=2.0),
        ])
        assert compute_average_professor_quality(s) == pytest.approx(3.5)

    def test_all_unrated_uses_neutral(self, section):
        s = Schedule.of([section("A", rating=None)])
        assert compute_average_professor_quality(s) == NEUTRAL_QUALITY

    def test_empty_schedule_uses_neutral(self, empty_schedule):
        assert compute_average_professor_quality(empty_schedule) == NEUTRAL_QUALITY

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            compute_average_professor_quality(None)


# ============== Max Distance ==============

class TestMaxDistance:

    def test_worst_consecutive_walk(self, section, distances):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="DBH"),
            section("B", days="M", start="10:00", end="11:00", building="ICS"),
            section("C", days="M", start="11:00", end="12:00", building="SSLH"),
        ])
        # DBH->ICS = 3, ICS->SSLH = 11; DBH->SSLH is not consecutive
        assert compute_max_distance(s, distances) == pytest.approx(11.0)

    def test_order_follows_start_time_not_input_order(self, section, distances):
        s = Schedule.of([
            section("C", days="M", start="11:00", end="12:00", building="SSLH"),
            section("A", days="M", start="9:00", end="10:00", building="DBH"),
            section("B", days="M", start="10:00", end="11:00", building="ICS"),
        ])
        assert compute_max_distance(s, distances) == pytest.approx(11.0)

    def test_reverse_direction_lookup(self, section, distances):
        s = Schedule.of([
            section("A", days="W", start="9:00", end="10:00", building="SSLH"),
            section("B", days="W", start="10:30", end="11:00", building="DBH"),
        ])
        assert compute_max_distance(s, distances) == pytest.approx(12.5)

    def test_pairs_on_different_days_do_not_count(self, section, distances):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="DBH"),
            section("B", days="Tu", start="10:00", end="11:00", building="SSLH"),
        ])
        assert compute_max_distance(s, distances) == 0.0

    def test_same_building_is_zero(self, section):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="LIB"),
            section("B", days="M", start="10:00", end="11:00", building="LIB"),
        ])
        # Empty table: same building never needs a lookup entry
        assert compute_max_distance(s, {}) == 0.0

    def test_single_class_is_zero(self, section, distances):
        assert compute_max_distance(Schedule.of([section()]), distances) == 0.0

    def test_max_taken_across_days(self, section, distances):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="DBH"),
            section("B", days="M", start="10:00", end="11:00", building="ICS"),
            section("C", days="F", start="9:00", end="10:00", building="DBH"),
            section("D", days="F", start="12:00", end="13:00", building="SSLH"),
        ])
        assert compute_max_distance(s, distances) == pytest.approx(12.5)

    def test_accepts_plain_nested_mapping(self, section):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="X"),
            section("B", days="M", start="10:00", end="11:00", building="Y"),
        ])
        assert compute_max_distance(s, {"X": {"Y": 7.5}}) == pytest.approx(7.5)

    def test_unused_pairs_may_be_missing(self, section):
        """Only consecutive pairs need table entries; DBH-SSLH is never walked."""
        table = {"DBH": {"ICS": 3.0}, "ICS": {"SSLH": 11.0}}
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="DBH"),
            section("B", days="M", start="10:00", end="11:00", building="ICS"),
            section("C", days="M", start="11:00", end="12:00", building="SSLH"),
            section("D", days="Tu", start="9:00", end="10:00", building="GYM"),
        ])
        assert compute_max_distance(s, table) == pytest.approx(11.0)

    def test_missing_entry_raises(self, section, distances):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00", building="ICS"),
            section("B", days="M", start="10:00", end="11:00", building="GYM"),
        ])
        with pytest.raises(MissingDistanceError) as exc:
            compute_max_distance(s, distances)
        assert exc.value.details == {"from": "ICS", "to": "GYM"}

    def test_none_distances_rejected(self, section):
        with pytest.raises(InvalidArgumentError):
            compute_max_distance(Schedule.of([section()]), None)


# ============== Idle Time ==============

class TestAverageIdleTime:

    def test_mean_over_all_gaps(self, section):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00"),
            section("B", days="M", start="10:30", end="11:00"),   # gap 30
            section("C", days="M", start="12:00", end="13:00"),   # gap 60
            section("D", days="W", start="8:00", end="9:00"),
            section("E", days="W", start="11:00", end="12:00"),   # gap 120
        ])
        assert compute_average_idle_time(s) == pytest.approx(70.0)

    def test_multi_day_section_counts_each_day(self, section):
        s = Schedule.of([
            section("A", days="MW", start="9:00", end="10:00"),
            section("B", days="M", start="10:10", end="11:00"),   # gap 10 (Mon only)
            section("C", days="W", start="10:50", end="11:00"),   # gap 50 (Wed only)
        ])
        assert compute_average_idle_time(s) == pytest.approx(30.0)

    def test_one_class_per_day_is_zero(self, section):
        s = Schedule.of([
            section("A", days="M"),
            section("B", days="Tu"),
            section("C", days="W"),
        ])
        assert compute_average_idle_time(s) == 0.0

    def test_empty_schedule_is_zero(self, empty_schedule):
        assert compute_average_idle_time(empty_schedule) == 0.0

    def test_back_to_back_is_zero_gap(self, section):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00"),
            section("B", days="M", start="10:00", end="11:00"),
        ])
        assert compute_average_idle_time(s) == 0.0

    def test_overlap_counts_as_no_idle(self, section):
        s = Schedule.of([
            section("A", days="M", start="9:00", end="10:00"),
            section("B", days="M", start="9:30", end="10:30"),
        ])
        assert compute_average_idle_time(s) == 0.0


class TestSectionsByDay:

    def test_groups_in_week_order_sorted_by_start(self, section):
        a = section("A", days="F", start="9:00", end="10:00")
        b = section("B", days="MF", start="8:00", end="8:50")
        grouped = sections_by_day(Schedule.of([a, b]))
        assert list(grouped) == ["M", "F"]
        assert [s.section_id for s in grouped["F"]] == ["B", "A"]
