"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import itertools
import uuid
from datetime import date, time

import pytest

from bookings.domain import UNSET, Capacity, RoomChanges, RoomId, TimeOfDay, TimeRange
from bookings.domain.overlap import overlaps
from bookings.domain.value_objects import parse_calendar_date


def minutes(value: str) -> int:
    return TimeOfDay.from_string(value).minutes


class TestOverlap:
    """Tests for the half-open interval overlap rule."""

    def test_back_to_back_ranges_do_not_overlap(self):
        assert not overlaps(minutes("09:00"), minutes("10:00"), minutes("10:00"), minutes("11:00"))

    def test_partial_overlap(self):
        assert overlaps(minutes("09:00"), minutes("10:00"), minutes("09:30"), minutes("10:30"))

    def test_identical_ranges_overlap(self):
        assert overlaps(minutes("09:00"), minutes("10:00"), minutes("09:00"), minutes("10:00"))

    def test_contained_range_overlaps(self):
        assert overlaps(minutes("08:00"), minutes("12:00"), minutes("09:00"), minutes("09:15"))

    def test_disjoint_ranges(self):
        assert not overlaps(minutes("08:00"), minutes("09:00"), minutes("13:00"), minutes("14:00"))

    def test_symmetric(self):
        points = [0, 30, 60, 90, 120]
        ranges = [(a, b) for a, b in itertools.combinations(points, 2)]
        for (a, b), (c, d) in itertools.product(ranges, repeat=2):
            assert overlaps(a, b, c, d) == overlaps(c, d, a, b)

    def test_time_range_delegates(self):
        morning = TimeRange(TimeOfDay.from_string("09:00"), TimeOfDay.from_string("10:00"))
        next_slot = TimeRange(TimeOfDay.from_string("10:00"), TimeOfDay.from_string("11:00"))

        assert not morning.overlaps(next_slot)
        assert morning.overlaps(morning)


class TestTimeOfDay:
    """Tests for TimeOfDay value object."""

    @pytest.mark.parametrize(
        "value,expected",
        [("00:00", 0), ("09:30", 570), ("9:30", 570), ("23:59", 1439)],
    )
    def test_parses_24_hour_times(self, value, expected):
        assert TimeOfDay.from_string(value).minutes == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "1230", "12:3", " 12:30", "12:30\n", "", "ab:cd"])
    def test_rejects_malformed_times(self, value):
        with pytest.raises(ValueError):
            TimeOfDay.from_string(value)

    def test_str_is_zero_padded(self):
        assert str(TimeOfDay.from_string("7:05")) == "07:05"

    def test_converts_to_and_from_time(self):
        parsed = TimeOfDay.from_string("14:45")

        assert parsed.to_time() == time(14, 45)
        assert TimeOfDay.from_time(time(14, 45, 30)) == parsed

    def test_ordering(self):
        assert TimeOfDay.from_string("08:59") < TimeOfDay.from_string("09:00")

    def test_rejects_out_of_range_minutes(self):
        with pytest.raises(ValueError):
            TimeOfDay(24 * 60)


class TestTimeRange:
    """Tests for TimeRange value object."""

    def test_rejects_zero_length(self):
        with pytest.raises(ValueError):
            TimeRange(TimeOfDay(600), TimeOfDay(600))

    def test_rejects_reversed(self):
        with pytest.raises(ValueError):
            TimeRange(TimeOfDay(660), TimeOfDay(600))

    def test_str(self):
        assert str(TimeRange(TimeOfDay(540), TimeOfDay(600))) == "09:00-10:00"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(1).value == 1

    @pytest.mark.parametrize("value", [0, -1])
    def test_capacity_rejects_less_than_one(self, value):
        with pytest.raises(ValueError):
            Capacity(value)


class TestCalendarDate:
    """Tests for parse_calendar_date."""

    def test_parses_iso_date(self):
        assert parse_calendar_date("2026-10-18") == date(2026, 10, 18)

    @pytest.mark.parametrize("value", ["2026-02-30", "20261018", "2026-10-18T09:00", "18/10/2026"])
    def test_rejects_other_shapes(self, value):
        with pytest.raises(ValueError):
            parse_calendar_date(value)


class TestRoomId:
    """Tests for RoomId value object."""

    def test_from_string_valid_uuid(self):
        raw = uuid.uuid4()

        assert RoomId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            RoomId.from_string("lab-101")


class TestRoomChanges:
    """Tests for the partial update structure."""

    def test_nothing_supplied(self):
        assert RoomChanges().supplied() == {}

    def test_falsy_values_count_as_supplied(self):
        changes = RoomChanges(available=False, facilities=[], description=None)

        assert changes.supplied() == {"available": False, "facilities": [], "description": None}
        assert changes.name is UNSET
