"""
tests/grid/test_weeks.py

Covers:
  - Grid shape for 4-, 5- and 6-week months
  - Contiguity, ordering and full coverage of the target month
  - Alignment of every week to first_day_of_week
  - Month relationships of padding days
  - Month overflow normalisation
  - Idempotence / structural equality
  - Week-day label dates
"""

from datetime import date, timedelta

import numpy as np
import pytest

from calgrid.grid import WeekGrid, generate, week_day_labels, weekday_index
from calgrid.model import CalendarConfiguration, CalendarDay, DayOfWeek, MonthRelationship
from calgrid.model.dates import days_in_month


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def monday():
    return CalendarConfiguration()


@pytest.fixture
def sunday():
    return CalendarConfiguration(first_day_of_week=DayOfWeek.SUNDAY)


# ── Helpers ───────────────────────────────────────────────────────────────────

def assert_contiguous(grid: WeekGrid):
    days = [d.date for d in grid.days()]
    for a, b in zip(days, days[1:]):
        assert b - a == timedelta(days=1), f"gap between {a} and {b}"


# ── Shape ─────────────────────────────────────────────────────────────────────

class TestShape:

    def test_april_2026_monday_start_has_five_weeks(self, monday):
        grid = generate(2026, 4, monday)
        assert grid.shape == (5, 7)
        assert grid.first_day == date(2026, 3, 30)
        assert grid.last_day == date(2026, 5, 3)

    def test_february_2026_sunday_start_has_no_padding(self, sunday):
        # Feb 1 2026 is a Sunday and Feb 28 a Saturday.
        grid = generate(2026, 2, sunday)
        assert grid.n_weeks == 4
        assert grid.first_day == date(2026, 2, 1)
        assert grid.last_day == date(2026, 2, 28)
        assert np.all(grid.relationships == MonthRelationship.IN_MONTH)

    def test_march_2026_monday_start_has_six_weeks(self, monday):
        # Mar 1 2026 is a Sunday, so the first Monday row starts in February.
        grid = generate(2026, 3, monday)
        assert grid.n_weeks == 6
        assert grid.first_day == date(2026, 2, 23)
        assert grid.last_day == date(2026, 4, 5)

    def test_len_and_iteration_follow_weeks(self, monday):
        grid = generate(2026, 4, monday)
        rows = list(grid)
        assert len(grid) == len(rows) == 5
        assert all(len(row) == 7 for row in rows)
        assert grid[0] == rows[0]

    def test_default_configuration_is_monday(self, monday):
        assert generate(2026, 4) == generate(2026, 4, monday)


# ── Coverage and alignment ────────────────────────────────────────────────────

class TestCoverage:

    @pytest.mark.parametrize("first_day", list(DayOfWeek))
    @pytest.mark.parametrize("year, month", [(2024, 2), (2025, 12), (2026, 1), (2026, 4), (2026, 8)])
    def test_grid_is_complete_and_aligned(self, first_day, year, month):
        cfg = CalendarConfiguration(first_day_of_week=first_day)
        grid = generate(year, month, cfg)

        assert grid.dates.size % 7 == 0
        assert 4 <= grid.n_weeks <= 6
        assert_contiguous(grid)

        for week in grid:
            assert week[0].day_of_week is first_day

        in_month = [d.date for d in grid.in_month_days()]
        expected = [date(year, month, 1) + timedelta(days=i) for i in range(days_in_month(year, month))]
        assert in_month == expected

    def test_padding_relationships(self, sunday):
        grid = generate(2026, 4, sunday)
        first_week = grid[0]
        assert first_week[0] == CalendarDay(date(2026, 3, 29), MonthRelationship.BEFORE_MONTH)
        assert first_week[2] == CalendarDay(date(2026, 3, 31), MonthRelationship.BEFORE_MONTH)
        assert first_week[3] == CalendarDay(date(2026, 4, 1), MonthRelationship.IN_MONTH)
        last_week = grid[-1]
        assert last_week[-1] == CalendarDay(date(2026, 5, 2), MonthRelationship.AFTER_MONTH)

    def test_weekday_index_matches_python(self, monday):
        grid = generate(2026, 4, monday)
        expected = np.array([[d.date.weekday() for d in week] for week in grid])
        np.testing.assert_array_equal(weekday_index(grid.dates), expected)

    def test_find_returns_tagged_day(self, monday):
        grid = generate(2026, 4, monday)
        assert grid.find(date(2026, 3, 30)) == CalendarDay(date(2026, 3, 30), MonthRelationship.BEFORE_MONTH)
        assert grid.find(date(2026, 4, 17)) == CalendarDay(date(2026, 4, 17))
        assert grid.find(date(2026, 6, 1)) is None


# ── Overflow and purity ───────────────────────────────────────────────────────

class TestNormalisation:

    def test_month_thirteen_rolls_into_next_year(self, monday):
        assert generate(2025, 13, monday) == generate(2026, 1, monday)

    def test_month_zero_rolls_into_previous_year(self, monday):
        grid = generate(2026, 0, monday)
        assert (grid.year, grid.month) == (2025, 12)
        assert grid == generate(2025, 12, monday)

    def test_generate_is_idempotent(self, sunday):
        assert generate(2026, 4, sunday) == generate(2026, 4, sunday)

    def test_different_months_are_not_equal(self, sunday):
        assert generate(2026, 4, sunday) != generate(2026, 5, sunday)

    def test_grid_arrays_are_read_only(self, monday):
        grid = generate(2026, 4, monday)
        with pytest.raises(ValueError):
            grid.dates[0, 0] = np.datetime64("2000-01-01")

    def test_mismatched_arrays_rejected(self):
        dates = np.arange(np.datetime64("2026-03-30"), np.datetime64("2026-05-04")).reshape(5, 7)
        with pytest.raises(ValueError):
            WeekGrid(2026, 4, dates, np.zeros((4, 7), dtype=np.int8))


# ── Week-day labels ───────────────────────────────────────────────────────────

class TestWeekDayLabels:

    def test_monday_labels(self):
        labels = week_day_labels(DayOfWeek.MONDAY)
        assert labels[0] == date(2026, 1, 5)
        assert [d.weekday() for d in labels] == list(range(7))

    def test_sunday_labels(self):
        labels = week_day_labels(DayOfWeek.SUNDAY)
        assert labels[0] == date(2026, 1, 4)
        assert labels[0].weekday() == DayOfWeek.SUNDAY
        assert labels[-1].weekday() == DayOfWeek.SATURDAY

    @pytest.mark.parametrize("first_day", list(DayOfWeek))
    def test_labels_are_seven_consecutive_days(self, first_day):
        labels = week_day_labels(first_day)
        assert len(labels) == 7
        assert labels[0].weekday() == first_day
        assert all(b - a == timedelta(days=1) for a, b in zip(labels, labels[1:]))
