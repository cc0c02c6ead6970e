"""
tests/grid/test_navigation.py

Covers:
  - Swipe guards at the navigable bounds
  - Month and year picker options
"""

from datetime import date

import pytest

from calgrid.grid import (
    available_months,
    available_years,
    can_navigate_next,
    can_navigate_previous,
    is_month_selectable,
    is_year_selectable,
)
from calgrid.model import CalendarConfiguration


@pytest.fixture
def bounded():
    return CalendarConfiguration(
        min_navigable_month=date(2025, 11, 15),
        max_navigable_month=date(2026, 2, 10),
    )


class TestSwipeGuards:

    def test_unbounded_always_navigable(self):
        cfg = CalendarConfiguration()
        assert can_navigate_previous(date(1900, 1, 1), cfg)
        assert can_navigate_next(date(2200, 1, 1), cfg)

    def test_previous_refused_at_min_month(self, bounded):
        assert not can_navigate_previous(date(2025, 11, 1), bounded)
        assert not can_navigate_previous(date(2025, 10, 1), bounded)
        assert can_navigate_previous(date(2025, 12, 1), bounded)

    def test_next_refused_at_max_month(self, bounded):
        assert not can_navigate_next(date(2026, 2, 1), bounded)
        assert not can_navigate_next(date(2026, 3, 1), bounded)
        assert can_navigate_next(date(2026, 1, 1), bounded)


class TestPickerOptions:

    def test_available_months(self):
        assert available_months() == list(range(1, 13))

    def test_available_years_from_bounds(self, bounded):
        assert available_years(bounded) == [2025, 2026]

    def test_available_years_open_ended(self):
        years = available_years(CalendarConfiguration(), today=date(2026, 10, 17))
        assert years[0] == 1926
        assert years[-1] == 2126
        assert len(years) == 201

    def test_month_selectable_uses_month_granularity(self, bounded):
        # The bound's own month stays pickable even though the bound is mid-month.
        assert is_month_selectable(2025, 11, bounded)
        assert is_month_selectable(2026, 2, bounded)
        assert not is_month_selectable(2025, 10, bounded)
        assert not is_month_selectable(2026, 3, bounded)

    def test_year_selectable_if_any_month_is(self, bounded):
        assert is_year_selectable(2025, bounded)
        assert is_year_selectable(2026, bounded)
        assert not is_year_selectable(2024, bounded)
        assert not is_year_selectable(2027, bounded)
