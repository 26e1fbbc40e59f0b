"""Tests for layout selection."""

import pytest

from routine_ui.data_models import RoutineType
from routine_ui.layout import TRANSITION_DURATIONS_MS, focus_bucket, layout_for


def test_weekend_grid_is_at_least_as_wide_as_focused_morning() -> None:
    weekend = layout_for(RoutineType.WEEKEND, 0.5)
    morning = layout_for(RoutineType.MORNING, 0.9)

    assert weekend.grid_columns == 4
    assert morning.grid_columns == 2
    assert weekend.grid_columns >= morning.grid_columns


def test_scattered_afternoon_adds_a_column() -> None:
    assert layout_for(RoutineType.AFTERNOON, 0.1).grid_columns == 5


def test_high_focus_removes_a_column() -> None:
    assert layout_for(RoutineType.EVENING, 0.85).grid_columns == 2
    assert layout_for(RoutineType.EVENING, 0.5).grid_columns == 3


@pytest.mark.parametrize("routine", list(RoutineType))
@pytest.mark.parametrize("focus", [0.0, 0.29, 0.3, 0.79, 0.8, 1.0])
def test_columns_within_bounds(routine: RoutineType, focus: float) -> None:
    assert 2 <= layout_for(routine, focus).grid_columns <= 5


@pytest.mark.parametrize(
    "focus, expected",
    [(1.0, 8.0), (0.5, 16.0), (0.0, 24.0)],
)
def test_spacing_interpolation(focus: float, expected: float) -> None:
    assert layout_for(RoutineType.MORNING, focus).adaptive_spacing == pytest.approx(expected)


def test_spacing_shrinks_as_focus_grows() -> None:
    spacings = [layout_for(RoutineType.CUSTOM, focus / 10).adaptive_spacing for focus in range(11)]
    assert spacings == sorted(spacings, reverse=True)


def test_evening_transition_is_longest() -> None:
    evening = layout_for(RoutineType.EVENING, 0.5).transition_duration_ms
    assert evening == 600
    assert evening == max(TRANSITION_DURATIONS_MS.values())
    assert layout_for(RoutineType.AFTERNOON, 0.5).transition_duration_ms == 250


def test_out_of_range_focus_is_clamped() -> None:
    assert layout_for(RoutineType.MORNING, 1.7) == layout_for(RoutineType.MORNING, 1.0)
    assert layout_for(RoutineType.MORNING, -3.0) == layout_for(RoutineType.MORNING, 0.0)


def test_focus_bucket_boundaries() -> None:
    assert focus_bucket(0.8) == "high"
    assert focus_bucket(0.3) == "medium"
    assert focus_bucket(0.2999) == "low"
