"""Tests for the wall-clock routine classifier."""

from datetime import datetime

import pytest

from routine_ui.data_models import RoutineType
from routine_ui.routines import infer_routine_type


@pytest.mark.parametrize(
    "timestamp, expected",
    [
        (datetime(2025, 9, 25, 7, 30), RoutineType.MORNING),
        (datetime(2025, 9, 25, 6, 0), RoutineType.MORNING),
        (datetime(2025, 9, 25, 12, 0), RoutineType.AFTERNOON),
        (datetime(2025, 9, 25, 17, 59), RoutineType.AFTERNOON),
        (datetime(2025, 9, 25, 18, 0), RoutineType.EVENING),
        (datetime(2025, 9, 25, 23, 0), RoutineType.CUSTOM),
        (datetime(2025, 9, 25, 3, 0), RoutineType.CUSTOM),
        (datetime(2025, 9, 27, 10, 0), RoutineType.WEEKEND),
        (datetime(2025, 9, 28, 22, 59), RoutineType.WEEKEND),
        (datetime(2025, 9, 28, 7, 0), RoutineType.CUSTOM),
    ],
)
def test_infer_routine_type(timestamp: datetime, expected: RoutineType) -> None:
    assert infer_routine_type(timestamp) is expected
