"""Smoke tests for the sample data and console demo."""

import pytest

from routine_ui.data_models import RoutineType
from routine_ui.demo import main
from routine_ui.demo_data import create_sample_apps, create_sample_predictions


@pytest.mark.parametrize("routine", list(RoutineType))
def test_sample_predictions_reference_known_apps(routine: RoutineType) -> None:
    packages = {app.package_name for app in create_sample_apps()}
    predictions = create_sample_predictions(routine)

    assert predictions
    for prediction in predictions:
        assert 0.0 <= prediction.confidence <= 1.0
        assert all(app.package_name in packages for app in prediction.associated_apps)


def test_demo_prints_both_configurations(capsys: pytest.CaptureFixture) -> None:
    main()

    out = capsys.readouterr().out
    assert "--- morning @ 2025-09-25 08:30 ---" in out
    assert "--- after prediction refresh ---" in out
    assert "Theme: Morning Fresh" in out
