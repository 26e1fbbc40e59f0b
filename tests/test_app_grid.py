"""Tests for app grid ordering and grouping."""

from datetime import datetime
from typing import List

from routine_ui.app_grid import UNCATEGORIZED, compose_grid
from routine_ui.data_models import ActionPrediction, AppDescriptor, RoutineType


def _packages(apps) -> List[str]:
    return [app.package_name for app in apps]


def test_predicted_apps_are_pinned_first(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    grid = compose_grid(sample_apps, morning_predictions, RoutineType.MORNING)

    assert _packages(grid.ordered_apps) == [
        "com.headspace.android",
        "com.slack",
        "com.spotify.music",
        "com.netflix.mediaclient",
    ]
    assert grid.highlighted_packages == ("com.headspace.android", "com.slack")
    assert grid.group_by_category is False
    assert grid.category_groups == ()


def test_filtered_predictions_do_not_pin(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    grid = compose_grid(sample_apps, morning_predictions, RoutineType.MORNING, min_confidence=0.8)

    assert _packages(grid.ordered_apps)[:2] == ["com.headspace.android", "com.spotify.music"]
    assert grid.highlighted_packages == ("com.headspace.android",)


def test_usage_ties_break_on_recency_then_name() -> None:
    apps = [
        AppDescriptor("pkg.b", "Beta", usage_count=10),
        AppDescriptor("pkg.a", "Alpha", usage_count=10),
        AppDescriptor("pkg.c", "Gamma", usage_count=10, last_used=datetime(2025, 9, 24, 9, 0)),
        AppDescriptor("pkg.d", "Delta", usage_count=10, last_used=datetime(2025, 9, 25, 9, 0)),
    ]

    grid = compose_grid(apps, [], RoutineType.AFTERNOON)

    assert _packages(grid.ordered_apps) == ["pkg.d", "pkg.c", "pkg.a", "pkg.b"]


def test_order_does_not_depend_on_input_order(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    forward = compose_grid(sample_apps, morning_predictions, RoutineType.MORNING)
    backward = compose_grid(list(reversed(sample_apps)), list(reversed(morning_predictions)), RoutineType.MORNING)

    assert forward == backward


def test_weekend_groups_by_category(sample_apps: List[AppDescriptor]) -> None:
    apps = sample_apps + [AppDescriptor("com.example.misc", "Misc", usage_count=3)]

    grid = compose_grid(apps, [], RoutineType.WEEKEND)

    assert grid.group_by_category is True
    assert [category for category, _ in grid.category_groups] == [
        "Entertainment", "Health", "Music", "Work", UNCATEGORIZED,
    ]
    grouped = [app for _, members in grid.category_groups for app in members]
    assert sorted(_packages(grouped)) == sorted(_packages(grid.ordered_apps))


def test_predicted_apps_missing_from_list_are_not_added(sample_apps: List[AppDescriptor]) -> None:
    ghost = AppDescriptor("com.ghost", "Ghost")
    prediction = ActionPrediction(action="Haunt", confidence=0.9, associated_apps=(ghost,))

    grid = compose_grid(sample_apps, [prediction], RoutineType.EVENING)

    assert "com.ghost" not in _packages(grid.ordered_apps)
    assert grid.highlighted_packages == ()
    assert len(grid.ordered_apps) == len(sample_apps)


def test_duplicate_packages_keep_first(sample_apps: List[AppDescriptor]) -> None:
    duplicate = AppDescriptor("com.slack", "Slack (work profile)", usage_count=999)

    grid = compose_grid(sample_apps + [duplicate], [], RoutineType.CUSTOM)

    assert _packages(grid.ordered_apps).count("com.slack") == 1
    assert duplicate not in grid.ordered_apps


def test_empty_inputs() -> None:
    grid = compose_grid([], [], RoutineType.WEEKEND)

    assert grid.ordered_apps == ()
    assert grid.category_groups == ()
