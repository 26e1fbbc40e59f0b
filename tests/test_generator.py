"""Tests for UI configuration generation and incremental updates."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import List

import pytest

from routine_ui import generator
from routine_ui.config import GeneratorSettings
from routine_ui.data_models import ActionPrediction, AppDescriptor, RoutineType, WidgetType
from routine_ui.generator import UIConfigurationGenerator
from routine_ui.themes import theme_for


def test_morning_configuration(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    config = generator.generate(morning_predictions, RoutineType.MORNING, sample_apps)

    assert config.routine_type is RoutineType.MORNING
    assert config.theme.name == "Morning Fresh"
    assert config.theme is theme_for(RoutineType.MORNING)
    assert [card.action for card in config.primary_actions] == ["Start meditation session"]
    assert [card.action for card in config.secondary_actions] == ["Check work messages"]
    assert config.focus_level == pytest.approx(0.82 / 1.6931, abs=1e-3)
    assert config.layout.grid_columns == 2
    assert config.app_grid.ordered_apps[0].package_name == "com.headspace.android"
    assert {w.identifier for w in config.visible_widgets} == {
        WidgetType.TIME, WidgetType.WELLNESS, WidgetType.SCHEDULE,
    }


def test_configuration_invariants(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    for routine in RoutineType:
        config = generator.generate(morning_predictions, routine, sample_apps)

        assert 2 <= config.layout.grid_columns <= 5
        assert 0.0 <= config.focus_level <= 1.0
        actions = config.primary_actions + config.secondary_actions
        assert len(actions) <= len(morning_predictions)
        assert all(card.confidence >= 0.3 for card in actions)
        assert all(1 <= card.visual_priority <= 10 for card in actions)
        priorities = [w.priority for w in config.widgets]
        assert priorities == sorted(priorities)


def test_generate_is_idempotent(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    first = generator.generate(morning_predictions, RoutineType.EVENING, sample_apps)
    second = generator.generate(morning_predictions, RoutineType.EVENING, sample_apps)

    assert first == second


def test_empty_inputs() -> None:
    config = generator.generate([], RoutineType.CUSTOM, [])

    assert config.primary_actions == ()
    assert config.secondary_actions == ()
    assert config.focus_level == 0.0
    assert config.app_grid.ordered_apps == ()
    assert config.layout.grid_columns == 4
    assert config.visible_widgets


def test_update_keeps_theme_instance(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    current = generator.generate(morning_predictions, RoutineType.MORNING, sample_apps)
    refreshed = [replace(morning_predictions[0], confidence=0.95)] + morning_predictions[1:]

    updated = generator.update(current, refreshed, RoutineType.MORNING, sample_apps)

    assert updated.theme is current.theme
    assert updated.palette is current.palette
    assert updated.primary_actions[0].confidence == 0.95
    assert updated.focus_level > current.focus_level
    assert current.primary_actions[0].confidence == 0.89


def test_update_with_same_inputs_matches_generate(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    current = generator.generate(morning_predictions, RoutineType.AFTERNOON, sample_apps)

    assert generator.update(current, morning_predictions, RoutineType.AFTERNOON, sample_apps) == current


def test_update_regenerates_on_routine_change(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    current = generator.generate(morning_predictions, RoutineType.MORNING, sample_apps)

    updated = generator.update(current, morning_predictions, RoutineType.EVENING, sample_apps)

    assert updated.theme is theme_for(RoutineType.EVENING)
    assert updated.routine_type is RoutineType.EVENING
    assert updated == generator.generate(morning_predictions, RoutineType.EVENING, sample_apps)


def test_dark_mode_settings(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    light = generator.generate(morning_predictions, RoutineType.MORNING, sample_apps)
    dark_generator = UIConfigurationGenerator(GeneratorSettings(dark_mode=True))

    dark = dark_generator.generate(morning_predictions, RoutineType.MORNING, sample_apps)
    switched = dark_generator.update(light, morning_predictions, RoutineType.MORNING, sample_apps)

    assert dark.palette.dark_mode is True
    assert switched.theme is light.theme
    assert switched.palette == dark.palette


def test_settings_cap_actions(sample_apps: List[AppDescriptor]) -> None:
    predictions = [ActionPrediction(action=f"Action {i}", confidence=0.9, priority=i + 1) for i in range(4)]
    capped = UIConfigurationGenerator(GeneratorSettings(max_actions=2, max_quick_actions=0))

    config = capped.generate(predictions, RoutineType.AFTERNOON, sample_apps)

    assert len(config.primary_actions) + len(config.secondary_actions) == 2
    assert all(card.quick_actions == () for card in config.primary_actions + config.secondary_actions)


def test_concurrent_generation(
    sample_apps: List[AppDescriptor], morning_predictions: List[ActionPrediction]
) -> None:
    expected = {routine: generator.generate(morning_predictions, routine, sample_apps) for routine in RoutineType}
    routines = list(RoutineType) * 8

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda r: generator.generate(morning_predictions, r, sample_apps), routines))

    assert all(result == expected[routine] for routine, result in zip(routines, results))


def test_grid_highlights_only_displayed_actions() -> None:
    apps = [AppDescriptor(f"pkg.{i}", f"App {i}", usage_count=i) for i in range(7)]
    predictions = [
        ActionPrediction(action=f"Action {i}", confidence=0.9, associated_apps=(apps[i],), priority=i + 1)
        for i in range(7)
    ]

    config = generator.generate(predictions, RoutineType.AFTERNOON, apps)

    shown = config.primary_actions + config.secondary_actions
    shown_packages = {app.package_name for card in shown for app in card.apps}
    assert len(shown) == 5
    assert set(config.app_grid.highlighted_packages) <= shown_packages
    assert config.app_grid.highlighted_packages == ("pkg.0", "pkg.1", "pkg.2", "pkg.3", "pkg.4")
    assert [app.package_name for app in config.app_grid.ordered_apps[5:]] == ["pkg.6", "pkg.5"]


def _prediction_sets(apps: List[AppDescriptor], predictions: List[ActionPrediction]):
    outsider = AppDescriptor("com.example.new", "New App", category="Games", usage_count=1)
    return {
        "empty": [],
        "below_threshold": [replace(p, confidence=0.1) for p in predictions],
        "disjoint_high_confidence": [
            ActionPrediction(action="Play a game", confidence=0.99, associated_apps=(outsider,), priority=1),
            ActionPrediction(action="Stream a show", confidence=0.97, associated_apps=(apps[2],), priority=1),
        ],
    }


@pytest.mark.parametrize("routine", list(RoutineType))
@pytest.mark.parametrize("case", ["empty", "below_threshold", "disjoint_high_confidence"])
def test_update_keeps_theme_regardless_of_predictions(
    routine: RoutineType,
    case: str,
    sample_apps: List[AppDescriptor],
    morning_predictions: List[ActionPrediction],
) -> None:
    current = generator.generate(morning_predictions, routine, sample_apps)
    new_predictions = _prediction_sets(sample_apps, morning_predictions)[case]

    updated = generator.update(current, new_predictions, routine, sample_apps)

    assert updated.theme is current.theme
    assert updated.palette is current.palette
    assert updated.routine_type is routine
