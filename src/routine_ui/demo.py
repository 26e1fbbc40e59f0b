from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta

from .config import GeneratorSettings
from .data_models import UIConfiguration
from .demo_data import BASE_TIME, create_sample_apps, create_sample_launch_events, create_sample_predictions
from .generator import UIConfigurationGenerator
from .insights import InsightGenerator
from .routines import infer_routine_type
from .usage import apply_usage


def print_configuration(configuration: UIConfiguration, insight: str) -> None:
    theme = configuration.theme
    palette = configuration.palette
    layout = configuration.layout

    print(f"Theme: {theme.name} (hue={theme.primary_hue:.0f}, corner={theme.corner_radius:.0f}dp)")
    print(f"  palette={palette.primary.to_hex()} / {palette.secondary.to_hex()} / {palette.tertiary.to_hex()}")
    print(
        f"Layout: columns={layout.grid_columns}, spacing={layout.adaptive_spacing:.1f}dp, "
        f"transition={layout.transition_duration_ms}ms, focus={configuration.focus_level:.3f}"
    )
    print("Primary actions:")
    for card in configuration.primary_actions:
        quick = ", ".join(action.label for action in card.quick_actions)
        print(f"  {card.action}: confidence={card.confidence:.2f}, visual={card.visual_priority} [{quick}]")
    print("Secondary actions:")
    for card in configuration.secondary_actions:
        print(f"  {card.action}: confidence={card.confidence:.2f}")
    print("Widgets: " + ", ".join(widget.title for widget in configuration.visible_widgets))
    print("App grid: " + ", ".join(app.display_name for app in configuration.app_grid.ordered_apps[:8]))
    print(f"  message={insight}\n")


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    reference_time = BASE_TIME + timedelta(hours=1)
    routine = infer_routine_type(reference_time)
    apps = apply_usage(create_sample_apps(), create_sample_launch_events(), reference_time=reference_time)

    generator = UIConfigurationGenerator(GeneratorSettings.from_env())
    insights = InsightGenerator()

    predictions = create_sample_predictions(routine)
    configuration = generator.generate(predictions, routine, apps)

    print(f"--- {routine.value} @ {reference_time:%Y-%m-%d %H:%M} ---")
    print_configuration(configuration, insights.build_message(configuration))

    # 예측 갱신: 첫 예측의 신뢰도가 떨어진 경우
    refreshed = [replace(predictions[0], confidence=0.35)] + predictions[1:]
    updated = generator.update(configuration, refreshed, routine, apps)

    print("--- after prediction refresh ---")
    print_configuration(updated, insights.build_message(updated))


if __name__ == "__main__":
    main()
