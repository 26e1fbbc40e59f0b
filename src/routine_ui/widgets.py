"""
위젯 구성 모듈: 루틴별 위젯 목록과 집중도 기반 표시 규칙

위젯은 두 가지 역할로 나뉩니다:
- FOCUS: 집중도가 임계값 이상일 때 표시 (주요 행동을 돕는 위젯)
- AMBIENT: 집중도가 임계값 미만일 때 표시 (탐색용 주변 위젯)

집중도가 높으면 적은 수의 핵심 위젯만, 낮으면 더 많은 주변 위젯을 보여줍니다.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Tuple

from .data_models import RoutineType, WidgetDescriptor, WidgetType


class WidgetRole(str, Enum):
    FOCUS = "focus"
    AMBIENT = "ambient"


@dataclass(frozen=True)
class WidgetSpec:
    widget_type: WidgetType
    priority: int       # 표시 순서 (1이 가장 앞)
    role: WidgetRole
    threshold: float    # 표시 여부를 가르는 집중도 경계값


def _focus(widget_type: WidgetType, priority: int, threshold: float = 0.0) -> WidgetSpec:
    return WidgetSpec(widget_type, priority, WidgetRole.FOCUS, threshold)


def _ambient(widget_type: WidgetType, priority: int, threshold: float = 0.5) -> WidgetSpec:
    return WidgetSpec(widget_type, priority, WidgetRole.AMBIENT, threshold)


# 루틴별 위젯 목록
# threshold 0.0인 FOCUS 위젯은 항상 표시됩니다
WIDGET_ROSTERS: Dict[RoutineType, Tuple[WidgetSpec, ...]] = {
    RoutineType.MORNING: (
        _focus(WidgetType.TIME, 1),
        _focus(WidgetType.WELLNESS, 2),
        _ambient(WidgetType.SCHEDULE, 3),
    ),
    RoutineType.AFTERNOON: (
        _focus(WidgetType.PRODUCTIVITY, 1, threshold=0.3),  # 예측이 집중될 때만 딥워크 위젯
        _focus(WidgetType.TIME, 2),
        _ambient(WidgetType.NOTIFICATIONS, 3),
    ),
    RoutineType.EVENING: (
        _focus(WidgetType.TIME, 1),
        _focus(WidgetType.WELLNESS, 2),
        _ambient(WidgetType.SCHEDULE, 3),
    ),
    RoutineType.WEEKEND: (
        _focus(WidgetType.TIME, 1),
        _ambient(WidgetType.WELLNESS, 2, threshold=0.7),
        _ambient(WidgetType.PRODUCTIVITY, 3, threshold=0.4),
    ),
    RoutineType.CUSTOM: (
        _focus(WidgetType.TIME, 1),
        _ambient(WidgetType.NOTIFICATIONS, 2),
    ),
}

TIME_TITLES = {
    RoutineType.MORNING: "Good Morning",
    RoutineType.AFTERNOON: "Afternoon",
    RoutineType.EVENING: "Evening",
    RoutineType.WEEKEND: "Weekend",
    RoutineType.CUSTOM: "Current Time",
}

WELLNESS_TITLES = {
    RoutineType.MORNING: "Mindfulness",
    RoutineType.EVENING: "Relaxation",
}

STATIC_TITLES = {
    WidgetType.PRODUCTIVITY: "Focus Time",
    WidgetType.SCHEDULE: "Schedule",
    WidgetType.NOTIFICATIONS: "Updates",
}


def widget_roster(routine_type: RoutineType) -> Tuple[WidgetSpec, ...]:
    return WIDGET_ROSTERS[RoutineType(routine_type)]


def is_widget_visible(spec: WidgetSpec, focus_level: float) -> bool:
    """FOCUS 위젯은 집중도에 비례, AMBIENT 위젯은 반비례하여 표시"""
    if spec.role is WidgetRole.FOCUS:
        return focus_level >= spec.threshold
    return focus_level < spec.threshold


def widget_title(widget_type: WidgetType, routine_type: RoutineType) -> str:
    if widget_type is WidgetType.TIME:
        return TIME_TITLES[routine_type]
    if widget_type is WidgetType.WELLNESS:
        return WELLNESS_TITLES.get(routine_type, "Wellness")
    return STATIC_TITLES[widget_type]


def build_widgets(
    routine_type: RoutineType,
    visible_ids: Iterable[WidgetType],
) -> Tuple[WidgetDescriptor, ...]:
    """
    루틴 위젯 목록과 표시 대상 ID로 위젯 설명자 튜플을 만드는 함수

    Args:
        routine_type: 현재 루틴
        visible_ids: 분류기가 계산한 표시 대상 위젯 ID

    Returns:
        priority 오름차순으로 정렬된 위젯 설명자 튜플
    """
    routine_type = RoutineType(routine_type)
    visible = set(visible_ids)
    return tuple(
        WidgetDescriptor(
            identifier=spec.widget_type,
            is_visible=spec.widget_type in visible,
            priority=spec.priority,
            title=widget_title(spec.widget_type, routine_type),
        )
        for spec in sorted(widget_roster(routine_type), key=lambda item: item.priority)
    )
