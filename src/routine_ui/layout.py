"""레이아웃 선택 모듈: 루틴 종류와 집중도로 그리드 열 수, 간격, 전환 시간을 결정"""
from __future__ import annotations

from .data_models import LayoutDescriptor, RoutineType

# 루틴별 기본 열 수
# 아침은 집중, 오후는 생산성(조밀), 저녁은 큰 터치 영역, 주말은 다양한 탐색
BASE_COLUMNS = {
    RoutineType.MORNING: 2,
    RoutineType.AFTERNOON: 4,
    RoutineType.EVENING: 3,
    RoutineType.WEEKEND: 4,
    RoutineType.CUSTOM: 3,
}

# 루틴별 화면 전환 시간 (밀리초) - 저녁이 가장 느리고 차분함
TRANSITION_DURATIONS_MS = {
    RoutineType.MORNING: 300,
    RoutineType.AFTERNOON: 250,
    RoutineType.EVENING: 600,
    RoutineType.WEEKEND: 400,
    RoutineType.CUSTOM: 400,
}

HIGH_FOCUS_THRESHOLD = 0.8
LOW_FOCUS_THRESHOLD = 0.3

MIN_COLUMNS = 2
MAX_COLUMNS = 5

# 간격 범위 (dp): 집중도가 높을수록 좁게
MIN_SPACING = 8.0
MAX_SPACING = 24.0


def focus_bucket(focus_level: float) -> str:
    if focus_level >= HIGH_FOCUS_THRESHOLD:
        return "high"
    if focus_level < LOW_FOCUS_THRESHOLD:
        return "low"
    return "medium"


def layout_for(routine_type: RoutineType, focus_level: float) -> LayoutDescriptor:
    """
    루틴과 집중도로 레이아웃을 결정하는 함수

    열 수는 루틴별 기본값에서 집중도가 높으면 하나 줄이고(선택지 축소),
    낮으면 하나 늘린 뒤(탐색 확대) 2-5 범위로 제한합니다.
    간격은 (1 - 집중도)에 비례하여 8dp ~ 24dp 사이에서 선형 보간합니다.

    Args:
        routine_type: 현재 루틴
        focus_level: 분류기가 계산한 집중도 (범위 밖 값은 0.0-1.0으로 제한)

    Returns:
        레이아웃 설명자
    """
    routine_type = RoutineType(routine_type)
    focus_level = max(0.0, min(1.0, focus_level))

    columns = BASE_COLUMNS[routine_type]
    bucket = focus_bucket(focus_level)
    if bucket == "high":
        columns -= 1
    elif bucket == "low":
        columns += 1
    columns = max(MIN_COLUMNS, min(MAX_COLUMNS, columns))

    spacing = MIN_SPACING + (MAX_SPACING - MIN_SPACING) * (1.0 - focus_level)

    return LayoutDescriptor(
        grid_columns=columns,
        adaptive_spacing=spacing,
        transition_duration_ms=TRANSITION_DURATIONS_MS[routine_type],
    )
