"""테마 파라미터 모듈: 루틴 종류를 기본 테마 설명자로 매핑하는 고정 테이블"""
from __future__ import annotations

from typing import Dict, Optional

from .data_models import RoutineType, ThemeDescriptor

# 루틴별 기본 테마 테이블
# 루틴마다 하나의 인스턴스만 존재하며 항상 같은 객체를 반환합니다
ROUTINE_THEMES: Dict[RoutineType, ThemeDescriptor] = {
    RoutineType.MORNING: ThemeDescriptor(
        name="Morning Fresh",
        primary_hue=200.0,    # 부드러운 파란색
        saturation=0.6,
        brightness=0.9,
        elevation=4.0,
        corner_radius=16.0,
    ),
    RoutineType.AFTERNOON: ThemeDescriptor(
        name="Productive Focus",
        primary_hue=260.0,    # 짙은 보라색
        saturation=0.7,
        brightness=0.8,
        elevation=6.0,
        corner_radius=12.0,
    ),
    RoutineType.EVENING: ThemeDescriptor(
        name="Evening Calm",
        primary_hue=30.0,     # 따뜻한 주황색
        saturation=0.5,
        brightness=0.7,
        elevation=8.0,
        corner_radius=20.0,
    ),
    RoutineType.WEEKEND: ThemeDescriptor(
        name="Weekend Leisure",
        primary_hue=120.0,    # 산뜻한 초록색
        saturation=0.6,
        brightness=0.8,
        elevation=5.0,
        corner_radius=18.0,
    ),
    RoutineType.CUSTOM: ThemeDescriptor(
        name="Custom",
        primary_hue=280.0,    # 중립적인 보라색
        saturation=0.5,
        brightness=0.8,
        elevation=4.0,
        corner_radius=16.0,
    ),
}

# 테마 이름 -> 루틴 역방향 조회 테이블 (업데이트 경로에서 현재 루틴 복원용)
_ROUTINE_BY_THEME_NAME = {theme.name: routine for routine, theme in ROUTINE_THEMES.items()}

# 주요 행동 카드 위에 표시되는 루틴별 제목
CONTEXTUAL_TITLES = {
    RoutineType.MORNING: "Start your morning with",
    RoutineType.AFTERNOON: "Focus on productivity",
    RoutineType.EVENING: "Wind down with",
    RoutineType.WEEKEND: "Enjoy your weekend",
    RoutineType.CUSTOM: "Suggested actions",
}


def theme_for(routine_type: RoutineType) -> ThemeDescriptor:
    """
    루틴 종류에 해당하는 기본 테마를 반환하는 함수

    닫힌 열거형 전체에 대해 정의된 순수 함수이며,
    CUSTOM 루틴은 중립적인 기본 테마로 매핑됩니다.

    Args:
        routine_type: 현재 루틴 종류

    Returns:
        루틴별 테마 설명자 (호출마다 같은 인스턴스)
    """
    return ROUTINE_THEMES[RoutineType(routine_type)]


def routine_for_theme(theme: ThemeDescriptor) -> Optional[RoutineType]:
    """테마 이름으로 해당 루틴을 찾는 함수 (알 수 없는 테마면 None)"""
    return _ROUTINE_BY_THEME_NAME.get(theme.name)


def contextual_title(routine_type: RoutineType) -> str:
    return CONTEXTUAL_TITLES[RoutineType(routine_type)]
