"""
루틴 분류 모듈: 벽시계 시간으로 현재 루틴 종류를 결정하는 기본 분류기

UI 생성기는 루틴을 입력으로만 받으므로 이 분류기는 데모와
별도 루틴 소스가 없는 호출자를 위한 기본 구현입니다.
"""
from __future__ import annotations

from datetime import datetime

from .data_models import RoutineType

# 평일 시간대 정의
# 각 튜플: (시작시간, 종료시간, 루틴)
WEEKDAY_ROUTINE_DEFINITIONS = (
    (6, 12, RoutineType.MORNING),     # 오전 6시-12시
    (12, 18, RoutineType.AFTERNOON),  # 오후 12시-6시
    (18, 23, RoutineType.EVENING),    # 저녁 6시-11시
)

# 주말 루틴 시간대 (오전 8시-오후 11시)
WEEKEND_HOURS = (8, 23)

# 토요일, 일요일 (datetime.weekday 기준)
WEEKEND_DAYS = (5, 6)


def infer_routine_type(timestamp: datetime) -> RoutineType:
    """
    주어진 시간을 루틴 종류로 분류하는 함수

    주말 낮 시간은 WEEKEND, 평일은 시간대별 루틴이며
    어느 구간에도 속하지 않는 시간(심야/새벽)은 CUSTOM으로 분류합니다.

    Args:
        timestamp: 분류할 시간 정보

    Returns:
        해당하는 루틴 종류
    """
    hour = timestamp.hour

    if timestamp.weekday() in WEEKEND_DAYS:
        start, end = WEEKEND_HOURS
        if start <= hour < end:
            return RoutineType.WEEKEND
        return RoutineType.CUSTOM

    for start, end, routine in WEEKDAY_ROUTINE_DEFINITIONS:
        if start <= hour < end:
            return routine
    return RoutineType.CUSTOM
