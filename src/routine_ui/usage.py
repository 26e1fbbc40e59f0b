"""
앱 사용 통계 모듈: 앱 실행 이벤트로 AppDescriptor의 사용 횟수와 마지막 사용 시각을 갱신

기존 AppDescriptor는 수정하지 않고 통계가 반영된 새 객체를 반환합니다.
시간대 정보가 있는 시각은 UTC로 변환하여 비교하고, 시간대 정보가 없는 시각은
UTC 기준으로 간주하므로 두 형식이 섞여 있어도 비교할 수 있습니다.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from .data_models import AppDescriptor


@dataclass(frozen=True)
class LaunchEvent:
    """앱 실행 한 번을 나타내는 이벤트"""
    package_name: str    # 실행된 앱 패키지
    timestamp: datetime  # 실행 시각


def _comparable(timestamp: datetime) -> datetime:
    """비교용 시각: 시간대가 있으면 UTC 기준 naive 시각으로 변환"""
    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        return timestamp.replace(tzinfo=None)
    return timestamp.astimezone(timezone.utc).replace(tzinfo=None)


def apply_usage(
    apps: Sequence[AppDescriptor],
    events: Iterable[LaunchEvent],
    reference_time: Optional[datetime] = None,
    window_days: int = 30,
) -> List[AppDescriptor]:
    """
    실행 이벤트를 앱 목록에 반영하는 함수

    reference_time이 주어지면 그 시점 기준 window_days 이내의 이벤트만
    집계하고, 기준 시각 이후의 이벤트는 무시합니다.
    앱 목록에 없는 패키지의 이벤트도 무시합니다.

    Args:
        apps: 기존 앱 목록
        events: 앱 실행 이벤트 목록
        reference_time: 집계 기준 시각 (None이면 모든 이벤트 사용)
        window_days: 집계 기간 (일)

    Returns:
        사용 횟수와 마지막 사용 시각이 갱신된 새 앱 목록 (입력 순서 유지)
    """
    known = {app.package_name for app in apps}
    window_end = _comparable(reference_time) if reference_time is not None else None
    window_start = window_end - timedelta(days=window_days) if window_end is not None else None

    # 패키지별 실행 횟수와 마지막 실행 시각 집계
    launch_counts: Dict[str, int] = defaultdict(int)
    last_launch: Dict[str, datetime] = {}
    for event in events:
        if event.package_name not in known:
            continue
        moment = _comparable(event.timestamp)
        if window_end is not None and not (window_start <= moment <= window_end):
            continue
        launch_counts[event.package_name] += 1
        previous = last_launch.get(event.package_name)
        if previous is None or moment > _comparable(previous):
            last_launch[event.package_name] = event.timestamp

    updated: List[AppDescriptor] = []
    for app in apps:
        count = launch_counts.get(app.package_name, 0)
        if count == 0:
            updated.append(app)
            continue
        last_used = last_launch[app.package_name]
        if app.last_used is not None and _comparable(app.last_used) > _comparable(last_used):
            last_used = app.last_used
        updated.append(replace(app, usage_count=app.usage_count + count, last_used=last_used))
    return updated
