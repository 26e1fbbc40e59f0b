"""
앱 그리드 구성 모듈: 설치된 앱의 배치 순서와 카테고리 묶음을 결정하는 모듈

배치 규칙:
1. 임계값을 통과한 예측이 참조하는 앱을 맨 앞에 고정
   (참조한 예측의 우선순위 -> 사용 횟수 내림차순)
2. 나머지 앱은 사용 횟수 내림차순 -> 마지막 사용 시각 내림차순 -> 이름 오름차순
3. 주말 루틴에서만 카테고리별로 묶음 (다양한 탐색에 유리)

모든 정렬 키는 패키지 이름으로 끝나므로 항상 같은 순서를 보장합니다.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple

from .classifier import DEFAULT_MIN_CONFIDENCE, surviving_predictions
from .data_models import ActionPrediction, AppDescriptor, AppGridDescriptor, RoutineType

logger = logging.getLogger(__name__)

# 카테고리별로 묶는 루틴
GROUP_BY_CATEGORY = {
    RoutineType.MORNING: False,
    RoutineType.AFTERNOON: False,
    RoutineType.EVENING: False,
    RoutineType.WEEKEND: True,
    RoutineType.CUSTOM: False,
}

# 루틴별 카테고리 중요도 (카테고리 묶음 순서 결정용)
ROUTINE_CATEGORY_PRIORITIES: Dict[RoutineType, Dict[str, float]] = {
    RoutineType.MORNING: {
        "Health": 1.0,
        "Productivity": 0.9,
        "Email": 0.8,
        "News": 0.7,
        "Weather": 0.6,
    },
    RoutineType.AFTERNOON: {
        "Work": 1.0,
        "Productivity": 0.9,
        "Professional": 0.8,
        "Communication": 0.7,
        "Browser": 0.6,
    },
    RoutineType.EVENING: {
        "Entertainment": 1.0,
        "Social": 0.9,
        "Reading": 0.8,
        "Music": 0.7,
    },
    RoutineType.WEEKEND: {
        "Entertainment": 1.0,
        "Social": 0.9,
        "Fitness": 0.8,
        "Reading": 0.7,
        "Games": 0.6,
        "Photography": 0.5,
    },
    RoutineType.CUSTOM: {},
}

# 카테고리가 없는 앱을 모으는 그룹 이름
UNCATEGORIZED = "Other"


def category_priority(category: Optional[str], routine_type: RoutineType) -> float:
    if category is None:
        return 0.0
    return ROUTINE_CATEGORY_PRIORITIES[routine_type].get(category, 0.0)


def _last_used_key(app: AppDescriptor) -> Tuple[int, float]:
    # 최근 사용 순, 사용 기록이 없는 앱은 뒤로
    if app.last_used is None:
        return (1, 0.0)
    return (0, -app.last_used.timestamp())


def _usage_order_key(app: AppDescriptor):
    return (-app.usage_count, _last_used_key(app), app.display_name, app.package_name)


def _pinned_priorities(predictions: Sequence[ActionPrediction]) -> Dict[str, int]:
    """예측이 참조하는 앱 패키지별로 가장 높은(가장 작은) 우선순위 수집"""
    priorities: Dict[str, int] = {}
    for prediction in predictions:
        for app in prediction.associated_apps:
            current = priorities.get(app.package_name)
            if current is None or prediction.priority < current:
                priorities[app.package_name] = prediction.priority
    return priorities


def _group_by_category(
    apps: Sequence[AppDescriptor],
    routine_type: RoutineType,
) -> Tuple[Tuple[str, Tuple[AppDescriptor, ...]], ...]:
    """
    정렬된 앱을 카테고리별로 묶는 내부 함수

    그룹 안에서는 기존 배치 순서를 유지하고, 그룹 순서는
    루틴별 카테고리 중요도 내림차순 -> 카테고리 이름 순이며 미분류 그룹은 맨 뒤입니다.
    """
    grouped: "OrderedDict[str, List[AppDescriptor]]" = OrderedDict()
    for app in apps:
        grouped.setdefault(app.category or UNCATEGORIZED, []).append(app)

    def group_key(category: str):
        is_uncategorized = category == UNCATEGORIZED
        return (is_uncategorized, -category_priority(category, routine_type), category)

    return tuple((category, tuple(grouped[category])) for category in sorted(grouped, key=group_key))


def compose_grid(
    apps: Sequence[AppDescriptor],
    predictions: Sequence[ActionPrediction],
    routine_type: RoutineType,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
) -> AppGridDescriptor:
    """
    앱 그리드의 배치 순서를 결정하는 함수

    Args:
        apps: 사용 가능한 앱 목록 (비어 있어도 됨)
        predictions: 행동 예측 목록 (임계값 미만은 고정 대상에서 제외)
        routine_type: 현재 루틴
        min_confidence: 예측 생존 임계값

    Returns:
        정렬된 앱, 카테고리 묶음 여부, 강조할 패키지를 담은 그리드 설명자
    """
    routine_type = RoutineType(routine_type)
    pinned = _pinned_priorities(surviving_predictions(predictions, min_confidence))

    # 같은 패키지가 중복되면 첫 번째 항목만 사용
    unique_apps: Dict[str, AppDescriptor] = {}
    for app in apps:
        unique_apps.setdefault(app.package_name, app)

    pinned_apps = sorted(
        (app for app in unique_apps.values() if app.package_name in pinned),
        key=lambda app: (pinned[app.package_name],) + _usage_order_key(app),
    )
    remaining_apps = sorted(
        (app for app in unique_apps.values() if app.package_name not in pinned),
        key=_usage_order_key,
    )
    ordered = tuple(pinned_apps + remaining_apps)

    group = GROUP_BY_CATEGORY[routine_type]
    logger.debug(
        f"Composed grid for {routine_type.value}: {len(pinned_apps)} pinned, "
        f"{len(remaining_apps)} remaining, group_by_category={group}"
    )

    return AppGridDescriptor(
        ordered_apps=ordered,
        group_by_category=group,
        highlighted_packages=tuple(app.package_name for app in pinned_apps),
        category_groups=_group_by_category(ordered, routine_type) if group else (),
    )
