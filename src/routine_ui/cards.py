"""
행동 카드 모듈: 분류된 예측을 화면에 표시할 행동 카드로 변환하는 모듈

카드마다 다음을 덧붙입니다:
- 빠른 실행 버튼: 첫 번째 연관 앱 실행 + 루틴/키워드별 동작
- 시각적 우선순위: 신뢰도 기반 점수에 루틴과 맞는 행동 가산점
"""
from __future__ import annotations

from typing import List, Tuple

from .data_models import ActionCard, ActionPrediction, QuickAction, QuickActionType, RoutineType

# 루틴별 키워드 -> 빠른 실행 동작 매핑 테이블
# 키워드는 행동 라벨에서 대소문자 구분 없이 찾으며, 먼저 일치한 항목 하나만 사용
ROUTINE_QUICK_ACTIONS = {
    RoutineType.MORNING: (
        ("meditation", QuickAction("Start 10min session", QuickActionType.START_TIMER, "600")),
        ("email", QuickAction("Quick scan", QuickActionType.QUICK_JOIN, "email_scan")),
        ("plan", QuickAction("Today's agenda", QuickActionType.START_ACTIVITY, "daily_planning")),
    ),
    RoutineType.AFTERNOON: (
        ("meeting", QuickAction("Join meeting", QuickActionType.QUICK_JOIN, "meeting")),
        ("work", QuickAction("Focus mode", QuickActionType.START_ACTIVITY, "focus_mode")),
        ("project", QuickAction("Focus mode", QuickActionType.START_ACTIVITY, "focus_mode")),
        ("documentation", QuickAction("New document", QuickActionType.START_ACTIVITY, "new_document")),
    ),
    RoutineType.EVENING: (
        ("entertainment", QuickAction("Continue watching", QuickActionType.RESUME_CONTENT, "last_watched")),
        ("music", QuickAction("Evening playlist", QuickActionType.RESUME_CONTENT, "evening_playlist")),
        ("social", QuickAction("Check messages", QuickActionType.QUICK_JOIN, "social_check")),
    ),
    RoutineType.WEEKEND: (
        ("fitness", QuickAction("Start workout", QuickActionType.START_ACTIVITY, "workout")),
        ("hobby", QuickAction("Creative time", QuickActionType.START_ACTIVITY, "creative_session")),
        ("leisure", QuickAction("Explore interests", QuickActionType.START_ACTIVITY, "leisure_exploration")),
    ),
    RoutineType.CUSTOM: (),
}

# 사용자 정의 루틴에서 고신뢰 예측에만 붙는 동작
CUSTOM_QUICK_START = QuickAction("Quick start", QuickActionType.START_ACTIVITY, "quick_start")
CUSTOM_QUICK_START_CONFIDENCE = 0.8

# 루틴과 잘 맞는 행동 키워드 (시각적 우선순위 +2)
ROUTINE_ALIGNED_KEYWORDS = {
    RoutineType.MORNING: ("meditation", "wellness"),
    RoutineType.AFTERNOON: ("work", "meeting"),
    RoutineType.EVENING: ("relax", "entertainment"),
    RoutineType.WEEKEND: ("hobby", "social"),
    RoutineType.CUSTOM: (),
}

ALIGNED_PRIORITY_BOOST = 2


def quick_actions_for(
    prediction: ActionPrediction,
    routine_type: RoutineType,
    limit: int = 2,
) -> Tuple[QuickAction, ...]:
    """
    예측에 맞는 빠른 실행 버튼 목록을 만드는 함수

    Args:
        prediction: 대상 예측
        routine_type: 현재 루틴
        limit: 카드당 최대 버튼 수

    Returns:
        최대 limit개의 빠른 실행 동작
    """
    actions: List[QuickAction] = []

    # 첫 번째 연관 앱 실행 버튼
    if prediction.associated_apps:
        app = prediction.associated_apps[0]
        actions.append(
            QuickAction(
                label=f"Open {app.display_name}",
                action=QuickActionType.LAUNCH_APP,
                data=app.package_name,
            )
        )

    label = prediction.action.lower()
    for keyword, quick_action in ROUTINE_QUICK_ACTIONS[routine_type]:
        if keyword in label:
            actions.append(quick_action)
            break

    if routine_type is RoutineType.CUSTOM and prediction.confidence > CUSTOM_QUICK_START_CONFIDENCE:
        actions.append(CUSTOM_QUICK_START)

    return tuple(actions[: max(0, limit)])


def visual_priority(prediction: ActionPrediction, routine_type: RoutineType) -> int:
    """신뢰도 x 10에 루틴 정렬 가산점을 더해 1-10 범위로 제한"""
    priority = int(prediction.confidence * 10)
    label = prediction.action.lower()
    if any(keyword in label for keyword in ROUTINE_ALIGNED_KEYWORDS[routine_type]):
        priority += ALIGNED_PRIORITY_BOOST
    return max(1, min(10, priority))


def build_action_card(
    prediction: ActionPrediction,
    routine_type: RoutineType,
    max_quick_actions: int = 2,
) -> ActionCard:
    routine_type = RoutineType(routine_type)
    return ActionCard(
        action=prediction.action,
        apps=tuple(prediction.associated_apps),
        confidence=prediction.confidence,
        priority=prediction.priority,
        quick_actions=quick_actions_for(prediction, routine_type, max_quick_actions),
        visual_priority=visual_priority(prediction, routine_type),
        rationale=prediction.rationale,
    )
