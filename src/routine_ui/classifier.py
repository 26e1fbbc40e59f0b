"""
예측 분류 모듈: 순위가 매겨진 행동 예측을 주요/보조 행동과 위젯 표시 여부로 나누는 모듈

이 모듈은 다음을 계산합니다:
- 신뢰도 임계값 미만 예측 제거
- 우선순위 오름차순, 신뢰도 내림차순 정렬
- 가장 높은 우선순위 계층은 주요 행동, 나머지는 보조 행동 (최대 개수 제한)
- 남은 예측의 평균 신뢰도와 개수로 계산한 집중도(focus level)
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence, Tuple

from .data_models import ActionPrediction, WidgetType
from .widgets import WidgetSpec, is_widget_visible

logger = logging.getLogger(__name__)

# 기본 최소 신뢰도 (이 값 미만의 예측은 어느 목록에도 들어가지 않음)
DEFAULT_MIN_CONFIDENCE = 0.3

# 주요 + 보조 행동의 최대 개수
DEFAULT_MAX_ACTIONS = 5


@dataclass(frozen=True)
class PredictionClassification:
    primary: Tuple[ActionPrediction, ...]
    secondary: Tuple[ActionPrediction, ...]
    visible_widget_ids: Tuple[WidgetType, ...]
    focus_level: float


def normalize_prediction(prediction: ActionPrediction) -> ActionPrediction:
    """
    외부에서 들어온 잘못된 값을 보정하는 함수

    신뢰도는 0.0-1.0 범위로 제한하고(NaN/inf는 0.0), 1 미만의 우선순위는 최상위(1)로 취급합니다.
    값이 이미 올바르면 같은 객체를 그대로 반환합니다.
    """
    confidence = prediction.confidence
    confidence = max(0.0, min(1.0, confidence)) if math.isfinite(confidence) else 0.0
    priority = max(1, prediction.priority)
    if confidence == prediction.confidence and priority == prediction.priority:
        return prediction

    logger.debug(
        f"Clamped prediction '{prediction.action}': "
        f"confidence {prediction.confidence} -> {confidence}, priority {prediction.priority} -> {priority}"
    )
    return replace(prediction, confidence=confidence, priority=priority)


def surviving_predictions(
    predictions: Iterable[ActionPrediction],
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
) -> List[ActionPrediction]:
    """
    임계값을 통과한 예측을 순위대로 반환하는 함수

    정렬 기준: 우선순위 오름차순 -> 신뢰도 내림차순 -> 행동 라벨 (전순서 보장)
    """
    normalized = [normalize_prediction(prediction) for prediction in predictions]
    kept = [prediction for prediction in normalized if prediction.confidence >= min_confidence]
    return sorted(kept, key=_rank_key)


def _rank_key(prediction: ActionPrediction):
    return (prediction.priority, -prediction.confidence, prediction.action)


def focus_level(predictions: Sequence[ActionPrediction]) -> float:
    """
    예측 집합이 얼마나 집중되어 있는지 나타내는 집중도를 계산하는 함수

    평균 신뢰도에 예측 개수에 따른 감쇠를 곱합니다:
        focus = mean(confidence) / (1 + ln(count))

    적고 확실한 예측일수록 높고, 많고 약한 예측일수록 낮아집니다.
    단일 예측의 집중도는 그 신뢰도와 같습니다.

    감쇠 항으로 1 + ln(1 + count)가 아닌 1 + ln(count)를 의도적으로 사용합니다.
    1 + ln(1 + count)이면 확신도 1.0인 단일 예측도 약 0.59에 그쳐
    높은 집중도 구간(0.8 이상)에 도달할 수 없습니다.

    Args:
        predictions: 임계값을 통과한 예측 목록

    Returns:
        0.0-1.0 범위의 집중도 (예측이 없으면 0.0)
    """
    count = len(predictions)
    if count == 0:
        return 0.0

    mean_confidence = sum(prediction.confidence for prediction in predictions) / count
    # 예측 개수가 늘어날수록 분산되어 집중도 감소
    diversity_penalty = 1.0 / (1.0 + math.log(count))
    return max(0.0, min(1.0, mean_confidence * diversity_penalty))


def classify(
    predictions: Sequence[ActionPrediction],
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    max_actions: int = DEFAULT_MAX_ACTIONS,
    widgets: Sequence[WidgetSpec] = (),
) -> PredictionClassification:
    """
    예측을 주요/보조 행동으로 분류하고 집중도와 위젯 표시 여부를 계산하는 함수

    Args:
        predictions: 예측 소스가 전달한 행동 예측 목록
        min_confidence: 최소 신뢰도 (미만은 제외)
        max_actions: 주요 + 보조 행동의 최대 개수 (초과분은 하위 순위부터 조용히 제거)
        widgets: 표시 여부를 판단할 위젯 목록

    Returns:
        주요 행동, 보조 행동, 표시할 위젯 ID, 집중도를 담은 분류 결과
    """
    ranked = surviving_predictions(predictions, min_confidence)
    focus = focus_level(ranked)

    # 최대 개수 제한 (하위 순위부터 제거)
    capped = ranked[: max(0, max_actions)]

    primary: Tuple[ActionPrediction, ...] = ()
    secondary: Tuple[ActionPrediction, ...] = ()
    if capped:
        # 남은 예측 중 가장 높은 우선순위 계층이 주요 행동
        top_priority = capped[0].priority
        primary = tuple(prediction for prediction in capped if prediction.priority == top_priority)
        secondary = tuple(prediction for prediction in capped if prediction.priority != top_priority)

    visible_widget_ids = tuple(
        spec.widget_type for spec in widgets if is_widget_visible(spec, focus)
    )

    logger.debug(
        f"Classified {len(predictions)} predictions: {len(primary)} primary, "
        f"{len(secondary)} secondary, {len(ranked) - len(capped)} dropped, focus={focus:.3f}"
    )

    return PredictionClassification(
        primary=primary,
        secondary=secondary,
        visible_widget_ids=visible_widget_ids,
        focus_level=focus,
    )
