"""인사이트 문구 모듈: 생성된 UI 구성을 한 줄 설명으로 요약 (템플릿 기반)"""
from __future__ import annotations

from typing import List

from .data_models import UIConfiguration
from .layout import focus_bucket
from .themes import contextual_title

# 집중도 구간별 설명 문구
FOCUS_REASON_LABELS = {
    "high": "your next step looks clear",
    "medium": "a few good options stand out",
    "low": "there are many directions to explore",
}

# 예측이 없을 때의 기본 문구
DEFAULT_INSIGHT = "Nothing predicted yet, so everything is within reach"

# 설명 템플릿
INSIGHT_TEMPLATE = "{title} {action}. {reasons}."


class InsightGenerator:
    """
    인사이트 문구 생성기 클래스 (템플릿 기반)

    루틴별 제목, 첫 번째 주요 행동, 집중도 구간을 조합합니다.
    """

    def build_message(self, configuration: UIConfiguration) -> str:
        """
        UI 구성에 대한 인사이트 문구 생성

        Args:
            configuration: 생성기가 만든 UI 구성

        Returns:
            사용자 친화적인 한 줄 설명
        """
        if not configuration.primary_actions:
            return f"{DEFAULT_INSIGHT}."

        top = configuration.primary_actions[0]
        reasons: List[str] = [FOCUS_REASON_LABELS[focus_bucket(configuration.focus_level)]]
        if top.rationale:
            reasons.append(top.rationale[0].lower() + top.rationale[1:])

        reason_sentence = "; ".join(reasons)
        return INSIGHT_TEMPLATE.format(
            title=contextual_title(configuration.routine_type),
            action=top.action.lower(),
            reasons=reason_sentence[0].upper() + reason_sentence[1:],
        )
