"""
UI 구성 생성기 모듈: 루틴, 행동 예측, 앱 목록을 하나의 UI 구성으로 결합하는 모듈

이 모듈은 다음 구성 요소들을 조합합니다:
- 테마 테이블 / 색상 파생: 루틴별 테마와 팔레트
- 예측 분류기: 주요/보조 행동, 집중도, 위젯 표시 여부
- 레이아웃 선택기: 열 수, 간격, 전환 시간
- 앱 그리드 구성기: 앱 배치 순서와 카테고리 묶음

모든 호출은 인자만으로 결과가 결정되는 순수 함수이며 공유 상태가 없어
여러 호출자가 동시에 사용해도 안전합니다.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .app_grid import compose_grid
from .cards import build_action_card
from .classifier import classify
from .colors import derive_palette
from .config import GeneratorSettings
from .data_models import (
    ActionPrediction,
    AppDescriptor,
    Palette,
    RoutineType,
    ThemeDescriptor,
    UIConfiguration,
)
from .layout import layout_for
from .themes import routine_for_theme, theme_for
from .widgets import build_widgets, widget_roster

logger = logging.getLogger(__name__)


class UIConfigurationGenerator:
    """
    UI 구성 생성기 클래스

    설정(최소 신뢰도, 최대 행동 수, 다크 모드 등)만 보관하며,
    생성 결과는 매 호출마다 새로 만들어지는 불변 객체입니다.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self.settings = settings or GeneratorSettings()

    def generate(
        self,
        predictions: Sequence[ActionPrediction],
        routine_type: RoutineType,
        apps: Sequence[AppDescriptor],
    ) -> UIConfiguration:
        """
        예측과 루틴으로 새 UI 구성을 만드는 함수

        Args:
            predictions: 순위가 매겨진 행동 예측 (비어 있어도 됨)
            routine_type: 현재 루틴
            apps: 사용 가능한 앱 목록 (비어 있어도 됨)

        Returns:
            새로 생성된 UI 구성
        """
        routine_type = RoutineType(routine_type)
        theme = theme_for(routine_type)
        palette = derive_palette(theme, dark_mode=self.settings.dark_mode)
        return self._compose(theme, palette, predictions, routine_type, apps)

    def update(
        self,
        current: UIConfiguration,
        new_predictions: Sequence[ActionPrediction],
        routine_type: RoutineType,
        apps: Sequence[AppDescriptor],
    ) -> UIConfiguration:
        """
        새 예측이 도착했을 때 UI 구성을 갱신하는 함수

        루틴이 그대로면 기존 테마 인스턴스를 유지하여 빠른 예측 갱신 중에도
        화면 색이 깜빡이지 않게 하고, 예측에 의존하는 부분(레이아웃, 행동,
        위젯, 앱 그리드)만 다시 계산합니다. 루틴이 바뀌었으면 새로 생성합니다.

        Args:
            current: 현재 화면에 적용된 UI 구성
            new_predictions: 새로 도착한 예측
            routine_type: 현재 루틴
            apps: 사용 가능한 앱 목록

        Returns:
            갱신된 새 UI 구성 (current는 변경되지 않음)
        """
        routine_type = RoutineType(routine_type)
        if routine_for_theme(current.theme) is not routine_type:
            logger.debug(
                f"Routine changed from theme '{current.theme.name}' to {routine_type.value}; regenerating"
            )
            return self.generate(new_predictions, routine_type, apps)

        palette = current.palette
        if palette.dark_mode != self.settings.dark_mode:
            palette = derive_palette(current.theme, dark_mode=self.settings.dark_mode)

        logger.debug(f"Incremental update for {routine_type.value}, keeping theme '{current.theme.name}'")
        return self._compose(current.theme, palette, new_predictions, routine_type, apps)

    def _compose(
        self,
        theme: ThemeDescriptor,
        palette: Palette,
        predictions: Sequence[ActionPrediction],
        routine_type: RoutineType,
        apps: Sequence[AppDescriptor],
    ) -> UIConfiguration:
        settings = self.settings

        # 1. 예측 분류 (주요/보조 행동, 집중도, 위젯 표시 여부)
        classification = classify(
            predictions,
            min_confidence=settings.min_confidence,
            max_actions=settings.max_actions,
            widgets=widget_roster(routine_type),
        )

        # 2. 집중도 기반 레이아웃
        layout = layout_for(routine_type, classification.focus_level)

        # 3. 행동 카드 변환
        primary_actions = tuple(
            build_action_card(prediction, routine_type, settings.max_quick_actions)
            for prediction in classification.primary
        )
        secondary_actions = tuple(
            build_action_card(prediction, routine_type, settings.max_quick_actions)
            for prediction in classification.secondary
        )

        # 4. 앱 그리드 (화면에 표시되는 행동의 앱만 고정)
        app_grid = compose_grid(
            apps,
            classification.primary + classification.secondary,
            routine_type,
            settings.min_confidence,
        )

        configuration = UIConfiguration(
            routine_type=routine_type,
            theme=theme,
            palette=palette,
            layout=layout,
            focus_level=classification.focus_level,
            primary_actions=primary_actions,
            secondary_actions=secondary_actions,
            widgets=build_widgets(routine_type, classification.visible_widget_ids),
            app_grid=app_grid,
        )

        logger.debug(
            f"Generated {routine_type.value} configuration: theme='{theme.name}', "
            f"columns={layout.grid_columns}, focus={classification.focus_level:.3f}, "
            f"actions={len(primary_actions)}+{len(secondary_actions)}, apps={len(app_grid.ordered_apps)}"
        )
        return configuration


_DEFAULT_GENERATOR = UIConfigurationGenerator()


def generate(
    predictions: Sequence[ActionPrediction],
    routine_type: RoutineType,
    apps: Sequence[AppDescriptor],
) -> UIConfiguration:
    """기본 설정으로 UI 구성을 생성"""
    return _DEFAULT_GENERATOR.generate(predictions, routine_type, apps)


def update(
    current: UIConfiguration,
    new_predictions: Sequence[ActionPrediction],
    routine_type: RoutineType,
    apps: Sequence[AppDescriptor],
) -> UIConfiguration:
    """기본 설정으로 UI 구성을 갱신"""
    return _DEFAULT_GENERATOR.update(current, new_predictions, routine_type, apps)
