"""
데이터 모델 정의 모듈: 루틴 기반 런처 UI 구성에 사용되는 핵심 데이터 구조들

이 모듈은 다음 데이터 클래스들을 정의합니다:
- RoutineType: 시간대/상황별 루틴 종류
- AppDescriptor: 설치된 앱 정보와 사용 통계
- ActionPrediction: 외부에서 전달되는 순위가 매겨진 행동 예측
- ThemeDescriptor / Palette: 루틴별 테마 파라미터와 파생 색상
- LayoutDescriptor / WidgetDescriptor / AppGridDescriptor: 화면 구성 요소
- UIConfiguration: 위 요소들을 묶은 최종 UI 구성

모든 객체는 frozen=True로 불변이며, 목록 필드는 튜플로 보관합니다.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class RoutineType(str, Enum):
    """시간대/상황 루틴 종류 (닫힌 집합)"""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    WEEKEND = "weekend"
    CUSTOM = "custom"


class WidgetType(str, Enum):
    TIME = "time"
    WELLNESS = "wellness"
    PRODUCTIVITY = "productivity"
    SCHEDULE = "schedule"
    NOTIFICATIONS = "notifications"


class QuickActionType(str, Enum):
    LAUNCH_APP = "launch_app"
    START_TIMER = "start_timer"
    QUICK_JOIN = "quick_join"
    RESUME_CONTENT = "resume_content"
    START_ACTIVITY = "start_activity"


@dataclass(frozen=True)
class AppDescriptor:
    """
    설치된 앱 하나를 나타내는 데이터 클래스

    앱 사용 통계는 외부(플랫폼 사용 통계 API 등)에서 채워지며,
    UI 생성기는 이 객체를 절대 수정하지 않습니다.
    """
    package_name: str                   # 고유 식별자 (예: "com.spotify.music")
    display_name: str                   # 화면에 표시되는 이름
    category: Optional[str] = None      # 앱 카테고리 (예: "Music", "Work")
    usage_count: int = 0                # 누적 실행 횟수
    last_used: Optional[datetime] = None  # 마지막 실행 시각


@dataclass(frozen=True)
class ActionPrediction:
    """
    예측 소스가 전달하는 다음 행동 후보

    priority는 낮을수록 중요하며, 동일 priority는 confidence 내림차순으로 정렬됩니다.
    """
    action: str                                          # 행동 라벨 (예: "Start meditation session")
    confidence: float                                    # 예측 신뢰도 (0.0 ~ 1.0)
    associated_apps: Tuple[AppDescriptor, ...] = ()      # 행동과 연관된 앱 목록 (순서 유지)
    rationale: str = ""                                  # 예측 근거 (불투명 문자열)
    priority: int = 1                                    # 우선순위 (1이 가장 높음)


@dataclass(frozen=True)
class ThemeDescriptor:
    """루틴별 기본 테마 파라미터 (색공간 변환 이전 값)"""
    name: str             # 테마 이름 (예: "Morning Fresh")
    primary_hue: float    # 기본 색상 (0 ~ 360도)
    saturation: float     # 채도 (0.0 ~ 1.0)
    brightness: float     # 명도 (0.0 ~ 1.0)
    elevation: float      # 카드 그림자 높이 (dp)
    corner_radius: float  # 모서리 둥글기 (dp)


@dataclass(frozen=True)
class RGBColor:
    red: float
    green: float
    blue: float

    def to_hex(self) -> str:
        """0.0-1.0 채널 값을 #RRGGBB 문자열로 변환"""
        return "#{:02X}{:02X}{:02X}".format(
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
        )


@dataclass(frozen=True)
class Palette:
    """
    테마의 기본 색상에서 파생된 색상 팔레트

    렌더링 계층이 그대로 사용할 수 있는 목표 색상 값만 담고 있으며,
    색상 전환 애니메이션은 렌더링 계층의 책임입니다.
    """
    primary: RGBColor
    secondary: RGBColor
    tertiary: RGBColor
    container_alpha: float  # primary/secondary/tertiary 컨테이너 투명도
    surface: RGBColor
    background: RGBColor
    on_surface: RGBColor
    dark_mode: bool = False


@dataclass(frozen=True)
class LayoutDescriptor:
    grid_columns: int                # 앱 그리드 열 수
    adaptive_spacing: float          # 요소 간 간격 (dp)
    transition_duration_ms: int      # 화면 전환 시간 (밀리초)


@dataclass(frozen=True)
class WidgetDescriptor:
    """
    위젯 하나의 표시 상태

    is_visible은 생성할 때마다 새로 계산되며, 기존 객체를 토글하지 않습니다.
    """
    identifier: WidgetType
    is_visible: bool
    priority: int = 1
    title: str = ""


@dataclass(frozen=True)
class QuickAction:
    label: str              # 버튼 라벨 (예: "Open Headspace")
    action: QuickActionType # 실행할 동작 종류
    data: str               # 동작 인자 (패키지 이름, 타이머 초 등)


@dataclass(frozen=True)
class ActionCard:
    """
    화면에 표시되는 행동 카드

    원본 예측 정보에 루틴별 빠른 실행 버튼과 시각적 우선순위를 덧붙입니다.
    """
    action: str
    apps: Tuple[AppDescriptor, ...]
    confidence: float
    priority: int
    quick_actions: Tuple[QuickAction, ...]
    visual_priority: int  # 1 ~ 10, 높을수록 강조
    rationale: str


@dataclass(frozen=True)
class AppGridDescriptor:
    ordered_apps: Tuple[AppDescriptor, ...]
    group_by_category: bool
    # 예측에 등장한 앱 패키지 이름 (강조 표시용)
    highlighted_packages: Tuple[str, ...] = ()
    # 카테고리별 묶음 (group_by_category가 True일 때만 채워짐)
    category_groups: Tuple[Tuple[str, Tuple[AppDescriptor, ...]], ...] = ()


@dataclass(frozen=True)
class UIConfiguration:
    """
    UI 생성기의 최종 결과물

    생성기가 호출될 때마다 새로 만들어지며 생성 이후 절대 수정되지 않습니다.
    업데이트는 항상 새 인스턴스를 반환합니다.
    """
    routine_type: RoutineType
    theme: ThemeDescriptor
    palette: Palette
    layout: LayoutDescriptor
    focus_level: float
    primary_actions: Tuple[ActionCard, ...] = ()
    secondary_actions: Tuple[ActionCard, ...] = ()
    widgets: Tuple[WidgetDescriptor, ...] = ()
    app_grid: AppGridDescriptor = field(
        default_factory=lambda: AppGridDescriptor(ordered_apps=(), group_by_category=False)
    )

    @property
    def visible_widgets(self) -> Tuple[WidgetDescriptor, ...]:
        return tuple(widget for widget in self.widgets if widget.is_visible)
