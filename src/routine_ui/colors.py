"""
색상 파생 모듈: 테마의 색상/채도/명도(HSV) 값에서 RGB 팔레트를 계산하는 모듈

하나의 기본 색상(hue)에서 다음 세 가지 색을 만듭니다:
- primary: 기본 색상 그대로
- secondary: 색상 +60도, 채도 x0.8
- tertiary: 색상 +120도, 채도 x0.6

다크 모드에서는 명도에 추가 감쇠 배율을 곱하지만, 변환 함수 자체는
모드를 알지 못하고 배율을 인자로만 받습니다.
"""
from __future__ import annotations

import math
from typing import Tuple

from .data_models import Palette, RGBColor, ThemeDescriptor

# 보조 색상들의 색상 회전 각도 (secondary, tertiary)
SECONDARY_HUE_OFFSET = 60.0
TERTIARY_HUE_OFFSET = 120.0

# 채도 배율 (primary, secondary, tertiary)
SATURATION_SCALES = (1.0, 0.8, 0.6)

# 명도 배율: 라이트 모드 / 다크 모드 (primary, secondary, tertiary)
LIGHT_BRIGHTNESS_SCALES = (1.0, 0.9, 0.8)
DARK_BRIGHTNESS_SCALES = (0.8, 0.7, 0.6)

# 컨테이너 색상 투명도
LIGHT_CONTAINER_ALPHA = 0.1
DARK_CONTAINER_ALPHA = 0.2

# 모드별 고정 표면 색상 (surface, background, on_surface)
LIGHT_SURFACES = ("#FFFBFE", "#FFFFFF", "#1C1B1F")
DARK_SURFACES = ("#121212", "#0A0A0A", "#E0E0E0")


def _clamp_unit(value: float) -> float:
    # NaN/inf 입력은 0으로 취급
    if not math.isfinite(value):
        return 0.0
    return max(0.0, min(1.0, value))


def alternate_hue(base_hue: float, offset_degrees: float) -> float:
    """기본 색상을 offset만큼 회전한 색상 반환 ((base + offset) mod 360)"""
    return (base_hue + offset_degrees) % 360.0


def derive_color(hue: float, saturation: float, value: float, darken: float = 1.0) -> RGBColor:
    """
    HSV 값을 RGB 색상으로 변환하는 함수

    표준 HSV -> RGB 변환을 수행합니다. 색상은 360도로 정규화하고,
    채도와 명도(감쇠 배율 적용 후)는 0.0-1.0 범위로 제한합니다.
    색상 경계에서의 부동소수점 오차가 범위를 벗어나지 않도록
    결과 채널도 다시 제한합니다.

    Args:
        hue: 색상 (도 단위, 범위 밖의 값은 360으로 나눈 나머지 사용)
        saturation: 채도 (0.0-1.0)
        value: 명도 (0.0-1.0)
        darken: 명도에 곱할 감쇠 배율 (다크 모드용, 기본 1.0)

    Returns:
        각 채널이 0.0-1.0 범위인 RGB 색상
    """
    if not math.isfinite(hue):
        hue = 0.0
    hue = hue % 360.0
    saturation = _clamp_unit(saturation)
    value = _clamp_unit(value * darken)

    # 채도와 명도로 색의 강도(chroma) 계산
    chroma = value * saturation
    sector = hue / 60.0
    x = chroma * (1.0 - abs(sector % 2.0 - 1.0))
    m = value - chroma

    # 60도 단위 구간별로 RGB 성분 배치
    index = int(sector) % 6
    if index == 0:
        r, g, b = chroma, x, 0.0
    elif index == 1:
        r, g, b = x, chroma, 0.0
    elif index == 2:
        r, g, b = 0.0, chroma, x
    elif index == 3:
        r, g, b = 0.0, x, chroma
    elif index == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return RGBColor(
        red=_clamp_unit(r + m),
        green=_clamp_unit(g + m),
        blue=_clamp_unit(b + m),
    )


def _hex_to_rgb(hex_value: str) -> RGBColor:
    digits = hex_value.lstrip("#")
    red, green, blue = (int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    return RGBColor(red=red, green=green, blue=blue)


def derive_palette(theme: ThemeDescriptor, dark_mode: bool = False) -> Palette:
    """
    테마에서 primary/secondary/tertiary 팔레트를 만드는 함수

    Args:
        theme: 루틴별 기본 테마
        dark_mode: 다크 모드 렌더링 여부 (명도 감쇠 배율 선택)

    Returns:
        렌더링 계층에 전달할 목표 색상 팔레트
    """
    brightness_scales: Tuple[float, ...] = (
        DARK_BRIGHTNESS_SCALES if dark_mode else LIGHT_BRIGHTNESS_SCALES
    )
    hues = (
        theme.primary_hue,
        alternate_hue(theme.primary_hue, SECONDARY_HUE_OFFSET),
        alternate_hue(theme.primary_hue, TERTIARY_HUE_OFFSET),
    )

    primary, secondary, tertiary = (
        derive_color(hue, theme.saturation * saturation_scale, theme.brightness, darken=brightness_scale)
        for hue, saturation_scale, brightness_scale in zip(hues, SATURATION_SCALES, brightness_scales)
    )

    surface, background, on_surface = (
        _hex_to_rgb(value) for value in (DARK_SURFACES if dark_mode else LIGHT_SURFACES)
    )

    return Palette(
        primary=primary,
        secondary=secondary,
        tertiary=tertiary,
        container_alpha=DARK_CONTAINER_ALPHA if dark_mode else LIGHT_CONTAINER_ALPHA,
        surface=surface,
        background=background,
        on_surface=on_surface,
        dark_mode=dark_mode,
    )
