"""UI 생성기 설정: 코드에 기본값을 두고 환경 변수로만 덮어쓰는 설정 객체"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from .classifier import DEFAULT_MAX_ACTIONS, DEFAULT_MIN_CONFIDENCE

T = TypeVar("T")

ENV_PREFIX = "ROUTINE_UI_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


@dataclass(frozen=True)
class GeneratorSettings:
    """
    UI 생성기 동작 파라미터

    Attributes:
        min_confidence: 예측 최소 신뢰도 (0.0-1.0)
        max_actions: 주요 + 보조 행동 최대 개수
        max_quick_actions: 카드당 빠른 실행 버튼 최대 개수
        dark_mode: 다크 모드 팔레트 사용 여부
    """
    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    max_actions: int = DEFAULT_MAX_ACTIONS
    max_quick_actions: int = 2
    dark_mode: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be within [0, 1], got {self.min_confidence}")
        if self.max_actions < 1:
            raise ValueError(f"max_actions must be at least 1, got {self.max_actions}")
        if self.max_quick_actions < 0:
            raise ValueError(f"max_quick_actions must not be negative, got {self.max_quick_actions}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorSettings":
        """
        ROUTINE_UI_* 환경 변수로 기본값을 덮어쓴 설정을 만드는 함수

        Args:
            environ: 조회할 환경 변수 매핑 (None이면 os.environ)

        Returns:
            환경 변수가 반영된 설정

        Raises:
            ValueError: 값을 해석할 수 없을 때 (변수 이름 포함)
        """
        environ = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str, parse: Callable[[str], T], default: T) -> T:
            key = f"{ENV_PREFIX}{name}"
            raw = environ.get(key)
            if raw is None:
                return default
            try:
                return parse(raw)
            except ValueError as exc:
                raise ValueError(f"Invalid value for {key}: {raw!r}") from exc

        return cls(
            min_confidence=read("MIN_CONFIDENCE", float, defaults.min_confidence),
            max_actions=read("MAX_ACTIONS", int, defaults.max_actions),
            max_quick_actions=read("MAX_QUICK_ACTIONS", int, defaults.max_quick_actions),
            dark_mode=read("DARK_MODE", _parse_bool, defaults.dark_mode),
        )
