"""OpenAI API-based insight writer"""

import logging
import os
import re
from typing import Any, Dict, List, Optional

from .data_models import UIConfiguration
from .insights import InsightGenerator
from .layout import focus_bucket

logger = logging.getLogger(__name__)

# 인사이트 한 줄 생성용 프롬프트
OPENAI_PROMPT = """You are the assistant of a routine-aware phone launcher.
Given the current routine and the actions the launcher is about to surface, write ONE short, friendly sentence (max 20 words) that tells the user why this screen fits the moment.

Context:
{context}

Actions:
{actions}

Return ONLY the sentence, without quotes or any additional text.

Sentence:"""

MAX_INSIGHT_LENGTH = 160


class OpenAIInsightWriter:
    """
    OpenAI API를 사용한 인사이트 문구 생성기

    템플릿 문구 대신 GPT API로 더 자연스러운 한 줄 설명을 생성하며,
    API 호출이 실패하면 템플릿 문구로 대체합니다.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 60,
        fallback: Optional[InsightGenerator] = None,
        client: Any = None,
    ) -> None:
        """
        OpenAI Insight Writer 초기화

        Args:
            api_key: OpenAI API 키 (None이면 환경변수 OPENAI_API_KEY 사용)
            model: 사용할 OpenAI 모델
            temperature: 생성 온도 (낮을수록 일관적)
            max_tokens: 최대 토큰 수
            fallback: API 실패 시 사용할 템플릿 생성기
            client: 미리 만든 OpenAI 호환 클라이언트 (주로 테스트용)
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.fallback = fallback or InsightGenerator()

        if client is not None:
            self.client = client
            return

        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not self.api_key:
            raise ValueError(
                "OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter."
            )

        # OpenAI 클라이언트 초기화
        try:
            from openai import OpenAI
            self.client = OpenAI(api_key=self.api_key)
        except ImportError as exc:
            raise RuntimeError(
                "openai package is required. Install it with `pip install openai`."
            ) from exc

    def write(self, configuration: UIConfiguration) -> str:
        """
        UI 구성에 대한 인사이트 문구 생성

        Args:
            configuration: 생성기가 만든 UI 구성

        Returns:
            한 줄 인사이트 (실패 시 템플릿 문구)
        """
        # 표시할 행동이 없으면 API를 호출하지 않음
        if not configuration.primary_actions and not configuration.secondary_actions:
            return self.fallback.build_message(configuration)

        prompt = self._build_prompt(configuration)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You are a helpful assistant that answers with a single sentence."},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            raw_text = (response.choices[0].message.content or "").strip()
            logger.info(f"OpenAI response: {raw_text}")
        except Exception as exc:
            logger.error(f"OpenAI API call failed: {exc}")
            return self.fallback.build_message(configuration)

        sentence = self._clean_sentence(raw_text)
        if not sentence:
            logger.warning(f"Empty insight from OpenAI response: {raw_text!r}")
            return self.fallback.build_message(configuration)
        return sentence

    def _build_prompt(self, configuration: UIConfiguration) -> str:
        """프롬프트 구성"""
        context_lines = [
            f"- routine: {configuration.routine_type.value}",
            f"- theme: {configuration.theme.name}",
            f"- focus: {focus_bucket(configuration.focus_level)} ({configuration.focus_level:.2f})",
        ]

        action_lines: List[str] = []
        for tier, cards in (("primary", configuration.primary_actions), ("secondary", configuration.secondary_actions)):
            for card in cards:
                apps = ", ".join(app.display_name for app in card.apps)
                action_lines.append(
                    f"- [{tier}] {card.action} | confidence={card.confidence:.2f}"
                    + (f" | apps={apps}" if apps else "")
                    + (f" | why={card.rationale}" if card.rationale else "")
                )

        return OPENAI_PROMPT.format(
            context="\n".join(context_lines),
            actions="\n".join(action_lines),
        )

    @staticmethod
    def _clean_sentence(generated_text: str) -> str:
        """응답에서 첫 줄만 남기고 따옴표/코드 블록 제거"""
        text = re.sub(r"```\w*", "", generated_text).strip()
        first_line = next((line.strip() for line in text.splitlines() if line.strip()), "")
        first_line = first_line.strip("\"'“”")
        return first_line[:MAX_INSIGHT_LENGTH]

    def context_summary(self, configuration: UIConfiguration) -> Dict[str, Any]:
        """디버그 표시용 컨텍스트 요약"""
        return {
            "routine": configuration.routine_type.value,
            "theme": configuration.theme.name,
            "focus_level": round(configuration.focus_level, 3),
            "primary": [card.action for card in configuration.primary_actions],
            "secondary": [card.action for card in configuration.secondary_actions],
        }
