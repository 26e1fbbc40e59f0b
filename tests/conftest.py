"""Shared pytest fixtures for routine_ui tests."""

from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace
from typing import Any, List

import pytest

from routine_ui.data_models import ActionPrediction, AppDescriptor


@pytest.fixture
def sample_apps() -> List[AppDescriptor]:
    return [
        AppDescriptor("com.headspace.android", "Headspace", category="Health", usage_count=56),
        AppDescriptor("com.slack", "Slack", category="Work", usage_count=145),
        AppDescriptor("com.netflix.mediaclient", "Netflix", category="Entertainment", usage_count=189),
        AppDescriptor("com.spotify.music", "Spotify", category="Music", usage_count=267),
    ]


@pytest.fixture
def morning_predictions(sample_apps: List[AppDescriptor]) -> List[ActionPrediction]:
    return [
        ActionPrediction(
            action="Start meditation session",
            confidence=0.89,
            associated_apps=(sample_apps[0],),
            rationale="User typically starts morning with mindfulness",
            priority=1,
        ),
        ActionPrediction(
            action="Check work messages",
            confidence=0.75,
            associated_apps=(sample_apps[1],),
            rationale="Morning communication check pattern",
            priority=2,
        ),
    ]


@pytest.fixture
def reference_time() -> datetime:
    # Thursday
    return datetime(2025, 9, 25, 7, 30)


class FakeCompletions:
    """Records chat completion calls and replays a canned answer or error."""

    def __init__(self, content: Any = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: List[dict] = []

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_fake_client(content: Any = None, error: Exception | None = None) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(content, error)))


@pytest.fixture
def fake_client_factory():
    return make_fake_client
