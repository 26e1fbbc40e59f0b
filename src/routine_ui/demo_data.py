from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List

from .data_models import ActionPrediction, AppDescriptor, RoutineType
from .usage import LaunchEvent

BASE_TIME = datetime(2025, 9, 25, 7, 30)


def _app(package_name: str, name: str, category: str, usage: int, hours_ago: float) -> AppDescriptor:
    return AppDescriptor(
        package_name=package_name,
        display_name=name,
        category=category,
        usage_count=usage,
        last_used=BASE_TIME - timedelta(hours=hours_ago),
    )


def create_sample_apps() -> List[AppDescriptor]:
    return [
        # Productivity & Work
        _app("com.slack", "Slack", "Work", 145, 1),
        _app("com.microsoft.teams", "Teams", "Work", 89, 2),
        _app("com.google.android.gm", "Gmail", "Email", 234, 0.5),
        _app("com.todoist", "Todoist", "Productivity", 67, 1.5),
        _app("com.google.android.calendar", "Calendar", "Productivity", 78, 3),
        _app("com.notion.id", "Notion", "Productivity", 45, 4),
        # Health & Wellness
        _app("com.headspace.android", "Headspace", "Health", 56, 6),
        _app("com.calm", "Calm", "Health", 34, 7),
        _app("com.strava", "Strava", "Fitness", 89, 8),
        _app("com.nike.ntc", "Nike Training", "Fitness", 45, 10),
        # Communication & Social
        _app("com.whatsapp", "WhatsApp", "Communication", 345, 0.25),
        _app("com.instagram.android", "Instagram", "Social", 234, 1),
        _app("com.discord", "Discord", "Communication", 67, 4),
        # Entertainment & Media
        _app("com.netflix.mediaclient", "Netflix", "Entertainment", 189, 5),
        _app("com.spotify.music", "Spotify", "Music", 267, 0.5),
        _app("com.youtube.android", "YouTube", "Entertainment", 345, 1.5),
        _app("com.amazon.kindle", "Kindle", "Reading", 89, 6),
        # Utilities
        _app("com.android.chrome", "Chrome", "Browser", 456, 0.5),
        _app("com.weather.Weather", "Weather", "Utilities", 234, 3),
    ]


def create_sample_predictions(routine_type: RoutineType) -> List[ActionPrediction]:
    apps: Dict[str, AppDescriptor] = {app.package_name: app for app in create_sample_apps()}

    def pick(*packages: str):
        return tuple(apps[package] for package in packages)

    if routine_type is RoutineType.MORNING:
        return [
            ActionPrediction(
                action="Start meditation session",
                confidence=0.89,
                associated_apps=pick("com.headspace.android", "com.calm"),
                rationale="User typically starts morning with mindfulness practice",
                priority=1,
            ),
            ActionPrediction(
                action="Check emails and messages",
                confidence=0.92,
                associated_apps=pick("com.google.android.gm", "com.slack", "com.whatsapp"),
                rationale="High probability of checking communications after meditation",
                priority=2,
            ),
            ActionPrediction(
                action="Plan the day",
                confidence=0.76,
                associated_apps=pick("com.google.android.calendar", "com.todoist", "com.notion.id"),
                rationale="User often reviews schedule and tasks in the morning",
                priority=3,
            ),
            ActionPrediction(
                action="Listen to music while getting ready",
                confidence=0.68,
                associated_apps=pick("com.spotify.music"),
                rationale="Background music is common during morning routine",
                priority=4,
            ),
        ]
    if routine_type is RoutineType.AFTERNOON:
        return [
            ActionPrediction(
                action="Join team meeting",
                confidence=0.94,
                associated_apps=pick("com.slack", "com.microsoft.teams"),
                rationale="Scheduled meeting time based on calendar patterns",
                priority=1,
            ),
            ActionPrediction(
                action="Work on project documentation",
                confidence=0.87,
                associated_apps=pick("com.notion.id", "com.google.android.gm"),
                rationale="Deep work session usually follows meetings",
                priority=2,
            ),
            ActionPrediction(
                action="Review task list",
                confidence=0.71,
                associated_apps=pick("com.todoist"),
                rationale="Afternoon check-in on open tasks",
                priority=3,
            ),
        ]
    if routine_type is RoutineType.EVENING:
        return [
            ActionPrediction(
                action="Watch entertainment content",
                confidence=0.85,
                associated_apps=pick("com.netflix.mediaclient", "com.youtube.android"),
                rationale="Relaxation time pattern",
                priority=1,
            ),
            ActionPrediction(
                action="Listen to music",
                confidence=0.72,
                associated_apps=pick("com.spotify.music"),
                rationale="Evening wind-down activity",
                priority=2,
            ),
            ActionPrediction(
                action="Catch up on social feeds",
                confidence=0.64,
                associated_apps=pick("com.instagram.android", "com.whatsapp"),
                rationale="Social check after dinner",
                priority=3,
            ),
            ActionPrediction(
                action="Read before bed",
                confidence=0.41,
                associated_apps=pick("com.amazon.kindle"),
                rationale="Occasional reading habit",
                priority=4,
            ),
        ]
    if routine_type is RoutineType.WEEKEND:
        return [
            ActionPrediction(
                action="Go for a fitness run",
                confidence=0.78,
                associated_apps=pick("com.strava", "com.nike.ntc"),
                rationale="Weekend mornings often include exercise",
                priority=1,
            ),
            ActionPrediction(
                action="Plan a social outing",
                confidence=0.66,
                associated_apps=pick("com.whatsapp", "com.instagram.android"),
                rationale="Friends are usually contacted on weekends",
                priority=2,
            ),
            ActionPrediction(
                action="Explore a hobby",
                confidence=0.58,
                associated_apps=pick("com.youtube.android"),
                rationale="Leisure browsing peaks on weekends",
                priority=2,
            ),
            ActionPrediction(
                action="Leisure reading",
                confidence=0.47,
                associated_apps=pick("com.amazon.kindle"),
                rationale="Relaxed reading in the afternoon",
                priority=3,
            ),
        ]
    return [
        ActionPrediction(
            action="Check the weather",
            confidence=0.65,
            associated_apps=pick("com.weather.Weather"),
            rationale="Frequently opened utility",
            priority=1,
        ),
    ]


def create_sample_launch_events() -> List[LaunchEvent]:
    events: List[LaunchEvent] = []
    # One week of morning launches
    for day in range(7):
        morning = BASE_TIME - timedelta(days=day)
        events.extend(
            [
                LaunchEvent("com.headspace.android", morning),
                LaunchEvent("com.google.android.gm", morning + timedelta(minutes=15)),
                LaunchEvent("com.spotify.music", morning + timedelta(minutes=30)),
            ]
        )
    return events
