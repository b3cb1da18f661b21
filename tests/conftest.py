"""Shared pytest fixtures for all tests."""
from typing import Any, Dict

import pytest


def make_activity_config(**overrides: Any) -> Dict[str, Any]:
    """Build a groupifier.ActivityConfig payload with every required key.

    Callers override specific keys as needed, using wire (camelCase) names.
    """
    defaults: Dict[str, Any] = {
        "capacity": 1,
        "groups": 3,
        "scramblers": 2,
        "runners": 1,
        "assignJudges": True,
    }
    defaults.update(overrides)
    return defaults


def make_competition_config(**overrides: Any) -> Dict[str, Any]:
    """Build a groupifier.CompetitionConfig payload with every required key."""
    defaults: Dict[str, Any] = {
        "localNamesFirst": False,
        "scorecardsBackgroundUrl": "",
        "competitorsSortingRule": "ranks",
        "noTasksForNewcomers": True,
        "tasksForOwnEventsOnly": False,
    }
    defaults.update(overrides)
    return defaults


@pytest.fixture
def activity_config_payload() -> Dict[str, Any]:
    return make_activity_config()


@pytest.fixture
def competition_config_payload() -> Dict[str, Any]:
    return make_competition_config()


@pytest.fixture
def room_configuration_payload() -> Dict[str, Any]:
    return {"color": "#304a96", "stageDisplayOrder": ["Blue", "Red"]}
