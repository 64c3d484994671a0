"""Shared fixtures for the workout planner tests."""

from dataclasses import replace

import pytest

from workout_logic import Exercise, Preferences


@pytest.fixture
def base_prefs() -> Preferences:
    """Intermediate strength/full-body request with no filtering."""
    return Preferences(
        gender="female",
        age="30",
        weight="65",
        duration=30,
        equipment=("all",),
        muscle_groups=("all",),
        goal="strength",
        workout_type="full-body",
        difficulty="intermediate",
    )


@pytest.fixture
def make_prefs(base_prefs):
    """Build Preferences from the base request with some fields overridden."""
    def _make(**overrides) -> Preferences:
        return replace(base_prefs, **overrides)
    return _make


@pytest.fixture
def large_bucket() -> tuple:
    """Ten untagged exercises, enough to hit every difficulty cap."""
    return tuple(
        Exercise(f"Exercise {i}", sets=3, reps="10-12", rest="1 min")
        for i in range(10)
    )


@pytest.fixture
def core_catalog() -> dict:
    """Strength/full-body bucket with two Core bodyweight moves among others."""
    return {
        "strength": {
            "full-body": (
                Exercise("Barbell Squat", sets=4, reps="6-8", equipment=("Barbells",),
                         muscle_group="Lower Body Push"),
                Exercise("Dead Bug", sets=3, reps="10-12", equipment=("Bodyweight",),
                         muscle_group="Core", instructions="Press the low back into the floor."),
                Exercise("Dumbbell Press", sets=3, reps="8-10", equipment=("dumbbells",),
                         muscle_group="Upper Body Push"),
                Exercise("Hollow Hold", sets=3, duration="30 sec", equipment=("bodyweight",),
                         muscle_group="Core"),
                Exercise("Pull-ups", sets=3, reps="5-8", equipment=("bodyweight",),
                         muscle_group="Upper Body Pull"),
            ),
        },
    }
