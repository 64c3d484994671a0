"""
wizard.py — Step-by-step preference collection
Immutable wizard state plus one transition function per step. The Streamlit
app keeps only the current WizardState in session state.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from workout_logic import (
    ALL, EQUIPMENT_OPTIONS, MAX_DURATION, MIN_DURATION,
    Plan, Preferences, generate_plan, regenerate_from_feedback, wants_new_plan,
)

STEP_GENDER = 0
STEP_BASIC_INFO = 1
STEP_EQUIPMENT = 2
STEP_MUSCLE_GROUPS = 3
STEP_GOALS = 4
STEP_PLAN = 5
STEP_FEEDBACK = 6
STEP_THANKS = 7

STEP_TITLES = {
    STEP_GENDER: "Choose Your Gender",
    STEP_BASIC_INFO: "Your Information",
    STEP_EQUIPMENT: "Available Equipment",
    STEP_MUSCLE_GROUPS: "Target Muscle Groups",
    STEP_GOALS: "Workout Goals",
    STEP_PLAN: "Your Workout Plan",
    STEP_FEEDBACK: "How Was Your Plan?",
    STEP_THANKS: "Thank You!",
}

# Body part → muscle group, first match wins for shared parts
BODY_PART_GROUPS = {
    "Upper Body Push": ("chest", "frontShoulders"),
    "Upper Body Pull": ("upperBack", "lats"),
    "Lower Body Push": ("quads", "calves"),
    "Lower Body Pull": ("hamstrings", "glutes"),
    "Core": ("abs", "obliques", "lowerBack"),
    "Arms": ("biceps", "triceps", "forearms"),
    "Shoulders": ("frontShoulders", "rearShoulders"),
}


@dataclass(frozen=True)
class WizardState:
    step: int = STEP_GENDER
    preferences: Preferences = field(default_factory=Preferences)
    plan: Optional[Plan] = None
    errors: dict = field(default_factory=dict)


# ─────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────

def validate_step(step: int, prefs: Preferences) -> dict:
    """Field → message for everything missing on this step."""
    errors = {}
    if step == STEP_BASIC_INFO:
        if not str(prefs.age).strip():
            errors["age"] = "Age is required"
        if not str(prefs.weight).strip():
            errors["weight"] = "Weight is required"
    elif step == STEP_EQUIPMENT:
        if not prefs.equipment:
            errors["equipment"] = "Please select at least one equipment option"
    elif step == STEP_MUSCLE_GROUPS:
        if not prefs.muscle_groups:
            errors["muscle_groups"] = "Please select at least one muscle group"
    elif step == STEP_GOALS:
        if not prefs.goal:
            errors["goal"] = "Please select a fitness goal"
        if not prefs.workout_type:
            errors["workout_type"] = "Please select a workout type"
        if not prefs.difficulty:
            errors["difficulty"] = "Please select a difficulty level"
    return errors


def _advance(state: WizardState, prefs: Preferences) -> WizardState:
    """Move one step forward if the current step validates, else stay put."""
    errors = validate_step(state.step, prefs)
    if errors:
        return replace(state, preferences=prefs, errors=errors)
    return replace(state, preferences=prefs, errors={}, step=state.step + 1)


def _clear_error(errors: dict, name: str) -> dict:
    return {k: v for k, v in errors.items() if k != name}


# ─────────────────────────────────────────────
# Step Transitions
# ─────────────────────────────────────────────

def select_gender(state: WizardState, gender: str) -> WizardState:
    prefs = replace(state.preferences, gender=gender)
    return replace(state, preferences=prefs, step=STEP_BASIC_INFO)


def submit_basic_info(state: WizardState, age: str, weight: str, duration: int) -> WizardState:
    duration = min(MAX_DURATION, max(MIN_DURATION, int(duration)))
    prefs = replace(state.preferences, age=str(age), weight=str(weight), duration=duration)
    return _advance(replace(state, step=STEP_BASIC_INFO), prefs)


def toggle_equipment(state: WizardState, tag: str, checked: bool) -> WizardState:
    tag = tag.lower()
    current = [eq for eq in state.preferences.equipment if eq != tag]
    if checked:
        current.append(tag)
    prefs = replace(state.preferences, equipment=tuple(current))
    return replace(state, preferences=prefs, errors=_clear_error(state.errors, "equipment"))


def select_all_equipment(state: WizardState, checked: bool) -> WizardState:
    equipment = tuple(eq.lower() for eq in EQUIPMENT_OPTIONS) if checked else ()
    prefs = replace(state.preferences, equipment=equipment)
    return replace(state, preferences=prefs, errors=_clear_error(state.errors, "equipment"))


def submit_equipment(state: WizardState, equipment=None) -> WizardState:
    prefs = state.preferences
    if equipment is not None:
        prefs = replace(prefs, equipment=tuple(eq.lower() for eq in equipment))
    return _advance(replace(state, step=STEP_EQUIPMENT), prefs)


def toggle_muscle_group(state: WizardState, group: str) -> WizardState:
    """Add or remove one group. Picking a specific group replaces "all"."""
    groups = [g for g in state.preferences.muscle_groups if g != ALL]
    if group in groups:
        groups.remove(group)
    else:
        groups.append(group)
    prefs = replace(state.preferences, muscle_groups=tuple(groups))
    return replace(state, preferences=prefs, errors=_clear_error(state.errors, "muscle_groups"))


def select_all_muscle_groups(state: WizardState) -> WizardState:
    prefs = replace(state.preferences, muscle_groups=(ALL,))
    return replace(state, preferences=prefs, errors=_clear_error(state.errors, "muscle_groups"))


def muscle_group_for_body_part(body_part: str) -> Optional[str]:
    for group, parts in BODY_PART_GROUPS.items():
        if body_part in parts:
            return group
    return None


def is_body_part_selected(prefs: Preferences, body_part: str) -> bool:
    return any(
        body_part in parts and group in prefs.muscle_groups
        for group, parts in BODY_PART_GROUPS.items()
    )


def select_body_part(state: WizardState, body_part: str) -> WizardState:
    """Clicking a body part toggles the muscle group it belongs to."""
    group = muscle_group_for_body_part(body_part)
    if group is None:
        return state
    return toggle_muscle_group(state, group)


def submit_muscle_groups(state: WizardState, muscle_groups=None) -> WizardState:
    prefs = state.preferences
    if muscle_groups is not None:
        prefs = replace(prefs, muscle_groups=tuple(muscle_groups))
    return _advance(replace(state, step=STEP_MUSCLE_GROUPS), prefs)


def submit_goals(state: WizardState, catalog: dict, goal: str,
                 workout_type: str, difficulty: str) -> WizardState:
    """Last input step: validate, then build the plan and show it."""
    prefs = replace(state.preferences, goal=goal, workout_type=workout_type,
                    difficulty=difficulty)
    errors = validate_step(STEP_GOALS, prefs)
    if errors:
        return replace(state, step=STEP_GOALS, preferences=prefs, errors=errors)
    return WizardState(step=STEP_PLAN, preferences=prefs,
                       plan=generate_plan(catalog, prefs))


def go_back(state: WizardState) -> WizardState:
    return replace(state, step=max(STEP_GENDER, state.step - 1), errors={})


def start_feedback(state: WizardState) -> WizardState:
    return replace(state, step=STEP_FEEDBACK, errors={})


def submit_feedback(state: WizardState, catalog: dict, satisfaction: str,
                    feedback: str) -> WizardState:
    """
    An unsatisfied rating refines the preferences from the feedback text and
    shows a regenerated plan; any other rating finishes the wizard.
    """
    if not wants_new_plan(satisfaction):
        return replace(state, step=STEP_THANKS, errors={})
    prefs, plan = regenerate_from_feedback(catalog, state.preferences, feedback)
    return WizardState(step=STEP_PLAN, preferences=prefs, plan=plan)


def load_saved_plan(state: WizardState, saved) -> WizardState:
    """Restore a saved plan together with the preferences that built it."""
    return WizardState(step=STEP_PLAN, preferences=saved.preferences, plan=saved.plan)


def restart() -> WizardState:
    return WizardState()
