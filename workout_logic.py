"""
workout_logic.py — The Workout Planner Brain
Data models, catalog lookup, plan generator, and feedback refiner.
"""

import json
import logging
import re
from dataclasses import dataclass, field, asdict, replace
from typing import Optional

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────
# Data Models
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Exercise:
    name: str
    sets: Optional[int] = None
    reps: Optional[str] = None        # "15" or a range like "10-12"
    duration: Optional[str] = None    # e.g. "30 sec", used instead of reps
    rest: Optional[str] = None        # display only
    equipment: tuple[str, ...] = ()   # empty = no equipment needed
    muscle_group: Optional[str] = None
    instructions: Optional[str] = None

    def to_dict(self):
        data = asdict(self)
        data["equipment"] = list(self.equipment)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        return cls(
            name=data["name"],
            sets=data.get("sets"),
            reps=data.get("reps"),
            duration=data.get("duration"),
            rest=data.get("rest"),
            equipment=tuple(data.get("equipment") or ()),
            muscle_group=data.get("muscle_group"),
            instructions=data.get("instructions"),
        )


@dataclass(frozen=True)
class Preferences:
    gender: str = ""
    age: str = ""
    weight: str = ""
    duration: int = 30
    equipment: tuple[str, ...] = ()
    muscle_groups: tuple[str, ...] = ()
    goal: str = ""
    workout_type: str = ""
    difficulty: str = ""

    def to_dict(self):
        data = asdict(self)
        data["equipment"] = list(self.equipment)
        data["muscle_groups"] = list(self.muscle_groups)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Preferences":
        return cls(
            gender=data.get("gender", ""),
            age=str(data.get("age", "")),
            weight=str(data.get("weight", "")),
            duration=int(data.get("duration", 30)),
            equipment=tuple(data.get("equipment") or ()),
            muscle_groups=tuple(data.get("muscle_groups") or ()),
            goal=data.get("goal", ""),
            workout_type=data.get("workout_type", ""),
            difficulty=data.get("difficulty", ""),
        )


@dataclass
class Plan:
    exercises: list[Exercise] = field(default_factory=list)
    duration: int = 30
    workout_type: str = ""
    goal: str = ""
    difficulty: str = ""
    gender: str = ""

    def to_dict(self):
        return {
            "exercises": [ex.to_dict() for ex in self.exercises],
            "duration": self.duration,
            "workout_type": self.workout_type,
            "goal": self.goal,
            "difficulty": self.difficulty,
            "gender": self.gender,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Plan":
        return cls(
            exercises=[Exercise.from_dict(ex) for ex in data.get("exercises", [])],
            duration=int(data.get("duration", 30)),
            workout_type=data.get("workout_type", ""),
            goal=data.get("goal", ""),
            difficulty=data.get("difficulty", ""),
            gender=data.get("gender", ""),
        )


# ─────────────────────────────────────────────
# Options
# ─────────────────────────────────────────────

GOALS = ["strength", "cardio", "flexibility", "hypertrophy", "endurance"]
WORKOUT_TYPES = ["full-body", "upper-body", "lower-body", "push", "pull", "split"]
DIFFICULTIES = ["beginner", "intermediate", "advanced"]
MUSCLE_GROUPS = [
    "Upper Body Push", "Upper Body Pull", "Lower Body Push", "Lower Body Pull",
    "Core", "Arms", "Shoulders",
]
EQUIPMENT_OPTIONS = [
    "Barbells", "Dumbbells", "Bodyweight", "Machine", "Kettlebells", "Cables",
    "Bands", "Medicine Ball", "Resistance Bands", "TRX", "Foam Roller", "Yoga Mat",
]
SATISFACTION_LEVELS = {
    "very-satisfied": "Very satisfied",
    "satisfied": "Satisfied",
    "neutral": "Neutral",
    "unsatisfied": "Unsatisfied (generate a new plan)",
}
ALL = "all"

MIN_DURATION = 15
MAX_DURATION = 90


# ─────────────────────────────────────────────
# Generator Engine
# ─────────────────────────────────────────────

MIN_EXERCISES = 3
PADDED_LENGTH = 5
DIFFICULTY_CAPS = {"beginner": 5, "intermediate": 6, "advanced": 7}
DEFAULT_CAP = 7

# Range-rep shift and set delta per difficulty
DIFFICULTY_ADJUSTMENTS = {
    "beginner": (-1, -2),
    "advanced": (1, 2),
}
MIN_BEGINNER_SETS = 2
MIN_REPS = 1

GENERIC_EXERCISES = (
    Exercise(
        "Push-ups", sets=3, reps="10-12", rest="1 min",
        equipment=("bodyweight",), muscle_group="Upper Body Push",
        instructions="Start in a plank position with hands shoulder-width apart. "
                     "Lower your body until your chest nearly touches the floor, "
                     "then push back up.",
    ),
    Exercise(
        "Bodyweight Squats", sets=3, reps="15", rest="1 min",
        equipment=("bodyweight",), muscle_group="Lower Body Push",
        instructions="Stand with feet shoulder-width apart. Lower your body by "
                     "bending your knees and pushing your hips back, as if sitting "
                     "in a chair. Return to standing position.",
    ),
    Exercise(
        "Plank", sets=3, duration="30 sec", rest="30 sec",
        equipment=("bodyweight",), muscle_group="Core",
        instructions="Start in a push-up position, but with your weight on your "
                     "forearms. Keep your body in a straight line from head to "
                     "heels, engaging your core muscles.",
    ),
)

INSTRUCTION_TEMPLATE = (
    "Perform {name} with proper form, focusing on controlled movements and "
    "breathing. Start with a lighter weight to master the technique before "
    "increasing intensity."
)

_REP_RANGE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def lookup_exercises(catalog: dict, goal: str, workout_type: str) -> Optional[tuple]:
    """Return the ordered exercises for a (goal, type) bucket, or None."""
    bucket = catalog.get(goal)
    if bucket is None:
        return None
    return bucket.get(workout_type)


def filter_by_equipment(exercises: list[Exercise], equipment) -> list[Exercise]:
    """Keep exercises the user can do. Empty selection or 'all' keeps everything."""
    if not equipment or ALL in equipment:
        return list(exercises)
    available = {eq.lower() for eq in equipment}
    return [
        ex for ex in exercises
        if not ex.equipment or any(eq.lower() in available for eq in ex.equipment)
    ]


def filter_by_muscle_groups(exercises: list[Exercise], muscle_groups) -> list[Exercise]:
    """Keep exercises for the chosen groups, plus untagged ones."""
    if not muscle_groups or ALL in muscle_groups:
        return list(exercises)
    return [
        ex for ex in exercises
        if not ex.muscle_group or ex.muscle_group in muscle_groups
    ]


def shift_rep_range(reps: Optional[str], delta: int) -> Optional[str]:
    """
    Shift both bounds of a "min-max" rep range by `delta`.
    Fixed counts and anything non-numeric come back unchanged. Bounds never
    drop below MIN_REPS.
    """
    if not reps:
        return reps
    match = _REP_RANGE.match(reps)
    if not match:
        return reps
    low = max(MIN_REPS, int(match.group(1)) + delta)
    high = max(low, int(match.group(2)) + delta)
    return f"{low}-{high}"


def adjust_for_difficulty(exercise: Exercise, difficulty: str) -> Exercise:
    """Return a copy of `exercise` with sets/reps scaled for the difficulty."""
    if difficulty not in DIFFICULTY_ADJUSTMENTS:
        return exercise
    set_delta, rep_delta = DIFFICULTY_ADJUSTMENTS[difficulty]

    sets = exercise.sets
    if sets:
        sets = sets + set_delta
        if difficulty == "beginner":
            sets = max(MIN_BEGINNER_SETS, sets)

    return replace(exercise, sets=sets, reps=shift_rep_range(exercise.reps, rep_delta))


def pad_with_generic(exercises: list[Exercise]) -> list[Exercise]:
    """Top up a short list from the bodyweight fallbacks."""
    if len(exercises) >= MIN_EXERCISES:
        return exercises
    needed = PADDED_LENGTH - len(exercises)
    return exercises + list(GENERIC_EXERCISES[:needed])


def with_instructions(exercise: Exercise) -> Exercise:
    if exercise.instructions:
        return exercise
    return replace(exercise, instructions=INSTRUCTION_TEMPLATE.format(name=exercise.name))


def exercise_cap(difficulty: str) -> int:
    return DIFFICULTY_CAPS.get(difficulty, DEFAULT_CAP)


def generate_plan(catalog: dict, prefs: Preferences) -> Plan:
    """
    Build a plan from the catalog bucket for the user's goal and workout type.

    Stages run in order: lookup, equipment filter, muscle-group filter,
    difficulty adjustment, generic padding, instruction synthesis, truncation.
    Missing buckets or empty filter results fall through to the padding stage.
    The catalog is never modified.
    """
    candidates = list(lookup_exercises(catalog, prefs.goal, prefs.workout_type) or ())
    if not candidates:
        logger.info("No catalog exercises for goal=%s type=%s", prefs.goal, prefs.workout_type)

    candidates = filter_by_equipment(candidates, prefs.equipment)
    candidates = filter_by_muscle_groups(candidates, prefs.muscle_groups)
    candidates = [adjust_for_difficulty(ex, prefs.difficulty) for ex in candidates]
    candidates = pad_with_generic(candidates)
    candidates = [with_instructions(ex) for ex in candidates]
    exercises = candidates[:exercise_cap(prefs.difficulty)]

    logger.debug("Generated %d exercises for %s/%s (%s)",
                 len(exercises), prefs.goal, prefs.workout_type, prefs.difficulty)

    return Plan(
        exercises=exercises,
        duration=prefs.duration,
        workout_type=prefs.workout_type,
        goal=prefs.goal,
        difficulty=prefs.difficulty,
        gender=prefs.gender,
    )


# ─────────────────────────────────────────────
# Feedback Refiner
# ─────────────────────────────────────────────

HARDER_PHRASES = ("too hard", "difficult")
EASIER_PHRASES = ("too easy",)
DURATION_STEP = 10

# Keyword → muscle group, checked in this order
MUSCLE_KEYWORDS = {
    "arms": "Arms",
    "chest": "Upper Body Push",
    "back": "Upper Body Pull",
    "legs": "Lower Body Push",
    "shoulders": "Shoulders",
    "core": "Core",
    "abs": "Core",
}

# Keywords matched as whole words; plain substring for the rest
WORD_KEYWORDS = {
    "legs": re.compile(r"\blegs?\b"),
}


def mentions(text: str, keyword: str) -> bool:
    pattern = WORD_KEYWORDS.get(keyword)
    if pattern is not None:
        return pattern.search(text) is not None
    return keyword in text


def refine_preferences(prefs: Preferences, feedback: str) -> Preferences:
    """
    Nudge preferences from free-text feedback.

    "too hard"/"difficult" beats "too easy"; "too long" beats "too short".
    Body-part keywords only ever add muscle groups. Returns a new record.
    """
    text = (feedback or "").lower()
    difficulty = prefs.difficulty
    duration = prefs.duration

    if any(phrase in text for phrase in HARDER_PHRASES):
        difficulty = "beginner"
    elif any(phrase in text for phrase in EASIER_PHRASES):
        difficulty = "advanced"

    if "too long" in text:
        duration = max(MIN_DURATION, prefs.duration - DURATION_STEP)
    elif "too short" in text:
        duration = prefs.duration + DURATION_STEP

    muscle_groups = list(prefs.muscle_groups)
    for keyword, group in MUSCLE_KEYWORDS.items():
        if mentions(text, keyword) and group not in muscle_groups:
            muscle_groups.append(group)

    return replace(
        prefs,
        difficulty=difficulty,
        duration=duration,
        muscle_groups=tuple(muscle_groups),
    )


def wants_new_plan(satisfaction: str) -> bool:
    """Only an unsatisfied rating sends the user back through the generator."""
    return satisfaction == "unsatisfied"


def regenerate_from_feedback(catalog: dict, prefs: Preferences,
                             feedback: str) -> tuple[Preferences, Plan]:
    """Refine the preferences and build a fresh plan from them."""
    refined = refine_preferences(prefs, feedback)
    if refined != prefs:
        logger.info("Feedback adjusted preferences: difficulty=%s duration=%s groups=%s",
                    refined.difficulty, refined.duration, list(refined.muscle_groups))
    return refined, generate_plan(catalog, refined)


# ─────────────────────────────────────────────
# Presentation Helpers
# ─────────────────────────────────────────────

BASE_TIPS = [
    "Focus on proper form rather than speed",
    "Breathe out during the exertion phase",
    "Keep movements controlled and deliberate",
]


def exercise_tips(exercise: Exercise) -> list[str]:
    """Guidance bullets shown alongside an exercise's instructions."""
    tips = BASE_TIPS[:]
    if exercise.muscle_group == "Core":
        tips.append("Engage your core throughout the entire movement")
    if "barbells" in exercise.equipment:
        tips.append("Start with lighter weights to master the technique")
    return tips


def volume_label(exercise: Exercise) -> str:
    """'3 sets × 10-12 reps', '3 sets × 30 sec', etc."""
    parts = []
    if exercise.sets:
        parts.append(f"{exercise.sets} sets")
    if exercise.reps:
        parts.append(f"{exercise.reps} reps")
    elif exercise.duration:
        parts.append(exercise.duration)
    return " × ".join(parts)


def humanize(value: str) -> str:
    """'full-body' → 'Full body'."""
    if not value:
        return ""
    return value[0].upper() + value[1:].replace("-", " ")


def plan_title(plan: Plan) -> str:
    return f"{humanize(plan.goal)} - {humanize(plan.workout_type)}"


def plan_to_json(plan: Plan) -> str:
    """Serialize a plan for local storage."""
    return json.dumps(plan.to_dict(), default=str)


def json_to_plan(json_str: str) -> Plan:
    """Deserialize a plan from local storage."""
    return Plan.from_dict(json.loads(json_str))
