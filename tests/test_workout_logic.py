"""Tests for catalog lookup and the plan generator."""

import pytest

from exercise_catalog import CATALOG
from workout_logic import (
    DIFFICULTIES, GENERIC_EXERCISES, GOALS, INSTRUCTION_TEMPLATE, WORKOUT_TYPES,
    Exercise, Plan,
    adjust_for_difficulty, exercise_cap, exercise_tips, filter_by_equipment,
    filter_by_muscle_groups, generate_plan, humanize, json_to_plan, lookup_exercises,
    pad_with_generic, plan_title, plan_to_json, shift_rep_range, volume_label,
)

GENERIC_NAMES = ["Push-ups", "Bodyweight Squats", "Plank"]


class TestLookup:
    """Tests for catalog bucket lookup."""

    def test_existing_bucket_is_returned_in_order(self, core_catalog):
        exercises = lookup_exercises(core_catalog, "strength", "full-body")
        assert [ex.name for ex in exercises][:2] == ["Barbell Squat", "Dead Bug"]

    def test_missing_goal_returns_none(self, core_catalog):
        assert lookup_exercises(core_catalog, "cardio", "full-body") is None

    def test_missing_type_returns_none(self, core_catalog):
        assert lookup_exercises(core_catalog, "strength", "push") is None


class TestFilters:
    """Tests for the equipment and muscle-group filters."""

    def test_all_equipment_is_a_no_op(self, core_catalog):
        bucket = core_catalog["strength"]["full-body"]
        assert filter_by_equipment(bucket, ("all",)) == list(bucket)

    def test_empty_equipment_is_a_no_op(self, core_catalog):
        bucket = core_catalog["strength"]["full-body"]
        assert filter_by_equipment(bucket, ()) == list(bucket)

    def test_equipment_compare_ignores_case(self):
        exercises = [
            Exercise("Curl", equipment=("DUMBBELLS",)),
            Exercise("Squat", equipment=("barbells",)),
        ]
        kept = filter_by_equipment(exercises, ("Dumbbells",))
        assert [ex.name for ex in kept] == ["Curl"]

    def test_equipment_free_exercises_always_pass(self):
        exercises = [Exercise("Walk"), Exercise("Squat", equipment=("barbells",))]
        kept = filter_by_equipment(exercises, ("kettlebells",))
        assert [ex.name for ex in kept] == ["Walk"]

    def test_any_matching_tag_is_enough(self):
        exercises = [Exercise("Row", equipment=("barbells", "dumbbells"))]
        assert filter_by_equipment(exercises, ("dumbbells",)) == exercises

    def test_all_muscle_groups_is_a_no_op(self, core_catalog):
        bucket = core_catalog["strength"]["full-body"]
        assert filter_by_muscle_groups(bucket, ("all",)) == list(bucket)

    def test_untagged_exercises_pass_muscle_filter(self):
        exercises = [Exercise("Burpee"), Exercise("Curl", muscle_group="Arms")]
        kept = filter_by_muscle_groups(exercises, ("Core",))
        assert [ex.name for ex in kept] == ["Burpee"]


class TestDifficultyAdjustment:
    """Tests for sets/reps scaling."""

    def test_beginner_drops_a_set_and_two_reps(self):
        ex = Exercise("Row", sets=3, reps="10-12")
        adjusted = adjust_for_difficulty(ex, "beginner")
        assert adjusted.sets == 2
        assert adjusted.reps == "8-10"

    def test_advanced_adds_a_set_and_two_reps(self):
        ex = Exercise("Row", sets=3, reps="10-12")
        adjusted = adjust_for_difficulty(ex, "advanced")
        assert adjusted.sets == 4
        assert adjusted.reps == "12-14"

    def test_intermediate_is_unchanged(self):
        ex = Exercise("Row", sets=3, reps="10-12")
        assert adjust_for_difficulty(ex, "intermediate") == ex

    def test_beginner_sets_never_below_two(self):
        ex = Exercise("Row", sets=2, reps="10-12")
        assert adjust_for_difficulty(ex, "beginner").sets == 2

    def test_fixed_rep_count_is_left_alone(self):
        ex = Exercise("Squat", sets=3, reps="15")
        assert adjust_for_difficulty(ex, "advanced").reps == "15"

    def test_missing_sets_stay_missing(self):
        ex = Exercise("Plank", duration="30 sec")
        adjusted = adjust_for_difficulty(ex, "advanced")
        assert adjusted.sets is None
        assert adjusted.duration == "30 sec"

    def test_original_exercise_is_not_modified(self):
        ex = Exercise("Row", sets=3, reps="10-12")
        adjust_for_difficulty(ex, "beginner")
        assert ex.sets == 3
        assert ex.reps == "10-12"

    def test_beginner_reps_are_clamped_at_one(self):
        """Deliberate deviation: unclamped, "2-4" would become "0-2"."""
        assert shift_rep_range("2-4", -2) == "1-2"
        assert shift_rep_range("1-1", -2) == "1-1"

    def test_non_numeric_reps_pass_through(self):
        assert shift_rep_range("AMRAP", 2) == "AMRAP"
        assert shift_rep_range(None, 2) is None


class TestPadding:
    """Tests for the generic bodyweight fallback."""

    def test_empty_list_gets_all_three_fallbacks(self):
        padded = pad_with_generic([])
        assert [ex.name for ex in padded] == GENERIC_NAMES

    def test_two_exercises_are_padded_to_five(self):
        start = [Exercise("A"), Exercise("B")]
        padded = pad_with_generic(start)
        assert [ex.name for ex in padded] == ["A", "B"] + GENERIC_NAMES

    def test_three_exercises_are_not_padded(self):
        start = [Exercise("A"), Exercise("B"), Exercise("C")]
        assert pad_with_generic(start) == start


class TestGeneratePlan:
    """Tests for the full generation pipeline."""

    def test_missing_bucket_degrades_to_generic_plan(self, make_prefs):
        plan = generate_plan({}, make_prefs(goal="cardio", workout_type="pull"))
        assert [ex.name for ex in plan.exercises] == GENERIC_NAMES

    def test_core_bodyweight_scenario(self, core_catalog, make_prefs):
        """Deliberately pads to five: two survivors get all three fallbacks appended."""
        prefs = make_prefs(
            equipment=("bodyweight",),
            muscle_groups=("Core",),
            difficulty="beginner",
        )
        plan = generate_plan(core_catalog, prefs)

        names = [ex.name for ex in plan.exercises]
        assert names[:3] == ["Dead Bug", "Hollow Hold", "Push-ups"]
        assert names == ["Dead Bug", "Hollow Hold"] + GENERIC_NAMES
        assert len(plan.exercises) <= exercise_cap("beginner")
        assert plan.exercises[0].sets == 2
        assert plan.exercises[0].reps == "8-10"

    @pytest.mark.parametrize("difficulty,cap", [
        ("beginner", 5),
        ("intermediate", 6),
        ("advanced", 7),
        ("", 7),
    ])
    def test_truncates_to_difficulty_cap(self, large_bucket, make_prefs, difficulty, cap):
        catalog = {"strength": {"full-body": large_bucket}}
        plan = generate_plan(catalog, make_prefs(difficulty=difficulty))
        assert [ex.name for ex in plan.exercises] == [f"Exercise {i}" for i in range(cap)]

    def test_missing_instructions_are_synthesized(self, core_catalog, make_prefs):
        plan = generate_plan(core_catalog, make_prefs())
        hollow = next(ex for ex in plan.exercises if ex.name == "Hollow Hold")
        assert hollow.instructions == INSTRUCTION_TEMPLATE.format(name="Hollow Hold")

    def test_existing_instructions_are_kept(self, core_catalog, make_prefs):
        plan = generate_plan(core_catalog, make_prefs())
        dead_bug = next(ex for ex in plan.exercises if ex.name == "Dead Bug")
        assert dead_bug.instructions == "Press the low back into the floor."

    def test_catalog_is_not_modified(self, core_catalog, make_prefs):
        before = list(core_catalog["strength"]["full-body"])
        generate_plan(core_catalog, make_prefs(difficulty="advanced"))
        assert list(core_catalog["strength"]["full-body"]) == before
        assert before[3].instructions is None

    def test_plan_echoes_preferences(self, core_catalog, make_prefs):
        prefs = make_prefs(duration=45, difficulty="advanced", gender="male")
        plan = generate_plan(core_catalog, prefs)
        assert plan.duration == 45
        assert plan.workout_type == "full-body"
        assert plan.goal == "strength"
        assert plan.difficulty == "advanced"
        assert plan.gender == "male"

    def test_generation_is_idempotent(self, core_catalog, make_prefs):
        prefs = make_prefs(difficulty="beginner", equipment=("dumbbells",))
        assert generate_plan(core_catalog, prefs) == generate_plan(core_catalog, prefs)

    def test_all_filters_keep_every_candidate(self, core_catalog, make_prefs):
        plan = generate_plan(core_catalog, make_prefs(difficulty="advanced"))
        assert len(plan.exercises) == 5


class TestBuiltInCatalog:
    """Plan invariants over every bucket of the shipped catalog."""

    @pytest.mark.parametrize("goal", GOALS)
    @pytest.mark.parametrize("workout_type", WORKOUT_TYPES)
    @pytest.mark.parametrize("difficulty", DIFFICULTIES)
    def test_plan_bounds_and_instructions(self, make_prefs, goal, workout_type, difficulty):
        for equipment, groups in [
            (("all",), ("all",)),
            (("bodyweight",), ("Core",)),
            (("machine", "cables"), ("Arms", "Shoulders")),
        ]:
            prefs = make_prefs(goal=goal, workout_type=workout_type, difficulty=difficulty,
                               equipment=equipment, muscle_groups=groups)
            plan = generate_plan(CATALOG, prefs)
            assert 3 <= len(plan.exercises) <= exercise_cap(difficulty)
            assert all(ex.instructions for ex in plan.exercises)

    def test_generic_fallbacks_have_instructions(self):
        assert all(ex.instructions for ex in GENERIC_EXERCISES)


class TestPresentationHelpers:
    """Tests for display helpers."""

    def test_core_exercise_gets_core_tip(self):
        tips = exercise_tips(Exercise("Plank", muscle_group="Core"))
        assert "Engage your core throughout the entire movement" in tips
        assert len(tips) == 4

    def test_barbell_exercise_gets_weight_tip(self):
        tips = exercise_tips(Exercise("Squat", equipment=("barbells",)))
        assert tips[-1] == "Start with lighter weights to master the technique"

    def test_volume_label(self):
        assert volume_label(Exercise("Row", sets=3, reps="10-12")) == "3 sets × 10-12 reps"
        assert volume_label(Exercise("Plank", sets=3, duration="30 sec")) == "3 sets × 30 sec"

    def test_plan_title(self):
        plan = Plan(goal="strength", workout_type="full-body")
        assert plan_title(plan) == "Strength - Full body"
        assert humanize("") == ""

    def test_plan_json_round_trip(self, core_catalog, make_prefs):
        plan = generate_plan(core_catalog, make_prefs())
        assert json_to_plan(plan_to_json(plan)) == plan
