"""Tests for saved-plan persistence."""

import json
from datetime import datetime

import pytest

from plan_store import (
    HISTORY_COLUMNS, SLOT_NAME, LocalStorage, PlanStore, PlanStoreError, SavedPlan,
    new_plan_id, parse_saved_plans, remove_plan,
)
from workout_logic import generate_plan

NOW = 1_700_000_000.0


class FakeClock:
    """Returns NOW, then NOW + step, NOW + 2 * step, ..."""

    def __init__(self, start=NOW, step=0.0):
        self.current = start
        self.step = step

    def __call__(self):
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def store(storage) -> PlanStore:
    return PlanStore(storage, clock=FakeClock(step=1.0))


@pytest.fixture
def plan_and_prefs(core_catalog, make_prefs):
    prefs = make_prefs(difficulty="beginner")
    return generate_plan(core_catalog, prefs), prefs


class TestLocalStorage:
    """Tests for the key-value file."""

    def test_missing_file_reads_as_empty(self, storage):
        assert storage.get_item(SLOT_NAME) is None

    def test_set_then_get(self, storage):
        storage.set_item("theme", "dark")
        assert storage.get_item("theme") == "dark"

    def test_other_keys_survive_a_write(self, storage):
        storage.set_item("theme", "dark")
        storage.set_item(SLOT_NAME, "[]")
        assert storage.get_item("theme") == "dark"

    def test_unreadable_file_reads_as_empty(self, storage):
        storage.path.write_text("{not json", encoding="utf-8")
        assert storage.get_item(SLOT_NAME) is None

    def test_write_failure_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        storage = LocalStorage(blocker / "local_storage.json")
        with pytest.raises(PlanStoreError):
            storage.set_item(SLOT_NAME, "[]")


class TestParseSavedPlans:
    """Malformed slot contents read as an empty list."""

    @pytest.mark.parametrize("raw", [
        None,
        "",
        "not json",
        '{"id": "1"}',
        '[{"date": "2024-01-01"}]',
        '["just a string"]',
    ])
    def test_malformed_slot_is_empty(self, raw):
        assert parse_saved_plans(raw) == []


class TestPlanStore:
    """Tests for saving, loading and deleting plans."""

    def test_empty_store_loads_nothing(self, store):
        assert store.load() == []

    def test_save_appends_with_time_derived_id(self, store, plan_and_prefs):
        plan, prefs = plan_and_prefs
        saved = store.save(plan, prefs)

        assert saved.id == "1700000000000"
        assert saved.date == datetime.fromtimestamp(NOW).strftime("%Y-%m-%d")
        assert store.load() == [saved]

    def test_saved_plan_round_trips(self, store, plan_and_prefs):
        plan, prefs = plan_and_prefs
        store.save(plan, prefs)

        loaded = store.load()[0]
        assert loaded.plan == plan
        assert loaded.preferences == prefs

    def test_ids_stay_unique_within_one_millisecond(self, storage, plan_and_prefs):
        store = PlanStore(storage, clock=FakeClock(step=0.0))
        plan, prefs = plan_and_prefs
        first = store.save(plan, prefs)
        second = store.save(plan, prefs)
        assert first.id != second.id
        assert second.id == "1700000000001"

    def test_delete_removes_only_that_plan(self, store, plan_and_prefs):
        plan, prefs = plan_and_prefs
        a, b, c = (store.save(plan, prefs) for _ in range(3))

        remaining = store.delete(b.id)

        assert [p.id for p in remaining] == [a.id, c.id]
        assert [p.id for p in store.load()] == [a.id, c.id]

    def test_delete_unknown_id_changes_nothing(self, store, plan_and_prefs):
        plan, prefs = plan_and_prefs
        saved = store.save(plan, prefs)
        assert store.delete("missing") == [saved]
        assert store.load() == [saved]

    def test_get_by_id(self, store, plan_and_prefs):
        plan, prefs = plan_and_prefs
        saved = store.save(plan, prefs)
        assert store.get(saved.id) == saved
        assert store.get("missing") is None

    def test_slot_is_a_json_array(self, store, storage, plan_and_prefs):
        plan, prefs = plan_and_prefs
        store.save(plan, prefs)
        records = json.loads(storage.get_item(SLOT_NAME))
        assert isinstance(records, list)
        assert set(records[0]) == {"id", "date", "plan", "preferences"}

    def test_malformed_slot_is_overwritten_on_save(self, store, storage, plan_and_prefs):
        storage.set_item(SLOT_NAME, "garbage")
        plan, prefs = plan_and_prefs
        saved = store.save(plan, prefs)
        assert store.load() == [saved]

    def test_history_frame(self, store, plan_and_prefs):
        plan, prefs = plan_and_prefs
        store.save(plan, prefs)

        df = store.history()

        assert list(df.columns) == HISTORY_COLUMNS
        assert df.iloc[0]["Plan"] == "Strength - Full body"
        assert df.iloc[0]["Difficulty"] == "Beginner"
        assert df.iloc[0]["Exercises"] == len(plan.exercises)

    def test_history_frame_empty(self, store):
        df = store.history()
        assert df.empty
        assert list(df.columns) == HISTORY_COLUMNS


class TestPlanListHelpers:
    """Tests for the pure list helpers."""

    def test_remove_plan_keeps_order(self, plan_and_prefs):
        plan, prefs = plan_and_prefs
        plans = [SavedPlan(str(i), "2024-01-01", plan, prefs) for i in range(4)]
        assert [p.id for p in remove_plan(plans, "2")] == ["0", "1", "3"]

    def test_new_plan_id_skips_taken_ids(self, plan_and_prefs):
        plan, prefs = plan_and_prefs
        existing = [SavedPlan("5000", "", plan, prefs), SavedPlan("5001", "", plan, prefs)]
        assert new_plan_id(existing, 5.0) == "5002"
