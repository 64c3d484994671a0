"""
plan_store.py — Saved workout plans
A single named slot in a local key-value file, holding a JSON array of
saved plans. Every save/delete reads the whole slot and rewrites it.
"""

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from workout_logic import Plan, Preferences, humanize, plan_title

logger = logging.getLogger(__name__)

SLOT_NAME = "savedWorkoutPlans"
DEFAULT_STORE_PATH = Path.home() / ".workout_planner" / "local_storage.json"

HISTORY_COLUMNS = ["ID", "Saved On", "Plan", "Duration", "Difficulty", "Exercises"]


class PlanStoreError(Exception):
    """Raised when the saved-plan slot cannot be written."""


@dataclass
class SavedPlan:
    id: str
    date: str
    plan: Plan
    preferences: Preferences

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "plan": self.plan.to_dict(),
            "preferences": self.preferences.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SavedPlan":
        return cls(
            id=str(data["id"]),
            date=data.get("date", ""),
            plan=Plan.from_dict(data["plan"]),
            preferences=Preferences.from_dict(data.get("preferences", {})),
        )


# ─────────────────────────────────────────────
# Key-Value Storage
# ─────────────────────────────────────────────

class LocalStorage:
    """String key → string value, kept as one JSON object on disk."""

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str):
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as e:
            raise PlanStoreError(f"Could not write {self.path}: {e}") from e


# ─────────────────────────────────────────────
# Plan List Operations
# ─────────────────────────────────────────────

def parse_saved_plans(raw: Optional[str]) -> list[SavedPlan]:
    """Decode the slot contents. Anything malformed reads as an empty list."""
    if not raw:
        return []
    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Saved plans slot is not valid JSON, starting empty: %s", e)
        return []
    if not isinstance(records, list):
        logger.warning("Saved plans slot holds %s, expected a list", type(records).__name__)
        return []
    try:
        return [SavedPlan.from_dict(record) for record in records]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Saved plans slot has a malformed entry, starting empty: %s", e)
        return []


def remove_plan(plans: list[SavedPlan], plan_id: str) -> list[SavedPlan]:
    """Drop the entry whose id matches; everything else keeps its order."""
    return [p for p in plans if p.id != plan_id]


def new_plan_id(existing: list[SavedPlan], now: float) -> str:
    """Millisecond timestamp, bumped forward if it collides with a saved id."""
    taken = {p.id for p in existing}
    stamp = int(now * 1000)
    while str(stamp) in taken:
        stamp += 1
    return str(stamp)


def history_frame(plans: list[SavedPlan]) -> pd.DataFrame:
    """Table of saved plans for display, newest last as stored."""
    rows = [
        {
            "ID": p.id,
            "Saved On": p.date,
            "Plan": plan_title(p.plan),
            "Duration": p.plan.duration,
            "Difficulty": humanize(p.plan.difficulty),
            "Exercises": len(p.plan.exercises),
        }
        for p in plans
    ]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


# ─────────────────────────────────────────────
# Store
# ─────────────────────────────────────────────

class PlanStore:
    def __init__(self, storage: LocalStorage, slot: str = SLOT_NAME,
                 clock: Callable[[], float] = time.time):
        self.storage = storage
        self.slot = slot
        self.clock = clock

    def load(self) -> list[SavedPlan]:
        return parse_saved_plans(self.storage.get_item(self.slot))

    def _write(self, plans: list[SavedPlan]):
        self.storage.set_item(self.slot, json.dumps([p.to_dict() for p in plans], default=str))

    def save(self, plan: Plan, preferences: Preferences) -> SavedPlan:
        """Append a plan with a fresh id and today's date."""
        plans = self.load()
        now = self.clock()
        saved = SavedPlan(
            id=new_plan_id(plans, now),
            date=datetime.fromtimestamp(now).strftime("%Y-%m-%d"),
            plan=plan,
            preferences=preferences,
        )
        self._write(plans + [saved])
        logger.info("Saved plan %s (%s)", saved.id, plan_title(plan))
        return saved

    def delete(self, plan_id: str) -> list[SavedPlan]:
        """Remove one plan by id and return what is left."""
        plans = self.load()
        remaining = remove_plan(plans, plan_id)
        if len(remaining) == len(plans):
            logger.info("No saved plan with id %s", plan_id)
            return plans
        self._write(remaining)
        logger.info("Deleted plan %s", plan_id)
        return remaining

    def get(self, plan_id: str) -> Optional[SavedPlan]:
        for p in self.load():
            if p.id == plan_id:
                return p
        return None

    def history(self) -> pd.DataFrame:
        return history_frame(self.load())
